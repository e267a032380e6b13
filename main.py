"""
main.py
-------
Entry point: opens the window and runs the chase scene.
"""

import sys

from src.core.runtime.game_loop import GameLoop


def main():
    GameLoop().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
