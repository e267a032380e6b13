"""
Character exports.

Provides the character state, its state machine, and the movement
functions driven by the simulation clock.
"""

from src.entities.character.character_state import Pose, Facing, Intent, MOVE_INTENTS
from src.entities.character.character_core import CharacterState, CharacterStateMachine

__all__ = [
    'Pose',
    'Facing',
    'Intent',
    'MOVE_INTENTS',
    'CharacterState',
    'CharacterStateMachine',
]
