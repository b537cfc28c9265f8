"""Dialogue module."""

from .agent import DialogueAgent, IDialogueAgent
from .engine import GLOBAL_COMMANDS, DialogueEngine, is_global_command
from .normalizer import NormalizedInput, normalize

__all__ = [
    "DialogueAgent",
    "IDialogueAgent",
    "DialogueEngine",
    "GLOBAL_COMMANDS",
    "is_global_command",
    "NormalizedInput",
    "normalize",
]
