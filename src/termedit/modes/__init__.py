"""Mode manager and per-mode key dispatch."""

from .base_mode import Action, KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .command_mode import CommandMode
from .mode_manager import ModeManager

__all__ = [
    "Action",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "CommandMode",
    "ModeManager",
]
