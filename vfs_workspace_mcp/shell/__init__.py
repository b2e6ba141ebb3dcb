from .history import CommandHistory
from .interpreter import CommandInterpreter

__all__ = ["CommandHistory", "CommandInterpreter"]
