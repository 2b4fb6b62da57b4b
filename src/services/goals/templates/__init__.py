from .terminal_template import TerminalReport

__all__ = ["TerminalReport"]
