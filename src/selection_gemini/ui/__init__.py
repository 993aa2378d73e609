"""UI layer - PySide6 presentation components."""

from .result_window import ResultWindow

__all__ = ["ResultWindow"]
