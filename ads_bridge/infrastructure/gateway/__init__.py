"""Gateway access helpers."""

from .variable_scope import VariableScope, open_variable

__all__ = ["VariableScope", "open_variable"]
