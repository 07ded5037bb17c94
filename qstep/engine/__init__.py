"""Gate application engine."""

from .apply import GateEngine, apply_gate

__all__ = ["GateEngine", "apply_gate"]
