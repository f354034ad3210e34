"""Expression calculator, function sampling for plots, and credit payment calculations."""

__version__ = "1.0.0"
__all__ = ["validation", "evaluator", "credit", "graph", "cli"]