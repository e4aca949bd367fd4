"""API route modules."""
from ordquiz.routes import questions, scores

__all__ = ["questions", "scores"]
