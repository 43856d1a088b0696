"""Game session and training loop."""

from .session import GameSession, MissingAgentError, TrainingResult

__all__ = ["GameSession", "MissingAgentError", "TrainingResult"]
