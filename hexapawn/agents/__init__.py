"""Move-selecting agents."""

from .base import Agent, NoLegalMovesError, RandomAgent
from .menace import MenaceAgent, MenaceConfig

__all__ = ["Agent", "NoLegalMovesError", "RandomAgent", "MenaceAgent", "MenaceConfig"]
