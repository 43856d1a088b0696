"""Evaluation helpers for Hexapawn agents."""

from .match import EvaluationResult, evaluate_agents

__all__ = ["EvaluationResult", "evaluate_agents"]
