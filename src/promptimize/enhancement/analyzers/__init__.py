"""Prompt analyzers."""

from .quality_scorer import PromptAnalyzer, analyze

__all__ = [
    "PromptAnalyzer",
    "analyze",
]
