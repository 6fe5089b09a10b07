"""Prompt improvement and analysis module."""

from .enhancer import (
    PromptEnhancer,
    ImprovementConfig,
    ImprovementResult,
    enhance,
)
from .latency import ImprovementTask
from .analyzers.quality_scorer import PromptAnalyzer, analyze
from .transformers.rule_engine import RuleEngine, TransformationRule

__all__ = [
    # Main orchestrator
    "PromptEnhancer",
    "ImprovementConfig",
    "ImprovementResult",
    "ImprovementTask",
    # Convenience functions
    "enhance",
    "analyze",
    # Analyzers
    "PromptAnalyzer",
    # Transformers
    "RuleEngine",
    "TransformationRule",
]
