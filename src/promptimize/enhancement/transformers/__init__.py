"""Prompt transformers."""

from .rule_engine import RuleEngine, TransformationRule

__all__ = [
    "RuleEngine",
    "TransformationRule",
]
