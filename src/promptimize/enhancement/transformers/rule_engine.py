"""Rule-based transformation engine for prompt improvement."""

import logging
from dataclasses import dataclass, field
from typing import List, Callable, Dict, Any, Tuple

logger = logging.getLogger(__name__)


@dataclass
class TransformationRule:
    """A single conditional rewrite."""
    name: str
    description: str
    condition: Callable[[str], bool]
    transform: Callable[[str], str]
    tags: List[str] = field(default_factory=list)


class RuleEngine:
    """
    Deterministic engine applying an ordered list of rewrites.

    Each rule tests and rewrites the accumulated text, so a rule sees
    everything earlier rules inserted. Rules run in registration order.
    """

    def __init__(self):
        self.rules: List[TransformationRule] = []
        self._load_builtin_rules()

    def _load_builtin_rules(self) -> None:
        """Load built-in transformation rules."""

        self.rules.append(TransformationRule(
            name="add_detail_prefix",
            description="Ask for a detailed result",
            condition=lambda p: "detailed" not in p,
            transform=lambda p: "Create a detailed " + p,
            tags=["specificity"]
        ))

        # Only this check ignores case
        self.rules.append(TransformationRule(
            name="add_quality_expectation",
            description="State the expected output quality",
            condition=lambda p: "high quality" not in p.lower(),
            transform=lambda p: p + ", ensuring high quality output",
            tags=["quality"]
        ))

        self.rules.append(TransformationRule(
            name="add_style_guidance",
            description="Ask for a professional, engaging style",
            condition=lambda p: "style" not in p,
            transform=lambda p: p + ", maintaining a professional and engaging style",
            tags=["style"]
        ))

        self.rules.append(TransformationRule(
            name="add_output_format",
            description="Ask for a clear, well-structured format",
            condition=lambda p: "format" not in p,
            transform=lambda p: p + ". Present the information in a clear, well-structured format",
            tags=["structure"]
        ))

        # Substring match, so "examples" also counts
        self.rules.append(TransformationRule(
            name="add_examples_request",
            description="Ask for relevant examples",
            condition=lambda p: "example" not in p,
            transform=lambda p: p + ", including relevant examples where appropriate",
            tags=["examples"]
        ))

    def apply_rules(self, prompt: str) -> Tuple[str, List[str]]:
        """
        Apply rules in order to the prompt.

        Args:
            prompt: The prompt to transform

        Returns:
            Tuple of (transformed_prompt, list_of_applied_rule_names)
        """
        applied_rules = []
        current_prompt = prompt

        for rule in self.rules:
            if rule.condition(current_prompt):
                current_prompt = rule.transform(current_prompt)
                applied_rules.append(rule.name)
                logger.debug("Applied rule %s", rule.name)

        return current_prompt, applied_rules

    def add_rule(self, rule: TransformationRule) -> None:
        """Append a custom rule after the built-in ones."""
        self.rules.append(rule)

    def list_rules(self) -> List[Dict[str, Any]]:
        """List all rules with metadata."""
        return [
            {
                "name": r.name,
                "description": r.description,
                "order": i + 1,
                "tags": r.tags,
            }
            for i, r in enumerate(self.rules)
        ]
