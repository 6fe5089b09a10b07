"""Heuristic quality analysis for prompts."""

import re
from typing import List, Pattern

from ...core.types import AnalysisResult

SUGGEST_EXAMPLES = "Include 1–2 concrete examples"
SUGGEST_TONE = "Specify tone/style (e.g., professional, friendly)"
SUGGEST_FORMAT = "Define output format/constraints"
SUGGEST_AUDIENCE = "State the audience and goal"
SUGGEST_VAGUE = "Replace vague words with specifics"
SUGGEST_CONTEXT = "Add more context to clarify intent"


class PromptAnalyzer:
    """
    Scores a prompt from 1 to 10 and suggests what is missing.

    Uses keyword heuristics only - no LLM required. Suggestions come out
    in a fixed order and are capped at ``MAX_SUGGESTIONS``.
    """

    MAX_SUGGESTIONS = 4
    MIN_SCORE = 1
    MAX_SCORE = 10

    # Up to 3 points for length, one per 50 characters
    LENGTH_STEP = 50
    LENGTH_BONUS_CAP = 3
    SHORT_PROMPT = 40

    EXAMPLES: Pattern = re.compile(r"\bexamples?\b", re.IGNORECASE | re.ASCII)
    TONE: Pattern = re.compile(r"tone|style|voice", re.IGNORECASE)
    FORMAT: Pattern = re.compile(r"constraints?|format|length|steps?", re.IGNORECASE)
    AUDIENCE: Pattern = re.compile(r"audience|goal|purpose", re.IGNORECASE)
    VAGUE: Pattern = re.compile(r"\b(?:thing|stuff|make|do|good|nice)\b", re.IGNORECASE | re.ASCII)

    def analyze(self, prompt: str) -> AnalysisResult:
        """
        Analyze a prompt.

        Args:
            prompt: Raw prompt text (may be empty)

        Returns:
            AnalysisResult with score, percent and at most four suggestions
        """
        length = len(prompt.strip())
        score = 0
        suggestions: List[str] = []

        score += min(self.LENGTH_BONUS_CAP, length // self.LENGTH_STEP)

        if self.EXAMPLES.search(prompt):
            score += 2
        else:
            suggestions.append(SUGGEST_EXAMPLES)

        if self.TONE.search(prompt):
            score += 2
        else:
            suggestions.append(SUGGEST_TONE)

        if self.FORMAT.search(prompt):
            score += 2
        else:
            suggestions.append(SUGGEST_FORMAT)

        if self.AUDIENCE.search(prompt):
            score += 1
        else:
            suggestions.append(SUGGEST_AUDIENCE)

        if self.VAGUE.search(prompt):
            suggestions.append(SUGGEST_VAGUE)
        if length < self.SHORT_PROMPT:
            suggestions.append(SUGGEST_CONTEXT)

        score = max(self.MIN_SCORE, min(self.MAX_SCORE, score))
        # score is an integer, so score * 10 is exact
        percent = score * 100 // self.MAX_SCORE

        return AnalysisResult(
            score=score,
            percent=percent,
            suggestions=suggestions[:self.MAX_SUGGESTIONS]
        )


_default_analyzer = PromptAnalyzer()


def analyze(prompt: str) -> AnalysisResult:
    """Analyze a prompt with the default analyzer."""
    return _default_analyzer.analyze(prompt)
