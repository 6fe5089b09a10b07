"""Main prompt improvement orchestrator."""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Optional, List, Tuple

from ..core.types import AnalysisResult, Chat
from ..core.exceptions import EmptyInputError, ImprovementInProgressError
from .analyzers.quality_scorer import PromptAnalyzer
from .transformers.rule_engine import RuleEngine
from .latency import ImprovementTask

logger = logging.getLogger(__name__)


@dataclass
class ImprovementConfig:
    """Configuration for prompt improvement."""
    delay: float = 1.5  # Simulated latency in seconds


@dataclass
class ImprovementResult:
    """Result from one improvement run."""
    original_prompt: str
    improved_prompt: str
    applied_rules: List[str] = field(default_factory=list)
    analysis: Optional[AnalysisResult] = None
    processing_time_ms: float = 0.0
    chat: Optional[Chat] = None  # Set once recorded in history


class PromptEnhancer:
    """
    Turns a raw prompt into an improved one.

    ``enhance`` is the pure rewrite; ``improve`` wraps it with the simulated
    latency, the single-flight guard and an analysis of the input.
    """

    def __init__(
        self,
        config: Optional[ImprovementConfig] = None,
        rule_engine: Optional[RuleEngine] = None,
        analyzer: Optional[PromptAnalyzer] = None
    ):
        self.config = config or ImprovementConfig()
        self.rule_engine = rule_engine or RuleEngine()
        self.analyzer = analyzer or PromptAnalyzer()
        self._pending: Optional[ImprovementTask] = None

    @property
    def busy(self) -> bool:
        """Whether an improvement is currently pending."""
        return self._pending is not None

    def enhance(self, prompt: str) -> str:
        """
        Rewrite a prompt with the rule pipeline.

        Args:
            prompt: Raw prompt text

        Returns:
            The improved text

        Raises:
            EmptyInputError: If the prompt is blank
        """
        improved, _ = self._rewrite(prompt)
        return improved

    def _rewrite(self, prompt: str) -> Tuple[str, List[str]]:
        if not prompt or not prompt.strip():
            raise EmptyInputError(field="prompt")
        return self.rule_engine.apply_rules(prompt.strip())

    async def improve(self, prompt: str, delay: Optional[float] = None) -> ImprovementResult:
        """
        Improve a prompt after the simulated latency.

        Args:
            prompt: Raw prompt text
            delay: Override the configured delay

        Returns:
            ImprovementResult with the improved text and an analysis of the input

        Raises:
            EmptyInputError: If the prompt is blank
            ImprovementInProgressError: If another improvement is pending
        """
        if not prompt or not prompt.strip():
            raise EmptyInputError(field="prompt")
        if self.busy:
            raise ImprovementInProgressError("An improvement is already in progress")

        start_time = time.perf_counter()
        task = ImprovementTask(
            lambda: self._rewrite(prompt),
            delay=self.config.delay if delay is None else delay
        )
        self._pending = task
        try:
            improved, applied = await task.run()
        finally:
            self._pending = None

        result = ImprovementResult(
            original_prompt=prompt,
            improved_prompt=improved,
            applied_rules=applied,
            analysis=self.analyzer.analyze(prompt),
            processing_time_ms=(time.perf_counter() - start_time) * 1000
        )
        logger.debug("Improved prompt with rules: %s", ", ".join(applied) or "none")
        return result

    def improve_sync(self, prompt: str, delay: Optional[float] = None) -> ImprovementResult:
        """Synchronous version of improve."""
        return asyncio.run(self.improve(prompt, delay))

    def cancel(self) -> bool:
        """Cancel the pending improvement, if any."""
        if self._pending is None:
            return False
        return self._pending.cancel()

    def analyze(self, prompt: str) -> AnalysisResult:
        """Analyze a prompt without modifying it."""
        return self.analyzer.analyze(prompt)

    def list_rules(self):
        """List the rewrite rules in application order."""
        return self.rule_engine.list_rules()


_default_enhancer = PromptEnhancer()


def enhance(prompt: str) -> str:
    """Rewrite a prompt with the default rule pipeline."""
    return _default_enhancer.enhance(prompt)
