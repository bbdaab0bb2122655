"""
UNO enhancement pipeline.

Runs the five enhancement stages in a fixed order over a piece of prose,
tops up with a closing paragraph when the expansion is still short of the
target, and appends a Markdown summary of the run.
"""

import random
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from . import keywords
from .analyzer import TextAnalyzer
from .models import EnhancementOptions
from .stages import EnhancementStage, PARAGRAPH_BREAK, build_default_stages
from .utils.word_count import WordCounter, DEFAULT_EXPANSION_TARGET

logger = logging.getLogger(__name__)

CUSTOM_EXPANSION_TARGET = 150


@dataclass
class EnhancementRun:
    """Running state threaded through the pipeline."""
    original_text: str
    expansion_target: int
    original_word_count: int
    original_char_count: int
    target_word_count: int
    text: str = ""
    applied: List[str] = field(default_factory=list)

    @property
    def current_word_count(self) -> int:
        return WordCounter().count_words(self.text)

    @property
    def current_char_count(self) -> int:
        return len(self.text)


class EnhancementProcessor:
    """
    Applies the UNO enhancement techniques to prose.

    The random source is injectable so runs can be reproduced; it must
    provide random(), choice() and sample() like random.Random.
    """

    def __init__(self, analyzer: Optional[TextAnalyzer] = None, rng=None):
        self.analyzer = analyzer or TextAnalyzer()
        self.rng = rng or random.Random()
        self.word_counter = WordCounter()
        self.stages: List[EnhancementStage] = build_default_stages(self.analyzer, self.rng)

    def enhance_text(self, text: str, expansion_target: int = DEFAULT_EXPANSION_TARGET) -> str:
        """Enhance text with every technique enabled."""
        return self.custom_enhance_text(text, expansion_target, EnhancementOptions())

    def custom_enhance_text(
        self,
        text: str,
        expansion_target: int = CUSTOM_EXPANSION_TARGET,
        options: Optional[EnhancementOptions] = None
    ) -> str:
        """
        Enhance text with a chosen subset of techniques.

        Args:
            text: Prose to enhance
            expansion_target: Desired length as a percentage of the original
            options: Technique flags (default: all enabled)

        Returns:
            The enhanced text followed by a blank line and the summary block
        """
        options = options or EnhancementOptions()
        run = self._start_run(text, expansion_target)

        logger.info(
            f"Enhancing {run.original_word_count} words toward {run.target_word_count} "
            f"({expansion_target}%) "
            f"with {', '.join(options.enabled_technique_names()) or 'no techniques'}"
        )

        for stage in self.stages:
            if not getattr(options, stage.option):
                continue
            if not stage.is_applicable(run.original_text):
                logger.debug(f"Skipping {stage.name}: not applicable")
                continue
            evidence = stage.evaluate(run.text)
            run.text = stage.transform(run.text, evidence)
            run.applied.append(stage.name)
            logger.debug(f"{stage.name}: {run.current_word_count} words")

        # Only runs that applied a technique are topped up
        if run.applied and not self.word_counter.has_reached_target(
            run.original_char_count, run.current_char_count, expansion_target
        ):
            run.text = run.text + PARAGRAPH_BREAK + keywords.CLOSING_REFLECTION_PARAGRAPH

        summary = self.generate_summary(run)
        logger.info(
            f"Enhanced {run.original_word_count} -> {run.current_word_count} words "
            f"using {len(run.applied)} techniques"
        )
        return run.text + PARAGRAPH_BREAK + summary

    def generate_summary(self, run: EnhancementRun) -> str:
        """Markdown summary of the counts and techniques for a finished run."""
        final_words = run.current_word_count
        final_chars = run.current_char_count
        word_percent = self.word_counter.expansion_percent(run.original_word_count, final_words)
        char_percent = self.word_counter.expansion_percent(run.original_char_count, final_chars)
        techniques = "\n".join(f"- {name}" for name in run.applied) or "- None"

        return f"""---

## UNO Enhancement Summary

**Expansion Results:**
- Original Word Count: {run.original_word_count}
- Final Word Count: {final_words}
- Word Expansion: {word_percent}% of original ({run.expansion_target}% target)
- Original Character Count: {run.original_char_count}
- Final Character Count: {final_chars}
- Character Expansion: {char_percent}% of original

**Enhancement Techniques Applied:**
{techniques}

*Enhanced by UNO (Unified Narrative Operator)*"""

    def _start_run(self, text: str, expansion_target: int) -> EnhancementRun:
        word_count = self.word_counter.count_words(text)
        char_count = len(text)
        return EnhancementRun(
            original_text=text,
            expansion_target=expansion_target,
            original_word_count=word_count,
            original_char_count=char_count,
            target_word_count=self.word_counter.target_count(word_count, expansion_target),
            text=text,
        )


_processor_instance: Optional[EnhancementProcessor] = None


def get_enhancement_processor() -> EnhancementProcessor:
    """Get or create the shared enhancement processor."""
    global _processor_instance
    if _processor_instance is None:
        _processor_instance = EnhancementProcessor()
    return _processor_instance
