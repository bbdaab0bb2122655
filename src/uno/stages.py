"""
Enhancement stages.

Each stage is a text-to-text transformer. evaluate() runs the analyzer on
the text the stage receives and transform() acts on that evidence, so
decisions reflect the output of earlier stages rather than the original input.
Stages that draw random numbers use the injected random source, which only
needs random(), choice() and sample().
"""

import math
import re
import logging
from typing import Dict, List, Optional

from . import keywords
from .analyzer import TextAnalyzer, contains_any

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = "\n\n"
STAGE_PROBABILITY = 0.5


class EnhancementStage:
    """
    Base class for a pipeline stage.

    Subclasses set ``option`` to the EnhancementOptions field that enables
    them and ``name`` to the technique's display name.
    """

    option = None
    name = None

    def __init__(self, analyzer: TextAnalyzer, rng):
        self.analyzer = analyzer
        self.rng = rng

    def is_applicable(self, original_text: str) -> bool:
        """Whether the stage may run at all for this input."""
        return True

    def evaluate(self, text: str) -> Dict:
        """Evidence the stage acts on, measured on the text it is about to transform."""
        raise NotImplementedError

    def transform(self, text: str, evidence: Optional[Dict] = None) -> str:
        """
        Return the enhanced text. Never mutates or shortens its input.

        Args:
            text: Current text of the pipeline
            evidence: Result of evaluate(text); computed when omitted
        """
        if evidence is None:
            evidence = self.evaluate(text)
        return self.apply(text, evidence)

    def apply(self, text: str, evidence: Dict) -> str:
        raise NotImplementedError


class GoldenShadowStage(EnhancementStage):
    """Develops characters and plot elements that are only mentioned in passing."""

    option = "enable_golden_shadow"
    name = keywords.TECHNIQUE_NAMES["golden_shadow"]

    def evaluate(self, text: str) -> Dict:
        return self.analyzer.evaluate_golden_shadow_need(text)

    def apply(self, text: str, need: Dict) -> str:
        enhanced = text

        for character in need["underdeveloped_characters"]:
            match = re.search(r'\b' + re.escape(character) + r'\b', enhanced, re.IGNORECASE)
            if not match:
                continue
            paragraph_end = enhanced.find("\n", match.start())
            insert_at = paragraph_end if paragraph_end != -1 else len(enhanced)
            addition = keywords.CHARACTER_DEPTH_TEMPLATE.format(name=character)
            enhanced = enhanced[:insert_at] + addition + enhanced[insert_at:]

        if need["has_underdeveloped_plot_elements"]:
            paragraphs = enhanced.split(PARAGRAPH_BREAK)
            paragraphs.insert(min(2, len(paragraphs)), keywords.PLOT_STAKES_PARAGRAPH)
            enhanced = PARAGRAPH_BREAK.join(paragraphs)

        logger.debug(
            f"Golden shadow: {len(need['underdeveloped_characters'])} characters, "
            f"plot elements {'found' if need['has_underdeveloped_plot_elements'] else 'absent'}"
        )
        return enhanced


class EnvironmentalStage(EnhancementStage):
    """Adds missing sensory detail and a close study of an ordinary object."""

    option = "enable_environmental"
    name = keywords.TECHNIQUE_NAMES["environmental"]

    def evaluate(self, text: str) -> Dict:
        return self.analyzer.evaluate_environmental_need(text)

    def apply(self, text: str, need: Dict) -> str:
        if (need["has_setting_description"]
                and need["sensory_richness"] >= keywords.SENSORY_RICHNESS_THRESHOLD):
            return text

        paragraphs = text.split(PARAGRAPH_BREAK)
        index = self._locate_setting_paragraph(paragraphs)

        addition = "".join(" " + keywords.SENSORY_TEMPLATES[sense] for sense in need["missing_senses"])
        if paragraphs[index].strip():
            paragraphs[index] += addition
        else:
            paragraphs[index] = addition.lstrip()
        paragraphs.insert(index + 1, keywords.MUNDANE_OBJECT_PARAGRAPH)

        logger.debug(f"Environmental: paragraph {index}, missing senses {need['missing_senses']}")
        return PARAGRAPH_BREAK.join(paragraphs)

    def _locate_setting_paragraph(self, paragraphs: List[str]) -> int:
        for index, paragraph in enumerate(paragraphs):
            if contains_any(paragraph, keywords.SETTING_LOCATOR_KEYWORDS):
                return index
        # No setting mentioned: prefer the second paragraph
        return min(1, len(paragraphs) - 1)


class ActionSceneStage(EnhancementStage):
    """Intensifies paragraphs that carry action verbs."""

    option = "enable_action_scene"
    name = keywords.TECHNIQUE_NAMES["action_scene"]

    def is_applicable(self, original_text: str) -> bool:
        return self.analyzer.determine_scene_type(original_text)["is_action"]

    def evaluate(self, text: str) -> Dict:
        return self.analyzer.evaluate_action_scene_need(text)

    def apply(self, text: str, need: Dict) -> str:
        if not need["is_action_scene"]:
            return text

        additions = ""
        if not need["has_time_manipulation"]:
            additions += keywords.TIME_DILATION_SENTENCE
        if not need["has_sensory_details"]:
            additions += keywords.HEIGHTENED_SENSES_SENTENCE
        if not need["has_environmental_interaction"]:
            additions += keywords.ENVIRONMENT_PARTICIPANT_SENTENCE

        paragraphs = text.split(PARAGRAPH_BREAK)
        enhanced_count = 0
        for index, paragraph in enumerate(paragraphs):
            if not contains_any(paragraph, keywords.ACTION_VERBS):
                continue
            paragraph += additions
            if self.rng.random() > STAGE_PROBABILITY:
                paragraph += keywords.STILLNESS_CONTRAST_SENTENCE
            paragraphs[index] = paragraph
            enhanced_count += 1

        logger.debug(f"Action scene: enhanced {enhanced_count} of {len(paragraphs)} paragraphs")
        return PARAGRAPH_BREAK.join(paragraphs)


class ProseSmoothingStage(EnhancementStage):
    """Opens some paragraphs with a transition when the text has none."""

    option = "enable_prose_smoother"
    name = keywords.TECHNIQUE_NAMES["prose_smoother"]

    def evaluate(self, text: str) -> Dict:
        return self.analyzer.evaluate_prose_smoothing_need(text)

    def apply(self, text: str, need: Dict) -> str:
        if need["has_transition_words"]:
            return text

        paragraphs = text.split(PARAGRAPH_BREAK)
        for index in range(1, len(paragraphs)):
            if self.rng.random() > STAGE_PROBABILITY:
                paragraphs[index] = self.rng.choice(keywords.TRANSITION_PHRASES) + paragraphs[index]

        return PARAGRAPH_BREAK.join(paragraphs)


class RepetitionEliminationStage(EnhancementStage):
    """Swaps about 60% of the occurrences of overused words for synonyms."""

    option = "enable_repetition_elimination"
    name = keywords.TECHNIQUE_NAMES["repetition_elimination"]

    def evaluate(self, text: str) -> Dict:
        return {"repeated_words": self.analyzer.find_repeated_words(text)}

    def apply(self, text: str, evidence: Dict) -> str:
        enhanced = text

        for entry in evidence["repeated_words"]:
            word = entry["word"]
            synonyms = keywords.SYNONYMS.get(word)
            if len(word) < keywords.REPLACEMENT_MIN_LENGTH or not synonyms:
                continue

            pattern = re.compile(r'\b' + re.escape(word) + r'\b', re.IGNORECASE)
            matches = list(pattern.finditer(enhanced))
            if not matches:
                continue

            replace_count = math.ceil(len(matches) * keywords.REPLACEMENT_RATIO)
            chosen = self.rng.sample(range(len(matches)), replace_count)

            # Replace from the end so earlier match offsets stay valid
            for index in sorted(chosen, reverse=True):
                match = matches[index]
                replacement = self.rng.choice(synonyms)
                if match.group(0)[0].isupper():
                    replacement = replacement[0].upper() + replacement[1:]
                enhanced = enhanced[:match.start()] + replacement + enhanced[match.end():]

            logger.debug(f"Repetition: replaced {replace_count} of {len(matches)} '{word}'")

        return enhanced


def build_default_stages(analyzer: TextAnalyzer, rng) -> List[EnhancementStage]:
    """The five stages in pipeline order."""
    return [
        GoldenShadowStage(analyzer, rng),
        EnvironmentalStage(analyzer, rng),
        ActionSceneStage(analyzer, rng),
        ProseSmoothingStage(analyzer, rng),
        RepetitionEliminationStage(analyzer, rng),
    ]
