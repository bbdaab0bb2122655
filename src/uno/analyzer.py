"""
Text Analyzer

Heuristic analysis of a story page: contextual assessment (narrative
position, character focus, scene type, mood), per-technique enhancement
needs, and repetition patterns.

Everything here is keyword matching and counting. Each method is a pure
function of its text argument, so a single analyzer can be shared freely.
"""

import re
import logging
from collections import Counter
from typing import Dict, List, Optional

from . import keywords
from .report import AnalysisReport, render_report
from .utils.word_count import WordCounter

logger = logging.getLogger(__name__)

_SENTENCE_SPLIT = re.compile(r'[.!?]+')
_PARAGRAPH_SPLIT = re.compile(r'\n+')
_WORD_TOKEN = re.compile(r'\b\w+\b')
_NON_WORD = re.compile(r'[^\w]', re.ASCII)
_QUOTED_SPAN = re.compile(r'["\'].*?["\']')
_DIALOGUE_TAG = re.compile('|'.join(keywords.DIALOGUE_TAGS))
_ACTION_VERB = re.compile('|'.join(keywords.ACTION_VERBS))


def contains_any(text: str, patterns) -> bool:
    """True if any pattern occurs in text, ignoring case."""
    lower_text = text.lower()
    return any(pattern in lower_text for pattern in patterns)


def split_sentences(text: str) -> List[str]:
    """Split on runs of terminal punctuation, dropping blank pieces."""
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def _top_counts(counts: Counter, threshold: int, limit: int, key: str) -> List[Dict]:
    # Counter keeps first-seen order and sorted() is stable, so ties stay in text order
    entries = [(item, count) for item, count in counts.items() if count > threshold]
    entries = sorted(entries, key=lambda entry: entry[1], reverse=True)[:limit]
    return [{key: item, "count": count} for item, count in entries]


class TextAnalyzer:
    """
    Analysis phase of UNO.

    Performs contextual assessment, enhancement evaluation and repetition
    detection on story text.
    """

    def __init__(self):
        self.word_counter = WordCounter()

    def analyze_text(self, text: str) -> str:
        """
        Analyze text and render the Markdown report.

        Args:
            text: The story page text to analyze

        Returns:
            Formatted Markdown report
        """
        return render_report(self.build_report(text))

    def build_report(self, text: str) -> AnalysisReport:
        """
        Run every analysis and collect the structured results.

        Args:
            text: The story page text to analyze

        Returns:
            AnalysisReport with counts, assessment, needs and repetition findings
        """
        return AnalysisReport(
            word_count=self.count_words(text),
            char_count=len(text),
            contextual_assessment=self.perform_contextual_assessment(text),
            enhancement_needs=self.perform_enhancement_evaluation(text),
            repetition_patterns=self.identify_repetition_patterns(text),
        )

    def count_words(self, text: str) -> int:
        """Number of non-empty whitespace-delimited tokens."""
        return self.word_counter.count_words(text)

    def perform_contextual_assessment(self, text: str) -> Dict:
        """
        Narrative position, character focus, scene type and mood.

        Returns:
            Dict with keys narrative_position, character_focus, scene_type, mood
        """
        return {
            "narrative_position": self.determine_narrative_position(text),
            "character_focus": self.identify_character_focus(text),
            "scene_type": self.determine_scene_type(text),
            "mood": self.analyze_mood_and_tone(text),
        }

    def perform_enhancement_evaluation(self, text: str) -> Dict:
        """
        Evaluate the need for each enhancement technique.

        Returns:
            Dict keyed by technique: golden_shadow, environmental,
            action_scene, prose_smoothing, repetition
        """
        return {
            "golden_shadow": self.evaluate_golden_shadow_need(text),
            "environmental": self.evaluate_environmental_need(text),
            "action_scene": self.evaluate_action_scene_need(text),
            "prose_smoothing": self.evaluate_prose_smoothing_need(text),
            "repetition": self.evaluate_repetition_severity(text),
        }

    def identify_repetition_patterns(self, text: str) -> Dict:
        """Repeated words, 3-word phrases and sentence shapes."""
        return {
            "repeated_words": self.find_repeated_words(text),
            "repeated_phrases": self.find_repeated_phrases(text),
            "repeated_sentence_shapes": self.find_repeated_sentence_shapes(text),
        }

    # ------------------------------------------------------------------
    # Contextual assessment
    # ------------------------------------------------------------------

    def determine_narrative_position(self, text: str) -> Dict:
        """
        Classify the position of the text in the narrative arc.

        Introduction, climax and resolution cues are checked in that order and
        the last one present wins; with no cues the text is "middle".
        """
        is_introduction = contains_any(text, keywords.INTRODUCTION_MARKERS)
        is_climax = contains_any(text, keywords.CLIMAX_MARKERS)
        is_resolution = contains_any(text, keywords.RESOLUTION_MARKERS)

        position = "middle"
        if is_introduction:
            position = "beginning"
        if is_climax:
            position = "climax"
        if is_resolution:
            position = "resolution"

        return {
            "position": position,
            "is_introduction": is_introduction,
            "is_climax": is_climax,
            "is_resolution": is_resolution,
        }

    def identify_character_focus(self, text: str) -> Dict:
        """Potential characters, point of view and pronoun distribution."""
        pronoun_counts = self.count_pronouns(text)

        if pronoun_counts["first_person"] > 0:
            point_of_view = "first-person"
        elif pronoun_counts["third_person"] > 0:
            point_of_view = "third-person"
        else:
            point_of_view = "unclear"

        return {
            "potential_characters": self.extract_potential_character_names(text),
            "point_of_view": point_of_view,
            "pronoun_counts": pronoun_counts,
        }

    def determine_scene_type(self, text: str) -> Dict:
        """
        Classify the dominant scene type.

        Action needs more than five action verbs, dialogue more than five
        quoted spans or speech tags. Dialogue overrides action; with neither,
        the scene is exposition.
        """
        dialogue_count = len(_QUOTED_SPAN.findall(text))
        dialogue_tag_count = len(_DIALOGUE_TAG.findall(text))
        action_verb_count = len(_ACTION_VERB.findall(text))

        is_action = action_verb_count > keywords.SCENE_THRESHOLD
        is_dialogue = (
            dialogue_count > keywords.SCENE_THRESHOLD
            or dialogue_tag_count > keywords.SCENE_THRESHOLD
        )
        is_exposition = not is_action and not is_dialogue

        dominant_type = "mixed"
        if is_action:
            dominant_type = "action"
        if is_dialogue:
            dominant_type = "dialogue"
        if is_exposition:
            dominant_type = "exposition"

        return {
            "dominant_type": dominant_type,
            "is_action": is_action,
            "is_dialogue": is_dialogue,
            "is_exposition": is_exposition,
            "dialogue_count": dialogue_count,
            "dialogue_tag_count": dialogue_tag_count,
            "action_verb_count": action_verb_count,
        }

    def analyze_mood_and_tone(self, text: str) -> Dict:
        """Suspense beats negative beats positive; default neutral."""
        has_positive = contains_any(text, keywords.POSITIVE_MOOD_WORDS)
        has_negative = contains_any(text, keywords.NEGATIVE_MOOD_WORDS)
        has_suspense = contains_any(text, keywords.SUSPENSE_MOOD_WORDS)

        mood = "neutral"
        if has_positive:
            mood = "positive"
        if has_negative:
            mood = "negative"
        if has_suspense:
            mood = "suspenseful"

        return {
            "mood": mood,
            "has_positive_elements": has_positive,
            "has_negative_elements": has_negative,
            "has_suspense_elements": has_suspense,
        }

    # ------------------------------------------------------------------
    # Enhancement evaluation
    # ------------------------------------------------------------------

    def evaluate_golden_shadow_need(self, text: str) -> Dict:
        """
        Look for characters and plot elements that are only touched on.

        A character is underdeveloped when its name occurs at most twice.
        Any sentence carrying a plot indicator counts as an underdeveloped
        plot element.
        """
        underdeveloped_characters = [
            name for name in self.extract_potential_character_names(text)
            if self.count_occurrences(text, name) <= keywords.UNDERDEVELOPED_MENTION_LIMIT
        ]
        plot_elements = self.extract_potential_plot_elements(text)
        has_plot_elements = len(plot_elements) > 0

        need_level = "high" if underdeveloped_characters or has_plot_elements else "low"

        return {
            "need_level": need_level,
            "underdeveloped_characters": underdeveloped_characters,
            "has_underdeveloped_plot_elements": has_plot_elements,
            "plot_elements": plot_elements,
        }

    def evaluate_environmental_need(self, text: str) -> Dict:
        """Sensory richness (0-4) and presence of a setting keyword."""
        sensory_presence = {
            category: contains_any(text, keywords.SENSORY_KEYWORDS[category])
            for category in keywords.SENSORY_CATEGORIES
        }
        sensory_richness = sum(1 for present in sensory_presence.values() if present)
        has_setting = contains_any(text, keywords.SETTING_KEYWORDS)

        need_level = (
            "high"
            if sensory_richness < keywords.SENSORY_RICHNESS_THRESHOLD or not has_setting
            else "low"
        )

        return {
            "need_level": need_level,
            "sensory_richness": sensory_richness,
            "sensory_presence": sensory_presence,
            "missing_senses": [c for c in keywords.SENSORY_CATEGORIES if not sensory_presence[c]],
            "has_setting_description": has_setting,
        }

    def evaluate_action_scene_need(self, text: str) -> Dict:
        """
        Only applicable to action scenes; "high" unless time manipulation,
        sensory detail and environmental interaction are all present.
        """
        if not self.determine_scene_type(text)["is_action"]:
            return {
                "need_level": "not applicable",
                "is_action_scene": False,
            }

        has_time_manipulation = contains_any(text, keywords.TIME_MANIPULATION_CUES)
        has_sensory_details = contains_any(text, keywords.ACTION_SENSORY_CUES)
        has_environmental_interaction = contains_any(text, keywords.ENVIRONMENT_INTERACTION_CUES)

        all_present = has_time_manipulation and has_sensory_details and has_environmental_interaction

        return {
            "need_level": "medium" if all_present else "high",
            "is_action_scene": True,
            "has_time_manipulation": has_time_manipulation,
            "has_sensory_details": has_sensory_details,
            "has_environmental_interaction": has_environmental_interaction,
        }

    def evaluate_prose_smoothing_need(self, text: str) -> Dict:
        """Sentence length variety, transition words and paragraph variety."""
        sentence_lengths = [len(sentence.split()) for sentence in split_sentences(text)]

        if sentence_lengths:
            average_length = sum(sentence_lengths) / len(sentence_lengths)
            variety = len(set(sentence_lengths)) / len(sentence_lengths)
        else:
            average_length = 0.0
            variety = 0.0

        has_transition_words = contains_any(text, keywords.TRANSITION_WORDS)

        paragraphs = [p for p in _PARAGRAPH_SPLIT.split(text) if p.strip()]
        has_varied_paragraph_length = len({len(p) for p in paragraphs}) > 1

        needs_smoothing = (
            variety < keywords.SENTENCE_VARIETY_THRESHOLD
            or not has_transition_words
            or not has_varied_paragraph_length
        )

        return {
            "need_level": "high" if needs_smoothing else "low",
            "average_sentence_length": average_length,
            "sentence_length_variety": variety,
            "has_transition_words": has_transition_words,
            "has_varied_paragraph_length": has_varied_paragraph_length,
        }

    def evaluate_repetition_severity(self, text: str) -> Dict:
        """Severity tier from how many long words occur more than three times."""
        frequency = self._long_word_frequency(text)
        repeated = _top_counts(
            frequency, keywords.SEVERITY_WORD_THRESHOLD, len(frequency), "word"
        )

        if len(repeated) > 5:
            severity = "high"
        elif len(repeated) > 2:
            severity = "medium"
        else:
            severity = "low"

        return {
            "need_level": severity,
            "severity": severity,
            "repeated_word_count": len(repeated),
            "top_repeated_words": repeated[:5],
        }

    # ------------------------------------------------------------------
    # Repetition patterns
    # ------------------------------------------------------------------

    def find_repeated_words(self, text: str) -> List[Dict]:
        """Top 10 words longer than three letters seen more than twice."""
        return _top_counts(
            self._long_word_frequency(text), keywords.REPEATED_WORD_THRESHOLD, 10, "word"
        )

    def find_repeated_phrases(self, text: str) -> List[Dict]:
        """Top 5 three-token windows seen more than once."""
        words = text.split()
        phrases = Counter(
            " ".join(words[i:i + 3]).lower() for i in range(len(words) - 2)
        )
        return _top_counts(phrases, 1, 5, "phrase")

    def find_repeated_sentence_shapes(self, text: str) -> List[Dict]:
        """
        Top 3 sentence shapes seen more than twice.

        A shape is the lowercased first word plus a length bucket:
        short (<8 words), medium (<15) or long.
        """
        shapes = Counter()
        for sentence in split_sentences(text):
            words = sentence.split()
            if len(words) < 8:
                bucket = "short"
            elif len(words) < 15:
                bucket = "medium"
            else:
                bucket = "long"
            shapes[f"{words[0].lower()}-{bucket}"] += 1
        return _top_counts(shapes, 2, 3, "pattern")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def extract_potential_character_names(self, text: str) -> List[str]:
        """
        Capitalized tokens other than the first word of the text.

        The first non-word character of each token is stripped before the
        check. Order of first appearance is kept.
        """
        names = {}
        for word in text.split()[1:]:
            word = _NON_WORD.sub('', word, count=1)
            if word and 'A' <= word[0] <= 'Z':
                names[word] = True
        return list(names)

    def extract_potential_plot_elements(self, text: str) -> List[str]:
        """Sentences containing a plot indicator."""
        return [
            sentence.strip() for sentence in split_sentences(text)
            if contains_any(sentence, keywords.PLOT_INDICATORS)
        ]

    def count_pronouns(self, text: str) -> Dict[str, int]:
        counts = {"first_person": 0, "second_person": 0, "third_person": 0}
        for word in text.lower().split():
            word = _NON_WORD.sub('', word)
            if word in keywords.FIRST_PERSON_PRONOUNS:
                counts["first_person"] += 1
            elif word in keywords.SECOND_PERSON_PRONOUNS:
                counts["second_person"] += 1
            elif word in keywords.THIRD_PERSON_PRONOUNS:
                counts["third_person"] += 1
        return counts

    def count_occurrences(self, text: str, word: str) -> int:
        """Whole-word, case-insensitive occurrences of word in text."""
        pattern = re.compile(r'\b' + re.escape(word) + r'\b', re.IGNORECASE)
        return len(pattern.findall(text))

    def _long_word_frequency(self, text: str) -> Counter:
        return Counter(
            word for word in _WORD_TOKEN.findall(text.lower())
            if len(word) >= keywords.REPEATED_WORD_MIN_LENGTH
        )


_analyzer_instance: Optional[TextAnalyzer] = None


def get_text_analyzer() -> TextAnalyzer:
    """Get singleton instance of TextAnalyzer."""
    global _analyzer_instance
    if _analyzer_instance is None:
        _analyzer_instance = TextAnalyzer()
    return _analyzer_instance
