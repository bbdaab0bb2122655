"""
Analysis report bundle and its Markdown rendering.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List

from .utils.word_count import WordCounter

POSITION_LABELS = {
    "beginning": "beginning/introduction",
    "middle": "middle/developing",
    "climax": "climax/turning point",
    "resolution": "resolution/ending",
}

REPORT_EXPANSION_TARGET = 200

COUNT_FORMAT = '"{item}" ({count} times)'
PATTERN_FORMAT = "{item} pattern ({count} times)"


@dataclass
class AnalysisReport:
    """Structured result of one analysis run."""
    word_count: int
    char_count: int
    contextual_assessment: Dict = field(default_factory=dict)
    enhancement_needs: Dict = field(default_factory=dict)
    repetition_patterns: Dict = field(default_factory=dict)

    @property
    def narrative_position(self) -> str:
        return self.contextual_assessment["narrative_position"]["position"]

    @property
    def point_of_view(self) -> str:
        return self.contextual_assessment["character_focus"]["point_of_view"]

    @property
    def pronoun_counts(self) -> Dict[str, int]:
        return self.contextual_assessment["character_focus"]["pronoun_counts"]

    @property
    def scene_type(self) -> str:
        return self.contextual_assessment["scene_type"]["dominant_type"]

    @property
    def mood(self) -> str:
        return self.contextual_assessment["mood"]["mood"]

    @property
    def repeated_words(self) -> List[Dict]:
        return self.repetition_patterns["repeated_words"]

    @property
    def repeated_phrases(self) -> List[Dict]:
        return self.repetition_patterns["repeated_phrases"]

    @property
    def repeated_sentence_shapes(self) -> List[Dict]:
        return self.repetition_patterns["repeated_sentence_shapes"]

    def need_level(self, technique: str) -> str:
        return self.enhancement_needs[technique]["need_level"]

    def to_dict(self) -> Dict:
        return asdict(self)


def _presence(flag: bool) -> str:
    return "Present" if flag else "Absent"


def _strength(flag: bool) -> str:
    return "Strong" if flag else "Weak"


def _sufficiency(flag: bool) -> str:
    return "Sufficient" if flag else "Needs improvement"


def _bullets(items: List[Dict], key: str, empty: str, fmt: str, indent: str = "") -> str:
    if not items:
        return f"{indent}- {empty}"
    return "\n".join(
        f"{indent}- " + fmt.format(item=item[key], count=item["count"]) for item in items
    )


def _action_section(action: Dict) -> str:
    lines = [f"- **Applicability**: {'Applicable' if action['is_action_scene'] else 'Not applicable'}"]
    if action["is_action_scene"]:
        lines.extend([
            f"- **Need Level**: {action['need_level']}",
            f"- **Time Manipulation**: {_presence(action['has_time_manipulation'])}",
            f"- **Sensory Details**: {_presence(action['has_sensory_details'])}",
            f"- **Environmental Interaction**: {_presence(action['has_environmental_interaction'])}",
        ])
    return "\n".join(lines)


def render_report(report: AnalysisReport) -> str:
    """
    Render an AnalysisReport as Markdown.

    Args:
        report: Structured analysis results

    Returns:
        Markdown document with statistics, contextual assessment,
        enhancement recommendations and repetition patterns
    """
    counter = WordCounter()
    target_words = counter.target_count(report.word_count, REPORT_EXPANSION_TARGET)
    target_chars = counter.target_count(report.char_count, REPORT_EXPANSION_TARGET)

    context = report.contextual_assessment
    position = context["narrative_position"]
    focus = context["character_focus"]
    scene = context["scene_type"]
    mood = context["mood"]

    needs = report.enhancement_needs
    shadow = needs["golden_shadow"]
    environment = needs["environmental"]
    presence = environment["sensory_presence"]
    prose = needs["prose_smoothing"]
    repetition = needs["repetition"]

    patterns = report.repetition_patterns
    top_words = _bullets(repetition["top_repeated_words"], "word", "None", COUNT_FORMAT, indent="  ")
    repeated_words = _bullets(
        patterns["repeated_words"], "word", "No significant word repetition detected", COUNT_FORMAT
    )
    repeated_phrases = _bullets(
        patterns["repeated_phrases"], "phrase", "No significant phrase repetition detected", COUNT_FORMAT
    )
    repeated_shapes = _bullets(
        patterns["repeated_sentence_shapes"], "pattern",
        "No significant sentence structure repetition detected", PATTERN_FORMAT
    )
    characters = ", ".join(focus["potential_characters"]) or "None identified"
    underdeveloped = ", ".join(shadow["underdeveloped_characters"]) or "None identified"

    return f"""# UNO Analysis Report

## Text Statistics
- **Original Word Count**: {report.word_count}
- **Original Character Count**: {report.char_count}
- **Target Word Count ({REPORT_EXPANSION_TARGET}%)**: {target_words}
- **Target Character Count ({REPORT_EXPANSION_TARGET}%)**: {target_chars}

## Contextual Assessment

### Narrative Position
- **Position**: {POSITION_LABELS[position['position']]}
- **Introduction Markers**: {_presence(position['is_introduction'])}
- **Climax Markers**: {_presence(position['is_climax'])}
- **Resolution Markers**: {_presence(position['is_resolution'])}

### Character Focus
- **Point of View**: {focus['point_of_view']}
- **Potential Characters**: {characters}
- **Pronoun Distribution**:
  - First Person: {focus['pronoun_counts']['first_person']}
  - Second Person: {focus['pronoun_counts']['second_person']}
  - Third Person: {focus['pronoun_counts']['third_person']}

### Scene Type
- **Dominant Type**: {scene['dominant_type']}
- **Action Elements**: {_strength(scene['is_action'])}
- **Dialogue Elements**: {_strength(scene['is_dialogue'])}
- **Exposition Elements**: {_strength(scene['is_exposition'])}

### Mood and Tone
- **Dominant Mood**: {mood['mood']}
- **Positive Elements**: {_presence(mood['has_positive_elements'])}
- **Negative Elements**: {_presence(mood['has_negative_elements'])}
- **Suspense Elements**: {_presence(mood['has_suspense_elements'])}

## Enhancement Recommendations

### Golden Shadow Enhancement
- **Need Level**: {shadow['need_level']}
- **Underdeveloped Characters**: {underdeveloped}
- **Underdeveloped Plot Elements**: {_presence(shadow['has_underdeveloped_plot_elements'])}

### Environmental Expansion
- **Need Level**: {environment['need_level']}
- **Sensory Richness (0-4)**: {environment['sensory_richness']}
- **Setting Description**: {_presence(environment['has_setting_description'])}
- **Areas to Enhance**:
  - Visual: {_sufficiency(presence['visual'])}
  - Auditory: {_sufficiency(presence['auditory'])}
  - Tactile: {_sufficiency(presence['tactile'])}
  - Olfactory: {_sufficiency(presence['olfactory'])}

### Action Scene Enhancement
{_action_section(needs['action_scene'])}

### Prose Smoothing
- **Need Level**: {prose['need_level']}
- **Average Sentence Length**: {prose['average_sentence_length']:.1f} words
- **Sentence Length Variety**: {prose['sentence_length_variety'] * 100:.1f}%
- **Transition Words**: {_presence(prose['has_transition_words'])}
- **Paragraph Length Variety**: {_presence(prose['has_varied_paragraph_length'])}

### Repetition Elimination
- **Severity**: {repetition['severity']}
- **Repeated Word Count**: {repetition['repeated_word_count']}
- **Top Repeated Words**:
{top_words}

## Repetition Patterns

### Repeated Words
{repeated_words}

### Repeated Phrases
{repeated_phrases}

### Repeated Sentence Structures
{repeated_shapes}
"""
