"""
Tests for the text analyzer.
"""

from src.uno.analyzer import TextAnalyzer, get_text_analyzer, split_sentences
from tests.sample_texts import ACTION_TEXT, SCENARIO_A_TEXT, SCENARIO_B_TEXT


class TestScenarios:
    """End-to-end analysis of the reference texts."""

    def test_scenario_a_exposition_third_person(self, analyzer):
        report = analyzer.build_report(SCENARIO_A_TEXT)
        assert report.scene_type == "exposition"
        assert report.point_of_view == "third-person"
        assert report.pronoun_counts == {"first_person": 0, "second_person": 0, "third_person": 1}
        assert report.word_count == 10
        assert report.char_count == len(SCENARIO_A_TEXT)

    def test_scenario_b_single_repeated_word(self, analyzer):
        report = analyzer.build_report(SCENARIO_B_TEXT)
        assert report.repeated_words == [{"word": "statue", "count": 5}]

    def test_analysis_is_deterministic(self, analyzer):
        first = analyzer.build_report(ACTION_TEXT).to_dict()
        second = analyzer.build_report(ACTION_TEXT).to_dict()
        assert first == second
        assert analyzer.analyze_text(ACTION_TEXT) == analyzer.analyze_text(ACTION_TEXT)


class TestEmptyText:
    """Empty and blank input never raises and falls back to defaults."""

    def test_empty_report_defaults(self, analyzer):
        report = analyzer.build_report("")
        assert report.word_count == 0
        assert report.char_count == 0
        assert report.narrative_position == "middle"
        assert report.point_of_view == "unclear"
        assert report.scene_type == "exposition"
        assert report.mood == "neutral"
        assert report.repeated_words == []
        assert report.repeated_phrases == []
        assert report.repeated_sentence_shapes == []

    def test_empty_prose_smoothing_has_zero_average(self, analyzer):
        need = analyzer.evaluate_prose_smoothing_need("   \n  ")
        assert need["average_sentence_length"] == 0.0
        assert need["sentence_length_variety"] == 0.0
        assert need["need_level"] == "high"

    def test_empty_golden_shadow_is_low(self, analyzer):
        need = analyzer.evaluate_golden_shadow_need("")
        assert need["underdeveloped_characters"] == []
        assert need["need_level"] == "low"

    def test_empty_report_renders(self, analyzer):
        assert analyzer.analyze_text("").startswith("# UNO Analysis Report")


class TestContextualAssessment:

    def test_resolution_overrides_climax_and_introduction(self, analyzer):
        position = analyzer.determine_narrative_position("It began, and finally it ended.")
        assert position["position"] == "resolution"
        assert position["is_introduction"] and position["is_climax"] and position["is_resolution"]

    def test_climax_overrides_introduction(self, analyzer):
        assert analyzer.determine_narrative_position("It began suddenly.")["position"] == "climax"

    def test_introduction_only(self, analyzer):
        assert analyzer.determine_narrative_position("It began.")["position"] == "beginning"

    def test_first_person_wins_over_third(self, analyzer):
        focus = analyzer.identify_character_focus("I told him the truth.")
        assert focus["point_of_view"] == "first-person"
        assert focus["pronoun_counts"]["first_person"] == 1
        assert focus["pronoun_counts"]["third_person"] == 1

    def test_character_names_skip_first_word_and_strip_one_edge(self, analyzer):
        names = analyzer.extract_potential_character_names("Sarah met Tom and (Anna) in Paris.")
        assert names == ["Tom", "Anna)", "Paris"]

    def test_character_names_keep_first_appearance_order(self, analyzer):
        names = analyzer.extract_potential_character_names("So Bob met Al. Then Bob left.")
        assert names == ["Bob", "Al", "Then"]

    def test_action_scene(self, analyzer):
        scene = analyzer.determine_scene_type(ACTION_TEXT)
        assert scene["dominant_type"] == "action"
        assert scene["action_verb_count"] == 7

    def test_dialogue_overrides_action(self, analyzer):
        text = "He ran. " * 6 + '"Go," she said. ' * 6
        scene = analyzer.determine_scene_type(text)
        assert scene["is_action"] is True
        assert scene["is_dialogue"] is True
        assert scene["dominant_type"] == "dialogue"

    def test_mood_precedence(self, analyzer):
        assert analyzer.analyze_mood_and_tone("happy days")["mood"] == "positive"
        assert analyzer.analyze_mood_and_tone("happy but full of fear")["mood"] == "negative"
        assert analyzer.analyze_mood_and_tone("happy, fear, danger")["mood"] == "suspenseful"
        assert analyzer.analyze_mood_and_tone("a table")["mood"] == "neutral"


class TestEnhancementEvaluation:

    def test_golden_shadow_flags_rare_names_and_plot(self, analyzer):
        need = analyzer.evaluate_golden_shadow_need("Anna discovered a secret with Marco.")
        assert "Marco" in need["underdeveloped_characters"]
        assert need["has_underdeveloped_plot_elements"] is True
        assert need["plot_elements"] == ["Anna discovered a secret with Marco"]
        assert need["need_level"] == "high"

    def test_environmental_rich_setting_is_low(self, analyzer):
        need = analyzer.evaluate_environmental_need("The room was bright and loud, the air warm.")
        assert need["sensory_richness"] == 3
        assert need["missing_senses"] == ["olfactory"]
        assert need["need_level"] == "low"

    def test_environmental_without_setting_is_high(self, analyzer):
        need = analyzer.evaluate_environmental_need(SCENARIO_A_TEXT)
        assert need["has_setting_description"] is False
        assert need["sensory_presence"]["visual"] is True
        assert need["need_level"] == "high"

    def test_action_need_not_applicable_outside_action(self, analyzer):
        need = analyzer.evaluate_action_scene_need(SCENARIO_A_TEXT)
        assert need == {"need_level": "not applicable", "is_action_scene": False}

    def test_action_need_high_when_cues_missing(self, analyzer):
        need = analyzer.evaluate_action_scene_need(ACTION_TEXT)
        assert need["need_level"] == "high"
        assert need["has_time_manipulation"] is False
        assert need["has_sensory_details"] is False
        assert need["has_environmental_interaction"] is False

    def test_action_need_medium_when_all_cues_present(self, analyzer):
        text = ACTION_TEXT + " Suddenly he felt the wind through the trees."
        assert analyzer.evaluate_action_scene_need(text)["need_level"] == "medium"

    def test_prose_smoothing_low_with_variety_and_transitions(self, analyzer):
        text = "It rained all day long.\n\nHowever, we stayed in."
        need = analyzer.evaluate_prose_smoothing_need(text)
        assert need["has_transition_words"] is True
        assert need["has_varied_paragraph_length"] is True
        assert need["sentence_length_variety"] == 1.0
        assert need["need_level"] == "low"

    def test_repetition_severity_tiers(self, analyzer):
        medium = " ".join(["alpha"] * 4 + ["bravo"] * 4 + ["charlie"] * 4)
        need = analyzer.evaluate_repetition_severity(medium)
        assert need["severity"] == "medium"
        assert need["repeated_word_count"] == 3

        words = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot"]
        high = " ".join(word for word in words for _ in range(4))
        need = analyzer.evaluate_repetition_severity(high)
        assert need["severity"] == "high"
        assert len(need["top_repeated_words"]) == 5

        assert analyzer.evaluate_repetition_severity(SCENARIO_B_TEXT)["severity"] == "low"


class TestRepetitionPatterns:

    def test_repeated_words_ignore_short_words(self, analyzer):
        assert analyzer.find_repeated_words("the cat and the cat and the cat") == []

    def test_repeated_words_ties_keep_text_order(self, analyzer):
        text = "door lamp door lamp door lamp"
        assert analyzer.find_repeated_words(text) == [
            {"word": "door", "count": 3},
            {"word": "lamp", "count": 3},
        ]

    def test_repeated_phrases(self, analyzer):
        phrases = analyzer.find_repeated_phrases("the old man the old man the old man")
        assert phrases == [
            {"phrase": "the old man", "count": 3},
            {"phrase": "old man the", "count": 2},
            {"phrase": "man the old", "count": 2},
        ]

    def test_repeated_sentence_shapes(self, analyzer):
        shapes = analyzer.find_repeated_sentence_shapes("He ran. He hid. He slept. She woke.")
        assert shapes == [{"pattern": "he-short", "count": 3}]


def test_split_sentences_drops_blank_pieces():
    assert split_sentences("One. Two!! Three?") == ["One", " Two", " Three"]


def test_get_text_analyzer_is_singleton():
    assert get_text_analyzer() is get_text_analyzer()
    assert isinstance(get_text_analyzer(), TextAnalyzer)
