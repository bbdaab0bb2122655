"""
Tests for request and option models.
"""

import pytest
from pydantic import ValidationError

from src.uno.models import (
    AnalyzeTextRequest,
    CustomEnhanceTextRequest,
    EnhanceTextRequest,
    EnhancementOptions,
)


class TestAnalyzeTextRequest:

    def test_valid_text(self):
        assert AnalyzeTextRequest(text="Once upon a time.").text == "Once upon a time."

    @pytest.mark.parametrize("payload", [{}, {"text": ""}, {"text": 42}, {"text": None}, {"text": ["a"]}])
    def test_invalid_text(self, payload):
        with pytest.raises(ValidationError):
            AnalyzeTextRequest.model_validate(payload)


class TestEnhanceTextRequest:

    def test_default_target(self):
        assert EnhanceTextRequest(text="x").expansion_target == 200

    def test_camel_and_snake_case(self):
        assert EnhanceTextRequest.model_validate({"text": "x", "expansionTarget": 300}).expansion_target == 300
        assert EnhanceTextRequest.model_validate({"text": "x", "expansion_target": 300}).expansion_target == 300

    @pytest.mark.parametrize("target", [100, 250.5, 500])
    def test_target_bounds_inclusive(self, target):
        assert EnhanceTextRequest(text="x", expansion_target=target).expansion_target == target

    @pytest.mark.parametrize("target", [99, 501, 0, -200, True, "200", None])
    def test_invalid_targets(self, target):
        with pytest.raises(ValidationError):
            EnhanceTextRequest.model_validate({"text": "x", "expansionTarget": target})


class TestCustomEnhanceTextRequest:

    def test_defaults(self):
        request = CustomEnhanceTextRequest(text="x")
        assert request.expansion_target == 150
        assert request.to_options().all_enabled()

    def test_flags_from_wire_names(self):
        request = CustomEnhanceTextRequest.model_validate({
            "text": "x",
            "enableGoldenShadow": False,
            "enableActionScene": False,
        })
        options = request.to_options()
        assert options.enable_golden_shadow is False
        assert options.enable_action_scene is False
        assert options.enable_environmental is True

    @pytest.mark.parametrize("flag", ["yes", 1, 0, None])
    def test_flags_must_be_booleans(self, flag):
        with pytest.raises(ValidationError):
            CustomEnhanceTextRequest.model_validate({"text": "x", "enableEnvironmental": flag})

    def test_target_still_validated(self):
        with pytest.raises(ValidationError):
            CustomEnhanceTextRequest.model_validate({"text": "x", "expansionTarget": 600})


class TestEnhancementOptions:

    def test_all_enabled_by_default(self):
        options = EnhancementOptions()
        assert options.all_enabled()
        assert not options.none_enabled()
        assert options.enabled_technique_names() == [
            "Golden Shadow Enhancement",
            "Environmental Expansion",
            "Action Scene Enhancement",
            "Prose Smoothing",
            "Repetition Elimination",
        ]

    def test_partial_selection(self):
        options = EnhancementOptions(enable_environmental=False, enable_prose_smoother=False)
        assert not options.all_enabled()
        assert not options.none_enabled()
        assert options.enabled_technique_names() == [
            "Golden Shadow Enhancement",
            "Action Scene Enhancement",
            "Repetition Elimination",
        ]

    def test_none_enabled(self):
        options = EnhancementOptions(
            enableGoldenShadow=False,
            enableEnvironmental=False,
            enableActionScene=False,
            enableProseSmoother=False,
            enableRepetitionElimination=False,
        )
        assert options.none_enabled()
        assert options.enabled_technique_names() == []
