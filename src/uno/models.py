"""
Request and option models.

Pydantic models for the three text tools. Wire names are camelCase
(``expansionTarget``, ``enableGoldenShadow``); snake_case names are accepted
as well so Python callers can construct the models directly.
"""

from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel

from .keywords import TECHNIQUE_NAMES

MIN_EXPANSION_TARGET = 100
MAX_EXPANSION_TARGET = 500

ExpansionTarget = Union[StrictInt, StrictFloat]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EnhancementOptions(_CamelModel):
    """Which enhancement techniques to run."""
    enable_golden_shadow: StrictBool = True
    enable_environmental: StrictBool = True
    enable_action_scene: StrictBool = True
    enable_prose_smoother: StrictBool = True
    enable_repetition_elimination: StrictBool = True

    def _flags(self) -> List[bool]:
        return [
            self.enable_golden_shadow,
            self.enable_environmental,
            self.enable_action_scene,
            self.enable_prose_smoother,
            self.enable_repetition_elimination,
        ]

    def all_enabled(self) -> bool:
        return all(self._flags())

    def none_enabled(self) -> bool:
        return not any(self._flags())

    def enabled_technique_names(self) -> List[str]:
        """Display names of the enabled techniques, in pipeline order."""
        return [name for name, flag in zip(TECHNIQUE_NAMES.values(), self._flags()) if flag]


class AnalyzeTextRequest(_CamelModel):
    """Arguments for analyze_text."""
    text: StrictStr = Field(..., min_length=1, description="The text to analyze")


class EnhanceTextRequest(AnalyzeTextRequest):
    """Arguments for enhance_text."""
    expansion_target: ExpansionTarget = Field(
        default=200,
        description="Target expansion percentage (100-500)"
    )

    @field_validator('expansion_target', mode='before')
    @classmethod
    def reject_boolean_target(cls, v: Any) -> Any:
        """Booleans are ints to Python but never a valid percentage."""
        if isinstance(v, bool):
            raise ValueError("expansionTarget must be a number")
        return v

    @field_validator('expansion_target')
    @classmethod
    def check_target_range(cls, v: Any) -> Any:
        if not MIN_EXPANSION_TARGET <= v <= MAX_EXPANSION_TARGET:
            raise ValueError(
                f"expansionTarget must be between {MIN_EXPANSION_TARGET} and {MAX_EXPANSION_TARGET}"
            )
        return v


class CustomEnhanceTextRequest(EnhanceTextRequest):
    """Arguments for custom_enhance_text."""
    expansion_target: ExpansionTarget = Field(
        default=150,
        description="Target expansion percentage (100-500)"
    )
    enable_golden_shadow: StrictBool = True
    enable_environmental: StrictBool = True
    enable_action_scene: StrictBool = True
    enable_prose_smoother: StrictBool = True
    enable_repetition_elimination: StrictBool = True

    def to_options(self) -> EnhancementOptions:
        return EnhancementOptions(
            enable_golden_shadow=self.enable_golden_shadow,
            enable_environmental=self.enable_environmental,
            enable_action_scene=self.enable_action_scene,
            enable_prose_smoother=self.enable_prose_smoother,
            enable_repetition_elimination=self.enable_repetition_elimination,
        )
