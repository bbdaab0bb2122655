"""
Text tool service.

Validates tool arguments, runs the analyzer or enhancer and converts
failures into API errors. Used by the Flask routes and the CLI.
"""

import copy
import logging
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.uno.analyzer import TextAnalyzer, get_text_analyzer
from src.uno.enhancer import EnhancementProcessor, get_enhancement_processor
from src.uno.models import (
    AnalyzeTextRequest,
    EnhanceTextRequest,
    CustomEnhanceTextRequest,
    MIN_EXPANSION_TARGET,
    MAX_EXPANSION_TARGET,
)
from src.uno.utils.errors import APIError, ValidationError, NotFoundError, InternalError

logger = logging.getLogger(__name__)

DEFAULT_MAX_TEXT_LENGTH = 100000

_TEXT_PROPERTY = {
    "type": "string",
    "description": "The story page text to analyze or enhance",
}

_EXPANSION_PROPERTY = {
    "type": "number",
    "description": "Target expansion percentage (default: 200)",
    "minimum": MIN_EXPANSION_TARGET,
    "maximum": MAX_EXPANSION_TARGET,
}


def _technique_flag(description: str) -> Dict[str, Any]:
    return {"type": "boolean", "description": description, "default": True}


TOOL_DEFINITIONS = [
    {
        "name": "analyze_text",
        "description": "Analyzes a story page and generates a report with insights",
        "inputSchema": {
            "type": "object",
            "properties": {"text": _TEXT_PROPERTY},
            "required": ["text"],
        },
    },
    {
        "name": "enhance_text",
        "description": "Enhances a story page using all techniques to meet expansion target",
        "inputSchema": {
            "type": "object",
            "properties": {
                "text": dict(_TEXT_PROPERTY, description="The story page text to enhance"),
                "expansionTarget": _EXPANSION_PROPERTY,
            },
            "required": ["text"],
        },
    },
    {
        "name": "custom_enhance_text",
        "description": "Enhances a story page using selected techniques",
        "inputSchema": {
            "type": "object",
            "properties": {
                "text": dict(_TEXT_PROPERTY, description="The story page text to enhance"),
                "expansionTarget": dict(
                    _EXPANSION_PROPERTY, description="Target expansion percentage (default: 150)"
                ),
                "enableGoldenShadow": _technique_flag("Enable Golden Shadow enhancement"),
                "enableEnvironmental": _technique_flag("Enable Environmental expansion"),
                "enableActionScene": _technique_flag("Enable Action Scene enhancement"),
                "enableProseSmoother": _technique_flag("Enable Prose Smoothing"),
                "enableRepetitionElimination": _technique_flag("Enable Repetition Elimination"),
            },
            "required": ["text"],
        },
    },
]


class TextToolService:
    """Service for the analyze and enhance tools."""

    def __init__(
        self,
        analyzer: Optional[TextAnalyzer] = None,
        processor: Optional[EnhancementProcessor] = None,
        max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    ):
        """
        Initialize text tool service.

        Args:
            analyzer: Text analyzer (uses get_text_analyzer() if None)
            processor: Enhancement processor (uses get_enhancement_processor() if None)
            max_text_length: Longest accepted input, in characters
        """
        self._analyzer = analyzer
        self._processor = processor
        self.max_text_length = max_text_length
        self._handlers: Dict[str, Callable[[Any], str]] = {
            "analyze_text": self.analyze_text,
            "enhance_text": self.enhance_text,
            "custom_enhance_text": self.custom_enhance_text,
        }

    @property
    def analyzer(self) -> TextAnalyzer:
        if self._analyzer is None:
            return get_text_analyzer()
        return self._analyzer

    @property
    def processor(self) -> EnhancementProcessor:
        if self._processor is None:
            return get_enhancement_processor()
        return self._processor

    def list_tools(self) -> List[Dict[str, Any]]:
        """Name, description and input schema of every tool (a fresh copy per call)."""
        return copy.deepcopy(TOOL_DEFINITIONS)

    def analyze_text(self, arguments: Any) -> str:
        """
        Analyze text and render the Markdown report.

        Raises:
            ValidationError: If arguments are invalid
            InternalError: If analysis fails
        """
        request = self._parse(AnalyzeTextRequest, arguments, "analyze_text")
        return self._run("analyze_text", lambda: self.analyzer.analyze_text(request.text))

    def enhance_text(self, arguments: Any) -> str:
        """Enhance text with every technique enabled."""
        request = self._parse(EnhanceTextRequest, arguments, "enhance_text")
        return self._run(
            "enhance_text",
            lambda: self.processor.enhance_text(request.text, request.expansion_target)
        )

    def custom_enhance_text(self, arguments: Any) -> str:
        """Enhance text with the techniques selected in arguments."""
        request = self._parse(CustomEnhanceTextRequest, arguments, "custom_enhance_text")
        return self._run(
            "custom_enhance_text",
            lambda: self.processor.custom_enhance_text(
                request.text, request.expansion_target, request.to_options()
            )
        )

    def call_tool(self, name: str, arguments: Any) -> str:
        """
        Dispatch a tool call by name.

        Raises:
            NotFoundError: If no tool has this name
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise NotFoundError("Tool", name)
        return handler(arguments)

    def _parse(self, model: Type[BaseModel], arguments: Any, tool_name: str) -> BaseModel:
        if not isinstance(arguments, dict):
            logger.warning(f"Rejected {tool_name} call: arguments are not an object")
            raise ValidationError(f"Invalid arguments for {tool_name}: expected an object")

        try:
            request = model.model_validate(arguments)
        except PydanticValidationError as e:
            errors = [
                {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
                for error in e.errors()
            ]
            logger.warning(f"Rejected {tool_name} call: {errors}")
            raise ValidationError(
                f"Invalid arguments for {tool_name}: {errors[0]['message']}",
                details={"errors": errors}
            )

        if len(request.text) > self.max_text_length:
            logger.warning(f"Rejected {tool_name} call: text has {len(request.text)} characters")
            raise ValidationError(
                f"Text exceeds maximum length of {self.max_text_length} characters",
                details={"length": len(request.text), "max_length": self.max_text_length}
            )
        return request

    def _run(self, tool_name: str, operation: Callable[[], str]) -> str:
        try:
            return operation()
        except APIError:
            raise
        except Exception as e:
            logger.error(f"{tool_name} failed: {e}", exc_info=True)
            raise InternalError(e, operation=tool_name) from e
