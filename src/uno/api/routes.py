"""
Flask route handlers for the UNO API.

Each text tool is exposed twice: through the generic tool dispatch route
(``POST /api/tools/<name>``, answered with a content envelope) and through
a dedicated route with a plain JSON response.
"""

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from flask import Flask
    from flask_limiter import Limiter

from flask import request, jsonify, current_app

from src.uno.services import TextToolService
from src.uno.utils import WordCounter
from src.uno.utils.errors import ValidationError

logger = logging.getLogger(__name__)


def get_text_service() -> TextToolService:
    """Text tool service configured from the current app."""
    return TextToolService(max_text_length=current_app.config["MAX_TEXT_LENGTH"])


def get_json_arguments() -> Any:
    """
    Parse the request body as a JSON object.

    Raises:
        ValidationError: If the body is missing, malformed or not an object
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def enhancement_response(result: str):
    return jsonify({
        "result": result,
        "word_count": WordCounter().count_words(result),
    })


def register_routes(flask_app: 'Flask', limiter_instance: 'Limiter') -> None:
    """
    Register all application routes.

    Args:
        flask_app: Flask application instance
        limiter_instance: Limiter instance for rate limiting
    """

    @flask_app.route('/api/health')
    def health():
        """
        Health check endpoint.

        Returns:
            JSON response with status "ok" indicating the service is running
        """
        return jsonify({"status": "ok"})

    @flask_app.route('/api/tools', methods=['GET'])
    def list_tools():
        """List the available tools with their input schemas."""
        return jsonify({"tools": get_text_service().list_tools()})

    @flask_app.route('/api/tools/<tool_name>', methods=['POST'])
    @limiter_instance.limit(lambda: current_app.config["ENHANCE_RATE_LIMIT"])
    def call_tool(tool_name):
        """
        Call a tool by name.

        Request body is the tool's arguments object. The response wraps the
        tool's text output as {"content": [{"type": "text", "text": ...}]}.
        """
        result = get_text_service().call_tool(tool_name, get_json_arguments())
        logger.info(f"Tool {tool_name} returned {len(result)} characters")
        return jsonify({"content": [{"type": "text", "text": result}]})

    @flask_app.route('/api/analyze', methods=['POST'])
    @limiter_instance.limit(lambda: current_app.config["ANALYZE_RATE_LIMIT"])
    def analyze():
        """
        Analyze a story page.

        Request body: {"text": str}

        Returns:
            JSON response with the Markdown analysis report
        """
        report = get_text_service().analyze_text(get_json_arguments())
        return jsonify({"report": report})

    @flask_app.route('/api/enhance', methods=['POST'])
    @limiter_instance.limit(lambda: current_app.config["ENHANCE_RATE_LIMIT"])
    def enhance():
        """
        Enhance a story page with every technique.

        Request body: {"text": str, "expansionTarget": number (optional, 100-500)}
        """
        return enhancement_response(get_text_service().enhance_text(get_json_arguments()))

    @flask_app.route('/api/enhance/custom', methods=['POST'])
    @limiter_instance.limit(lambda: current_app.config["ENHANCE_RATE_LIMIT"])
    def enhance_custom():
        """Enhance a story page with selected techniques."""
        return enhancement_response(get_text_service().custom_enhance_text(get_json_arguments()))
