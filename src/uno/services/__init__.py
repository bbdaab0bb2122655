"""
Service layer for UNO.

Services validate tool arguments and run the analyzer and enhancer
independently of the HTTP layer, so they can be used by:
- Flask route handlers
- CLI commands
"""

from .text_service import TextToolService, TOOL_DEFINITIONS

__all__ = [
    'TextToolService',
    'TOOL_DEFINITIONS',
]
