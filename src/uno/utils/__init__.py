"""
Utility modules for UNO.

Modules:
- word_count: Word counting and expansion arithmetic
- errors: API error types and Flask error handlers
"""

from .word_count import WordCounter, DEFAULT_EXPANSION_TARGET, round_half_up

__all__ = [
    "WordCounter",
    "DEFAULT_EXPANSION_TARGET",
    "round_half_up",
]
