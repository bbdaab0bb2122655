"""
Word counting and expansion arithmetic.

Words are whitespace-delimited tokens; expansion is expressed as a
percentage of the original length (200 = double).
"""

import math

DEFAULT_EXPANSION_TARGET = 200


def round_half_up(value):
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


class WordCounter:
    """
    Counts words and computes expansion targets.
    """

    def count_words(self, text):
        """
        Count words in text.

        Args:
            text: String to count words in

        Returns:
            Number of non-empty whitespace-delimited tokens
        """
        if not text or not isinstance(text, str):
            return 0
        return len(text.split())

    def target_count(self, original_count, expansion_target=DEFAULT_EXPANSION_TARGET):
        """
        Target length for an expansion percentage.

        Args:
            original_count: Original word or character count
            expansion_target: Desired percentage of the original (default: 200)

        Returns:
            round(original_count * expansion_target / 100)
        """
        return round_half_up(original_count * (expansion_target / 100))

    def expansion_percent(self, original_count, final_count):
        """
        Achieved expansion as a whole percentage.

        Returns 0 when there was nothing to expand.
        """
        if original_count <= 0:
            return 0
        return round_half_up((final_count / original_count) * 100)

    def has_reached_target(self, original_count, current_count, expansion_target):
        """True when current_count is at or above the expansion target."""
        if original_count <= 0:
            return False
        return (current_count / original_count) * 100 >= expansion_target
