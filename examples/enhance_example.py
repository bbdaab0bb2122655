"""
Example usage of UNO analysis and enhancement

Runs the analyzer over a short story page, then enhances the same page
with every technique and with a custom selection at a 150% target.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from src.uno.analyzer import get_text_analyzer
from src.uno.enhancer import get_enhancement_processor
from src.uno.models import EnhancementOptions


SAMPLE_STORY = """Maya ran through the forest, her breath coming in ragged gasps. Behind her, the creature crashed through the undergrowth.

She jumped over a fallen log and dodged between two trees. The creature lunged but missed. She grabbed a branch and threw it back at the beast.

Maya rushed toward the river. She knew that if she could reach the water, she might escape. The creature was still following her, but she was faster now."""


def example_analysis():
    """Print the Markdown analysis report."""
    print("=== Analysis ===\n")
    print(get_text_analyzer().analyze_text(SAMPLE_STORY))


def example_full_enhancement():
    """Enhance with every technique at the default 200% target."""
    print("\n=== Full Enhancement ===\n")
    print(get_enhancement_processor().enhance_text(SAMPLE_STORY))


def example_custom_enhancement():
    """Enhance with environmental expansion and prose smoothing only."""
    options = EnhancementOptions(
        enable_golden_shadow=False,
        enable_action_scene=False,
        enable_repetition_elimination=False,
    )
    print("\n=== Custom Enhancement (150%) ===\n")
    print(get_enhancement_processor().custom_enhance_text(SAMPLE_STORY, 150, options))


if __name__ == "__main__":
    example_analysis()
    example_full_enhancement()
    example_custom_enhancement()
