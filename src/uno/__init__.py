"""
UNO (Unified Narrative Operator)

Analyzes a page of prose for narrative context and weak spots, and expands
it through five fixed enhancement techniques: Golden Shadow, Environmental
Expansion, Action Scene, Prose Smoothing and Repetition Elimination.
"""

from .analyzer import TextAnalyzer, get_text_analyzer
from .report import AnalysisReport, render_report
from .enhancer import EnhancementProcessor, EnhancementRun, get_enhancement_processor
from .models import EnhancementOptions

__version__ = "0.1.0"

__all__ = [
    "TextAnalyzer",
    "get_text_analyzer",
    "AnalysisReport",
    "render_report",
    "EnhancementProcessor",
    "EnhancementRun",
    "get_enhancement_processor",
    "EnhancementOptions",
]
