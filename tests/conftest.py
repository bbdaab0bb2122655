"""
Shared pytest fixtures for test suite.
"""

import random

import pytest

from src.uno.analyzer import TextAnalyzer
from src.uno.enhancer import EnhancementProcessor
from tests.sample_texts import ScriptedRandom


@pytest.fixture
def analyzer():
    """Fresh text analyzer."""
    return TextAnalyzer()


@pytest.fixture
def always_rng():
    """Random source whose coin flips always succeed."""
    return ScriptedRandom(0.9)


@pytest.fixture
def never_rng():
    """Random source whose coin flips always fail."""
    return ScriptedRandom(0.1)


@pytest.fixture
def seeded_processor(analyzer):
    """Enhancement processor with a reproducible random source."""
    return EnhancementProcessor(analyzer, rng=random.Random(42))


@pytest.fixture
def scripted_processor(analyzer, always_rng):
    """Enhancement processor with a fully scripted random source."""
    return EnhancementProcessor(analyzer, rng=always_rng)
