"""
Farkle - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Iterable

import pytest


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def bust_rolls() -> list[tuple[int, ...]]:
    """Rolls with nothing scorable for a fresh hand."""
    return [
        (2,),
        (3, 4),
        (2, 3, 4, 6),
        (2, 2, 3, 4, 6),
        (2, 2, 3, 3, 4, 6),
        (6, 6, 4, 4, 2, 3),
    ]


@pytest.fixture
def pairs_rolls() -> list[tuple[int, ...]]:
    """Rolls forming three pairs."""
    return [
        (2, 2, 4, 4, 6, 6),
        (1, 1, 5, 5, 3, 3),
        (6, 3, 6, 2, 3, 2),
    ]


# =============================================================================
# CONSOLE FIXTURES
# =============================================================================

@pytest.fixture
def face_source() -> Callable[[Iterable[int]], Callable[[], int]]:
    """Build a die-face source that yields the given faces in order."""
    def _make(faces: Iterable[int]) -> Callable[[], int]:
        return iter(faces).__next__
    return _make


@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Build an input function answering prompts from a script."""
    def _make(lines: Iterable[str]) -> Callable[[str], str]:
        answers = iter(lines)
        return lambda prompt: next(answers)
    return _make


@pytest.fixture
def output_lines() -> list[str]:
    """Collects lines written by the console layer."""
    return []
