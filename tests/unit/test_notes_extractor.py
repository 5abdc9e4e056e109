# ============================================================================
# FILE: tests/unit/test_notes_extractor.py
# ============================================================================
"""
Unit tests for notes extraction
"""

import pytest

from prescription_reader.extractors import NotesExtractor


@pytest.fixture
def extractor(rules):
    return NotesExtractor(rules)


def test_notes_paragraph(extractor):
    """Test a notes label on its own paragraph"""
    text = "1. Amoxicillin 500mg\n\nNotes: Take with food"
    assert extractor.extract(text) == "Take with food"


def test_notes_stop_at_blank_line(extractor):
    """Test lowercase continuation lines are kept up to a blank line"""
    text = "Notes: rest well\nand drink fluids\n\nrecheck later"
    assert extractor.extract(text) == "rest well\nand drink fluids"


def test_notes_stop_at_capitalized_line(extractor):
    """Test a line starting with an uppercase letter ends the block"""
    assert extractor.extract("Sig: one tablet\nRefills: 2") == "one tablet"


def test_label_is_case_insensitive(extractor):
    """Test labels in capitals with a dash separator"""
    assert extractor.extract("DIRECTIONS - apply thinly") == "apply thinly"


def test_no_label(extractor):
    """Test text without a notes label"""
    assert extractor.extract("1. Amoxicillin 500mg") is None


def test_empty_notes_are_absent(extractor):
    """Test a bare label does not produce empty notes"""
    assert extractor.extract("Notes:") is None
