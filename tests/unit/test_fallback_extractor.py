# ============================================================================
# FILE: tests/unit/test_fallback_extractor.py
# ============================================================================
"""
Unit tests for fallback medication name extraction
"""

import pytest

from prescription_reader.core.models import Medication
from prescription_reader.extractors import FallbackNameExtractor


@pytest.fixture
def extractor(rules):
    return FallbackNameExtractor(rules)


def test_capitalized_words(extractor):
    """Test capitalized words are proposed, stop words and short words are not"""
    names = extractor.extract_names("Take Amoxicillin and Ibuprofen daily")
    assert names == ["Amoxicillin", "Ibuprofen"]


def test_drug_suffixes(extractor):
    """Test lowercase generic names are found by their endings"""
    names = extractor.extract_names("take atorvastatin, lisinopril")
    assert names == ["atorvastatin", "lisinopril"]


def test_stop_words_never_proposed(extractor):
    """Test stop words are excluded regardless of casing"""
    assert extractor.extract_names("Daily Twice Every daily EVERY") == []


def test_token_length_bounds(extractor):
    """Test 4-29 character tokens only"""
    longest = "A" + "b" * 28
    too_long = "A" + "b" * 29

    assert extractor.extract_names(f"Abc {longest} {too_long}") == [longest]


def test_names_are_distinct(extractor):
    """Test repeated words are proposed once"""
    assert extractor.extract_names("Aspirin Aspirin\nAspirin") == ["Aspirin"]


def test_result_cap(extractor):
    """Test only the first ten names are kept"""
    text = "Alpha Bravo Charlie Delta Echo Foxtrot Golf Hotel India Juliet Kilo Lima"
    names = extractor.extract_names(text)

    assert len(names) == 10
    assert names[0] == "Alpha"
    assert names[-1] == "Juliet"


def test_extract_builds_name_only_medications(extractor):
    """Test fallback medications carry nothing but a name"""
    assert extractor.extract("Metoprolol") == [Medication(name="Metoprolol")]


def test_custom_result_cap(custom_rules):
    """Test the cap comes from the rules"""
    from prescription_reader.config import ExtractionSettings

    rules = custom_rules(settings=ExtractionSettings(FALLBACK_MAX_RESULTS=1))
    extractor = FallbackNameExtractor(rules)

    assert extractor.extract_names("Amoxicillin Ibuprofen") == ["Amoxicillin"]
