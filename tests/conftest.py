# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest

from prescription_reader.core.rules import ExtractionRules, default_rules
from prescription_reader.core.pipeline import PrescriptionParser


@pytest.fixture
def sample_prescription_text():
    """OCR text of a typical two-item prescription"""
    return (
        "Dr. Jane Smith\n"
        "Patient: John Doe\n"
        "1. Amoxicillin 500mg\n"
        "Take twice daily\n"
        "For 7 days\n"
        "2. Ibuprofen\n"
        "As needed"
    )


@pytest.fixture
def noisy_prescription_text():
    """Letterhead, blank lines and a notes block, the way OCR returns it"""
    return """
    Springfield Medical Center Prescription Form
    Phone: 555-0100   License #44821

    Doctor: gregory   house.
    Patient Name: lisa cuddy
    Date: 12/03/2024

    Rx
    * Lisinopril 10mg
    once daily
    * Atorvastatin 20 mg
    at bedtime
    for 3 months

    Notes: take with water and avoid grapefruit juice during treatment
    """


@pytest.fixture
def rules():
    """Rules built from the shipped tables"""
    return default_rules()


@pytest.fixture
def custom_rules():
    """Factory for rules with overridden tables"""
    def _build(**overrides):
        return ExtractionRules.build(**overrides)
    return _build


@pytest.fixture
def parser(rules):
    """Parser using the default rules"""
    return PrescriptionParser(rules)
