# ============================================================================
# FILE: tests/unit/test_header_extractor.py
# ============================================================================
"""
Unit tests for header field extraction
"""

import pytest

from prescription_reader.extractors import HeaderExtractor, HeaderFields


@pytest.fixture
def extractor(rules):
    return HeaderExtractor(rules)


# ============================================================================
# DOCTOR
# ============================================================================

def test_doctor_from_dr_label(extractor, sample_prescription_text):
    """Test "Dr." label stops at the end of its line"""
    assert extractor.extract_doctor(sample_prescription_text) == "Jane Smith"


def test_doctor_label_is_cleaned(extractor):
    """Test whitespace runs, trailing punctuation and casing are normalized"""
    assert extractor.extract_doctor("Doctor: sarah   connor.\n") == "Sarah Connor"


def test_doctor_from_prescribed_by(extractor):
    """Test "prescribed by" label when no Dr./Doctor label exists"""
    text = "Prescribed by: Gregory House\nAmoxicillin 500mg"
    assert extractor.extract_doctor(text) == "Gregory House"


def test_doctor_from_credential_suffix(extractor):
    """Test bare name followed by a credential"""
    text = "Gregory House, MD\nAmoxicillin 500mg"
    assert extractor.extract_doctor(text) == "Gregory House"


def test_doctor_label_priority(extractor):
    """Test Dr. label wins over an earlier credential-suffix name"""
    text = "Allison Cameron, MD\nDr. Robert Chase"
    assert extractor.extract_doctor(text) == "Robert Chase"


def test_dr_inside_word_is_not_a_label(extractor):
    """Test "dr" inside "Address" is not read as a doctor label"""
    assert extractor.extract_doctor("Address: 12 Elm Street") is None


# ============================================================================
# PATIENT
# ============================================================================

def test_patient_from_label(extractor, sample_prescription_text):
    """Test "Patient:" label"""
    assert extractor.extract_patient(sample_prescription_text) == "John Doe"


def test_patient_name_label(extractor):
    """Test "Patient Name:" does not capture the word "Name" """
    assert extractor.extract_patient("Patient Name: jane roe\n") == "Jane Roe"


def test_patient_equal_to_doctor_is_rejected(extractor):
    """Test a patient capture equal to the doctor falls through to the next candidate"""
    text = "Doctor: Ann Lee\nName: Ann Lee\nDispense to: Bob Ray"
    header = extractor.extract(text)

    assert header.doctor_name == "Ann Lee"
    assert header.patient_name == "Bob Ray"


def test_patient_absent_when_only_doctor_name_found(extractor):
    """Test no patient is reported when every candidate is the doctor"""
    text = "Name: John Doe\nDr. John Doe"
    header = extractor.extract(text)

    assert header.doctor_name == "John Doe"
    assert header.patient_name is None


# ============================================================================
# DATE
# ============================================================================

@pytest.mark.parametrize("text,expected", [
    ("Date: 15/01/2024", "15/01/2024"),
    ("Issued 5-1-24", "5-1-24"),
    ("2024-01-15 follow up", "2024-01-15"),
    ("Visit on March 5, 2024", "March 5, 2024"),
    ("Seen 5th March 2024", "5th March 2024"),
])
def test_date_formats(extractor, text, expected):
    """Test each supported date shape is returned verbatim"""
    assert extractor.extract_date(text) == expected


def test_day_first_date_has_priority(extractor):
    """Test candidate order decides, not position in the text"""
    text = "Printed 2024/01/15\nReview 20/02/2024"
    assert extractor.extract_date(text) == "20/02/2024"


def test_no_header_fields(extractor):
    """Test text without labels leaves every field absent"""
    assert extractor.extract("") == HeaderFields()
    assert extractor.extract("Amoxicillin 500mg") == HeaderFields()
