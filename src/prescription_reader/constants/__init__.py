# ============================================================================
# src/prescription_reader/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .patterns import (
    DOCTOR_PATTERNS,
    PATIENT_PATTERNS,
    DATE_PATTERNS,
    FIELD_PATTERNS,
    LIST_MARKER_PATTERNS,
    SKIP_KEYWORDS,
    FALLBACK_STOP_WORDS,
    DRUG_SUFFIXES,
    FALLBACK_NAME_PATTERNS,
    NOTE_LABELS,
    NOTES_PATTERN,
)
