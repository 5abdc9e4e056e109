# ============================================================================
# src/prescription_reader/__init__.py
# ============================================================================
"""
Prescription Reader

Heuristic extraction of doctor, patient, date, medications and notes
from OCR text of a prescription.
"""

from .core.models import Medication, PrescriptionData
from .core.rules import ExtractionRules, default_rules
from .core.pipeline import PrescriptionParser, parse_prescription
from .core.summary import format_prescription_text
from .validators import PrescriptionValidator, ValidationResult, validate_prescription

__version__ = "1.0.0"

__all__ = [
    'Medication',
    'PrescriptionData',
    'ExtractionRules',
    'default_rules',
    'PrescriptionParser',
    'parse_prescription',
    'format_prescription_text',
    'PrescriptionValidator',
    'ValidationResult',
    'validate_prescription',
]
