# ============================================================================
# FILE: src/prescription_reader/validators/__init__.py
# ============================================================================
"""
Validators Package

Advisory checks on extracted prescription data.
"""

from .prescription_validator import (
    PrescriptionValidator,
    ValidationResult,
    validate_prescription,
    NO_MEDICATIONS_WARNING,
    NO_DOCTOR_WARNING,
    NO_PATIENT_WARNING,
)

__all__ = [
    'PrescriptionValidator',
    'ValidationResult',
    'validate_prescription',
    'NO_MEDICATIONS_WARNING',
    'NO_DOCTOR_WARNING',
    'NO_PATIENT_WARNING',
]
