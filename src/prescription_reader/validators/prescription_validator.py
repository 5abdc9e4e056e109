# ============================================================================
# FILE: src/prescription_reader/validators/prescription_validator.py
# ============================================================================
"""
Prescription Completeness Checks

Advisory only: reports what a parse did not find so a reviewer can look
at the source image. Never blocks, never modifies the data it checks.

Example:
- No medications, no doctor → invalid, 2 warnings
- Everything present → valid, no warnings
"""

from dataclasses import dataclass, field
from typing import List
import logging

from prescription_reader.core.models import PrescriptionData


logger = logging.getLogger(__name__)

NO_MEDICATIONS_WARNING = "No medications detected in the prescription"
NO_DOCTOR_WARNING = "Doctor name not detected"
NO_PATIENT_WARNING = "Patient name not detected"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"isValid": self.is_valid, "warnings": list(self.warnings)}


class PrescriptionValidator:
    """
    Check parsed prescription data for completeness.

    Checks:
    - At least one medication
    - Doctor name present
    - Patient name present
    """

    def validate(self, data: PrescriptionData) -> ValidationResult:
        """
        Validate prescription data.

        Args:
            data: Any PrescriptionData, parsed here or built elsewhere

        Returns:
            ValidationResult (is_valid is True exactly when there are no warnings)
        """
        warnings: List[str] = []

        if not data.medications:
            warnings.append(NO_MEDICATIONS_WARNING)

        if not data.doctor_name:
            warnings.append(NO_DOCTOR_WARNING)

        if not data.patient_name:
            warnings.append(NO_PATIENT_WARNING)

        if warnings:
            logger.debug(f"Prescription incomplete: {'; '.join(warnings)}")

        return ValidationResult(is_valid=not warnings, warnings=warnings)


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def validate_prescription(data: PrescriptionData) -> ValidationResult:
    """
    Quick completeness check.

    Returns:
        ValidationResult
    """
    validator = PrescriptionValidator()
    return validator.validate(data)
