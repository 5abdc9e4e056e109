# ============================================================================
# src/prescription_reader/core/models.py
# ============================================================================
"""
Prescription records
- Medication: one extracted drug entry
- PrescriptionData: the parse result for one OCR text
- MedicationDraft: the entry under construction while segmenting

Returned records are frozen. to_dict() produces the camelCase wire shape
with absent optional fields left out.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

# Attribute name -> wire key
_MEDICATION_KEYS = (
    ("name", "name"),
    ("dosage", "dosage"),
    ("frequency", "frequency"),
    ("duration", "duration"),
    ("instructions", "instructions"),
)

_HEADER_KEYS = (
    ("doctor_name", "doctorName"),
    ("patient_name", "patientName"),
    ("date", "date"),
)


@dataclass(frozen=True)
class Medication:
    name: str
    dosage: Optional[str] = None
    frequency: Optional[str] = None
    duration: Optional[str] = None
    instructions: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Medication name must be a non-empty string")

    def to_dict(self) -> Dict[str, str]:
        return {
            key: getattr(self, attr)
            for attr, key in _MEDICATION_KEYS
            if getattr(self, attr) is not None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Medication":
        return cls(**{attr: data.get(key) for attr, key in _MEDICATION_KEYS})


@dataclass(frozen=True)
class PrescriptionData:
    doctor_name: Optional[str] = None
    patient_name: Optional[str] = None
    date: Optional[str] = None
    medications: Tuple[Medication, ...] = ()
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            key: getattr(self, attr)
            for attr, key in _HEADER_KEYS
            if getattr(self, attr) is not None
        }
        data["medications"] = [med.to_dict() for med in self.medications]
        if self.notes is not None:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrescriptionData":
        """
        Rebuild a record from its wire shape.

        Useful for validating prescription data that came from somewhere
        other than this parser. A missing "medications" key means none.
        """
        medications = tuple(
            Medication.from_dict(item) for item in data.get("medications") or []
        )
        return cls(
            medications=medications,
            notes=data.get("notes"),
            **{attr: data.get(key) for attr, key in _HEADER_KEYS}
        )


@dataclass
class MedicationDraft:
    """Mutable accumulator for the entry currently being segmented."""
    name: str
    dosage: Optional[str] = None
    frequency: Optional[str] = None
    duration: Optional[str] = None
    instruction_parts: list = field(default_factory=list)

    def is_empty(self, field_name: str) -> bool:
        return getattr(self, field_name) is None

    def add_instruction(self, line: str) -> None:
        self.instruction_parts.append(line)

    def freeze(self) -> Medication:
        return Medication(
            name=self.name,
            dosage=self.dosage,
            frequency=self.frequency,
            duration=self.duration,
            instructions=" ".join(self.instruction_parts) or None,
        )
