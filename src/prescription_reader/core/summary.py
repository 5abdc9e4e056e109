# ============================================================================
# src/prescription_reader/core/summary.py
# ============================================================================
"""
Plain-text rendering of a parsed prescription, suitable for copying
into a note or message.
"""

from typing import List

from .models import PrescriptionData

_DETAIL_LABELS = (
    ("dosage", "Dosage"),
    ("frequency", "Frequency"),
    ("duration", "Duration"),
    ("instructions", "Instructions"),
)


def format_prescription_text(data: PrescriptionData) -> str:
    """
    Render prescription data as labelled plain text.

    Example:
        Doctor: Jane Smith
        Patient: John Doe

        Medications:
        1. Amoxicillin
           Dosage: 500mg
    """
    lines: List[str] = []
    if data.doctor_name:
        lines.append(f"Doctor: {data.doctor_name}")
    if data.patient_name:
        lines.append(f"Patient: {data.patient_name}")
    if data.date:
        lines.append(f"Date: {data.date}")

    lines.append("")
    lines.append("Medications:")
    for number, med in enumerate(data.medications, start=1):
        lines.append(f"{number}. {med.name}")
        for attr, label in _DETAIL_LABELS:
            value = getattr(med, attr)
            if value:
                lines.append(f"   {label}: {value}")
        lines.append("")

    if data.notes:
        lines.append("")
        lines.append(f"Notes: {data.notes}")

    return "\n".join(lines) + "\n"
