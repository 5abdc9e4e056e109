# ============================================================================
# src/prescription_reader/core/__init__.py
# ============================================================================
"""
Core records and extraction rules.

The pipeline itself lives in core.pipeline and is imported from there
(it depends on the extractors, which depend on this package).
"""

from .models import Medication, PrescriptionData, MedicationDraft
from .rules import ExtractionRules, default_rules, DETAIL_FIELDS
