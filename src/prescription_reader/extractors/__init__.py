# ============================================================================
# src/prescription_reader/extractors/__init__.py
# ============================================================================
"""
Extraction stages of the prescription pipeline
"""

from .header_extractor import HeaderExtractor, HeaderFields
from .medication_segmenter import MedicationSegmenter, SegmenterState
from .fallback_extractor import FallbackNameExtractor
from .notes_extractor import NotesExtractor

__all__ = [
    'HeaderExtractor',
    'HeaderFields',
    'MedicationSegmenter',
    'SegmenterState',
    'FallbackNameExtractor',
    'NotesExtractor',
]
