# ============================================================================
# src/prescription_reader/core/pipeline.py
# ============================================================================
"""
Prescription Parsing Pipeline

This is the MAIN entry point for turning OCR text into PrescriptionData.

Flow:
1. Normalize text into trimmed, non-empty lines
2. Extract header fields (doctor, patient, date) from the whole text
3. Segment lines into medication entries
4. If no medication was segmented, guess names from word shape
5. Extract the notes block from the whole text

Every stage runs on the text of a single call; nothing is shared between
calls except the immutable rules. Missing structure yields absent fields
or an empty medication list, never an exception.
"""

import logging
from typing import Any, Optional

from .models import PrescriptionData
from .rules import ExtractionRules, default_rules
from ..extractors import (
    HeaderExtractor,
    MedicationSegmenter,
    FallbackNameExtractor,
    NotesExtractor,
)
from ..utils.logging import log_performance
from ..utils.text_normalizer import coerce_text, split_lines

logger = logging.getLogger(__name__)


class PrescriptionParser:
    """
    Heuristic prescription parser.

    Holds one set of extraction rules; parse() may be called any number
    of times, from any number of threads.
    """

    def __init__(self, rules: Optional[ExtractionRules] = None):
        self.rules = rules or default_rules()
        self.header_extractor = HeaderExtractor(self.rules)
        self.segmenter = MedicationSegmenter(self.rules)
        self.fallback_extractor = FallbackNameExtractor(self.rules)
        self.notes_extractor = NotesExtractor(self.rules)

    @log_performance(logger, "Prescription parsing")
    def parse(self, text: Any) -> PrescriptionData:
        """
        Parse OCR text into structured prescription data.

        Args:
            text: Recognized text (str; UTF-8 bytes and None are accepted)

        Returns:
            PrescriptionData, with medications always present (maybe empty)

        Raises:
            InvalidInputError: text is neither str, bytes nor None

        Example:
            data = parser.parse("Dr. Jane Smith\\n1. Amoxicillin 500mg")
            data.medications[0].dosage  # "500mg"
        """
        text = coerce_text(text)
        lines = split_lines(text)

        header = self.header_extractor.extract(text)

        medications = self.segmenter.segment(lines)
        if not medications:
            logger.debug("Segmenter found no medications, using fallback extraction")
            medications = self.fallback_extractor.extract(text)

        notes = self.notes_extractor.extract(text)

        logger.debug(
            f"Parsed {len(lines)} lines: {len(medications)} medications, "
            f"notes={'yes' if notes else 'no'}"
        )

        return PrescriptionData(
            doctor_name=header.doctor_name,
            patient_name=header.patient_name,
            date=header.date,
            medications=tuple(medications),
            notes=notes,
        )


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def parse_prescription(text: Any, rules: Optional[ExtractionRules] = None) -> PrescriptionData:
    """
    Quick prescription parse with the default (or given) rules.

    Returns:
        PrescriptionData
    """
    parser = PrescriptionParser(rules)
    return parser.parse(text)
