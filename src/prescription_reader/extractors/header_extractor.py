# ============================================================================
# src/prescription_reader/extractors/header_extractor.py
# ============================================================================
"""
Header Field Extraction

Pulls doctor name, patient name and date out of the whole OCR text
(not line by line). Each field has an ordered list of candidate
patterns; the first one that matches wins. A field with no matching
candidate is simply left out.
"""

import logging
from dataclasses import dataclass
from re import Pattern
from typing import Optional, Sequence

from prescription_reader.core.rules import ExtractionRules
from prescription_reader.utils.text_normalizer import clean_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderFields:
    doctor_name: Optional[str] = None
    patient_name: Optional[str] = None
    date: Optional[str] = None


class HeaderExtractor:
    """
    Extracts prescription header fields.

    Supports:
    - Doctor: "Dr."/"Doctor" label, "prescribed by"/"physician" label,
      bare name with a credential suffix (MD, DO)
    - Patient: "patient"/"name" label, "for"/"to" label
    - Date: D/M/Y, Y/M/D, spelled-month dates (returned verbatim)
    """

    def __init__(self, rules: ExtractionRules):
        self.rules = rules

    def extract(self, text: str) -> HeaderFields:
        doctor_name = self.extract_doctor(text)
        patient_name = self.extract_patient(text, doctor_name)
        date = self.extract_date(text)

        logger.debug(
            f"Header fields: doctor={doctor_name is not None}, "
            f"patient={patient_name is not None}, date={date is not None}"
        )
        return HeaderFields(doctor_name=doctor_name, patient_name=patient_name, date=date)

    def extract_doctor(self, text: str) -> Optional[str]:
        return self._first_name(self.rules.doctor_patterns, text)

    def extract_patient(self, text: str, doctor_name: Optional[str] = None) -> Optional[str]:
        """
        Extract patient name.

        A capture equal to the doctor name is rejected and the next
        candidate pattern is tried, so one name is never reported as both.
        """
        return self._first_name(self.rules.patient_patterns, text, exclude=doctor_name)

    def extract_date(self, text: str) -> Optional[str]:
        for index, pattern in enumerate(self.rules.date_patterns):
            match = pattern.search(text)
            if match:
                logger.debug(f"Date matched candidate {index}")
                return match.group(1)
        return None

    def _first_name(
        self,
        patterns: Sequence[Pattern],
        text: str,
        exclude: Optional[str] = None
    ) -> Optional[str]:
        for index, pattern in enumerate(patterns):
            match = pattern.search(text)
            if not match:
                continue

            name = clean_name(match.group(1))
            if not name:
                continue
            if exclude is not None and name == exclude:
                logger.debug(f"Candidate {index} captured the doctor name, trying next")
                continue

            logger.debug(f"Name matched candidate {index}")
            return name

        return None
