# ============================================================================
# src/prescription_reader/extractors/medication_segmenter.py
# ============================================================================
"""
Medication Segmentation

Walks the normalized lines once and partitions them into medication
entries. OCR output rarely has reliable delimiters between medication
blocks, so entry boundaries are guessed:

- A list-marker line ("1.", "1)", "*", "-", "•") always starts an entry
- While scanning, a short line with no dosage/frequency/duration content
  is taken for a drug name and starts an entry
- While collecting, each line fills the first empty detail field whose
  pattern matches, otherwise it is appended to the instructions
- One line of lookahead: when the next line looks like an entry start
  the current entry is committed and scanning resumes

Known misfire: a short instruction line such as "As needed" seen while
scanning is taken for a drug name.
"""

import logging
import re
from enum import Enum
from typing import List, Optional, Sequence

from prescription_reader.core.models import Medication, MedicationDraft
from prescription_reader.core.rules import ExtractionRules
from prescription_reader.utils.text_normalizer import collapse_whitespace

logger = logging.getLogger(__name__)

# Joining words stranded when a detail is cut from a name line
_DANGLING_CONNECTIVE = re.compile(r"(?:\s*\b(?:for|x)\b|\s*[,;:\-])+\s*$", re.IGNORECASE)


class SegmenterState(Enum):
    SCANNING = "scanning"
    COLLECTING = "collecting"


class MedicationSegmenter:
    """
    Two-state line classifier producing medication entries in source order.
    """

    def __init__(self, rules: ExtractionRules):
        self.rules = rules

    # ------------------------------------------------------------------
    # Line tests
    # ------------------------------------------------------------------

    def is_metadata_line(self, line: str) -> bool:
        """Header/letterhead lines never start or continue an entry."""
        lowered = line.lower()
        return any(keyword in lowered for keyword in self.rules.skip_keywords)

    def is_list_marker_line(self, line: str) -> bool:
        return any(pattern.match(line) for pattern in self.rules.list_marker_patterns)

    def has_detail(self, line: str) -> bool:
        return any(pattern.search(line) for pattern in self.rules.field_patterns.values())

    def is_short_line(self, line: str) -> bool:
        """Short line with no dosage, frequency or duration content."""
        if not self.rules.short_line_min < len(line) < self.rules.short_line_max:
            return False
        return not self.has_detail(line)

    def looks_like_entry_start(self, line: str) -> bool:
        return self.is_list_marker_line(line) or self.is_short_line(line)

    # ------------------------------------------------------------------
    # Segmentation
    # ------------------------------------------------------------------

    def segment(self, lines: Sequence[str]) -> List[Medication]:
        """
        Partition lines into medications.

        Args:
            lines: Trimmed, non-empty lines in source order

        Returns:
            Medications in order of appearance (possibly empty)
        """
        medications: List[Medication] = []
        current: Optional[MedicationDraft] = None
        state = SegmenterState.SCANNING

        for index, line in enumerate(lines):
            if self.is_metadata_line(line):
                continue

            starts_entry = self.is_list_marker_line(line) or (
                state is SegmenterState.SCANNING and self.is_short_line(line)
            )

            if starts_entry:
                self._flush(current, medications)
                current = self._start_entry(line)
                state = SegmenterState.COLLECTING
                continue

            if state is SegmenterState.SCANNING:
                continue

            self._collect(current, line)

            # Lookahead: commit now so the next line opens a fresh entry
            next_line = lines[index + 1] if index + 1 < len(lines) else None
            if next_line is not None and self.looks_like_entry_start(next_line):
                self._flush(current, medications)
                current = None
                state = SegmenterState.SCANNING

        self._flush(current, medications)

        logger.debug(f"Segmented {len(lines)} lines into {len(medications)} medications")
        return medications

    def strip_list_marker(self, line: str) -> str:
        """Remove the first list marker that matches, then tidy whitespace."""
        for pattern in self.rules.list_marker_patterns:
            match = pattern.match(line)
            if match:
                line = line[match.end():]
                break
        return collapse_whitespace(line)

    def _start_entry(self, line: str) -> MedicationDraft:
        """
        Open a new entry from its first line.

        The list marker is stripped. Dosage, frequency and duration written
        on the same line ("1. Amoxicillin 500mg") go to their fields and are
        cut from the name, unless nothing would be left of it. A connective
        left in front of a cut value ("for", "x", "-") goes with it.
        """
        full_name = self.strip_list_marker(line)
        draft = MedicationDraft(name=full_name)

        remainder = full_name
        lifted = {}
        for field_name, pattern in self.rules.field_patterns.items():
            match = pattern.search(remainder)
            if match:
                lifted[field_name] = match.group(1)
                head = _DANGLING_CONNECTIVE.sub("", remainder[:match.start(1)])
                remainder = head + " " + remainder[match.end(1):]

        name = collapse_whitespace(remainder).strip(" ,;:-")
        if lifted and name:
            draft.name = name
            for field_name, value in lifted.items():
                setattr(draft, field_name, value)

        return draft

    def _collect(self, draft: MedicationDraft, line: str) -> None:
        """Assign a detail line to the first empty field it matches."""
        for field_name, pattern in self.rules.field_patterns.items():
            if not draft.is_empty(field_name):
                continue
            match = pattern.search(line)
            if match:
                setattr(draft, field_name, match.group(1))
                return

        if len(line) < self.rules.max_instruction_length:
            draft.add_instruction(line)

    @staticmethod
    def _flush(draft: Optional[MedicationDraft], medications: List[Medication]) -> None:
        if draft is not None and draft.name:
            medications.append(draft.freeze())
