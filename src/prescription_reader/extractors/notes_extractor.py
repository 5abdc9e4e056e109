# ============================================================================
# src/prescription_reader/extractors/notes_extractor.py
# ============================================================================
"""
Notes Extraction

Finds a trailing notes/instructions block ("Notes:", "Sig:", "Directions -")
anywhere in the text and returns what follows the label, up to a blank
line or a line starting with an uppercase letter.
"""

import logging
from typing import Optional

from prescription_reader.core.rules import ExtractionRules

logger = logging.getLogger(__name__)


class NotesExtractor:

    def __init__(self, rules: ExtractionRules):
        self.rules = rules

    def extract(self, text: str) -> Optional[str]:
        if self.rules.notes_pattern is None:
            return None

        match = self.rules.notes_pattern.search(text)
        if not match:
            return None

        notes = match.group(1).strip()
        if not notes:
            logger.debug("Notes label found with nothing after it")
            return None
        return notes
