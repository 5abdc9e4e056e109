# ============================================================================
# src/prescription_reader/extractors/fallback_extractor.py
# ============================================================================
"""
Fallback medication names, used only when segmentation found nothing.
Guesses from word shape alone: capitalized words and common generic
drug-name endings.
"""

import re
import logging
from typing import List

from prescription_reader.core.models import Medication
from prescription_reader.core.rules import ExtractionRules

logger = logging.getLogger(__name__)

_TOKEN_SEPARATOR = re.compile(r"\s+")


class FallbackNameExtractor:

    def __init__(self, rules: ExtractionRules):
        self.rules = rules

    def extract_names(self, text: str) -> List[str]:
        """Distinct medication-like words in order of appearance, capped."""
        names: List[str] = []
        limit = self.rules.fallback_max_results

        for token in _TOKEN_SEPARATOR.split(text):
            if len(names) >= limit:
                break
            if not self._is_candidate(token):
                continue

            for pattern in self.rules.fallback_name_patterns:
                match = pattern.search(token)
                if match:
                    name = match.group(0)
                    if name not in names:
                        names.append(name)
                    break

        return names

    def extract(self, text: str) -> List[Medication]:
        names = self.extract_names(text)
        if names:
            logger.info(f"Fallback extraction proposed {len(names)} medication names")
        return [Medication(name=name) for name in names]

    def _is_candidate(self, token: str) -> bool:
        if not self.rules.fallback_min_length <= len(token) <= self.rules.fallback_max_length:
            return False
        return token.lower() not in self.rules.stop_words
