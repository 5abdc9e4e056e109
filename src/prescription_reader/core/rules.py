# ============================================================================
# src/prescription_reader/core/rules.py
# ============================================================================
"""
Extraction Rules

Compiles the pattern tables in constants.patterns and the thresholds in
ExtractionSettings into one immutable object handed to every extractor.
Swap in a different rules object to tune the heuristics without touching
the extractors.
"""

import re
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from re import Pattern
from typing import Dict, Iterable, Optional, Sequence, Tuple

from prescription_reader.config import ExtractionSettings, extraction_settings
from prescription_reader.constants import (
    DOCTOR_PATTERNS,
    PATIENT_PATTERNS,
    DATE_PATTERNS,
    FIELD_PATTERNS,
    LIST_MARKER_PATTERNS,
    SKIP_KEYWORDS,
    FALLBACK_STOP_WORDS,
    FALLBACK_NAME_PATTERNS,
    NOTES_PATTERN,
)
from prescription_reader.utils.exceptions import RuleConfigurationError

logger = logging.getLogger(__name__)

# Medication fields a detail pattern can fill
DETAIL_FIELDS = frozenset({"dosage", "frequency", "duration"})


def _compile(rule_name: str, source: str, flags: int = re.IGNORECASE) -> Pattern:
    try:
        return re.compile(source, flags)
    except re.error as e:
        raise RuleConfigurationError(
            f"Pattern for '{rule_name}' does not compile: {e}",
            rule_name=rule_name
        ) from e


def _compile_all(rule_name: str, sources: Iterable[str]) -> Tuple[Pattern, ...]:
    return tuple(
        _compile(f"{rule_name}[{i}]", source)
        for i, source in enumerate(sources)
    )


@dataclass(frozen=True)
class ExtractionRules:
    # Header
    doctor_patterns: Tuple[Pattern, ...]
    patient_patterns: Tuple[Pattern, ...]
    date_patterns: Tuple[Pattern, ...]

    # Segmenter
    field_patterns: Dict[str, Pattern]
    list_marker_patterns: Tuple[Pattern, ...]
    skip_keywords: Tuple[str, ...]
    short_line_min: int = 2
    short_line_max: int = 50
    max_instruction_length: int = 100

    # Fallback
    fallback_name_patterns: Tuple[Pattern, ...] = field(default=())
    stop_words: frozenset = field(default=frozenset())
    fallback_min_length: int = 4
    fallback_max_length: int = 29
    fallback_max_results: int = 10

    # Notes
    notes_pattern: Optional[Pattern] = None

    @classmethod
    def build(
        cls,
        settings: Optional[ExtractionSettings] = None,
        doctor_patterns: Sequence[str] = DOCTOR_PATTERNS,
        patient_patterns: Sequence[str] = PATIENT_PATTERNS,
        date_patterns: Sequence[str] = DATE_PATTERNS,
        field_patterns: Optional[Dict[str, str]] = None,
        list_marker_patterns: Sequence[str] = LIST_MARKER_PATTERNS,
        skip_keywords: Iterable[str] = SKIP_KEYWORDS,
        fallback_name_patterns: Sequence[str] = FALLBACK_NAME_PATTERNS,
        stop_words: Iterable[str] = FALLBACK_STOP_WORDS,
        notes_pattern: str = NOTES_PATTERN,
    ) -> "ExtractionRules":
        """
        Compile rule tables into an ExtractionRules.

        Every argument defaults to the shipped tables, so callers only
        pass what they want to override.

        Raises:
            RuleConfigurationError: a pattern does not compile, or the
                field table is missing one of dosage/frequency/duration
        """
        settings = settings or extraction_settings
        field_sources = dict(field_patterns if field_patterns is not None else FIELD_PATTERNS)

        missing = DETAIL_FIELDS - set(field_sources)
        if missing:
            raise RuleConfigurationError(
                f"Field table is missing patterns for: {', '.join(sorted(missing))}",
                rule_name="field_patterns"
            )
        unknown = set(field_sources) - DETAIL_FIELDS
        if unknown:
            raise RuleConfigurationError(
                f"Field table has patterns for unknown fields: {', '.join(sorted(unknown))}",
                rule_name="field_patterns"
            )

        rules = cls(
            doctor_patterns=_compile_all("doctor", doctor_patterns),
            patient_patterns=_compile_all("patient", patient_patterns),
            date_patterns=_compile_all("date", date_patterns),
            field_patterns={
                name: _compile(name, source)
                for name, source in field_sources.items()
            },
            list_marker_patterns=_compile_all("list_marker", list_marker_patterns),
            skip_keywords=tuple(keyword.lower() for keyword in skip_keywords),
            short_line_min=settings.SHORT_LINE_MIN_LENGTH,
            short_line_max=settings.SHORT_LINE_MAX_LENGTH,
            max_instruction_length=settings.MAX_INSTRUCTION_LENGTH,
            fallback_name_patterns=_compile_all("fallback_name", fallback_name_patterns),
            stop_words=frozenset(word.lower() for word in stop_words),
            fallback_min_length=settings.FALLBACK_MIN_TOKEN_LENGTH,
            fallback_max_length=settings.FALLBACK_MAX_TOKEN_LENGTH,
            fallback_max_results=settings.FALLBACK_MAX_RESULTS,
            notes_pattern=_compile("notes", notes_pattern),
        )
        logger.debug(
            f"Compiled extraction rules: {len(rules.field_patterns)} field patterns, "
            f"{len(rules.skip_keywords)} skip keywords"
        )
        return rules


@lru_cache(maxsize=1)
def default_rules() -> ExtractionRules:
    """Rules built from the shipped tables and the global settings."""
    return ExtractionRules.build()
