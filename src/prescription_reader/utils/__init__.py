# ============================================================================
# src/prescription_reader/utils/__init__.py
# ============================================================================
"""
Utility modules for the prescription reader.
"""

from .exceptions import (
    PrescriptionReaderError,
    InvalidInputError,
    ConfigurationError,
    RuleConfigurationError,
)

from .logging import (
    setup_logging,
    JsonFormatter,
    log_performance,
)

from .text_normalizer import (
    coerce_text,
    split_lines,
    collapse_whitespace,
    clean_name,
)

__all__ = [
    # Exceptions
    'PrescriptionReaderError',
    'InvalidInputError',
    'ConfigurationError',
    'RuleConfigurationError',
    # Logging
    'setup_logging',
    'JsonFormatter',
    'log_performance',
    # Text
    'coerce_text',
    'split_lines',
    'collapse_whitespace',
    'clean_name',
]
