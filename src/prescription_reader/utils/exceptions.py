# ============================================================================
# src/prescription_reader/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the prescription reader.

Extraction itself never raises for text input; these cover misuse
(wrong input types) and bad configuration.
"""


class PrescriptionReaderError(Exception):
    """Base exception for all prescription reader errors."""
    pass


class InvalidInputError(PrescriptionReaderError):
    """Input is not text and cannot be decoded as text."""
    def __init__(self, message: str, received_type: str):
        super().__init__(message)
        self.received_type = received_type


class ConfigurationError(PrescriptionReaderError):
    """Invalid configuration."""
    pass


class RuleConfigurationError(ConfigurationError):
    """Extraction rule could not be built."""
    def __init__(self, message: str, rule_name: str):
        super().__init__(message)
        self.rule_name = rule_name
