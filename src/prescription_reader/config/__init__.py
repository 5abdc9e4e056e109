# ============================================================================
# src/prescription_reader/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .extraction_config import ExtractionSettings, extraction_settings
from .logging_config import LoggingSettings, logging_settings
