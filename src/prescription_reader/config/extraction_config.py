# ============================================================================
# src/prescription_reader/config/extraction_config.py
# ============================================================================
"""
Extraction Heuristic Settings
- Short-line window used to spot medication names
- Instruction line cap
- Fallback token window and result cap
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class ExtractionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RX_READER_")

    SHORT_LINE_MIN_LENGTH: int = Field(
        default=2,
        ge=0,
        description="A candidate name line must be longer than this (exclusive)"
    )
    SHORT_LINE_MAX_LENGTH: int = Field(
        default=50,
        ge=1,
        description="A candidate name line must be shorter than this (exclusive)"
    )
    MAX_INSTRUCTION_LENGTH: int = Field(
        default=100,
        ge=1,
        description="Lines this long or longer are never folded into instructions"
    )
    FALLBACK_MIN_TOKEN_LENGTH: int = Field(
        default=4,
        ge=1,
        description="Shortest token (inclusive) proposed as a fallback medication name"
    )
    FALLBACK_MAX_TOKEN_LENGTH: int = Field(
        default=29,
        ge=1,
        description="Longest token (inclusive) proposed as a fallback medication name"
    )
    FALLBACK_MAX_RESULTS: int = Field(
        default=10,
        ge=0,
        description="Maximum number of fallback medication names"
    )

    @model_validator(mode="after")
    def check_windows(self):
        if self.SHORT_LINE_MIN_LENGTH >= self.SHORT_LINE_MAX_LENGTH:
            raise ValueError("SHORT_LINE_MIN_LENGTH must be below SHORT_LINE_MAX_LENGTH")
        if self.FALLBACK_MIN_TOKEN_LENGTH > self.FALLBACK_MAX_TOKEN_LENGTH:
            raise ValueError("FALLBACK_MIN_TOKEN_LENGTH must not exceed FALLBACK_MAX_TOKEN_LENGTH")
        return self

extraction_settings = ExtractionSettings()
