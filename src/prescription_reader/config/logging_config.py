# ============================================================================
# src/prescription_reader/config/logging_config.py
# ============================================================================
"""
Logging Settings
- Log level
- Output format
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RX_READER_")

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit log records as JSON lines"
    )

logging_settings = LoggingSettings()
