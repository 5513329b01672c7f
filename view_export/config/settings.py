"""
Export configuration.

Supports:
- .env file and environment variable overrides
- Spreadsheet layout limits (sheet name length, column width cap)
- CSV encoding options
- Collaborator policy (empty exports, default selection strategy)
- Logging options
"""

from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ============================================================================
    # ENVIRONMENT
    # ============================================================================
    APP_ENV: Literal["development", "staging", "production", "test"] = "development"

    # ============================================================================
    # SPREADSHEET (XLSX) SETTINGS
    # ============================================================================
    EXPORT_DEFAULT_SHEET_NAME: str = "Sheet1"
    EXPORT_MAX_SHEET_NAME_LENGTH: int = 31  # Excel hard limit

    # Column width heuristic: min(longest value + padding, cap)
    EXPORT_MAX_COLUMN_WIDTH: int = 50
    EXPORT_COLUMN_WIDTH_PADDING: int = 2

    # Cosmetic styling (header emphasis and borders)
    EXPORT_XLSX_STYLE_HEADER: bool = True
    EXPORT_XLSX_HEADER_FILL: str = "E6E6FA"  # Lavender
    EXPORT_XLSX_CELL_BORDERS: bool = True

    # Control characters are illegal in OOXML; strip them instead of failing
    EXPORT_XLSX_STRIP_ILLEGAL_CHARACTERS: bool = True

    # ============================================================================
    # CSV SETTINGS
    # ============================================================================
    EXPORT_CSV_INCLUDE_BOM: bool = False
    EXPORT_CSV_LINE_TERMINATOR: str = "\n"

    # ============================================================================
    # FILENAME SETTINGS
    # ============================================================================
    EXPORT_FALLBACK_BASENAME: str = "export"
    EXPORT_DATE_FORMAT: str = "%Y-%m-%d"

    # ============================================================================
    # COLLABORATOR SETTINGS (CLI / export step)
    # ============================================================================
    EXPORT_REQUIRE_RECORDS: bool = True  # Block exports of empty views
    EXPORT_OUTPUT_DIR: str = "exports"
    EXPORT_SELECTION_STRATEGY: Literal["cursor", "manual", "first"] = "cursor"

    # ============================================================================
    # LOGGING
    # ============================================================================
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_DIR: str = ".logs"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


# Global settings instance
settings = Settings()
