"""
Configuration management using Pydantic Settings.

Environment variables (prefix TAXONOMY_TREE_):
- TAXONOMY_TREE_INPUT_FILE: Spreadsheet read when no input path is given
- TAXONOMY_TREE_OUTPUT_FILE: JSON file written when no output path is given
- TAXONOMY_TREE_SHEET_NAME: Worksheet name or index (default: first sheet)
- TAXONOMY_TREE_DATABASE_URL: SQLAlchemy URL for storing built trees
- TAXONOMY_TREE_LOG_LEVEL: Logging level
"""
from typing import Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import (
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_REPORT_MAX_EXAMPLES,
    DEFAULT_REPORT_TOP_N,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TAXONOMY_TREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input / output
    input_file: str = Field(default=DEFAULT_INPUT_FILE)
    output_file: str = Field(default=DEFAULT_OUTPUT_FILE)
    sheet_name: Union[int, str] = Field(default=0)
    json_indent: int = Field(default=2, ge=0)

    # Tree storage
    database_url: Optional[str] = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")

    # Reporting
    report_top_n: int = Field(default=DEFAULT_REPORT_TOP_N, ge=0)
    report_max_examples: int = Field(default=DEFAULT_REPORT_MAX_EXAMPLES, ge=0)

    @field_validator("sheet_name", mode="before")
    @classmethod
    def _sheet_index(cls, value):
        # "0" from the environment means the first sheet, not a sheet named "0"
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        return value

    def get_report_config(self) -> dict:
        """Get reporting configuration as dictionary."""
        return {
            'top_n': self.report_top_n,
            'max_examples': self.report_max_examples,
        }


# Global settings instance
settings = Settings()
