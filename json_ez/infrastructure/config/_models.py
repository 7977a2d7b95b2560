# json_ez/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import JSONDecodeError
from json import load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError

# Local imports
from json_ez.core.types.json import JSONDict

logger = getLogger(__name__)

DEFAULT_CONFIG_FILE = "json_ez.json"


class ConversionConfig(BaseModel):
    """Typed retrieval configuration"""

    strict: bool = Field(
        True, description="Reject coercions such as '42' -> 42 or 1 -> True when reading values"
    )


class EncodingConfig(BaseModel):
    """Textual encoding configuration"""

    indent: int | None = Field(
        None, ge=0, description="Indentation for encoded text, None for compact"
    )


class ErrorsConfig(BaseModel):
    """Error rendering configuration"""

    snapshot_max_length: int | None = Field(
        None, gt=0, description="Clip snapshots in error messages to this many characters"
    )


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root configuration model"""

    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    encoding: EncodingConfig = Field(default_factory=EncodingConfig)
    errors: ErrorsConfig = Field(default_factory=ErrorsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILE)

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = load(f)
            return cls.model_validate(data)
        except (OSError, JSONDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary"""
        return self.model_dump()
