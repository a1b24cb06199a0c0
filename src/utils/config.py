"""Configuration management for environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from src.utils.exceptions import ConfigurationError

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class ParserConfig:
    """Processing toggles for the article parser.

    Each toggle gates one element kind entirely: when disabled, that kind and
    everything nested only inside it is dropped from the output.

    Attributes:
        parse_text: Emit natural language text
        parse_links: Emit internal, image and external links
        parse_templates: Emit templates
        parse_tags: Emit extension tags (ref, math, ...)
        parse_tables: Emit tables
        parse_ref_tags: Reparse <ref> bodies for nested links/templates/tags
    """

    parse_text: bool = True
    parse_links: bool = True
    parse_templates: bool = True
    parse_tags: bool = True
    parse_tables: bool = True
    parse_ref_tags: bool = True


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Load configuration from .env file and environment."""
        # Load .env file if it exists
        env_path = Path(".env")
        if env_path.exists():
            load_dotenv(env_path)

        self.log_level = os.getenv("LOG_LEVEL", "INFO")

        # Parser toggles, all enabled by default
        self.parse_text = self._get_bool("PARSE_TEXT", True)
        self.parse_links = self._get_bool("PARSE_LINKS", True)
        self.parse_templates = self._get_bool("PARSE_TEMPLATES", True)
        self.parse_tags = self._get_bool("PARSE_TAGS", True)
        self.parse_tables = self._get_bool("PARSE_TABLES", True)
        self.parse_ref_tags = self._get_bool("PARSE_REF_TAGS", True)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable.

        Args:
            key: Environment variable name
            default: Value used when the variable is not set

        Returns:
            Parsed boolean value

        Raises:
            ConfigurationError: If the value is not a recognized boolean
        """
        value = os.getenv(key)
        if value is None or not value.strip():
            return default

        normalized = value.strip().lower()
        if normalized in TRUE_VALUES:
            return True
        if normalized in FALSE_VALUES:
            return False
        raise ConfigurationError(f"{key} must be a boolean, got {value!r}")

    def parser_config(self) -> ParserConfig:
        """Build the parser toggles from this configuration."""
        return ParserConfig(
            parse_text=self.parse_text,
            parse_links=self.parse_links,
            parse_templates=self.parse_templates,
            parse_tags=self.parse_tags,
            parse_tables=self.parse_tables,
            parse_ref_tags=self.parse_ref_tags,
        )
