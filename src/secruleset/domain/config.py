"""
Project configuration for secruleset.

A config file pins the generator inputs so a ruleset can be rebuilt
in CI without prompting anyone.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from secruleset.domain.exceptions import ConfigError
from secruleset.domain.models import DEFAULT_OUTPUT_PATH, RulesetRequest

DEFAULT_CONFIG_NAME = ".secruleset.yaml"

DEFAULT_CONFIG_TEMPLATE = """# secruleset configuration
# Rebuild with: secruleset generate --config .secruleset.yaml

# Where the generated ruleset is written
output: phpcs-security-custom.xml

# Forbidden functions this project is allowed to call, with a justification.
# Run 'secruleset functions' to list the known names.
exclusions: {}
#  exec: Needed by deployment scripts

# Extra phpcs rule references appended after the exclusions
custom_rules: []
#  - Generic.PHP.DeprecatedFunctions
"""


class GeneratorConfig(BaseModel):
    """Validated contents of a .secruleset.yaml file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output: str = Field(default=DEFAULT_OUTPUT_PATH, min_length=1)
    exclusions: dict[str, str] = Field(default_factory=dict)
    custom_rules: list[str] = Field(default_factory=list)

    @field_validator("exclusions", mode="before")
    @classmethod
    def validate_exclusions(cls, v: dict[str, Any] | None) -> dict[str, str]:
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("exclusions must be a mapping of function name to reason")
        return {str(k): "" if val is None else str(val) for k, val in v.items()}

    @field_validator("custom_rules", mode="before")
    @classmethod
    def validate_custom_rules(cls, v: list[Any] | None) -> list[str]:
        if v is None:
            return []
        return v

    @classmethod
    def from_file(cls, path: Path | str) -> GeneratorConfig:
        """
        Load a config from a YAML file.

        Args:
            path: Path to the config file.

        Returns:
            GeneratorConfig instance.

        Raises:
            ConfigError: If the file cannot be read, parsed or validated.
        """
        path = Path(path)

        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}", config_path=str(path))
        except OSError as e:
            raise ConfigError(f"Error reading config: {e}", config_path=str(path))

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config: {e}", config_path=str(path))

        return cls.from_dict(data or {}, source=str(path))

    @classmethod
    def from_dict(cls, data: Any, source: str | None = None) -> GeneratorConfig:
        """Validate already-parsed config data."""
        if not isinstance(data, dict):
            raise ConfigError("Config must be a mapping", config_path=source)

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config: {e}", config_path=source)

    def to_request(
        self,
        exclusions: dict[str, str] | None = None,
        custom_rules: list[str] | None = None,
        output: str | None = None,
    ) -> RulesetRequest:
        """
        Merge command-line values over this config.

        Config exclusions come first; a repeated function name takes the
        later reason but keeps its original position. Custom rules are
        appended without deduplication.
        """
        merged = dict(self.exclusions)
        merged.update(exclusions or {})

        return RulesetRequest(
            exclusions=merged,
            custom_rules=[*self.custom_rules, *(custom_rules or [])],
            output=output or self.output,
        )
