"""
Domain layer for secruleset.

Contains all core data structures with zero external dependencies
beyond Pydantic and the YAML config loader.
"""

from secruleset.domain.models import (
    DEFAULT_EXCLUSION_REASON,
    DEFAULT_OUTPUT_PATH,
    FunctionEntry,
    GenerationResult,
    RulesetRequest,
)
from secruleset.domain.config import DEFAULT_CONFIG_NAME, GeneratorConfig
from secruleset.domain.exceptions import (
    RulesetError,
    RulesetWriteError,
    ConfigError,
)

__all__ = [
    # Models
    "DEFAULT_EXCLUSION_REASON",
    "DEFAULT_OUTPUT_PATH",
    "FunctionEntry",
    "GenerationResult",
    "RulesetRequest",
    # Config
    "DEFAULT_CONFIG_NAME",
    "GeneratorConfig",
    # Exceptions
    "RulesetError",
    "RulesetWriteError",
    "ConfigError",
]
