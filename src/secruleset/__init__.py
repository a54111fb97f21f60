"""
secruleset: project-specific security rulesets for PHP_CodeSniffer

Generates a phpcs ruleset that extends the CommonSecurity standard with
justified exclusions for forbidden functions and extra rule references.

Usage:
    # CLI
    $ secruleset generate --exclude exec="Deploy scripts"
    $ secruleset interactive

    # Python API
    from secruleset import generate_ruleset

    generate_ruleset(
        {"exec": "Deploy scripts"},
        ["Generic.PHP.DeprecatedFunctions"],
        "phpcs-security-custom.xml",
    )
"""

from secruleset.catalog import FORBIDDEN_FUNCTIONS, get_forbidden_functions
from secruleset.domain.exceptions import ConfigError, RulesetError, RulesetWriteError
from secruleset.domain.models import FunctionEntry, GenerationResult, RulesetRequest
from secruleset.engine.collector import InteractiveCollector
from secruleset.engine.generator import RulesetGenerator, generate_ruleset

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Catalog
    "FORBIDDEN_FUNCTIONS",
    "get_forbidden_functions",
    # Domain models
    "FunctionEntry",
    "GenerationResult",
    "RulesetRequest",
    # Exceptions
    "ConfigError",
    "RulesetError",
    "RulesetWriteError",
    # Engine
    "InteractiveCollector",
    "RulesetGenerator",
    "generate_ruleset",
]
