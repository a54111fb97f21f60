"""
Domain models for secruleset.

This module contains the core data structures used throughout the library.
All models are Pydantic v2 for validation and serialization.
"""

from __future__ import annotations

from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_OUTPUT_PATH = "phpcs-security-custom.xml"
DEFAULT_EXCLUSION_REASON = "Project requirement"


class FunctionEntry(BaseModel):
    """A dangerous PHP function and the risk it carries."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="PHP function name, e.g. eval", min_length=1)
    reason: str = Field(..., description="Why the function is forbidden")
    category: str = Field(..., description="Risk category heading, e.g. Command Execution")


class RulesetRequest(BaseModel):
    """
    Inputs for a single ruleset generation.

    Exclusions keep their insertion order; it is the emission order
    of the generated document.
    """

    model_config = ConfigDict(frozen=True)

    exclusions: dict[str, str] = Field(
        default_factory=dict,
        description="Excluded function name to justification (may be empty)",
    )
    custom_rules: list[str] = Field(
        default_factory=list,
        description="Extra rule references, emitted verbatim and in order",
    )
    output: str = Field(
        default=DEFAULT_OUTPUT_PATH,
        description="Where the ruleset XML is written",
    )


class GenerationResult(BaseModel):
    """Outcome of writing a ruleset document."""

    model_config = ConfigDict(frozen=True)

    output: str = Field(..., description="Path the ruleset was written to")
    exclusion_count: int = Field(default=0, ge=0)
    custom_rule_count: int = Field(default=0, ge=0)
    bytes_written: int = Field(default=0, ge=0)

    @property
    def include_snippet(self) -> str:
        """The rule element a project's phpcs.xml needs to pull this ruleset in."""
        ref = self.output
        if not (PurePath(ref).is_absolute() or ref.startswith(("./", "../"))):
            ref = f"./{ref}"
        return f'<rule ref="{ref}"/>'
