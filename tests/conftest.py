"""
Pytest configuration and shared fixtures for secruleset tests.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Callable

import pytest
from rich.console import Console

from secruleset.domain.models import FunctionEntry


# --- Markers ---

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


# --- Fixtures: Generator inputs ---

@pytest.fixture
def sample_exclusions() -> dict[str, str]:
    """Exclusions with and without a justification."""
    return {
        "exec": "Needed by deployment scripts",
        "eval": "",
        "phpinfo": "Diagnostics page behind auth",
    }


@pytest.fixture
def sample_custom_rules() -> list[str]:
    """Custom rule references, including a duplicate."""
    return [
        "Generic.PHP.DeprecatedFunctions",
        "Squiz.PHP.Eval",
        "Generic.PHP.DeprecatedFunctions",
    ]


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    """Where generated rulesets are written during a test."""
    return tmp_path / "phpcs-security-custom.xml"


# --- Fixtures: Console I/O ---

@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    """A wide, colorless console that writes into console_buffer."""
    return Console(file=console_buffer, width=200, color_system=None, force_terminal=False)


class ScriptedPrompt:
    """Answers prompts from a fixed script and records what was asked."""

    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, text: str) -> str:
        self.prompts.append(text)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def scripted_prompt() -> Callable[[list[str]], ScriptedPrompt]:
    """Factory for prompts that replay the given answers."""
    return ScriptedPrompt


# --- Fixtures: Catalog ---

@pytest.fixture
def small_catalog() -> list[FunctionEntry]:
    """A three-entry catalog for collector tests."""
    return [
        FunctionEntry(name="eval", reason="Remote Code Execution risk", category="Critical RCE Functions"),
        FunctionEntry(name="exec", reason="Command injection risk", category="Command Execution"),
        FunctionEntry(name="phpinfo", reason="Information disclosure", category="Information Disclosure"),
    ]


# --- Fixtures: Config ---

@pytest.fixture
def sample_config_dict(tmp_path: Path) -> dict[str, Any]:
    """Config contents as a dict."""
    return {
        "output": str(tmp_path / "from-config.xml"),
        "exclusions": {"exec": "Needed by deployment scripts"},
        "custom_rules": ["Generic.PHP.DeprecatedFunctions"],
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, sample_config_dict: dict[str, Any]) -> Path:
    """Create a temporary config YAML file."""
    import yaml

    config_path = tmp_path / ".secruleset.yaml"
    config_path.write_text(yaml.dump(sample_config_dict, sort_keys=False), encoding="utf-8")
    return config_path
