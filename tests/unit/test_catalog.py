"""
Unit tests for the forbidden function catalog.
"""

from __future__ import annotations

import pytest

from secruleset.catalog import (
    FORBIDDEN_FUNCTIONS,
    get_forbidden_functions,
    get_function_categories,
    lookup,
)
from secruleset.domain.models import FunctionEntry


class TestForbiddenFunctions:
    """Tests for the catalog contents."""

    def test_names_are_unique(self) -> None:
        names = [entry.name for entry in FORBIDDEN_FUNCTIONS]
        assert len(names) == len(set(names))

    def test_mapping_preserves_presentation_order(self) -> None:
        """Menu numbering depends on a stable order."""
        functions = get_forbidden_functions()

        assert list(functions) == [entry.name for entry in FORBIDDEN_FUNCTIONS]
        assert list(functions)[:5] == ["eval", "assert", "create_function", "preg_replace", "exec"]
        assert list(functions)[-2:] == ["set_time_limit", "ignore_user_abort"]
        assert len(functions) == 33

    @pytest.mark.parametrize(
        "name, reason",
        [
            ("eval", "Remote Code Execution risk"),
            ("preg_replace", "Remote Code Execution risk with /e modifier"),
            ("shell_exec", "Command injection risk"),
            ("fsockopen", "SSRF attack risk"),
            ("show_source", "Source code disclosure"),
            ("putenv", "Environment variable manipulation"),
            ("dl", "Dynamic extension loading"),
            ("stream_socket_server", "Network server creation"),
        ],
    )
    def test_known_reasons(self, name: str, reason: str) -> None:
        assert get_forbidden_functions()[name] == reason

    def test_mapping_is_a_copy(self) -> None:
        """Callers cannot mutate the catalog through the returned mapping."""
        functions = get_forbidden_functions()
        functions["eval"] = "changed"

        assert get_forbidden_functions()["eval"] == "Remote Code Execution risk"

    def test_entries_are_frozen(self) -> None:
        with pytest.raises(Exception):  # Pydantic frozen validation error
            FORBIDDEN_FUNCTIONS[0].reason = "changed"  # type: ignore


class TestCategories:
    """Tests for category grouping."""

    def test_category_order(self) -> None:
        assert list(get_function_categories()) == [
            "Critical RCE Functions",
            "Command Execution",
            "Network",
            "Information Disclosure",
            "Variable Manipulation",
            "Configuration Changes",
            "File System",
            "Dynamic Loading",
            "POSIX Functions",
            "Socket Functions",
            "Execution Control",
        ]

    def test_grouping_covers_every_entry_in_order(self) -> None:
        flattened = [
            entry for entries in get_function_categories().values() for entry in entries
        ]
        assert flattened == list(FORBIDDEN_FUNCTIONS)

    def test_command_execution_group(self) -> None:
        names = [entry.name for entry in get_function_categories()["Command Execution"]]
        assert names == ["exec", "shell_exec", "system", "passthru", "popen", "proc_open"]


class TestLookup:
    def test_known_function(self) -> None:
        entry = lookup("symlink")

        assert isinstance(entry, FunctionEntry)
        assert entry.category == "File System"
        assert entry.reason == "Symbolic link creation risk"

    def test_unknown_function(self) -> None:
        assert lookup("strlen") is None

    def test_lookup_is_case_sensitive(self) -> None:
        assert lookup("EVAL") is None
