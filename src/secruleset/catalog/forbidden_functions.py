"""
Catalog of PHP functions forbidden by the CommonSecurity standard.

Entries are grouped by risk category in the order they are presented
to operators; the position of an entry is its menu number.
"""

from __future__ import annotations

from secruleset.domain.models import FunctionEntry


def _group(category: str, *entries: tuple[str, str]) -> list[FunctionEntry]:
    return [FunctionEntry(name=name, reason=reason, category=category) for name, reason in entries]


FORBIDDEN_FUNCTIONS: tuple[FunctionEntry, ...] = (
    *_group(
        "Critical RCE Functions",
        ("eval", "Remote Code Execution risk"),
        ("assert", "Remote Code Execution risk"),
        ("create_function", "Remote Code Execution risk"),
        ("preg_replace", "Remote Code Execution risk with /e modifier"),
    ),
    *_group(
        "Command Execution",
        ("exec", "Command injection risk"),
        ("shell_exec", "Command injection risk"),
        ("system", "Command injection risk"),
        ("passthru", "Command injection risk"),
        ("popen", "Command injection risk"),
        ("proc_open", "Command injection risk"),
    ),
    *_group(
        "Network",
        ("fsockopen", "SSRF attack risk"),
        ("pfsockopen", "SSRF attack risk"),
    ),
    *_group(
        "Information Disclosure",
        ("phpinfo", "Information disclosure"),
        ("highlight_file", "Source code disclosure"),
        ("show_source", "Source code disclosure"),
    ),
    *_group(
        "Variable Manipulation",
        ("extract", "Variable overwriting risk"),
        ("parse_str", "Variable overwriting risk"),
    ),
    *_group(
        "Configuration Changes",
        ("ini_set", "Runtime configuration changes"),
        ("ini_alter", "Runtime configuration changes"),
        ("putenv", "Environment variable manipulation"),
    ),
    *_group(
        "File System",
        ("tmpfile", "Temporary file security risk"),
        ("link", "Hard link creation risk"),
        ("symlink", "Symbolic link creation risk"),
        ("fpassthru", "File content disclosure"),
    ),
    *_group(
        "Dynamic Loading",
        ("dl", "Dynamic extension loading"),
    ),
    *_group(
        "POSIX Functions",
        ("posix_kill", "Process signal manipulation"),
        ("posix_setuid", "User ID manipulation"),
        ("posix_setgid", "Group ID manipulation"),
    ),
    *_group(
        "Socket Functions",
        ("socket_bind", "Network socket binding"),
        ("socket_listen", "Network socket listening"),
        ("stream_socket_server", "Network server creation"),
    ),
    *_group(
        "Execution Control",
        ("set_time_limit", "Execution limit manipulation"),
        ("ignore_user_abort", "User abort handling"),
    ),
)

_BY_NAME: dict[str, FunctionEntry] = {entry.name: entry for entry in FORBIDDEN_FUNCTIONS}


def get_forbidden_functions() -> dict[str, str]:
    """Return function name to risk reason, in presentation order."""
    return {entry.name: entry.reason for entry in FORBIDDEN_FUNCTIONS}


def get_function_categories() -> dict[str, list[FunctionEntry]]:
    """Group catalog entries by category, keeping the authored order."""
    categories: dict[str, list[FunctionEntry]] = {}
    for entry in FORBIDDEN_FUNCTIONS:
        categories.setdefault(entry.category, []).append(entry)
    return categories


def lookup(name: str) -> FunctionEntry | None:
    """Find a catalog entry by exact function name."""
    return _BY_NAME.get(name)
