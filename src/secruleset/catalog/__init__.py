"""
Function catalog for secruleset.

Static data only: the dangerous PHP functions an operator may choose
to exclude from the forbidden-functions sniff.
"""

from secruleset.catalog.forbidden_functions import (
    FORBIDDEN_FUNCTIONS,
    get_forbidden_functions,
    get_function_categories,
    lookup,
)

__all__ = [
    "FORBIDDEN_FUNCTIONS",
    "get_forbidden_functions",
    "get_function_categories",
    "lookup",
]
