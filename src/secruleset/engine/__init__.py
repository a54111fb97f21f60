"""
Engine layer for secruleset.

Contains the ruleset generator and the interactive collector that feeds it.
"""

from secruleset.engine.generator import RulesetGenerator, generate_ruleset
from secruleset.engine.collector import InteractiveCollector

__all__ = [
    "InteractiveCollector",
    "RulesetGenerator",
    "generate_ruleset",
]
