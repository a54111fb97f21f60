"""
Interactive collector that builds an exclusion mapping from console prompts.

Lists the function catalog, asks which entries to exclude and why,
then hands the result to the ruleset generator.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from rich.console import Console

from secruleset.catalog import FORBIDDEN_FUNCTIONS
from secruleset.domain.models import (
    DEFAULT_EXCLUSION_REASON,
    DEFAULT_OUTPUT_PATH,
    FunctionEntry,
    GenerationResult,
)
from secruleset.engine.generator import RulesetGenerator

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class InteractiveCollector:
    """
    Console workflow for choosing forbidden-function exclusions.

    Input and output are injectable so the workflow can be driven
    without a terminal.
    """

    BANNER = (
        "Common Security Standards - Project Configuration\n"
        "================================================\n"
    )

    def __init__(
        self,
        console: Console | None = None,
        prompt: Callable[[str], str] | None = None,
        generator: RulesetGenerator | None = None,
        functions: Sequence[FunctionEntry] = FORBIDDEN_FUNCTIONS,
    ) -> None:
        """
        Initialize the collector.

        Args:
            console: Rich console for output (creates new one if None).
            prompt: Reads one line of input after showing a prompt.
                Defaults to the console's own input.
            generator: Generator that writes the final ruleset.
            functions: Catalog entries offered for exclusion.
        """
        self.console = console or Console()
        self.prompt = prompt or self._console_input
        self.generator = generator or RulesetGenerator()
        self.functions = list(functions)

    def run(self, output_path: Path | str = DEFAULT_OUTPUT_PATH) -> GenerationResult:
        """
        Run the full workflow and write the ruleset.

        Args:
            output_path: Where to write the generated ruleset.

        Returns:
            GenerationResult for the written file.
        """
        self._print(self.BANNER)
        self.show_functions()

        exclusions = self.collect()
        result = self.generator.generate(exclusions, [], output_path)

        self._print(f"\nGenerated: {result.output}")
        self._print(f"Add this to your phpcs.xml: {result.include_snippet}")
        return result

    def show_functions(self) -> None:
        """Print the numbered catalog, one entry per line."""
        self._print("Available security functions that can be excluded:")
        for index, entry in enumerate(self.functions, start=1):
            self._print(self.format_entry(index, entry))

    @staticmethod
    def format_entry(index: int, entry: FunctionEntry) -> str:
        return f"{index:2d}. {entry.name:<20s} - {entry.reason}"

    def collect(self) -> dict[str, str]:
        """
        Ask for the entries to exclude and a reason for each.

        Returns:
            Function name to justification, in the order chosen.
        """
        answer = self._ask("\nEnter function numbers to exclude (comma-separated, or 'none'): ")

        exclusions: dict[str, str] = {}
        for index in self.parse_selection(answer, len(self.functions)):
            function = self.functions[index - 1].name
            reason = self._ask(f"Reason for excluding '{function}': ")
            exclusions[function] = reason or DEFAULT_EXCLUSION_REASON
            logger.debug("Operator excluded %s", function)

        return exclusions

    @staticmethod
    def parse_selection(answer: str, count: int) -> list[int]:
        """
        Turn a comma-separated answer into valid 1-based indices.

        Non-numeric and out-of-range tokens are dropped without complaint.
        """
        answer = answer.strip()
        if not answer or answer == "none":
            return []

        indices: list[int] = []
        for token in answer.split(","):
            token = token.strip()
            if not (token.isascii() and token.isdigit()):
                logger.debug("Ignoring non-numeric selection %r", token)
                continue
            index = int(token)
            if 1 <= index <= count:
                indices.append(index)
            else:
                logger.debug("Ignoring out-of-range selection %d", index)

        return indices

    def _ask(self, text: str) -> str:
        try:
            return self.prompt(text).strip()
        except EOFError:
            return ""

    def _console_input(self, text: str) -> str:
        return self.console.input(text, markup=False)

    def _print(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False)
