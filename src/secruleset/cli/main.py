"""
Main CLI entry point for secruleset.

Usage:
    secruleset generate --exclude exec="Deploy scripts" --rule Generic.PHP.DeprecatedFunctions
    secruleset generate --config .secruleset.yaml
    secruleset interactive
    secruleset functions
    secruleset init
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from secruleset import __version__
from secruleset.domain.models import DEFAULT_OUTPUT_PATH

# Create the main Typer app
app = typer.Typer(
    name="secruleset",
    help="🛡️ secruleset: project-specific phpcs security rulesets",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger("secruleset.cli")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"secruleset version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """
    🛡️ secruleset: project-specific phpcs security rulesets

    Extend the CommonSecurity standard with justified exclusions for
    forbidden functions and extra rule references.

    Examples:

        secruleset generate --exclude exec="Deploy scripts"

        secruleset interactive

        secruleset functions
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def parse_exclusion(value: str) -> tuple[str, str]:
    """Split a NAME[=REASON] option value."""
    name, _, reason = value.partition("=")
    name = name.strip()
    if not name:
        raise typer.BadParameter(f"Missing function name in {value!r}")
    return name, reason.strip()


@app.command()
def generate(
    exclude: Annotated[
        Optional[list[str]],
        typer.Option(
            "--exclude",
            "-x",
            help="Function to exclude, as NAME or NAME=REASON. Repeatable.",
        ),
    ] = None,
    rule: Annotated[
        Optional[list[str]],
        typer.Option(
            "--rule",
            "-r",
            help="Extra rule reference to include. Repeatable.",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help=f"Output file path (default: {DEFAULT_OUTPUT_PATH}).",
        ),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Path to a .secruleset.yaml config file.",
        ),
    ] = None,
    stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Print the ruleset instead of writing a file.",
        ),
    ] = False,
) -> None:
    """
    Generate a project ruleset from options and/or a config file.

    Config values come first; --exclude and --rule values are merged
    after them.

    Examples:

        secruleset generate --exclude exec="Deploy scripts"

        secruleset generate -c .secruleset.yaml -r Generic.PHP.DeprecatedFunctions

        secruleset generate -x eval --stdout
    """
    from secruleset.catalog import lookup
    from secruleset.domain.config import GeneratorConfig
    from secruleset.domain.exceptions import RulesetError
    from secruleset.engine.generator import RulesetGenerator
    from secruleset.renderers.terminal import TerminalRenderer

    renderer = TerminalRenderer(console=console, err_console=err_console)

    try:
        settings = GeneratorConfig.from_file(config) if config else GeneratorConfig()
    except RulesetError as e:
        err_console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)

    exclusions = dict(parse_exclusion(value) for value in exclude or [])
    request = settings.to_request(
        exclusions=exclusions,
        custom_rules=rule or [],
        output=str(output) if output else None,
    )

    for function in request.exclusions:
        if lookup(function) is None:
            renderer.warn(f"'{function}' is not in the forbidden functions catalog")

    generator = RulesetGenerator()

    if stdout:
        renderer.render_xml(generator.render(request.exclusions, request.custom_rules))
        return

    try:
        result = generator.generate_request(request)
    except RulesetError as e:
        err_console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)

    renderer.render_result(result)


@app.command()
def interactive(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output file path.",
        ),
    ] = Path(DEFAULT_OUTPUT_PATH),
) -> None:
    """
    Choose exclusions from a numbered list of forbidden functions.

    Prompts for the functions to exclude and a reason for each, then
    writes the ruleset.
    """
    from secruleset.domain.exceptions import RulesetError
    from secruleset.engine.collector import InteractiveCollector

    collector = InteractiveCollector(console=console)

    try:
        collector.run(output)
    except RulesetError as e:
        err_console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)


@app.command()
def functions() -> None:
    """
    List the forbidden functions that can be excluded.

    Numbers match the ones used by 'secruleset interactive'.
    """
    from secruleset.renderers.terminal import TerminalRenderer

    TerminalRenderer(console=console).render_catalog()


@app.command()
def init(
    path: Annotated[
        Path,
        typer.Argument(
            help="Directory to create the .secruleset.yaml config file in.",
        ),
    ] = Path("."),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing config file.",
        ),
    ] = False,
) -> None:
    """
    Initialize secruleset configuration.

    Creates a .secruleset.yaml config file with default settings.

    Examples:

        secruleset init

        secruleset init ./project --force
    """
    from secruleset.domain.config import DEFAULT_CONFIG_NAME, DEFAULT_CONFIG_TEMPLATE

    config_path = path / DEFAULT_CONFIG_NAME

    if config_path.exists() and not force:
        console.print(
            f"[yellow]Config file already exists: {config_path}[/yellow]\n"
            f"Use --force to overwrite."
        )
        raise typer.Exit(1)

    try:
        config_path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    except OSError as e:
        err_console.print(f"[red]Cannot write {config_path}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    logger.info("Created config %s", config_path)
    console.print(f"[green]✓ Created {config_path}[/green]")
    console.print("\nEdit this file, then run 'secruleset generate --config' with it.")


if __name__ == "__main__":
    app()
