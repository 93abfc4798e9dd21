"""
modelcompare check - Decide whether two models can be compared.

Loads a comparison definition, resolves both ``.bim`` endpoints, validates
them and prints the selected comparison engine.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from modelcompare import __version__
from modelcompare.compare.factory import ComparisonFactory
from modelcompare.compare.handles import Cancelled, StructuredComparison
from modelcompare.connect.bim_file import BimFileConnector
from modelcompare.errors import (
    ConfigurationIncompatibilityError,
    ConnectivityError,
    DefinitionError,
    PolicyConfigError,
)
from modelcompare.prompt.confirm import console_confirm
from modelcompare.schema.config import load_definition
from modelcompare.schema.policy import CompatibilityPolicy
from modelcompare.utils.logging import setup_logging

EXIT_CANCELLED = 2

app = typer.Typer(
    name="modelcompare",
    help="Check whether two analytical models can be compared, and with which engine",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Callback to display version and exit."""
    if value:
        typer.echo(f"modelcompare version {__version__}")
        raise typer.Exit()


@app.callback()
def entrypoint(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """
    modelcompare - comparison gate for analytical models.
    """


@app.command()
def check(
    definition: Path = typer.Argument(..., help="Comparison definition JSON file"),
    interactive: bool = typer.Option(
        False, "--interactive/--no-interactive", help="Allow operator prompts"
    ),
    policy_file: Path | None = typer.Option(
        None, "--policy", "-p", help="Compatibility policy JSON file"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Logging level"),
) -> None:
    """
    Resolve and validate a comparison definition, then show the selected engine.

    Model addresses are resolved relative to the definition file.
    """
    setup_logging(log_level)

    try:
        config = load_definition(definition)
        policy = CompatibilityPolicy.from_file(policy_file) if policy_file else None
    except (DefinitionError, PolicyConfigError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if interactive:
        config = config.model_copy(update={"interactive": True})

    factory = ComparisonFactory(
        BimFileConnector(base_dir=definition.parent),
        confirm=console_confirm,
        policy=policy,
    )
    try:
        result = factory.build(config)
    except (ConfigurationIncompatibilityError, ConnectivityError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if isinstance(result, Cancelled):
        console.print("[yellow]Comparison cancelled.[/yellow]")
        raise typer.Exit(EXIT_CANCELLED)

    table = Table(title="Comparison", show_header=True)
    table.add_column("Endpoint", style="cyan")
    table.add_column("Address", style="dim")
    table.add_column("Compatibility level", style="green")
    table.add_column("DirectQuery", style="yellow")
    for role, endpoint in (("source", result.config.source), ("target", result.config.target)):
        table.add_row(
            role,
            escape(endpoint.describe()),
            str(endpoint.compatibility_level),
            "On" if endpoint.direct_query else "Off",
        )
    console.print(table)
    console.print(f"Engine: [bold]{result.variant.value}[/bold]")
    if isinstance(result, StructuredComparison) and result.target_upgraded:
        console.print(
            f"Target upgraded from {result.upgraded_from} "
            f"to {result.config.target.compatibility_level}."
        )


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
