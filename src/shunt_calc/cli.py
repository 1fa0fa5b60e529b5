"""
Command-line interface for shunt-calc.

Provides commands for:
- Running the interactive REPL (default)
- Evaluating expressions given on the command line
- Inspecting the postfix form of an expression
"""

from pathlib import Path
from typing import List, Optional

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console

from shunt_calc import __version__
from shunt_calc.config import ConfigurationError, Settings, configure_logging, load_settings
from shunt_calc.errors import CalculatorError
from shunt_calc.pipeline import ExpressionPipeline

app = typer.Typer(
    name="shunt-calc",
    help="shunt-calc - Interactive Arithmetic Expression Evaluator",
    add_completion=False,
)

console = Console()
logger = structlog.get_logger()


def _emit(text: str, style: str | None = None) -> None:
    """Print a line verbatim: no markup, highlighting or wrapping."""
    console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        _emit(f"shunt-calc {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file"),
    lenient_parens: bool = typer.Option(
        False, "--lenient-parens", help="Ignore a '(' left open at end of input"
    ),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", help="Digits after the decimal point"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level for stderr output"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Evaluate arithmetic expressions. Starts the REPL when no command is given."""
    try:
        settings = load_settings(
            config,
            precision=precision,
            log_level=log_level,
            strict_parens=False if lenient_parens else None,
        )
    except (ConfigurationError, ValidationError) as e:
        _emit(f"Invalid configuration: {e}", style="red")
        raise typer.Exit(1)

    configure_logging("DEBUG" if settings.debug else settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        _run_repl(settings)


# =============================================================================
# Commands
# =============================================================================

@app.command()
def repl(ctx: typer.Context):
    """Start the interactive prompt. Type the exit command to leave."""
    _run_repl(ctx.obj)


@app.command("eval")
def eval_(
    ctx: typer.Context,
    expressions: List[str] = typer.Argument(..., help="Expressions to evaluate"),
):
    """Evaluate each expression and print one result per line."""
    pipeline = ExpressionPipeline(ctx.obj)
    failed = 0

    for expression in expressions:
        text, ok = pipeline.render(expression)
        _emit(text, style=None if ok else "red")
        if not ok:
            failed += 1

    if failed:
        raise typer.Exit(1)


@app.command()
def postfix(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to convert"),
):
    """Show the tokens of an expression and their postfix order."""
    pipeline = ExpressionPipeline(ctx.obj)

    try:
        infix, rpn = pipeline.postfix(expression)
    except CalculatorError as e:
        _emit(str(e), style="red")
        raise typer.Exit(1)

    _emit(f"infix:   {infix}")
    _emit(f"postfix: {rpn}")


# =============================================================================
# Helpers
# =============================================================================

def _run_repl(settings: Settings) -> None:
    """Read-evaluate-print loop; only the exit command or EOF ends it."""
    pipeline = ExpressionPipeline(settings)
    logger.debug("Starting REPL", strict_parens=settings.strict_parens)

    while True:
        try:
            line = console.input(settings.prompt, markup=False)
        except (EOFError, KeyboardInterrupt):
            _emit("")
            break

        line = line.strip()
        if line == settings.exit_command:
            break

        text, ok = pipeline.render(line)
        _emit(text, style=None if ok else "red")

    _emit(settings.goodbye_message)


if __name__ == "__main__":
    app()
