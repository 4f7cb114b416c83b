"""Main CLI application for errstatus."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from errstatus.config.paths import config_file
from errstatus.config.settings import Config, ConfigError, get_config
from errstatus.display.json import from_classification, output_json_pretty
from errstatus.errors.classify import explain
from errstatus.errors.messages import catalog_translator
from errstatus.errors.rules import STATUS_RULES
from errstatus.errors.types import ExceptionError, StatusKey, TextError
from errstatus.logging import configure_logging, get_logger

app = typer.Typer(
    name="errstatus",
    help="Turn error text into localized status messages",
    add_completion=False,
    no_args_is_help=True,
    invoke_without_command=True,
)

logger = get_logger("cli")


class ExitCode(IntEnum):
    """Exit codes for errstatus."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 4


def _load_config() -> Config:
    try:
        return get_config()
    except ConfigError as e:
        Console(stderr=True).print(f"[red]Config error:[/red] {e}")
        raise typer.Exit(ExitCode.CONFIG_ERROR) from e


def _translator(ctx: typer.Context):
    config = _load_config()
    locale = ctx.meta.get("locale") or config.locale
    return catalog_translator(locale, config.messages)


@app.callback()
def main(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", "-j", help="Enable JSON output mode"),
    locale: Optional[str] = typer.Option(
        None, "--locale", "-l", help="Message catalog locale"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show classification diagnostics"
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Errstatus - turn error text into localized status messages."""
    if version:
        from errstatus import __version__

        typer.echo(f"errstatus {__version__}")
        raise typer.Exit()

    ctx.meta["json"] = json
    ctx.meta["locale"] = locale
    ctx.meta["verbose"] = verbose

    level = "debug" if verbose else _load_config().log_level
    configure_logging(level)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("classify")
def classify_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Error text to classify"),
    exception: bool = typer.Option(
        False, "--exception", "-e", help="Treat TEXT as an exception message"
    ),
    handler_message: Optional[str] = typer.Option(
        None,
        "--handler-message",
        help="Message returned when no built-in rule matches",
    ),
) -> None:
    """Print the status message for an error."""
    translate = _translator(ctx)
    error = ExceptionError(message=text) if exception else TextError(text)

    custom_handler = None
    if handler_message is not None:
        custom_handler = lambda payload: handler_message  # noqa: E731

    result = explain(error, translate, custom_handler)
    logger.debug("Classified %r as %s (rule=%s)", text, result.kind, result.rule)

    if ctx.meta.get("json"):
        output_json_pretty(from_classification(result))
        return

    Console().print(result.message, markup=False)


@app.command("rules")
def rules_command(ctx: typer.Context) -> None:
    """Show the rule table in priority order."""
    if ctx.meta.get("json"):
        output_json_pretty(
            [
                {"priority": i, "substring": rule.substring, "key": rule.key.value}
                for i, rule in enumerate(STATUS_RULES, start=1)
            ]
        )
        return

    table = Table(title="Status rules")
    table.add_column("Priority", justify="right")
    table.add_column("Substring", style="cyan")
    table.add_column("Status key")
    for i, rule in enumerate(STATUS_RULES, start=1):
        table.add_row(str(i), rule.substring, rule.key.value)
    Console().print(table)


@app.command("keys")
def keys_command(ctx: typer.Context) -> None:
    """List every status key with its message."""
    translate = _translator(ctx)
    messages = {key.value: translate(key.value) for key in StatusKey}

    if ctx.meta.get("json"):
        output_json_pretty(messages)
        return

    table = Table(title="Status messages")
    table.add_column("Key", style="cyan")
    table.add_column("Message")
    for key, message in messages.items():
        table.add_row(key, message)
    Console().print(table)


@app.command("config")
def config_command(ctx: typer.Context) -> None:
    """Display current settings."""
    config = _load_config()
    config_path = config_file()

    if ctx.meta.get("json"):
        output_json_pretty(
            {
                "locale": config.locale,
                "log_level": config.log_level,
                "messages": config.messages,
                "path": str(config_path),
            }
        )
        return

    console = Console()
    console.print(f"[bold]Config file:[/bold] {config_path}")
    console.print(f"locale = {config.locale}")
    console.print(f"log_level = {config.log_level}")
    for key, message in config.messages.items():
        console.print(f"messages.{key} = {message}", markup=False)


def run_app() -> None:
    """Run the CLI application."""
    app()
