"""FLOWDESK CLI — Typer application."""

import logging
from typing import Optional

import typer
from rich.console import Console

from flowdesk.version import __version__

app = typer.Typer(
    name="flowdesk",
    help="FLOWDESK — check workflow graphs and build rule test data.",
    no_args_is_help=True,
    invoke_without_command=True,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", is_eager=True, help="Show version"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override FLOWDESK_LOG_LEVEL"),
):
    """FLOWDESK CLI."""
    if version:
        console.print(f"FLOWDESK v{__version__}")
        raise typer.Exit()

    from flowdesk.config import FlowdeskConfig
    level = (log_level or FlowdeskConfig().log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise typer.BadParameter(
            f"unknown log level '{level}' (use DEBUG, INFO, WARNING, ERROR or CRITICAL)",
            param_hint="--log-level / FLOWDESK_LOG_LEVEL",
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


# ── Commands ───────────────────────────────────────────────────────────────────
from flowdesk.cli.commands import config, evaluate, synthesize, validate  # noqa: E402

app.command(name="validate", help="Check a workflow file for structural defects")(validate.validate_workflow)
app.command(name="synthesize", help="Build a test payload from a rule's conditions")(synthesize.synthesize_payload)
app.command(name="evaluate", help="Trial-evaluate a rule against synthesized data")(evaluate.evaluate_rule)
app.command(name="config", help="Show resolved configuration")(config.config_show)


if __name__ == "__main__":
    app()
