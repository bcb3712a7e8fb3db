"""flowdesk evaluate — Submit synthesized test data to the rule evaluator."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich import box

console = Console()


async def _evaluate(path: Path, base_url: Optional[str]):
    from flowdesk.config import load_rule_file
    from flowdesk.rules import RuleEvaluationClient

    rule = load_rule_file(path)
    async with RuleEvaluationClient(base_url=base_url) as client:
        return rule, await client.test_rule(rule)


def evaluate_rule(
    path: Path = typer.Argument(..., help="Rule file (.json / .yaml); must carry the rule id"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override FLOWDESK_RULES_API_BASE_URL"),
):
    """Trial-run a rule: synthesize its test data, POST it, show the verdict.

    Example:
        flowdesk evaluate discount-rule.yaml --base-url http://rules.internal
    """
    from flowdesk.exceptions import ConfigError, RuleEvaluationError

    try:
        rule, result = asyncio.run(_evaluate(path, base_url))
    except ConfigError as exc:
        console.print(f"[red]Cannot load rule:[/red] {exc}")
        raise typer.Exit(1)
    except RuleEvaluationError as exc:
        console.print(f"[red]Evaluation failed:[/red] {exc}")
        raise typer.Exit(1)

    verdict = "[green]PASS[/green]" if result.result else "[red]FAIL[/red]"
    console.print(f"Rule [bold]{rule.name}[/bold]: {verdict}")

    if result.executed_actions:
        table = Table(box=box.ROUNDED, header_style="bold dim", title="Actions applied")
        table.add_column("Action", style="cyan")
        table.add_column("OK", width=4)
        table.add_column("Result / Error")
        for action in result.executed_actions:
            detail = action.error if action.error else json.dumps(action.result, default=str)
            table.add_row(action.action_id, "✓" if action.success else "✗", detail)
        console.print(table)
