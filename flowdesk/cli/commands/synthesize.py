"""flowdesk synthesize — Print the test payload derived from a rule's conditions."""

import json
from pathlib import Path

import typer
from rich.console import Console

console = Console()


def synthesize_payload(
    path: Path = typer.Argument(..., help="Rule file (.json / .yaml)"),
    wrap: bool = typer.Option(False, "--wrap", help="Wrap under 'data' as the evaluator expects"),
):
    """Build the nested test object a rule would be evaluated against.

    Example:
        flowdesk synthesize discount-rule.yaml --wrap
    """
    from flowdesk.config import load_rule_file
    from flowdesk.exceptions import ConfigError
    from flowdesk.rules import build_evaluation_request, synthesize_test_data

    try:
        rule = load_rule_file(path)
    except ConfigError as exc:
        console.print(f"[red]Cannot load rule:[/red] {exc}")
        raise typer.Exit(1)

    payload = synthesize_test_data(rule.conditions)
    if wrap:
        payload = build_evaluation_request(payload)
    console.print_json(json.dumps(payload))
