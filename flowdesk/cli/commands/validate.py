"""flowdesk validate — Check a workflow definition before it is saved."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich import box

console = Console()


def validate_workflow(
    path: Path = typer.Argument(..., help="Workflow file (.json / .yaml)"),
):
    """Validate a workflow file and list every structural defect.

    Exits with code 1 when the workflow is invalid or cannot be loaded.

    Example:
        flowdesk validate onboarding.json
    """
    from flowdesk.config import load_workflow_file
    from flowdesk.exceptions import ConfigError, WorkflowIntegrityError
    from flowdesk.workflows import validate

    try:
        workflow = load_workflow_file(path)
    except ConfigError as exc:
        console.print(f"[red]Cannot load workflow:[/red] {exc}")
        raise typer.Exit(1)
    except WorkflowIntegrityError as exc:
        console.print(f"[red]Broken graph:[/red] {exc}")
        for violation in exc.violations:
            console.print(f"  [red]•[/red] {violation}")
        raise typer.Exit(1)

    report = validate(workflow)
    title = workflow.name or workflow.id

    if report.valid:
        console.print(
            f"[green]✓[/green] [bold]{title}[/bold] is valid "
            f"[dim]({len(workflow.nodes)} nodes, {len(workflow.edges)} edges)[/dim]"
        )
        return

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        title=f"[bold]{title}[/bold]: {len(report.errors)} problem(s)",
    )
    table.add_column("#", width=4, justify="right")
    table.add_column("Error")
    for i, error in enumerate(report.errors, start=1):
        table.add_row(str(i), error)

    console.print(table)
    raise typer.Exit(1)
