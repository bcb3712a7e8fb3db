"""flowdesk config — Show resolved FLOWDESK configuration."""

from rich.console import Console
from rich.table import Table
from rich import box

console = Console()


def config_show():
    """Show the resolved FLOWDESK configuration.

    Reads from environment variables and .env file.
    The API token is masked.

    Example:
        flowdesk config
    """
    from flowdesk.config import FlowdeskConfig
    cfg = FlowdeskConfig()

    def mask(val: str) -> str:
        s = str(val)
        if len(s) <= 8:
            return "***"
        return s[:4] + "…" + "***"

    sensitive = {"rules_api_token"}

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title="[bold]FLOWDESK Configuration[/bold]",
    )
    table.add_column("Key", style="cyan", width=24)
    table.add_column("Value", width=40)
    table.add_column("Env Var", style="dim", width=32)

    for attr in ("debug", "log_level", "rules_api_base_url", "rules_api_token", "rules_api_timeout"):
        val = getattr(cfg, attr, None)
        if val is None:
            display = "[dim](not set)[/dim]"
        elif attr in sensitive:
            display = mask(str(val))
        else:
            display = str(val)
        table.add_row(attr, display, f"FLOWDESK_{attr.upper()}")

    console.print(table)
