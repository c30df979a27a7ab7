"""Rich UI components for the CLI.

Kept apart from the commands so tables and panels can be reused.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from stripe_facade.core.domain.models import StripeObject
from stripe_facade.version import VERSION


def print_banner(console: Console) -> None:
    title = Text("stripe-facade", style="bold cyan")
    subtitle = Text(f"Stripe REST API bindings • v{VERSION}", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_timestamp(value: object) -> str:
    if isinstance(value, int):
        return datetime.fromtimestamp(value, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    return "-"


def build_objects_table(title: str, objects: Iterable[StripeObject]) -> Table:
    """Table with one row per Stripe object (id, type, creation date)."""

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Object", style="white")
    table.add_column("Created", style="magenta")
    for obj in objects:
        table.add_row(obj.id or "-", obj.object or "-", format_timestamp(obj.get("created")))
    return table
