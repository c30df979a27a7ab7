"""CLI entry point (`stripe-facade`)."""

from __future__ import annotations

from itertools import islice

import typer
from rich.console import Console

from stripe_facade.cli import doctor
from stripe_facade.cli.ui_components import build_objects_table, print_banner
from stripe_facade.core.errors import StripeError
from stripe_facade.core.services.facade import Stripe, available_accessors, resolve_api_class

app = typer.Typer(no_args_is_help=True, help="Stripe REST API from the command line.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.command(name="list")
def list_objects(
    resource: str = typer.Argument(..., help="Resource accessor, e.g. charges or invoice_items."),
    parent: str | None = typer.Argument(None, help="Parent id for nested resources (e.g. a customer id for cards)."),
    limit: int = typer.Option(25, "--limit", "-n", min=1, help="Maximum number of objects to show."),
    banner: bool = typer.Option(False, "--banner", help="Print the banner first."),
) -> None:
    """List the objects of a resource, paginating transparently."""

    if resource not in available_accessors() or not hasattr(resolve_api_class(resource), "all"):
        raise typer.BadParameter(f"unknown resource '{resource}'", param_hint="RESOURCE")

    if banner:
        print_banner(_console)

    args: list[object] = [parent] if parent else []
    args.append({"limit": min(limit, 100)})
    try:
        with Stripe() as stripe:
            iterator = getattr(stripe, f"{resource}_iterator")(*args)
            objects = list(islice(iterator, limit))
    except StripeError as exc:
        _console.print(f"[red]{exc.__class__.__name__}:[/red] {exc.message}")
        raise typer.Exit(code=1)

    _console.print(build_objects_table(resource, objects))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
