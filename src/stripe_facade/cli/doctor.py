"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from stripe_facade.core.config import Config, write_user_env_vars
from stripe_facade.core.errors import ConfigError, StripeError
from stripe_facade.core.services.facade import Stripe

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _mask(api_key: str) -> str:
    if len(api_key) <= 12:
        return "*" * len(api_key)
    return f"{api_key[:8]}...{api_key[-4:]}"


def _check_balance(stripe: Stripe) -> tuple[bool, str]:
    try:
        balance = stripe.balance().current()
    except StripeError as exc:
        return False, f"{exc.__class__.__name__}: {exc.message}"
    livemode = balance.get("livemode")
    return True, "live mode" if livemode else "test mode"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    table = Table(title="stripe-facade Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        config = Config()
    except ConfigError as exc:
        table.add_row("API key", "FAIL", str(exc))
        _console.print(table)
        _console.print(
            "\n[yellow]Note:[/yellow] set STRIPE_API_KEY or run `stripe-facade doctor setup`."
        )
        raise typer.Exit(code=1)

    table.add_row("API key", "OK", _mask(config.api_key or ""))
    table.add_row("API version", "OK", config.api_version)
    table.add_row("API base", "OK", config.api_base)

    with Stripe(config=config) as stripe:
        ok, detail = _check_balance(stripe)
    table.add_row("Balance request", "OK" if ok else "FAIL", detail)

    _console.print(table)
    if not ok:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores the key in the user config .env)."""

    api_key = typer.prompt("Stripe API key", hide_input=True, confirmation_prompt=False).strip()
    api_version = typer.prompt("Stripe API version", default="2016-07-06", show_default=True).strip()

    if not api_key.startswith(("sk_", "rk_")):
        raise typer.BadParameter("api key must be a secret (sk_*) or restricted (rk_*) key")

    env_path = write_user_env_vars(
        {
            "STRIPE_API_KEY": api_key,
            "STRIPE_API_VERSION": api_version or None,
        }
    )

    _console.print(f"[green]Saved Stripe config to:[/green] {env_path}")
