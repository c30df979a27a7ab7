"""Allows `python -m stripe_facade ...`."""

from __future__ import annotations

from stripe_facade.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
