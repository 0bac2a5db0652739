"""Command-line entry points for the roadways ledger."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from .config import BaseConfig
from .errors import LedgerError
from .logging_config import setup_logging
from .services.export_csv import export_bilty_csv
from .services.gateway import BiltyGateway
from .services.record_store import RecordStore
from .services.session import SessionController


@click.group()
def cli() -> None:
    """North East Roadways bilty ledger."""


@cli.command("desktop")
def desktop() -> None:
    """Launch the desktop app."""

    from .desktop.app import run

    run()


@cli.command("export")
@click.option("--username", prompt=True, help="Backend username")
@click.option("--password", prompt=True, hide_input=True, help="Backend password")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the CSV (defaults to DATA_DIR/exports)",
)
def export(username: str, password: str, output_dir: Optional[Path]) -> None:
    """Log in, fetch every record and write the ledger CSV."""

    config = BaseConfig()
    setup_logging(config)
    gateway = BiltyGateway(config)
    store = RecordStore(gateway)
    session = SessionController(gateway, store)
    try:
        session.login(username, password)
        path = export_bilty_csv(
            records=store.records,
            output_dir=output_dir or config.export_dir,
            filename=config.EXPORT_FILENAME,
            date_format=config.DATE_FORMAT,
        )
    except LedgerError as exc:
        raise click.ClickException(exc.message) from exc
    finally:
        gateway.http.close()

    if path is None:
        click.echo("No data to export.")
        return
    click.echo(f"Export written: {path}")


if __name__ == "__main__":
    cli()
