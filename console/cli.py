"""CLI for loading record files and querying stores."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from console.config import AppConfig, load_config
from console.hooks import announce_new_records
from console.logging_setup import configure_logging
from loader.adapter import StoreAdapter
from loader.files import load_records
from loader.schemas import BaseRecord, resolve_record_type
from store.registry import StoreRegistry
from store.repository import KeyedStore
from store.scoring import field_score

app = typer.Typer(help="Keyed record store CLI")


def _fail(message: str) -> NoReturn:
    typer.secho(f"❌ {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


def _load_store(config: AppConfig) -> KeyedStore[BaseRecord]:
    # Private per invocation; the process-wide stores stay untouched
    record_type = resolve_record_type(config.record_type)
    store = StoreRegistry().get(record_type)
    cancel = announce_new_records(store) if config.announce_new_records else None
    try:
        _ = load_records(
            config.data_path,
            record_type,
            StoreAdapter(store),
            skip_invalid=config.skip_invalid,
        )
    finally:
        if cancel is not None:
            cancel()
    return store


def _report_best(config: AppConfig) -> None:
    store = _load_store(config)
    result = store.select_best(field_score(config.score_field))
    if result.item is None:
        typer.echo(f"No record scored above 0 on '{config.score_field}' ({len(store)} loaded)")
        return
    typer.secho(f"✅ Best by {config.score_field}: {result.item.id}", fg=typer.colors.GREEN)
    typer.echo(f"   Score:   {result.max:g}")
    typer.echo(f"   Records: {len(store)}")


@app.command()
def best(
    data_path: str = typer.Argument(..., help="JSON or YAML file of records"),
    field: str = typer.Option("attack", "--field", help="Numeric field to maximize"),
    record_type: str = typer.Option("pokemon", "--type", help="Record type name"),
    skip_invalid: bool = typer.Option(False, "--skip-invalid", help="Skip invalid records"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
) -> None:
    """Load a data file and print the record with the highest score."""
    try:
        configure_logging(log_level)
        config = AppConfig(
            data_path=data_path,
            record_type=record_type,
            score_field=field,
            skip_invalid=skip_invalid,
            log_level=log_level,
        )
        _report_best(config)
    except (FileNotFoundError, ValueError, TypeError) as e:
        _fail(str(e))


@app.command("list")
def list_records(
    data_path: str = typer.Argument(..., help="JSON or YAML file of records"),
    record_type: str = typer.Option("pokemon", "--type", help="Record type name"),
) -> None:
    """Load a data file and print every record in store order."""
    try:
        config = AppConfig(data_path=data_path, record_type=record_type, announce_new_records=False)
        store = _load_store(config)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    store.visit(lambda record: typer.echo(record.to_json()))


@app.command()
def run(
    config_path: str = typer.Argument(..., help="Path to YAML config"),
) -> None:
    """Load the data file named in a config and print the best record."""
    try:
        config = load_config(config_path)
        configure_logging(config.log_level)
        data_path = Path(config.data_path)
        if not data_path.is_absolute():
            # Relative data paths resolve against the config file's directory
            config.data_path = str(Path(config_path).parent / data_path)
        _report_best(config)
    except (FileNotFoundError, ValueError, TypeError) as e:
        _fail(str(e))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
