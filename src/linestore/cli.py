"""linestore CLI — line-oriented CRUD on a single text file.

Commands:
    linestore init                    write linestore.toml
    linestore read PATH [--line N]    print the file, or one line
    linestore write PATH TEXT [--line N]
                                      replace the file, or one line
    linestore delete PATH             remove the file
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from linestore.config import LineStoreConfig, init_config, load_config
from linestore.errors import LineStoreError
from linestore.models import Result
from linestore.store import LineFileStore

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_cfg() -> LineStoreConfig:
    try:
        return load_config()
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc


def _open_store(ctx: click.Context, path: str) -> LineFileStore:
    cfg: LineStoreConfig = ctx.obj
    try:
        return LineFileStore(path, cfg.store)
    except LineStoreError as exc:
        raise click.ClickException(str(exc)) from exc


def _unwrap(result: Result) -> object:
    try:
        return result.unwrap()
    except LineStoreError as exc:
        raise click.ClickException(str(exc)) from exc


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="linestore")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """linestore — CRUD on the lines of a text file."""
    cfg = _load_cfg()
    logging.basicConfig(
        level=getattr(logging, cfg.logging.level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    ctx.obj = cfg


@cli.command()
@click.option("--dir", "root", default=".", show_default=True, help="Project root")
def init(root: str) -> None:
    """Write a default linestore.toml."""
    try:
        config_path = init_config(Path(root))
    except FileExistsError:
        click.echo("linestore.toml already exists — skipping init")
        return
    except OSError as exc:
        raise click.ClickException(f"Unable to write linestore.toml: {exc}") from exc
    click.echo(f"Created {config_path}")


@cli.command()
@click.argument("path")
@click.option("--line", "line_number", type=int, default=None, help="0-indexed line to print")
@click.pass_context
def read(ctx: click.Context, path: str, line_number: int | None) -> None:
    """Print the file content, or a single line."""
    store = _open_store(ctx, path)
    result = store.read_all() if line_number is None else store.read_line(line_number)
    click.echo(_unwrap(result))


@cli.command()
@click.argument("path")
@click.argument("text")
@click.option("--line", "line_number", type=int, default=None, help="0-indexed line to replace")
@click.pass_context
def write(ctx: click.Context, path: str, text: str, line_number: int | None) -> None:
    """Replace the file content, or a single existing line."""
    store = _open_store(ctx, path)
    if line_number is None:
        _unwrap(store.write_all(text))
        click.echo(f"Wrote {path}")
    else:
        _unwrap(store.write_line(text, line_number))
        click.echo(f"Updated line {line_number} of {path}")


@cli.command()
@click.argument("path")
@click.pass_context
def delete(ctx: click.Context, path: str) -> None:
    """Delete the file."""
    # Construction would recreate a missing file before deleting it.
    if not Path(path).exists():
        raise click.ClickException(f"No such file: {path}")
    store = _open_store(ctx, path)
    _unwrap(store.delete())
    click.echo(f"Deleted {path}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
