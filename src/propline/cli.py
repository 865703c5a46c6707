"""propline CLI: read and edit a properties file without reformatting it.

Commands:
    propline init [FILE]              create propline.toml
    propline get KEY                  print a value
    propline set KEY VALUE            set a value (appends the key if new)
    propline list                     key=value for every property, in file order
    propline lines                    every line with its index
    propline add TEXT [--at N]        append or insert a raw line
    propline edit INDEX TEXT          replace a line
    propline remove INDEX [--prune]   delete a line
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

import click

from propline.config import PropConfig, init_config, load_config
from propline.store import LineStore

if TYPE_CHECKING:
    from collections.abc import Callable

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_cfg(file: str | None, separator: str | None) -> PropConfig:
    try:
        cfg = load_config()
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc
    if file:
        cfg = replace(cfg, file=Path(file))
    if separator:
        cfg = replace(cfg, separator=separator)
    return cfg


def _open_store(ctx: click.Context) -> LineStore:
    cfg: PropConfig = ctx.obj
    if cfg.file is None:
        raise click.ClickException("No properties file: pass --file or set `file` in propline.toml")
    try:
        store = LineStore.from_config(cfg)
        store.load()
    except (ValueError, OSError) as exc:
        raise click.ClickException(f"Cannot load {cfg.file}: {exc}") from exc
    return store


def _edit(ctx: click.Context, change: Callable[[LineStore], None]) -> LineStore:
    """Load the file, apply change, save it back."""
    store = _open_store(ctx)
    try:
        change(store)
        store.save()
    except (ValueError, IndexError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc
    return store


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="propline")
@click.option("--file", "-f", "file", default=None, help="Properties file (overrides propline.toml)")
@click.option("--separator", default=None, help="Key/value separator (overrides propline.toml)")
@click.option("--verbose", "-v", is_flag=True, help="Log file operations to stderr")
@click.pass_context
def cli(ctx: click.Context, file: str | None, separator: str | None, verbose: bool) -> None:
    """propline: edit properties files in place."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(message)s",
            datefmt="%H:%M:%S",
        )
    ctx.obj = _load_cfg(file, separator)


@cli.command()
@click.argument("file", required=False)
def init(file: str | None) -> None:
    """Create propline.toml in the current directory."""
    try:
        config_path = init_config(Path.cwd(), file=file)
        click.echo(f"Created {config_path}")
    except FileExistsError:
        click.echo("propline.toml already exists, skipping init")


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Print the value of KEY."""
    store = _open_store(ctx)
    value = store.get_property(key.strip())
    if value is None:
        raise click.ClickException(f"Property not found: {key}")
    click.echo(value)


@cli.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """Print key=value for every property in file order."""
    store = _open_store(ctx)
    for key in store.keys():
        click.echo(f"{key}{store.separator}{store.get_property(key) or ''}")


@cli.command()
@click.pass_context
def lines(ctx: click.Context) -> None:
    """Print every line prefixed with its index."""
    store = _open_store(ctx)
    for i, line in enumerate(store.get_all_lines()):
        click.echo(f"{i:>4}  {line}")


# ---------------------------------------------------------------------------
# Edit
# ---------------------------------------------------------------------------


@cli.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_cmd(ctx: click.Context, key: str, value: str) -> None:
    """Set KEY to VALUE, appending KEY if the file does not have it."""
    _edit(ctx, lambda store: store.set_property(key, value))


@cli.command()
@click.argument("text")
@click.option("--at", "index", type=int, default=None, help="Insert before this line (default: append)")
@click.pass_context
def add(ctx: click.Context, text: str, index: int | None) -> None:
    """Add TEXT as a new line."""
    _edit(ctx, lambda store: store.add_line_entry(text, index))


@cli.command()
@click.argument("index", type=int)
@click.argument("text")
@click.pass_context
def edit(ctx: click.Context, index: int, text: str) -> None:
    """Replace line INDEX with TEXT."""
    _edit(ctx, lambda store: store.modify_line_entry(index, text))


@cli.command()
@click.argument("index", type=int)
@click.option("--prune", is_flag=True, help="Also forget the key when no other line uses it")
@click.pass_context
def remove(ctx: click.Context, index: int, prune: bool) -> None:
    """Delete line INDEX."""
    store = _edit(ctx, lambda store: store.remove_line_entry_at(index, prune=prune))
    click.echo(f"{store.line_count()} lines left")
