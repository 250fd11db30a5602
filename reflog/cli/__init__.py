#!/usr/bin/env python3
"""
Reflog Command-Line Interface
-----------------------------

Text front end for writing memos, managing tags and settings, and
viewing statistics.

This module provides the main CLI group and the shared context setup
for all commands.

Command Structure:
    - Memos (add, edit, delete, list, show, day)
    - Tags (tags list|add|rename|delete|suggest)
    - Settings (settings show|name|font-size|dark-mode|image|reset)
    - Statistics (stats history|summary|keywords|export)
    - Data (seed, export, import)

Usage:
    # Get general help
    reflog --help

    # Write a memo
    reflog add --title "Weekly review" --tag work --content "Shipped v1"

    # Keyword statistics for this month
    reflog stats keywords --period month
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Tuple

import click

from reflog.core.cli_utils import setup_logger
from reflog.core.events import EventBus, MEMOS_DID_CHANGE
from reflog.core.paths import DB_PATH, LOG_DIR
from reflog.database import ReflogDB
from reflog.dataclasses import MemoCollection


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    default=str(DB_PATH),
    help="Path to database file",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Path to log directory",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Show detailed errors and tracebacks",
)
@click.pass_context
def cli(ctx, db_path, log_dir, verbose):
    """Reflog: dated memos, tags and writing statistics."""
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = Path(db_path)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "cli")


def get_db(ctx) -> ReflogDB:
    """Get or create database instance from context."""
    if "db" not in ctx.obj:
        ctx.obj["db"] = ReflogDB(
            db_path=ctx.obj["db_path"],
            log_dir=ctx.obj["log_dir"],
        )
    return ctx.obj["db"]


@contextmanager
def memo_workspace(ctx) -> Iterator[Tuple[ReflogDB, MemoCollection]]:
    """
    Open a session with the memo collection loaded from storage.

    The memo store is subscribed to the change broadcast, so every
    collection mutation is written through. The collection is synced once
    more on exit so storage errors abort the command instead of only
    being logged by the bus.

    Usage:
        with memo_workspace(ctx) as (db, collection):
            collection.delete_at([0])
    """
    db = get_db(ctx)
    with db.session_scope():
        bus = EventBus(ctx.obj.get("logger"))
        collection = MemoCollection(db.memos.get_all(), bus)
        bus.subscribe(MEMOS_DID_CHANGE, db.memos.sync)

        yield db, collection

        db.memos.sync(collection.sorted)


# Import and register command modules
# These imports must come after CLI group definition
from .memos import add, edit, delete, list_memos, show, day  # noqa: E402
from .tags import tags  # noqa: E402
from .settings import settings  # noqa: E402
from .stats import stats  # noqa: E402
from .data import seed, export, import_  # noqa: E402

# Register top-level commands
cli.add_command(add)
cli.add_command(edit)
cli.add_command(delete)
cli.add_command(list_memos)
cli.add_command(show)
cli.add_command(day)
cli.add_command(seed)
cli.add_command(export)
cli.add_command(import_)

# Register command groups
cli.add_command(tags)
cli.add_command(settings)
cli.add_command(stats)


if __name__ == "__main__":
    cli(obj={})
