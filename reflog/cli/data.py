"""
Data Commands
-------------

Bulk data operations.

Commands:
    - seed: Add random demo memos
    - export: Dump memos and saved tags to YAML
    - import: Load memos and saved tags from a YAML export
"""
import random
from datetime import datetime
from pathlib import Path

import click

from reflog.core.exceptions import DatabaseError, MemoImportError
from reflog.core.logging_manager import handle_cli_error
from reflog.core.paths import EXPORT_DIR
from reflog.pipeline.memo_yaml import export_memos, import_memos
from reflog.utils.sample_data import compose_demo, generate_random_in_years
from . import memo_workspace


@click.command("seed")
@click.option(
    "--years",
    nargs=2,
    type=click.IntRange(1, 9998),
    help="Spread memos at random between START and END years instead of the demo layout",
)
@click.option("--count", type=int, default=500, show_default=True, help="Memos to create with --years")
@click.option("--seed", "seed_value", type=int, help="Random seed for reproducible data")
@click.option("--replace", is_flag=True, help="Discard existing memos first")
@click.pass_context
def seed(ctx, years, count, seed_value, replace):
    """Add random demo memos."""
    rng = random.Random(seed_value)
    if years:
        memos = generate_random_in_years(years[0], years[1], count, rng=rng)
    else:
        memos = compose_demo(rng=rng)

    try:
        with memo_workspace(ctx) as (db, collection):
            existing = [] if replace else list(collection)
            collection.replace(existing + memos)
            collection.announce()

            added = db.tags.add_many(t for m in memos for t in m.visible_tags)
            click.echo(f"🌱 Seeded {len(memos)} memos ({added} new tags)")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "seed", additional_context={"replace": replace})


@click.command("export")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="YAML file to write (default: exports/memos-<timestamp>.yaml)",
)
@click.pass_context
def export(ctx, output):
    """Export memos and saved tags to YAML."""
    path = (
        Path(output)
        if output
        else EXPORT_DIR / f"memos-{datetime.now():%Y%m%d_%H%M%S}.yaml"
    )

    try:
        with memo_workspace(ctx) as (db, collection):
            memos = collection.sorted
            tags = db.tags.get_all()

        export_memos(memos, tags, path, logger=ctx.obj.get("logger"))
        click.echo(f"📦 Exported {len(memos)} memos and {len(tags)} tags to {path}")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "export", additional_context={"output": str(path)})


@click.command("import")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--replace", is_flag=True, help="Discard existing memos first")
@click.pass_context
def import_(ctx, path, replace):
    """Import memos and saved tags from a YAML export.

    Memos whose id already exists are overwritten by the imported copy.
    """
    try:
        memos, tags = import_memos(Path(path), logger=ctx.obj.get("logger"))

        with memo_workspace(ctx) as (db, collection):
            incoming = {m.id for m in memos}
            kept = [] if replace else [m for m in collection if m.id not in incoming]
            collection.replace(kept + memos)
            collection.announce()

            added = db.tags.add_many(tags)
            click.echo(
                f"📥 Imported {len(memos)} memos ({added} new tags); "
                f"{db.memos.count()} memos stored"
            )

    except (DatabaseError, MemoImportError) as e:
        handle_cli_error(ctx, e, "import", additional_context={"path": path})
