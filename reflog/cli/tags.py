"""
Tag Registry Commands
---------------------

Manage the registry of saved tags offered for autocomplete.

Registry edits never touch memos: renaming or deleting a saved tag
leaves memos that already carry it unchanged.

Commands:
    - list: Registered tags with their usage across memos
    - add: Register tags
    - rename: Rename a registered tag
    - delete: Remove registered tags by name or position
    - suggest: Autocomplete candidates for a partial tag
"""
import sys

import click

from reflog.core.exceptions import DatabaseError
from reflog.core.logging_manager import handle_cli_error
from reflog.stats.aggregation import tag_counts
from . import get_db, memo_workspace


@click.group()
@click.pass_context
def tags(ctx: click.Context) -> None:
    """Manage saved tags."""
    pass


@tags.command("list")
@click.pass_context
def list_tags(ctx):
    """List saved tags with usage counts."""
    try:
        with memo_workspace(ctx) as (db, collection):
            registered = db.tags.get_all()
            usage = tag_counts(collection)

            if not registered:
                click.echo("No saved tags.")
                return

            click.echo(f"\n🏷️  {len(registered)} saved tags\n")
            for position, tag in enumerate(registered, start=1):
                click.echo(f"{position:3d}. {tag:20s} {usage.get(tag, 0):4d} memos")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "list_tags")


@tags.command("add")
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def add_tags(ctx, names):
    """Register one or more tags."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            for name in names:
                if db.tags.add(name):
                    click.echo(f"✅ Saved tag '{name}'")
                else:
                    click.echo(f"ℹ️  Skipped '{name}' (blank or already saved)")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "add_tags", additional_context={"names": list(names)})


@tags.command("rename")
@click.argument("old_name")
@click.argument("new_name")
@click.pass_context
def rename_tag(ctx, old_name, new_name):
    """Rename a saved tag."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            if not db.tags.rename(old_name, new_name):
                click.echo(
                    f"❌ Cannot rename '{old_name}' to '{new_name}': "
                    "new name is blank or taken, or the tag is not saved",
                    err=True,
                )
                sys.exit(1)
            click.echo(f"✅ Renamed '{old_name}' → '{new_name}'")

    except DatabaseError as e:
        handle_cli_error(
            ctx, e, "rename_tag", additional_context={"old": old_name, "new": new_name}
        )


@tags.command("delete")
@click.argument("names", nargs=-1)
@click.option(
    "--at",
    "positions",
    type=int,
    multiple=True,
    help="Position as shown by 'reflog tags list' (repeatable)",
)
@click.pass_context
def delete_tags(ctx, names, positions):
    """Remove saved tags by name or position."""
    if not names and not positions:
        click.echo("❌ Give at least one tag name or --at position", err=True)
        sys.exit(1)

    try:
        db = get_db(ctx)
        with db.session_scope():
            removed = db.tags.delete_at([p - 1 for p in positions])
            for name in names:
                if db.tags.delete(name):
                    removed.append(name)
                else:
                    click.echo(f"ℹ️  '{name}' is not a saved tag")

            for name in removed:
                click.echo(f"🗑️  Removed tag '{name}'")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "delete_tags", additional_context={"names": list(names)})


@tags.command("suggest")
@click.argument("query", default="")
@click.option("--exclude", "-x", multiple=True, help="Tag already on the memo (repeatable)")
@click.pass_context
def suggest(ctx, query, exclude):
    """Autocomplete candidates containing QUERY."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            for tag in db.tags.suggestions(query, exclude=exclude):
                click.echo(tag)

    except DatabaseError as e:
        handle_cli_error(ctx, e, "suggest_tags", additional_context={"query": query})
