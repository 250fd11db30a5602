"""
Memo Commands
-------------

Write, edit, delete and browse memos.

Commands:
    - add: Create a memo (title required, content or a tag required)
    - edit: Change a memo's title, content or tags
    - delete: Remove memos by id or by list position
    - list: Memos newest first, optionally filtered by a search keyword
    - show: Full detail of one memo
    - day: Memos written on one calendar day
"""
import sys
from datetime import date, datetime
from typing import Optional

import click

from reflog.builders.dashboard import day_detail_lines
from reflog.core.exceptions import DatabaseError, ValidationError
from reflog.core.logging_manager import handle_cli_error
from reflog.core.validators import DataValidator
from reflog.dataclasses import Memo, MemoCollection, MemoDraft, filter_memos
from . import memo_workspace


def resolve_memo(collection: MemoCollection, ref: str) -> Memo:
    """Find the single memo whose id starts with ``ref``, or exit with an error."""
    matches = collection.find_by_prefix(ref.strip().lower())
    if not matches:
        click.echo(f"❌ No memo found for id '{ref}'", err=True)
        sys.exit(1)
    if len(matches) > 1:
        click.echo(
            f"❌ Id '{ref}' is ambiguous ({len(matches)} memos); use more characters",
            err=True,
        )
        sys.exit(1)
    return matches[0]


def parse_when(value: Optional[str]) -> Optional[datetime]:
    """Parse a --date option (ISO date or datetime)."""
    if value is None:
        return None
    return DataValidator.normalize_datetime(value)


def format_row(position: int, memo: Memo) -> str:
    tags = " ".join(f"#{t}" for t in memo.visible_tags)
    return f"{position:3d}. {memo.list_date}  {str(memo.id)[:8]}  {memo.title}  {tags}".rstrip()


@click.command("add")
@click.option("--title", "-t", required=True, help="Memo title")
@click.option("--content", "-c", default="", help="Memo body")
@click.option("--tag", "tags", multiple=True, help="Tag (repeatable)")
@click.option("--date", "when", help="Timestamp (ISO format); defaults to now")
@click.pass_context
def add(ctx, title, content, tags, when):
    """Create a memo."""
    try:
        with memo_workspace(ctx) as (db, collection):
            draft = MemoDraft.new()
            draft.title = title
            draft.content = content
            for raw in tags:
                draft.add_tag(raw, db.tags)

            if not draft.can_save:
                click.echo("❌ Nothing to save: write some content or add a tag", err=True)
                sys.exit(1)

            memo = draft.save(collection, db.tags, now=parse_when(when))
            if memo is None:
                click.echo("❌ A memo needs a title", err=True)
                sys.exit(1)

            click.echo(f"✅ Added memo {str(memo.id)[:8]} ({memo.list_date})")

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "add_memo", additional_context={"title": title})


@click.command("edit")
@click.argument("memo_id")
@click.option("--title", "-t", help="New title")
@click.option("--content", "-c", help="New body")
@click.option("--add-tag", "add_tags", multiple=True, help="Tag to add (repeatable)")
@click.option("--remove-tag", "remove_tags", multiple=True, help="Tag to remove (repeatable)")
@click.option("--date", "when", help="New timestamp (ISO format); defaults to now")
@click.pass_context
def edit(ctx, memo_id, title, content, add_tags, remove_tags, when):
    """Edit a memo. Saving stamps it with the current time."""
    try:
        with memo_workspace(ctx) as (db, collection):
            memo = resolve_memo(collection, memo_id)
            draft = MemoDraft.from_memo(memo)

            if title is not None:
                draft.title = title
            if content is not None:
                draft.content = content
            for tag in remove_tags:
                draft.remove_tag(tag)
            for raw in add_tags:
                draft.add_tag(raw, db.tags)

            if not draft.is_changed:
                click.echo("ℹ️  Nothing changed")
                return
            if not draft.can_save:
                click.echo("❌ A memo needs some content or at least one tag", err=True)
                sys.exit(1)

            saved = draft.save(collection, db.tags, now=parse_when(when))
            click.echo(f"✅ Updated memo {str(saved.id)[:8]} ({saved.list_date})")

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "edit_memo", additional_context={"memo_id": memo_id})


@click.command("delete")
@click.argument("memo_ids", nargs=-1)
@click.option(
    "--at",
    "positions",
    type=int,
    multiple=True,
    help="List position to delete, as shown by 'reflog list' (repeatable)",
)
@click.pass_context
def delete(ctx, memo_ids, positions):
    """Delete memos by id prefix or by list position."""
    if not memo_ids and not positions:
        click.echo("❌ Give at least one memo id or --at position", err=True)
        sys.exit(1)

    try:
        with memo_workspace(ctx) as (_db, collection):
            removed = collection.delete_at([p - 1 for p in positions])
            for ref in memo_ids:
                memo = resolve_memo(collection, ref)
                collection.delete(memo.id)
                removed.append(memo)

            if not removed:
                click.echo("ℹ️  No memos matched those positions")
                return

            for memo in removed:
                click.echo(f"🗑️  Deleted {str(memo.id)[:8]}  {memo.title}")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "delete_memo", additional_context={"ids": list(memo_ids)})


@click.command("list")
@click.option("--search", "-s", "keyword", help="Keyword in title, content or tags")
@click.pass_context
def list_memos(ctx, keyword):
    """List memos, newest first."""
    try:
        with memo_workspace(ctx) as (_db, collection):
            memos = filter_memos(collection, keyword)

            if not memos:
                click.echo("No memos found." if keyword else "No memos yet.")
                return

            header = f"🔍 {len(memos)} memos matching '{keyword}'" if keyword else f"📝 {len(memos)} memos"
            click.echo(f"\n{header}\n")
            for position, memo in enumerate(memos, start=1):
                click.echo(format_row(position, memo))

    except DatabaseError as e:
        handle_cli_error(ctx, e, "list_memos", additional_context={"keyword": keyword})


@click.command("show")
@click.argument("memo_id")
@click.pass_context
def show(ctx, memo_id):
    """Display a single memo."""
    try:
        with memo_workspace(ctx) as (db, collection):
            memo = resolve_memo(collection, memo_id)
            font_size = db.settings.get_font_size()

            click.echo(f"\n📅 {memo.detail_date}")
            click.echo(f"📝 {memo.title}")
            if memo.visible_tags:
                click.echo(f"🏷️  {' '.join('#' + t for t in memo.visible_tags)}")
            click.echo("")
            click.echo(memo.content or "(no content)")
            click.echo(f"\n🆔 {memo.id}  ·  font size {font_size:g}")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "show_memo", additional_context={"memo_id": memo_id})


@click.command("day")
@click.argument("day_str", metavar="DATE", required=False)
@click.pass_context
def day(ctx, day_str):
    """Memos written on DATE (YYYY-MM-DD, default today)."""
    try:
        target = parse_when(day_str).date() if day_str else date.today()

        with memo_workspace(ctx) as (_db, collection):
            click.echo(f"\n📅 {target:%Y. %m. %d}\n")
            for line in day_detail_lines(collection, target):
                click.echo(f"  {line}")

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "day_detail", additional_context={"date": day_str})
