"""
Settings Commands
-----------------

View and change user preferences.

Commands:
    - show: Current preferences
    - name: Set or clear the display name
    - font-size: Memo body font size (15-30)
    - dark-mode: Turn dark mode on or off
    - image: Set or clear the profile image
    - reset: Restore every preference to its default
"""
from pathlib import Path

import click

from reflog.core.exceptions import DatabaseError, ValidationError
from reflog.core.logging_manager import handle_cli_error
from reflog.database.managers.settings_manager import (
    DARK_MODE_KEY,
    FONT_SIZE_KEY,
    PROFILE_IMAGE_KEY,
    USER_NAME_KEY,
)
from . import get_db


@click.group()
@click.pass_context
def settings(ctx: click.Context) -> None:
    """View and change preferences."""
    pass


@settings.command("show")
@click.pass_context
def show_settings(ctx):
    """Display current preferences."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            values = db.settings.get_all()
            tag_total = len(db.tags.get_all())

        image = values[PROFILE_IMAGE_KEY]
        click.echo("\n⚙️  Settings\n")
        click.echo(f"  Name:          {values[USER_NAME_KEY] or '(not set)'}")
        click.echo(f"  Font size:     {values[FONT_SIZE_KEY]:g}")
        click.echo(f"  Dark mode:     {'on' if values[DARK_MODE_KEY] else 'off'}")
        click.echo(f"  Profile image: {f'{image} bytes' if image else '(none)'}")
        click.echo(f"  Saved tags:    {tag_total}")

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "show_settings")


@settings.command("name")
@click.argument("name", required=False)
@click.option("--clear", is_flag=True, help="Remove the display name")
@click.pass_context
def set_name(ctx, name, clear):
    """Set the display name."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            stored = db.settings.set_user_name(None if clear else name)
        click.echo(f"✅ Name set to '{stored}'" if stored else "✅ Name cleared")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "set_user_name")


@settings.command("font-size")
@click.argument("size")
@click.pass_context
def set_font_size(ctx, size):
    """Set the memo body font size (15-30)."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            stored = db.settings.set_font_size(size)
        click.echo(f"✅ Font size set to {stored:g}")

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "set_font_size", additional_context={"size": size})


@settings.command("dark-mode")
@click.argument("state")
@click.pass_context
def set_dark_mode(ctx, state):
    """Turn dark mode on or off (on/off, true/false, yes/no)."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            enabled = db.settings.set_dark_mode(state)
        click.echo(f"✅ Dark mode {'on' if enabled else 'off'}")

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "set_dark_mode", additional_context={"state": state})


@settings.command("image")
@click.argument("path", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option("--clear", is_flag=True, help="Remove the profile image")
@click.pass_context
def set_image(ctx, path, clear):
    """Set the profile image from a file."""
    if not path and not clear:
        raise click.UsageError("Give an image PATH or --clear")

    try:
        data = None if clear else Path(path).read_bytes()
        db = get_db(ctx)
        with db.session_scope():
            db.settings.set_profile_image(data)
        click.echo(f"✅ Profile image set ({len(data)} bytes)" if data else "✅ Profile image cleared")

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "set_profile_image", additional_context={"path": path})


@settings.command("reset")
@click.confirmation_option(prompt="Reset all settings to their defaults?")
@click.pass_context
def reset(ctx):
    """Restore default preferences (saved tags are kept)."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            db.settings.reset()
        click.echo("✅ Settings reset to defaults")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "reset_settings")
