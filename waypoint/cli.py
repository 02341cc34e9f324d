import json
from contextlib import contextmanager
from datetime import datetime

import click

from waypoint.errors import WaypointError
from waypoint.paths import display_name


@contextmanager
def _user_errors():
    """Report domain errors as a one-line notice instead of a traceback."""
    try:
        yield
    except WaypointError as exc:
        raise click.ClickException(str(exc)) from exc


def _manager(ctx: click.Context):
    """Build the manager once per invocation."""
    if "manager" not in ctx.obj:
        from waypoint.app import create_manager

        ctx.obj["manager"] = create_manager(ctx.obj["settings"])
    return ctx.obj["manager"]


@click.group()
@click.option("--log-level", default=None, help="Log level (default: from WAYPOINT_LOG_LEVEL or INFO).")
@click.pass_context
def main(ctx: click.Context, log_level: str | None) -> None:
    """Waypoint - recency-ranked WezTerm workspaces with zoxide suggestions."""
    from waypoint.log import setup_logging
    from waypoint.settings import get_settings

    settings = get_settings()
    setup_logging(log_level or settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# ---------------------------------------------------------------------------
# Switcher
# ---------------------------------------------------------------------------


@main.command("list")
@click.option("--workspaces-only", is_flag=True, default=False, help="Hide zoxide suggestions.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print choices as JSON.")
@click.pass_context
def list_choices(ctx: click.Context, workspaces_only: bool, as_json: bool) -> None:
    """List switcher choices: live workspaces first, then suggestions."""
    with _user_errors():
        prompt = _manager(ctx).switcher()

    choices = prompt.choices
    if workspaces_only:
        choices = [c for c in choices if c.is_workspace]

    if as_json:
        click.echo(json.dumps([c.model_dump(mode="json") for c in choices], indent=2))
        return
    for c in choices:
        suffix = " (current)" if c.is_current else ""
        click.echo(f"{c.kind}\t{c.label}{suffix}")


def _find_choice(choices, target: str):
    """Match *target* against choice ids and identities first, then labels."""
    identity = display_name(target)
    for c in choices:
        if target == c.id or identity == c.identity:
            return c
    return next((c for c in choices if target == c.label), None)


@main.command()
@click.argument("target")
@click.pass_context
def switch(ctx: click.Context, target: str) -> None:
    """Switch to a workspace, or open a new one at a directory."""
    manager = _manager(ctx)
    with _user_errors():
        choice = _find_choice(manager.switcher().choices, target)
        name = manager.select(choice) if choice else manager.switch_to_new(target).display
    click.echo(name)


@main.command()
@click.argument("name")
@click.pass_context
def new(ctx: click.Context, name: str) -> None:
    """Create a workspace called NAME."""
    with _user_errors():
        created = _manager(ctx).create_named(name)
    if created:
        click.echo(created)


@main.command("new-at")
@click.argument("path")
@click.pass_context
def new_at(ctx: click.Context, path: str) -> None:
    """Create a workspace rooted at PATH, named after it."""
    with _user_errors():
        created = _manager(ctx).create_at_path(path)
    if created:
        click.echo(created.display)


# ---------------------------------------------------------------------------
# Close / rename
# ---------------------------------------------------------------------------


@main.command()
@click.argument("name", required=False)
@click.pass_context
def close(ctx: click.Context, name: str | None) -> None:
    """Close every pane of workspace NAME.  Without NAME, list what can be closed."""
    manager = _manager(ctx)
    if name is None:
        with _user_errors():
            prompt = manager.close_prompt()
        if not prompt.choices:
            click.echo("No other workspaces to close")
        for c in prompt.choices:
            click.echo(c.label)
        return

    with _user_errors():
        choice = _find_choice(manager.close_prompt().choices, name)
        result = manager.close(choice.id if choice else name)
    if result.closed:
        click.echo(f"Closed {len(result.pane_ids)} pane(s) in: {result.workspace}")
    else:
        click.echo("No panes found in workspace")


@main.command()
@click.argument("new_name")
@click.option("--from", "old_name", default=None, help="Workspace to rename (default: the active one).")
@click.pass_context
def rename(ctx: click.Context, new_name: str, old_name: str | None) -> None:
    """Rename a workspace; an existing NEW_NAME absorbs its windows."""
    manager = _manager(ctx)
    with _user_errors():
        result = manager.rename(old_name, new_name) if old_name else manager.rename_current(new_name)
    if result is None:
        return
    if result.merged:
        click.echo(f'Merged "{result.old_name}" into existing "{result.new_name}"')
    else:
        click.echo(f'Renamed "{result.old_name}" to "{result.new_name}"')


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


@main.command("next")
@click.pass_context
def next_(ctx: click.Context) -> None:
    """Switch to the next workspace alphabetically."""
    with _user_errors():
        name = _manager(ctx).cycle(1)
    if name:
        click.echo(name)


@main.command()
@click.pass_context
def prev(ctx: click.Context) -> None:
    """Switch to the previous workspace alphabetically."""
    with _user_errors():
        name = _manager(ctx).cycle(-1)
    if name:
        click.echo(name)


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------


@main.command()
@click.pass_context
def history(ctx: click.Context) -> None:
    """Show recorded access times, newest first."""
    times = _manager(ctx).store.snapshot()
    for name, stamp in sorted(times.items(), key=lambda item: (-item[1], item[0].lower())):
        click.echo(f"{datetime.fromtimestamp(stamp).isoformat(sep=' ')}\t{name}")


@main.command()
@click.argument("name")
@click.pass_context
def forget(ctx: click.Context, name: str) -> None:
    """Drop NAME from the access history."""
    if _manager(ctx).store.remove(name):
        click.echo(f"Forgot {name}")
    else:
        click.echo(f"No history for {name}")


if __name__ == "__main__":
    main()
