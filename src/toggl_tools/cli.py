"""CLI entry point for the Toggl tools."""

import json
from datetime import date, datetime, timedelta, timezone
from importlib.metadata import PackageNotFoundError, version as package_version
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from .api.client import TogglClient
from .api.projects import ProjectsAPI
from .api.reports import ReportsAPI
from .api.time_entries import TimeEntriesAPI
from .config import load_config
from .exceptions import InputError, NoTimerError, TimerRunningError
from .resolver import resolve_project
from .ui.tables import ReportTable, format_duration, sorted_project_names

PACKAGE_NAME = "toggl-tools"

console = Console()


def get_version() -> str:
    """Installed package version."""
    try:
        return package_version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "unknown"


def parse_clock(value: str) -> datetime:
    """Today at HH:MM local time."""
    try:
        clock = datetime.strptime(value, "%H:%M")
    except ValueError as e:
        raise InputError(f"bad time (should be HH:MM) - {value!r}") from e

    now = datetime.now().astimezone()
    return now.replace(hour=clock.hour, minute=clock.minute, second=0, microsecond=0)


def parse_date(value: str) -> str:
    """Check a YYYY-MM-DD date and return it normalized."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").strftime("%Y-%m-%d")
    except ValueError as e:
        raise InputError(f"bad date (should be YYYY-MM-DD) - {value!r}") from e


class PrefixGroup(click.Group):
    """Group that also accepts any unambiguous prefix of a command name."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command

        matches = [name for name in self.list_commands(ctx) if name.startswith(cmd_name)]
        if not matches:
            return None
        if len(matches) == 1:
            return super().get_command(ctx, matches[0])
        ctx.fail(f"Too many matches to {cmd_name!r}: {', '.join(sorted(matches))}")

    def resolve_command(self, ctx, args):
        _, command, args = super().resolve_command(ctx, args)
        return (command.name if command else None), command, args


def open_client(ctx: click.Context) -> TogglClient:
    """Load configuration and create a client for the current command."""
    config = load_config()
    return TogglClient(config, verbose=ctx.obj.get("verbose", False))


@click.group(cls=PrefixGroup)
@click.version_option(package_name=PACKAGE_NAME, prog_name="toggl", message="%(prog)s version %(version)s")
@click.option("--verbose", "-v", is_flag=True, help="Trace API requests on stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Simple command line for Toggl Track timers.

    Reads the API token and workspace ID from ~/.togglrc (or $TOGGLRC).
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command("version")
def version_cmd():
    """Show version and exit."""
    click.echo(f"toggl version {get_version()}")


@cli.command("projects")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def projects_cmd(ctx: click.Context, as_json: bool):
    """List workspace projects."""
    with open_client(ctx) as client:
        projects = ProjectsAPI(client).list()

    if as_json:
        output = [
            {
                "id": p.id,
                "name": p.name,
                "client": p.client_name,
                "full_name": p.full_name,
            }
            for p in sorted(projects, key=lambda p: p.full_name.casefold())
        ]
        print(json.dumps(output, indent=2))
        return

    for name in sorted_project_names(projects):
        click.echo(name)


@cli.command("start")
@click.argument("project")
@click.option("--time", "-t", "start_time", help="Start time today (HH:MM), defaults to now")
@click.option("--description", "-d", default="", help="Time entry description")
@click.pass_context
def start_cmd(ctx: click.Context, project: str, start_time: Optional[str], description: str):
    """Start a timer for PROJECT (fuzzy matched)."""
    start = parse_clock(start_time) if start_time else datetime.now().astimezone()
    start = start.astimezone(timezone.utc)

    with open_client(ctx) as client:
        projects_api = ProjectsAPI(client)
        time_api = TimeEntriesAPI(client)

        timer = time_api.current()
        if timer is not None:
            raise TimerRunningError(projects_api.name_from_id(timer.project_id))

        selected = resolve_project(project, projects_api.list())
        console.print(f"Starting [green]{escape(selected.name)}[/green]")
        time_api.start(selected.id, start, description=description)


@cli.command("stop")
@click.pass_context
def stop_cmd(ctx: click.Context):
    """Stop the running timer."""
    with open_client(ctx) as client:
        time_api = TimeEntriesAPI(client)

        timer = time_api.current()
        if timer is None:
            raise NoTimerError()

        entry = time_api.stop(timer.id, timer.workspace_id)
        name = ProjectsAPI(client).name_from_id(entry.project_id)

    click.echo(f"{name}: {format_duration(entry.duration)}")


@cli.command("status")
@click.pass_context
def status_cmd(ctx: click.Context):
    """Show the running timer and its elapsed time."""
    with open_client(ctx) as client:
        timer = TimeEntriesAPI(client).current()
        if timer is None:
            raise NoTimerError("no timer is running")

        elapsed = datetime.now(timezone.utc) - timer.start
        name = ProjectsAPI(client).name_from_id(timer.project_id)

    click.echo(f"{name}: {format_duration(elapsed)}")


@cli.command("report")
@click.argument("since", required=False)
@click.option("--until", "-u", help="Last day (YYYY-MM-DD)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def report_cmd(ctx: click.Context, since: Optional[str], until: Optional[str], as_json: bool):
    """Print time per project since SINCE (YYYY-MM-DD, default yesterday)."""
    since_str = parse_date(since) if since else (date.today() - timedelta(days=1)).isoformat()
    until_str = parse_date(until) if until else None

    with open_client(ctx) as client:
        lines = ReportsAPI(client).summary(since_str, until_str)

    if as_json:
        output = {
            "since": since_str,
            "until": until_str,
            "projects": [
                {"project": line.project, "seconds": int(line.duration.total_seconds())}
                for line in lines
            ],
        }
        print(json.dumps(output, indent=2))
        return

    title = f"Report since {since_str}"
    if until_str:
        title += f" until {until_str}"
    ReportTable(console).print_table(lines, title=title)


if __name__ == "__main__":
    cli()
