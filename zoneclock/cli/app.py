"""
Main CLI application using Typer.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional, Annotated

import pendulum
import typer
from pendulum import DateTime
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..adapters.offset_resolver import PendulumOffsetResolver
from ..config import AppConfig, get_default_config_path
from ..domain.clock_math import HOURS_PER_DAY, MINUTES_PER_HOUR
from ..domain.exceptions import ZoneClockError
from ..domain.local_time import LocalTimeResolver
from ..domain.models import Person
from ..services.team_clock import MeetingSummary, PersonSnapshot, TeamClockService

app = typer.Typer(
    name="zoneclock",
    help="Local times, working hours and shared meeting windows across timezones",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")]
TeamOption = Annotated[Optional[str], typer.Option("--team", "-t", help="Only show members of this team.")]
PersonOption = Annotated[Optional[List[str]], typer.Option("--person", "-p", help="Only include these people (repeatable).")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def _configure_logging(verbose: bool) -> None:
    """Route log records through rich; debug level only when asked for."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    config_path = config_file or get_default_config_path()
    return AppConfig.load_from_yaml(config_path)


def _build_service(config: AppConfig) -> TeamClockService:
    resolver = LocalTimeResolver(PendulumOffsetResolver(default_timezone=config.timezone))
    return TeamClockService(resolver=resolver)


def _select_people(
    config: AppConfig,
    team: Optional[str],
    names: Optional[List[str]] = None
) -> List[Person]:
    """Resolve the --team and --person options against the configuration."""
    if names:
        unknown = [name for name in names if config.find_person_by_name(name) is None]
        if unknown:
            raise ValueError(f"Unknown person(s): {', '.join(unknown)}")
        people = [config.find_person_by_name(name).to_person() for name in names]
    else:
        people = config.to_people()

    if team is None:
        return people

    configured = config.find_team(team)
    if configured is None:
        raise ValueError(
            f"Unknown team: '{team}'. "
            f"Configured teams: {', '.join(config.teams) or 'none'}"
        )
    return TeamClockService.filter_by_team(people, configured)


def _timeline_bar(snapshot: PersonSnapshot) -> str:
    """
    Render the 24-hour timeline as one cell per local hour.

    Working hours are green, the current hour carries the status colour.
    """
    working_hours = snapshot.person.working_hours
    current_hour = snapshot.local_minute // MINUTES_PER_HOUR
    cells = []

    for hour in range(HOURS_PER_DAY):
        if hour == current_hour:
            cells.append(f"[bold {snapshot.status.color}]●[/]")
        elif working_hours.contains(hour * MINUTES_PER_HOUR):
            cells.append("[green]█[/]")
        else:
            cells.append("[dim]·[/]")

    return "".join(cells)


def _render_timelines(snapshots: List[PersonSnapshot]) -> Table:
    table = Table(
        title="Timelines",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Name", style="bold yellow")
    table.add_column("Timezone", style="dim")
    table.add_column("Local time", justify="right")
    table.add_column("Offset", style="dim")
    table.add_column("Status")
    table.add_column("Timeline (local 00-23h)")

    for snapshot in snapshots:
        table.add_row(
            snapshot.person.display_name,
            snapshot.person.timezone,
            f"[bold]{snapshot.local_time}[/bold]",
            snapshot.offset_label,
            f"[{snapshot.status.color}]{snapshot.status.label}[/]",
            _timeline_bar(snapshot),
        )

    return table


def _render_meetings(summary: MeetingSummary) -> None:
    console.print(
        f"[bold cyan]Best Meeting Times[/bold cyan] "
        f"[dim]({summary.day_start.format('YYYY-MM-DD')} UTC, shown in {summary.viewer_timezone})[/dim]"
    )

    if not summary.has_overlap:
        console.print("[yellow]⚠ No full overlap found for all members[/yellow]")
        return

    for view in summary.slots:
        console.print(
            f"  [green]▌[/green] [bold]{view.display_range}[/bold]  "
            f"[dim]{view.duration_label}[/dim]"
        )
        console.print(f"    [dim]{view.format_local_times()}[/dim]")


def _render_dashboard(config: AppConfig, people: List[Person], instant: DateTime) -> None:
    service = _build_service(config)

    console.print(f"[dim]{instant.in_timezone(config.timezone).format('ddd, D MMM YYYY HH:mm')} ({config.timezone})[/dim]\n")

    if not people:
        console.print("[yellow]No people configured. Add people to see their timezones.[/yellow]")
        return

    console.print(_render_timelines(service.snapshots(people, instant)))
    console.print()
    _render_meetings(service.meeting_summary(people, instant, config.timezone))
    console.print()


@app.command()
def now(
    config_file: ConfigOption = None,
    team: TeamOption = None,
    person: PersonOption = None,
    at: Annotated[Optional[str], typer.Option("--at", help="Show the dashboard at this instant (ISO 8601) instead of now.")] = None,
    watch: Annotated[bool, typer.Option("--watch", "-w", help="Refresh the dashboard periodically until interrupted.")] = False,
    verbose: VerboseOption = False,
):
    """
    Show everybody's local time, working status and the best meeting times.
    
    Examples:
    
        zoneclock now
        zoneclock now --team Engineering
        zoneclock now --person Alex --person Kenji
        zoneclock now --at 2024-11-25T15:00:00Z
        zoneclock now --watch
    """
    _configure_logging(verbose)

    try:
        config = _load_config(config_file)
        people = _select_people(config, team, person)

        if at and watch:
            console.print("[red]Error: --at and --watch cannot be used together.[/red]")
            raise typer.Exit(1)

        if at:
            try:
                instant = pendulum.parse(at, tz=config.timezone)
            except Exception as e:
                console.print(f"[red]Error parsing --at: {e}[/red]")
                raise typer.Exit(1)
            if not isinstance(instant, DateTime):
                console.print(f"[red]Error parsing --at: '{at}' is not a date and time[/red]")
                raise typer.Exit(1)
            _render_dashboard(config, people, instant)
            return

        if not watch:
            _render_dashboard(config, people, pendulum.now("UTC"))
            return

        try:
            while True:
                console.clear()
                _render_dashboard(config, people, pendulum.now("UTC"))
                console.print(f"[dim]Refreshing every {config.refresh_seconds}s, Ctrl+C to stop.[/dim]")
                time.sleep(config.refresh_seconds)
        except KeyboardInterrupt:
            console.print()

    except (FileNotFoundError, ValueError, ZoneClockError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def meetings(
    config_file: ConfigOption = None,
    team: TeamOption = None,
    person: PersonOption = None,
    date: Annotated[Optional[str], typer.Option("--date", "-d", help="UTC day to search (YYYY-MM-DD). Defaults to today.")] = None,
    verbose: VerboseOption = False,
):
    """
    List the windows of a UTC day in which everybody is working.
    """
    _configure_logging(verbose)

    try:
        config = _load_config(config_file)
        people = _select_people(config, team, person)

        if date:
            try:
                day = pendulum.from_format(date, "YYYY-MM-DD", tz="UTC")
            except Exception as e:
                console.print(f"[red]Error parsing date: {e}[/red]")
                raise typer.Exit(1)
        else:
            day = pendulum.now("UTC")

        console.print()
        if not people:
            console.print("[yellow]No people selected.[/yellow]\n")
            return

        summary = _build_service(config).meeting_summary(people, day, config.timezone)

        console.print(f"[bold]Participants:[/bold] {', '.join(p.display_name for p in people)}")
        _render_meetings(summary)
        console.print()

    except (FileNotFoundError, ValueError, ZoneClockError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def list_people(
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    List all configured people and their working hours.
    """
    _configure_logging(verbose)

    try:
        config = _load_config(config_file)

        if not config.people:
            console.print("[yellow]No people defined in the config file.[/yellow]")
            return

        table = Table(
            title="Configured People",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Name", style="bold yellow")
        table.add_column("Timezone", style="dim")
        table.add_column("Working hours")
        table.add_column("Team", style="dim")

        for person in config.to_people():
            table.add_row(
                person.display_name,
                person.timezone,
                str(person.working_hours),
                person.team or "–"
            )

        console.print()
        console.print(table)
        if config.teams:
            console.print(Panel.fit(", ".join(config.teams), title="Teams"))
        console.print()

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]zoneclock[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
