"""CLI entry point for dialtimer.

Uses Click to expose the ``dialtimer`` command group.  The commands play the
part of the timer screen: they draw the dial, feed touch points to the state
machine and run the countdown on an asyncio event loop.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Callable, Optional, Sequence, Tuple, TypeVar

import click

import dialtimer
from dialtimer.cli.render import format_remaining, render_dial, render_frame
from dialtimer.config import TICK_INTERVAL, TIME_LIMIT, TimerConfig
from dialtimer.core.dial import Point, dial_ticks, position_to_time, time_to_angle
from dialtimer.core.timer import TimerSnapshot, TimerState, wait_until_idle
from dialtimer.logging_config import setup_logging

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _run(action: Callable[[], T]) -> T:
    """Execute *action*, converting configuration errors to a CLI error.

    On ``ValueError`` or ``TypeError`` the message is printed to stderr and
    the process exits with code 1.
    """
    try:
        return action()
    except (ValueError, TypeError) as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)


async def _countdown(
    config: TimerConfig,
    seconds: Optional[int],
    touches: Sequence[Tuple[float, float]],
    center: Tuple[float, float],
) -> Optional[TimerSnapshot]:
    """Set the start time, run the countdown and echo every change.

    Several *touches* replay a drag: each point is fed to the dial in turn,
    the way a finger moving over it would.

    Returns the final snapshot, or ``None`` when there was no time to count.
    """
    state = TimerState(config)
    try:
        click.echo(render_frame(state.snapshot()))
        unsubscribe = state.subscribe(lambda snapshot: click.echo(render_frame(snapshot)))
        if seconds is not None:
            state.set_time(seconds)
        for touch in touches:
            state.set_time_by_position(Point(*center), Point(*touch))

        state.toggle()
        if not state.running:
            return None
        final = await wait_until_idle(state)
        unsubscribe()
        return final
    finally:
        state.close()


@click.group()
@click.version_option(version=dialtimer.__version__, prog_name="dialtimer")
@click.option(
    "--time-limit",
    type=int,
    default=TIME_LIMIT,
    show_default=True,
    help="Seconds covered by a full dial.",
)
@click.option("--tick-interval", type=float, default=TICK_INTERVAL, hidden=True)
@click.option("-v", "--verbose", is_flag=True, help="Log state changes to stderr.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Also write the log to this file.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    time_limit: int,
    tick_interval: float,
    verbose: bool,
    log_file: Optional[str],
) -> None:
    """dialtimer: a countdown dial you set by touching a point on it."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file=log_file)
    ctx.obj = _run(lambda: TimerConfig(time_limit=time_limit, tick_interval=tick_interval))


@cli.command()
@click.option("--seconds", type=int, default=None, help="Start from SECONDS.")
@click.option(
    "--touch",
    "touches",
    type=(float, float),
    multiple=True,
    metavar="X Y",
    help="Touch the dial at X Y; repeat to drag along a path.",
)
@click.option(
    "--center",
    type=(float, float),
    default=(0.0, 0.0),
    show_default=True,
    metavar="CX CY",
    help="Center of the dial for --touch.",
)
@click.pass_obj
def run(
    config: TimerConfig,
    seconds: Optional[int],
    touches: Tuple[Tuple[float, float], ...],
    center: Tuple[float, float],
) -> None:
    """Run the countdown until the dial is empty."""
    if seconds is not None and touches:
        raise click.UsageError("--seconds and --touch cannot be used together")

    try:
        final = asyncio.run(_countdown(config, seconds, touches, center))
    except KeyboardInterrupt:
        click.echo("Stopped.", err=True)
        sys.exit(130)

    if final is None:
        click.echo("Nothing to count down.")
    else:
        click.echo("Time's up!")


@cli.command(name="map")
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.option(
    "--center",
    type=(float, float),
    default=(0.0, 0.0),
    show_default=True,
    metavar="CX CY",
    help="Center of the dial.",
)
@click.pass_obj
def map_command(config: TimerConfig, x: float, y: float, center: Tuple[float, float]) -> None:
    """Show the time a touch at X Y selects."""
    seconds = position_to_time(Point(*center), Point(x, y), time_limit=config.time_limit)
    angle = time_to_angle(seconds, config.time_limit)
    logger.debug("Touch (%s, %s) around %s maps to %d", x, y, center, seconds)
    click.echo(f"{format_remaining(seconds)} ({seconds}s at {angle:.1f} degrees)")


@cli.command()
@click.argument("progress", type=click.FloatRange(0.0, 1.0))
@click.pass_obj
def dial(config: TimerConfig, progress: float) -> None:
    """Draw the dial for PROGRESS between 0 and 1."""
    ticks = dial_ticks(progress, config.time_limit)
    full = sum(1 for tick in ticks if tick.filled)
    partial = sum(1 for tick in ticks if tick.partial)
    empty = len(ticks) - full - partial
    click.echo(f"[{render_dial(progress, config.time_limit)}]")
    click.echo(f"full: {full}, partial: {partial}, empty: {empty}")
