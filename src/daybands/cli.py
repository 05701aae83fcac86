"""daybands CLI - print pause bands and render week previews."""

import json
import logging
import sys
from dataclasses import replace
from datetime import date

import click

from .adapters import IntervalSourceError, JsonIntervalSource, LoggingTraceSink
from .config import ConfigError, load_config, parse_week_days
from .workflows import bands_for_day, render_week


def _parse_date(ctx, param, value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}")


@click.group()
@click.version_option(package_name="daybands")
@click.option("--debug", is_flag=True, help="Enable debug logging and projection traces")
@click.pass_context
def main(ctx, debug: bool):
    """daybands - pause bands for calendar day columns."""
    ctx.ensure_object(dict)
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
        ctx.obj["trace"] = LoggingTraceSink()
    else:
        ctx.obj["trace"] = None


def _config_with_overrides(**overrides):
    config = load_config()
    values = {k: v for k, v in overrides.items() if v is not None}
    return replace(config, **values)


@main.command()
@click.argument("events_file", type=click.Path(dir_okay=False))
@click.option("--date", "-d", "column_date", callback=_parse_date, default=None,
              help="Column date (YYYY-MM-DD), defaults to today")
@click.option("--start-hour", type=int, default=None, help="First visible hour")
@click.option("--end-hour", type=int, default=None, help="End of the visible window (hour)")
@click.option("--height-per-minute", type=float, default=None, help="Pixels per minute")
@click.option("--width", "column_width", type=int, default=None, help="Column width in pixels")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def bands(ctx, events_file: str, column_date: date | None, start_hour: int | None,
          end_hour: int | None, height_per_minute: float | None, column_width: int | None,
          as_json: bool):
    """Show the pause bands of one day column."""
    column_date = column_date or date.today()
    config = _config_with_overrides(
        start_hour=start_hour,
        end_hour=end_hour,
        height_per_minute=height_per_minute,
        column_width=column_width,
    )

    try:
        rects = bands_for_day(JsonIntervalSource(events_file), column_date, config, ctx.obj["trace"])
    except (IntervalSourceError, ConfigError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "date": column_date.isoformat(),
                    "bands": [
                        {"x": r.x, "y": r.y, "width": r.width, "height": r.height}
                        for r in rects
                    ],
                },
                indent=2,
            )
        )
        return

    if not rects:
        click.echo(f"No pause bands on {column_date.strftime('%A, %B %d')}.")
        return

    click.echo(f"### {column_date.strftime('%A, %B %d')}")
    for r in rects:
        click.echo(f"  top={r.y:7.1f}  bottom={r.bottom:7.1f}  height={r.height:7.1f}")


@main.command()
@click.argument("events_file", type=click.Path(dir_okay=False))
@click.option("--start", "-s", "start", callback=_parse_date, required=True,
              help="First day of the week (YYYY-MM-DD)")
@click.option("--days", type=click.IntRange(1, 31), default=7, show_default=True,
              help="Number of day columns")
@click.option("--week-days", default=None, help='Shown weekdays, e.g. "mon,tue,wed,thu,fri"')
@click.option("--out", "-o", type=click.Path(dir_okay=False), required=True,
              help="Output image (PNG)")
@click.pass_context
def week(ctx, events_file: str, start: date, days: int, week_days: str | None, out: str):
    """Render a week preview image."""
    try:
        config = _config_with_overrides(
            week_days=parse_week_days(week_days) if week_days else None,
        )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--week-days")

    try:
        path = render_week(JsonIntervalSource(events_file), start, config, out, days, ctx.obj["trace"])
    except (IntervalSourceError, ConfigError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {path}")
