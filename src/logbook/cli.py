"""LogBook CLI - daily journaling and periodic reviews."""

import logging
import sys
from datetime import date, datetime
from pathlib import Path

import click

from .config import CONFIG_FILE, Config, load_config, save_config
from .errors import LogbookError
from .workflows import (
    append_entry,
    build_summarizer,
    create_or_get_daily_document,
    finalize_daily_document,
    run_review,
    summarize_daily,
)


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _load(ctx: click.Context) -> Config:
    try:
        return load_config(ctx.obj["config_path"])
    except LogbookError as e:
        _fail(e)


def _parse_date(target_date: str | None) -> date:
    if not target_date:
        return date.today()
    try:
        return date.fromisoformat(target_date)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {target_date!r}", param_hint="--date")


@click.group()
@click.version_option(package_name="logbook-journal")
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help=f"Configuration file (default: {CONFIG_FILE})")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, debug: bool):
    """LogBook - daily journaling and periodic reviews."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path or CONFIG_FILE


@main.command("config")
@click.pass_context
def config_cmd(ctx: click.Context):
    """Create a default configuration file."""
    path = ctx.obj["config_path"]
    if path.exists():
        click.echo(f"Configuration file already exists at: {path}")
        return
    try:
        save_config(Config(), path)
    except LogbookError as e:
        _fail(e)
    click.secho(f"Default configuration file created at: {path}", fg="green")


@main.command()
@click.argument("entry", nargs=-1, required=True)
@click.pass_context
def log(ctx: click.Context, entry: tuple[str, ...]):
    """Add an entry to today's journal."""
    config = _load(ctx)
    now = datetime.now()
    text = " ".join(entry)

    try:
        path, is_new = create_or_get_daily_document(config, now.date())
        if is_new:
            click.secho(f"Daily journal file created: {path}", fg="green")
            finalize_daily_document(config, path, now.date(), build_summarizer(config))
        else:
            click.secho(f"Daily journal file already exists: {path}", fg="green")
        append_entry(config, path, text, now)
    except LogbookError as e:
        _fail(e)

    click.secho(f"Log entry appended to {path}", fg="green")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date of the note (YYYY-MM-DD), defaults to today")
@click.pass_context
def summarize(ctx: click.Context, target_date: str | None):
    """Generate the summary of a daily note if it is missing."""
    config = _load(ctx)
    target = _parse_date(target_date)

    try:
        summary = summarize_daily(config, target, build_summarizer(config), sys.stdin)
    except LogbookError as e:
        _fail(e)

    if summary:
        click.secho(f"Summary added: {summary}", fg="green")
    else:
        click.echo(f"No summary added for {target}.")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date of the note (YYYY-MM-DD), defaults to today")
@click.pass_context
def finalize(ctx: click.Context, target_date: str | None):
    """Embed one-line notes from past entries into a daily note."""
    config = _load(ctx)
    target = _parse_date(target_date)

    try:
        path, _ = create_or_get_daily_document(config, target)
        finalize_daily_document(config, path, target, build_summarizer(config))
    except LogbookError as e:
        _fail(e)

    click.secho(f"One-line notes embedded in {path}", fg="green")


@main.group()
def review():
    """Review journal entries for a week, month or year."""
    pass


def _run_review(ctx: click.Context, kind: str, identifier, year: int) -> None:
    config = _load(ctx)
    try:
        path = run_review(config, kind, identifier, year, build_summarizer(config), sys.stdin)
    except LogbookError as e:
        _fail(e)
    click.secho(f"{kind.capitalize()}ly review generated at: {path}", fg="green")


@review.command("week")
@click.argument("week", type=int)
@click.argument("year", type=int)
@click.pass_context
def review_week(ctx: click.Context, week: int, year: int):
    """Review ISO week WEEK of YEAR."""
    _run_review(ctx, "week", week, year)


@review.command("month")
@click.argument("month")
@click.argument("year", type=int)
@click.pass_context
def review_month(ctx: click.Context, month: str, year: int):
    """Review MONTH (full English name, e.g. September) of YEAR."""
    _run_review(ctx, "month", month, year)


@review.command("year")
@click.argument("year", type=int)
@click.pass_context
def review_year(ctx: click.Context, year: int):
    """Review a whole YEAR, grouped by month."""
    _run_review(ctx, "year", year, year)


if __name__ == "__main__":
    main()
