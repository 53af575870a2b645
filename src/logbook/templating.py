"""Template rendering for file names, daily templates and log entries.

Templates are str.format strings. Dates and times accept strftime format
specs, e.g. "{date:%Y-%m-%d}.md" or "{time:%H:%M} {entry}".
"""

from datetime import date, datetime

from .errors import TemplateError


def render(template: str, **fields) -> str:
    """Render a template with the given fields."""
    try:
        return template.format_map(fields)
    except KeyError as e:
        raise TemplateError(f"unknown template field {e} in {template!r}") from e
    except (ValueError, IndexError, AttributeError) as e:
        raise TemplateError(f"failed to render template {template!r}: {e}") from e


def render_daily_file_name(template: str, day: date) -> str:
    return render(template, date=day)


def render_daily_template(template: str, day: date) -> str:
    return render(template, date=day)


def render_log_entry(template: str, timestamp: datetime, entry: str) -> str:
    return render(template, time=timestamp, date=timestamp.date(), entry=entry)


def render_one_line_note(template: str, day: date, summary: str) -> str:
    return render(template, date=day, summary=summary)
