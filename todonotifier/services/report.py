from collections.abc import Sequence
from typing import Any

from todonotifier.exceptions import RecordError, ResponseShapeError
from todonotifier.logger import logger
from todonotifier.models.todos import ProcessingOutcome, ReportLine

TITLE_WIDTH = 35


def lookup(tree: Any, *path: str | int) -> Any:
    """Walk dict keys and list indices. Returns None instead of raising."""
    node = tree
    for step in path:
        if isinstance(step, int) and isinstance(node, list):
            if not 0 <= step < len(node):
                return None
            node = node[step]
        elif isinstance(step, str) and isinstance(node, dict):
            node = node.get(step)
        else:
            return None
    return node


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def collect_results(body: Any) -> list:
    results = lookup(body, "results")
    if not isinstance(results, list):
        raise ResponseShapeError("expected 'results' array field which is not present in the response")
    return results


def extract_record(record: Any, index: int) -> ReportLine:
    """Project one todo onto a ReportLine.

    Title is checked before the Done checkbox and the first failure wins.
    Due dates are optional; a null or non-string date counts as absent.
    """
    properties = lookup(record, "properties")

    title = _as_str(lookup(properties, "Name", "title", 0, "plain_text"))
    if title is None:
        raise RecordError(index, "missing or invalid title")

    done = lookup(properties, "Done", "checkbox")
    if not isinstance(done, bool):
        raise RecordError(index, "missing or invalid 'Done' checkbox")

    return ReportLine(
        index=index,
        done=done,
        title=title,
        start=_as_str(lookup(properties, "Due", "date", "start")),
        end=_as_str(lookup(properties, "Due", "date", "end")),
    )


def render_datetime(raw: str) -> str:
    """``2024-01-15T09:30:00.000Z`` -> ``2024-01-15 09:30:00``; date-only values pass through.

    Sub-second precision and the timezone suffix are dropped.
    """
    date, sep, time = raw.partition("T")
    if not sep:
        return raw
    return f"{date} {time[:8]}"


def format_line(line: ReportLine) -> str:
    marker = "x" if line.done else " "
    output = f"[{marker}] {line.index}: {line.title:<{TITLE_WIDTH}} | "
    if line.start is not None:
        output += render_datetime(line.start)
    if line.end is not None:
        output += f" ~ {render_datetime(line.end)}"
    return output


def format_records(records: Sequence[Any]) -> ProcessingOutcome:
    """Render records in the order given. A bad record is skipped, not fatal."""
    outcome = ProcessingOutcome()
    for i, record in enumerate(records):
        try:
            line = extract_record(record, i)
        except RecordError as e:
            logger.debug(f"Skipping {e}")
            outcome.errors.append(str(e))
            continue
        outcome.lines.append(format_line(line))
    return outcome


def process_todos(body: Any) -> ProcessingOutcome:
    """Turn a database query response body into report lines and per-todo errors."""
    return format_records(collect_results(body))
