"""Console rendering of a repository projection."""

from __future__ import annotations

from typing import List, Optional, Tuple

from rich.console import Console, JustifyMethod
from rich.table import Table
from rich.text import Text

from .models import IssueRow, Projection, PullRequestRow

# (header, justify) pairs
ISSUE_COLUMNS = (("issue", "left"), ("comments", "right"))
PULL_REQUEST_COLUMNS = (
    ("pull requests", "left"),
    ("comments", "right"),
    ("commits", "right"),
    ("author", "left"),
)


def format_summary(projection: Projection) -> str:
    """Format the one-line ``<owner>/<name> - ⭐ <stars>`` summary."""
    return f"{projection.owner}/{projection.name} - ⭐ {projection.stars}"


def _new_table(columns: Tuple[Tuple[str, JustifyMethod], ...]) -> Table:
    table = Table(show_lines=True, header_style="bold")
    for header, justify in columns:
        table.add_column(header, justify=justify, overflow="fold")
    return table


def build_issue_table(rows: List[IssueRow]) -> Table:
    """Build the issues table; rows keep their given order."""
    table = _new_table(ISSUE_COLUMNS)
    for row in rows:
        table.add_row(Text(row.title), str(row.comments))
    return table


def build_pull_request_table(rows: List[PullRequestRow]) -> Table:
    """Build the pull requests table; rows keep their given order."""
    table = _new_table(PULL_REQUEST_COLUMNS)
    for row in rows:
        table.add_row(Text(row.title), str(row.comments), str(row.commits), Text(row.author))
    return table


def render(projection: Projection, console: Optional[Console] = None) -> None:
    """Print the summary line, then the issues and pull requests tables."""
    console = console or Console()
    # owner and name are printed verbatim, not as rich markup
    console.print(format_summary(projection), markup=False, highlight=False)
    console.print(build_issue_table(projection.issue_rows))
    console.print(build_pull_request_table(projection.pull_request_rows))
