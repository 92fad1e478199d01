"""Tests for console rendering of projections."""

import io
import sys
from pathlib import Path

from rich.console import Console

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from repoview.models import IssueRow, Projection, PullRequestRow
from repoview.presenter import (
    build_issue_table,
    build_pull_request_table,
    format_summary,
    render,
)


def _projection() -> Projection:
    return Projection(
        owner="octo",
        name="repo",
        stars=42,
        issue_rows=[IssueRow(title="Crash on [start]", comments=2), IssueRow(title="Docs", comments=0)],
        pull_request_rows=[PullRequestRow(title="Fix crash", comments=1, commits=3, author="alice")],
    )


def test_format_summary():
    """Verify the summary line shows owner, name and star count."""
    assert format_summary(_projection()) == "octo/repo - ⭐ 42"


def test_tables_have_expected_headers_and_row_order():
    """Verify table headers and row order follow the projection."""
    projection = _projection()

    issue_table = build_issue_table(projection.issue_rows)
    pull_request_table = build_pull_request_table(projection.pull_request_rows)

    assert [column.header for column in issue_table.columns] == ["issue", "comments"]
    assert [column.header for column in pull_request_table.columns] == [
        "pull requests",
        "comments",
        "commits",
        "author",
    ]
    assert issue_table.row_count == 2
    assert pull_request_table.row_count == 1
    assert [str(cell) for cell in issue_table.columns[0].cells] == ["Crash on [start]", "Docs"]
    assert list(pull_request_table.columns[3].cells)[0].plain == "alice"
    assert [column.justify for column in pull_request_table.columns] == ["left", "right", "right", "left"]


def test_render_prints_summary_then_tables():
    """Verify render writes the summary before the issue and pull request tables."""
    output = io.StringIO()
    console = Console(file=output, width=120, color_system=None)

    render(_projection(), console=console)

    text = output.getvalue()
    assert text.splitlines()[0] == "octo/repo - ⭐ 42"
    assert text.index("issue") < text.index("pull requests")
    assert "Crash on [start]" in text
    assert "alice" in text
