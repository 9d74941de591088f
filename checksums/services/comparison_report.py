"""Terminal report for a verification verdict."""

import rich.box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from checksums.core.constants import ExitCode
from checksums.core.types import Outcome, VerificationVerdict

_OUTCOME_STYLES = {
    Outcome.MISMATCHING: ("differs", "red"),
    Outcome.MISSING: ("missing", "red"),
    Outcome.EXTRA: ("extra", "yellow"),
}


def build_comparison_table(verdict: VerificationVerdict) -> Table | None:
    """Return one aligned row per non-matching or ignored path, or None."""
    table = Table(box=rich.box.SIMPLE, show_edge=False, pad_edge=False)
    table.add_column("Status", no_wrap=True)
    table.add_column("File", overflow="fold")
    table.add_column("Expected", no_wrap=True)
    table.add_column("Actual", no_wrap=True)

    for comparison in verdict.comparisons:
        if comparison.outcome is Outcome.MATCHING:
            continue
        status, style = _OUTCOME_STYLES[comparison.outcome]
        table.add_row(
            Text(status, style=style),
            Text(comparison.path),
            comparison.expected or "-",
            comparison.actual or "-",
        )

    for path in verdict.ignored:
        table.add_row(Text("ignored", style="dim"), Text(path), "-", "-")

    return table if table.row_count else None


def render_comparison(
    verdict: VerificationVerdict,
    console: Console | None = None,
    err_console: Console | None = None,
) -> ExitCode:
    """Print the verdict and return the process exit code for it.

    Args:
        verdict: Result of ``compare_manifests``
        console: Destination for the result table and summary (stdout)
        err_console: Destination for the failure line (stderr)

    Returns:
        ``ExitCode.SUCCESS`` when everything matched, otherwise
        ``ExitCode.VERIFICATION_FAILED``
    """
    console = console or Console()
    err_console = err_console or Console(stderr=True)

    table = build_comparison_table(verdict)
    if table is not None:
        console.print(table)

    counts = verdict.counts
    console.print(
        f"{counts[Outcome.MATCHING]} matched, "
        f"{counts[Outcome.MISMATCHING]} differ, "
        f"{counts[Outcome.MISSING]} missing, "
        f"{counts[Outcome.EXTRA]} extra "
        f"({verdict.algorithm})",
        highlight=False,
    )

    target = f" against {escape(verdict.label)}" if verdict.label else ""
    if verdict.all_matched:
        console.print(f"[green]Verification passed{target}[/green]")
        return ExitCode.SUCCESS

    err_console.print(f"[red]Verification failed{target}[/red]")
    return ExitCode.VERIFICATION_FAILED
