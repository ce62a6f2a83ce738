"""Rich console reporter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from expecto.reports.base import Reporter
from expecto.testing.runner import RunResult, TestResult, TestStatus

if TYPE_CHECKING:
    from expecto.assertions.base import AssertionResult
    from expecto.testing.suite import Suite

_MARKS = {
    TestStatus.PASSED: "[green]✓[/green]",
    TestStatus.FAILED: "[red]✕[/red]",
    TestStatus.SKIPPED: "[yellow]○[/yellow]",
}


class ConsoleReporter(Reporter):
    """Prints one line per test and a summary with failure details."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    async def on_run_start(self, suite: Suite) -> None:
        if self.verbosity < 0:
            return
        count = sum(1 for _ in suite.iter_tests())
        self.console.print(f"[bold]Running {count} test{'s' if count != 1 else ''}[/bold]")

    async def on_test_complete(self, result: TestResult) -> None:
        if self.verbosity < 0:
            return
        if result.status is TestStatus.SKIPPED and self.verbosity < 1:
            return
        line = f"  {_MARKS[result.status]} {escape(result.full_name)}"
        if result.status is not TestStatus.SKIPPED:
            line += f" [dim]({result.duration_ms:.0f} ms)[/dim]"
        elif result.skip_reason:
            line += f" [dim]({escape(result.skip_reason)})[/dim]"
        self.console.print(line)
        if self.verbosity >= 2:
            for assertion in result.assertions:
                self._print_assertion(assertion)

    def _print_assertion(self, assertion: AssertionResult) -> None:
        record = assertion.model_dump(context={"truncate": True})
        mark = "[green]✓[/green]" if record["passed"] else "[red]✕[/red]"
        matcher = ("not_." if record["negated"] else "") + record["matcher"]
        line = f"      {mark} {matcher} received {escape(record['actual'])}"
        if record["expected"] is not None:
            line += f" expected {escape(record['expected'])}"
        self.console.print(line, highlight=False)

    async def on_run_complete(self, run_result: RunResult) -> None:
        for result in run_result.failures:
            self.console.print()
            kind = result.failure_kind.value if result.failure_kind else "error"
            self.console.print(f"[bold red]● {escape(result.full_name)}[/bold red] [dim]\\[{kind}][/dim]")
            self.console.print()
            for line in (result.message or "").splitlines():
                self.console.print(f"    {escape(line)}", highlight=False)

        for failure in run_result.hook_failures:
            self.console.print()
            where = failure.group_name or "root"
            self.console.print(f"[bold red]● {failure.kind.value} hook of {escape(where)}[/bold red]")
            self.console.print(f"    {escape(str(failure.error))}", highlight=False)

        self.console.print()
        parts = []
        if run_result.failed:
            parts.append(f"[bold red]{run_result.failed} failed[/bold red]")
        if run_result.skipped:
            parts.append(f"[yellow]{run_result.skipped} skipped[/yellow]")
        parts.append(f"[bold green]{run_result.passed} passed[/bold green]")
        parts.append(f"{run_result.total} total")
        self.console.print(f"[bold]Tests:[/bold] {', '.join(parts)}")
        if run_result.hook_failures:
            self.console.print(f"[bold]Hooks:[/bold] [bold red]{len(run_result.hook_failures)} failed[/bold red]")
        self.console.print(f"[bold]Time:[/bold] {run_result.duration_ms / 1000:.3f} s")

    async def on_run_stopped_early(self, failure_count: int) -> None:
        self.console.print(f"[yellow]Stopping after {failure_count} failures (maxfail reached)[/yellow]")
