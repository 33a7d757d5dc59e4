from __future__ import annotations

import importlib
import logging
import time
import traceback
from dataclasses import dataclass
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from playwright.sync_api import sync_playwright

from todobench.harness import StepTiming, run_suite
from todobench.playwright_document import PlaywrightDocument
from todobench.suite import DEFAULT_NUM_ITEMS

DEFAULT_TARGET = "todobench.suite:add_complete_delete_suite"
DEFAULT_BASE_URL = "https://demo.playwright.dev/todomvc/"

app = typer.Typer(add_completion=False, no_args_is_help=True)

console = Console()

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of one browser session running the suite end to end."""
    idx: int
    ok: bool
    duration_ms: int
    steps: int = 0
    slowest: Optional[StepTiming] = None
    error: Optional[str] = None


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def load_callable(target: str) -> Callable:
    """
    Loads a callable in the format: "package.module:function".
    Example: "todobench.suite:add_complete_delete_suite"
    """
    if ":" not in target:
        raise ValueError(
            'Target must be in the form "module:function" '
            "(e.g. todobench.suite:add_complete_delete_suite)"
        )

    module_name, func_name = target.split(":", 1)
    module = importlib.import_module(module_name)

    fn = getattr(module, func_name, None)
    if fn is None or not callable(fn):
        raise ValueError(f'Function "{func_name}" not found or not callable in module "{module_name}"')

    return fn


def run_once(idx: int, suite_factory: Callable, num_items: int, headless: bool, base_url: str) -> RunResult:
    start = time.perf_counter()

    try:
        # Fresh suite per run; nothing carries over between sessions.
        suite = suite_factory(num_items=num_items)

        with sync_playwright() as p:
            browser = p.chromium.launch(headless=headless)
            try:
                context = browser.new_context()
                page = context.new_page()
                page.goto(base_url, wait_until="domcontentloaded")

                result = run_suite(suite, PlaywrightDocument(page))

                context.close()
            finally:
                browser.close()

        dur_ms = int((time.perf_counter() - start) * 1000)
        return RunResult(
            idx=idx,
            ok=True,
            duration_ms=dur_ms,
            steps=len(result.timings),
            slowest=result.slowest(),
        )

    except Exception:
        dur_ms = int((time.perf_counter() - start) * 1000)
        logger.debug("Run %d failed", idx, exc_info=True)
        return RunResult(idx=idx, ok=False, duration_ms=dur_ms, error=traceback.format_exc(limit=20))


@app.command("run")
def run_cmd(
    target: str = typer.Argument(
        DEFAULT_TARGET,
        help='Suite factory in the format "module:function"',
    ),
    items: int = typer.Option(
        DEFAULT_NUM_ITEMS,
        "--items",
        min=0,
        envvar="TODOBENCH_ITEMS",
        help="How many todos each run adds, completes and removes",
    ),
    runs: int = typer.Option(
        1,
        "--runs",
        min=1,
        max=500,
        help="How many browser sessions to run",
    ),
    headless: bool = typer.Option(
        True,
        "--headless/--headed",
        help="Run headless (default) or show the browser",
    ),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL,
        "--base-url",
        envvar="TODOBENCH_BASE_URL",
        help="TodoMVC page to open before the suite starts",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="TODOBENCH_LOG_LEVEL",
        help="Python logging level (DEBUG shows per-step timings)",
    ),
):
    """
    Run an add/complete/delete suite in Chromium and report per-run timings.
    """
    configure_logging(log_level)
    suite_factory = load_callable(target)

    results: list[RunResult] = []

    for i in range(1, runs + 1):
        r = run_once(i, suite_factory, num_items=items, headless=headless, base_url=base_url)
        results.append(r)

        status = "[green]OK[/green]" if r.ok else "[red]FAIL[/red]"
        console.print(f"Run {i}/{runs}: {status} ({r.duration_ms} ms) steps={r.steps}")

    total = len(results)
    failures = [r for r in results if not r.ok]
    passed = total - len(failures)
    avg = int(sum(r.duration_ms for r in results) / total)
    slowest = max(
        (r.slowest for r in results if r.slowest is not None),
        key=lambda t: t.duration_ms,
        default=None,
    )

    table = Table(title="todobench - Report")
    table.add_column("Metric", style="bold")
    table.add_column("Value")

    table.add_row("Target", target)
    table.add_row("Items", str(items))
    table.add_row("Runs", str(total))
    table.add_row("Passed", str(passed))
    table.add_row("Failed", str(len(failures)))
    table.add_row("Avg duration", f"{avg} ms")
    table.add_row(
        "Slowest step",
        f"{slowest.name} ({slowest.duration_ms:.1f} ms)" if slowest else "-",
    )

    console.print()
    console.print(table)

    if failures:
        console.print("\n[bold red]Failures (first 1 shown):[/bold red]\n")
        first = failures[0]
        console.print(f"[red]Run #{first.idx} failed[/red] after {first.duration_ms} ms\n")
        console.print(first.error, markup=False)
        raise typer.Exit(code=1)


@app.command("steps")
def steps_cmd(
    target: str = typer.Argument(DEFAULT_TARGET, help='Suite factory in the format "module:function"'),
    items: int = typer.Option(DEFAULT_NUM_ITEMS, "--items", min=0, envvar="TODOBENCH_ITEMS"),
):
    """
    Print the step names a suite would run, without opening a browser.
    """
    suite = load_callable(target)(num_items=items)
    for idx, step in enumerate(suite.steps):
        console.print(f"{idx:>4}  {step.name}", markup=False)


if __name__ == "__main__":
    app()
