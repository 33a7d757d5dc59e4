from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from todobench.errors import NoFactsError, StepFailed
from todobench.suite import Step, Suite

logger = logging.getLogger(__name__)


@dataclass
class StepTiming:
    name: str
    duration_ms: float


@dataclass
class SuiteResult:
    """Per-step timings of one complete pass over a suite."""
    timings: List[StepTiming] = field(default_factory=list)

    @property
    def total_ms(self) -> float:
        return sum(t.duration_ms for t in self.timings)

    def slowest(self) -> Optional[StepTiming]:
        if not self.timings:
            return None
        return max(self.timings, key=lambda t: t.duration_ms)


def run_suite(
    suite: Suite,
    doc: Any,
    on_step: Optional[Callable[[int, Step], None]] = None,
) -> SuiteResult:
    """
    Replay `suite` against `doc`, one step at a time, in order.

    Facts are taken once up front and handed to every step. The first
    failing step stops the run; its error is re-raised as `StepFailed`
    with the original exception chained.
    """
    facts = suite.get_facts(doc)
    if facts is None:
        raise NoFactsError("suite cannot run on this document: no facts")

    result = SuiteResult()
    for idx, step in enumerate(suite.steps):
        if on_step is not None:
            on_step(idx, step)

        start = time.perf_counter()
        try:
            step.work(facts)
        except Exception as e:
            raise StepFailed(step.name, idx) from e
        dur_ms = (time.perf_counter() - start) * 1000

        result.timings.append(StepTiming(name=step.name, duration_ms=dur_ms))
        logger.debug("%s took %.2f ms", step.name, dur_ms)

    logger.info("Ran %d steps in %.1f ms", len(result.timings), result.total_ms)
    return result
