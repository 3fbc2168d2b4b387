"""
Host-facing adapter around :func:`modcohesion.checks.visit`.

The host walks its syntax trees and hands over ``(node, context)`` pairs in
visit order. :func:`analyze` turns them into an :class:`AnalysisReport`;
:class:`CohesionAnalyzer` additionally logs each finding and a summary.

Example:
    >>> analyzer = CohesionAnalyzer(CohesionConfig())
    >>> report = analyzer.run(host_visits)
    >>> report.counts()
    {<ViolationKind.IMPORT: 'import-violation'>: 1}
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, replace

from modcohesion.checks import visit
from modcohesion.config import CohesionConfig
from modcohesion.context import VisitContext
from modcohesion.log_effects import LoggingError, LoggingInterpreter, LogMessage
from modcohesion.messages import format_violation
from modcohesion.result import Failure
from modcohesion.violations import ViolationKind, ViolationRecord


__all__: list[str] = [
    "AnalysisReport",
    "analyze",
    "report_log_messages",
    "CohesionAnalyzer",
]

LOGGER_NAME = "modcohesion.analyzer"

Visit = tuple[object, VisitContext]


@dataclass(frozen=True)
class AnalysisReport:
    """Findings for a batch of visited nodes, in visit order."""

    records: tuple[ViolationRecord, ...]
    nodes_visited: int
    logging_errors: tuple[LoggingError, ...] = ()

    @property
    def total(self) -> int:
        return len(self.records)

    def counts(self) -> dict[ViolationKind, int]:
        """Number of findings per violation kind (kinds without findings omitted)."""
        return dict(Counter(record.kind for record in self.records))

    def modules(self) -> dict[str, int]:
        """Number of findings per offending module; ``"?"`` when the module is unknown."""
        return dict(Counter(record.current_module or "?" for record in self.records))


def analyze(visits: Iterable[Visit], config: CohesionConfig) -> AnalysisReport:
    visit_list = list(visits)
    records = tuple(
        record for node, context in visit_list for record in visit(node, context, config)
    )
    return AnalysisReport(records=records, nodes_visited=len(visit_list))


def report_log_messages(report: AnalysisReport) -> tuple[LogMessage, ...]:
    """Describe the report as log effects: one debug line per finding, then a summary."""
    findings = tuple(
        LogMessage(level="debug", message=format_violation(record), logger_name=LOGGER_NAME)
        for record in report.records
    )
    by_kind = ", ".join(f"{kind.value}={count}" for kind, count in report.counts().items())
    by_module = ", ".join(f"{module}={count}" for module, count in report.modules().items())
    summary = LogMessage(
        level="warning" if report.total else "info",
        message=(
            f"{report.total} module cohesion violation(s) in {report.nodes_visited} node(s)"
            + (f" ({by_kind}; modules: {by_module})" if by_kind else "")
        ),
        logger_name=LOGGER_NAME,
    )
    return findings + (summary,)


class CohesionAnalyzer:
    """Runs the cohesion checks over host visits and logs the outcome."""

    def __init__(
        self,
        config: CohesionConfig | None = None,
        interpreter: LoggingInterpreter | None = None,
    ) -> None:
        self.config = config or CohesionConfig()
        self._interpreter = interpreter or LoggingInterpreter()

    def visit(self, node: object, context: VisitContext) -> list[ViolationRecord]:
        """Narrow per-node entry point for hosts that drive the walk themselves."""
        return visit(node, context, self.config)

    def run(self, visits: Iterable[Visit]) -> AnalysisReport:
        report = analyze(visits, self.config)
        errors = tuple(
            result.error
            for result in map(self._interpreter.interpret, report_log_messages(report))
            if isinstance(result, Failure)
        )
        return replace(report, logging_errors=errors)
