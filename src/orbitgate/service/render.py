"""Human-readable and JSON renderings of a validation report."""

from __future__ import annotations

from orbitgate.models.report import FileCheckResult, ValidationReport

HEADER = "Running syntax validation..."
PASSED = "All syntax validation tests passed!"
FAILED = "Some tests failed"


def _line(result: FileCheckResult) -> str:
    if result.ok:
        return f"OK: {result.path}"
    return f"FAILED: {result.path} - {result.error_message}"


def render_text(report: ValidationReport, verbose: bool = False) -> str:
    """Render the report the way CI logs show it.

    Failures name the file and reason; the warnings line says whether the
    threshold was exceeded, so the two failure kinds are distinguishable.
    """
    lines = [HEADER, ""]
    lines.extend(_line(r) for r in report.results)
    lines.extend(_line(r) for r in report.analysis_failures)

    if verbose:
        for diagnostic in report.diagnostics:
            label = "fatal" if diagnostic.fatal else "warning"
            lines.append(f"  {diagnostic.location()}: {label}: {diagnostic.message}")

    lines.append("")
    if report.results or report.analysis_failures:
        status = "threshold exceeded" if report.threshold_exceeded else "ok"
        lines.append(
            f"Warnings: {report.warning_count} (threshold {report.warning_threshold}) - {status}"
        )
    lines.append(PASSED if report.passed else FAILED)
    return "\n".join(lines) + "\n"


def render_json(report: ValidationReport) -> str:
    return report.model_dump_json(indent=2) + "\n"
