"""
Run reporting for the suites.

``ResultsCollector`` is a pytest plugin that records the outcome of every
test and writes ``results.json`` when the session ends; ``render_html_report``
turns that file into a single-page HTML summary.
"""

import json
import logging
import os
import time
import uuid
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from jinja2 import Environment, FileSystemLoader
from pydantic import BaseModel, ConfigDict, Field, validator

from .core.exceptions import DataFileError


logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

KNOWN_MARKERS = ("api", "ui", "smoke", "data_driven", "slow")

ARTIFACT_SUFFIXES = {".zip": "trace", ".png": "screenshot", ".webm": "video"}


class TestStatus(Enum):
    """Test execution status."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    ERROR = "error"


class TestCaseResult(BaseModel):
    """Individual test case result."""

    __test__ = False

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="pytest node id")
    status: TestStatus = Field(..., description="Final outcome")
    duration: float = Field(0.0, ge=0, description="Call duration in seconds")
    file_path: str = Field("", description="Test file path")
    error_message: Optional[str] = Field(None, description="Short failure reason")
    stack_trace: Optional[str] = Field(None, description="Full failure output")
    tags: List[str] = Field(default_factory=list, description="Suite markers")
    attempts: int = Field(1, ge=1, description="Runs including reruns")

    @validator("name")
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Test name cannot be empty")
        return v.strip()


class RunSummary(BaseModel):
    """Summary of test execution results."""

    model_config = ConfigDict(extra="forbid")

    total_tests: int = Field(0, ge=0)
    passed: int = Field(0, ge=0)
    failed: int = Field(0, ge=0)
    skipped: int = Field(0, ge=0)
    errors: int = Field(0, ge=0)
    duration: float = Field(0.0, ge=0, description="Wall time in seconds")
    success_rate: float = Field(0.0, ge=0, le=100, description="Passed / total, percent")

    @classmethod
    def from_results(cls, results: List[TestCaseResult], duration: float) -> "RunSummary":
        counts = {status: 0 for status in TestStatus}
        for result in results:
            counts[result.status] += 1

        total = len(results)
        passed = counts[TestStatus.PASSED]
        return cls(
            total_tests=total,
            passed=passed,
            failed=counts[TestStatus.FAILED],
            skipped=counts[TestStatus.SKIPPED],
            errors=counts[TestStatus.ERROR],
            duration=duration,
            success_rate=(passed / total * 100) if total else 0.0,
        )


class RunReport(BaseModel):
    """Complete test run report."""

    model_config = ConfigDict(extra="forbid")

    run_id: str = Field(..., description="Run identifier")
    profile: str = Field("", description="Environment profile or project name")
    started_at: datetime
    completed_at: datetime
    summary: RunSummary
    test_cases: List[TestCaseResult] = Field(default_factory=list)
    artifacts: List[str] = Field(default_factory=list, description="Trace, screenshot and video files")

    @validator("run_id")
    def validate_run_id(cls, v):
        if not v or not v.strip():
            raise ValueError("Run ID cannot be empty")
        return v.strip()

    @property
    def failures(self) -> List[TestCaseResult]:
        return [t for t in self.test_cases if t.status in (TestStatus.FAILED, TestStatus.ERROR)]


def collect_artifacts(output_dir: Path) -> List[str]:
    """Paths of traces, screenshots and videos written by pytest-playwright."""
    if not output_dir.exists():
        return []
    return sorted(
        str(path)
        for path in output_dir.rglob("*")
        if path.is_file() and path.suffix in ARTIFACT_SUFFIXES
    )


def _error_message(report) -> Optional[str]:
    crash = getattr(report.longrepr, "reprcrash", None)
    if crash is not None:
        return crash.message
    if isinstance(report.longrepr, tuple):
        # Skip reports carry (path, lineno, reason)
        return str(report.longrepr[-1])
    return str(report.longrepr) if report.longrepr else None


class ResultsCollector:
    """
    pytest plugin recording one result per test.

    Reruns overwrite earlier attempts, so the final outcome wins. Under
    pytest-xdist only the controller process writes the file.
    """

    def __init__(
        self,
        results_file: Path,
        profile: str = "",
        artifacts_dir: Optional[Path] = None,
        run_id: Optional[str] = None,
    ):
        self.results_file = Path(results_file)
        self.profile = profile
        self.artifacts_dir = artifacts_dir
        self.run_id = run_id or uuid.uuid4().hex[:12]
        self.results: Dict[str, TestCaseResult] = {}
        self._attempts: Dict[str, int] = {}
        self._started = datetime.now(timezone.utc)
        self._start_time = time.time()

    def _store(self, report, status: TestStatus) -> None:
        error = None
        trace = None
        if status in (TestStatus.FAILED, TestStatus.ERROR, TestStatus.SKIPPED):
            error = _error_message(report)
        if status in (TestStatus.FAILED, TestStatus.ERROR):
            trace = report.longreprtext

        self.results[report.nodeid] = TestCaseResult(
            name=report.nodeid,
            status=status,
            duration=max(report.duration, 0.0),
            file_path=report.location[0] if report.location else "",
            error_message=error,
            stack_trace=trace,
            tags=sorted(k for k in report.keywords if k in KNOWN_MARKERS),
            attempts=self._attempts.get(report.nodeid, 0) + 1,
        )

    def pytest_runtest_logreport(self, report) -> None:
        if report.outcome == "rerun":
            self._attempts[report.nodeid] = self._attempts.get(report.nodeid, 0) + 1
            return

        if report.when == "setup":
            if report.failed:
                self._store(report, TestStatus.ERROR)
            elif report.skipped:
                self._store(report, TestStatus.SKIPPED)
        elif report.when == "call":
            if report.passed:
                self._store(report, TestStatus.PASSED)
            elif report.failed:
                self._store(report, TestStatus.FAILED)
            else:
                self._store(report, TestStatus.SKIPPED)
        elif report.when == "teardown" and report.failed:
            previous = self.results.get(report.nodeid)
            if previous is None or previous.status == TestStatus.PASSED:
                self._store(report, TestStatus.ERROR)

    def build_report(self) -> RunReport:
        results = list(self.results.values())
        return RunReport(
            run_id=self.run_id,
            profile=self.profile,
            started_at=self._started,
            completed_at=datetime.now(timezone.utc),
            summary=RunSummary.from_results(results, time.time() - self._start_time),
            test_cases=results,
            artifacts=collect_artifacts(self.artifacts_dir) if self.artifacts_dir else [],
        )

    def write(self) -> RunReport:
        report = self.build_report()
        self.results_file.parent.mkdir(parents=True, exist_ok=True)
        self.results_file.write_text(report.model_dump_json(indent=2), encoding="utf-8")
        logger.info(
            f"Results written to {self.results_file}",
            extra={"metadata": report.summary.model_dump()},
        )
        return report

    @pytest.hookimpl(trylast=True)
    def pytest_sessionfinish(self, session, exitstatus) -> None:
        if hasattr(session.config, "workerinput"):
            return
        self.write()


def load_report(path: Path) -> RunReport:
    """Load a results file written by ResultsCollector."""
    path = Path(path)
    if not path.exists():
        raise DataFileError(f"Results file not found: {path}", file_path=str(path), operation="read")
    try:
        return RunReport.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, ValueError) as e:
        raise DataFileError(
            f"Invalid results file {path}: {e}", file_path=str(path), operation="parse"
        ) from e


def render_html_report(
    report: RunReport, output_path: Path, template_dir: Optional[Path] = None
) -> Path:
    """
    Render the HTML summary page.

    Args:
        report: Run report to render
        output_path: Destination HTML file
        template_dir: Directory holding ``report.html``

    Returns:
        Path of the written file
    """
    env = Environment(
        loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
        autoescape=True,
    )
    html = env.get_template("report.html").render(
        report=report,
        generated_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
        ci=bool(os.getenv("CI")),
    )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    logger.info(f"HTML report written to {output_path}")
    return output_path
