import json
import logging
import os
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from jinja2 import Environment, FileSystemLoader, select_autoescape

from storeqa.utils.log_icon import icon
from storeqa.utils.steps import StepRecorder, bind_recorder

RECORDER_KEY = pytest.StashKey[StepRecorder]()
ARTIFACTS_KEY = pytest.StashKey[List[Dict[str, str]]]()

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def add_artifact(item: pytest.Item, kind: str, path: str):
    """Attach a file (screenshot, trace, video) to the current run of ``item``."""
    item.stash.setdefault(ARTIFACTS_KEY, []).append({"kind": kind, "path": path})


def summarize(results: List[Dict[str, Any]]) -> Dict[str, int]:
    summary = {"total": len(results), "passed": 0, "failed": 0, "error": 0, "skipped": 0, "retried": 0}
    for result in results:
        summary[result["outcome"]] = summary.get(result["outcome"], 0) + 1
        if result["retries"]:
            summary["retried"] += 1
    return summary


def render_html(report: Dict[str, Any]) -> str:
    env = Environment(loader=FileSystemLoader(str(_TEMPLATES_DIR)), autoescape=select_autoescape(["html", "xml", "j2"]))
    return env.get_template("report.html.j2").render(**report)


class ReportPlugin:
    """Collects per-test outcome, steps and artifacts, then writes JSON and HTML reports."""

    def __init__(self, report_dir: str = "reports", title: str = "storeqa test report"):
        self.report_dir = report_dir
        self.title = title
        self.results: Dict[str, Dict[str, Any]] = {}
        self.started_at: Optional[float] = None

    def pytest_sessionstart(self, session):
        self.started_at = time.time()

    @pytest.hookimpl(tryfirst=True)
    def pytest_runtest_setup(self, item: pytest.Item):
        recorder = StepRecorder()
        item.stash[RECORDER_KEY] = recorder
        item.stash[ARTIFACTS_KEY] = []
        bind_recorder(recorder)

    @pytest.hookimpl(hookwrapper=True)
    def pytest_runtest_makereport(self, item: pytest.Item, call):
        outcome = yield
        report = outcome.get_result()

        # fixtures read item.rep_<phase> to react to failures during teardown
        setattr(item, f"rep_{report.when}", report)

        recorder = item.stash.get(RECORDER_KEY, None)
        report.steps = recorder.to_list() if recorder else []
        failed_step = recorder.failed_step if recorder else None
        report.failed_step = failed_step.description if failed_step else None
        report.artifacts = list(item.stash.get(ARTIFACTS_KEY, []))
        report.markers = sorted({m.name for m in item.iter_markers() if m.name not in ("asyncio", "parametrize")})
        if report.when == "teardown":
            bind_recorder(None)

    def pytest_runtest_logreport(self, report):
        entry = self.results.setdefault(
            report.nodeid,
            {
                "nodeid": report.nodeid,
                "name": report.nodeid.split("::")[-1],
                "file": report.location[0],
                "markers": getattr(report, "markers", []),
                "outcome": "passed",
                "duration_ms": 0,
                "retries": 0,
                "error": None,
                "failed_step": None,
                "steps": [],
                "artifacts": [],
            },
        )

        if report.outcome == "rerun":
            entry["retries"] += 1
            return

        if report.when == "setup":
            # a fresh run starts from a clean slate
            entry.update(outcome="passed", error=None, failed_step=None, steps=[], artifacts=[])
            if report.failed:
                entry.update(outcome="error", error=report.longreprtext)
            elif report.skipped:
                entry["outcome"] = "skipped"
                entry["error"] = _skip_reason(report)
        elif report.when == "call":
            entry["duration_ms"] = int(report.duration * 1000)
            entry["steps"] = getattr(report, "steps", [])
            if report.failed:
                entry.update(outcome="failed", error=report.longreprtext, failed_step=report.failed_step)
            elif report.skipped:
                entry["outcome"] = "skipped"
                entry["error"] = _skip_reason(report)
        elif report.when == "teardown":
            entry["artifacts"] = getattr(report, "artifacts", [])
            if report.failed and entry["outcome"] == "passed":
                entry.update(outcome="error", error=report.longreprtext)

    def build_report(self, exitstatus: int) -> Dict[str, Any]:
        results = list(self.results.values())
        finished_at = time.time()
        started_at = self.started_at or finished_at
        return {
            "title": self.title,
            "started_at": datetime.fromtimestamp(started_at).isoformat(timespec="seconds"),
            "duration_s": round(finished_at - started_at, 2),
            "exit_status": int(exitstatus),
            "summary": summarize(results),
            "results": results,
        }

    def write_reports(self, report: Dict[str, Any]) -> Dict[str, str]:
        os.makedirs(self.report_dir, exist_ok=True)
        for result in report["results"]:
            for artifact in result["artifacts"]:
                artifact["href"] = os.path.relpath(os.path.abspath(artifact["path"]), os.path.abspath(self.report_dir))

        json_path = os.path.join(self.report_dir, "test_results.json")
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False, default=str)

        html_path = os.path.join(self.report_dir, "test_report.html")
        with open(html_path, "w", encoding="utf-8") as f:
            f.write(render_html(report))

        logging.info(f"{icon['report']} JSON report generated: {os.path.abspath(json_path)}")
        logging.info(f"{icon['report']} HTML report generated: {os.path.abspath(html_path)}")
        return {"json": json_path, "html": html_path}

    def pytest_sessionfinish(self, session, exitstatus):
        if not self.results:
            return
        self.write_reports(self.build_report(exitstatus))

    def pytest_terminal_summary(self, terminalreporter):
        if self.results:
            terminalreporter.write_sep("-", f"reports written to {os.path.abspath(self.report_dir)}")


def _skip_reason(report) -> str:
    if isinstance(report.longrepr, tuple) and len(report.longrepr) == 3:
        return str(report.longrepr[2])
    return getattr(report, "wasxfail", "") or str(report.longrepr or "")
