from .plugin import ARTIFACTS_KEY, RECORDER_KEY, ReportPlugin, add_artifact, render_html, summarize

__all__ = ["ARTIFACTS_KEY", "RECORDER_KEY", "ReportPlugin", "add_artifact", "render_html", "summarize"]
