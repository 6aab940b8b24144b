# File: site_export/report/__init__.py
"""site_export.report: export manifests written by the CLI."""

from site_export.report.json_report import render_json

__all__ = ["render_json"]
