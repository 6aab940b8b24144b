# site_export/report/json_report.py

"""
JSON manifest of an export pass.

Serializes a CrawlResult to a file.
"""
import json
from pathlib import Path

from site_export.crawler.models import CrawlResult


def render_json(result: CrawlResult, output_path: Path | str) -> Path:
    """
    Save *result* as JSON at the given path.

    :param result: CrawlResult of a finished (possibly partial) export
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from site_export.report.json_report import render_json
    report_path = render_json(result, 'reports/export.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = {
        'ok': result.ok,
        'pages': [{'route': p.route, 'file': p.file} for p in result.pages],
        'failures': [
            {'route': str(f.item), 'error': f"{type(f.error).__name__}: {f.error}"}
            for f in result.failures
        ],
    }

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
