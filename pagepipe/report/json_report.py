# pagepipe/report/json_report.py

"""
JSON report of a discovery run.

Serialises a DiscoveryResult to a file.
"""
import json
from pathlib import Path

from pagepipe.crawler.models import DiscoveryResult


def render_json(result: DiscoveryResult, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *result* as JSON at *output_path*.

    :param result: outcome of Discoverer.discover
    :param output_path: path of the JSON file (parent directories are created)
    :param pretty: indent with 2 spaces
    :return: Path of the saved file

    Example:
    ```python
    from pagepipe.report.json_report import render_json
    report_path = render_json(result, 'reports/pages.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
