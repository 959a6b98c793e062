"""
Caesar Report Generator
========================

Writes Caesar results to disk: a JSON dump of the full
:class:`ScanResult`, or a plain-text file holding just the result text
(the ``encrypted.txt`` / ``decrypted.txt`` download of the web tool).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from shared.models import ScanResult


class CaesarReportGenerator:
    """Generates JSON and plain-text reports from Caesar results.

    Usage::

        reporter = CaesarReportGenerator()
        reporter.generate_json(result, Path("report.json"))
        reporter.generate_text(result, Path("decrypted.txt"))
    """

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write the full result as indented JSON and return the path."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_json(result), encoding="utf-8")
        return output_path

    def generate_text(self, result: ScanResult, output_path: Path) -> Path:
        """Write the plain-text rendering of the result and return the path."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_text(result), encoding="utf-8")
        return output_path

    @staticmethod
    def render_json(result: ScanResult) -> str:
        """Serialise *result* to a JSON string."""
        return json.dumps(
            result.model_dump(mode="json"),
            indent=2,
            ensure_ascii=False,
            default=str,
        )

    @staticmethod
    def render_text(result: ScanResult) -> str:
        """Render the result text only.

        - encrypt / decrypt: the output text, verbatim.
        - brute force: one ``shift<TAB>score<TAB>text`` line per ranked
          candidate, best first.
        - score: the score with four decimals.
        - failed runs: the summary line.
        """
        meta: dict[str, Any] = result.metadata
        if "output_text" in meta:
            return meta["output_text"]
        if "ranked" in meta:
            return "".join(
                f"{c['shift']}\t{c['score']:.4f}\t{c['text']}\n"
                for c in meta["ranked"]
            )
        if "score" in meta:
            return f"{meta['score']:.4f}\n"
        return result.summary + "\n"
