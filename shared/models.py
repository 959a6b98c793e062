"""
CaesarKit Data Models
======================

Pydantic v2 models shared across CaesarKit tools. Every tool returns a
:class:`ScanResult` envelope carrying findings, a summary, and a
tool-specific metadata payload, so the console and report layers can
treat all operations uniformly.

References:
    - SARIF v2.1.0 Specification (OASIS, 2020).
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    Field,
    ConfigDict,
    field_validator,
)


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


# ========================== Enumerations ===================================


class Severity(str, Enum):
    """Finding severity level.

    Attributes:
        HIGH:   High   -- The operation failed.
        MEDIUM: Medium -- The operation completed with a doubtful result.
        LOW:    Low    -- Minor observation worth a second look.
        INFO:   Informational -- Plain result, no action needed.
    """

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"


# ========================== Core Models ====================================


class Finding(BaseModel):
    """A single observation produced by a CaesarKit tool.

    Attributes:
        severity:       Qualitative severity rating.
        title:          Short, descriptive finding title.
        description:    Detailed explanation of the finding.
        evidence:       Raw data supporting the finding (dicts become JSON).
        recommendation: Suggested follow-up action.
        references:     External reference citations.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        use_enum_values=False,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "severity": "INFO",
                    "title": "Most likely plaintext at shift 23",
                    "description": (
                        "Shift 23 yields the candidate closest to English "
                        "letter frequencies (score 0.4570)."
                    ),
                    "evidence": '{"shift": 23, "score": 0.457}',
                    "recommendation": "",
                    "references": [
                        "Sinkov, A. (1966). Elementary Cryptanalysis.",
                    ],
                }
            ]
        },
    )

    severity: Severity = Field(
        ...,
        description="Severity level of this finding",
    )
    title: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Short descriptive title",
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Detailed explanation",
    )
    evidence: str = Field(
        default="",
        description="Supporting evidence or raw data",
    )
    recommendation: str = Field(
        default="",
        description="Suggested follow-up",
    )
    references: list[str] = Field(
        default_factory=list,
        description="Academic or technical references",
    )

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        """Auto-convert non-string evidence (dict, list) to JSON string."""
        if isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return str(v)


class ScanResult(BaseModel):
    """Aggregated result of a single tool run.

    Attributes:
        tool_name:  Name of the CaesarKit tool.
        target:     Short label for the input that was processed.
        start_time: UTC timestamp when the run started.
        end_time:   UTC timestamp when the run ended.
        findings:   Individual findings.
        summary:    Human-readable summary text.
        metadata:   Tool-specific payload (e.g. a dumped result model).
    """

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=False,
        extra="ignore",
    )

    tool_name: str = Field(
        ...,
        min_length=1,
        description="Tool name",
    )
    target: str = Field(
        ...,
        min_length=1,
        description="Processed input label",
    )
    start_time: _dt.datetime = Field(
        default_factory=_utcnow,
        description="Run start timestamp (UTC)",
    )
    end_time: Optional[_dt.datetime] = Field(
        default=None,
        description="Run end timestamp (UTC)",
    )
    findings: list[Finding] = Field(
        default_factory=list,
        description="List of findings",
    )
    summary: str = Field(
        default="",
        description="Human-readable result summary",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional metadata",
    )

    # ------------------------------------------------------------------ #
    #  Derived properties
    # ------------------------------------------------------------------ #

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed run time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None or self.start_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Count of findings grouped by severity."""
        counts: dict[str, int] = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def highest_severity(self) -> Severity | None:
        """The most severe finding, or ``None`` when the list is empty."""
        if not self.findings:
            return None
        order = list(Severity)
        return min(
            (f.severity for f in self.findings),
            key=lambda s: order.index(s),
        )

    @property
    def failed(self) -> bool:
        """``True`` when any finding reports a failed operation."""
        return any(f.severity == Severity.HIGH for f in self.findings)

    # ------------------------------------------------------------------ #
    #  Mutating helpers
    # ------------------------------------------------------------------ #

    def add_finding(self, finding: Finding) -> None:
        """Append a finding to the result."""
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> ScanResult:
        """Mark the run as complete by setting *end_time* and *summary*.

        If *summary* is ``None`` a default is generated from severity counts.

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        elif not self.summary:
            counts = self.severity_counts
            parts = [f"{sev}: {cnt}" for sev, cnt in counts.items() if cnt > 0]
            self.summary = (
                f"Run complete. "
                f"Findings: {len(self.findings)} "
                f"({', '.join(parts) if parts else 'none'})"
            )
        return self
