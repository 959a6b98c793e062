"""Tests for the pydantic data models."""

import pytest
from pydantic import ValidationError

from caesar.core.models import BruteForceResult, CandidateResult, ScoredCandidate
from shared.models import Finding, ScanResult, Severity


def test_candidate_is_frozen():
    candidate = CandidateResult(shift=3, text="abc")
    with pytest.raises(ValidationError):
        candidate.shift = 4


@pytest.mark.parametrize("shift", [-1, 26])
def test_candidate_shift_range(shift):
    with pytest.raises(ValidationError):
        CandidateResult(shift=shift, text="abc")


def test_scored_candidate_rejects_negative_score():
    with pytest.raises(ValidationError):
        ScoredCandidate(shift=0, text="abc", score=-0.1)


def test_decryption_key():
    best = ScoredCandidate(shift=23, text="Hello", score=0.4)
    assert BruteForceResult(ciphertext="Khoor", best=best).decryption_key == 3
    best = ScoredCandidate(shift=0, text="Hello", score=0.4)
    assert BruteForceResult(ciphertext="Hello", best=best).decryption_key == 0


def test_finding_evidence_coerced_to_json():
    finding = Finding(
        severity=Severity.INFO,
        title="t",
        description="d",
        evidence={"shift": 3},
    )
    assert finding.evidence == '{"shift": 3}'


def test_scan_result_severity_summary():
    result = ScanResult(tool_name="caesar", target="3 chars")
    assert result.highest_severity is None
    result.add_finding(Finding(severity=Severity.LOW, title="a", description="a"))
    result.add_finding(Finding(severity=Severity.HIGH, title="b", description="b"))

    assert result.failed
    assert result.highest_severity == Severity.HIGH
    assert result.severity_counts["LOW"] == 1

    result.finalize()
    assert result.duration_seconds is not None
    assert "Findings: 2" in result.summary


def test_finalize_keeps_existing_summary():
    result = ScanResult(tool_name="caesar", target="x", summary="kept")
    assert result.finalize().summary == "kept"
    assert result.finalize("replaced").summary == "replaced"
