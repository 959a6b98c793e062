"""Tests for the JSON / text report writer."""

import json

from caesar.output.report import CaesarReportGenerator


def test_text_report_for_codec(engine, tmp_path):
    result = engine.encrypt("Hello, World!", 3)
    path = CaesarReportGenerator().generate_text(result, tmp_path / "out" / "encrypted.txt")
    assert path.read_text(encoding="utf-8") == "Khoor, Zruog!"


def test_text_report_for_brute_force(engine):
    result = engine.brute_force("Khoor, Zruog!")
    lines = CaesarReportGenerator.render_text(result).splitlines()
    assert len(lines) == 26
    shift, score, text = lines[0].split("\t")
    assert (shift, score, text) == ("0", "0.0000", "Khoor, Zruog!")


def test_text_report_for_failure(engine):
    result = engine.encrypt("abc", 1.5)
    assert CaesarReportGenerator.render_text(result).startswith("Error:")


def test_json_report_round_trips(engine, tmp_path):
    result = engine.score("Attack at dawn")
    path = CaesarReportGenerator().generate_json(result, tmp_path / "score.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["tool_name"] == "caesar"
    assert data["metadata"]["letter_count"] == 12
    assert data["findings"] == []
