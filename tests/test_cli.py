"""Tests for the Click command-line interface."""

import json

import pytest
from click.testing import CliRunner

from caesar.analyzers.codec import encrypt
from caesar.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def _run(runner, *args, **kwargs):
    return runner.invoke(cli, ["--quiet", *args], obj={}, **kwargs)


def _run_console(runner, *args):
    # --quiet would silence the Rich console entirely
    return runner.invoke(cli, list(args), obj={})


def test_encrypt_text_to_file(runner, tmp_path):
    out = tmp_path / "encrypted.txt"
    result = _run(runner, "-o", "text", "-f", str(out), "encrypt", "Hello, World!", "-s", "3")
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == "Khoor, Zruog!"


def test_decrypt_with_negative_shift(runner, tmp_path):
    out = tmp_path / "decrypted.txt"
    result = _run(
        runner, "-o", "text", "-f", str(out),
        "decrypt", "Khoor, Zruog!", "--shift=-23",
    )
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == "Hello, World!"


def test_decrypt_from_stdin(runner, tmp_path):
    out = tmp_path / "rot.txt"
    result = _run(
        runner, "-o", "text", "-f", str(out), "decrypt", "-", "-s", "13",
        input="Uryyb\n",
    )
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == "Hello\n"


def test_encrypt_from_input_file(runner, tmp_path):
    src = tmp_path / "plain.txt"
    src.write_text("abc", encoding="utf-8")
    out = tmp_path / "out.txt"
    result = _run(runner, "-o", "text", "-f", str(out), "encrypt", "-i", str(src), "-s", "1")
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == "bcd"


def test_brute_force_json_report(runner, tmp_path, dickens):
    out = tmp_path / "reports" / "bf.json"
    result = _run(runner, "-o", "json", "-f", str(out), "brute-force", encrypt(dickens, 4))
    assert result.exit_code == 0, result.output

    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["tool_name"] == "caesar"
    assert report["metadata"]["best"]["shift"] == 22
    assert report["metadata"]["best"]["text"] == dickens
    assert len(report["metadata"]["ranked"]) == 26


def test_brute_force_console(runner, pangram):
    result = _run_console(runner, "brute-force", encrypt(pangram, 3), "--top", "3")
    assert result.exit_code == 0, result.output
    assert "Most Likely Plaintext" in result.output
    assert "23 more candidate(s) not shown." in result.output


def test_encrypt_console(runner):
    result = _run_console(runner, "encrypt", "Hello, World!", "-s", "3")
    assert result.exit_code == 0, result.output
    assert "Khoor, Zruog!" in result.output


def test_score_console(runner, dickens):
    result = _run_console(runner, "score", dickens)
    assert result.exit_code == 0, result.output
    assert "English Score" in result.output


def test_empty_text_rejected(runner):
    result = _run(runner, "encrypt", "   ", "-s", "3")
    assert result.exit_code == 2
    assert "Please enter text to encrypt" in result.output


def test_missing_text_rejected(runner):
    result = _run(runner, "brute-force")
    assert result.exit_code == 2


def test_non_integer_shift_rejected(runner):
    result = _run(runner, "encrypt", "abc", "-s", "three")
    assert result.exit_code == 2


def test_text_and_input_file_conflict(runner, tmp_path):
    src = tmp_path / "plain.txt"
    src.write_text("abc", encoding="utf-8")
    result = _run(runner, "encrypt", "abc", "-i", str(src))
    assert result.exit_code == 2


def test_config_default_shift(runner, tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text("[caesar]\ndefault_shift = 1\n", encoding="utf-8")
    out = tmp_path / "out.txt"
    result = _run(runner, "-c", str(cfg), "-o", "text", "-f", str(out), "encrypt", "abc")
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == "bcd"
