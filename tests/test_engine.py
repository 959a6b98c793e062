"""Tests for the CaesarEngine facade."""

from caesar.analyzers.codec import encrypt
from caesar.core.models import BruteForceResult, CodecResult
from shared.models import Severity


def test_encrypt_result(engine):
    result = engine.encrypt("Hello, World!", 3)

    assert result.tool_name == "caesar"
    assert result.end_time is not None
    assert not result.failed
    codec = CodecResult(**result.metadata)
    assert codec.output_text == "Khoor, Zruog!"
    assert codec.normalized_shift == 3
    assert "shift 3" in result.summary


def test_decrypt_normalises_shift(engine):
    result = engine.decrypt("Khoor, Zruog!", -23)
    assert result.metadata["output_text"] == "Hello, World!"
    assert result.metadata["shift"] == -23
    assert result.metadata["normalized_shift"] == 3


def test_default_shift_from_config(engine):
    engine.config.caesar.default_shift = 5
    assert engine.encrypt("abc").metadata["output_text"] == "fgh"


def test_identity_shift_finding(engine):
    result = engine.encrypt("abc", 52)
    assert result.metadata["output_text"] == "abc"
    assert [f.title for f in result.findings] == ["Identity Shift"]
    assert result.findings[0].severity == Severity.LOW


def test_bad_shift_is_recorded_not_raised(engine):
    result = engine.encrypt("abc", 2.5)
    assert result.failed
    assert result.findings[0].severity == Severity.HIGH
    assert result.summary.startswith("Error:")
    assert result.metadata == {}


def test_brute_force_finds_plaintext(engine, dickens):
    result = engine.brute_force(encrypt(dickens, 7))
    bf = BruteForceResult(**result.metadata)

    assert len(bf.candidates) == 26
    assert [c.shift for c in bf.candidates] == list(range(26))
    assert bf.best.shift == 19
    assert bf.decryption_key == 7
    assert bf.best.text == dickens
    assert bf.ranked[0] == bf.best
    assert result.findings[0].severity == Severity.INFO
    assert "Shift 19" in result.findings[0].title


def test_brute_force_short_text_is_inconclusive(engine):
    result = engine.brute_force("Khoor, Zruog!")
    bf = BruteForceResult(**result.metadata)

    assert bf.best.score == 0.0
    assert bf.best.shift == 0
    assert bf.letter_count == 10
    assert result.findings[0].title == "Inconclusive Ranking"
    assert result.findings[0].severity == Severity.MEDIUM


def test_brute_force_without_letters(engine):
    result = engine.brute_force("1234!@#")
    assert not result.failed
    assert result.metadata["letter_count"] == 0
    assert result.findings[0].title == "No Letters To Analyse"


def test_brute_force_empty_text(engine):
    result = engine.brute_force("")
    assert result.target == "0 chars"
    assert len(result.metadata["candidates"]) == 26


def test_score(engine, dickens):
    result = engine.score(dickens)
    assert result.metadata["score"] > 0.5
    assert result.metadata["letter_count"] == sum(c.isalpha() for c in dickens)
    assert engine.score("!!!").metadata["score"] == 0.0
