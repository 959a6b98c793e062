"""
Caesar Engine
==============

Central orchestrator for the Caesar tool. :class:`CaesarEngine` wraps the
pure analyzer functions and returns uniform :class:`ScanResult` objects
carrying findings, a summary, and the dumped result model as metadata.

The engine never raises for a failed operation: the error is logged and
recorded as a HIGH-severity finding instead.
"""

from __future__ import annotations

from typing import Optional

from shared.config import KitConfig
from shared.logger import KitLogger
from shared.math_utils import letter_histogram
from shared.models import Finding, ScanResult, Severity

from caesar.analyzers.brute_force import brute_force
from caesar.analyzers.codec import decrypt, encrypt
from caesar.analyzers.scorer import EnglishScorer
from caesar.analyzers.shift import normalize_shift
from caesar.core.models import (
    BruteForceResult,
    CipherOperation,
    CodecResult,
    ScoreResult,
)

_TOOL_NAME = "caesar"
_PREVIEW_CHARS = 32

_REFERENCES = [
    "Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical Approach.",
    "Lewand, R. E. (2000). Cryptological Mathematics.",
]


class CaesarEngine:
    """Orchestrates Caesar cipher operations.

    Usage::

        engine = CaesarEngine()
        result = engine.encrypt("Hello, World!", 3)
        result = engine.brute_force("Khoor, Zruog!")
        best = result.metadata["best"]

    Attributes:
        config: CaesarKit configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[KitConfig] = None,
        scorer: Optional[EnglishScorer] = None,
    ) -> None:
        self.config = config or KitConfig()
        settings = self.config.global_settings
        self.logger = KitLogger(
            "caesar.engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )
        self._scorer = scorer or EnglishScorer()

    # ------------------------------------------------------------------ #
    #  Encrypt / Decrypt
    # ------------------------------------------------------------------ #

    def encrypt(self, text: str, shift: Optional[int] = None) -> ScanResult:
        """Encrypt *text*; *shift* defaults to ``caesar.default_shift``."""
        return self._codec(CipherOperation.ENCRYPT, text, shift)

    def decrypt(self, text: str, shift: Optional[int] = None) -> ScanResult:
        """Decrypt *text*; *shift* defaults to ``caesar.default_shift``."""
        return self._codec(CipherOperation.DECRYPT, text, shift)

    def _codec(
        self,
        operation: CipherOperation,
        text: str,
        shift: Optional[int],
    ) -> ScanResult:
        if shift is None:
            shift = self.config.caesar.default_shift
        result = self._new_result(text)

        with self.logger.operation(operation.value):
            try:
                self.logger.info(
                    "Starting %s: %d chars, shift %s", operation.value, len(text), shift
                )
                transform = encrypt if operation is CipherOperation.ENCRYPT else decrypt
                codec_result = CodecResult(
                    operation=operation,
                    shift=shift,
                    normalized_shift=normalize_shift(shift),
                    input_text=text,
                    output_text=transform(text, shift),
                )
                result.metadata = codec_result.model_dump(mode="json")

                if codec_result.normalized_shift == 0:
                    result.add_finding(Finding(
                        title="Identity Shift",
                        description=(
                            f"Shift {shift} is a multiple of 26; the output "
                            f"is identical to the input."
                        ),
                        severity=Severity.LOW,
                        recommendation="Choose a shift between 1 and 25.",
                    ))

                verb = "Encrypted" if operation is CipherOperation.ENCRYPT else "Decrypted"
                result.summary = (
                    f"{verb} {len(text)} characters with shift "
                    f"{codec_result.normalized_shift}"
                )
            except Exception as exc:
                self._record_failure(result, operation, exc)

        return result.finalize()

    # ------------------------------------------------------------------ #
    #  Brute Force
    # ------------------------------------------------------------------ #

    def brute_force(self, ciphertext: str) -> ScanResult:
        """Try all 26 shifts and rank the candidates by English score.

        The ``metadata`` of the returned result is a dumped
        :class:`BruteForceResult`.
        """
        operation = CipherOperation.BRUTE_FORCE
        result = self._new_result(ciphertext)

        with self.logger.operation(operation.value):
            try:
                self.logger.info("Starting brute force: %d chars", len(ciphertext))
                with self.logger.timed("brute force"):
                    candidates = self._scorer.score_all(brute_force(ciphertext))
                    best = self._scorer.select_best(candidates)
                    ranked = sorted(candidates, key=lambda c: c.score, reverse=True)

                for candidate in candidates:
                    self.logger.debug(
                        "shift=%d score=%.4f", candidate.shift, candidate.score
                    )

                bf_result = BruteForceResult(
                    ciphertext=ciphertext,
                    candidates=candidates,
                    ranked=ranked,
                    best=best,
                    letter_count=self._letter_count(ciphertext),
                )
                result.metadata = bf_result.model_dump(mode="json")
                self._brute_force_findings(result, bf_result)
                result.summary = (
                    f"Brute force: best shift {best.shift} "
                    f"(decryption key {bf_result.decryption_key}), "
                    f"score {best.score:.4f}"
                )
            except Exception as exc:
                self._record_failure(result, operation, exc)

        return result.finalize()

    def _brute_force_findings(
        self, result: ScanResult, bf_result: BruteForceResult
    ) -> None:
        best = bf_result.best

        if bf_result.letter_count == 0:
            result.add_finding(Finding(
                title="No Letters To Analyse",
                description=(
                    "The input contains no ASCII letters; all 26 candidates "
                    "are identical and score 0."
                ),
                severity=Severity.LOW,
            ))
            return

        if best.score == 0.0:
            result.add_finding(Finding(
                title="Inconclusive Ranking",
                description=(
                    f"Every candidate scored 0 over {bf_result.letter_count} "
                    f"letters; the text is too short or too unusual for "
                    f"frequency analysis. Shift {best.shift} is reported by "
                    f"position only."
                ),
                severity=Severity.MEDIUM,
                recommendation="Inspect the ranked candidates manually.",
                references=_REFERENCES,
            ))
            return

        result.add_finding(Finding(
            title=f"Most Likely Plaintext at Shift {best.shift}",
            description=(
                f"Shift {best.shift} (decryption key "
                f"{bf_result.decryption_key}) yields the candidate closest "
                f"to English letter frequencies: {_preview(best.text)}"
            ),
            severity=Severity.INFO,
            evidence={"shift": best.shift, "score": round(best.score, 6)},
            references=_REFERENCES,
        ))

        runner_up = bf_result.ranked[1]
        if runner_up.score == best.score:
            result.add_finding(Finding(
                title="Tied Top Candidates",
                description=(
                    f"Shifts {best.shift} and {runner_up.shift} share the top "
                    f"score {best.score:.4f}; the lower shift was selected."
                ),
                severity=Severity.LOW,
                recommendation="Inspect the ranked candidates manually.",
            ))

    # ------------------------------------------------------------------ #
    #  Scoring
    # ------------------------------------------------------------------ #

    def score(self, text: str) -> ScanResult:
        """Compute the English-likelihood score of a single text."""
        operation = CipherOperation.SCORE
        result = self._new_result(text)

        with self.logger.operation(operation.value):
            try:
                score_result = ScoreResult(
                    text=text,
                    score=self._scorer.score(text),
                    letter_count=self._letter_count(text),
                )
                result.metadata = score_result.model_dump(mode="json")
                result.summary = (
                    f"English score {score_result.score:.4f} over "
                    f"{score_result.letter_count} letters"
                )
            except Exception as exc:
                self._record_failure(result, operation, exc)

        return result.finalize()

    # ------------------------------------------------------------------ #
    #  Private Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _new_result(text: object) -> ScanResult:
        label = f"{len(text)} chars" if isinstance(text, str) else type(text).__name__
        return ScanResult(tool_name=_TOOL_NAME, target=label)

    @staticmethod
    def _letter_count(text: str) -> int:
        return int(letter_histogram(text).sum())

    def _record_failure(
        self,
        result: ScanResult,
        operation: CipherOperation,
        exc: Exception,
    ) -> None:
        self.logger.exception(f"{operation.value} failed: {exc}")
        result.add_finding(Finding(
            title=f"{operation.value.replace('_', ' ').title()} Error",
            description=f"Error: {exc}",
            severity=Severity.HIGH,
        ))
        result.summary = f"Error: {exc}"


def _preview(text: str) -> str:
    """First characters of *text* on one line, for finding descriptions."""
    flat = " ".join(text.split())
    if len(flat) <= _PREVIEW_CHARS:
        return flat
    return flat[:_PREVIEW_CHARS] + "..."
