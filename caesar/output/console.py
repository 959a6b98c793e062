"""
Caesar Console Output
======================

Rich-based console renderers for Caesar results: the transformed text in
a panel, and the brute-force ranking as a table with score bars.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.bar import Bar
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import KitConsole
from caesar.core.models import BruteForceResult, CodecResult, ScoreResult


def _score_colour(score: float) -> str:
    if score >= 0.4:
        return "bold bright_green"
    if score >= 0.2:
        return "yellow"
    if score > 0.0:
        return "dark_orange"
    return "dim white"


class CaesarConsoleOutput:
    """Console output formatters for Caesar results.

    Usage::

        output = CaesarConsoleOutput(KitConsole())
        output.display_codec(codec_result)
        output.display_brute_force(bf_result, top=5)
    """

    def __init__(self, console: Optional[KitConsole] = None) -> None:
        self.console = console or KitConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Encrypt / Decrypt
    # ------------------------------------------------------------------ #

    def display_codec(self, result: CodecResult) -> None:
        """Show the output text of an encrypt/decrypt run."""
        title = result.operation.value.title()
        self.console.section(f"{title}ion Result")

        summary = Text()
        summary.append("Shift: ", style="bold")
        summary.append(str(result.shift))
        if result.shift != result.normalized_shift:
            summary.append(f" (normalised to {result.normalized_shift})", style="dim")
        summary.append("\nLength: ", style="bold")
        summary.append(f"{len(result.output_text):,} characters")
        self._rich.print(Panel(summary, title="Overview", border_style="cyan"))

        self._rich.print(Panel(
            Text(result.output_text),
            title=f"{title}ed Text",
            border_style="bright_green",
        ))

    # ------------------------------------------------------------------ #
    #  Brute Force
    # ------------------------------------------------------------------ #

    def display_brute_force(
        self,
        result: BruteForceResult,
        *,
        top: int = 26,
        min_score: float = 0.0,
        show_scores: bool = True,
    ) -> None:
        """Show ranked brute-force candidates.

        Args:
            result: Brute-force result from the engine.
            top: Maximum number of rows to show.
            min_score: Hide candidates scoring below this value. The best
                candidate is always shown.
            show_scores: Include the score and bar columns.
        """
        self.console.section("Brute Force")

        best = result.best
        headline = Text()
        headline.append("Best shift: ", style="bold")
        headline.append(str(best.shift), style="bold bright_green")
        headline.append("   Decryption key: ", style="bold")
        headline.append(str(result.decryption_key), style="bold bright_green")
        headline.append("   Score: ", style="bold")
        headline.append(f"{best.score:.4f}", style=_score_colour(best.score))
        headline.append("\n\n")
        headline.append(best.text)
        self._rich.print(Panel(
            headline, title="Most Likely Plaintext", border_style="bright_green"
        ))

        tbl = Table(
            title="Candidates (sorted by likelihood of being English)",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
        )
        tbl.add_column("#", style="dim", justify="right", width=3)
        tbl.add_column("Shift", justify="right", width=5)
        if show_scores:
            tbl.add_column("Score", justify="right", width=7)
            tbl.add_column("", width=20)
        tbl.add_column("Text", overflow="fold")

        shown = [
            c for c in result.ranked
            if c.score >= min_score or c.shift == best.shift
        ][:max(top, 1)]

        for idx, candidate in enumerate(shown, start=1):
            style = "bold" if candidate.shift == best.shift else ""
            row: list = [str(idx), str(candidate.shift)]
            if show_scores:
                colour = _score_colour(candidate.score)
                row.append(Text(f"{candidate.score:.4f}", style=colour))
                row.append(Bar(
                    size=1.0, begin=0.0, end=min(candidate.score, 1.0),
                    color=colour.split()[-1],
                ))
            row.append(Text(candidate.text, style=style))
            tbl.add_row(*row)

        self._rich.print(tbl)

        hidden = len(result.ranked) - len(shown)
        if hidden > 0:
            self._rich.print(f"[dim]{hidden} more candidate(s) not shown.[/dim]")

    # ------------------------------------------------------------------ #
    #  Score
    # ------------------------------------------------------------------ #

    def display_score(self, result: ScoreResult) -> None:
        """Show the English score of a single text."""
        self.console.section("English Score")
        text = Text()
        text.append("Score: ", style="bold")
        text.append(f"{result.score:.4f}", style=_score_colour(result.score))
        text.append("\nLetters: ", style="bold")
        text.append(str(result.letter_count))
        self._rich.print(Panel(text, title="Overview", border_style="cyan"))
