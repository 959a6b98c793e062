"""
CaesarKit Console Interface
============================

Rich-powered console abstraction providing a unified presentation layer
for CaesarKit tools.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, severity-coloured messages and findings
tables, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all CaesarKit output
# ---------------------------------------------------------------------------
_KIT_THEME = Theme(
    {
        "kit.section": "bold bright_magenta",
        "kit.success": "bold green",
        "kit.dim": "dim white",
        "kit.highlight": "bold bright_white",
        "kit.high": "bold red",
        "kit.medium": "bold yellow",
        "kit.low": "bold bright_cyan",
        "kit.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""
[bright_cyan]   ___   _   ___ ___   _   ___ [/bright_cyan]
[bright_cyan]  / __| /_\ | __/ __| /_\ | _ \[/bright_cyan]
[bright_cyan] | (__ / _ \| _|\__ \/ _ \|   /[/bright_cyan]
[bright_cyan]  \___/_/ \_\___|___/_/ \_\_|_\[/bright_cyan][bright_magenta] KIT[/bright_magenta]"""

_TAGLINE = "Classical Cipher Toolkit"


class KitConsole:
    """Unified console interface for CaesarKit tools.

    Usage::

        con = KitConsole()
        con.banner()
        con.section("Brute Force")
        con.success("Done")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_KIT_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the CaesarKit ASCII-art banner.

        Args:
            version: Version string shown beneath the logo.
        """
        subtitle = (
            f"[kit.highlight]{_TAGLINE}[/kit.highlight]\n"
            f"[kit.dim]Version: {version}[/kit.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="kit.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Messages
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[kit.success][✔] SUCCESS:[/kit.success] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Findings table
    # ------------------------------------------------------------------ #

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render a findings table with automatic severity colouring.

        Expects objects with ``severity``, ``title``, and ``description``
        attributes (e.g. :class:`shared.models.Finding`).
        """
        if not findings:
            return

        severity_style_map: dict[str, str] = {
            "HIGH": "kit.high",
            "MEDIUM": "kit.medium",
            "LOW": "kit.low",
            "INFO": "kit.informational",
        }

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            sev_style = severity_style_map.get(sev_name, "")
            sev_cell = (
                f"[{sev_style}]{sev_name}[/{sev_style}]"
                if sev_style
                else sev_name
            )
            tbl.add_row(
                str(idx),
                sev_cell,
                Text(str(getattr(finding, "title", ""))),
                Text(str(getattr(finding, "description", ""))),
            )

        self._console.print(tbl)

