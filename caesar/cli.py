"""
Caesar CLI
===========

Click-based command-line interface for the Caesar tool.

Usage::

    python -m caesar encrypt "Hello, World!" --shift 3
    python -m caesar decrypt "Khoor, Zruog!" -s 3
    python -m caesar brute-force "Wkh txlfn eurzq ira" --top 5
    python -m caesar -o json brute-force -i secret.txt
    echo "Uryyb" | python -m caesar -o text decrypt - -s 13
    python -m caesar score "The quick brown fox"

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from shared.config import KitConfig
from shared.console import KitConsole
from shared.models import ScanResult

from caesar import __version__
from caesar.core.engine import CaesarEngine
from caesar.core.models import BruteForceResult, CodecResult, ScoreResult
from caesar.output.console import CaesarConsoleOutput
from caesar.output.report import CaesarReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="caesar")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to CaesarKit configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "text"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSON/text output to this file instead of stdout.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """CaesarKit -- Caesar cipher encryption, decryption and brute force."""
    ctx.ensure_object(dict)

    kit_config = KitConfig.load(config) if config else KitConfig()
    if verbose:
        kit_config.global_settings.debug = True
    elif quiet:
        kit_config.global_settings.log_level = "WARNING"

    ctx.obj["config"] = kit_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = KitConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = CaesarEngine(kit_config)
    ctx.obj["display"] = CaesarConsoleOutput(console)
    ctx.obj["reporter"] = CaesarReportGenerator()

    if not quiet and output == "console":
        console.banner(version=__version__)


# ===================================================================== #
#  Helpers
# ===================================================================== #

_input_file_option = click.option(
    "--input-file", "-i",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read the input text from a file.",
)


def _read_input(text: Optional[str], input_file: Optional[str], purpose: str) -> str:
    """Resolve the TEXT argument, ``-`` (stdin) or ``--input-file``."""
    if input_file is not None:
        if text is not None:
            raise click.UsageError("Give either TEXT or --input-file, not both.")
        text = Path(input_file).read_text(encoding="utf-8")
    elif text is None:
        raise click.UsageError("Missing argument 'TEXT' (or use --input-file).")
    elif text == "-":
        text = click.get_text_stream("stdin").read()

    if not text.strip():
        raise click.UsageError(f"Please enter text to {purpose}.")
    return text


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Emit a result in JSON or text form, to a file or stdout."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: CaesarReportGenerator = ctx.obj["reporter"]
    console: KitConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.render_json(result))
    elif output_format == "text":
        if output_file:
            path = reporter.generate_text(result, Path(output_file))
            console.success(f"Text saved to: {path}")
        else:
            click.echo(reporter.render_text(result), nl=False)


def _finish(ctx: click.Context, result: ScanResult) -> None:
    if result.failed:
        if ctx.obj["output_format"] == "console":
            ctx.obj["console"].findings_table(result.findings)
        else:
            _handle_output(ctx, result)
        ctx.exit(1)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("text", required=False)
@click.option("--shift", "-s", type=int, default=None,
              help="Shift key; any integer. Defaults to caesar.default_shift.")
@_input_file_option
@click.pass_context
def encrypt(
    ctx: click.Context,
    text: Optional[str],
    shift: Optional[int],
    input_file: Optional[str],
) -> None:
    """Encrypt TEXT with a Caesar shift (TEXT may be '-' for stdin)."""
    engine: CaesarEngine = ctx.obj["engine"]
    display: CaesarConsoleOutput = ctx.obj["display"]

    result = engine.encrypt(_read_input(text, input_file, "encrypt"), shift)
    _finish(ctx, result)

    if ctx.obj["output_format"] == "console":
        display.display_codec(CodecResult(**result.metadata))
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


@cli.command()
@click.argument("text", required=False)
@click.option("--shift", "-s", type=int, default=None,
              help="Shift the text was encrypted with. Defaults to caesar.default_shift.")
@_input_file_option
@click.pass_context
def decrypt(
    ctx: click.Context,
    text: Optional[str],
    shift: Optional[int],
    input_file: Optional[str],
) -> None:
    """Decrypt TEXT that was encrypted with a known shift."""
    engine: CaesarEngine = ctx.obj["engine"]
    display: CaesarConsoleOutput = ctx.obj["display"]

    result = engine.decrypt(_read_input(text, input_file, "decrypt"), shift)
    _finish(ctx, result)

    if ctx.obj["output_format"] == "console":
        display.display_codec(CodecResult(**result.metadata))
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


@cli.command("brute-force")
@click.argument("text", required=False)
@click.option("--top", "-n", type=click.IntRange(1, 26), default=None,
              help="Show only the N most likely candidates.")
@_input_file_option
@click.pass_context
def brute_force_cmd(
    ctx: click.Context,
    text: Optional[str],
    top: Optional[int],
    input_file: Optional[str],
) -> None:
    """Try all 26 shifts and rank the results by English likelihood."""
    engine: CaesarEngine = ctx.obj["engine"]
    display: CaesarConsoleOutput = ctx.obj["display"]
    settings = ctx.obj["config"].caesar

    result = engine.brute_force(_read_input(text, input_file, "brute force"))
    _finish(ctx, result)

    if ctx.obj["output_format"] == "console":
        display.display_brute_force(
            BruteForceResult(**result.metadata),
            top=top or settings.top_candidates,
            min_score=settings.min_score,
            show_scores=settings.show_scores,
        )
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


@cli.command()
@click.argument("text", required=False)
@_input_file_option
@click.pass_context
def score(ctx: click.Context, text: Optional[str], input_file: Optional[str]) -> None:
    """Score how closely TEXT matches English letter frequencies."""
    engine: CaesarEngine = ctx.obj["engine"]
    display: CaesarConsoleOutput = ctx.obj["display"]

    result = engine.score(_read_input(text, input_file, "score"))
    _finish(ctx, result)

    if ctx.obj["output_format"] == "console":
        display.display_score(ScoreResult(**result.metadata))
    else:
        _handle_output(ctx, result)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Caesar CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
