#!/usr/bin/env python3
"""
Command-line interface for styled PDF -> XHTML conversion.

Subcommands:
- convert: Convert a PDF to XHTML with <b>/<i> style tags and line-origin spans
- fonts: List font names in a PDF with the styles they classify as
- vocabulary: Show the active style label -> tag table
"""

import os
from pathlib import Path

import typer
from dotenv import load_dotenv

from stylestack.contexts.conversion import PDFTokenSource, convert_pdf
from stylestack.contexts.conversion.logger import setup_conversion_logger
from stylestack.contexts.styling import StyleClassifier, load_vocabulary
from stylestack.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

DEFAULT_Y_TOLERANCE = 3.0

app = typer.Typer(
    add_completion=False,
    help="Convert PDFs to XHTML with properly nested bold/italic markup",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("convert")
def convert_command(
    pdf_file: Path = typer.Argument(
        ...,
        help="Path to .pdf file to convert",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (default: alongside the PDF with .xhtml extension)",
    ),
    vocabulary_file: Path = typer.Option(
        None,
        "--vocabulary",
        "-v",
        help="Style vocabulary YAML (default: STYLE_VOCABULARY_PATH or Bold/Italic)",
        exists=True,
        dir_okay=False,
    ),
    y_tolerance: float = typer.Option(
        DEFAULT_Y_TOLERANCE,
        "--y-tolerance",
        "-y",
        help="Max vertical distance (points) between characters on the same line",
        min=0.0,
    ),
):
    """
    Convert a PDF to styled XHTML.

    Each text line becomes a paragraph opening with a span that records its
    position and font; bold and italic fonts become <b> and <i> tags.

    Logs are saved to outs/logs/convert_TIMESTAMP/.

    Examples:\n

        $ convert_pdf.py convert report.pdf

        $ convert_pdf.py convert report.pdf -o out/report.xhtml --vocabulary styles.yaml
    """
    output_path = output if output else pdf_file.with_suffix(".xhtml")
    setup_conversion_logger(LOGS_PATH / f"convert_{now()}", pdf_file)

    typer.secho(f"\nConverting: {pdf_file.name}", fg=typer.colors.BLUE, bold=True)

    try:
        vocabulary = load_vocabulary(vocabulary_file)
        result = convert_pdf(pdf_file, output_path, vocabulary=vocabulary, y_tolerance=y_tolerance)
    except ValueError as e:
        typer.secho(f"\n✗ Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not result.success:
        typer.secho(f"\n✗ Conversion failed: {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Pages: {result.pages}")
    typer.echo(f"Lines: {result.runs}")
    typer.echo(f"Characters: {result.tokens}")
    typer.secho(f"\n✓ Success! XHTML saved to: {result.output_path}", fg=typer.colors.GREEN)


@app.command("fonts")
def fonts_command(
    pdf_file: Path = typer.Argument(
        ...,
        help="Path to .pdf file to inspect",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    vocabulary_file: Path = typer.Option(
        None,
        "--vocabulary",
        "-v",
        help="Style vocabulary YAML (default: STYLE_VOCABULARY_PATH or Bold/Italic)",
        exists=True,
        dir_okay=False,
    ),
):
    """
    List font names used in a PDF and the styles each one activates.

    Example:\n

        $ convert_pdf.py fonts report.pdf
    """
    classifier = StyleClassifier(load_vocabulary(vocabulary_file))
    fonts = PDFTokenSource(pdf_file).font_names()

    if not fonts:
        typer.secho(f"No text found in {pdf_file}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nFonts in {pdf_file.name} ({len(fonts)}):", fg=typer.colors.BLUE, bold=True)
    for font_name, count in fonts.items():
        styles = classifier.vocabulary.ordered(classifier.classify_font(font_name))
        style_info = ", ".join(styles) if styles else "plain"
        typer.echo(f"  {font_name or '<unnamed>'}: {count} chars [{style_info}]")


@app.command("vocabulary")
def vocabulary_command(
    vocabulary_file: Path = typer.Option(
        None,
        "--vocabulary",
        "-v",
        help="Style vocabulary YAML (default: STYLE_VOCABULARY_PATH or Bold/Italic)",
        exists=True,
        dir_okay=False,
    ),
):
    """
    Show the style labels, tags and font-name patterns in effect.

    Labels opened together are opened in the order listed.
    """
    vocabulary = load_vocabulary(vocabulary_file)

    typer.secho(f"\nStyle vocabulary ({len(vocabulary)}):", fg=typer.colors.BLUE, bold=True)
    for definition in vocabulary:
        patterns = ", ".join(definition.patterns)
        typer.echo(f"  {definition.label} -> <{definition.tag}>  (matches: {patterns})")


if __name__ == "__main__":
    app()
