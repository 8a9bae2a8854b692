"""Main CLI entry point for the wiki2md command.

This module provides the Typer application that converts a saved
Wikipedia article page into Markdown. It uses options on a single main
command rather than subcommands.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from wiki2md import __version__
from wiki2md.cli.config import ConfigLoader
from wiki2md.cli.errors import CLIError, OutputWriteError
from wiki2md.cli.filename import title_to_filename
from wiki2md.cli.models import ExitCode
from wiki2md.cli.output import OutputHandler
from wiki2md.content_converter.article_converter import ArticleConverter
from wiki2md.content_converter.frontmatter import extract_language
from wiki2md.document.errors import DocumentLoadError
from wiki2md.document.html_document import HtmlDocument
from wiki2md.messaging.request_handler import (
    CONVERT_ACTION,
    ConversionRequest,
    handle_request,
)

app = typer.Typer(
    name="wiki2md",
    help="""Convert a saved Wikipedia article (HTML) into clean Markdown.

QUICK START:
  wiki2md Python.html                               # Markdown to stdout
  wiki2md Python.html -o python.md                  # Write to a file
  wiki2md Python.html --output-dir notes/           # File named after the title
  wiki2md Python.html --no-tables --no-images       # Skip tables and images""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'wiki2md' namespace logger so third-party
    libraries keep their own settings.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("wiki2md")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"wiki2md_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _write_markdown(markdown: str, target: Path) -> None:
    """Write ``markdown`` to ``target``, creating parent directories.

    Raises:
        OutputWriteError: If the file cannot be written
    """
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(markdown, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(target), str(e))


def _run_convert(
    input_file: str,
    url: Optional[str],
    output_file: Optional[str],
    output_dir: Optional[str],
    overrides: dict,
    config_path: Optional[str],
    as_json: bool,
    logdir: Optional[str],
    verbosity: int,
    no_color: bool,
) -> None:
    """Load, convert and emit one article.

    Args:
        input_file: Saved article HTML
        url: Page URL (overrides the canonical link in the HTML)
        output_file: Write Markdown here instead of stdout
        output_dir: Write Markdown into this directory, named after the title
        overrides: Option flags given on the command line (None = not given)
        config_path: Explicit YAML config file
        as_json: Print the serialized conversion response instead of Markdown
        logdir: Directory for log files
        verbosity: Verbosity level
        no_color: Whether to disable colored output
    """
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        options = ConfigLoader.load(config_path, overrides=overrides)
        output.debug(f"Options: {options.to_dict()}")

        document = HtmlDocument.from_file(input_file, url=url)
        page = document.to_page()
        output.info(f"Converting '{page.title}' ({page.url or 'no URL'})")

        if as_json:
            request = ConversionRequest(action=CONVERT_ACTION, options=options)
            response = handle_request(request, page)
            typer.echo(json.dumps(response, ensure_ascii=False))
            raise typer.Exit(ExitCode.SUCCESS)

        result = ArticleConverter().convert(page, options)
        if not result.success:
            output.error(f"Conversion failed: {result.reason}")
            raise typer.Exit(ExitCode.for_failure(result.kind))

        if options.include_frontmatter:
            output.info(f"  Language: {extract_language(page.url)}")

        if output_file or output_dir:
            if output_file:
                target = Path(output_file)
            else:
                target = Path(output_dir) / title_to_filename(result.title)
            _write_markdown(result.markdown, target)
            output.success(f"Wrote {target}")
        else:
            typer.echo(result.markdown, nl=False)

        raise typer.Exit(ExitCode.SUCCESS)

    except (DocumentLoadError, CLIError) as e:
        logger.error(str(e))
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    except typer.Exit:
        raise

    except Exception as e:
        logger.exception("Unexpected error")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wiki2md version {__version__}")
        raise typer.Exit()


@app.command()
def main_command(
    input_file: str = typer.Argument(
        ...,
        help="Saved Wikipedia article HTML file",
        metavar="FILE",
    ),
    url: Optional[str] = typer.Option(
        None,
        "--url",
        help="Page URL (defaults to the canonical link in the HTML)",
        metavar="URL",
    ),
    output_file: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write Markdown to this file instead of stdout",
        metavar="FILE",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Write Markdown into this directory, named after the article title",
        metavar="DIR",
    ),
    tables: Optional[bool] = typer.Option(
        None,
        "--tables/--no-tables",
        help="Render tables as pipe tables",
    ),
    links: Optional[bool] = typer.Option(
        None,
        "--links/--no-links",
        help="Keep internal article links as Markdown links",
    ),
    images: Optional[bool] = typer.Option(
        None,
        "--images/--no-images",
        help="Render images",
    ),
    math: Optional[bool] = typer.Option(
        None,
        "--math/--no-math",
        help="Render formulas as $...$ / $$...$$",
    ),
    frontmatter: Optional[bool] = typer.Option(
        None,
        "--frontmatter/--no-frontmatter",
        help="Prepend a YAML metadata block",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="YAML file with default options (default: ./.wiki2md.yaml)",
        metavar="PATH",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the conversion response as JSON",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Convert a saved Wikipedia article (HTML) into clean Markdown.

    \b
    Option defaults come from ./.wiki2md.yaml (or --config) and the
    WIKI2MD_INCLUDE_TABLES, WIKI2MD_PRESERVE_LINKS, WIKI2MD_INCLUDE_IMAGES,
    WIKI2MD_INCLUDE_MATH and WIKI2MD_INCLUDE_FRONTMATTER environment
    variables (a .env file is read too). Flags on the command line win.
    """
    if output_file and output_dir:
        typer.echo("Error: --output and --output-dir cannot be used together", err=True)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    overrides = {
        'include_tables': tables,
        'preserve_links': links,
        'include_images': images,
        'include_math': math,
        'include_frontmatter': frontmatter,
    }
    _run_convert(
        input_file,
        url,
        output_file,
        output_dir,
        overrides,
        config_path,
        as_json,
        logdir,
        verbosity,
        no_color,
    )


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m wiki2md.cli.main
if __name__ == "__main__":
    main()
