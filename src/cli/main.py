"""Main CLI entry point for the mdlite command.

This module provides the Typer application that serves as the entry point
for the mdlite command-line tool. It uses options on the main command
rather than subcommands for a simpler user experience.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from src.cli.convert_command import ConvertCommand
from src.cli.models import ExitCode
from src.cli.output import OutputHandler

VERSION = "0.1.0"

app = typer.Typer(
    name="mdlite",
    help="""Convert a small markdown subset (headers, * lists, __bold__, _italic_) to HTML.

QUICK START:
  mdlite < notes.md                     # stdin → stdout
  mdlite notes.md -o notes.html         # single file
  mdlite docs/*.md --output-dir site    # batch""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

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

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

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
        log_file = log_path / f"mdlite_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


@app.command()
def main_command(
    files: Optional[List[str]] = typer.Argument(
        None,
        help="Markdown files to convert (reads stdin when omitted)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (stdin or a single input file only)",
        metavar="PATH",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Directory for output files (default: beside each input)",
        metavar="DIR",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing output files",
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        help="Configuration file (default: .mdlite/config.yaml or $MDLITE_CONFIG)",
        metavar="PATH",
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
        help="Show version and exit",
    ),
) -> None:
    """Convert markdown to an HTML fragment.

    \b
    SUPPORTED SYNTAX:
      # Header ... ###### Header     → <h1> ... <h6>
      * item                         → <li> (consecutive items share one <ul>)
      __bold__                       → <strong>
      _italic_                       → <em>
      anything else                  → <p>
    """
    if version:
        typer.echo(f"mdlite version {VERSION}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)

    output_handler = OutputHandler(verbosity=verbosity, no_color=no_color)
    convert_cmd = ConvertCommand(output_handler=output_handler)

    try:
        exit_code = convert_cmd.run(
            files=files,
            output=output,
            output_dir=output_dir,
            force=force,
            config_path=config,
        )
    except Exception as e:
        logger.exception("Unexpected error during conversion")
        output_handler.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
