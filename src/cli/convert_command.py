"""Convert command orchestration for CLI.

This module provides the ConvertCommand class that orchestrates a
conversion run for the CLI. It coordinates ConfigLoader, MarkdownConverter
and OutputHandler to convert stdin or a batch of files, reporting
converter warnings, skipped outputs and per-file failures.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.cli.config import ConfigLoader
from src.cli.errors import (
    ConfigError,
    ConfigNotFoundError,
    FilesystemError,
    OutputExistsError,
)
from src.cli.models import ConverterConfig, ConvertSummary, ExitCode
from src.cli.output import OutputHandler
from src.content_converter.markdown_converter import MarkdownConverter
from src.models.conversion_result import ConversionResult

logger = logging.getLogger(__name__)


class ConvertCommand:
    """Orchestrates a complete conversion run for the CLI.

    Modes:
        - stdin: no input files; HTML goes to --output or stdout
        - single file with --output: HTML goes to that path
        - batch: each input gets an output beside it, in --output-dir,
          or in the configured output_dir

    A file that cannot be read or written is reported and the batch
    continues; the run then exits with FILESYSTEM_ERROR.

    Example:
        >>> cmd = ConvertCommand(output_handler=OutputHandler())
        >>> exit_code = cmd.run(files=["README.md"], output_dir="site")
    """

    def __init__(
        self,
        output_handler: Optional[OutputHandler] = None,
        converter: Optional[MarkdownConverter] = None,
    ):
        """Initialize convert command.

        Args:
            output_handler: Terminal output handler (creates a default one if None)
            converter: Markdown converter (creates a default one if None)
        """
        self.output = output_handler or OutputHandler()
        self.converter = converter or MarkdownConverter()

    def run(
        self,
        files: Optional[List[str]] = None,
        output: Optional[str] = None,
        output_dir: Optional[str] = None,
        force: bool = False,
        config_path: Optional[str] = None,
    ) -> ExitCode:
        """Run a conversion.

        Args:
            files: Input markdown files (None or empty reads stdin)
            output: Output file for stdin or a single input file
            output_dir: Directory for batch outputs (overrides config)
            force: Overwrite existing outputs
            config_path: Explicit configuration file

        Returns:
            ExitCode for the run
        """
        files = files or []

        try:
            config = ConfigLoader.resolve(config_path)
        except (ConfigNotFoundError, ConfigError) as e:
            logger.error(f"Configuration failed: {e}")
            self.output.error(str(e))
            return ExitCode.CONFIG_ERROR
        except FilesystemError as e:
            logger.error(f"Configuration could not be read: {e}")
            self.output.error(str(e))
            return ExitCode.FILESYSTEM_ERROR

        if output and len(files) > 1:
            self.output.error("--output can only be used with a single input file (use --output-dir)")
            return ExitCode.GENERAL_ERROR

        overwrite = force or config.overwrite

        if not files:
            return self._convert_stdin(config, output, overwrite)

        return self._convert_files(files, config, output, output_dir, overwrite)

    def _convert_stdin(
        self,
        config: ConverterConfig,
        output: Optional[str],
        overwrite: bool,
    ) -> ExitCode:
        """Convert markdown read from stdin."""
        try:
            markdown = sys.stdin.buffer.read().decode(config.encoding)
        except UnicodeDecodeError as e:
            error = FilesystemError('<stdin>', 'read', f"Not valid {config.encoding}: {e.reason}")
            logger.error(f"Failed to read stdin: {error}")
            self.output.error(str(error))
            return ExitCode.FILESYSTEM_ERROR

        result = self.converter.convert_document(markdown, source="<stdin>")
        self._report_warnings(result)

        if not output:
            sys.stdout.write(result.html)
            sys.stdout.flush()
            return ExitCode.SUCCESS

        try:
            self._write_output(Path(output), result.html, config, overwrite)
        except OutputExistsError as e:
            self.output.warning(str(e))
            return ExitCode.SUCCESS
        except FilesystemError as e:
            self.output.error(str(e))
            return ExitCode.FILESYSTEM_ERROR

        self.output.success(f"Wrote {output}")
        return ExitCode.SUCCESS

    def _convert_files(
        self,
        files: List[str],
        config: ConverterConfig,
        output: Optional[str],
        output_dir: Optional[str],
        overwrite: bool,
    ) -> ExitCode:
        """Convert each input file, continuing past per-file failures."""
        summary = ConvertSummary()
        target_dir = output_dir or config.output_dir

        with self.output.progress_bar(len(files)) as advance:
            for file_path in files:
                source = Path(file_path)
                target = Path(output) if output else self._target_path(source, config, target_dir)

                try:
                    result = self._convert_file(source, target, config, overwrite)
                except OutputExistsError as e:
                    logger.info(f"Skipping {source}: {e}")
                    self.output.warning(f"Skipped {source}: {target} already exists")
                    summary.skipped.append(file_path)
                except FilesystemError as e:
                    logger.error(f"Failed to convert {source}: {e}")
                    self.output.error(str(e))
                    summary.failed.append(file_path)
                else:
                    summary.converted.append(file_path)
                    summary.warning_count += len(result.warnings)
                    self.output.info(f"{source} → {target}")

                advance()

        self.output.print_summary(summary)

        if summary.failed:
            return ExitCode.FILESYSTEM_ERROR
        return ExitCode.SUCCESS

    def _convert_file(
        self,
        source: Path,
        target: Path,
        config: ConverterConfig,
        overwrite: bool,
    ) -> ConversionResult:
        """Read, convert and write one file.

        Raises:
            OutputExistsError: If target exists and overwrite is off
            FilesystemError: If the input cannot be read or the output written
        """
        if target.exists() and not overwrite:
            raise OutputExistsError(str(target))

        if source.resolve() == target.resolve():
            raise FilesystemError(str(target), 'write', 'Output path is the same as the input file')

        markdown = self._read_input(source, config)
        result = self.converter.convert_document(markdown, source=str(source))
        self._report_warnings(result)
        self._write_output(target, result.html, config, overwrite=True)
        return result

    @staticmethod
    def _target_path(source: Path, config: ConverterConfig, target_dir: Optional[str]) -> Path:
        """Build the output path for a batch input."""
        directory = Path(target_dir) if target_dir else source.parent
        return directory / (source.stem + config.output_suffix)

    @staticmethod
    def _read_input(source: Path, config: ConverterConfig) -> str:
        """Read an input file with the configured encoding."""
        try:
            return source.read_text(encoding=config.encoding)
        except FileNotFoundError:
            raise FilesystemError(str(source), 'read', 'File not found')
        except PermissionError:
            raise FilesystemError(str(source), 'read', 'Permission denied')
        except UnicodeDecodeError as e:
            raise FilesystemError(str(source), 'read', f"Not valid {config.encoding}: {e.reason}")
        except OSError as e:
            raise FilesystemError(str(source), 'read', str(e))

    @staticmethod
    def _write_output(target: Path, html: str, config: ConverterConfig, overwrite: bool) -> None:
        """Write HTML to target, creating parent directories."""
        if target.exists() and not overwrite:
            raise OutputExistsError(str(target))

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding=config.encoding)
        except PermissionError:
            raise FilesystemError(str(target), 'write', 'Permission denied')
        except UnicodeEncodeError as e:
            raise FilesystemError(str(target), 'write', f"Cannot encode as {config.encoding}: {e.reason}")
        except OSError as e:
            raise FilesystemError(str(target), 'write', str(e))

        logger.debug(f"Wrote {len(html)} character(s) to {target}")

    def _report_warnings(self, result: ConversionResult) -> None:
        """Show converter warnings for one document."""
        for warning in result.warnings:
            self.output.warning(f"{result.source}: {warning}")
