"""Integration tests for complete CLI conversion runs."""

from typer.testing import CliRunner

from src.cli.config import ConfigLoader
from src.cli.main import app
from src.cli.models import ConverterConfig, ExitCode
from tests.fixtures.sample_markdown import (
    SAMPLE_HTML_MIXED,
    SAMPLE_HTML_SIMPLE,
    SAMPLE_HTML_TWO_LISTS,
    SAMPLE_MARKDOWN_MIXED,
    SAMPLE_MARKDOWN_SIMPLE,
    SAMPLE_MARKDOWN_TWO_LISTS,
)
from tests.helpers.assertion_helpers import assert_list_wrappers_balanced


runner = CliRunner()


class TestStdinFlow:
    """Test cases for stdin → stdout conversion."""

    def test_stdin_to_stdout(self, workdir):
        """HTML is the only thing written to stdout."""
        result = runner.invoke(app, [], input=SAMPLE_MARKDOWN_SIMPLE)

        assert result.exit_code == ExitCode.SUCCESS
        assert result.stdout == SAMPLE_HTML_SIMPLE

    def test_empty_stdin(self, workdir):
        """Empty input produces empty output."""
        result = runner.invoke(app, [], input="")

        assert result.exit_code == ExitCode.SUCCESS
        assert result.stdout == ""

    def test_stdin_to_file(self, workdir):
        """--output writes the HTML to a file."""
        result = runner.invoke(app, ["--output", "out.html"], input=SAMPLE_MARKDOWN_MIXED)

        assert result.exit_code == ExitCode.SUCCESS
        assert (workdir / "out.html").read_text(encoding="utf-8") == SAMPLE_HTML_MIXED


class TestFileFlow:
    """Test cases for file conversion."""

    def test_batch_conversion(self, workdir):
        """Each input file gets an HTML file next to it."""
        (workdir / "simple.md").write_text(SAMPLE_MARKDOWN_SIMPLE, encoding="utf-8")
        (workdir / "lists.md").write_text(SAMPLE_MARKDOWN_TWO_LISTS, encoding="utf-8")

        result = runner.invoke(app, ["simple.md", "lists.md"])

        assert result.exit_code == ExitCode.SUCCESS
        assert (workdir / "simple.html").read_text(encoding="utf-8") == SAMPLE_HTML_SIMPLE
        lists_html = (workdir / "lists.html").read_text(encoding="utf-8")
        assert lists_html == SAMPLE_HTML_TWO_LISTS
        assert_list_wrappers_balanced(lists_html)

    def test_rerun_skips_then_force_overwrites(self, workdir):
        """A second run skips existing outputs until --force is given."""
        source = workdir / "page.md"
        source.write_text("first", encoding="utf-8")
        runner.invoke(app, ["page.md"])

        source.write_text("second", encoding="utf-8")
        skipped = runner.invoke(app, ["page.md"])
        assert skipped.exit_code == ExitCode.SUCCESS
        assert (workdir / "page.html").read_text(encoding="utf-8") == "<p>first</p>"

        forced = runner.invoke(app, ["page.md", "--force"])
        assert forced.exit_code == ExitCode.SUCCESS
        assert (workdir / "page.html").read_text(encoding="utf-8") == "<p>second</p>"

    def test_missing_file_exit_code(self, workdir):
        """A missing input exits with FILESYSTEM_ERROR."""
        result = runner.invoke(app, ["nope.md"])

        assert result.exit_code == ExitCode.FILESYSTEM_ERROR


class TestConfigFlow:
    """Test cases for configuration-driven runs."""

    def test_default_config_file_is_applied(self, workdir):
        """.mdlite/config.yaml controls suffix and output directory."""
        ConfigLoader.save(
            ConfigLoader.default_path(),
            ConverterConfig(output_suffix=".htm", output_dir="site"),
        )
        (workdir / "index.md").write_text("# Home", encoding="utf-8")

        result = runner.invoke(app, ["index.md"])

        assert result.exit_code == ExitCode.SUCCESS
        assert (workdir / "site" / "index.htm").read_text(encoding="utf-8") == "<h1>Home</h1>"

    def test_configured_encoding(self, workdir):
        """Inputs are read and outputs written with the configured encoding."""
        ConfigLoader.save("latin.yaml", ConverterConfig(encoding="latin-1"))
        (workdir / "cafe.md").write_bytes("* caf\xe9".encode("latin-1"))

        result = runner.invoke(app, ["cafe.md", "--config", "latin.yaml"])

        assert result.exit_code == ExitCode.SUCCESS
        assert (workdir / "cafe.html").read_bytes() == "<ul><li>caf\xe9</li></ul>".encode("latin-1")

    def test_missing_explicit_config(self, workdir):
        """A missing --config file exits with CONFIG_ERROR."""
        result = runner.invoke(app, ["--config", "absent.yaml"], input="x")

        assert result.exit_code == ExitCode.CONFIG_ERROR

    def test_invalid_config(self, workdir):
        """An invalid config file exits with CONFIG_ERROR."""
        (workdir / "bad.yaml").write_text("output_suffix: html\n", encoding="utf-8")

        result = runner.invoke(app, ["--config", "bad.yaml"], input="x")

        assert result.exit_code == ExitCode.CONFIG_ERROR

    def test_config_syntax_error_with_brackets(self, workdir):
        """A YAML error quoting bracketed text still exits with CONFIG_ERROR."""
        (workdir / "c.yaml").write_text("encoding: [/bold\n", encoding="utf-8")

        result = runner.invoke(app, ["--config", "c.yaml", "a.md"])

        assert result.exit_code == ExitCode.CONFIG_ERROR
        assert "Invalid YAML syntax" in result.output

    def test_configured_encoding_applies_to_stdin(self, workdir):
        """Stdin bytes are decoded with the configured encoding."""
        ConfigLoader.save("latin.yaml", ConverterConfig(encoding="latin-1"))

        result = runner.invoke(app, ["--config", "latin.yaml"], input="# caf\xe9".encode("latin-1"))

        assert result.exit_code == ExitCode.SUCCESS
        assert result.stdout == "<h1>caf\xe9</h1>"


class TestMarkupInMessages:
    """Test cases for user text that looks like Rich markup."""

    def test_missing_file_with_bracketed_name(self, workdir):
        """A bracketed file name is reported verbatim."""
        result = runner.invoke(app, ["[/red].md"])

        assert result.exit_code == ExitCode.FILESYSTEM_ERROR
        assert "[/red].md" in result.output
