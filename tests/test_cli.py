"""Tests for the Typer CLI (one-shot commands and interactive mode)."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


class TestConvertCommand:
    def test_saves_to_cwd(self, sample_markdown: Path):
        result = runner.invoke(app, ["convert", str(sample_markdown), "--tags", "python, cli"])
        assert result.exit_code == 0, result.output
        saved = Path.cwd() / "post_medium.txt"
        content = saved.read_text(encoding="utf-8")
        assert content.startswith("My Post\n\n")
        assert "Tags: python, cli" in content
        assert "\x1b" not in content
        assert "Output saved to" in result.output
        assert "Preview of saved content" in result.output

    def test_output_dir_option(self, sample_markdown: Path, tmp_path: Path):
        out = tmp_path / "out"
        result = runner.invoke(app, ["convert", str(sample_markdown), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert (out / "post_medium.txt").is_file()

    def test_preview_is_truncated(self, tmp_path: Path):
        path = tmp_path / "long.md"
        path.write_text("\n".join(f"line {i}" for i in range(30)), encoding="utf-8")
        result = runner.invoke(app, ["convert", str(path)])
        assert result.exit_code == 0, result.output
        assert "content continues in file" in result.output

    def test_display_does_not_write(self, sample_markdown: Path):
        result = runner.invoke(app, ["convert", str(sample_markdown), "--display"])
        assert result.exit_code == 0, result.output
        assert "Formatted Content for Medium" in result.output
        assert "\U0001F4CC Section" in result.output
        assert not (Path.cwd() / "post_medium.txt").exists()

    def test_missing_file_exits_with_error(self, tmp_path: Path):
        result = runner.invoke(app, ["convert", str(tmp_path / "nope.md")])
        assert result.exit_code == 1
        assert "IO error" in result.output


    def test_verbose_after_path_logs_debug(self, sample_markdown: Path):
        result = runner.invoke(app, ["convert", str(sample_markdown), "--verbose"])
        assert result.exit_code == 0, result.output
        assert "Converting" in result.output
        assert (Path.cwd() / "post_medium.txt").is_file()

    def test_verbose_before_command_logs_debug(self, sample_markdown: Path):
        result = runner.invoke(app, ["--verbose", "convert", str(sample_markdown), "--display"])
        assert result.exit_code == 0, result.output
        assert "Converting" in result.output

    def test_no_debug_output_by_default(self, sample_markdown: Path):
        result = runner.invoke(app, ["convert", str(sample_markdown)])
        assert result.exit_code == 0, result.output
        assert "Converting" not in result.output


class TestTitleCommand:
    def test_prints_title(self, sample_markdown: Path):
        result = runner.invoke(app, ["title", str(sample_markdown)])
        assert result.exit_code == 0
        assert result.output.strip() == "My Post"

    def test_prints_fallback(self, tmp_path: Path):
        path = tmp_path / "x.md"
        path.write_text("## not a title\n", encoding="utf-8")
        result = runner.invoke(app, ["--verbose", "title", str(path)])
        assert result.exit_code == 0
        assert "Untitled Post" in result.output

    def test_verbose_option_on_title(self, sample_markdown: Path):
        result = runner.invoke(app, ["title", str(sample_markdown), "-v"])
        assert result.exit_code == 0, result.output
        assert "My Post" in result.output
        assert "Read" in result.output


class TestInteractiveMode:
    def test_display_then_exit(self, sample_markdown: Path):
        result = runner.invoke(app, [], input=f"{sample_markdown}\n\n2\n3\n")
        assert result.exit_code == 0, result.output
        assert "MD2MEDIUM" in result.output
        assert "Formatted Content for Medium" in result.output
        assert "Copy the formatted content above" in result.output
        assert "Thank you for using md2medium" in result.output
        assert not (Path.cwd() / "post_medium.txt").exists()

    def test_save_with_tags_then_exit(self, sample_markdown: Path):
        result = runner.invoke(app, ["interactive"], input=f"{sample_markdown}\npython, cli\n1\n2\n")
        assert result.exit_code == 0, result.output
        content = (Path.cwd() / "post_medium.txt").read_text(encoding="utf-8")
        assert "Tags: python, cli" in content
        assert "Open the saved file" in result.output

    def test_display_then_save_as_well(self, sample_markdown: Path):
        result = runner.invoke(app, [], input=f"{sample_markdown}\n\n2\n1\n2\n")
        assert result.exit_code == 0, result.output
        assert "Also saved to file!" in result.output
        assert (Path.cwd() / "post_medium.txt").is_file()

    def test_process_another(self, sample_markdown: Path):
        result = runner.invoke(app, [], input=f"{sample_markdown}\n\n1\n1\n{sample_markdown}\n\n2\n3\n")
        assert result.exit_code == 0, result.output
        assert result.output.count("File processed successfully!") == 2

    def test_reprompts_for_missing_and_non_markdown_files(self, sample_markdown: Path, tmp_path: Path):
        notes = tmp_path / "notes.txt"
        notes.write_text("# Notes\n", encoding="utf-8")
        missing = tmp_path / "missing.md"
        result = runner.invoke(
            app,
            [],
            input=f"{missing}\n{notes}\nn\n{sample_markdown}\n\n2\n3\n",
        )
        assert result.exit_code == 0, result.output
        assert "File not found" in result.output
        assert "doesn't have .md or .markdown extension" in result.output
        assert "\U0001F4CC Section" in result.output

    def test_non_markdown_file_accepted_on_confirm(self, tmp_path: Path):
        notes = tmp_path / "notes.txt"
        notes.write_text("# Notes\n- item\n", encoding="utf-8")
        result = runner.invoke(app, [], input=f"{notes}\ny\n\n1\n2\n")
        assert result.exit_code == 0, result.output
        assert (Path.cwd() / "notes_medium.txt").read_text(encoding="utf-8").startswith("Notes\n")

    def test_out_of_range_choice_reprompts(self, sample_markdown: Path):
        result = runner.invoke(app, [], input=f"{sample_markdown}\n\n2\n9\n3\n")
        assert result.exit_code == 0, result.output
        assert "Please pick a number between 1 and 3." in result.output
