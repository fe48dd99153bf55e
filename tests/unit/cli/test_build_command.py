#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_build_command.py
"""Unit tests for the build command helpers.

Tests cover:
- Output path inference
- LaTeX engine detection and command construction
- Loading tree files and the errors raised for bad input
- Writing output and compiling with the LaTeX engine

"""

import dataclasses
import json
import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import yaml
from utils import RESUME_LATEX_BODY, RESUME_MARKDOWN

from resumedoc.cli.build import (
    LatexCommand,
    build_document,
    compile_latex,
    generate_output,
    get_pdf_path,
    infer_latex_command,
    infer_latex_environment,
    infer_output,
    is_command_available,
    load_document,
    wrap_latex_document,
)
from resumedoc.exceptions import (
    DependencyError,
    FileAccessError,
    FileNotFoundError,
    FormatError,
    LatexCompileError,
    OutputWriteError,
    ParsingError,
)


def _which_for(*available):
    return lambda name: f"/usr/bin/{name}" if name in available else None


@pytest.fixture
def resume_yaml(tmp_path, resume_tree_dict) -> Path:
    path = tmp_path / "resume.yaml"
    path.write_text(yaml.safe_dump(resume_tree_dict), encoding="utf-8")
    return path


@pytest.mark.unit
class TestInferOutput:
    """Tests for infer_output and get_pdf_path."""

    @pytest.mark.parametrize(
        "source,output_format,expected",
        [
            ("resume.yaml", "latex", "resume.tex"),
            ("resume.yml", "markdown", "resume.md"),
            ("data/resume.json", "latex", "data/resume.tex"),
        ],
    )
    def test_next_to_source(self, source, output_format, expected):
        assert infer_output(source, output_format) == Path(expected)

    def test_output_dir(self):
        assert infer_output("data/resume.json", "markdown", "out") == Path("out/resume.md")

    def test_unsupported_extension(self):
        with pytest.raises(FormatError) as exc_info:
            infer_output("resume.txt", "latex")
        assert exc_info.value.format_type == ".txt"
        assert ".yaml" in exc_info.value.message

    def test_unsupported_format(self):
        with pytest.raises(FormatError):
            infer_output("resume.yaml", "html")

    def test_pdf_path(self):
        assert get_pdf_path("out/resume.tex") == Path("out/resume.pdf")


@pytest.mark.unit
class TestLatexEnvironment:
    """Tests for engine detection and command construction."""

    @patch("resumedoc.cli.build.shutil.which")
    def test_is_command_available(self, mock_which):
        mock_which.side_effect = _which_for("tectonic")
        assert is_command_available("tectonic")
        assert not is_command_available("xelatex")

    @pytest.mark.parametrize(
        "available,expected",
        [(("xelatex", "tectonic"), "xelatex"), (("xelatex",), "xelatex"), (("tectonic",), "tectonic")],
    )
    def test_engine_preference(self, available, expected):
        with patch("resumedoc.cli.build.shutil.which", side_effect=_which_for(*available)):
            assert infer_latex_environment() == expected

    @patch("resumedoc.cli.build.shutil.which", return_value=None)
    def test_no_engine(self, mock_which):
        with pytest.raises(DependencyError) as exc_info:
            infer_latex_environment()
        assert exc_info.value.missing_programs == ["xelatex", "tectonic"]
        assert "'xelatex' or 'tectonic'" in exc_info.value.message

    def test_xelatex_command(self, tmp_path):
        source = tmp_path / "resume.yaml"
        with patch("resumedoc.cli.build.shutil.which", side_effect=_which_for("xelatex")):
            command = infer_latex_command(source)

        assert command == LatexCommand(command="xelatex", args=("-halt-on-error", "resume.tex"), cwd=str(tmp_path.resolve()))
        assert command.argv == ["xelatex", "-halt-on-error", "resume.tex"]

    def test_command_is_immutable(self):
        command = LatexCommand(command="tectonic", args=("resume.tex",))

        with pytest.raises(dataclasses.FrozenInstanceError):
            command.args = ()
        assert isinstance(command.args, tuple)
        assert hash(command) == hash(LatexCommand(command="tectonic", args=("resume.tex",)))
        assert command.argv == ["tectonic", "resume.tex"]

    def test_tectonic_command_with_output_dir(self, tmp_path):
        out = tmp_path / "out"
        with patch("resumedoc.cli.build.shutil.which", side_effect=_which_for("tectonic")):
            command = infer_latex_command("resume.json", out)

        assert command.command == "tectonic"
        assert command.args == ("resume.tex",)
        assert command.cwd == str(out.resolve())


@pytest.mark.unit
class TestLoadDocument:
    """Tests for load_document."""

    def test_yaml(self, resume_yaml, resume_document):
        assert load_document(resume_yaml) == resume_document

    def test_json(self, tmp_path, resume_tree_dict, resume_document):
        path = tmp_path / "resume.json"
        path.write_text(json.dumps(resume_tree_dict), encoding="utf-8")
        assert load_document(path) == resume_document

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError) as exc_info:
            load_document(tmp_path / "missing.yml")
        assert exc_info.value.file_path.endswith("missing.yml")

    def test_unsupported_extension_checked_first(self, tmp_path):
        with pytest.raises(FormatError):
            load_document(tmp_path / "missing.toml")

    def test_unreadable(self, tmp_path):
        directory = tmp_path / "resume.yaml"
        directory.mkdir()
        with pytest.raises(FileAccessError):
            load_document(directory)

    @pytest.mark.parametrize(
        "name,text",
        [
            ("bad.json", "{not json"),
            ("bad.yaml", "type: [doc"),
            ("unknown.yaml", "type: heading"),
            ("scalar.yaml", "just a string"),
            ("list_type.yaml", "type: [doc]"),
            ("int_href.yaml", "type: text\ntext: Acme\nmarks:\n  - type: link\n    attrs: {href: 2024}\n"),
        ],
    )
    def test_invalid_content(self, tmp_path, name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")

        with pytest.raises(ParsingError) as exc_info:
            load_document(path)

        assert exc_info.value.file_path == str(path)
        assert exc_info.value.original_error is not None


@pytest.mark.unit
class TestGenerateOutput:
    """Tests for generate_output and wrap_latex_document."""

    def test_wrap_latex_document(self):
        wrapped = wrap_latex_document("Body\n\n")
        assert wrapped.startswith("\\documentclass{article}\n")
        assert "\\usepackage{hyperref}\n\\usepackage{enumitem}\n" in wrapped
        assert wrapped.endswith("\\begin{document}\n\nBody\n\n\\end{document}\n")

    def test_markdown(self, resume_yaml, resume_document):
        output = generate_output(resume_yaml, resume_document, "markdown")

        assert output == resume_yaml.with_suffix(".md")
        assert output.read_text(encoding="utf-8") == RESUME_MARKDOWN

    def test_latex_into_new_directory(self, resume_yaml, resume_document, tmp_path):
        out = tmp_path / "nested" / "out"
        output = generate_output(resume_yaml, resume_document, "latex", out)

        assert output == out / "resume.tex"
        text = output.read_text(encoding="utf-8")
        assert RESUME_LATEX_BODY in text
        assert text.endswith("\\end{document}\n")

    def test_write_failure(self, resume_yaml, resume_document, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(OutputWriteError) as exc_info:
            generate_output(resume_yaml, resume_document, "markdown", blocker)
        assert exc_info.value.rendering_stage == "file_write"


@pytest.mark.unit
class TestCompileLatex:
    """Tests for compile_latex."""

    COMMAND = LatexCommand(command="xelatex", args=("-halt-on-error", "resume.tex"), cwd="/work")

    @patch("resumedoc.cli.build.subprocess.run")
    def test_success(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(self.COMMAND.argv, 0, stdout="ok", stderr="")

        result = compile_latex(self.COMMAND)

        assert result.returncode == 0
        mock_run.assert_called_once_with(
            ["xelatex", "-halt-on-error", "resume.tex"],
            cwd="/work",
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )

    @patch("resumedoc.cli.build.subprocess.run")
    def test_non_zero_exit(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(self.COMMAND.argv, 1, stdout="log", stderr="! Undefined")

        with pytest.raises(LatexCompileError) as exc_info:
            compile_latex(self.COMMAND)

        error = exc_info.value
        assert error.returncode == 1
        assert error.stderr == "! Undefined"
        assert "exited with status 1" in error.message

    @patch("resumedoc.cli.build.subprocess.run", side_effect=PermissionError("denied"))
    def test_cannot_start(self, mock_run):
        with pytest.raises(LatexCompileError) as exc_info:
            compile_latex(self.COMMAND)
        assert exc_info.value.returncode is None
        assert isinstance(exc_info.value.original_error, PermissionError)


@pytest.mark.unit
class TestBuildDocument:
    """Tests for build_document."""

    def test_markdown(self, resume_yaml, capsys):
        output = build_document(resume_yaml, output_format="markdown")

        assert output == resume_yaml.with_suffix(".md")
        assert "Generated markdown file successfully." in capsys.readouterr().err

    @patch("resumedoc.cli.build.compile_latex")
    def test_markdown_ignores_pdf_flag(self, mock_compile, resume_yaml):
        build_document(resume_yaml, output_format="markdown", pdf=True)
        mock_compile.assert_not_called()

    @patch("resumedoc.cli.build.compile_latex")
    def test_latex_without_pdf(self, mock_compile, resume_yaml, capsys):
        output = build_document(resume_yaml, pdf=False)

        assert output == resume_yaml.with_suffix(".tex")
        assert output.exists()
        mock_compile.assert_not_called()
        assert "Generated TeX file successfully." in capsys.readouterr().err

    @patch("resumedoc.cli.build.console")
    @patch("resumedoc.cli.build.compile_latex")
    @patch("resumedoc.cli.build.shutil.which", side_effect=_which_for("tectonic"))
    def test_latex_with_pdf(self, mock_which, mock_compile, mock_console, resume_yaml, tmp_path):
        out = tmp_path / "out"

        output = build_document(resume_yaml, output_format="latex", pdf=True, output_dir=out)

        assert output == out / "resume.pdf"
        assert (out / "resume.tex").exists()
        mock_compile.assert_called_once_with(LatexCommand(command="tectonic", args=("resume.tex",), cwd=str(out.resolve())))
        printed = [call.args[0] for call in mock_console.print.call_args_list]
        assert "`tectonic resume.tex`" in printed[0]
        assert "Generated PDF file successfully." in printed[-1]

    @patch("resumedoc.cli.build.shutil.which", return_value=None)
    def test_missing_engine_keeps_tex(self, mock_which, resume_yaml):
        with pytest.raises(DependencyError):
            build_document(resume_yaml)
        assert resume_yaml.with_suffix(".tex").exists()

    def test_unknown_format_before_reading(self, tmp_path):
        with patch("resumedoc.cli.build.load_document", Mock()) as mock_load:
            with pytest.raises(FormatError):
                build_document(tmp_path / "resume.yaml", output_format="html")
        mock_load.assert_not_called()
