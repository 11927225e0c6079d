"""Unit tests for the depdot CLI."""

import json
import tempfile
from pathlib import Path

from typer.testing import CliRunner

from depdot import __version__
from depdot.cli import app

DOCUMENT = {
    "projects": [
        {
            "name": "app",
            "configurations": [
                {"name": "runtimeClasspath", "dependencies": ["io.reactivex.rxjava2:rxandroid:2.0.2"]},
            ],
        }
    ],
    "modules": [
        {
            "group": "io.reactivex.rxjava2",
            "name": "rxandroid",
            "version": "2.0.2",
            "dependencies": ["io.reactivex.rxjava2:rxjava:2.1.10"],
        },
        {"group": "io.reactivex.rxjava2", "name": "rxjava", "version": "2.1.10"},
    ],
}


class TestGenerateCLI:
    """Test generate command."""

    def write_inputs(self, temp_path: Path, config: dict | None = None) -> tuple[Path, Path]:
        document_file = temp_path / "graph.json"
        document_file.write_text(json.dumps(DOCUMENT), encoding="utf-8")
        config_file = temp_path / ".depdot.json"
        config_file.write_text(json.dumps(config or {}), encoding="utf-8")
        return document_file, config_file

    def test_writes_default_generator_file(self):
        runner = CliRunner()

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            document_file, config_file = self.write_inputs(temp_path)
            out_dir = temp_path / "out"

            result = runner.invoke(app, [
                "generate", str(document_file), "--config", str(config_file), "--out", str(out_dir)
            ])

            assert result.exit_code == 0
            assert (out_dir / "dependency-graph.dot").read_text(encoding="utf-8") == (
                "digraph G {\n"
                '  app [label="app", shape="box"];\n'
                '  ioreactivexrxjava2rxandroid [label="rxandroid", shape="box"];\n'
                "  app -> ioreactivexrxjava2rxandroid;\n"
                '  ioreactivexrxjava2rxjava [label="rxjava", shape="box"];\n'
                "  ioreactivexrxjava2rxandroid -> ioreactivexrxjava2rxjava;\n"
                "}\n"
            )

    def test_one_file_per_named_generator(self):
        runner = CliRunner()

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            document_file, config_file = self.write_inputs(temp_path, {
                "generators": [{"name": ""}, {"name": "direct", "noChildren": ["*"]}],
            })
            out_dir = temp_path / "out"

            result = runner.invoke(app, [
                "generate", str(document_file), "--config", str(config_file), "--out", str(out_dir)
            ])

            assert result.exit_code == 0
            assert (out_dir / "dependency-graph.dot").exists()
            direct = (out_dir / "dependency-graph-direct.dot").read_text(encoding="utf-8")
            assert "ioreactivexrxjava2rxjava" not in direct

    def test_stdout_with_selected_generator(self):
        runner = CliRunner()

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            document_file, config_file = self.write_inputs(temp_path, {
                "generators": [{"name": ""}, {"name": "headed", "header": {"text": "Runtime"}}],
            })

            result = runner.invoke(app, [
                "generate", str(document_file), "--config", str(config_file), "--generator", "headed", "--stdout"
            ])

            assert result.exit_code == 0
            assert 'label="Runtime" fontsize="24"' in result.stdout
            assert result.stdout.count("digraph G {") == 1

    def test_unknown_generator(self):
        runner = CliRunner()

        with tempfile.TemporaryDirectory() as temp_dir:
            document_file, config_file = self.write_inputs(Path(temp_dir))

            result = runner.invoke(app, [
                "generate", str(document_file), "--config", str(config_file), "--generator", "missing", "--stdout"
            ])

            assert result.exit_code == 1
            assert "Unknown generator 'missing'" in result.stdout

    def test_missing_document(self):
        runner = CliRunner()

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            _, config_file = self.write_inputs(temp_path)

            result = runner.invoke(app, [
                "generate", str(temp_path / "missing.json"), "--config", str(config_file)
            ])

            assert result.exit_code == 1
            assert "Graph document not found" in result.stdout

    def test_invalid_config(self):
        runner = CliRunner()

        with tempfile.TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            document_file, config_file = self.write_inputs(temp_path, {"unexpected": True})

            result = runner.invoke(app, ["generate", str(document_file), "--config", str(config_file)])

            assert result.exit_code == 1
            assert "Error:" in result.stdout


def test_version():
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"depdot version {__version__}" in result.stdout
