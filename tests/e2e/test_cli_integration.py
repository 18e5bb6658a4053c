"""End-to-end tests for the command-line driver."""

import json

import pytest
import yaml

from pattern_gallery.cli.main import main, parse_args


@pytest.fixture(autouse=True)
def _restore_logging(reset_logging):
    yield


def run_cli(capsys, *argv):
    """Run the CLI and return (exit_code, stdout)."""
    try:
        main(list(argv))
        code = 0
    except SystemExit as e:
        code = e.code
    return code, capsys.readouterr().out


class TestParseArgs:
    def test_subcommand_format_is_kept_separately(self):
        args = parse_args(["--format", "json", "list", "--format", "table"])

        assert args.format == "json"
        assert args.command_format == "table"

    def test_run_accepts_several_names(self):
        args = parse_args(["run", "composite", "proxy"])

        assert args.names == ["composite", "proxy"]
        assert args.all is False


class TestCLIIntegration:
    def test_list_text(self, capsys):
        code, out = run_cli(capsys, "list")

        assert code == 0
        assert "composite" in out
        assert "template-method" in out

    def test_list_category_json(self, capsys):
        code, out = run_cli(capsys, "--format", "json", "list", "--category", "creational")

        assert code == 0
        names = [p["name"] for p in json.loads(out)["patterns"]]
        assert names == ["singleton", "prototype", "factory-method"]

    def test_show_list_format(self, capsys):
        code, out = run_cli(capsys, "show", "proxy", "--format", "list")

        assert code == 0
        assert "Title:    Proxy" in out
        assert "Category: structural" in out

    def test_run_text(self, capsys):
        code, out = run_cli(capsys, "run", "composite")

        assert code == 0
        assert "== Composite (structural) ==" in out
        assert "Composite: [Leaf: Leaf 3, Composite: [Leaf: Leaf 1, Leaf: Leaf 2]]" in out

    def test_run_json(self, capsys):
        code, out = run_cli(capsys, "run", "flyweight", "proxy", "--format", "json")

        assert code == 0
        results = json.loads(out)["results"]
        assert [r["name"] for r in results] == ["flyweight", "proxy"]
        assert results[0]["lines"][-1] == "Shared icons created: 2"

    def test_run_all_table(self, capsys):
        code, out = run_cli(capsys, "run", "--all", "--format", "table")

        assert code == 0
        assert "Chain of Responsibility" in out
        assert "Template Method" in out

    def test_unknown_pattern_exits_with_error(self, capsys):
        code, out = run_cli(capsys, "run", "visitor")

        assert code == 1
        assert "Error: Pattern demo 'visitor' not found" in out

    def test_quiet_suppresses_error_message(self, capsys):
        code, out = run_cli(capsys, "--quiet", "show", "visitor")

        assert code == 1
        assert out == ""

    def test_missing_command(self, capsys):
        code, out = run_cli(capsys)

        assert code == 1
        assert "No command specified" in out

    def test_run_without_names(self, capsys):
        code, out = run_cli(capsys, "run")

        assert code == 1
        assert "--all" in out

    def test_run_all_rejects_explicit_names(self, capsys):
        code, out = run_cli(capsys, "run", "--all", "composite")

        assert code == 1
        assert "cannot be combined with --all" in out

    def test_config_file_sets_default_format(self, capsys, tmp_path):
        path = tmp_path / "gallery.yaml"
        path.write_text("output:\n  format: json\n")

        code, out = run_cli(capsys, "--config", str(path), "run", "adapter")

        assert code == 0
        assert json.loads(out)["results"][0]["lines"] == ["Executing aggregated task"]

    def test_bad_config_file(self, capsys, tmp_path):
        code, out = run_cli(capsys, "--config", str(tmp_path / "absent.yaml"), "list")

        assert code == 1
        assert "Configuration file not found" in out

    def test_config_show_yaml(self, capsys):
        code, out = run_cli(capsys, "--log-level", "ERROR", "config", "show", "--format", "yaml")

        assert code == 0
        config = yaml.safe_load(out)["config"]
        assert config["logging"]["level"] == "ERROR"
        assert config["output"]["format"] == "text"

    def test_output_file(self, capsys, tmp_path):
        target = tmp_path / "out.json"

        code, out = run_cli(capsys, "--output", str(target), "--format", "json", "run", "bridge")

        assert code == 0
        assert f"Output written to {target}" in out
        lines = json.loads(target.read_text())["results"][0]["lines"]
        assert lines == ["Drawing Circle in Red", "Drawing Square in Blue"]
