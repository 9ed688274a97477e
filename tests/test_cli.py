"""CLI tests: ancestors, path, css and highlight commands."""

import json

import pytest
from typer.testing import CliRunner

from elementsnatch import cli
from elementsnatch.cli import app
from elementsnatch.config import TRUNCATION_MARKER

PAGE = """<html><body>
<div class="vertical-tab-header"><div class="vertical-tab-header-group"><ul class="menu"><li class="item">Home</li><li class="item">About</li></ul></div></div>
<div id="foo:bar"></div>
</body></html>
"""

runner = CliRunner()


@pytest.fixture
def page(tmp_path) -> str:
    path = tmp_path / "page.html"
    path.write_text(PAGE, encoding="utf-8")
    return str(path)


# ── path ──────────────────────────────────────────────────────────────────────


class TestPathCommand:
    def test_with_ancestor(self, page):
        result = runner.invoke(
            app,
            ["path", page, "-t", ".vertical-tab-header-group", "-a", ".vertical-tab-header"],
        )
        assert result.exit_code == 0
        assert result.stdout == (
            ".vertical-tab-header .vertical-tab-header-group\n"
            ".vertical-tab-header > .vertical-tab-header-group\n"
        )

    def test_with_level(self, page):
        result = runner.invoke(app, ["path", page, "-t", ".menu", "--level", "0"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[1] == (
            "body > .vertical-tab-header > .vertical-tab-header-group > .menu"
        )

    def test_nth_child(self, page):
        result = runner.invoke(
            app, ["path", page, "-t", ".item", "-a", ".menu", "--nth-child"]
        )
        assert result.exit_code == 0
        assert ".menu:nth-child(1) > .item:nth-child(1)" in result.stdout

    @pytest.mark.parametrize("extra", [[], ["-a", ".menu", "-l", "0"]])
    def test_needs_exactly_one_ancestor_option(self, page, extra):
        result = runner.invoke(app, ["path", page, "-t", ".item", *extra])
        assert result.exit_code == 1

    def test_level_out_of_range(self, page):
        result = runner.invoke(app, ["path", page, "-t", ".item", "-l", "40"])
        assert result.exit_code == 1
        assert "No ancestor at level 40" in result.output

    def test_unmatched_selector(self, page):
        result = runner.invoke(app, ["path", page, "-t", ".nope", "-a", "body"])
        assert result.exit_code == 1
        assert "No element matches" in result.output

    def test_copy(self, page, monkeypatch):
        copied = []
        monkeypatch.setattr(cli, "copy_text", lambda text: copied.append(text) or True)
        result = runner.invoke(app, ["path", page, "-t", ".item", "-a", ".menu", "--copy"])
        assert result.exit_code == 0
        assert copied == [".menu .item\n.menu > .item\n"]
        assert "Path copied" in result.output

    def test_copy_failure_prints_text(self, page, monkeypatch):
        monkeypatch.setattr(cli, "copy_text", lambda text: False)
        result = runner.invoke(app, ["path", page, "-t", ".item", "-a", ".menu", "--copy"])
        assert result.exit_code == 0
        assert "Copy failed" in result.output
        assert ".menu > .item" in result.output


# ── css ───────────────────────────────────────────────────────────────────────


class TestCssCommand:
    def test_serializes_root(self, page):
        result = runner.invoke(app, ["css", page, "-r", ".menu"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == ".menu {"
        assert "  .item { /* 2 times */" in lines

    def test_max_nodes(self, page):
        result = runner.invoke(app, ["css", page, "-r", ".menu", "--max-nodes", "1"])
        assert result.exit_code == 0
        assert TRUNCATION_MARKER in result.stdout

    def test_max_nodes_from_env(self, page):
        result = runner.invoke(
            app, ["css", page, "-r", ".menu"], env={"ELEMENTSNATCH_MAX_NODES": "1"}
        )
        assert TRUNCATION_MARKER in result.stdout

    def test_max_depth(self, page):
        result = runner.invoke(app, ["css", page, "-r", ".menu", "--max-depth", "0"])
        assert ".item" not in result.stdout

    def test_tab_indent(self, page):
        result = runner.invoke(app, ["css", page, "-r", ".menu", "--indent", "\\t"])
        assert "\t.item { /* 2 times */" in result.stdout.splitlines()

    def test_skip(self, page):
        result = runner.invoke(app, ["css", page, "-r", ".menu", "--skip", "li"])
        assert ".item" not in result.stdout

    def test_default_skip_tags(self):
        html = "<div><script>x()</script><style>p{}</style><p>y</p></div>"
        result = runner.invoke(app, ["css", "-", "-r", "div"], input=html)
        assert result.exit_code == 0
        assert "script" not in result.stdout
        assert "style" not in result.stdout
        assert "  p {" in result.stdout.splitlines()

    def test_hex_escape(self, page):
        result = runner.invoke(app, ["css", page, "-r", "div:empty", "--hex-escape"])
        assert result.stdout.splitlines()[0] == "#foo\\3a bar  {"

    def test_stdin(self):
        result = runner.invoke(app, ["css", "-", "-r", ".menu"], input=PAGE)
        assert result.exit_code == 0
        assert result.stdout.startswith(".menu {\n")

    def test_invalid_options(self, page):
        result = runner.invoke(app, ["css", page, "--max-nodes", "-1"])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["css", str(tmp_path / "missing.html")])
        assert result.exit_code == 1


# ── ancestors / highlight / version ──────────────────────────────────────────


class TestOtherCommands:
    def test_ancestors_lists_menu(self, page):
        result = runner.invoke(app, ["ancestors", page, "-t", ".item"])
        assert result.exit_code == 0
        assert "li.item" in result.stdout
        assert "ul.menu" in result.stdout

    def test_ancestors_bad_mode(self, page):
        result = runner.invoke(app, ["ancestors", page, "-t", ".item", "--mode", "xpath"])
        assert result.exit_code == 1

    def test_highlight_writes_file(self, page, tmp_path):
        out = tmp_path / "out.html"
        result = runner.invoke(app, ["highlight", page, "-t", ".menu", "-o", str(out)])
        assert result.exit_code == 0
        html = out.read_text(encoding="utf-8")
        assert 'data-esc-hi="true"' in html
        assert "contrast(1.25)" in html

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert "0.1.0" in result.stdout


# ── --log-file ────────────────────────────────────────────────────────────────


def _json_lines(log_file) -> list[dict]:
    return [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]


class TestLogFile:
    def test_css_records_node_count(self, page, tmp_path):
        log_file = tmp_path / "logs" / "css.log"
        result = runner.invoke(
            app, ["css", page, "-r", ".menu", "-v", "--log-file", str(log_file)]
        )
        assert result.exit_code == 0
        counts = [entry["node_count"] for entry in _json_lines(log_file) if "node_count" in entry]
        assert counts == [3]

    def test_path_records_selector(self, page, tmp_path):
        log_file = tmp_path / "path.log"
        result = runner.invoke(
            app, ["path", page, "-t", ".item", "-a", ".menu", "-v", "--log-file", str(log_file)]
        )
        assert result.exit_code == 0
        selectors = [entry["selector"] for entry in _json_lines(log_file) if "selector" in entry]
        assert selectors == [".menu .item"]

    def test_quiet_run_writes_no_debug_records(self, page, tmp_path):
        log_file = tmp_path / "quiet.log"
        runner.invoke(app, ["css", page, "-r", ".menu", "--log-file", str(log_file)])
        assert not any("node_count" in entry for entry in _json_lines(log_file))
