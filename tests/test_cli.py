"""Tests for the `stache` CLI."""

import json

import pytest

from stache.__main__ import DEMO_TEMPLATE, demo_context, main


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("STACHE_CONFIG", raising=False)


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "greeting.mustache"
    path.write_text("Hello {{name}}!{{#items}} {{.}}{{/items}}")
    return path


class TestRender:
    def test_renders_to_stdout(self, tmp_path, template_file, clean_env, capsys):
        data = tmp_path / "data.json"
        data.write_text(json.dumps({"name": "<Ann>", "items": [1, 2]}))

        main(["render", str(template_file), "--data", str(data)])

        assert capsys.readouterr().out == "Hello &lt;Ann&gt;! 1 2"

    def test_no_data_is_empty_context(self, template_file, clean_env, capsys):
        main(["render", str(template_file)])
        assert capsys.readouterr().out == "Hello !"

    def test_writes_output_file(self, tmp_path, template_file, clean_env, capsys):
        data = tmp_path / "data.yaml"
        data.write_text("name: Bo\n")
        out = tmp_path / "out" / "greeting.txt"

        main(["render", str(template_file), "--data", str(data), "-o", str(out)])

        assert out.read_text() == "Hello Bo!"
        assert capsys.readouterr().out == ""

    def test_custom_delimiters(self, tmp_path, clean_env, capsys):
        tpl = tmp_path / "t.tpl"
        tpl.write_text("{{keep}} <%name%>")
        data = tmp_path / "data.yaml"
        data.write_text("name: Cy\n")

        main(["render", str(tpl), "--data", str(data), "--open", "<%", "--close", "%>"])

        assert capsys.readouterr().out == "{{keep}} Cy"

    def test_config_file(self, tmp_path, clean_env, capsys):
        tpl = tmp_path / "t.tpl"
        tpl.write_text("[[name]]")
        config = tmp_path / "options.yaml"
        config.write_text("delim_open: '[['\ndelim_close: ']]'\n")
        data = tmp_path / "data.json"
        data.write_text('{"name": "Di"}')

        main(["render", str(tpl), "--data", str(data), "--config", str(config)])

        assert capsys.readouterr().out == "Di"

    def test_unterminated_section_exits(self, tmp_path, clean_env, capsys):
        tpl = tmp_path / "bad.tpl"
        tpl.write_text("{{#a}}oops")

        with pytest.raises(SystemExit) as exc_info:
            main(["render", str(tpl)])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "{{/a}}" in captured.err

    def test_missing_template_exits(self, tmp_path, clean_env, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["render", str(tmp_path / "nope.tpl")])
        assert exc_info.value.code == 1
        assert "could not read template" in capsys.readouterr().err

    def test_bad_data_exits(self, tmp_path, template_file, clean_env, capsys):
        data = tmp_path / "data.json"
        data.write_text("{broken")
        with pytest.raises(SystemExit) as exc_info:
            main(["render", str(template_file), "--data", str(data)])
        assert exc_info.value.code == 1
        assert "could not load context" in capsys.readouterr().err

    def test_bad_config_exits(self, tmp_path, template_file, clean_env, capsys):
        config = tmp_path / "options.yaml"
        config.write_text("colour: red\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["render", str(template_file), "--config", str(config)])
        assert exc_info.value.code == 1
        assert "invalid options" in capsys.readouterr().err


class TestDemo:
    def test_prints_context_and_output(self, capsys):
        main(["demo"])
        out = capsys.readouterr().out
        assert '"message": "Current employees:"' in out
        assert "\t<b>Jared</b>\n" in out
        assert "\t<b><i>Cameron</i></b>\n" in out

    def test_demo_template_uses_raw_names(self):
        assert "{{& name}}" in DEMO_TEMPLATE
        assert len(demo_context()["list"]) == 4


class TestArgs:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
