"""Tests for the ti18n command line."""

import json

import pytest

from ti18n.manager import load_locale_files, main, parse_params


@pytest.fixture
def workspace(tmp_path, en_data, es_data, keys):
    locales = tmp_path / "locales"
    locales.mkdir()
    (locales / "en.json").write_text(json.dumps(en_data), encoding="utf-8")
    (locales / "es.json").write_text(json.dumps(es_data), encoding="utf-8")
    (locales / "_meta.json").write_text("{}", encoding="utf-8")
    (tmp_path / "keys.json").write_text(json.dumps(keys), encoding="utf-8")
    return tmp_path


class TestLoaders:

    def test_load_locale_files_skips_meta(self, workspace):
        resources = load_locale_files(workspace / "locales")
        assert list(resources) == ["en", "es"]

    def test_missing_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_locale_files(tmp_path / "nope")

    def test_parse_params(self):
        assert parse_params(["name=Al", "expr=a=b"]) == {"name": "Al", "expr": "a=b"}

    def test_parse_params_rejects_bare_names(self):
        with pytest.raises(ValueError):
            parse_params(["name"])


class TestCoverageCommand:

    def test_prints_reports(self, workspace, capsys):
        code = main(["coverage", "--locales-dir", str(workspace / "locales"),
                     "--keys", str(workspace / "keys.json")])
        out = capsys.readouterr().out
        assert code == 0
        assert "[en]" in out
        assert "[es]" in out
        assert "welcome" in out

    def test_strict_fails_on_incomplete(self, workspace):
        code = main(["coverage", "--locales-dir", str(workspace / "locales"),
                     "--keys", str(workspace / "keys.json"), "--strict"])
        assert code == 1

    def test_output_file(self, workspace):
        output = workspace / "report.json"
        main(["coverage", "--locales-dir", str(workspace / "locales"),
              "--keys", str(workspace / "keys.json"), "--output", str(output)])
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["es"]["missing_keys"] == ["welcome"]
        assert data["en"]["coverage"] == 1

    def test_missing_keys_file(self, workspace, capsys):
        code = main(["coverage", "--locales-dir", str(workspace / "locales"),
                     "--keys", str(workspace / "absent.json")])
        assert code == 2
        assert "absent.json" in capsys.readouterr().err


class TestOtherCommands:

    def test_keys_table(self, workspace, capsys):
        (workspace / "kebab.json").write_text(json.dumps(["user-name"]), encoding="utf-8")
        assert main(["keys", "--keys", str(workspace / "kebab.json")]) == 0
        out = capsys.readouterr().out
        assert "userName" in out
        assert "i18n::user-name" in out

    def test_translate_bare_key(self, workspace, capsys):
        code = main(["translate", "welcome", "--locale", "en",
                     "--locales-dir", str(workspace / "locales"), "--param", "name=Al"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "Welcome, Al!"

    def test_translate_missing_key(self, workspace, capsys):
        main(["translate", "i18n::welcome", "--locale", "es",
              "--locales-dir", str(workspace / "locales")])
        assert capsys.readouterr().out.strip() == "i18n::welcome::es::error-missing-key"

    def test_translate_with_config(self, workspace, capsys):
        config = workspace / "config.json"
        config.write_text(json.dumps({"header": "t", "separator": "/"}), encoding="utf-8")
        main(["translate", "greeting", "--locale", "en", "--config", str(config),
              "--locales-dir", str(workspace / "locales")])
        assert capsys.readouterr().out.strip() == "Hello"

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()
