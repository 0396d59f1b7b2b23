# tests/cli/test_cli.py
"""Tests for the picocompat CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

runner = CliRunner()

LEGACY_PLUGIN_SOURCE = '''
class OldPlugin:
    def before_render(self, twig_variables, twig, template_name):
        pass

    def get_pages(self, pages, current_page, previous_page, next_page):
        pass


class CurrentPlugin:
    api_version = 3

    def file_meta(self, meta):
        pass
'''


@pytest.fixture
def plugin_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    (tmp_path / "legacy_site_plugins.py").write_text(LEGACY_PLUGIN_SOURCE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "legacy_site_plugins"


class TestCLIBasics:
    def test_version(self) -> None:
        from picocompat import __version__
        from picocompat.cli import app

        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_no_args_shows_help(self) -> None:
        from picocompat.cli import app

        result = runner.invoke(app, [])
        assert "aliases" in result.output


class TestAliasesCommand:
    def test_lists_aliases_with_signatures(self) -> None:
        from picocompat.cli import app

        result = runner.invoke(app, ["aliases"])

        assert result.exit_code == 0
        assert "on_content_parsed" in result.stdout
        assert "after_parse_content(content), content_parsed(content)" in result.stdout
        assert "on_pages_loaded" not in result.stdout


class TestInspectCommand:
    def test_inspect_v0_plugin(self, plugin_module: str) -> None:
        from picocompat.cli import app

        result = runner.invoke(app, ["inspect", f"{plugin_module}:OldPlugin"])

        assert result.exit_code == 0
        assert "Revision: API v0" in result.stdout
        assert "Receives legacy events: yes" in result.stdout
        assert "get_pages(pages, current_page, previous_page, next_page)" in result.stdout
        assert "before_render(twig_variables, twig, template_name)" in result.stdout

    def test_inspect_current_plugin(self, plugin_module: str) -> None:
        from picocompat.cli import app

        result = runner.invoke(app, ["inspect", f"{plugin_module}:CurrentPlugin"])

        assert result.exit_code == 0
        assert "Revision: API v3" in result.stdout
        assert "Receives legacy events: no" in result.stdout

    def test_inspect_bad_target(self) -> None:
        from picocompat.cli import app

        result = runner.invoke(app, ["inspect", "no-colon"])
        assert result.exit_code == 1

    def test_inspect_missing_module(self) -> None:
        from picocompat.cli import app

        result = runner.invoke(app, ["inspect", "surely_not_a_module_xyz:Plugin"])
        assert result.exit_code == 1

    def test_inspect_missing_attribute(self, plugin_module: str) -> None:
        from picocompat.cli import app

        result = runner.invoke(app, ["inspect", f"{plugin_module}:Missing"])
        assert result.exit_code == 1


class TestConstantsCommand:
    def test_prints_constants(self, tmp_path: Path) -> None:
        from picocompat.cli import app

        settings_file = tmp_path / "settings.yaml"
        settings_file.write_text(
            "root_dir: /srv/site/\n"
            "config_dir: /srv/site/config/\n"
            "plugins_dir: /srv/site/plugins/\n"
            "themes_dir: /srv/site/themes/\n"
            "content_dir: /srv/site/content/\n"
            "base_url: http://example.com/\n"
        )

        result = runner.invoke(app, ["constants", "--settings", str(settings_file)])

        assert result.exit_code == 0
        assert "ROOT_DIR" in result.stdout
        assert "'/srv/site/'" in result.stdout
        assert "CACHE_DIR" in result.stdout

    def test_missing_settings_file(self, tmp_path: Path) -> None:
        from picocompat.cli import app

        result = runner.invoke(app, ["constants", "--settings", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1

    def test_invalid_settings(self, tmp_path: Path) -> None:
        from picocompat.cli import app

        settings_file = tmp_path / "settings.yaml"
        settings_file.write_text("root_dir: /srv/site/\n")

        result = runner.invoke(app, ["constants", "--settings", str(settings_file)])
        assert result.exit_code == 1
