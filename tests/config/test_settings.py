"""Tests for PersonCheckSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from personcheck.config.settings import PersonCheckSettings

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = PersonCheckSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.output.width == 120

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PersonCheckSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "personcheck.toml"
        toml.write_text("[output]\nwidth = 80\n")
        settings = PersonCheckSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml
        assert settings.output.width == 80
        assert settings.output.no_color is False

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[output]\nno_color = true\n")
        settings = PersonCheckSettings.from_cli(config_path=str(custom))
        assert settings.output.no_color is True
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = PersonCheckSettings.from_cli(config_path=str(tmp_path / "missing.toml"))
        assert settings.config_path is None
        assert settings.output.width == 120

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "personcheck.toml").write_text("[output\nwidth = ")
        with pytest.raises(click.ClickException):
            PersonCheckSettings.from_cli(start=tmp_path)

    def test_toml_values_are_validated(self, tmp_path: Path) -> None:
        (tmp_path / "personcheck.toml").write_text("[output]\nwidth = 0\n")
        with pytest.raises(ValidationError):
            PersonCheckSettings.from_cli(start=tmp_path)

    def test_unknown_section_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "personcheck.toml").write_text("[vault]\nname = \"x\"\n")
        with pytest.raises(ValidationError):
            PersonCheckSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "personcheck.toml").write_text("[output]\nwidth = 80\n")
        monkeypatch.setenv("PERSONCHECK_OUTPUT__WIDTH", "100")
        settings = PersonCheckSettings.from_cli(start=tmp_path)
        assert settings.output.width == 100

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PERSONCHECK_QUIET", "true")
        settings = PersonCheckSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False
