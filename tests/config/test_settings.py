"""Tests for PatternSettings: unified settings with TOML source."""

from decimal import Decimal
from pathlib import Path

import click
import pytest

from patternctl.config.settings import PatternSettings


class TestPatternSettingsDefaults:
    def test_all_defaults(self, project_root: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = PatternSettings.from_cli(start=project_root)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.checkout.method == "creditcard"
        assert settings.checkout.amount == Decimal("100.00")
        assert settings.checkout.currency_symbol == "$"
        assert settings.export.document_format == "html"
        assert settings.export.record_format == "csv"

    def test_frozen(self, settings: PatternSettings) -> None:
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, project_root: Path) -> None:
        toml = project_root / "patternctl.toml"
        toml.write_text('[checkout]\nmethod = "paypal"\namount = "42.50"\n')
        settings = PatternSettings.from_cli(start=project_root)
        assert settings.config_path == toml
        assert settings.checkout.method == "paypal"
        assert settings.checkout.amount == Decimal("42.50")
        assert settings.checkout.currency_symbol == "$"  # default preserved

    def test_numeric_amount(self, project_root: Path) -> None:
        (project_root / "patternctl.toml").write_text("[checkout]\namount = 7\n")
        settings = PatternSettings.from_cli(start=project_root)
        assert settings.checkout.amount == Decimal("7")

    def test_sparse_override(self, project_root: Path) -> None:
        """Only overridden fields change: rest keeps defaults."""
        (project_root / "patternctl.toml").write_text('[export]\nrecord_format = "json"\n')
        settings = PatternSettings.from_cli(start=project_root)
        assert settings.export.record_format == "json"
        assert settings.export.document_format == "html"

    def test_empty_toml_uses_defaults(self, project_root: Path) -> None:
        (project_root / "patternctl.toml").write_text("")
        settings = PatternSettings.from_cli(start=project_root)
        assert settings.checkout.method == "creditcard"

    def test_discovered_from_subdirectory(self, project_root: Path) -> None:
        (project_root / "patternctl.toml").write_text('[checkout]\nmethod = "crypto"\n')
        nested = project_root / "a" / "b"
        nested.mkdir(parents=True)
        settings = PatternSettings.from_cli(start=nested)
        assert settings.checkout.method == "crypto"

    def test_explicit_config_path(self, project_root: Path) -> None:
        custom = project_root / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[checkout]\ncurrency_symbol = "€"\n')
        settings = PatternSettings.from_cli(config_path=str(custom))
        assert settings.checkout.currency_symbol == "€"
        assert settings.config_path == custom

    def test_missing_explicit_config_uses_defaults(self, project_root: Path) -> None:
        settings = PatternSettings.from_cli(config_path=str(project_root / "nope.toml"))
        assert settings.config_path is None
        assert settings.checkout.method == "creditcard"

    def test_invalid_toml_raises_click_exception(self, project_root: Path) -> None:
        (project_root / "patternctl.toml").write_text("[checkout\nmethod=")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PatternSettings.from_cli(start=project_root)

    def test_invalid_value_raises_click_exception(self, project_root: Path) -> None:
        (project_root / "patternctl.toml").write_text('[checkout]\namount = "abc"\n')
        with pytest.raises(click.ClickException, match="Invalid configuration") as excinfo:
            PatternSettings.from_cli(start=project_root)
        assert "checkout.amount" in excinfo.value.message


class TestPriorityChain:
    def test_env_overrides_toml(
        self, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (project_root / "patternctl.toml").write_text('[checkout]\nmethod = "paypal"\n')
        monkeypatch.setenv("PATTERNCTL_CHECKOUT__METHOD", "crypto")
        settings = PatternSettings.from_cli(start=project_root)
        assert settings.checkout.method == "crypto"

    def test_cli_flag_overrides_env(
        self, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PATTERNCTL_QUIET", "true")
        settings = PatternSettings.from_cli(start=project_root, quiet=False)
        assert settings.quiet is False

    def test_env_flag_applies_without_cli_value(
        self, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PATTERNCTL_VERBOSE", "1")
        settings = PatternSettings.from_cli(start=project_root)
        assert settings.verbose is True

    def test_invalid_env_value_raises_click_exception(
        self, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PATTERNCTL_CHECKOUT__AMOUNT", "x")
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            PatternSettings.from_cli(start=project_root)
