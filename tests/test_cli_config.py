"""CLI config stories: display, JSON format, sections, profiles, overrides and secret masking."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from graphmail.adapters import cli as cli_mod

CONFIG_WITH_SECRETS: dict[str, Any] = {
    "properties": {"mail_content_type": "html", "mail_recipient": "a@x.com"},
    "credentials": {
        "SEND_MAIL": {
            "token_url": "https://login.example.com/token",
            "client_id": "app-id",
            "client_secret": "very-secret",
            "refresh_token": "refresh-value",
        }
    },
}


@pytest.mark.os_agnostic
def test_when_config_is_invoked_it_displays_configuration(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=production_factory)

    assert result.exit_code == 0


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_it_outputs_json(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    assert "{" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_section_is_unknown_it_exits_with_code_22(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--section", "nonexistent_section_that_does_not_exist"], obj=production_factory
    )

    assert result.exit_code == 22
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_mocked_data_it_displays_properties(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context(CONFIG_WITH_SECRETS)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "properties"], obj=factory)

    assert result.exit_code == 0
    assert "mail_content_type" in result.stdout
    assert "a@x.com" in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", ["human", "json"])
def test_when_config_displays_credentials_it_redacts_secrets(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
    output_format: str,
) -> None:
    factory = config_cli_context(CONFIG_WITH_SECRETS)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", output_format], obj=factory)

    assert result.exit_code == 0
    assert "very-secret" not in result.stdout
    assert "refresh-value" not in result.stdout
    assert "REDACTED" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_profile_it_passes_profile_to_get_config(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    captured_profiles: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"properties": {}}), captured_profiles)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--profile", "staging"], obj=factory)

    assert result.exit_code == 0
    assert captured_profiles == [None, "staging"]


@pytest.mark.os_agnostic
def test_when_root_profile_is_given_it_reaches_get_config(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    captured_profiles: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"properties": {}}), captured_profiles)

    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "production", "config"], obj=factory)

    assert result.exit_code == 0
    assert captured_profiles == ["production"]


@pytest.mark.os_agnostic
def test_when_config_subcommand_profile_reloads_it_preserves_root_set_overrides(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    captured_profiles: list[str | None] = []
    base_config = config_factory({"properties": {"mail_subject": "original"}})
    factory = inject_config_with_profile_capture(base_config, captured_profiles)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "properties.mail_subject=overridden", "config", "--profile", "test", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert captured_profiles == [None, "test"]
    assert "overridden" in result.stdout
    assert '"original"' not in result.stdout


@pytest.mark.os_agnostic
def test_when_config_subcommand_has_no_profile_it_uses_stored_config_with_overrides(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"properties": {"mail_subject": "original"}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "properties.mail_subject=overridden", "config", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "overridden" in result.stdout
    assert '"original"' not in result.stdout
