"""Config display stories: delegation to lib_layered_config.

Core display behaviour is tested in lib_layered_config's own suite; these
tests pin what this application relies on: section errors, both formats
and masking of the ``[credentials]`` secrets.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from graphmail.adapters.config.display import display_config
from graphmail.domain.enums import OutputFormat

CREDENTIALS_CONFIG: dict[str, Any] = {
    "credentials": {
        "SEND_MAIL": {
            "token_url": "https://login.example.com/token",
            "client_id": "app-id",
            "client_secret": "very-secret",
            "refresh_token": "refresh-value",
        },
        "STATIC": {"access_token": "static-value"},
    },
    "properties": {"mail_content_type": "html"},
}


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", [OutputFormat.HUMAN, OutputFormat.JSON])
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    config = config_factory({"properties": {"mail_subject": "S"}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", [OutputFormat.HUMAN, OutputFormat.JSON])
def test_display_never_shows_credential_secrets(
    capsys: pytest.CaptureFixture[str],
    output_format: OutputFormat,
) -> None:
    display_config(Config(CREDENTIALS_CONFIG, {}), output_format=output_format)

    output = capsys.readouterr().out
    assert "very-secret" not in output
    assert "refresh-value" not in output
    assert "static-value" not in output
    assert "REDACTED" in output


@pytest.mark.os_agnostic
def test_display_human_renders_requested_section(capsys: pytest.CaptureFixture[str]) -> None:
    display_config(Config(CREDENTIALS_CONFIG, {}), output_format=OutputFormat.HUMAN, section="properties")

    output = capsys.readouterr().out
    assert "mail_content_type" in output
    assert "html" in output


@pytest.mark.os_agnostic
def test_display_json_renders_properties(capsys: pytest.CaptureFixture[str]) -> None:
    display_config(Config({"properties": {"mail_recipient": "a@x.com"}}, {}), output_format=OutputFormat.JSON)

    output = capsys.readouterr().out
    assert '"properties"' in output
    assert '"mail_recipient": "a@x.com"' in output
