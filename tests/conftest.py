"""Shared pytest fixtures for CLI, module-entry and processing tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from graphmail.adapters.memory.credentials import TokenProviderStub
    from graphmail.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use result.stdout for clean output (e.g., JSON parsing) so log messages
    written to stderr do not contaminate it.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from graphmail.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, since a monkeypatched get_config loses
    its cache_clear method.
    """
    from graphmail.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def mail_properties() -> dict[str, str]:
    """Return a minimal valid property set for one sendMail payload."""
    return {
        "OAUTH2_AUTHORIZATION_CODE_CRED": "SEND_MAIL",
        "MAIL_SUBJECT": "Hi",
        "MAIL_CONTENT_TYPE": "text",
        "MAIL_RECIPIENT": "a@x.com",
    }


@pytest.fixture
def token_stub() -> TokenProviderStub:
    """Return a fresh token provider stub knowing the ``SEND_MAIL`` credential."""
    from graphmail.adapters.memory import TokenProviderStub

    return TokenProviderStub(tokens={"SEND_MAIL": "tok"})


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only replaces the I/O boundary (``get_config``), not the Config object itself.
    """
    from graphmail.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            create_token_provider=prod.create_token_provider,
            serialize_envelope=prod.serialize_envelope,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the requested profiles."""
    from graphmail.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            create_token_provider=prod.create_token_provider,
            serialize_envelope=prod.serialize_envelope,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a services factory from a plain config dict."""
    from graphmail.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            create_token_provider=prod.create_token_provider,
            serialize_envelope=prod.serialize_envelope,
        )
        return lambda: test_services

    return _create


@dataclass
class PayloadCliContext:
    """Container for build-payload CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        stub: TokenProviderStub answering every credential lookup.
    """

    factory: Callable[[], Any]
    stub: TokenProviderStub


@pytest.fixture
def payload_cli_context(
    clear_config_cache: None,
) -> Callable[..., PayloadCliContext]:
    """Create build-payload CLI test context with a token stub.

    Takes the config dict and optional tokens mapping; credential lookups go
    to the stub instead of the configured credential store.
    """
    from graphmail.adapters.memory import TokenProviderStub as TokenProviderStubImpl
    from graphmail.composition import AppServices, build_production

    def _create(config_data: dict[str, Any], tokens: dict[str, str] | None = None) -> PayloadCliContext:
        stub = TokenProviderStubImpl(tokens=dict(tokens) if tokens is not None else {"SEND_MAIL": "tok"})
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            create_token_provider=stub.create_token_provider,
            serialize_envelope=prod.serialize_envelope,
        )
        return PayloadCliContext(factory=lambda: test_services, stub=stub)

    return _create

