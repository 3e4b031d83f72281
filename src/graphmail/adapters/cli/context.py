"""Per-invocation CLI state shared between the root group and subcommands.

The root group loads configuration once and parks it, together with the
wired services, in ``ctx.obj`` as a :class:`CLIContext`. The traceback
helpers mirror ``--traceback`` into ``lib_cli_exit_tools.config`` and let
:func:`graphmail.adapters.cli.main.main` put the previous flags back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from graphmail.adapters.config.overrides import apply_overrides
from graphmail.adapters.config.properties import load_properties_from_dict

if TYPE_CHECKING:
    from graphmail.composition import AppServices


class TracebackState(NamedTuple):
    """Snapshot of the two ``lib_cli_exit_tools`` traceback switches."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """State handed from the root group to every subcommand.

    Attributes:
        traceback: Whether ``--traceback`` was given.
        config: Configuration with ``--set`` overrides applied.
        services: Adapters wired by the composition root.
        profile: Profile given to the root group, if any.
        set_overrides: Raw ``--set`` strings, reapplied when a subcommand
            reloads configuration under another profile.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    @property
    def default_properties(self) -> dict[str, str]:
        """Message properties configured under ``[properties]``.

        Example:
            >>> from graphmail.composition import build_testing
            >>> cfg = Config({"properties": {"mail_content_type": "html"}}, {})
            >>> CLIContext(traceback=False, config=cfg, services=build_testing()).default_properties
            {'MAIL_CONTENT_TYPE': 'html'}
        """
        return load_properties_from_dict(self.config.as_dict())

    def for_profile(self, profile: str | None) -> tuple[Config, str | None]:
        """Return configuration and effective profile for a subcommand.

        Without ``profile`` the root configuration is returned unchanged.
        Otherwise configuration is reloaded for that profile and the root
        ``--set`` overrides are applied again.
        """
        if not profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with the resolved CLI state."""
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLI state stored by the root group.

    Raises:
        RuntimeError: If the root group has not stored a CLIContext yet.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch full, coloured tracebacks on or off for error reporting."""
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback switches.

    Example:
        >>> state = snapshot_traceback_state()
        >>> restore_traceback_state(state)
        >>> snapshot_traceback_state() == state
        True
    """
    settings = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(settings, "traceback", False)),
        force_color=bool(getattr(settings, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply switches captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
