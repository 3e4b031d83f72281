"""``graphmail config``: show the merged configuration.

Credential secrets are masked by lib_layered_config's display.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from graphmail.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = [fmt.value for fmt in OutputFormat]


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(_FORMAT_CHOICES, case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="Render as TOML-like text or as JSON",
)
@click.option(
    "--section",
    default=None,
    metavar="NAME",
    help="Only show one section, e.g. 'properties' or 'credentials'",
)
@click.option(
    "--profile",
    default=None,
    help="Reload configuration for this profile instead of the root --profile",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show configuration merged from defaults, config files, .env and environment.

    Layers are applied as defaults -> app -> host -> user -> dotenv -> env,
    then root ``--set`` overrides. Token and secret values are masked.
    """
    cli_ctx = get_cli_context(ctx)
    config, effective_profile = cli_ctx.for_profile(profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": effective_profile}):
        logger.info("Displaying configuration", extra={"format": fmt.value, "section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=effective_profile)
        except ValueError as exc:
            logger.warning("Unknown configuration section", extra={"section": section})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
