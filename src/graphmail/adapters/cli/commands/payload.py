"""Build a sendMail payload from the command line.

Contents:
    * :func:`cli_build_payload` - Run message processing on a CLI-assembled message.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import lib_log_rich.runtime
import rich_click as click

from graphmail.adapters.config.properties import merge_properties
from graphmail.application.process import process_message
from graphmail.domain.errors import ConfigurationError, CredentialResolutionError, InvalidBodyError
from graphmail.domain.message import Message

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _read_body(body: str | None, body_file: Path | None) -> bytes | None:
    """Return the raw message body from ``--body`` or ``--body-file``.

    Raises:
        click.UsageError: If both options are given.
    """
    if body is not None and body_file is not None:
        raise click.UsageError("--body and --body-file are mutually exclusive")
    if body_file is not None:
        return body_file.read_bytes()
    if body is not None:
        return body.encode("utf-8")
    return None


def _build_message(cli_ctx: CLIContext, raw_properties: tuple[str, ...], raw_body: bytes | None) -> Message:
    try:
        properties = merge_properties(cli_ctx.default_properties, raw_properties)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    return Message(properties=properties, body=raw_body)


def _render_output(message: Message, *, include_headers: bool) -> bytes:
    """Render the processed message, optionally preceded by its headers.

    Example:
        >>> msg = Message(properties={}, body=b"{}", headers={"MIME": "text/plain"})
        >>> _render_output(msg, include_headers=True)
        b'MIME: text/plain\\n\\n{}'
        >>> _render_output(msg, include_headers=False)
        b'{}'
    """
    body = message.body or b""
    if not include_headers:
        return body
    header_block = "".join(f"{name}: {value}\n" for name, value in message.headers.items())
    return header_block.encode("utf-8") + b"\n" + body


def _fail(exc: Exception, log_message: str, user_message: str, *, exit_code: ExitCode) -> NoReturn:
    """Log the failure, report it on stderr and exit.

    Raises:
        SystemExit: Always raises with the given exit code.
    """
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code)


@click.command("build-payload", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--property",
    "raw_properties",
    multiple=True,
    default=(),
    metavar="NAME=VALUE",
    help="Set a message property, overriding [properties] defaults (repeatable; empty value removes it)",
)
@click.option("--body", default=None, help="Message body text")
@click.option(
    "--body-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the message body from a file",
)
@click.option(
    "--include-headers",
    is_flag=True,
    default=False,
    help="Print request headers as 'Name: value' lines before the payload",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the result to a file instead of stdout",
)
@click.pass_context
def cli_build_payload(
    ctx: click.Context,
    raw_properties: tuple[str, ...],
    body: str | None,
    body_file: Path | None,
    include_headers: bool,
    output: Path | None,
) -> None:
    """Build the sendMail JSON payload and request headers for a message.

    Properties come from the ``[properties]`` configuration section, overridden
    by ``--property``. The bearer token is resolved from ``[credentials]``.
    """
    cli_ctx = get_cli_context(ctx)
    raw_body = _read_body(body, body_file)
    message = _build_message(cli_ctx, raw_properties, raw_body)

    extra = {"command": "build-payload", "property_count": len(message.properties)}
    with lib_log_rich.runtime.bind(job_id="cli-build-payload", extra=extra):
        try:
            get_bearer_token = cli_ctx.services.create_token_provider(cli_ctx.config)
            process_message(
                message,
                get_bearer_token=get_bearer_token,
                serialize_envelope=cli_ctx.services.serialize_envelope,
            )
        except ConfigurationError as exc:
            _fail(exc, "Message configuration error", "Configuration error", exit_code=ExitCode.CONFIG_ERROR)
        except CredentialResolutionError as exc:
            _fail(exc, "Credential resolution failed", "Credential error", exit_code=ExitCode.CREDENTIAL_ERROR)
        except InvalidBodyError as exc:
            _fail(exc, "Invalid message body", "Invalid body", exit_code=ExitCode.INVALID_BODY)
        except ValueError as exc:
            _fail(exc, "Invalid message parameters", "Invalid parameters", exit_code=ExitCode.INVALID_ARGUMENT)

        rendered = _render_output(message, include_headers=include_headers)
        if output is not None:
            output.write_bytes(rendered)
            logger.info("Payload written", extra={"path": str(output), "bytes": len(rendered)})
        else:
            click.echo(rendered.decode("utf-8"))


__all__ = ["cli_build_payload"]
