"""``--set SECTION.KEY=VALUE`` overrides for the layered configuration.

Overrides are the last layer: they win over environment variables and
reach nested tables such as ``credentials.SEND_MAIL.timeout``. Values are
read as JSON where possible (``false``, ``30``, ``["a"]``) and kept as text
otherwise. Message properties are strings, so values under ``properties``
are always kept as text.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Value types an override can carry after :func:`coerce_value`."""

_NestedOverrides = dict[str, dict[str, object]]

#: Sections whose values are taken verbatim instead of parsed as JSON.
_TEXT_SECTIONS = frozenset({"properties"})


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` entry split into section, key path and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as a JSON scalar or container, falling back to text.

    Examples:
        >>> coerce_value("false"), coerce_value("30"), coerce_value("html")
        (False, 30, 'html')
        >>> coerce_value("")
        ''
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The value starts after the first ``=`` so base64 padding survives.
    Values under ``properties`` are not coerced.

    Raises:
        ValueError: If ``=`` or the section dot is missing, or a path
            component is empty.

    Examples:
        >>> parse_override("properties.mail_subject=Daily report")
        ConfigOverride(section='properties', key_path=('mail_subject',), value='Daily report')
        >>> parse_override("credentials.SEND_MAIL.timeout=10").key_path
        ('SEND_MAIL', 'timeout')
        >>> parse_override("properties.mail_subject=1.50").value
        '1.50'
    """
    path, separator, value = raw.partition("=")
    if not separator:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, key = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(key.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    coerced = value if section in _TEXT_SECTIONS else coerce_value(value)
    return ConfigOverride(section=section, key_path=key_path, value=coerced)


def _nest_override(target: _NestedOverrides, override: ConfigOverride) -> None:
    """Place ``override`` into ``target``, creating intermediate tables.

    Raises:
        TypeError: When an earlier override already set an intermediate key
            to a plain value.
    """
    table: dict[str, object] = target.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for part in parents:
        child = table.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        table = cast("dict[str, object]", child)
    table[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: Iterable[str]) -> Config:
    """Return ``config`` with every override deep-merged on top.

    Raises:
        ValueError: If an override is malformed or conflicts with an
            earlier one.

    Examples:
        >>> cfg = Config({"properties": {"mail_content_type": "text", "mail_subject": "S"}}, {})
        >>> merged = apply_overrides(cfg, ["properties.mail_content_type=html"])
        >>> merged["properties"]["mail_content_type"], merged["properties"]["mail_subject"]
        ('html', 'S')
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    nested: _NestedOverrides = {}
    for raw in raw_overrides:
        try:
            _nest_override(nested, parse_override(raw))
        except TypeError as exc:
            raise ValueError(f"Invalid override {raw!r}: {exc}") from exc
    if not nested:
        return config
    return config.with_overrides(nested)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
