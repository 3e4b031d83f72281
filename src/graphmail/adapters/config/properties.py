"""Default message properties from the ``[properties]`` configuration section.

TOML and environment layers may deliver lower-case keys and non-string
values; both are normalised here so the result has the same shape as the
property set a runtime hands over with a message.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, cast


def _render(value: object) -> str:
    """Render a configuration value as a property string.

    Example:
        >>> _render(True), _render(3), _render("text")
        ('true', '3', 'text')
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def load_properties_from_dict(config_dict: Mapping[str, Any]) -> dict[str, str]:
    """Return default properties keyed by upper-case property name.

    Empty values and nested tables are dropped.

    Example:
        >>> load_properties_from_dict(
        ...     {"properties": {"mail_content_type": "html", "mail_save_to_sent_items": False, "mail_cc_recipient": ""}}
        ... )
        {'MAIL_CONTENT_TYPE': 'html', 'MAIL_SAVE_TO_SENT_ITEMS': 'false'}
        >>> load_properties_from_dict({})
        {}
    """
    section: Any = config_dict.get("properties", {})
    if not isinstance(section, Mapping):
        return {}
    result: dict[str, str] = {}
    for key, value in cast(Mapping[str, Any], section).items():
        if value is None or isinstance(value, Mapping):
            continue
        rendered = _render(value)
        if rendered:
            result[str(key).upper()] = rendered
    return result


def parse_property(raw: str) -> tuple[str, str]:
    """Split a ``NAME=VALUE`` string into a property name and value.

    Names are upper-cased; the value is kept verbatim and may be empty.

    Raises:
        ValueError: If the string lacks ``=`` or the name is empty.

    Example:
        >>> parse_property("mail_subject=Monthly report")
        ('MAIL_SUBJECT', 'Monthly report')
        >>> parse_property("MAIL_ATTACHMENT=aGVsbG8=")
        ('MAIL_ATTACHMENT', 'aGVsbG8=')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid property {raw!r}: must be NAME=VALUE")
    name, value = raw.split("=", maxsplit=1)
    name = name.strip()
    if not name:
        raise ValueError(f"Invalid property {raw!r}: name is empty")
    return name.upper(), value


def merge_properties(defaults: Mapping[str, str], raw_overrides: Iterable[str]) -> dict[str, str]:
    """Overlay ``NAME=VALUE`` overrides on the configured defaults.

    An override with an empty value removes the default.

    Example:
        >>> merge_properties({"MAIL_CONTENT_TYPE": "text"}, ["MAIL_CONTENT_TYPE=html", "MAIL_SUBJECT=S"])
        {'MAIL_CONTENT_TYPE': 'html', 'MAIL_SUBJECT': 'S'}
        >>> merge_properties({"MAIL_CC_RECIPIENT": "b@x.com"}, ["MAIL_CC_RECIPIENT="])
        {}
    """
    merged = dict(defaults)
    for raw in raw_overrides:
        name, value = parse_property(raw)
        if value:
            merged[name] = value
        else:
            merged.pop(name, None)
    return merged


__all__ = [
    "load_properties_from_dict",
    "merge_properties",
    "parse_property",
]
