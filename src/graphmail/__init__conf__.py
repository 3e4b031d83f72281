"""Static package metadata surfaced to the CLI and configuration loader.

The ``LAYEREDCONF_*`` identifiers determine where lib_layered_config looks
for configuration files on each platform and must stay in sync with the
project name declared in ``pyproject.toml``.
"""

from __future__ import annotations

name = "graphmail"
title = "Build authenticated Microsoft Graph sendMail payloads from message properties"
version = "1.0.0"
author = "graphmail maintainers"
shell_command = "graphmail"

#: Vendor directory used on macOS and Windows.
LAYEREDCONF_VENDOR = "graphmail"
#: Application directory used on macOS and Windows.
LAYEREDCONF_APP = "graphmail"
#: Slug used for XDG paths on Linux (``~/.config/<slug>/``).
LAYEREDCONF_SLUG = "graphmail"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for graphmail:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
