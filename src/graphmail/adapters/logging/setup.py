"""Start lib_log_rich from the ``[lib_log_rich]`` configuration section.

Every entry point (console script, ``python -m graphmail``, CLI tests)
goes through :func:`init_logging`, so the runtime is configured once per
process and stdlib ``logging`` records from all modules reach it.
"""

from __future__ import annotations

from typing import Any, cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from graphmail import __init__conf__


class LoggingConfigModel(BaseModel):
    """Validated ``[lib_log_rich]`` section.

    Keys other than ``service`` and ``environment`` are passed on to
    ``lib_log_rich.runtime.RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(console_level="DEBUG").model_extra
        {'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section = cast("dict[str, Any]", config.get("lib_log_rich", default={}) or {})
    settings = LoggingConfigModel.model_validate(section)
    passthrough = settings.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=settings.service or __init__conf__.name,
        environment=settings.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise the logging runtime unless it is already running.

    ``LOG_*`` variables from ``.env`` files are loaded first so they can
    override the configured levels.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
