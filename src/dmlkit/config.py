"""Runtime configuration objects for dmlkit."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .sql.processors import PROCESSORS, BuilderProcessor, get_processor

_TRUE_VALUES = ("true", "1", "yes", "on")


@dataclass
class BuilderConfig:
    """Defaults applied to builders created without explicit options."""

    paramstyle: str = "qmark"
    allow_empty_where: bool = False

    def __post_init__(self) -> None:
        """Normalize and validate the paramstyle name."""
        self.paramstyle = self.paramstyle.lower()
        if self.paramstyle not in PROCESSORS:
            raise ValueError(
                f"Unknown paramstyle '{self.paramstyle}'. "
                f"Supported: {', '.join(sorted(PROCESSORS))}"
            )

    def make_processor(self) -> BuilderProcessor:
        """Return a new processor instance for the configured paramstyle."""
        return get_processor(self.paramstyle)


def _load_env_config() -> dict[str, object]:
    """Load configuration from environment variables.

    Returns:
        Dictionary of configuration values from environment
    """
    config: dict[str, object] = {}

    if "DMLKIT_PARAMSTYLE" in os.environ:
        config["paramstyle"] = os.environ["DMLKIT_PARAMSTYLE"]

    if "DMLKIT_ALLOW_EMPTY_WHERE" in os.environ:
        config["allow_empty_where"] = (
            os.environ["DMLKIT_ALLOW_EMPTY_WHERE"].lower() in _TRUE_VALUES
        )

    return config


def create_config(**kwargs: object) -> BuilderConfig:
    """Build a :class:`BuilderConfig` from keyword arguments and the environment.

    Supports environment variables for configuration:
    - DMLKIT_PARAMSTYLE: "qmark" (default), "numeric" or "format"
    - DMLKIT_ALLOW_EMPTY_WHERE: Let UPDATE/DELETE render without WHERE (true/false)

    Args:
        **kwargs: Configuration options, overriding the environment. Valid keys
            are ``paramstyle`` and ``allow_empty_where``.

    Returns:
        BuilderConfig instance with parsed configuration

    Raises:
        TypeError: If an unknown option is passed
        ValueError: If the paramstyle is not registered
    """
    unknown = set(kwargs) - set(BuilderConfig.__dataclass_fields__)
    if unknown:
        raise TypeError(f"Unknown configuration options: {', '.join(sorted(unknown))}")

    # kwargs override env vars, env vars override defaults
    merged = {**_load_env_config(), **kwargs}
    return BuilderConfig(**merged)  # type: ignore[arg-type]


_config: BuilderConfig | None = None


def get_config() -> BuilderConfig:
    """Return the process-wide default configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = create_config()
    return _config


def set_config(config: BuilderConfig | None) -> None:
    """Replace the process-wide default configuration.

    Passing ``None`` drops the current value so the next :func:`get_config`
    call reloads it from the environment.
    """
    global _config
    _config = config
