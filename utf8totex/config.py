"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .models import Environment

ENVIRONMENT_NAMES = tuple(environment.value for environment in Environment)


@dataclass
class TranslatorConfig:
    """Configuration for translating UTF-8 files to TeX.

    Attributes:
        fuzzy: Whether existing TeX macros, groups and math pass through untouched.
        environment: Name of the translation environment (``"text"`` or ``"math"``).
        max_input_size: Maximum input size in bytes that will be processed.

    Examples:
        TranslatorConfig(fuzzy=True, environment="math")
    """

    fuzzy: bool = False
    environment: str = "text"

    # Limits
    max_input_size: int = 10 * 1024 * 1024

    @property
    def translation_environment(self) -> Environment:
        return Environment(self.environment)


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`environment` must be one of: text, math")
    """


def load_config(search_path: Path) -> TranslatorConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.utf8totex]`` table from `pyproject.toml` and the
    ``[utf8totex]`` or ``[tool.utf8totex]`` table from `.utf8totex.toml`
    when present. TOML files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        TranslatorConfig: Loaded configuration, or defaults when none is found.

    Raises:
        ConfigError: If a table is present but is not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "utf8totex")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".utf8totex.toml",
            table_paths=[("utf8totex",), ("tool", "utf8totex")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return TranslatorConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> TranslatorConfig | None:
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> TranslatorConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys may use dashes; dataclass fields use underscores.
    settings = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return TranslatorConfig(**settings)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: TranslatorConfig) -> None:
    """Validate a `TranslatorConfig` instance.

    Raises:
        ConfigError: If `fuzzy` is not a boolean, the environment is unknown,
            or the input size limit is not a positive integer.
    """
    if not isinstance(config.fuzzy, bool):
        raise ConfigError("`fuzzy` must be a boolean")

    if config.environment not in ENVIRONMENT_NAMES:
        raise ConfigError(f"`environment` must be one of: {', '.join(ENVIRONMENT_NAMES)}")

    if isinstance(config.max_input_size, bool) or not isinstance(config.max_input_size, int):
        raise ConfigError("`max_input_size` must be an integer")
    if config.max_input_size <= 0:
        raise ConfigError("`max_input_size` must be a positive integer")


def apply_overrides(config: TranslatorConfig, **overrides: object) -> TranslatorConfig:
    """Apply override values to a `TranslatorConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by field name; None values are ignored.

    Returns:
        TranslatorConfig: New configuration, or `config` itself when nothing changes.

    Raises:
        TypeError: If an override name is not defined on `TranslatorConfig`.

    Examples:
        updated = apply_overrides(config, fuzzy=True, environment=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> TranslatorConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        TranslatorConfig: Validated configuration ready for translation.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), fuzzy=True)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config
