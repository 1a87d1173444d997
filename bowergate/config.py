"""Configuration loading and validation for the install gate."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from bowergate.errors import BowerGateError


class ConfigError(BowerGateError):
    """Raised when config loading or parsing fails.

    Provides detailed error messages including line numbers,
    column positions, and caret indicators for syntax errors.
    """
    pass


FAILURE_POLICIES = ("warn", "fail")
DEFAULT_CONFIG_NAME = "bowergate.yaml"
DEFAULT_PACKAGE_NAME = "bower-test"


@dataclass(frozen=True)
class InstallConfig:
    """Bower settings for one boot cycle."""
    dependencies: dict[str, str] = field(default_factory=dict)
    directory: str | None = None
    allow_root: bool = False
    bower_bin: str = "bower"
    on_failure: str = "warn"
    timeout: float | None = None
    package_name: str = DEFAULT_PACKAGE_NAME

    def __post_init__(self):
        if not isinstance(self.dependencies, dict):
            raise ValueError("dependencies must be a mapping")
        for name, version in self.dependencies.items():
            if not isinstance(name, str) or not name:
                raise ValueError("dependency names must be non-empty strings")
            if not isinstance(version, str):
                raise ValueError(f"version for '{name}' must be a string")
        if self.directory is not None and not isinstance(self.directory, str):
            raise ValueError("directory must be a string")
        if not self.bower_bin or not isinstance(self.bower_bin, str):
            raise ValueError("bower_bin must be a non-empty string")
        if self.on_failure not in FAILURE_POLICIES:
            raise ValueError(
                f"on_failure must be one of: {', '.join(FAILURE_POLICIES)}"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @property
    def has_directory(self) -> bool:
        """True when a real target subdirectory is configured."""
        return self.directory not in (None, "", "/")


# Config keys accepted in the `bower` section, mapped to InstallConfig fields.
# Both the camelCase and snake_case spellings are accepted.
_KEY_ALIASES = {
    "dependencies": "dependencies",
    "directory": "directory",
    "allowRoot": "allow_root",
    "allow_root": "allow_root",
    "bin": "bower_bin",
    "onFailure": "on_failure",
    "on_failure": "on_failure",
    "timeout": "timeout",
    "name": "package_name",
}


def validate_config(data: dict) -> InstallConfig:
    """Validate and convert the raw `bower` section to an InstallConfig.

    Args:
        data: Raw mapping, either the whole config document or its
            `bower` section

    Returns:
        Validated InstallConfig

    Raises:
        ConfigError: If validation fails, with the offending field path
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    section = data.get("bower", data)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError(f"bower must be a mapping, got {type(section).__name__}")

    kwargs = {}
    for key, value in section.items():
        if key not in _KEY_ALIASES:
            raise ConfigError(f"bower.{key} is not a recognized setting")
        kwargs[_KEY_ALIASES[key]] = value

    dependencies = kwargs.get("dependencies")
    if dependencies is None:
        kwargs["dependencies"] = {}
    elif not isinstance(dependencies, dict):
        raise ConfigError(
            f"bower.dependencies must be a mapping, got {type(dependencies).__name__}"
        )
    else:
        normalized = {}
        for name, version in dependencies.items():
            # YAML reads unquoted 1.10 as the float 1.1
            if isinstance(version, float):
                raise ConfigError(
                    f"bower.dependencies.{name} must be a string; "
                    "quote the version in the config file"
                )
            if isinstance(version, bool) or not isinstance(version, (str, int)):
                raise ConfigError(
                    f"bower.dependencies.{name} must be a string, "
                    f"got {type(version).__name__}"
                )
            normalized[str(name)] = str(version)
        kwargs["dependencies"] = normalized

    allow_root = kwargs.get("allow_root")
    if allow_root is None:
        kwargs.pop("allow_root", None)
    elif not isinstance(allow_root, bool):
        raise ConfigError(
            f"bower.allowRoot must be true or false, got {type(allow_root).__name__}"
        )

    timeout = kwargs.get("timeout")
    if timeout is not None and (
        isinstance(timeout, bool) or not isinstance(timeout, (int, float))
    ):
        raise ConfigError(
            f"bower.timeout must be a number or null, got {type(timeout).__name__}"
        )

    try:
        return InstallConfig(**kwargs)
    except ValueError as e:
        raise ConfigError(f"bower: {e}")


def _format_syntax_error(original_text: str, error: yaml.MarkedYAMLError) -> str:
    """Format a YAML syntax error with line, caret, and context."""
    mark = error.problem_mark
    problem = error.problem or "invalid syntax"
    if mark is None:
        return f"Config syntax error: {problem}"

    line_num = mark.line + 1
    col_num = mark.column + 1
    msg_parts = [f"Config syntax error at line {line_num}, col {col_num}: {problem}"]

    lines = original_text.split("\n")
    if 1 <= line_num <= len(lines):
        msg_parts.append(lines[line_num - 1])
        msg_parts.append(" " * mark.column + "^")

    return "\n".join(msg_parts)


def get_config_path(explicit: str | Path | None = None) -> Path:
    """Return the config file location.

    Priority:
    1. Explicit path (from --config)
    2. BOWERGATE_CONFIG environment variable (if set)
    3. ./bowergate.yaml
    """
    if explicit:
        return Path(explicit)
    if "BOWERGATE_CONFIG" in os.environ:
        return Path(os.environ["BOWERGATE_CONFIG"])
    return Path.cwd() / DEFAULT_CONFIG_NAME


def load_config(path_or_text: Path | str) -> InstallConfig:
    """Load, parse and validate a config file.

    YAML and JSON are both accepted since JSON is a subset of YAML.

    Args:
        path_or_text: Either a Path to a config file, or a string containing
            the document itself

    Returns:
        Validated InstallConfig

    Raises:
        ConfigError: If the file cannot be read, has syntax errors or
            fails validation.
        TypeError: If path_or_text is neither Path nor str.
    """
    if isinstance(path_or_text, Path):
        file_path = path_or_text
        try:
            original_text = file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {file_path}")
        except PermissionError:
            raise ConfigError(f"Permission denied reading config file: {file_path}")
        except UnicodeDecodeError:
            raise ConfigError(f"Config file is not valid UTF-8: {file_path}")
        except IOError as e:
            raise ConfigError(f"Error reading config file {file_path}: {e}")
    elif isinstance(path_or_text, str):
        original_text = path_or_text
    else:
        raise TypeError(f"path_or_text must be Path or str, got {type(path_or_text).__name__}")

    try:
        data = yaml.safe_load(original_text)
    except yaml.MarkedYAMLError as e:
        raise ConfigError(_format_syntax_error(original_text, e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Config syntax error: {e}") from e

    if data is None:
        data = {}

    return validate_config(data)


__all__ = [
    "ConfigError",
    "InstallConfig",
    "FAILURE_POLICIES",
    "validate_config",
    "get_config_path",
    "load_config",
]
