"""Configuration loading and validation for the dictionary converter."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_INPUT = "dict.txt"
DEFAULT_OUTPUT = "dict.plist"


@dataclass
class ConversionConfig:
    """Input and output file names, as given by the user."""

    input_path: str = DEFAULT_INPUT
    output_path: str = DEFAULT_OUTPUT


@dataclass
class AppConfig:
    """Top-level application configuration."""

    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    base_dir: Path = field(default_factory=Path.cwd)

    @property
    def input_file(self) -> Path:
        """Resolved path of the dictionary text file."""
        return resolve_path(self.conversion.input_path, self.base_dir)

    @property
    def output_file(self) -> Path:
        """Resolved path of the plist file to write."""
        return resolve_path(self.conversion.output_path, self.base_dir)


def resolve_path(name: str | Path, base_dir: Path) -> Path:
    """Resolve a file name against the program directory.

    Args:
        name: File name or path as given by the user.
        base_dir: Directory that relative names are relative to.

    Returns:
        ``name`` unchanged if it is absolute, otherwise ``base_dir / name``.
    """
    path = Path(name)
    if path.is_absolute():
        return path
    return base_dir / path


def load_config(
    config_path: str | None = None,
    input_path: str | None = None,
    output_path: str | None = None,
    base_dir: str | Path | None = None,
) -> AppConfig:
    """Build the configuration from defaults, a YAML file and CLI values.

    Values given on the command line override the config file, which
    overrides the built-in defaults.

    Args:
        config_path: Optional path to a YAML configuration file.
        input_path: Input file name from the command line.
        output_path: Output file name from the command line.
        base_dir: Directory relative paths resolve against.

    Returns:
        Validated AppConfig instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If configuration values are invalid.
    """
    conversion = ConversionConfig()

    if config_path:
        conversion = _load_conversion_section(Path(config_path))

    if input_path:
        conversion.input_path = input_path
    if output_path:
        conversion.output_path = output_path

    config = AppConfig(
        conversion=conversion,
        base_dir=Path(base_dir) if base_dir is not None else Path.cwd(),
    )
    _validate_config(config)
    return config


def _load_conversion_section(path: Path) -> ConversionConfig:
    """Read the ``conversion`` section of a YAML config file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        ConversionConfig with values from the file, defaults elsewhere.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the file is not laid out as expected.
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")

    section = raw.get("conversion") or {}
    if not isinstance(section, dict):
        raise ValueError("The 'conversion' section must be a mapping.")

    return ConversionConfig(
        input_path=str(section.get("input_path") or ConversionConfig.input_path),
        output_path=str(section.get("output_path") or ConversionConfig.output_path),
    )


def _validate_config(config: AppConfig) -> None:
    """Validate the resolved configuration.

    Args:
        config: The configuration to validate.

    Raises:
        ValueError: If validation fails.
    """
    if not config.conversion.input_path.strip():
        raise ValueError("input_path must not be empty.")

    if not config.conversion.output_path.strip():
        raise ValueError("output_path must not be empty.")

    if config.input_file.resolve() == config.output_file.resolve():
        raise ValueError(
            f"Input and output refer to the same file: {config.input_file}"
        )
