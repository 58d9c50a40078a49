"""
Configuration loading for projmanip.

A run is configured by an optional YAML file, validated against the JSON schema
of ManipulationConfig before it is parsed, with command line values layered on
top of it.
"""
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from jsonschema import validate, ValidationError as SchemaValidationError, SchemaError
from pydantic import ValidationError

from projmanip.logs import get_logger
from projmanip.models import ManipulationConfig
from projmanip.recovery import ConfigurationError, ManifestError
from projmanip.npm.io import load_yaml_file

log = get_logger("config")

CONFIG_SCHEMA = ManipulationConfig.model_json_schema()


def validate_config_data(data: Dict[str, Any]) -> ManipulationConfig:
    """
    Validates raw configuration data and turns it into a ManipulationConfig.

    Raises:
        ConfigurationError: If the data does not match the configuration schema.
    """
    try:
        validate(instance=data, schema=CONFIG_SCHEMA)
    except SchemaValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ConfigurationError(f"Invalid configuration at {location}: {e.message}") from e
    except SchemaError as e:
        raise ConfigurationError(f"Configuration schema is invalid: {e.message}") from e

    try:
        return ManipulationConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(file_path: Optional[Union[Path, str]] = None) -> ManipulationConfig:
    """Loads the configuration file, or returns the defaults when no file is given."""
    if file_path is None:
        return ManipulationConfig()

    try:
        data = load_yaml_file(file_path)
    except ManifestError as e:
        raise ConfigurationError(str(e)) from e
    if data is None:
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    log.info(f"Loaded configuration from {file_path}")
    return validate_config_data(data)


def load_available_versions(file_path: Union[Path, str]) -> Dict[str, List[str]]:
    """Loads a YAML map of package name to the versions already used for it."""
    try:
        data = load_yaml_file(file_path)
    except ManifestError as e:
        raise ConfigurationError(str(e)) from e
    if data is None:
        raise ConfigurationError(f"Available versions file not found: {file_path}")

    config = validate_config_data({"available_versions": data})
    return config.available_versions


def parse_assignments(values: Iterable[str]) -> Dict[str, str]:
    """Parses NAME=VERSION pairs given on the command line."""
    parsed = {}
    for value in values:
        name, sep, version = value.partition("=")
        if not sep or not name.strip() or not version.strip():
            raise ConfigurationError(f"Expected NAME=VERSION, got '{value}'")
        parsed[name.strip()] = version.strip()
    return parsed


def merge_cli_overrides(config: ManipulationConfig,
                        version: Optional[Dict[str, Any]] = None,
                        dependencies: Optional[Dict[str, str]] = None,
                        dev_dependencies: Optional[Dict[str, str]] = None,
                        available_versions: Optional[Dict[str, List[str]]] = None) -> ManipulationConfig:
    """
    Returns a new configuration with the command line values layered on top.

    None values leave the file's setting alone; dependency maps and available
    versions are merged entry by entry.
    """
    data = config.model_dump()
    for key, value in (version or {}).items():
        if value is not None:
            data["version"][key] = value
    data["dependencies"]["runtime"].update(dependencies or {})
    data["dependencies"]["development"].update(dev_dependencies or {})
    for name, versions in (available_versions or {}).items():
        data["available_versions"].setdefault(name, [])
        data["available_versions"][name].extend(versions)

    try:
        return ManipulationConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid command line option: {e}") from e
