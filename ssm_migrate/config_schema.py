"""
Configuration for the parameter migration.

This module defines the expected structure and validation rules for the
migration config file, the built-in defaults, and how the config is loaded.
"""

import copy
from typing import Any, Dict, Optional

import jsonschema
import ruamel.yaml
from ruamel.yaml.error import YAMLError

from .errors import ConfigLoadError


DEFAULT_CONFIG = {
    "namespace": "asset-accounting",
    "subsystem": "serviceplatform",
    "environments": ["staging", "production", "beta"],
    "profiles": {"production": "aa_prod"},
    "default_profile": "aa_stg",
    "overwrite": False,
    "variables": ["REDISCLOUD_URL"],
}


CONFIG_SCHEMA = {
    "type": "object",
    "required": ["namespace", "subsystem", "environments", "default_profile", "variables"],
    "properties": {
        "namespace": {
            "type": "string",
            "minLength": 1,
            "description": "Leading path segment shared by old and new names"
        },
        "subsystem": {
            "type": "string",
            "minLength": 1,
            "description": "Segment inserted after the namespace in new names"
        },
        "environments": {
            "type": "array",
            "items": {"type": "string"},
            "minItems": 1,
            "description": "Environment labels a run may target"
        },
        "profiles": {
            "type": "object",
            "additionalProperties": {"type": "string"},
            "description": "AWS profile to use per environment"
        },
        "default_profile": {
            "type": "string",
            "description": "AWS profile for environments not listed in profiles"
        },
        "region": {
            "type": ["string", "null"],
            "description": "AWS region override"
        },
        "overwrite": {
            "type": "boolean",
            "description": "Replace destination parameters that already exist"
        },
        "variables": {
            "type": "array",
            "items": {"type": "string", "pattern": "^[^/]+$"},
            "uniqueItems": True,
            "description": "Ordered list of variable identifiers to migrate"
        }
    }
}


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate the configuration against the schema.

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if valid, raises jsonschema.ValidationError otherwise
    """
    jsonschema.validate(instance=config, schema=CONFIG_SCHEMA)
    return True


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the migration config, merged over the defaults.

    Args:
        config_file: Optional path to a YAML config file

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigLoadError: If the file can't be read or fails validation
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_file:
        yaml = ruamel.yaml.YAML(typ="safe")
        try:
            with open(config_file, 'r') as f:
                loaded = yaml.load(f)
        except (OSError, YAMLError) as e:
            raise ConfigLoadError(cause=e, message=f"Error loading config file: {e}") from e
        if loaded is not None:
            if not isinstance(loaded, dict):
                raise ConfigLoadError(
                    message=f"Error loading config file: {config_file} is not a mapping"
                )
            config.update(loaded)

    return check_config(config)


def check_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a config, reporting failures as ConfigLoadError.

    Used after loading and again after command line overrides are applied.

    Returns:
        The same config dictionary
    """
    try:
        validate_config(config)
    except jsonschema.ValidationError as e:
        raise ConfigLoadError(cause=e, message=f"Invalid config: {e.message}") from e
    return config


def select_profile(config: Dict[str, Any], environment: str) -> str:
    """
    Pick the AWS profile for an environment.

    Raises:
        ConfigLoadError: If the environment isn't one of the configured labels
    """
    if environment not in config["environments"]:
        raise ConfigLoadError(
            message=f"Unknown environment '{environment}', "
                    f"expected one of: {', '.join(config['environments'])}"
        )
    return config.get("profiles", {}).get(environment, config["default_profile"])
