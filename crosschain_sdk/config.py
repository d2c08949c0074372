"""
Loading asset configuration from TOML files.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import tomli
from pydantic import ValidationError

from .asset import Config
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "CROSSCHAIN_CONFIG_PATH"
CONFIG_SECTION_ENV = "CROSSCHAIN_CONFIG_SECTION"
DEFAULT_CONFIG_PATH = "~/.crosschain/config.toml"

# auth values of the form "env:NAME" are resolved from the environment
AUTH_ENV_PREFIX = "env:"


def _resolve_path(path: Optional[Union[str, Path]]) -> Path:
    if path:
        return Path(path).expanduser()
    return Path(os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)).expanduser()


def _select_section(document: Dict[str, Any], section: Optional[str]) -> Dict[str, Any]:
    node: Any = document
    if not section:
        return node
    for key in section.split("."):
        if not isinstance(node, dict) or key not in node:
            raise ConfigError(f"config section not found: {section}")
        node = node[key]
    if not isinstance(node, dict):
        raise ConfigError(f"config section {section} is not a table")
    return node


def _resolve_auth_secret(entry: Dict[str, Any]) -> Dict[str, Any]:
    auth = entry.get("auth") or ""
    if not isinstance(auth, str) or not auth.startswith(AUTH_ENV_PREFIX):
        return entry
    env_name = auth[len(AUTH_ENV_PREFIX):]
    secret = os.environ.get(env_name)
    if secret is None:
        logger.warning("Environment variable %s for asset %s auth is not set",
                       env_name, entry.get("asset") or entry.get("chain"))
        return entry
    return {**entry, "auth_secret": secret}


def parse_config(document: Dict[str, Any], section: Optional[str] = None) -> Config:
    """
    Build a Config from an already parsed TOML document.

    Args:
        document: Parsed TOML document
        section: Dotted path of the table holding the ``chains`` array,
            e.g. "silochain.beta"; the document root when None

    Raises:
        ConfigError: If the section is missing or an entry is invalid
    """
    table = _select_section(document, section)
    chains: List[Any] = table.get("chains", [])
    if not isinstance(chains, list):
        raise ConfigError("'chains' must be an array of tables")
    entries = [_resolve_auth_secret(entry) if isinstance(entry, dict) else entry for entry in chains]
    try:
        config = Config(chains=entries)
    except ValidationError as e:
        raise ConfigError(f"invalid asset config: {e}") from e
    logger.info("Loaded %d asset configs", len(config.chains))
    return config


def load_config(path: Optional[Union[str, Path]] = None, section: Optional[str] = None) -> Config:
    """
    Load asset configuration from a TOML file.

    Args:
        path: Config file; defaults to $CROSSCHAIN_CONFIG_PATH, then
            ~/.crosschain/config.toml
        section: Dotted path of the table holding ``chains``; defaults to
            $CROSSCHAIN_CONFIG_SECTION, then the document root

    Returns:
        Immutable Config

    Raises:
        ConfigError: If the file is missing, not valid TOML, or invalid
    """
    config_path = _resolve_path(path)
    if section is None:
        section = os.environ.get(CONFIG_SECTION_ENV) or None

    try:
        with config_path.open("rb") as f:
            document = tomli.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"config file not found: {config_path}") from e
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML in {config_path}: {e}") from e

    logger.debug("Reading asset config from %s (section %s)", config_path, section or "<root>")
    return parse_config(document, section)
