"""
Version information for the crosschain SDK.
"""
import importlib.metadata
import pathlib

import tomli

DEFAULT_VERSION = "0.1.0"

# Installed package metadata first, pyproject.toml for source checkouts
try:
    __version__ = importlib.metadata.version("crosschain-sdk")
except importlib.metadata.PackageNotFoundError:
    try:
        path = pathlib.Path(__file__).parent.parent / "pyproject.toml"
        with path.open("rb") as f:
            data = tomli.load(f)
        __version__ = data["project"]["version"]
    except (FileNotFoundError, KeyError, tomli.TOMLDecodeError):
        __version__ = DEFAULT_VERSION
