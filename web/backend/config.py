#!/usr/bin/env python3
"""
Configuration management for the Next-Hire web application.

The web layer shares core.config_loader with the CLI; this module only adds
caching and the project-root lookup.
"""

import os
from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).resolve().parent.parent.parent


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads from the YAML file named by NEXTHIRE_CONFIG (default: config.yaml in
    the project root) and applies environment variable overrides.
    Result is cached for performance.

    Returns:
        AppConfig: The application configuration.
    """
    config_path = os.environ.get("NEXTHIRE_CONFIG", str(get_project_root() / 'config.yaml'))
    return load_config(config_path)
