from __future__ import annotations

import logging
import os

from dotenv import dotenv_values

from devstack.configs.stack_config import StackConfig
from devstack.constants import LOGGER_NAME
from devstack.utils.console import Console


def load_env_file(path: str) -> dict[str, str]:
    """Parses KEY=VALUE lines from an env file. Commented lines are skipped."""
    return {
        key: value for key, value in dotenv_values(path).items() if value is not None
    }


def load_stack_env(config: StackConfig, console: Console) -> dict[str, str]:
    """
    Loads the env file of every section, in start order.
    Later files override variables set by earlier ones.
    """
    logger = logging.getLogger(LOGGER_NAME)
    loaded: dict[str, str] = {}
    for section in config.ordered_sections():
        if not os.path.isfile(section.env_file):
            console.warning(f"No {section.env_file} file found, using defaults")
            continue
        variables = load_env_file(section.env_file)
        logger.debug(
            "Loaded %s from %s", ", ".join(sorted(variables)), section.env_file
        )
        loaded.update(variables)
        console.success(f"Loaded {section.description} environment variables")
    return loaded


def build_command_env(
    overrides: dict[str, str], base: dict[str, str] | None = None
) -> dict[str, str]:
    current_env = dict(os.environ if base is None else base)
    current_env.update(overrides)
    return current_env
