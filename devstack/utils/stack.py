from __future__ import annotations

from sentry_sdk import capture_exception

from devstack.configs.stack_config import load_stack_config
from devstack.configs.stack_config import StackConfig
from devstack.exceptions import ConfigError
from devstack.utils.console import Console


def get_stack_config() -> StackConfig:
    """Loads the stack config, exiting with a failure message if it is invalid."""
    console = Console()
    try:
        return load_stack_config()
    except ConfigError as e:
        capture_exception(e, level="info")
        console.failure(str(e))
        exit(1)
