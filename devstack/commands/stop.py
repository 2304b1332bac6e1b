from __future__ import annotations

import os
from argparse import _SubParsersAction
from argparse import ArgumentParser
from argparse import Namespace

from devstack.configs.stack_config import StackConfig
from devstack.constants import Verb
from devstack.utils.console import Console
from devstack.utils.docker_compose import create_docker_compose_command
from devstack.utils.docker_compose import run_cmd
from devstack.utils.stack import get_stack_config


def add_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser(Verb.STOP.value, help="Stop all containers")
    parser.add_argument(
        "--debug",
        help="Enable debug mode",
        action="store_true",
        default=False,
    )
    parser.set_defaults(func=stop)


def stop(args: Namespace) -> None:
    """Bring down every section, whether or not it is running."""
    config = get_stack_config()
    stop_stack(config, args.compose_binary)


def stop_stack(config: StackConfig, compose_binary: list[str]) -> None:
    console = Console()
    console.success("Stopping all containers...")
    current_env = os.environ.copy()
    for section in config.teardown_sections():
        run_cmd(
            create_docker_compose_command(
                compose_binary,
                config.project_name,
                section,
                "down",
                ["--remove-orphans"],
            ),
            current_env,
        )
    console.success("All containers stopped.")
