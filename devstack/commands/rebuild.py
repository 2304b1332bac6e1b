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
    parser = subparsers.add_parser(Verb.REBUILD.value, help="Rebuild all containers")
    parser.add_argument(
        "--debug",
        help="Enable debug mode",
        action="store_true",
        default=False,
    )
    parser.set_defaults(func=rebuild)


def rebuild(args: Namespace) -> None:
    config = get_stack_config()
    rebuild_stack(config, args.compose_binary)


def rebuild_stack(config: StackConfig, compose_binary: list[str]) -> None:
    console = Console()
    console.success("Rebuilding containers...")
    current_env = os.environ.copy()
    for section in config.ordered_sections():
        run_cmd(
            create_docker_compose_command(
                compose_binary,
                config.project_name,
                section,
                "build",
                ["--no-cache"] if section.no_cache_build else [],
            ),
            current_env,
        )
    console.success("Containers rebuilt successfully!")
