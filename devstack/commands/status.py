from __future__ import annotations

import os
from argparse import _SubParsersAction
from argparse import ArgumentParser
from argparse import Namespace

from devstack.constants import Verb
from devstack.utils.console import Console
from devstack.utils.docker_compose import create_docker_compose_command
from devstack.utils.docker_compose import run_cmd
from devstack.utils.stack import get_stack_config


def add_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser(Verb.STATUS.value, help="Show container status")
    parser.add_argument(
        "--debug",
        help="Enable debug mode",
        action="store_true",
        default=False,
    )
    parser.set_defaults(func=status)


def status(args: Namespace) -> None:
    """Show what docker compose reports for each section, unparsed."""
    console = Console()
    config = get_stack_config()
    console.success("Container status:")
    current_env = os.environ.copy()
    for section in config.ordered_sections():
        run_cmd(
            create_docker_compose_command(
                args.compose_binary, config.project_name, section, "ps", []
            ),
            current_env,
        )
