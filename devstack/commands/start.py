from __future__ import annotations

import time
from argparse import _SubParsersAction
from argparse import ArgumentParser
from argparse import Namespace

from devstack.configs.stack_config import StackConfig
from devstack.constants import Verb
from devstack.utils.console import Console
from devstack.utils.docker_compose import create_docker_compose_command
from devstack.utils.docker_compose import run_cmd
from devstack.utils.env_files import build_command_env
from devstack.utils.env_files import load_stack_env
from devstack.utils.stack import get_stack_config


def add_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser(Verb.START.value, help="Start all containers")
    parser.add_argument(
        "--debug",
        help="Enable debug mode",
        action="store_true",
        default=False,
    )
    parser.set_defaults(func=start)


def start(args: Namespace) -> None:
    """Start the database, product and sales containers."""
    config = get_stack_config()
    start_stack(config, args.compose_binary)


def start_stack(config: StackConfig, compose_binary: list[str]) -> None:
    console = Console()
    console.success("Starting containers...")

    current_env = build_command_env(load_stack_env(config, console))

    db, *services = config.ordered_sections()

    console.success(f"Starting {db.description} container...")
    run_cmd(
        create_docker_compose_command(
            compose_binary, config.project_name, db, "up", ["-d"]
        ),
        current_env,
    )

    console.success(f"Waiting for {db.description} to be ready...")
    time.sleep(config.startup_delay)

    for section in services:
        console.success(f"Starting {section.description} container...")
        run_cmd(
            create_docker_compose_command(
                compose_binary, config.project_name, section, "up", ["-d"]
            ),
            current_env,
        )

    console.success("All containers started successfully!")
