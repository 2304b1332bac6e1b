from __future__ import annotations

import os
from argparse import _SubParsersAction
from argparse import ArgumentParser
from argparse import Namespace

from sentry_sdk import capture_exception

from devstack.configs.stack_config import Section
from devstack.configs.stack_config import StackConfig
from devstack.constants import LOGS_ALL
from devstack.constants import SectionName
from devstack.constants import Verb
from devstack.exceptions import UnknownLogsTargetError
from devstack.utils.console import Console
from devstack.utils.docker_compose import create_docker_compose_command
from devstack.utils.docker_compose import run_cmd
from devstack.utils.docker_compose import stream_cmds
from devstack.utils.stack import get_stack_config

LOGS_TARGETS = [name.value for name in SectionName] + [LOGS_ALL]


def add_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        Verb.LOGS.value, help=f"Show logs (service: {', '.join(LOGS_TARGETS)})"
    )
    parser.add_argument(
        "service_name",
        help="Section to follow logs for",
        nargs="?",
        default=None,
    )
    parser.add_argument(
        "--tail",
        help="Number of lines to show from the end of the logs",
        type=int,
        default=None,
    )
    parser.add_argument(
        "--debug",
        help="Enable debug mode",
        action="store_true",
        default=False,
    )
    parser.set_defaults(func=logs)


def logs(args: Namespace) -> None:
    """Follow the logs of one section, or of all of them at once."""
    console = Console()
    service_name = args.service_name
    if not service_name:
        console.failure(
            f"Please specify a service: {', '.join(LOGS_TARGETS[:-1])}, or {LOGS_ALL}"
        )
        exit(1)
    try:
        targets = resolve_logs_targets(service_name)
    except UnknownLogsTargetError as e:
        capture_exception(e, level="info")
        console.failure(str(e))
        exit(1)

    config = get_stack_config()
    options = ["-f"]
    if getattr(args, "tail", None) is not None:
        options += ["--tail", str(args.tail)]
    sections = [config.sections[target] for target in targets]
    _logs(config, sections, args.compose_binary, options)


def resolve_logs_targets(service_name: str) -> list[SectionName]:
    if service_name == LOGS_ALL:
        return list(SectionName)
    try:
        return [SectionName(service_name)]
    except ValueError:
        raise UnknownLogsTargetError(service_name)


def _logs(
    config: StackConfig,
    sections: list[Section],
    compose_binary: list[str],
    options: list[str],
) -> None:
    current_env = os.environ.copy()
    cmds = [
        create_docker_compose_command(
            compose_binary, config.project_name, section, "logs", options
        )
        for section in sections
    ]
    if len(cmds) > 1:
        stream_cmds(cmds, current_env)
        return
    try:
        run_cmd(cmds[0], current_env)
    except KeyboardInterrupt:
        # Following logs only ends on interrupt
        pass
