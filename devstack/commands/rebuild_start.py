from __future__ import annotations

from argparse import _SubParsersAction
from argparse import ArgumentParser
from argparse import Namespace

from devstack.commands.rebuild import rebuild_stack
from devstack.commands.start import start_stack
from devstack.constants import Verb
from devstack.utils.stack import get_stack_config


def add_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        Verb.REBUILD_START.value, help="Rebuild and start all containers"
    )
    parser.add_argument(
        "--debug",
        help="Enable debug mode",
        action="store_true",
        default=False,
    )
    parser.set_defaults(func=rebuild_start)


def rebuild_start(args: Namespace) -> None:
    config = get_stack_config()
    rebuild_stack(config, args.compose_binary)
    start_stack(config, args.compose_binary)
