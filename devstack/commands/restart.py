from __future__ import annotations

from argparse import _SubParsersAction
from argparse import ArgumentParser
from argparse import Namespace

from devstack.commands.start import start_stack
from devstack.commands.stop import stop_stack
from devstack.constants import Verb
from devstack.utils.stack import get_stack_config


def add_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser(Verb.RESTART.value, help="Restart all containers")
    parser.add_argument(
        "--debug",
        help="Enable debug mode",
        action="store_true",
        default=False,
    )
    parser.set_defaults(func=restart)


def restart(args: Namespace) -> None:
    config = get_stack_config()
    stop_stack(config, args.compose_binary)
    start_stack(config, args.compose_binary)
