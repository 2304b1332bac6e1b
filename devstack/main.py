from __future__ import annotations

import argparse
import atexit
import getpass
import logging
import os
import platform
from importlib import metadata
from types import ModuleType
from typing import NoReturn

from sentry_sdk import capture_exception
from sentry_sdk import flush
from sentry_sdk import init
from sentry_sdk import set_tag
from sentry_sdk import set_user
from sentry_sdk import start_transaction
from sentry_sdk.integrations.argv import ArgvIntegration

from devstack.commands import logs
from devstack.commands import rebuild
from devstack.commands import rebuild_start
from devstack.commands import restart
from devstack.commands import start
from devstack.commands import status
from devstack.commands import stop
from devstack.constants import INTERRUPTED_EXIT_CODE
from devstack.constants import LOGGER_NAME
from devstack.constants import Verb
from devstack.exceptions import DockerComposeInstallationError
from devstack.exceptions import DockerDaemonNotRunningError
from devstack.utils.console import Console
from devstack.utils.docker_compose import check_docker_compose_version

sentry_environment = (
    "development" if os.environ.get("IS_DEV", default="0") == "1" else "production"
)
if os.environ.get("CI", default="false") == "true":
    sentry_environment = "CI"

sentry_dsn = os.environ.get("DEVSTACK_SENTRY_DSN")
disable_sentry = (
    not sentry_dsn or os.environ.get("DEVSTACK_DISABLE_SENTRY", default="0") == "1"
)
logging.basicConfig(level=logging.INFO)
current_version = metadata.version("devstack")

COMMANDS: dict[Verb, ModuleType] = {
    Verb.START: start,
    Verb.STOP: stop,
    Verb.RESTART: restart,
    Verb.STATUS: status,
    Verb.LOGS: logs,
    Verb.REBUILD: rebuild,
    Verb.REBUILD_START: rebuild_start,
}

USAGE = f"devstack {{{'|'.join(verb.value for verb in Verb)}}}"

if not disable_sentry:
    init(
        dsn=sentry_dsn,
        traces_sample_rate=1.0,
        integrations=[ArgvIntegration()],
        environment=sentry_environment,
        release=current_version,
    )
    set_user({"username": getpass.getuser()})
    set_tag("user_platform", platform.platform())


@atexit.register
def cleanup() -> None:
    flush()


class StackArgumentParser(argparse.ArgumentParser):
    """Reports usage errors with exit status 1 instead of argparse's 2."""

    def error(self, message: str) -> NoReturn:
        console = Console()
        console.failure(message)
        self.print_help()
        exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = StackArgumentParser(
        prog="devstack",
        description="Start, stop, rebuild and inspect the local ecommerce containers.",
        usage=USAGE,
    )
    parser.add_argument("--version", action="version", version=current_version)

    subparsers = parser.add_subparsers(dest="command", title="commands", metavar="")

    # Add subparsers for each command
    for verb in Verb:
        COMMANDS[verb].add_parser(subparsers)

    return parser


def main() -> None:
    console = Console()
    set_tag("devstack_version", current_version)
    try:
        compose_binary = check_docker_compose_version()
    except DockerDaemonNotRunningError as e:
        capture_exception(e, level="info")
        console.failure(str(e))
        exit(1)
    except DockerComposeInstallationError as e:
        capture_exception(e, level="info")
        console.failure(str(e))
        exit(1)

    parser = build_parser()
    # Trailing arguments are ignored, as with the shell script this replaces
    args, extra_args = parser.parse_known_args()

    logger = logging.getLogger(LOGGER_NAME)
    # If the command has a debug flag, set the logger to debug
    if "debug" in args and args.debug:
        logger.setLevel(logging.DEBUG)
    if extra_args:
        logger.debug("Ignoring extra arguments: %s", " ".join(extra_args))

    if not args.command:
        parser.print_help()
        exit(1)

    args.compose_binary = compose_binary
    try:
        with start_transaction(op="command", name=args.command):
            args.func(args)
    except KeyboardInterrupt:
        # Don't print anything if the user interrupts the process
        exit(INTERRUPTED_EXIT_CODE)


if __name__ == "__main__":
    main()
