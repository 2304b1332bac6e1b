from __future__ import annotations

import concurrent.futures
import logging
import re
import subprocess
from typing import NamedTuple

from packaging import version

from devstack.configs.stack_config import Section
from devstack.constants import LOGGER_NAME
from devstack.constants import MINIMUM_DOCKER_COMPOSE_VERSION
from devstack.constants import SectionName
from devstack.exceptions import DockerComposeError
from devstack.exceptions import DockerComposeInstallationError
from devstack.utils.console import Console
from devstack.utils.docker import check_docker_daemon_running

# Plugin first, then the standalone v1 binary
DOCKER_COMPOSE_BINARIES = (["docker", "compose"], ["docker-compose"])


class DockerComposeCommand(NamedTuple):
    full_command: list[str]
    project_name: str
    config_path: str
    section: SectionName


def get_docker_compose_version(binary: list[str]) -> str:
    cmd = binary + ["version", "--short"]
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise DockerComposeError(
            command=" ".join(cmd),
            returncode=127,
            stdout="",
            stderr=str(e),
        ) from e
    except subprocess.CalledProcessError as e:
        raise DockerComposeError(
            command=" ".join(cmd),
            returncode=e.returncode,
            stdout=e.stdout,
            stderr=e.stderr,
        ) from e
    return result.stdout.strip()


def get_docker_compose_binary() -> tuple[list[str], str]:
    """Returns the first compose binary that answers, along with its version output."""
    logger = logging.getLogger(LOGGER_NAME)
    for binary in DOCKER_COMPOSE_BINARIES:
        try:
            return binary, get_docker_compose_version(binary)
        except DockerComposeError as e:
            logger.debug("%s is not usable: %s", " ".join(binary), e.stderr)
    raise DockerComposeInstallationError(
        "Docker Compose is not installed. Install the docker compose plugin or docker-compose."
    )


def check_docker_compose_version() -> list[str]:
    console = Console()
    # Throw an error if docker daemon isn't running
    check_docker_daemon_running()
    binary, version_output = get_docker_compose_binary()

    # v1 prints "1.29.2", the plugin may print "v2.29.7" or "2.20.0-desktop.1"
    match = re.search(r"^v?(\d+\.\d+\.\d+)", version_output)
    if match is None:
        console.warning(
            f"Unable to detect Docker Compose version from '{version_output}'"
        )
    elif version.parse(match.group(1)) < version.parse(MINIMUM_DOCKER_COMPOSE_VERSION):
        console.warning(
            f"Docker Compose version v{match.group(1)} is older than v{MINIMUM_DOCKER_COMPOSE_VERSION} and may not be supported"
        )
    return binary


def create_docker_compose_command(
    binary: list[str],
    project_name: str,
    section: Section,
    command: str,
    options: list[str],
) -> DockerComposeCommand:
    return DockerComposeCommand(
        full_command=binary
        + [
            "-p",
            project_name,
            "-f",
            section.compose_file,
            command,
        ]
        + options,
        project_name=project_name,
        config_path=section.compose_file,
        section=section.name,
    )


def run_cmd(cmd: DockerComposeCommand, env: dict[str, str]) -> int:
    """
    Runs a compose command in the foreground with its output going to the terminal.
    A failing command is not raised on, its output is all the caller gets.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.debug(
        "Running %s (project %s, %s): %s",
        cmd.section.value,
        cmd.project_name,
        cmd.config_path,
        " ".join(cmd.full_command),
    )
    returncode = subprocess.run(cmd.full_command, env=env).returncode
    if returncode != 0:
        logger.debug(
            "Command for section %s exited with %d", cmd.section.value, returncode
        )
    return returncode


def stream_cmds(cmds: list[DockerComposeCommand], env: dict[str, str]) -> list[int]:
    """
    Runs the commands concurrently and waits for all of them to exit.
    An interrupt terminates every command that is still running.
    """
    logger = logging.getLogger(LOGGER_NAME)
    processes = []
    for cmd in cmds:
        logger.debug(
            "Streaming %s (project %s, %s): %s",
            cmd.section.value,
            cmd.project_name,
            cmd.config_path,
            " ".join(cmd.full_command),
        )
        processes.append(subprocess.Popen(cmd.full_command, env=env))

    with concurrent.futures.ThreadPoolExecutor(max_workers=len(processes) or 1) as executor:
        futures = [executor.submit(process.wait) for process in processes]
        try:
            concurrent.futures.wait(futures)
        except KeyboardInterrupt:
            for process in processes:
                if process.poll() is None:
                    process.terminate()
    return [process.wait() for process in processes]
