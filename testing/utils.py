from __future__ import annotations

from pathlib import Path

import yaml

from devstack.constants import CONFIG_FILE_NAME
from devstack.constants import DEFAULT_SECTIONS
from devstack.utils.docker_compose import DockerComposeCommand

DOCKER_COMPOSE = ["docker", "compose"]


def create_config_file(tmp_path: Path, config: dict[str, object]) -> Path:
    tmp_file = Path(tmp_path, CONFIG_FILE_NAME)
    with tmp_file.open("w") as f:
        yaml.dump(config, f, sort_keys=False, default_flow_style=False)
    return tmp_file


def create_env_file(tmp_path: Path, name: str, contents: str) -> Path:
    tmp_file = Path(tmp_path, name)
    with tmp_file.open("w") as f:
        f.write(contents)
    return tmp_file


def compose_command(compose_file: str, *command: str) -> list[str]:
    return DOCKER_COMPOSE + ["-p", "ecommerce", "-f", compose_file, *command]


def compose_call(compose_file: str, *command: str) -> DockerComposeCommand:
    """The DockerComposeCommand built for one of the default compose files."""
    section = next(
        name
        for name, values in DEFAULT_SECTIONS.items()
        if values["compose_file"] == compose_file
    )
    return DockerComposeCommand(
        full_command=compose_command(compose_file, *command),
        project_name="ecommerce",
        config_path=compose_file,
        section=section,
    )
