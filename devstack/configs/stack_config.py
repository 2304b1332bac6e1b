from __future__ import annotations

import math
import os
from dataclasses import dataclass
from dataclasses import fields

import yaml

from devstack.constants import CONFIG_FILE_ENV_KEY
from devstack.constants import CONFIG_FILE_NAME
from devstack.constants import DEFAULT_PROJECT_NAME
from devstack.constants import DEFAULT_SECTIONS
from devstack.constants import DEFAULT_STARTUP_DELAY
from devstack.constants import SectionName
from devstack.constants import START_ORDER
from devstack.constants import TEARDOWN_ORDER
from devstack.exceptions import ConfigParseError
from devstack.exceptions import ConfigValidationError

VALID_TOP_LEVEL_KEYS = {"project_name", "startup_delay", "sections"}


@dataclass
class Section:
    name: SectionName
    description: str
    compose_file: str
    env_file: str
    no_cache_build: bool = False


@dataclass
class StackConfig:
    project_name: str
    sections: dict[SectionName, Section]
    startup_delay: float = DEFAULT_STARTUP_DELAY

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not self.project_name:
            raise ConfigValidationError("Project name is required in stack config")

        missing = [name.value for name in SectionName if name not in self.sections]
        if missing:
            raise ConfigValidationError(
                f"Missing section(s) in stack config: {', '.join(missing)}"
            )

        for name, section in self.sections.items():
            if not section.compose_file:
                raise ConfigValidationError(
                    f"Section '{name.value}' requires a compose_file"
                )

        if not math.isfinite(self.startup_delay):
            raise ConfigValidationError(
                f"Invalid startup_delay '{self.startup_delay}', must be a finite number of seconds"
            )

        if self.startup_delay < 0:
            raise ConfigValidationError(
                f"Invalid startup_delay '{self.startup_delay}', must not be negative"
            )

    def ordered_sections(self) -> list[Section]:
        return [self.sections[name] for name in START_ORDER]

    def teardown_sections(self) -> list[Section]:
        return [self.sections[name] for name in TEARDOWN_ORDER]


def default_sections() -> dict[SectionName, Section]:
    return {
        name: Section(name=name, **values)  # type: ignore[arg-type]
        for name, values in DEFAULT_SECTIONS.items()
    }


def get_config_path() -> str:
    return os.environ.get(CONFIG_FILE_ENV_KEY, CONFIG_FILE_NAME)


def load_stack_config(config_path: str | None = None) -> StackConfig:
    """Loads the stack config, falling back to the built-in defaults.

    A missing config file is not an error: the default three-file ecommerce
    layout is used. A present file may override the project name, the startup
    delay and, per section, the compose file, env file and build caching.
    """
    if config_path is None:
        config_path = get_config_path()
    if not os.path.exists(config_path):
        return StackConfig(
            project_name=DEFAULT_PROJECT_NAME,
            sections=default_sections(),
        )

    with open(config_path, "r", encoding="utf-8") as stream:
        try:
            config = yaml.safe_load(stream)
        except yaml.YAMLError as yml_error:
            raise ConfigParseError(
                f"Error parsing config file: {yml_error}"
            ) from yml_error

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigParseError(f"Config file {config_path} must contain a mapping")

    unexpected_keys = set(config.keys()) - VALID_TOP_LEVEL_KEYS
    if unexpected_keys:
        raise ConfigValidationError(
            f"Unexpected key(s) in stack config: {sorted(map(str, unexpected_keys))}"
        )

    sections = default_sections()
    section_overrides = config.get("sections") or {}
    if not isinstance(section_overrides, dict):
        raise ConfigValidationError("'sections' in stack config must be a mapping")

    valid_section_keys = {field.name for field in fields(Section)} - {"name"}
    for key, value in section_overrides.items():
        try:
            name = SectionName(key)
        except ValueError:
            raise ConfigValidationError(
                f"Unknown section '{key}' in stack config, expected one of: {', '.join(s.value for s in SectionName)}"
            )
        if not isinstance(value, dict):
            raise ConfigValidationError(f"Section '{key}' must be a mapping")
        unexpected_keys = set(value.keys()) - valid_section_keys
        if unexpected_keys:
            raise ConfigValidationError(
                f"Unexpected key(s) in section '{key}': {sorted(map(str, unexpected_keys))}"
            )
        if "no_cache_build" in value and not isinstance(value["no_cache_build"], bool):
            raise ConfigValidationError(
                f"'no_cache_build' in section '{key}' must be a boolean"
            )
        for str_key in ("description", "compose_file", "env_file"):
            if str_key in value and not isinstance(value[str_key], str):
                raise ConfigValidationError(
                    f"'{str_key}' in section '{key}' must be a string"
                )
        current = sections[name]
        sections[name] = Section(
            name=name,
            description=value.get("description", current.description),
            compose_file=value.get("compose_file", current.compose_file),
            env_file=value.get("env_file", current.env_file),
            no_cache_build=value.get("no_cache_build", current.no_cache_build),
        )

    startup_delay = config.get("startup_delay", DEFAULT_STARTUP_DELAY)
    if isinstance(startup_delay, bool) or not isinstance(startup_delay, (int, float)):
        raise ConfigValidationError(
            f"Invalid startup_delay '{startup_delay}', must be a number of seconds"
        )

    project_name = config.get("project_name", DEFAULT_PROJECT_NAME)
    if not isinstance(project_name, str):
        raise ConfigValidationError("'project_name' in stack config must be a string")

    return StackConfig(
        project_name=project_name,
        sections=sections,
        startup_delay=startup_delay,
    )
