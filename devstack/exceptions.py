from __future__ import annotations


class ConfigError(Exception):
    """Base class for configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Raised when a configuration file cannot be parsed."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when a configuration file is invalid."""

    pass


class DockerDaemonNotRunningError(Exception):
    """Raised when the Docker daemon is not running."""

    def __str__(self) -> str:
        return "Docker is not running. Please start Docker first."


class DockerComposeInstallationError(Exception):
    """Raised when no usable Docker Compose binary can be found."""

    pass


class DockerError(Exception):
    """Base class for Docker related errors."""

    def __init__(self, command: str, returncode: int, stdout: str, stderr: str):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class DockerComposeError(DockerError):
    """Base class for Docker Compose related errors."""

    def __str__(self) -> str:
        return f"DockerComposeError: {self.command} returned {self.returncode} error: {self.stderr}"


class UnknownLogsTargetError(Exception):
    """Raised when logs are requested for a section that does not exist."""

    def __init__(self, target: str):
        self.target = target

    def __str__(self) -> str:
        return f"Unknown service: {self.target}"
