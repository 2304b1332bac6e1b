from __future__ import annotations

import sys
from datetime import datetime

from devstack.constants import Color
from devstack.constants import TIMESTAMP_FORMAT


def _timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class Console:
    _instance: Console | None = None

    def __new__(cls) -> Console:
        if cls._instance is None:
            cls._instance = super(Console, cls).__new__(cls)
        return cls._instance

    def print(self, message: str, color: str = "", bold: bool = False) -> None:
        color = color + (Color.BOLD if bold else "")
        end = Color.RESET if color != "" or bold else ""
        sys.stdout.write(color + message + end + "\n")
        sys.stdout.flush()

    def success(self, message: str, bold: bool = False) -> None:
        self.print(message=f"[{_timestamp()}] {message}", color=Color.GREEN, bold=bold)

    def failure(self, message: str, bold: bool = False) -> None:
        self.print(
            message=f"[{_timestamp()}] ERROR: {message}", color=Color.RED, bold=bold
        )

    def warning(self, message: str, bold: bool = False) -> None:
        self.print(
            message=f"[{_timestamp()}] WARNING: {message}",
            color=Color.YELLOW,
            bold=bold,
        )

    def info(self, message: str, bold: bool = False) -> None:
        self.print(message=message, color="", bold=bold)
