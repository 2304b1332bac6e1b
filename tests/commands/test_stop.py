from __future__ import annotations

import subprocess
from argparse import Namespace
from unittest import mock

import pytest

from devstack.commands.stop import stop
from testing.utils import compose_command
from testing.utils import DOCKER_COMPOSE


@mock.patch("devstack.utils.docker_compose.subprocess.run")
def test_stop_issues_three_teardown_calls(
    mock_run: mock.Mock, capsys: pytest.CaptureFixture[str]
) -> None:
    mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=0)

    stop(Namespace(compose_binary=DOCKER_COMPOSE, debug=False))

    assert [call.args[0] for call in mock_run.call_args_list] == [
        compose_command(
            "docker-compose-sales-service.yml", "down", "--remove-orphans"
        ),
        compose_command(
            "docker-compose-product-service.yml", "down", "--remove-orphans"
        ),
        compose_command("docker-compose-db.yml", "down", "--remove-orphans"),
    ]
    out = capsys.readouterr().out
    assert "Stopping all containers..." in out
    assert "All containers stopped." in out


@mock.patch("devstack.utils.docker_compose.subprocess.run")
def test_stop_when_nothing_running(mock_run: mock.Mock) -> None:
    # compose exits non-zero for missing files, every section is still attempted
    mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=1)
    stop(Namespace(compose_binary=DOCKER_COMPOSE, debug=False))
    assert mock_run.call_count == 3
