"""Test configuration for ssh_scp_manager package."""

import os
from typing import List

import pytest

from ssh_scp_manager import command as command_manager
from ssh_scp_manager.command import Output
from ssh_scp_manager.random import source


@pytest.fixture
def sample_command():
    """Provide access details for a sample instance."""
    from ssh_scp_manager.ssh import Command
    return Command(
        ssh_key_path="/tmp/test-key.pem",
        user_name="ubuntu",
        region="us-west-2",
        availability_zone="us-west-2a",
        instance_id="i-0abc",
        instance_state="running",
        ip_mode="elastic",
        public_ip="203.0.113.10",
    )


class FakeRunner:
    """Records commands instead of running them.

    Commands containing ``scp`` create ``creates`` so download checks pass.
    """

    def __init__(self) -> None:
        self.commands: List[str] = []
        self.kwargs: List[dict] = []
        self.creates: List[str] = []

    def __call__(self, cmd: str, **kwargs) -> Output:
        self.commands.append(cmd)
        self.kwargs.append(kwargs)
        if "scp " in cmd:
            for path in self.creates:
                os.makedirs(os.path.dirname(path), exist_ok=True)
                open(path, "w").close()
        return Output(stdout="", stderr="")


@pytest.fixture
def fake_runner(monkeypatch):
    """Replace the process runner with a recorder."""
    runner = FakeRunner()
    monkeypatch.setattr(command_manager, "run", runner)
    return runner


@pytest.fixture
def fresh_random_source(monkeypatch):
    """Reset the shared random source so first use can be observed."""
    monkeypatch.setattr(source, "_source", None)
    monkeypatch.setattr(source, "initializations", 0)
    return source
