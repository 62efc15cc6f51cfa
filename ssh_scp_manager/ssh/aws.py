"""SSH, SCP and SSM helpers for EC2 instances."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from .. import command as command_manager
from ..command import Output
from ..config import SshConfig
from ..errors import RemoteAccessError

logger = logging.getLogger(__name__)

_TEMPLATE = """\
# change SSH key permission
chmod 400 {ssh_key_path}

# instance '{instance_id}' ({instance_state}, {availability_zone}) -- ip mode '{ip_mode}'
ssh -o "StrictHostKeyChecking no" -i {ssh_key_path} {user_name}@{public_ip}
ssh -o "StrictHostKeyChecking no" -i {ssh_key_path} {user_name}@{public_ip} 'tail -10 /var/log/cloud-init-output.log'
ssh -o "StrictHostKeyChecking no" -i {ssh_key_path} {user_name}@{public_ip} 'tail -f /var/log/cloud-init-output.log'

# download a remote file to local machine
scp -i {ssh_key_path} {user_name}@{public_ip}:REMOTE_FILE_PATH LOCAL_FILE_PATH
scp -i {ssh_key_path} -r {user_name}@{public_ip}:REMOTE_DIRECTORY_PATH LOCAL_DIRECTORY_PATH

# upload a local file to remote machine
scp -i {ssh_key_path} LOCAL_FILE_PATH {user_name}@{public_ip}:REMOTE_FILE_PATH
scp -i {ssh_key_path} -r LOCAL_DIRECTORY_PATH {user_name}@{public_ip}:REMOTE_DIRECTORY_PATH

# AWS SSM session (requires a running SSM agent)
# https://github.com/aws/amazon-ssm-agent/issues/131
aws ssm start-session {profile_flag}--region {region} --target {instance_id}
aws ssm start-session {profile_flag}--region {region} --target {instance_id} --document-name 'AWS-StartNonInteractiveCommand' --parameters command="sudo tail -10 /var/log/cloud-init-output.log"
aws ssm start-session {profile_flag}--region {region} --target {instance_id} --document-name 'AWS-StartInteractiveCommand' --parameters command="bash -l"
"""


@dataclass
class Command:
    """Access details for one instance.

    ``str(command)`` renders a bash snippet with ready-to-paste ssh, scp and
    ``aws ssm`` invocations. The other methods run the transfer for real
    through :func:`ssh_scp_manager.command.run`, using the shell and timeout
    from ``ssh_config``.
    """

    ssh_key_path: str
    user_name: str

    region: str
    availability_zone: str

    instance_id: str
    instance_state: str

    ip_mode: str
    public_ip: str

    profile: Optional[str] = None

    ssh_config: SshConfig = field(default_factory=SshConfig, repr=False, compare=False)

    def __str__(self) -> str:
        return _TEMPLATE.format(profile_flag=self._profile_flag(), **self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "ssh_config"}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], ssh_config: Optional[SshConfig] = None) -> Command:
        names = {f.name for f in fields(cls)} - {"ssh_config"}
        kwargs = {k: v for k, v in data.items() if k in names}
        if ssh_config is not None:
            kwargs["ssh_config"] = ssh_config
        return cls(**kwargs)

    def _profile_flag(self) -> str:
        return f"--profile {self.profile} " if self.profile is not None else ""

    def _ssh(self, remote_cmd: str) -> str:
        return (
            f"chmod 400 {self.ssh_key_path} && "
            f'ssh -o "StrictHostKeyChecking no" -i {self.ssh_key_path} '
            f"{self.user_name}@{self.public_ip} '{remote_cmd}'"
        )

    def _scp(self, source: str, target: str, recursive: bool = False) -> str:
        flag = "-r " if recursive else ""
        return (
            f"chmod 400 {self.ssh_key_path} && "
            f"scp -i {self.ssh_key_path} {flag}{source} {target}"
        )

    def _remote(self, path: str) -> str:
        return f"{self.user_name}@{self.public_ip}:{path}"

    def _exec(self, cmd: str, timeout: Optional[float] = None) -> Output:
        if timeout is None:
            timeout = self.ssh_config.command_timeout
        return command_manager.run(cmd, shell=self.ssh_config.shell, timeout=timeout)

    def run(self, cmd: str, timeout: Optional[float] = None) -> Output:
        """Run ``cmd`` on the instance over ssh.

        ``timeout`` overrides ``ssh_config.command_timeout`` for this call.
        """

        logger.info("sending an SSH command to %s", self.public_ip)
        return self._exec(self._ssh(cmd), timeout=timeout)

    def ssm_start_session_command(self) -> str:
        return (
            f"aws ssm start-session {self._profile_flag()}"
            f"--region {self.region} --target {self.instance_id}"
        )

    def download_file(self, remote_file_path: str, local_file_path: str, overwrite: bool) -> Output:
        """Download a remote file to the local machine."""

        logger.info("sending an SCP command to %s", self.public_ip)
        return self._download(remote_file_path, local_file_path, overwrite, recursive=False)

    def download_directory(
        self, remote_directory_path: str, local_directory_path: str, overwrite: bool
    ) -> Output:
        """Download a remote directory to the local machine."""

        logger.info("download_directory from %s", self.public_ip)
        return self._download(remote_directory_path, local_directory_path, overwrite, recursive=True)

    def send_file(self, local_file_path: str, remote_file_path: str, overwrite: bool) -> Output:
        """Send a local file to the remote machine."""

        logger.info("send_file to %s", self.public_ip)
        return self._send(local_file_path, remote_file_path, overwrite, recursive=False)

    def send_directory(
        self, local_directory_path: str, remote_directory_path: str, overwrite: bool
    ) -> Output:
        """Send a local directory to the remote machine."""

        logger.info("send_directory to %s", self.public_ip)
        return self._send(local_directory_path, remote_directory_path, overwrite, recursive=True)

    def _download(self, remote_path: str, local_path: str, overwrite: bool, recursive: bool) -> Output:
        kind = "directory" if recursive else "file"
        if os.path.exists(local_path) and not overwrite:
            raise RemoteAccessError(f"{kind} '{local_path}' already exists")
        if overwrite:
            rm_flag = "-rf" if recursive else "-f"
            rm_out = self._exec(f"rm {rm_flag} {local_path} || true")
            logger.info("successfully rm '%s' (out %r)", local_path, rm_out)

        out = self._exec(self._scp(self._remote(remote_path), local_path, recursive))

        if not os.path.exists(local_path):
            raise RemoteAccessError(f"{kind} '{local_path}' does not exist")
        logger.info("successfully downloaded to '%s'", local_path)
        return out

    def _send(self, local_path: str, remote_path: str, overwrite: bool, recursive: bool) -> Output:
        kind = "directory" if recursive else "file"
        if not os.path.exists(local_path):
            raise RemoteAccessError(f"{kind} '{local_path}' does not exist")
        if overwrite:
            rm_flag = "-rf" if recursive else "-f"
            rm_out = self._exec(self._ssh(f"sudo rm {rm_flag} {remote_path} || true"))
            logger.info("successfully rm '%s' (out %r)", remote_path, rm_out)

        out = self._exec(self._scp(local_path, self._remote(remote_path), recursive))

        ls_out = self._exec(self._ssh(f"ls {remote_path}"))
        logger.info("successfully sent to '%s' (out %r)", remote_path, ls_out)
        return out


class Commands:
    """A list of :class:`Command` objects rendered into one script."""

    def __init__(self, commands: Optional[List[Command]] = None) -> None:
        self.commands: List[Command] = list(commands or [])

    def render(self) -> str:
        contents = "#!/bin/bash\n\n"
        for ssh_cmd in self.commands:
            contents += f"{ssh_cmd}\n\n"
        return contents

    def sync(self, file_path: str) -> None:
        """Write the rendered script to ``file_path``, creating parent dirs."""

        logger.info("syncing ssh commands to '%s'", file_path)
        parent_dir = os.path.dirname(os.path.abspath(file_path))
        os.makedirs(parent_dir, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(self.render())
