#!/usr/bin/env python3
"""RSA key and remote access example.

Generates an RSA key pair, prints it, and writes a bash script of ssh, scp
and ``aws ssm`` commands for a sample instance into the temp directory.
"""

import sys
from pathlib import Path

# Add the parent directory to the path so we can import ssh_scp_manager
sys.path.insert(0, str(Path(__file__).parent.parent))

from ssh_scp_manager import Command, Commands, Config, new_key, tmp_path
from ssh_scp_manager.log import configure


def main() -> int:
    config = Config.from_environment()
    errors = config.validate()
    if errors:
        for error in errors:
            print(f"config error: {error}", file=sys.stderr)
        return 1
    configure(config.log_level)

    pk_encoded, pubkey_encoded = new_key(config.rsa.bits)
    print(pk_encoded)
    print(pubkey_encoded)

    key_path = tmp_path(10, ".pem")
    cmd = Command(
        ssh_key_path=key_path,
        user_name="ubuntu",
        region="us-west-2",
        availability_zone="us-west-2a",
        instance_id="i-0123456789abcdef0",
        instance_state="running",
        ip_mode="elastic",
        public_ip="203.0.113.10",
        ssh_config=config.ssh,
    )
    script_path = tmp_path(10, ".sh")
    Commands([cmd]).sync(script_path)
    print(f"wrote ssh commands to {script_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
