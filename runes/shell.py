"""Running commands through the system shell."""

from __future__ import annotations

import subprocess
import sys


def shell(cmd: str) -> int:
    """Run ``cmd`` in the system shell and return its exit status."""
    sys.stdout.flush()
    sys.stderr.flush()
    return subprocess.run(cmd, shell=True, check=False).returncode