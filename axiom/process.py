"""Starting the supervised command with a PATH free of the shim directory."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping, Sequence

_SHIM_MARKER = ".axiom/bin"


def sanitized_path(env: Mapping[str, str] | None = None) -> str:
    """The PATH of ``env`` (the process environment by default) without shim entries."""
    environ = os.environ if env is None else env
    home = environ.get("HOME", "")
    shim_dir = f"{home}/{_SHIM_MARKER}"
    entries = environ.get("PATH", "").split(os.pathsep)
    kept = [
        entry
        for entry in entries
        if _SHIM_MARKER not in entry and entry != shim_dir
    ]
    return os.pathsep.join(kept)


def spawn_child(program: str, args: Sequence[str] = ()) -> subprocess.Popen[bytes]:
    """Start ``program`` with piped output and a sanitized PATH.

    Raises OSError (for instance FileNotFoundError) when it cannot be started.
    """
    env = dict(os.environ)
    env["PATH"] = sanitized_path(env)
    return subprocess.Popen(
        [program, *args],
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )