"""Log file creation and best-effort ownership handover under sudo."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path


def prepare_log_file(log_file: Path, environ: Mapping[str, str] | None = None) -> bool:
    """Create the log file and hand it to the invoking user when run via sudo.

    Returns False when the ownership change was attempted and refused.
    """
    env = os.environ if environ is None else environ
    log_file.parent.mkdir(parents=True, exist_ok=True)
    log_file.touch(exist_ok=True)

    owner = _sudo_invoker_ids(env)
    if owner is None or not hasattr(os, "chown"):
        return True
    uid, gid = owner
    try:
        os.chown(log_file, uid, gid)
    except OSError:
        return False
    return True


def _sudo_invoker_ids(env: Mapping[str, str]) -> tuple[int, int] | None:
    uid = env.get("SUDO_UID", "")
    gid = env.get("SUDO_GID", "")
    if not (uid.isdigit() and gid.isdigit()):
        return None
    return int(uid), int(gid)
