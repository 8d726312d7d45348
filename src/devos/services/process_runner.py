"""Child process execution service for devos."""

import subprocess
from typing import List, Sequence

from devos.errors import SpawnError
from devos.errors_catalog import actionable_error


class ProcessRunner:
    """Runs the Odoo interpreter in the foreground with inherited stdio."""

    def __init__(self, logger, subprocess_module=subprocess):
        self.logger = logger
        self.subprocess = subprocess_module

    def run(self, interpreter: str, args: Sequence[str], work_dir: str) -> int:
        cmd: List[str] = [interpreter, *args]
        self.logger.debug("Executing in %s: %s", work_dir, " ".join(cmd))

        try:
            # stdout/stderr are left as None so the child writes straight to our streams.
            process = self.subprocess.Popen(cmd, cwd=work_dir)
        except OSError as exc:
            message = actionable_error("spawn_failed", python=interpreter)
            if getattr(exc, "filename", None) == work_dir:
                message = f"Working directory not found: {work_dir}. {message}"
            raise SpawnError(message) from exc

        try:
            returncode = process.wait()
        except KeyboardInterrupt:
            self.logger.warning("Interrupted, waiting for %s to shut down...", interpreter)
            returncode = process.wait()

        self.logger.debug("Process exited with code %s", returncode)
        return returncode
