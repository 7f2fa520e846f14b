"""
UxPlay process manager.

Owns at most one `uxplay` child. The enabled flag is the intent; the
handle is what we believe is running. `reconcile()` brings the handle in
line with the flag:

    STOPPED -> RUNNING   flag turned on   (spawn)
    RUNNING -> STOPPED   flag turned off  (terminate + reap)

Same-state transitions are no-ops. Spawn failures are raised to the
caller; stop failures are only logged.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Optional

from airtray.core.types import ProcessState

log = logging.getLogger(__name__)


class ProcessError(Exception):
    pass


class SpawnError(ProcessError):
    """The receiver could not be launched (not on PATH, not executable, ...)."""

    def __init__(self, executable: str, cause: OSError):
        super().__init__(f"failed to start {executable}: {cause}")
        self.executable = executable
        self.cause = cause


class TerminationError(ProcessError):
    """Signalling or reaping the receiver failed. Logged, never raised."""

    def __init__(self, pid: int, cause: Exception):
        super().__init__(f"failed to stop pid {pid}: {cause}")
        self.pid = pid
        self.cause = cause


class UxPlayProcess:
    def __init__(self, executable: str = "uxplay", stop_timeout: Optional[float] = None):
        self.executable = executable
        self.stop_timeout = stop_timeout
        self._enabled = False
        self._process: Optional[subprocess.Popen] = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def pid(self) -> Optional[int]:
        return self._process.pid if self._process is not None else None

    @property
    def state(self) -> ProcessState:
        return ProcessState.RUNNING if self._process is not None else ProcessState.STOPPED

    def is_running(self) -> bool:
        # what we believe, not what the OS says; a child that died on its
        # own keeps its handle until the next turn-off
        return self._process is not None

    def set_enabled(self, enabled: bool) -> None:
        """
        Update the flag and reconcile. No-op if the flag already has this
        value. Raises SpawnError if turning on fails; the flag stays on.
        """
        if enabled == self._enabled:
            return
        self._enabled = enabled
        self.reconcile()

    def reconcile(self) -> None:
        if self._enabled:
            if self._process is None:
                self._start()
        elif self._process is not None:
            self._stop()

    def _start(self) -> None:
        log.info("Starting %s", self.executable)
        try:
            # stdout piped and never read; stderr inherited
            self._process = subprocess.Popen([self.executable], stdout=subprocess.PIPE)
        except OSError as e:
            raise SpawnError(self.executable, e) from e
        log.info("%s started (pid %d)", self.executable, self._process.pid)

    def _stop(self) -> None:
        proc, self._process = self._process, None
        log.info("Stopping %s (pid %d)", self.executable, proc.pid)

        try:
            proc.terminate()
        except OSError as e:
            _report(TerminationError(proc.pid, e))

        # reap even if terminate failed so we don't leave a zombie
        try:
            proc.wait(timeout=self.stop_timeout)
        except subprocess.TimeoutExpired:
            log.warning("%s did not exit within %ss, killing", self.executable, self.stop_timeout)
            self._kill(proc)
        except OSError as e:
            _report(TerminationError(proc.pid, e))
        else:
            log.info("%s exited (code %s)", self.executable, proc.returncode)
        finally:
            if proc.stdout is not None:
                proc.stdout.close()

    def _kill(self, proc: subprocess.Popen) -> None:
        try:
            proc.kill()
        except OSError as e:
            _report(TerminationError(proc.pid, e))
        try:
            proc.wait()
        except OSError as e:
            _report(TerminationError(proc.pid, e))


def _report(err: TerminationError) -> None:
    log.warning("%s", err)
