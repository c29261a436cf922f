"""runner.py — spawn one process and collect what it did.

Stdin is fed from a dedicated writer thread while the calling thread drains
stdout and a second thread drains stderr. Writing the payload up front and
reading afterwards deadlocks as soon as the child blocks on a full stdout
pipe while we block on a full stdin pipe.
"""

import os
import signal
import subprocess
import threading
from dataclasses import dataclass
from typing import Optional

from .errors import CommandTimeout, SpawnError, StdinWriteError
from .report import log_cmd, log_cmd_to_file


@dataclass(frozen=True)
class CmdOutput:
    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def code(self) -> Optional[int]:
        """Exit code, or None when the process was killed by a signal."""
        return self.returncode if self.returncode >= 0 else None

    @property
    def signal(self) -> Optional[int]:
        return -self.returncode if self.returncode < 0 else None


class _StdinWriter(threading.Thread):
    """Writes a whole payload into a child's stdin, then closes it."""

    def __init__(self, pipe, payload):
        super().__init__(name="stdin-writer", daemon=True)
        self.pipe = pipe
        self.payload = payload
        self.error = None

    def run(self):
        try:
            with self.pipe:
                self.pipe.write(self.payload)
        except OSError as e:
            self.error = e

    def finish(self, executable):
        self.join()
        if self.error is not None:
            raise StdinWriteError(
                f"writing {len(self.payload)}B to stdin of {executable} failed: "
                f"{self.error}") from self.error


class _Drain(threading.Thread):
    """Reads a stream to EOF in the background."""

    def __init__(self, stream, name):
        super().__init__(name=name, daemon=True)
        self.stream = stream
        self.data = b""

    def run(self):
        with self.stream:
            self.data = self.stream.read()


class _Watchdog:
    """Kills a child's whole process group once a deadline passes."""

    def __init__(self, proc, timeout):
        self.proc = proc
        self.fired = False
        self.timer = threading.Timer(timeout, self._kill) if timeout else None

    def _kill(self):
        if self.proc.poll() is not None:
            return
        self.fired = True
        try:
            os.killpg(self.proc.pid, signal.SIGKILL)
        except ProcessLookupError:
            pass

    def __enter__(self):
        if self.timer is not None:
            self.timer.start()
        return self

    def __exit__(self, *exc):
        if self.timer is not None:
            self.timer.cancel()
        return False


class ProcessRunner:
    """Runs one command in pipe-captured or file-redirected mode."""

    def __init__(self, config):
        self.config = config

    def _spawn(self, executable, args, stdin, identity, stdout):
        argv = [str(identity if identity is not None else executable)]
        argv += [str(a) for a in args]
        try:
            return subprocess.Popen(
                argv,
                executable=str(executable),
                stdin=subprocess.PIPE if stdin is not None else subprocess.DEVNULL,
                stdout=stdout,
                stderr=subprocess.PIPE,
                start_new_session=self.config.timeout is not None,
            )
        except OSError as e:
            raise SpawnError(executable, args, e) from e

    def _drive(self, proc, executable, args, stdin, read_stdout):
        writer = None
        if stdin is not None:
            writer = _StdinWriter(proc.stdin, stdin)
            writer.start()
        err = _Drain(proc.stderr, "stderr-drain")
        err.start()

        with _Watchdog(proc, self.config.timeout) as watchdog:
            out = b""
            if read_stdout:
                with proc.stdout:
                    out = proc.stdout.read()
            proc.wait()
            err.join()

        if watchdog.fired and proc.returncode == -signal.SIGKILL:
            if writer is not None:
                writer.join()
            raise CommandTimeout(executable, args, self.config.timeout)
        if writer is not None:
            writer.finish(executable)
        return CmdOutput(proc.returncode, out, err.data)

    def run(self, executable, args, stdin=None, identity=None):
        """Run with stdout captured through a pipe."""
        proc = self._spawn(executable, args, stdin, identity, subprocess.PIPE)
        result = self._drive(proc, executable, args, stdin, read_stdout=True)
        if self.config.verbose:
            log_cmd(executable, args, result.code,
                    len(result.stdout), len(result.stderr))
        return result

    def run_to_file(self, executable, args, output_path, stdin=None, identity=None):
        """Run with stdout redirected to output_path; return the exit code."""
        try:
            out_file = open(output_path, "wb")
        except OSError as e:
            raise SpawnError(executable, args, e) from e
        with out_file:
            proc = self._spawn(executable, args, stdin, identity, out_file)
        result = self._drive(proc, executable, args, stdin, read_stdout=False)
        if self.config.verbose:
            log_cmd_to_file(executable, args, result.code,
                            output_path, len(result.stderr))
        return result.code
