"""Shared exception types for the wcat differential harness."""


class HarnessError(RuntimeError):
    """Base error for anything that makes a single case fail."""


class InfrastructureError(HarnessError):
    """The harness could not set up or drive a case (spawn, fixture, FIFO)."""


class SpawnError(InfrastructureError):
    def __init__(self, executable, args, cause):
        self.executable = str(executable)
        self.args_list = [str(a) for a in args]
        self.cause = cause
        super().__init__(
            f"failed to spawn {self.executable} {self.args_list}: {cause}")


class StdinWriteError(InfrastructureError):
    """Writing the stdin payload to a child failed."""


class FifoError(InfrastructureError):
    """Creating or feeding a named pipe failed."""


class MismatchError(HarnessError):
    """Subject and reference disagreed; carries the full report."""

    def __init__(self, mismatch):
        self.mismatch = mismatch
        super().__init__(mismatch.render())


class CheckFailed(HarnessError):
    """A scripted check's own assertion did not hold."""


class CommandTimeout(HarnessError):
    def __init__(self, executable, args, timeout):
        self.executable = str(executable)
        self.args_list = [str(a) for a in args]
        self.timeout = timeout
        super().__init__(
            f"{self.executable} {self.args_list} timed out after {timeout}s")


class BuildError(HarnessError):
    """Assembling or linking the subject failed."""
