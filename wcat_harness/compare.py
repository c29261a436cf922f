"""compare.py — run subject and reference side by side and diff them.

Every comparison happens twice: once with stdout on a pipe and once with
stdout redirected to a regular file, because implementations are free to
pick different I/O strategies for the two.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import MismatchError
from .report import format_args, lossy
from .runner import CmdOutput


@dataclass(frozen=True)
class Mismatch:
    """Both sides of a failed comparison, ready to print."""

    args: tuple
    mode: str
    subject: CmdOutput
    reference: CmdOutput

    def render(self):
        s, r = self.subject, self.reference
        if self.mode == "file":
            return "\n".join([
                f"file output mismatch for args {format_args(self.args)} "
                f"(wcat {len(s.stdout)}B status {s.code} vs "
                f"cat {len(r.stdout)}B status {r.code})",
                f"=== wcat file ({len(s.stdout)}B) ===", lossy(s.stdout),
                f"=== cat file ({len(r.stdout)}B) ===", lossy(r.stdout),
            ])
        sections = [
            f"{self.mode} output mismatch for args {format_args(self.args)}",
            f"=== wcat stdout ({len(s.stdout)}B) ===", lossy(s.stdout),
            f"=== cat stdout ({len(r.stdout)}B) ===", lossy(r.stdout),
            f"=== wcat stderr ({len(s.stderr)}B) ===", lossy(s.stderr),
            f"=== cat stderr ({len(r.stderr)}B) ===", lossy(r.stderr),
            "=== wcat status ===", str(s.code),
            "=== cat status ===", str(r.code),
        ]
        return "\n".join(sections)


def diff_outputs(args, mode, subject, reference) -> Optional[Mismatch]:
    if subject == reference:
        return None
    return Mismatch(tuple(str(a) for a in args), mode, subject, reference)


class Comparator:
    """Subject-vs-reference comparison in pipe mode, then in file mode.

    The subject always runs with its program name spoofed to the
    reference's path, so diagnostics that embed argv[0] line up.
    """

    def __init__(self, config, runner, fifo, fixtures):
        self.config = config
        self.runner = runner
        self.fifo = fifo
        self.fixtures = fixtures

    @property
    def identity(self):
        return str(self.config.reference)

    def _read_output(self, run):
        path = self.fixtures.output_path()
        try:
            code = run(path)
            data = path.read_bytes()
        finally:
            path.unlink()
        return CmdOutput(code if code is not None else -1, data, b"")

    def compare(self, args, stdin=None) -> Optional[Mismatch]:
        cfg, runner = self.config, self.runner
        subject = runner.run(cfg.subject, args, stdin, identity=self.identity)
        reference = runner.run(cfg.reference, args, stdin)
        mismatch = diff_outputs(args, "pipe", subject, reference)
        if mismatch is not None:
            return mismatch

        subject = self._read_output(lambda out: runner.run_to_file(
            cfg.subject, args, out, stdin, identity=self.identity))
        reference = self._read_output(lambda out: runner.run_to_file(
            cfg.reference, args, out, stdin))
        return diff_outputs(args, "file", subject, reference)

    def compare_fifo(self, fifo, options, chunks, delay=0.0) -> Optional[Mismatch]:
        cfg, sync = self.config, self.fifo
        args = [*options, str(fifo)]
        subject = sync.run(cfg.subject, fifo, options, chunks, delay,
                           identity=self.identity)
        reference = sync.run(cfg.reference, fifo, options, chunks, delay)
        mismatch = diff_outputs(args, "fifo", subject, reference)
        if mismatch is not None:
            return mismatch

        subject = self._read_output(lambda out: sync.run_to_file(
            cfg.subject, fifo, options, chunks, out, delay, identity=self.identity))
        reference = self._read_output(lambda out: sync.run_to_file(
            cfg.reference, fifo, options, chunks, out, delay))
        return diff_outputs(args, "file", subject, reference)

    def check(self, args, stdin=None):
        mismatch = self.compare(args, stdin)
        if mismatch is not None:
            raise MismatchError(mismatch)

    def check_fifo(self, fifo, options, chunks, delay=0.0):
        mismatch = self.compare_fifo(fifo, options, chunks, delay)
        if mismatch is not None:
            raise MismatchError(mismatch)
