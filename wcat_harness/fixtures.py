"""fixtures.py — throwaway input artifacts shared by every case in a run.

Fixtures live in one temporary directory that is removed when the run ends.
After provisioning they are read-only; a case that needs custom content
gets a brand new directory from fresh_dir() and writes there.
"""

import os
import random
import tempfile
from contextlib import contextmanager
from pathlib import Path

from .config import (
    BINARY_FIXTURE_SIZE,
    FIXTURE_SEED,
    HUGE_LINES,
    LARGE_LINES,
    RANDOM_PAYLOAD_SIZE,
)
from .errors import InfrastructureError


def _numbered_lines(count):
    return "".join(f"line {i}\n" for i in range(1, count + 1)).encode()


def fixture_files(rng):
    """Name -> (relative path, content) for every file fixture."""
    return {
        "sample_a": ("a.txt", b"alpha\n"),
        "sample_b": ("b.txt", b"beta\n"),
        "blank": ("blank.txt", b"one\n\n\nthree\n\n\n"),
        "tabs": ("tabs.txt", b"col1\tcol2\nline\t2\n"),
        "mixed": ("mixed.txt", b"tab\t\x01\nline\t2\x7f\n"),
        "dash_name": ("-dash.txt", b"dash file\n"),
        "option_like": ("-n", b"option-looking file\n"),
        "dash_v_file": ("-vfile.txt", b"dash-v data\n"),
        "empty": ("empty.txt", b""),
        "no_newline": ("no_newline.txt", b"no newline"),
        "large": ("large.txt", _numbered_lines(LARGE_LINES)),
        "huge": ("huge.txt", _numbered_lines(HUGE_LINES)),
        "control": ("control.txt", b"plain\ncontrol:\x01here\nesc:\x1bX\nmeta:\x80Y\n"),
        "binary": ("binary.bin", rng.randbytes(BINARY_FIXTURE_SIZE)),
    }


def fixture_buffers(rng):
    """Name -> bytes for fixtures that only ever travel through stdin."""
    return {
        "stdin_data": b"stdin data\n",
        "stdin_mix": b"middle line\n",
        "random": rng.randbytes(RANDOM_PAYLOAD_SIZE),
    }


class Fixtures:
    """Paths and buffers provisioned once per run."""

    DIR_NAME = "adir"

    def __init__(self, root):
        self.root = Path(root)
        self.paths = {}
        self.buffers = {}
        self._counter = 0

    @classmethod
    @contextmanager
    def provision(cls):
        """Create fixtures in a temporary directory and remove it afterwards."""
        with tempfile.TemporaryDirectory(prefix="wcat-fixtures-") as tmp:
            yield cls.create(tmp)

    @classmethod
    def create(cls, root):
        fixtures = cls(root)
        rng = random.Random(FIXTURE_SEED)
        try:
            for name, (rel, content) in fixture_files(rng).items():
                path = fixtures.root / rel
                path.write_bytes(content)
                fixtures.paths[name] = path
            dir_path = fixtures.root / cls.DIR_NAME
            dir_path.mkdir()
            fixtures.paths["dir"] = dir_path
        except OSError as e:
            raise InfrastructureError(f"cannot create fixtures in {root}: {e}") from e
        fixtures.buffers.update(fixture_buffers(rng))
        return fixtures

    def path(self, name):
        return self.paths[name]

    def read(self, name):
        """Bytes of a buffer fixture, or the content of a file fixture."""
        if name in self.buffers:
            return self.buffers[name]
        return self.paths[name].read_bytes()

    def fresh_dir(self):
        """A new, empty directory for one case's own files."""
        self._counter += 1
        try:
            return Path(tempfile.mkdtemp(prefix=f"case-{self._counter}-", dir=self.root))
        except OSError as e:
            raise InfrastructureError(f"cannot create case directory: {e}") from e

    def output_path(self):
        """A fresh, empty regular file for file-redirected stdout."""
        fd, name = tempfile.mkstemp(prefix="out-", dir=self.root)
        os.close(fd)
        return Path(name)
