"""config.py — run configuration for the wcat harness.

All knobs are gathered once at startup into a HarnessConfig that is handed
explicitly to the runner, comparator and executor.
"""

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# =============================================================================
#                           CONFIGURATION
# =============================================================================

SUBJECT_NAME = "wcat"
SUBJECT_DIR = "wcat"
SUBJECT_SOURCE = "wcat.asm"
SUBJECT_OBJECT = "wcat.o"
REFERENCE_NAME = "cat"

HELP_MARKER = "Usage: wcat"
VERSION_MARKER = "wcat 0.1"

STREAM_CHUNKS = (b"chunk1\n", b"chunk2\n")
STREAM_DELAY = 0.05

RANDOM_PAYLOAD_SIZE = 2 * 1024 * 1024
BINARY_FIXTURE_SIZE = 512
LARGE_LINES = 3000
HUGE_LINES = 1000
FIXTURE_SEED = 0x77636174

PREPROCESS_OUTPUT = "processed"

GNUBIN_PREFIXES = (
    "/opt/homebrew/opt/coreutils/libexec/gnubin",
    "/usr/local/opt/coreutils/libexec/gnubin",
)


def find_reference_binary(tool_name=REFERENCE_NAME):
    """Find the system's GNU binary for the given tool."""
    candidates = [
        "/usr/bin/{}".format(tool_name),
        shutil.which(tool_name),
    ]
    # macOS: gnubin paths, then g-prefixed
    for prefix in GNUBIN_PREFIXES:
        candidates.append(os.path.join(prefix, tool_name))
    candidates.append(shutil.which("g{}".format(tool_name)))

    for c in candidates:
        if c and os.path.isfile(c):
            return c
    return None


@dataclass(frozen=True)
class HarnessConfig:
    subject: Path
    reference: Path
    source_dir: Optional[Path] = None
    verbose: bool = False
    timeout: Optional[float] = None
    build: bool = True

    @classmethod
    def for_root(cls, root, reference=None, subject=None, **kwargs):
        """Derive the default layout: <root>/wcat/wcat built from wcat.asm.

        Returns None when no reference binary can be located.
        """
        root = Path(root).resolve()
        source_dir = root / SUBJECT_DIR
        if reference is None:
            reference = find_reference_binary()
            if reference is None:
                return None
        if subject is None:
            subject = source_dir / SUBJECT_NAME
        else:
            # An explicit subject is taken as-is; nothing to assemble.
            source_dir = None
        return cls(subject=Path(subject), reference=Path(reference),
                   source_dir=source_dir, **kwargs)
