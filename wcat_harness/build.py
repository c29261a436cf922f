"""build.py — assemble and link the wcat subject when its source changed.

Build type: NASM modular + linker, i.e. nasm -f elf64 followed by ld.
"""

import subprocess

from .config import SUBJECT_NAME, SUBJECT_OBJECT, SUBJECT_SOURCE
from .errors import BuildError
from .report import log, lossy


# =============================================================================
# Subprocess helpers
# =============================================================================

def capture(args, cwd=None):
    """Run a command; return (stdout, stderr, returncode)."""
    try:
        p = subprocess.run(args, capture_output=True, timeout=60, cwd=cwd)
        return p.stdout, p.stderr, p.returncode
    except FileNotFoundError:
        return b"", "{}: not found".format(args[0]).encode(), 127
    except subprocess.TimeoutExpired:
        return b"", "{}: timed out".format(args[0]).encode(), 124


def run_cmd(args, cwd=None, check=True):
    """Run a command, raising BuildError on a non-zero exit if check is set."""
    out, err, rc = capture(args, cwd=cwd)
    if check and rc != 0:
        detail = lossy(err).strip()
        raise BuildError("{} failed (exit {}){}".format(
            " ".join(args), rc, ": " + detail if detail else ""))
    return out, err, rc


# =============================================================================
# Build
# =============================================================================

def needs_rebuild(source_dir, binary):
    """True when the binary or object is missing or the source is newer."""
    source = source_dir / SUBJECT_SOURCE
    obj = source_dir / SUBJECT_OBJECT
    if not source.exists():
        return not binary.exists()
    if not binary.exists() or not obj.exists():
        return True
    return source.stat().st_mtime > binary.stat().st_mtime


def assemble(source_dir, binary):
    log("[build] nasm -f elf64 {} -o {}".format(SUBJECT_SOURCE, SUBJECT_OBJECT))
    run_cmd(["nasm", "-f", "elf64", SUBJECT_SOURCE, "-o", SUBJECT_OBJECT],
            cwd=source_dir)
    log("[build] ld -o {} {}".format(binary.name, SUBJECT_OBJECT))
    run_cmd(["ld", "-o", str(binary), SUBJECT_OBJECT], cwd=source_dir)


def ensure_built(config):
    """Rebuild the subject from source_dir if anything is stale."""
    if not config.build or config.source_dir is None:
        return False
    source_dir = config.source_dir
    binary = config.subject
    if not needs_rebuild(source_dir, binary):
        return False
    if not (source_dir / SUBJECT_SOURCE).exists():
        raise BuildError("cannot build {}: {} not found".format(
            SUBJECT_NAME, source_dir / SUBJECT_SOURCE))
    assemble(source_dir, binary)
    return True
