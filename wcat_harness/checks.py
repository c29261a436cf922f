"""checks.py — scripted checks that do more than one plain comparison.

Each check takes the Harness and raises on failure: CheckFailed for its own
assertions, MismatchError when a subject/reference diff fails, and
InfrastructureError/OSError when setup goes wrong.
"""

import os
import re
import signal
import subprocess

from .config import (
    HELP_MARKER,
    STREAM_CHUNKS,
    STREAM_DELAY,
    VERSION_MARKER,
)
from .errors import CheckFailed, CommandTimeout, MismatchError, SpawnError
from .matrix import SHORT_FLAGS, generate_option_specs, pick_fixture_key, subsets
from .preprocess import process_one_asm
from .report import lossy

BLANK_INPUT = b"one\n\n\nthree\n\n\n"

# Bundles whose letters override each other; the order inside matters.
OVERRIDING_BUNDLES = ("nb", "bn", "ns", "sn", "bs", "sb", "ET", "TE",
                      "vA", "Av", "EA", "AE", "et", "te", "en", "ne")


def expect(condition, message):
    if not condition:
        raise CheckFailed(message)


def _compare(h, args, stdin=None):
    h.comparator.check([str(a) for a in args], stdin)


# =============================================================================
#                     Help, version and exit status
# =============================================================================

def check_help_output(h):
    out = h.run_subject(["--help"])
    ref = h.run_reference(["--help"])
    expect(out.stdout != ref.stdout, "help output should remain wcat-specific")
    expect(HELP_MARKER in lossy(out.stdout), "help missing usage")


def check_version_output(h):
    out = h.run_subject(["--version"])
    ref = h.run_reference(["--version"])
    expect(out.stdout != ref.stdout, "version output should remain wcat-specific")
    expect(VERSION_MARKER in lossy(out.stdout), "version string mismatch")


def check_help_stdout_closed(h):
    subject = h.subject_to_file(["--help"], os.devnull)
    reference = h.reference_to_file(["--help"], os.devnull)
    expect(subject == reference,
           f"--help exit mismatch {subject} vs {reference}")


def _pipeline_exit(executable, identity, data, timeout=None):
    """Exit status of `executable -` whose stdout feeds `head -n0`."""
    argv = [str(identity), "-"]
    try:
        producer = subprocess.Popen(argv, executable=str(executable),
                                    stdin=subprocess.PIPE, stdout=subprocess.PIPE,
                                    stderr=subprocess.DEVNULL,
                                    start_new_session=timeout is not None)
    except OSError as e:
        raise SpawnError(executable, ["-"], e) from e
    try:
        consumer = subprocess.Popen(["head", "-n0"], stdin=producer.stdout,
                                    stdout=subprocess.DEVNULL,
                                    stderr=subprocess.DEVNULL)
    except OSError as e:
        producer.kill()
        producer.wait()
        raise SpawnError("head", ["-n0"], e) from e
    producer.stdout.close()
    consumer.wait()
    with producer.stdin:
        producer.stdin.write(data)
    try:
        return producer.wait(timeout)
    except subprocess.TimeoutExpired:
        try:
            os.killpg(producer.pid, signal.SIGKILL)
        except ProcessLookupError:
            pass
        producer.wait()
        raise CommandTimeout(executable, ["-"], timeout) from None


def check_broken_pipe(h):
    data = b"broken pipe data\n"
    timeout = h.config.timeout
    subject = _pipeline_exit(h.subject, h.identity, data, timeout)
    reference = _pipeline_exit(h.reference, h.reference, data, timeout)
    expect(subject == reference,
           f"broken pipe exit mismatch {subject} vs {reference}")


# =============================================================================
#                     Filesystem edge cases
# =============================================================================

def check_enoent_vs_eacces(h):
    base = h.fixtures.fresh_dir()
    locked = base / "locked.txt"
    locked.write_bytes(b"locked")
    locked.chmod(0o000)
    try:
        _compare(h, [base / "nope"])
        _compare(h, [locked])
    finally:
        locked.chmod(0o600)


def check_enotdir(h):
    base = h.fixtures.fresh_dir()
    (base / "notdir").write_bytes(b"data")
    _compare(h, [base / "notdir" / "child"])


def check_eloop(h):
    base = h.fixtures.fresh_dir()
    a, b = base / "loop_a", base / "loop_b"
    a.symlink_to(b)
    b.symlink_to(a)
    _compare(h, [a])


def check_symlink_to_file(h):
    link = h.fixtures.fresh_dir() / "link_to_a.txt"
    link.symlink_to(h.fixtures.path("sample_a"))
    _compare(h, [link])


def check_symlink_to_dir(h):
    link = h.fixtures.fresh_dir() / "link_to_dir"
    link.symlink_to(h.fixtures.path("dir"), target_is_directory=True)
    _compare(h, [link])


def check_hardlink(h):
    link = h.fixtures.fresh_dir() / "hardlink_b.txt"
    os.link(h.fixtures.path("sample_b"), link)
    _compare(h, [link])


def check_symlink_chain(h):
    base = h.fixtures.fresh_dir()
    target = base / "chain_target.txt"
    target.write_bytes(b"chain target\n")
    (base / "chain_link1").symlink_to(target)
    (base / "chain_link2").symlink_to(base / "chain_link1")
    _compare(h, [base / "chain_link2"])


def check_relative_symlink(h):
    base = h.fixtures.fresh_dir()
    (base / "rel_dir").mkdir()
    (base / "rel_dir" / "rel_target.txt").write_bytes(b"relative\n")
    link = base / "rel_link.txt"
    link.symlink_to("rel_dir/rel_target.txt")
    _compare(h, [link])


# =============================================================================
#                     Streaming
# =============================================================================

def check_fifo_stream(h):
    """Two delayed writes must come out concatenated, in order."""
    expected = b"".join(STREAM_CHUNKS)
    fifo = h.make_fifo(h.fixtures.fresh_dir() / "stream.fifo")
    out = h.fifo.run(h.subject, fifo, (), STREAM_CHUNKS, STREAM_DELAY,
                     identity=h.identity)
    expect(out.stdout == expected,
           f"fifo stream mismatch: got {out.stdout!r}, want {expected!r}")
    mismatch = h.comparator.compare_fifo(fifo, (), STREAM_CHUNKS, STREAM_DELAY)
    if mismatch is not None:
        raise MismatchError(mismatch)


# =============================================================================
#                     Properties
# =============================================================================

def _bundle_pair(flags):
    return ["-" + "".join(flags)], [f"-{f}" for f in flags]


def check_bundle_equivalence(h):
    """-xyz must behave exactly like -x -y -z, on both implementations."""
    bundles = [tuple(s) for s in subsets(SHORT_FLAGS) if len(s) > 1]
    bundles += [tuple(b) for b in OVERRIDING_BUNDLES]
    for flags in bundles:
        bundled, separate = _bundle_pair(flags)
        content = str(h.fixtures.path(pick_fixture_key(bundled).value))
        for side, run in (("wcat", h.run_subject), ("cat", h.run_reference)):
            one = run(bundled + [content])
            many = run(separate + [content])
            expect(one == many,
                   f"{side}: {' '.join(bundled)} differs from {' '.join(separate)}")


def check_identity_transform(h):
    """Scenario E: arbitrary bytes pass through untouched, pipe and file."""
    data = h.fixtures.read("random")
    out = h.run_subject([], data)
    expect(out.code == 0, f"identity transform exited {out.code}")
    expect(out.stdout == data,
           f"identity transform changed data ({len(out.stdout)}B vs {len(data)}B)")

    path = h.fixtures.output_path()
    try:
        code = h.subject_to_file([], path, data)
        written = path.read_bytes()
    finally:
        path.unlink()
    expect(code == 0, f"identity transform to file exited {code}")
    expect(written == data,
           f"identity transform to file changed data ({len(written)}B vs {len(data)}B)")


def check_repeatable_output(h):
    control = str(h.fixtures.path("control"))
    for args, stdin in ((["-nA", control], None),
                        (["-bsE", "-"], BLANK_INPUT)):
        first = h.run_subject(args, stdin)
        second = h.run_subject(args, stdin)
        expect(first == second, f"two runs of {args} disagree")


def check_empty_input(h):
    for spec in generate_option_specs():
        out = h.run_subject([*spec.tokens, "-"], b"")
        expect(out.stdout == b"" and out.code == 0,
               f"{spec.label}: empty input gave {len(out.stdout)}B, status {out.code}")


# =============================================================================
#                     Literal scenarios
# =============================================================================

NUMBERED = re.compile(rb"^ *(\d+)\t(.*)$")


def check_scenario_numbering(h):
    out = h.run_subject(["-n"], BLANK_INPUT)
    lines = out.stdout.split(b"\n")
    expect(lines[-1] == b"", "numbered output does not end in a newline")
    lines = lines[:-1]
    expect(len(lines) == 6, f"expected 6 numbered lines, got {len(lines)}")
    for want, (line, body) in enumerate(zip(lines, BLANK_INPUT.split(b"\n")), 1):
        m = NUMBERED.match(line)
        expect(m is not None, f"line {want} not numbered: {line!r}")
        expect(int(m.group(1)) == want and m.group(2) == body,
               f"line {want} wrong: {line!r}")


def check_scenario_squeeze(h):
    out = h.run_subject(["-s"], BLANK_INPUT)
    expect(out.stdout == b"one\n\nthree\n\n", f"squeeze gave {out.stdout!r}")


def check_scenario_number_nonblank(h):
    out = h.run_subject(["-b"], b"\nmiddle\n\n")
    lines = out.stdout.split(b"\n")
    expect(len(lines) == 4 and lines[3] == b"", f"unexpected output {out.stdout!r}")
    expect(lines[0] == b"" and lines[2] == b"", f"blank lines numbered: {out.stdout!r}")
    m = NUMBERED.match(lines[1])
    expect(m is not None and m.group(1) == b"1" and m.group(2) == b"middle",
           f"line 2 wrong: {lines[1]!r}")


def check_scenario_missing_file(h):
    missing = str(h.fixtures.fresh_dir() / "does-not-exist.txt")
    out = h.run_subject([missing])
    ref = h.run_reference([missing])
    expect(out.stdout == b"", "missing file produced stdout")
    expect(out.code not in (0, None), f"missing file exited {out.code}")
    expect(missing.encode() in out.stderr, "missing file not named in stderr")
    expect(out.stderr == ref.stderr,
           f"stderr differs: {lossy(out.stderr)!r} vs {lossy(ref.stderr)!r}")


# =============================================================================
#                     Preprocessor
# =============================================================================

def check_comment_preservation(h):
    base = h.fixtures.fresh_dir()
    src = base / "sample.asm"
    src.write_bytes(b";only comment\nmov rax, rbx ; trailing\n"
                    b"  ; indented comment\nlabel: nop\n")
    dest = base / "out" / "sample.asm"
    process_one_asm(src, dest)
    lines = dest.read_text().splitlines()
    expect(lines[0].lstrip() == ";only comment", "comment-only line removed")
    expect("mov rax, rbx" in lines[1] and ";" not in lines[1],
           "trailing comment not stripped correctly")
    expect(lines[2].lstrip() == "; indented comment", "indented comment line lost")
    expect(lines[3] == "label: nop", "code line altered")
