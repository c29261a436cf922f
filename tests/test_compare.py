"""Tests for the Comparator and mismatch reports."""

import pytest

from wcat_harness.config import HarnessConfig
from wcat_harness.errors import MismatchError
from wcat_harness.fifo import make_fifo
from wcat_harness.harness import Harness


def comparator_for(subject, cat_path, fixtures):
    config = HarnessConfig(subject=subject, reference=cat_path, build=False)
    return Harness(config, fixtures).comparator


def test_identical_programs_match(harness):
    sample = str(harness.fixtures.path("blank"))
    assert harness.comparator.compare(["-n", sample]) is None
    assert harness.comparator.compare(["-"], b"via stdin\n") is None


def test_stdout_divergence_in_pipe_mode(make_script, cat_path, fixtures):
    subject = make_script("noisy", 'cat "$@"\necho extra\n')
    comparator = comparator_for(subject, cat_path, fixtures)
    mismatch = comparator.compare([str(fixtures.path("sample_a"))])
    assert mismatch.mode == "pipe"
    assert mismatch.subject.stdout == b"alpha\nextra\n"
    assert mismatch.reference.stdout == b"alpha\n"
    text = mismatch.render()
    assert "=== wcat stdout (12B) ===" in text
    assert "=== cat stdout (6B) ===" in text
    assert "extra" in text


def test_exit_code_divergence(make_script, cat_path, fixtures):
    subject = make_script("grumpy", 'cat "$@"\nexit 3\n')
    comparator = comparator_for(subject, cat_path, fixtures)
    mismatch = comparator.compare(["-"], b"x\n")
    assert mismatch.subject.code == 3
    assert mismatch.reference.code == 0
    assert "=== wcat status ===\n3" in mismatch.render()


def test_divergence_only_when_writing_to_a_file(make_script, cat_path, fixtures):
    subject = make_script(
        "filey",
        'if [ -p /dev/stdout ]; then exec cat "$@"; fi\ncat "$@"\nprintf tail\n')
    comparator = comparator_for(subject, cat_path, fixtures)
    mismatch = comparator.compare(["-"], b"data\n")
    assert mismatch.mode == "file"
    assert mismatch.subject.stdout == b"data\ntail"
    assert mismatch.render().startswith("file output mismatch for args ['-'] (wcat 9B")


def test_check_raises_with_report(make_script, cat_path, fixtures):
    subject = make_script("silent", "exit 0\n")
    comparator = comparator_for(subject, cat_path, fixtures)
    with pytest.raises(MismatchError, match="pipe output mismatch") as info:
        comparator.check([str(fixtures.path("sample_a"))])
    assert info.value.mismatch.subject.stdout == b""


def test_output_files_are_removed(harness):
    before = set(harness.fixtures.root.iterdir())
    harness.comparator.check(["-"], b"abc")
    assert set(harness.fixtures.root.iterdir()) == before


def test_fifo_comparison(harness, tmp_path):
    fifo = make_fifo(tmp_path / "cmp.fifo")
    assert harness.comparator.compare_fifo(fifo, ("-E",), [b"one\n", b"two\n"], 0.01) is None


def test_fifo_divergence(make_script, cat_path, fixtures, tmp_path):
    subject = make_script("fifo-noisy", 'cat "$@"\necho extra\n')
    comparator = comparator_for(subject, cat_path, fixtures)
    fifo = make_fifo(tmp_path / "div.fifo")
    with pytest.raises(MismatchError, match="fifo output mismatch"):
        comparator.check_fifo(fifo, (), [b"payload\n"])


def test_file_mismatch_report_shows_both_buffers(make_script, cat_path, fixtures):
    subject = make_script(
        "filey",
        'if [ -p /dev/stdout ]; then exec cat "$@"; fi\ncat "$@"\nprintf tail\n')
    comparator = comparator_for(subject, cat_path, fixtures)
    text = comparator.compare(["-"], b"data\n").render()
    assert "=== wcat file (9B) ===\ndata\ntail" in text
    assert "=== cat file (5B) ===\ndata\n" in text
