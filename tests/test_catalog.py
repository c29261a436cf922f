"""Tests for the assembled case catalog."""

from wcat_harness.cases import CompareCase, FifoCase, Scratch, ScriptedCase
from wcat_harness.catalog import CRLF, HAND_WRITTEN, build_registry
from wcat_harness.harness import run_tests
from wcat_harness.matrix import matrix_cases


def test_registry_has_hand_written_and_matrix_cases():
    registry = build_registry()
    assert len(registry) == len(HAND_WRITTEN) + len(matrix_cases())
    assert registry.names()[0] == "single file"
    assert "matrix stdin+file order -b -n" in registry


def test_without_matrix():
    assert len(build_registry(include_matrix=False)) == len(HAND_WRITTEN)


def test_every_case_has_a_known_shape():
    for case in HAND_WRITTEN:
        assert isinstance(case, (CompareCase, FifoCase, ScriptedCase))
        if isinstance(case, ScriptedCase):
            assert callable(case.check)


def test_crlf_payload_is_real_crlf():
    assert CRLF == b"one\r\ntwo\r\n"
    crlf_cases = [c for c in HAND_WRITTEN if c.name.startswith("crlf file")]
    assert len(crlf_cases) == 3
    for case in crlf_cases:
        assert case.args[1] == Scratch(case.args[1].name, CRLF)


def test_fifo_cases_end_to_end(config, capsys):
    report = run_tests(config, "fifo")
    assert report.filtered
    assert report.total == 12
    assert report.passed == 12
    assert "12/12 tests executed (filtered)." in capsys.readouterr().out
