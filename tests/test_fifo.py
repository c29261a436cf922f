"""Tests for the FIFO producer and synchronizer."""

import pytest

from wcat_harness.errors import FifoError
from wcat_harness.fifo import FifoProducer, FifoSynchronizer, make_fifo


@pytest.fixture
def sync(runner):
    return FifoSynchronizer(runner)


def test_make_fifo_twice_fails(tmp_path):
    path = make_fifo(tmp_path / "p.fifo")
    assert path.is_fifo()
    with pytest.raises(FifoError, match="cannot create fifo"):
        make_fifo(path)


def test_single_chunk_round_trip(sync, cat_path, tmp_path):
    fifo = make_fifo(tmp_path / "in.fifo")
    out = sync.run(cat_path, fifo, (), [b"payload\n"])
    assert out.stdout == b"payload\n"
    assert out.code == 0


def test_delayed_chunks_arrive_in_order(sync, cat_path, tmp_path):
    fifo = make_fifo(tmp_path / "stream.fifo")
    out = sync.run(cat_path, fifo, (), [b"chunk1\n", b"chunk2\n", b"chunk3\n"], delay=0.05)
    assert out.stdout == b"chunk1\nchunk2\nchunk3\n"


def test_options_precede_fifo_operand(sync, cat_path, tmp_path):
    fifo = make_fifo(tmp_path / "opts.fifo")
    out = sync.run(cat_path, fifo, ("-n",), [b"a\n"])
    assert out.stdout.endswith(b"\ta\n")


def test_run_to_file(sync, cat_path, tmp_path):
    fifo = make_fifo(tmp_path / "file.fifo")
    target = tmp_path / "out"
    code = sync.run_to_file(cat_path, fifo, (), [b"x", b"y"], target, delay=0.01)
    assert code == 0
    assert target.read_bytes() == b"xy"


def test_reader_that_never_opens_does_not_hang(sync, make_script, tmp_path):
    fifo = make_fifo(tmp_path / "ignored.fifo")
    script = make_script("ignore", "exit 3\n")
    out = sync.run(script, fifo, (), [b"never read\n"])
    assert out.code == 3


def test_producer_error_is_raised_on_finish(tmp_path):
    producer = FifoProducer(str(tmp_path / "absent" / "x.fifo"), [b"data"])
    producer.start()
    with pytest.raises(FifoError, match="writing to fifo"):
        producer.finish()
