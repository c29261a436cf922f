"""Tests for fixture provisioning."""

import pytest

from wcat_harness.config import BINARY_FIXTURE_SIZE, RANDOM_PAYLOAD_SIZE
from wcat_harness.fixtures import Fixtures


def test_fixture_contents(fixtures):
    assert fixtures.read("sample_a") == b"alpha\n"
    assert fixtures.read("blank") == b"one\n\n\nthree\n\n\n"
    assert fixtures.path("option_like").name == "-n"
    assert fixtures.path("dash_name").name == "-dash.txt"
    assert fixtures.read("empty") == b""
    assert fixtures.read("no_newline") == b"no newline"
    assert fixtures.read("large").startswith(b"line 1\nline 2\n")
    assert fixtures.read("large").endswith(b"line 3000\n")
    assert fixtures.path("dir").is_dir()


def test_buffers_and_binary_sizes(fixtures):
    assert fixtures.read("stdin_data") == b"stdin data\n"
    assert len(fixtures.read("random")) == RANDOM_PAYLOAD_SIZE
    assert len(fixtures.read("binary")) == BINARY_FIXTURE_SIZE


def test_binary_content_is_deterministic(tmp_path):
    (tmp_path / "one").mkdir()
    (tmp_path / "two").mkdir()
    one = Fixtures.create(tmp_path / "one")
    two = Fixtures.create(tmp_path / "two")
    assert one.read("binary") == two.read("binary")
    assert one.read("random") == two.read("random")


def test_unknown_fixture_is_a_key_error(fixtures):
    with pytest.raises(KeyError):
        fixtures.path("nonexistent")


def test_fresh_dirs_are_distinct_and_empty(fixtures):
    first = fixtures.fresh_dir()
    second = fixtures.fresh_dir()
    assert first != second
    assert first.parent == fixtures.root
    assert list(first.iterdir()) == []


def test_output_path_is_empty_file(fixtures):
    path = fixtures.output_path()
    assert path.is_file()
    assert path.read_bytes() == b""


def test_provision_cleans_up():
    with Fixtures.provision() as fx:
        root = fx.root
        fx.fresh_dir()
        assert root.exists()
    assert not root.exists()
