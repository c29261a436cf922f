"""Tests for the subject build step."""

import os
import shutil

import pytest

from wcat_harness import build
from wcat_harness.config import HarnessConfig, find_reference_binary
from wcat_harness.errors import BuildError


@pytest.fixture
def layout(tmp_path):
    src = tmp_path / "wcat"
    src.mkdir()
    return src


def touch(path, mtime):
    path.write_bytes(b"")
    os.utime(path, (mtime, mtime))


def test_needs_rebuild_when_binary_missing(layout):
    touch(layout / "wcat.asm", 100)
    assert build.needs_rebuild(layout, layout / "wcat")


def test_needs_rebuild_when_object_missing(layout):
    touch(layout / "wcat.asm", 100)
    touch(layout / "wcat", 200)
    assert build.needs_rebuild(layout, layout / "wcat")


def test_needs_rebuild_when_source_is_newer(layout):
    touch(layout / "wcat.o", 200)
    touch(layout / "wcat", 200)
    touch(layout / "wcat.asm", 300)
    assert build.needs_rebuild(layout, layout / "wcat")


def test_up_to_date(layout):
    touch(layout / "wcat.asm", 100)
    touch(layout / "wcat.o", 200)
    touch(layout / "wcat", 200)
    assert not build.needs_rebuild(layout, layout / "wcat")


def test_prebuilt_binary_without_source(layout):
    touch(layout / "wcat", 200)
    assert not build.needs_rebuild(layout, layout / "wcat")


def test_ensure_built_runs_nasm_then_ld(layout, monkeypatch, capsys):
    touch(layout / "wcat.asm", 300)
    calls = []
    monkeypatch.setattr(build, "run_cmd", lambda args, cwd=None, check=True: calls.append((args, cwd)))
    config = HarnessConfig(subject=layout / "wcat", reference=layout, source_dir=layout)
    assert build.ensure_built(config)
    assert calls == [
        (["nasm", "-f", "elf64", "wcat.asm", "-o", "wcat.o"], layout),
        (["ld", "-o", str(layout / "wcat"), "wcat.o"], layout),
    ]
    assert "[build] nasm -f elf64 wcat.asm -o wcat.o" in capsys.readouterr().out


def test_ensure_built_skips_when_disabled(layout, monkeypatch):
    monkeypatch.setattr(build, "run_cmd", lambda *a, **k: pytest.fail("should not build"))
    config = HarnessConfig(subject=layout / "wcat", reference=layout,
                           source_dir=layout, build=False)
    assert not build.ensure_built(config)
    config = HarnessConfig(subject=layout / "wcat", reference=layout)
    assert not build.ensure_built(config)


def test_ensure_built_without_source_or_binary(layout):
    config = HarnessConfig(subject=layout / "wcat", reference=layout, source_dir=layout)
    with pytest.raises(BuildError, match="wcat.asm not found"):
        build.ensure_built(config)


def test_capture_missing_tool():
    out, err, rc = build.capture(["definitely-not-a-real-tool-xyz"])
    assert rc == 127
    assert b"not found" in err


@pytest.mark.skipif(shutil.which("false") is None, reason="needs false")
def test_run_cmd_raises_on_failure():
    with pytest.raises(BuildError, match="false failed"):
        build.run_cmd(["false"])
    _, _, rc = build.run_cmd(["false"], check=False)
    assert rc != 0


def test_find_reference_binary_finds_cat(cat_path):
    found = find_reference_binary("cat")
    assert found is not None
    assert os.path.isfile(found)


def test_find_reference_binary_missing():
    assert find_reference_binary("no-such-tool-xyz") is None


def test_config_for_root(tmp_path, cat_path):
    config = HarnessConfig.for_root(tmp_path, reference=cat_path, verbose=True)
    assert config.subject == tmp_path.resolve() / "wcat" / "wcat"
    assert config.source_dir == tmp_path.resolve() / "wcat"
    assert config.verbose
    assert config.timeout is None

    explicit = HarnessConfig.for_root(tmp_path, reference=cat_path, subject=cat_path)
    assert explicit.subject == cat_path
    assert explicit.source_dir is None
