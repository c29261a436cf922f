"""Shared fixtures: the system cat plays both subject and reference."""

import shutil
import subprocess
from pathlib import Path

import pytest

from wcat_harness.config import HarnessConfig
from wcat_harness.fixtures import Fixtures
from wcat_harness.harness import Harness
from wcat_harness.runner import ProcessRunner

CAT = shutil.which("cat")


def _is_gnu(path):
    if path is None:
        return False
    out = subprocess.run([path, "--version"], capture_output=True)
    return b"GNU" in out.stdout


IS_GNU_CAT = _is_gnu(CAT)

needs_cat = pytest.mark.skipif(CAT is None, reason="no cat on PATH")
needs_gnu_cat = pytest.mark.skipif(not IS_GNU_CAT, reason="GNU cat required")


@pytest.fixture
def cat_path():
    if CAT is None:
        pytest.skip("no cat on PATH")
    return Path(CAT)


@pytest.fixture
def config(cat_path):
    return HarnessConfig(subject=cat_path, reference=cat_path, build=False)


@pytest.fixture
def runner(config):
    return ProcessRunner(config)


@pytest.fixture
def fixtures():
    with Fixtures.provision() as fx:
        yield fx


@pytest.fixture
def harness(config, fixtures):
    return Harness(config, fixtures)


@pytest.fixture
def make_script(tmp_path):
    """Write an executable shell script and return its path."""
    def _make(name, body):
        path = tmp_path / name
        path.write_text("#!/bin/sh\n" + body)
        path.chmod(0o755)
        return path
    return _make
