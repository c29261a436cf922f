"""cases.py — test case descriptors, their dispatcher, and the registry.

A case is a plain value: a name plus the data needed to run it. Three
shapes exist: CompareCase (diff one argv/stdin pair), FifoCase (diff a
reader fed through a named pipe) and ScriptedCase (an arbitrary check
function). run_case() is the only place that knows how to execute them.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

from .errors import CommandTimeout, HarnessError
from .report import log, report_case, report_summary


# =============================================================================
# Argument tokens
# =============================================================================

@dataclass(frozen=True)
class Fx:
    """A shared fixture: its path as an argument, its bytes as stdin."""

    name: str


@dataclass(frozen=True)
class Scratch:
    """A file written into the case's own directory before it runs."""

    name: str
    data: bytes = b""


@dataclass(frozen=True)
class Missing:
    """A path in the case's own directory that is guaranteed not to exist."""

    name: str


Arg = Union[str, Fx, Scratch, Missing]
Payload = Union[bytes, Fx]


# =============================================================================
# Descriptors
# =============================================================================

@dataclass(frozen=True)
class CompareCase:
    name: str
    args: Tuple[Arg, ...]
    stdin: Optional[Payload] = None


@dataclass(frozen=True)
class FifoCase:
    """Options followed by a FIFO path as the only operand."""

    name: str
    options: Tuple[str, ...]
    chunks: Tuple[Payload, ...]
    delay: float = 0.0


@dataclass(frozen=True)
class ScriptedCase:
    name: str
    check: Callable = field(compare=False)


Case = Union[CompareCase, FifoCase, ScriptedCase]


class _CaseDir:
    """Lazily created per-case directory for Scratch and Missing tokens."""

    def __init__(self, fixtures):
        self.fixtures = fixtures
        self._path = None

    @property
    def path(self):
        if self._path is None:
            self._path = self.fixtures.fresh_dir()
        return self._path

    def resolve(self, token):
        if isinstance(token, str):
            return token
        if isinstance(token, Fx):
            return str(self.fixtures.path(token.name))
        if isinstance(token, Scratch):
            target = self.path / token.name
            target.write_bytes(token.data)
            return str(target)
        if isinstance(token, Missing):
            return str(self.path / token.name)
        raise TypeError(f"unsupported argument token: {token!r}")


def resolve_payload(fixtures, payload):
    if payload is None or isinstance(payload, bytes):
        return payload
    if isinstance(payload, Fx):
        return fixtures.read(payload.name)
    raise TypeError(f"unsupported payload: {payload!r}")


def run_case(case, harness):
    """Execute one case; raise a HarnessError (or OSError) on failure."""
    fixtures = harness.fixtures
    if isinstance(case, CompareCase):
        case_dir = _CaseDir(fixtures)
        args = [case_dir.resolve(a) for a in case.args]
        harness.comparator.check(args, resolve_payload(fixtures, case.stdin))
    elif isinstance(case, FifoCase):
        fifo = harness.make_fifo(fixtures.fresh_dir() / "input.fifo")
        chunks = [resolve_payload(fixtures, c) for c in case.chunks]
        harness.comparator.check_fifo(fifo, case.options, chunks, case.delay)
    elif isinstance(case, ScriptedCase):
        case.check(harness)
    else:
        raise TypeError(f"unknown case type: {type(case).__name__}")


# =============================================================================
# Registry and executor
# =============================================================================

@dataclass
class RunReport:
    total: int = 0
    passed: int = 0
    filtered: bool = False
    failures: List[str] = field(default_factory=list)
    timed_out: List[str] = field(default_factory=list)

    @property
    def ok(self):
        return self.filtered or self.passed == self.total


class CaseRegistry:
    """Ordered, uniquely named collection of cases."""

    def __init__(self, cases=()):
        self._cases = {}
        self.extend(cases)

    def add(self, case):
        if case.name in self._cases:
            raise ValueError(f"duplicate test case name: {case.name!r}")
        self._cases[case.name] = case

    def extend(self, cases):
        for case in cases:
            self.add(case)

    def __len__(self):
        return len(self._cases)

    def __iter__(self):
        return iter(self._cases.values())

    def __contains__(self, name):
        return name in self._cases

    def names(self):
        return list(self._cases)

    def select(self, name_filter=None):
        if not name_filter:
            return list(self._cases.values())
        return [c for c in self._cases.values() if name_filter in c.name]

    def execute(self, harness, name_filter=None):
        """Run every selected case once, in registration order."""
        selected = self.select(name_filter)
        report = RunReport(total=len(selected), filtered=bool(name_filter))
        for case in selected:
            if harness.config.verbose:
                log(f"[RUN ] {case.name}")
            try:
                run_case(case, harness)
            except CommandTimeout as e:
                report.timed_out.append(case.name)
                report.failures.append(case.name)
                report_case("TIME", case.name, str(e))
            except (HarnessError, OSError) as e:
                report.failures.append(case.name)
                report_case("FAIL", case.name, str(e))
            else:
                report.passed += 1
                report_case("PASS", case.name)
        report_summary(report.passed, report.total, report.filtered, report.failures)
        return report
