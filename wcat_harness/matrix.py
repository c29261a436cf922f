"""matrix.py — generated flag-combination coverage.

Every non-empty subset of the short-flag alphabet is tried both bundled
(-nbs) and separated (-n -b -s); every non-empty subset of the long flags
is tried in alphabet order; a few hand-picked sequences cover orderings
bundling cannot reach. Specs are deduplicated on their exact token
sequence, so -n -b and -b -n stay distinct.
"""

import enum
from dataclasses import dataclass, field
from typing import Tuple

from .cases import CompareCase, Fx

SHORT_FLAGS = ("n", "b", "s", "E", "T", "v", "u", "A")

LONG_FLAGS = (
    "--number",
    "--number-nonblank",
    "--squeeze-blank",
    "--show-ends",
    "--show-tabs",
    "--show-nonprinting",
    "--show-all",
)

# -e and -t are shorthands (vE, vT) outside the bundling alphabet.
EXTRA_SHORT = (
    ("-e",), ("-t",),
    ("-e", "-s"), ("-t", "-s"),
    ("-e", "-n"), ("-t", "-n"),
    ("-e", "-b"), ("-t", "-b"),
    ("-e", "-u"), ("-t", "-u"),
    ("-e", "-s", "-n"), ("-t", "-s", "-n"),
    ("-e", "-s", "-b"), ("-t", "-s", "-b"),
)

ORDER_SENSITIVE = (
    ("-n", "-b"), ("-b", "-n"),
    ("-s", "-n"), ("-n", "-s"),
    ("-s", "-b"), ("-b", "-s"),
    ("-E", "-T"), ("-T", "-E"),
    ("--number", "--number-nonblank"), ("--number-nonblank", "--number"),
    ("--squeeze-blank", "--number"), ("--number", "--squeeze-blank"),
    ("--show-ends", "--show-tabs"), ("--show-tabs", "--show-ends"),
)

BINARY_OPTIONS = (
    (),
    ("-v",), ("-A",), ("-t",), ("-e",),
    ("--show-nonprinting",), ("--show-all",), ("--show-ends",), ("--show-tabs",),
)


class FixtureKey(enum.Enum):
    PLAIN = "sample_a"
    BLANK = "blank"
    TABS = "tabs"
    MIXED = "mixed"
    CONTROL = "control"
    NO_NEWLINE = "no_newline"
    BINARY = "binary"


@dataclass(frozen=True)
class OptionSpec:
    """A label plus the ordered tokens it stands for; equal iff tokens are."""

    label: str = field(compare=False)
    tokens: Tuple[str, ...]


def subsets(alphabet):
    """Every non-empty subset, members kept in alphabet order."""
    for mask in range(1, 1 << len(alphabet)):
        yield tuple(sym for i, sym in enumerate(alphabet) if mask >> i & 1)


class OptionMatrix:
    """Insertion-ordered set of OptionSpecs; the first registration wins."""

    def __init__(self):
        self._specs = {}

    def add(self, label, tokens):
        spec = OptionSpec(label, tuple(tokens))
        if spec in self._specs:
            return False
        self._specs[spec] = spec
        return True

    def __iter__(self):
        return iter(self._specs)

    def __len__(self):
        return len(self._specs)


def generate_option_specs():
    matrix = OptionMatrix()
    matrix.add("no options", ())

    for flags in subsets(SHORT_FLAGS):
        bundled = "-" + "".join(flags)
        matrix.add(f"short bundled {bundled}", (bundled,))
        if len(flags) > 1:
            separate = tuple(f"-{f}" for f in flags)
            matrix.add("short separate " + " ".join(separate), separate)

    for tokens in EXTRA_SHORT:
        matrix.add("short extra " + " ".join(tokens), tokens)

    for tokens in subsets(LONG_FLAGS):
        matrix.add("long " + " ".join(tokens), tokens)

    for tokens in ORDER_SENSITIVE:
        matrix.add("order " + " ".join(tokens), tokens)

    return list(matrix)


def has_short(tokens, flag):
    return any(t.startswith("-") and not t.startswith("--") and flag in t[1:]
               for t in tokens)


def has_long(tokens, flag):
    return flag in tokens


def pick_fixture_key(tokens):
    """Choose the content most likely to show what these flags do."""
    if has_long(tokens, "--show-all") or has_short(tokens, "A") or has_short(tokens, "t"):
        return FixtureKey.MIXED
    if has_short(tokens, "T") or has_long(tokens, "--show-tabs"):
        return FixtureKey.TABS
    if (has_short(tokens, "e") or has_short(tokens, "v")
            or has_long(tokens, "--show-nonprinting")):
        return FixtureKey.CONTROL
    if (any(has_short(tokens, f) for f in "sbn")
            or any(has_long(tokens, f) for f in
                   ("--squeeze-blank", "--number-nonblank", "--number"))):
        return FixtureKey.BLANK
    if has_short(tokens, "E") or has_long(tokens, "--show-ends"):
        return FixtureKey.NO_NEWLINE
    return FixtureKey.PLAIN


def cases_for_spec(spec):
    """The four input shapes every option spec is run against."""
    content = Fx(pick_fixture_key(spec.tokens).value)
    second = Fx("sample_b")
    opts = spec.tokens
    return [
        CompareCase(f"matrix file {spec.label}", (*opts, content)),
        CompareCase(f"matrix multi {spec.label}", (*opts, content, second)),
        CompareCase(f"matrix stdin {spec.label}", (*opts, "-"), stdin=content),
        CompareCase(f"matrix stdin+file {spec.label}", (*opts, "-", second), stdin=content),
    ]


def matrix_cases(specs=None):
    if specs is None:
        specs = generate_option_specs()
    cases = []
    for spec in specs:
        cases.extend(cases_for_spec(spec))
    for opts in BINARY_OPTIONS:
        label = " ".join(opts) if opts else "(none)"
        cases.append(CompareCase(f"matrix binary {label}",
                                 (*opts, Fx(FixtureKey.BINARY.value))))
    return cases
