"""Tests for the generated option matrix."""

from wcat_harness.cases import CompareCase, Fx
from wcat_harness.matrix import (
    BINARY_OPTIONS,
    FixtureKey,
    OptionMatrix,
    OptionSpec,
    generate_option_specs,
    has_long,
    has_short,
    matrix_cases,
    pick_fixture_key,
    subsets,
)


def test_subsets_cover_every_non_empty_combination():
    result = list(subsets("abc"))
    assert len(result) == 7
    assert ("a",) in result
    assert ("a", "c") in result
    assert ("a", "b", "c") in result
    assert () not in result


def test_subsets_keep_alphabet_order():
    alphabet = "nbsETvuA"
    for subset in subsets(alphabet):
        assert list(subset) == sorted(subset, key=alphabet.index)


def test_option_spec_equality_ignores_label():
    assert OptionSpec("one", ("-n", "-b")) == OptionSpec("two", ("-n", "-b"))
    assert hash(OptionSpec("one", ("-n",))) == hash(OptionSpec("two", ("-n",)))


def test_option_spec_order_is_significant():
    assert OptionSpec("x", ("-n", "-b")) != OptionSpec("x", ("-b", "-n"))


def test_option_matrix_first_registration_wins():
    matrix = OptionMatrix()
    assert matrix.add("first", ("-n", "-b"))
    assert not matrix.add("second", ("-n", "-b"))
    assert matrix.add("reversed", ("-b", "-n"))
    assert [s.label for s in matrix] == ["first", "reversed"]


def test_generated_spec_count():
    # 1 empty + 255 bundled + 247 separated + 14 extra + 127 long + 7 new orders
    assert len(generate_option_specs()) == 651


def test_generated_specs_are_unique_and_start_empty():
    specs = generate_option_specs()
    assert len({s.tokens for s in specs}) == len(specs)
    assert specs[0] == OptionSpec("no options", ())
    assert specs[1].label == "short bundled -n"


def test_duplicate_orders_keep_earlier_label():
    labels = {s.tokens: s.label for s in generate_option_specs()}
    assert labels[("-n", "-b")] == "short separate -n -b"
    assert labels[("-b", "-n")] == "order -b -n"
    assert labels[("--number", "--number-nonblank")] == "long --number --number-nonblank"
    assert labels[("--number-nonblank", "--number")] == "order --number-nonblank --number"


def test_has_short_and_long():
    assert has_short(("-nbA",), "A")
    assert not has_short(("--show-all",), "A")
    assert not has_short(("file",), "f")
    assert has_long(("--number",), "--number")
    assert not has_long(("--number-nonblank",), "--number")


def test_pick_fixture_key_priority():
    assert pick_fixture_key(("-nA",)) is FixtureKey.MIXED
    assert pick_fixture_key(("-t",)) is FixtureKey.MIXED
    assert pick_fixture_key(("--show-all", "-T")) is FixtureKey.MIXED
    assert pick_fixture_key(("-nT",)) is FixtureKey.TABS
    assert pick_fixture_key(("--show-tabs",)) is FixtureKey.TABS
    assert pick_fixture_key(("-e",)) is FixtureKey.CONTROL
    assert pick_fixture_key(("-sv",)) is FixtureKey.CONTROL
    assert pick_fixture_key(("--show-nonprinting",)) is FixtureKey.CONTROL
    assert pick_fixture_key(("-E", "-s")) is FixtureKey.BLANK
    assert pick_fixture_key(("--number",)) is FixtureKey.BLANK
    assert pick_fixture_key(("-E",)) is FixtureKey.NO_NEWLINE
    assert pick_fixture_key(("--show-ends",)) is FixtureKey.NO_NEWLINE
    assert pick_fixture_key(("-u",)) is FixtureKey.PLAIN
    assert pick_fixture_key(()) is FixtureKey.PLAIN


def test_matrix_cases_shapes():
    spec = OptionSpec("short bundled -T", ("-T",))
    cases = matrix_cases([spec])
    tabs = Fx("tabs")
    second = Fx("sample_b")
    assert cases[:4] == [
        CompareCase("matrix file short bundled -T", ("-T", tabs)),
        CompareCase("matrix multi short bundled -T", ("-T", tabs, second)),
        CompareCase("matrix stdin short bundled -T", ("-T", "-"), stdin=tabs),
        CompareCase("matrix stdin+file short bundled -T", ("-T", "-", second), stdin=tabs),
    ]
    assert len(cases) == 4 + len(BINARY_OPTIONS)


def test_matrix_cases_full_count_and_unique_names():
    cases = matrix_cases()
    assert len(cases) == 651 * 4 + len(BINARY_OPTIONS)
    assert len({c.name for c in cases}) == len(cases)


def test_binary_matrix_cases_use_binary_fixture():
    binary = [c for c in matrix_cases([]) if c.name.startswith("matrix binary")]
    assert len(binary) == 9
    assert all(c.args[-1] == Fx("binary") for c in binary)
    assert binary[0].args == (Fx("binary"),)
