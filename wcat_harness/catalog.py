"""catalog.py — the hand-written cases, plus the generated matrix."""

from . import checks
from .cases import CaseRegistry, CompareCase, FifoCase, Fx, Missing, Scratch, ScriptedCase
from .matrix import matrix_cases

SAMPLE_A = Fx("sample_a")
SAMPLE_B = Fx("sample_b")
BLANK = Fx("blank")
TABS = Fx("tabs")
CONTROL = Fx("control")
EMPTY = Fx("empty")
NO_NEWLINE = Fx("no_newline")
LARGE = Fx("large")
HUGE = Fx("huge")
BINARY = Fx("binary")
DIR = Fx("dir")
DASH_NAME = Fx("dash_name")
OPTION_LIKE = Fx("option_like")
DASH_V_FILE = Fx("dash_v_file")
STDIN_DATA = Fx("stdin_data")
STDIN_MIX = Fx("stdin_mix")
RANDOM = Fx("random")

MILLION_LINES = b"x\n" * 1_000_005
LONG_LINE = b"x" * 600_000
CRLF = b"one\r\ntwo\r\n"
ONLY_NEWLINES = b"\n\n\n\n"


def named_file(name, data):
    """`-- <file called name>`: an option-looking filename taken literally."""
    return ("--", Scratch(name, data))


# =============================================================================
#                     Basic operands and stdin
# =============================================================================

BASIC = [
    CompareCase("single file", (SAMPLE_A,)),
    CompareCase("multiple files", (SAMPLE_A, SAMPLE_B, BLANK)),
    CompareCase("stdin only", ("-",), STDIN_DATA),
    CompareCase("dash operand", (SAMPLE_A, "-", SAMPLE_B), STDIN_MIX),
    CompareCase("empty file", (EMPTY,)),
    CompareCase("large file streaming", (LARGE,)),
    CompareCase("binary passthrough", (BINARY,)),
    CompareCase("binary passthrough pipe", ("-",), RANDOM),
    CompareCase("stdin empty", ("-",), b""),
    CompareCase("double stdin operands", ("-", "-"), STDIN_DATA),
    CompareCase("dev null operand", ("/dev/null",)),
    CompareCase("space in filename", (Scratch("space name.txt", b"space\n"),)),
]

# =============================================================================
#                     Option parsing
# =============================================================================

PARSING = [
    CompareCase("dash filename", ("--", DASH_NAME)),
    CompareCase("dash filename with numbering", ("-n", "--", DASH_NAME)),
    CompareCase("option-like operand after file", (SAMPLE_A, OPTION_LIKE)),
    CompareCase("-- stops option parsing", ("--", DASH_V_FILE)),
    CompareCase("-- mid-argv parsing", ("-n", "--", "-n", SAMPLE_A)),
    CompareCase("stdin then option-like operand", ("-", "-n"), STDIN_DATA),
    CompareCase("multiple -- markers",
                ("--", SAMPLE_A, Scratch("--", b"double dash file\n"), SAMPLE_B)),
    CompareCase("redundant -n flags", ("-n", "-n", SAMPLE_A)),
    CompareCase("options after operand parsed", (SAMPLE_A, "-n")),
    CompareCase("long option after operand", (SAMPLE_A, "--number")),
    CompareCase("long option stdin", ("--number", "-"), STDIN_DATA),
    CompareCase("option permutation mixed", (SAMPLE_A, "-n", SAMPLE_B, "--show-ends")),
    CompareCase("option permutation stdin", (SAMPLE_A, "-", "-n", SAMPLE_B),
                b"stdin line 1\nstdin line 2\n"),
    CompareCase("double dash no operands", ("--",), STDIN_DATA),
    CompareCase("invalid long option", ("--nope",)),
    CompareCase("invalid long option equals", ("--number=1",)),
    CompareCase("unknown long option equals", ("--nope=1",)),
    CompareCase("long option disallow arg", ("--help=1",)),
    CompareCase("bad option error", ("-x",)),
    CompareCase("bad option bundle", ("-nZ",)),
    CompareCase("-- then -n filename", ("--", OPTION_LIKE)),
    CompareCase("dash file before options", ("--", DASH_NAME, "-n")),
    CompareCase("literal dash filename", named_file("-", b"dash literal\n")),
    CompareCase("stdin via -- then file", ("--", "-", SAMPLE_A), STDIN_DATA),
    CompareCase("mixed stdin and file numbering", ("-n", "-", SAMPLE_A, "-"),
                b"stdin first\nstdin second\n"),
    CompareCase("double dash then dash", ("--", "-"), STDIN_DATA),
    CompareCase("stdin with option between dashes", ("-", "-n", "-"), b"first\nsecond\n"),
    CompareCase("multiple stdin operands with options", ("-n", "-", "-", "-"), b"a\nb\n"),
    CompareCase("double stdin --number", ("--number", "-", "-"), STDIN_DATA),
    CompareCase("file named --help with --", named_file("--help", b"help file\n")),
    CompareCase("file named --version with --", named_file("--version", b"version file\n")),
    CompareCase("file named --show-ends with --",
                named_file("--show-ends", b"show ends file\n")),
    CompareCase("file named --number with --", named_file("--number", b"number file\n")),
    CompareCase("file named --show-tabs with --", named_file("--show-tabs", b"tabs file\n")),
    CompareCase("file named --squeeze-blank with --",
                named_file("--squeeze-blank", b"squeeze file\n")),
    CompareCase("file named -e with --", named_file("-e", b"dash e file\n")),
    CompareCase("file named -- with -n",
                ("-n", "--", Scratch("--", b"double dash file\n"))),
    CompareCase("file named --number with -n",
                ("-n", "--", Scratch("--number", b"number file\n"))),
    CompareCase("file named -A with --", named_file("-A", b"dash A file\n")),
    CompareCase("file named --show-all with --", named_file("--show-all", b"show all file\n")),
    CompareCase("file named --show-nonprinting with --",
                named_file("--show-nonprinting", b"show nonprinting file\n")),
]

# =============================================================================
#                     Single flags and short combinations
# =============================================================================

FLAGS = [
    CompareCase("-n option", ("-n", BLANK)),
    CompareCase("-n across files", ("-n", SAMPLE_A, BLANK)),
    CompareCase("-E option", ("-E", BLANK)),
    CompareCase("-T option (file)", ("-T", TABS)),
    CompareCase("-T option (stdin)", ("-T", "-"), TABS),
    CompareCase("-E option large", ("-E", LARGE)),
    CompareCase("-E option huge", ("-E", HUGE)),
    CompareCase("-nET combo", ("-nET", TABS)),
    CompareCase("-EnT combo order", ("-EnT", TABS)),
    CompareCase("stdin numbered", ("-n", "-"), STDIN_DATA),
    CompareCase("no newline + -E", ("-E", NO_NEWLINE)),
    CompareCase("-n large file", ("-n", LARGE)),
    CompareCase("bundle -nb", ("-nb", BLANK)),
    CompareCase("bundle -bn", ("-bn", BLANK)),
    CompareCase("bundle -ns", ("-ns", BLANK)),
    CompareCase("bundle -sn", ("-sn", BLANK)),
    CompareCase("-n empty file", ("-n", EMPTY)),
    CompareCase("-b empty file", ("-b", EMPTY)),
    CompareCase("-s empty file", ("-s", EMPTY)),
    CompareCase("-v with tabs file", ("-v", TABS)),
    CompareCase("-T with no tabs", ("-T", SAMPLE_A)),
    CompareCase("-E with tabs file", ("-E", TABS)),
    CompareCase("-A with tabs file", ("-A", TABS)),
    CompareCase("-e with no newline", ("-e", NO_NEWLINE)),
    CompareCase("-t with tabs via stdin", ("-t", "-"), TABS),
    CompareCase("-b option", ("-b", BLANK)),
    CompareCase("-s option", ("-s", BLANK)),
    CompareCase("-v option", ("-v", CONTROL)),
    CompareCase("-A shortcut", ("-A", CONTROL)),
    CompareCase("-e shortcut", ("-e", CONTROL)),
    CompareCase("-t shortcut", ("-t", TABS)),
    CompareCase("-u option", ("-u", SAMPLE_A)),
    CompareCase("bundled options -bnEs", ("-bnEs", BLANK)),
    CompareCase("huge file numbering", ("-n", HUGE)),
    CompareCase("-bs combo", ("-b", "-s", BLANK)),
    CompareCase("-nT combo", ("-nT", TABS)),
    CompareCase("stdin huge numbering", ("-n", "-"), HUGE),
    CompareCase("no newline + -n", ("-n", NO_NEWLINE)),
    CompareCase("no newline + -b", ("-b", NO_NEWLINE)),
    CompareCase("no newline + -A", ("-A", NO_NEWLINE)),
    CompareCase("-s with no blanks", ("-s", SAMPLE_A)),
    CompareCase("combo -ns across files", ("-ns", SAMPLE_A, BLANK)),
    CompareCase("binary with -v", ("-v", BINARY)),
    CompareCase("binary with -A", ("-A", BINARY)),
    CompareCase("binary with -T", ("-T", BINARY)),
    CompareCase("binary with -E", ("-E", BINARY)),
    CompareCase("combo -nE", ("-nE", BLANK)),
    CompareCase("combo -bE", ("-bE", BLANK)),
    CompareCase("combo -bT", ("-bT", TABS)),
    CompareCase("combo -sE", ("-sE", BLANK)),
    CompareCase("combo -sT", ("-sT", TABS)),
    CompareCase("combo -A -s", ("-As", BLANK)),
    CompareCase("combo -e -s", ("-es", BLANK)),
    CompareCase("combo -t -s", ("-ts", BLANK)),
    CompareCase("order -b then -n", ("-b", "-n", BLANK)),
    CompareCase("order -n then -b", ("-n", "-b", BLANK)),
    CompareCase("order --number then --number-nonblank",
                ("--number", "--number-nonblank", BLANK)),
    CompareCase("order --number-nonblank then --number",
                ("--number-nonblank", "--number", BLANK)),
    CompareCase("order -s then -n", ("-s", "-n", BLANK)),
    CompareCase("order -n then -s", ("-n", "-s", BLANK)),
    CompareCase("order -E then -T", ("-E", "-T", TABS)),
    CompareCase("order -T then -E", ("-T", "-E", TABS)),
    CompareCase("combo -nsvE", ("-nsvE", CONTROL)),
    CompareCase("combo -bsvE", ("-bsvE", CONTROL)),
    CompareCase("repeat -n", ("-nn", BLANK)),
    CompareCase("combo -e -t", ("-e", "-t", TABS)),
    CompareCase("combo -t -e", ("-t", "-e", TABS)),
    CompareCase("combo -e -n", ("-e", "-n", BLANK)),
    CompareCase("combo -t -n", ("-t", "-n", TABS)),
    CompareCase("combo -e -b", ("-e", "-b", BLANK)),
    CompareCase("combo -t -b", ("-t", "-b", TABS)),
    CompareCase("combo -u -n", ("-u", "-n", BLANK)),
    CompareCase("combo -u -b", ("-u", "-b", BLANK)),
    CompareCase("combo -u -s", ("-u", "-s", BLANK)),
    CompareCase("combo -u -v", ("-u", "-v", CONTROL)),
    CompareCase("combo -u --show-all", ("-u", "--show-all", CONTROL)),
    CompareCase("combo -A -n", ("-A", "-n", CONTROL)),
    CompareCase("combo -A -b", ("-A", "-b", CONTROL)),
    CompareCase("stdin -A tabs", ("-A", "-"), TABS),
    CompareCase("stdin -A control", ("-A", "-"), CONTROL),
    CompareCase("stdin -b blanks", ("-b", "-"), BLANK),
    CompareCase("stdin -nE blanks", ("-nE", "-"), BLANK),
    CompareCase("stdin -bE blanks", ("-bE", "-"), BLANK),
    CompareCase("stdin -sE blanks", ("-sE", "-"), BLANK),
    CompareCase("stdin -v binary", ("-v", "-"), BINARY),
    CompareCase("stdin empty with -n", ("-n", "-"), b""),
]

# =============================================================================
#                     Long options
# =============================================================================

LONG = [
    CompareCase("long option --number", ("--number", BLANK)),
    CompareCase("long option --number-nonblank", ("--number-nonblank", BLANK)),
    CompareCase("long option --squeeze-blank", ("--squeeze-blank", BLANK)),
    CompareCase("long option --show-ends", ("--show-ends", BLANK)),
    CompareCase("long option --show-tabs", ("--show-tabs", TABS)),
    CompareCase("long option --show-nonprinting", ("--show-nonprinting", CONTROL)),
    CompareCase("long option --show-all", ("--show-all", CONTROL)),
    CompareCase("--show-ends stdin", ("--show-ends", "-"), STDIN_DATA),
    CompareCase("--show-tabs stdin", ("--show-tabs", "-"), TABS),
    CompareCase("--show-nonprinting stdin", ("--show-nonprinting", "-"), CONTROL),
    CompareCase("--show-all stdin", ("--show-all", "-"), CONTROL),
    CompareCase("--number-nonblank stdin", ("--number-nonblank", "-"), BLANK),
    CompareCase("--squeeze-blank stdin", ("--squeeze-blank", "-"), BLANK),
    CompareCase("stdin --show-ends no newline", ("--show-ends", "-"), NO_NEWLINE),
    CompareCase("--number --show-ends", ("--number", "--show-ends", BLANK)),
    CompareCase("--number --show-tabs", ("--number", "--show-tabs", TABS)),
    CompareCase("--number --show-nonprinting", ("--number", "--show-nonprinting", CONTROL)),
    CompareCase("--number --show-all", ("--number", "--show-all", CONTROL)),
    CompareCase("--number-nonblank --show-ends", ("--number-nonblank", "--show-ends", BLANK)),
    CompareCase("--number-nonblank --show-tabs", ("--number-nonblank", "--show-tabs", TABS)),
    CompareCase("--number-nonblank --show-nonprinting",
                ("--number-nonblank", "--show-nonprinting", CONTROL)),
    CompareCase("--number-nonblank --show-all",
                ("--number-nonblank", "--show-all", CONTROL)),
    CompareCase("--squeeze-blank --number", ("--squeeze-blank", "--number", BLANK)),
    CompareCase("--squeeze-blank --number-nonblank",
                ("--squeeze-blank", "--number-nonblank", BLANK)),
    CompareCase("--squeeze-blank --show-ends", ("--squeeze-blank", "--show-ends", BLANK)),
    CompareCase("--squeeze-blank --show-tabs", ("--squeeze-blank", "--show-tabs", TABS)),
    CompareCase("--squeeze-blank --show-nonprinting",
                ("--squeeze-blank", "--show-nonprinting", CONTROL)),
    CompareCase("--squeeze-blank --show-all", ("--squeeze-blank", "--show-all", CONTROL)),
    CompareCase("stdin + file --number", ("--number", "-", SAMPLE_A), STDIN_DATA),
    CompareCase("stdin + file --number-nonblank", ("--number-nonblank", "-", SAMPLE_A), BLANK),
    CompareCase("stdin + file --show-ends", ("--show-ends", "-", SAMPLE_A), STDIN_DATA),
    CompareCase("stdin + file --show-tabs", ("--show-tabs", "-", SAMPLE_A), TABS),
    CompareCase("stdin + file --show-nonprinting",
                ("--show-nonprinting", "-", SAMPLE_A), CONTROL),
    CompareCase("stdin + file --show-all", ("--show-all", "-", SAMPLE_A), CONTROL),
    CompareCase("file stdin file --number", ("--number", SAMPLE_A, "-", SAMPLE_B),
                b"stdin line 1\nstdin line 2\n"),
    CompareCase("file stdin file --number-nonblank",
                ("--number-nonblank", SAMPLE_A, "-", SAMPLE_B), b"\nstdin\n\n"),
    CompareCase("file stdin file --squeeze-blank",
                ("--squeeze-blank", SAMPLE_A, "-", SAMPLE_B), b"line1\n\n\nline2\n"),
    CompareCase("file stdin file --show-ends", ("--show-ends", SAMPLE_A, "-", SAMPLE_B),
                b"stdin\n"),
    CompareCase("file stdin file --show-tabs", ("--show-tabs", SAMPLE_A, "-", SAMPLE_B), TABS),
    CompareCase("file stdin file --show-all", ("--show-all", SAMPLE_A, "-", SAMPLE_B), CONTROL),
    CompareCase("redundant --number -n", ("--number", "-n", BLANK)),
    CompareCase("redundant --number-nonblank -b", ("--number-nonblank", "-b", BLANK)),
    CompareCase("redundant --squeeze-blank -s", ("--squeeze-blank", "-s", BLANK)),
    CompareCase("redundant --show-ends -E", ("--show-ends", "-E", BLANK)),
    CompareCase("redundant --show-tabs -T", ("--show-tabs", "-T", TABS)),
    CompareCase("redundant --show-nonprinting -v", ("--show-nonprinting", "-v", CONTROL)),
    CompareCase("redundant --show-all -A", ("--show-all", "-A", CONTROL)),
    CompareCase("redundant --show-ends --show-ends", ("--show-ends", "--show-ends", BLANK)),
    CompareCase("long combo --show-nonprinting --show-ends",
                ("--show-nonprinting", "--show-ends", CONTROL)),
    CompareCase("long combo --show-nonprinting --show-tabs",
                ("--show-nonprinting", "--show-tabs", CONTROL)),
    CompareCase("long combo --show-all --number", ("--show-all", "--number", CONTROL)),
    CompareCase("long combo --show-all --number-nonblank",
                ("--show-all", "--number-nonblank", CONTROL)),
    CompareCase("long combo --show-tabs --number", ("--show-tabs", "--number", TABS)),
    CompareCase("--show-ends with -n", ("--show-ends", "-n", BLANK)),
    CompareCase("--show-tabs with -n", ("--show-tabs", "-n", TABS)),
    CompareCase("--show-nonprinting with -n", ("--show-nonprinting", "-n", CONTROL)),
    CompareCase("--show-all with -n", ("--show-all", "-n", CONTROL)),
    CompareCase("--show-ends with -b", ("--show-ends", "-b", BLANK)),
    CompareCase("--show-tabs with -b", ("--show-tabs", "-b", TABS)),
    CompareCase("--show-nonprinting with -b", ("--show-nonprinting", "-b", CONTROL)),
    CompareCase("--show-all with -b", ("--show-all", "-b", CONTROL)),
    CompareCase("-s with --number", ("-s", "--number", BLANK)),
    CompareCase("-s with --number-nonblank", ("-s", "--number-nonblank", BLANK)),
    CompareCase("-s with --show-ends", ("-s", "--show-ends", BLANK)),
    CompareCase("-s with --show-tabs", ("-s", "--show-tabs", TABS)),
    CompareCase("-s with --show-nonprinting", ("-s", "--show-nonprinting", CONTROL)),
    CompareCase("-s with --show-all", ("-s", "--show-all", CONTROL)),
    CompareCase("--show-nonprinting binary", ("--show-nonprinting", BINARY)),
    CompareCase("--show-all binary", ("--show-all", BINARY)),
    CompareCase("--show-tabs with no tabs", ("--show-tabs", SAMPLE_A)),
    CompareCase("--show-ends no newline file", ("--show-ends", NO_NEWLINE)),
    CompareCase("--number empty file", ("--number", EMPTY)),
    CompareCase("--number-nonblank empty file", ("--number-nonblank", EMPTY)),
    CompareCase("--squeeze-blank empty file", ("--squeeze-blank", EMPTY)),
    CompareCase("--show-all empty file", ("--show-all", EMPTY)),
    CompareCase("--show-nonprinting empty file", ("--show-nonprinting", EMPTY)),
]

# =============================================================================
#                     Content edge cases and cross-file state
# =============================================================================

CONTENT = [
    CompareCase("visible DEL", ("-v", Scratch("del.txt", b"del:\x7f!\n"))),
    CompareCase("visible CR", ("-v", Scratch("cr.txt", b"carriage\rreturn\n"))),
    CompareCase("visible NUL", ("-v", Scratch("nul.txt", b"nul:\0x\n"))),
    CompareCase("visible 0xFF", ("-v", Scratch("ff.txt", b"ff:\xff!\n"))),
    CompareCase("visible formfeed", ("-v", Scratch("formfeed.txt", b"form\x0cfeed\n"))),
    CompareCase("crlf file -E", ("-E", Scratch("crlf_e.txt", CRLF))),
    CompareCase("crlf file -v", ("-v", Scratch("crlf_v.txt", CRLF))),
    CompareCase("crlf file -A", ("-A", Scratch("crlf_a.txt", CRLF))),
    CompareCase("tabs + control -A", ("-A", Scratch("tabs_control.txt", b"tab\t\x01\n"))),
    CompareCase("utf8 bytes -v", ("-v", Scratch("utf8_v.txt", b"\xc3\xa9\n"))),
    CompareCase("nul file -A", ("-A", Scratch("nul_a.txt", b"nul\0end\n"))),
    CompareCase("trailing spaces -E",
                ("-E", Scratch("trail_spaces.txt", b"space \t \nnext line \n"))),
    CompareCase("leading blanks -b", ("-b", Scratch("leading_blanks.txt", b"\n\nstart\n\nend\n"))),
    CompareCase("only tabs -T", ("-T", Scratch("only_tabs.txt", b"\t\t\n\tend\n"))),
    CompareCase("tabs + blanks -sT", ("-sT", Scratch("tabs_blanks.txt", b"\n\n\tcol\n\n\n"))),
    CompareCase("tabs without newline -T", ("-T", Scratch("tabs_no_nl.txt", b"a\tb"))),
    CompareCase("tabs without newline -A", ("-A", Scratch("tabs_no_nl_a.txt", b"a\tb"))),
    CompareCase("long line no newline -n", ("-n", Scratch("long_line.txt", LONG_LINE))),
    CompareCase("large line numbers", ("-n", Scratch("million_lines.txt", MILLION_LINES))),
    CompareCase("only newlines file -s", ("-s", Scratch("only_newlines.txt", ONLY_NEWLINES))),
    CompareCase("only newlines file -b", ("-b", Scratch("only_newlines_b.txt", ONLY_NEWLINES))),
    CompareCase("only newlines file -n", ("-n", Scratch("only_newlines_n.txt", ONLY_NEWLINES))),
    CompareCase("stdin only newlines -s", ("-s", "-"), ONLY_NEWLINES),
    CompareCase("stdin only newlines -b", ("-b", "-"), b"\n\n\n"),
    CompareCase("stdin only newlines -n", ("-n", "-"), b"\n\n\n"),
    CompareCase("stdin only newlines --number-nonblank", ("--number-nonblank", "-"), b"\n\n\n"),
    CompareCase("stdin only newlines --show-ends", ("--show-ends", "-"), b"\n\n\n"),
    CompareCase("line state across files",
                ("-n", Scratch("no_newline_boundary.txt", b"first"),
                 Scratch("newline_boundary.txt", b"second\n"))),
    CompareCase("squeeze across files",
                ("-s", Scratch("blank_a.txt", b"line1\n\n"),
                 Scratch("blank_b.txt", b"\n\nline2\n"))),
    CompareCase("number nonblank across files",
                ("-b", Scratch("b_across_a.txt", b"line1\n\n"),
                 Scratch("b_across_b.txt", b"\nline2\n"))),
    CompareCase("squeeze + no newline boundary",
                ("-s", Scratch("squeeze_no_nl_a.txt", b"line1\n\n"),
                 Scratch("squeeze_no_nl_b.txt", b"\nline2"))),
    CompareCase("squeeze across three files",
                ("-s", Scratch("squeeze_three_a.txt", b"line1\n\n"),
                 Scratch("squeeze_three_b.txt", b"\n\nline2\n"),
                 Scratch("squeeze_three_c.txt", b"\n\nline3\n"))),
    CompareCase("number across empty then data",
                ("-n", Scratch("empty_then_data.txt"), SAMPLE_A)),
    CompareCase("number-nonblank across empty then data",
                ("-b", Scratch("empty_then_data_b.txt"), SAMPLE_A)),
    CompareCase("squeeze across empty then blank",
                ("-s", Scratch("empty_then_blank.txt"), BLANK)),
    CompareCase("show-ends across no-newline then file", ("-E", NO_NEWLINE, SAMPLE_B)),
    CompareCase("number across no-newline then file", ("-n", NO_NEWLINE, SAMPLE_B)),
    CompareCase("number-nonblank across no-newline then file", ("-b", NO_NEWLINE, SAMPLE_B)),
]

# =============================================================================
#                     Error paths
# =============================================================================

ERRORS = [
    CompareCase("directory operand error", (DIR,)),
    CompareCase("directory operand with -n", ("-n", DIR)),
    CompareCase("directory operand with -v", ("-v", DIR)),
    CompareCase("directory operand with -E", ("-E", DIR)),
    CompareCase("very long path ENAMETOOLONG", (Missing("a" * 5000),)),
    CompareCase("missing file error", (Missing("missing.txt"),)),
    CompareCase("missing among files", (SAMPLE_A, Missing("missing.txt"), SAMPLE_B)),
    CompareCase("missing file with -n", ("-n", Missing("missing_numbered.txt"))),
    CompareCase("missing file with -v among files",
                ("-v", SAMPLE_A, Missing("missing_visible.txt"), SAMPLE_B)),
    ScriptedCase("ENOENT vs EACCES messaging", checks.check_enoent_vs_eacces),
    ScriptedCase("ENOTDIR path", checks.check_enotdir),
    ScriptedCase("ELOOP symlink", checks.check_eloop),
    ScriptedCase("symlink to file", checks.check_symlink_to_file),
    ScriptedCase("symlink to directory", checks.check_symlink_to_dir),
    ScriptedCase("hardlink to file", checks.check_hardlink),
    ScriptedCase("symlink chain", checks.check_symlink_chain),
    ScriptedCase("relative symlink", checks.check_relative_symlink),
    ScriptedCase("broken pipe write error", checks.check_broken_pipe),
    ScriptedCase("--help switch", checks.check_help_output),
    ScriptedCase("--version switch", checks.check_version_output),
    ScriptedCase("--help stdout closed", checks.check_help_stdout_closed),
]

# =============================================================================
#                     FIFO input
# =============================================================================

FIFOS = [
    FifoCase("-T fifo fast path", ("-T",), (TABS,)),
    FifoCase("plain stdout fifo fast path", (), (LARGE,)),
    FifoCase("-n fifo fast path", ("-n",), (LARGE,)),
    FifoCase("-v fifo fast path", ("-v",), (CONTROL,)),
    FifoCase("fifo decorated -vE", ("-vE",), (b"line1\n\nline2\tend\n",)),
    FifoCase("fifo squeeze blank", ("-s",), (b"one\n\n\n\nthree\n",)),
    FifoCase("fifo show ends", ("-E",), (b"one\n\n",)),
    FifoCase("fifo numbered show ends", ("-nE",), (b"one\n\n",)),
    FifoCase("fifo show all", ("-A",), (b"tab\t\x01\n",)),
    FifoCase("fifo show tabs and ends", ("-ET",), (b"one\tend\n\n",)),
    FifoCase("fifo number nonblank", ("-b",), (b"one\n\nthree\n",)),
    ScriptedCase("fifo streaming", checks.check_fifo_stream),
]

# =============================================================================
#                     Properties and scenarios
# =============================================================================

PROPERTIES = [
    ScriptedCase("property bundled equals separated", checks.check_bundle_equivalence),
    ScriptedCase("property identity transform", checks.check_identity_transform),
    ScriptedCase("property repeatable output", checks.check_repeatable_output),
    ScriptedCase("property empty input", checks.check_empty_input),
    ScriptedCase("scenario numbering", checks.check_scenario_numbering),
    ScriptedCase("scenario squeeze blank", checks.check_scenario_squeeze),
    ScriptedCase("scenario number nonblank", checks.check_scenario_number_nonblank),
    ScriptedCase("scenario missing file", checks.check_scenario_missing_file),
    ScriptedCase("process asm keeps comment-only lines", checks.check_comment_preservation),
]

HAND_WRITTEN = BASIC + PARSING + FLAGS + LONG + CONTENT + ERRORS + FIFOS + PROPERTIES


def build_registry(include_matrix=True):
    registry = CaseRegistry(HAND_WRITTEN)
    if include_matrix:
        registry.extend(matrix_cases())
    return registry
