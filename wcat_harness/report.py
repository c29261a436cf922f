"""report.py — console output for the harness.

Every line the harness prints goes through log() so that it is flushed
immediately and interleaves sanely with anything a child process writes.
"""


def log(msg):
    print(msg, flush=True)


def lossy(data):
    """Render bytes as text, replacing anything that is not valid UTF-8."""
    return data.decode("utf-8", errors="replace")


def format_args(args):
    return "[" + ", ".join(repr(str(a)) for a in args) + "]"


def log_cmd(executable, args, code, stdout_len, stderr_len):
    log(f"[CMD ] {executable} {format_args(args)} -> status {code}, "
        f"stdout {stdout_len}B, stderr {stderr_len}B")


def log_cmd_to_file(executable, args, code, output_path, stderr_len):
    log(f"[CMD ] {executable} {format_args(args)} -> status {code}, "
        f"file stdout at {output_path}, stderr {stderr_len}B")


def report_case(outcome, name, message=""):
    if message:
        log(f"[{outcome}] {name}: {message}")
    else:
        log(f"[{outcome}] {name}")


def report_summary(passed, total, filtered, failures=()):
    log("\n{}/{} tests executed{}.".format(
        passed, total, " (filtered)" if filtered else ""))
    if failures:
        log("Failed:")
        for name in failures:
            log(f"  - {name}")
