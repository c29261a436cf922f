"""preprocess.py — strip trailing comments from NASM sources.

Comment-only lines are kept verbatim; code lines lose everything from the
first `;` that is not inside a string literal, plus trailing whitespace.
"""

import os
from pathlib import Path

from .report import log

QUOTES = "'\"`"


def strip_comment(line):
    line = line.rstrip("\r\n")
    if line.lstrip().startswith(";"):
        return line
    quote = None
    for i, ch in enumerate(line):
        if quote:
            if ch == quote:
                quote = None
        elif ch in QUOTES:
            quote = ch
        elif ch == ";":
            line = line[:i]
            break
    return line.rstrip(" \t\r\n")


def process_one_asm(src, dest):
    dest = Path(dest)
    text = Path(src).read_text(encoding="utf-8", errors="surrogateescape")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    out = "".join(strip_comment(line) + "\n" for line in lines)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(out, encoding="utf-8", errors="surrogateescape")


def process_asm(root, output):
    """Write a stripped copy of every *.asm under root into output.

    Returns the number of files processed.
    """
    root = Path(root).resolve()
    output = Path(output).resolve()

    count = 0
    for dirpath, dirnames, filenames in os.walk(root):
        here = Path(dirpath)
        dirnames[:] = sorted(d for d in dirnames if (here / d).resolve() != output)
        for name in sorted(filenames):
            if not name.endswith(".asm"):
                continue
            src = here / name
            rel = src.relative_to(root)
            dest = output / rel
            process_one_asm(src, dest)
            log(f"Processed: {rel} -> {dest}")
            count += 1
    return count
