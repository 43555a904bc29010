"""
Storage namer: collision-resistant filenames for uploaded files.

Generated names look like ``images-1718035200123-482913377.png``:

    <field>-<epoch milliseconds>-<random 0..999999999><.ext>

The client's original name only contributes its extension, lower-cased and
restricted to ``[a-z0-9]``, so a generated name can never contain a path
separator or traversal sequence.
"""

from __future__ import annotations

import os
import re
import secrets
import time

RANDOM_SUFFIX_RANGE = 10**9
MAX_EXTENSION_LENGTH = 10

_SAFE_EXTENSION_RE = re.compile(r"^[a-z0-9]+$")
_UNSAFE_FIELD_CHARS_RE = re.compile(r"[^A-Za-z0-9_]")


def get_extension(original_name: str) -> str:
    """
    Extract the lower-cased extension of a client filename, without the dot.

    Only the final path component is considered, for both separator styles.
    Unsafe or overlong extensions yield "".

    Example:
        get_extension("Holiday.JPG")       # "jpg"
        get_extension("../../etc/passwd")  # ""
        get_extension("archive.tar.gz")    # "gz"
    """
    basename = (original_name or "").replace("\\", "/").rsplit("/", 1)[-1]
    _, ext = os.path.splitext(basename)
    ext = ext[1:].lower()
    if not ext or len(ext) > MAX_EXTENSION_LENGTH or not _SAFE_EXTENSION_RE.match(ext):
        return ""
    return ext


def generate_filename(original_name: str, field_name: str) -> str:
    """
    Generate a unique, traversal-safe filename preserving the original extension.

    Args:
        original_name: Client-supplied filename (untrusted)
        field_name: Multipart field the file arrived under

    Returns:
        Generated filename
    """
    field = _UNSAFE_FIELD_CHARS_RE.sub("", field_name or "") or "file"
    timestamp_ms = time.time_ns() // 1_000_000
    salt = secrets.randbelow(RANDOM_SUFFIX_RANGE)
    ext = get_extension(original_name)
    suffix = f".{ext}" if ext else ""
    return f"{field}-{timestamp_ms}-{salt}{suffix}"
