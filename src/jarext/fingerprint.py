"""Content fingerprinting for archives."""

import hashlib
from pathlib import Path


def sha1_hex(path: Path) -> str:
    """Compute the SHA-1 digest of a file's full content.

    Args:
        path: File to fingerprint.

    Returns:
        Lowercase 40-character hex digest.

    Raises:
        OSError: If the file cannot be read.
    """
    data = path.read_bytes()
    return hashlib.sha1(data).hexdigest()  # noqa: S324
