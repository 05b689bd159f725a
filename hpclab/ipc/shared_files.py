"""Exchanging a whole file between processes under POSIX advisory locks."""

import fcntl
import os
import sys
from typing import Optional, Sequence

DEFAULT_FILE = "data.txt"
DEFAULT_MESSAGE = "Welcome to HPC/IPC"


def read_file(path: str = DEFAULT_FILE) -> str:
    """Return the contents of ``path``, read under a shared lock that waits for writers."""
    with open(path, "rb") as handle:
        fcntl.lockf(handle, fcntl.LOCK_SH)
        try:
            data = handle.read()
        finally:
            fcntl.lockf(handle, fcntl.LOCK_UN)
    return data.decode()


def write_file(data: str, path: str = DEFAULT_FILE) -> int:
    """Replace the contents of ``path`` with ``data`` under an exclusive lock.

    The lock is not waited for: if another process holds one, ``OSError`` is raised.
    Returns the number of bytes written.
    """
    payload = data.encode()
    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o666)
    with os.fdopen(fd, "r+b") as handle:
        fcntl.lockf(handle, fcntl.LOCK_EX | fcntl.LOCK_NB)
        try:
            handle.write(payload)
            handle.truncate(len(payload))
            handle.flush()
        finally:
            fcntl.lockf(handle, fcntl.LOCK_UN)
    print(f"write success and the file is {path}")
    return len(payload)


def producer_main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the text given as first argument to the file given as second."""
    args = list(sys.argv[1:] if argv is None else argv)
    data = args[0] if args else DEFAULT_MESSAGE
    path = args[1] if len(args) > 1 else DEFAULT_FILE
    try:
        write_file(data, path)
    except OSError as exc:
        print(f"cannot write {path}: {exc}", file=sys.stderr)
        return 1
    return 0


def consumer_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the contents of the file given as first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_FILE
    try:
        sys.stdout.write(read_file(path))
    except OSError as exc:
        print(f"cannot read {path}: {exc}", file=sys.stderr)
        return 1
    return 0