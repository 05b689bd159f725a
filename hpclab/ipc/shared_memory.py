"""Passing a text message through a named POSIX shared-memory segment."""

import os
import sys
from multiprocessing import resource_tracker, shared_memory
from typing import Iterable, Optional, Sequence

DEFAULT_NAME = "OS"
SEGMENT_SIZE = 4096
MESSAGES = ("Hello", "World!")


def _untrack(segment: shared_memory.SharedMemory) -> None:
    # The segment must outlive this process until a reader unlinks it.
    if os.name == "posix":
        resource_tracker.unregister("/" + segment.name, "shared_memory")


def write_messages(
    name: str = DEFAULT_NAME, messages: Iterable[str] = MESSAGES, size: int = SEGMENT_SIZE
) -> int:
    """Write the concatenated ``messages`` into segment ``name``, creating it if needed.

    The text is terminated by a NUL byte. Returns the length of the text in bytes.
    """
    payload = "".join(messages).encode() + b"\0"
    if len(payload) > size:
        raise ValueError(f"message of {len(payload)} bytes does not fit in {size} bytes")
    try:
        segment = shared_memory.SharedMemory(name=name, create=True, size=size)
    except FileExistsError:
        segment = shared_memory.SharedMemory(name=name)
    try:
        if segment.size < len(payload):
            raise ValueError(f"segment {name!r} holds only {segment.size} bytes")
        segment.buf[: len(payload)] = payload
    finally:
        _untrack(segment)
        segment.close()
    return len(payload) - 1


def read_message(name: str = DEFAULT_NAME, unlink: bool = True) -> str:
    """Return the NUL-terminated text in segment ``name``, removing the segment by default."""
    segment = shared_memory.SharedMemory(name=name)
    try:
        raw = bytes(segment.buf)
    finally:
        segment.close()
        if unlink:
            segment.unlink()
        else:
            _untrack(segment)
    return raw.split(b"\0", 1)[0].decode(errors="replace")


def writer_main(argv: Optional[Sequence[str]] = None) -> int:
    """Write messages to a segment; arguments are the name followed by the messages."""
    args = list(sys.argv[1:] if argv is None else argv)
    name = args[0] if args else DEFAULT_NAME
    messages = args[1:] or MESSAGES
    try:
        write_messages(name, messages)
    except (OSError, ValueError) as exc:
        print(f"{name}: {exc}", file=sys.stderr)
        return 1
    return 0


def reader_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the message in the segment given as argument and remove the segment."""
    args = list(sys.argv[1:] if argv is None else argv)
    name = args[0] if args else DEFAULT_NAME
    try:
        text = read_message(name)
    except OSError as exc:
        print(f"{name}: {exc}", file=sys.stderr)
        return 1
    print(text, end="")
    return 0