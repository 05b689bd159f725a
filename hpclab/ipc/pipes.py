"""Byte streams through an anonymous pipe and integers through a named pipe."""

import os
import random
import struct
import sys
import threading
import time
from contextlib import suppress
from functools import partial
from typing import BinaryIO, NamedTuple, Optional, Sequence, Union

FIFO_PATH = "./fifoChannel"
MAX_LOOPS = 12000
CHUNK_SIZE = 16
INTS_PER_CHUNK = 4
MAX_ZS = 250
RAND_MAX = 2**31 - 1
PIPE_MESSAGE = "Nature's first green is gold\n"

_CHUNK = struct.Struct(f"={INTS_PER_CHUNK}i")
_UINT = struct.Struct("=I")


class FifoReport(NamedTuple):
    """What the reader saw on the named pipe."""

    total: int
    primes: int


def is_prime(n: int) -> bool:
    """Return whether ``n`` is prime, testing divisors of the form 6k +/- 1."""
    if n <= 3:
        return n > 1
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def pipe_echo(message: Union[str, bytes], out: Optional[BinaryIO] = None) -> bytes:
    """Send ``message`` through a pipe to a reader that copies it byte by byte to ``out``.

    ``out`` defaults to standard output. Returns the bytes the reader echoed.
    """
    payload = message.encode() if isinstance(message, str) else bytes(message)
    target = sys.stdout.buffer if out is None else out
    read_end, write_end = os.pipe()
    echoed = bytearray()

    def reader() -> None:
        with os.fdopen(read_end, "rb", buffering=0) as stream:
            while byte := stream.read(1):
                target.write(byte)
                echoed.extend(byte)

    worker = threading.Thread(target=reader)
    worker.start()
    with os.fdopen(write_end, "wb") as stream:
        stream.write(payload)
    worker.join()
    target.flush()
    return bytes(echoed)


def write_ints(path: str = FIFO_PATH, loops: int = MAX_LOOPS, seed: Optional[int] = None) -> int:
    """Write random non-negative ints to the named pipe at ``path``; return how many."""
    rng = random.Random(seed)
    with suppress(FileExistsError):
        os.mkfifo(path, 0o666)
    sent = 0
    fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o666)
    with os.fdopen(fd, "wb") as pipe:
        for _ in range(loops):
            for _ in range(CHUNK_SIZE):
                pipe.write(_CHUNK.pack(*(rng.randint(0, RAND_MAX) for _ in range(INTS_PER_CHUNK))))
                sent += INTS_PER_CHUNK
            pipe.flush()
            time.sleep((rng.randrange(MAX_ZS) + 1) / 1_000_000)
    with suppress(FileNotFoundError):
        os.unlink(path)
    print(f"{sent} ints sent to the pipe.")
    return sent


def read_ints(path: str = FIFO_PATH) -> FifoReport:
    """Read 4-byte ints from ``path`` until end of stream, counting them and the primes."""
    total = primes = 0
    with open(path, "rb") as pipe:
        for chunk in iter(partial(pipe.read, _UINT.size), b""):
            if len(chunk) != _UINT.size:
                continue
            (value,) = _UINT.unpack(chunk)
            total += 1
            primes += is_prime(value)
    with suppress(FileNotFoundError):
        os.unlink(path)
    print(f"Received ints: {total}, primes: {primes}")
    return FifoReport(total, primes)


def pipe_main(argv: Optional[Sequence[str]] = None) -> int:
    """Echo the given text, or a line of verse, through an anonymous pipe."""
    args = list(sys.argv[1:] if argv is None else argv)
    pipe_echo(args[0] if args else PIPE_MESSAGE)
    return 0


def fifo_writer_main(argv: Optional[Sequence[str]] = None) -> int:
    """Write random ints to the named pipe; optional arguments are the path and loop count."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else FIFO_PATH
    loops = int(args[1]) if len(args) > 1 else MAX_LOOPS
    try:
        write_ints(path, loops)
    except OSError as exc:
        print(f"{path}: {exc}", file=sys.stderr)
        return 1
    return 0


def fifo_reader_main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ints from the named pipe given as argument and report the primes."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else FIFO_PATH
    try:
        read_ints(path)
    except OSError as exc:
        print(f"{path}: {exc}", file=sys.stderr)
        return 1
    return 0