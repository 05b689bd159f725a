import uuid
from contextlib import suppress

import pytest

from hpclab.ipc.shared_memory import read_message, reader_main, write_messages, writer_main


@pytest.fixture
def name():
    segment = f"hpclab{uuid.uuid4().hex[:12]}"
    yield segment
    with suppress(FileNotFoundError):
        read_message(segment)


def test_round_trip(name):
    messages = ("first part ", "second part")
    written = write_messages(name, messages)
    assert written == len("".join(messages))
    assert read_message(name) == "".join(messages)


def test_unlink_removes_segment(name):
    write_messages(name, ["gone"])
    assert read_message(name) == "gone"
    with pytest.raises(FileNotFoundError):
        read_message(name)


def test_keep_segment(name):
    write_messages(name, ["stays"])
    assert read_message(name, unlink=False) == "stays"
    assert read_message(name) == "stays"


def test_overwrite_with_shorter_text(name):
    write_messages(name, ["abcdef"])
    write_messages(name, ["xy"])
    assert read_message(name) == "xy"


def test_too_large_message(name):
    with pytest.raises(ValueError):
        write_messages(name, ["x" * 10], size=4)
    with pytest.raises(FileNotFoundError):
        read_message(name)


def test_read_missing_segment(name):
    with pytest.raises(FileNotFoundError):
        read_message(name)


def test_writer_then_reader(name, capsys):
    assert writer_main([name]) == 0
    assert reader_main([name]) == 0
    assert capsys.readouterr().out == "HelloWorld!"


def test_reader_main_missing(name):
    assert reader_main([name]) == 1