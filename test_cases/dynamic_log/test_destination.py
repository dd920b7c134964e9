import errno

import pytest
from dynamic_log.config import WriteMode
from dynamic_log.destination import Destination
from dynamic_log.exceptions import DestinationClosedError, DestinationError


def test_append_keeps_existing_lines(tmp_path) -> None:
    path = tmp_path / "app.log"
    path.write_text("old\n")
    dest = Destination.open(str(path), WriteMode.APPEND)
    dest.write("new\n")
    dest.close()
    assert path.read_text() == "old\nnew\n"


def test_clobber_truncates(tmp_path) -> None:
    path = tmp_path / "app.log"
    path.write_text("old\n")
    dest = Destination.open(str(path), WriteMode.CLOBBER)
    dest.write("new\n")
    dest.close()
    assert path.read_text() == "new\n"


def test_write_is_visible_before_close(tmp_path) -> None:
    path = tmp_path / "tail.log"
    dest = Destination.open(str(path))
    dest.write("line\n")
    assert path.read_text() == "line\n"
    dest.close()


def test_open_failure_carries_system_error(tmp_path) -> None:
    target = str(tmp_path / "missing" / "app.log")
    with pytest.raises(DestinationError) as excinfo:
        Destination.open(target)
    assert isinstance(excinfo.value, OSError)
    assert excinfo.value.errno == errno.ENOENT
    assert excinfo.value.target == target
    assert isinstance(excinfo.value.__cause__, OSError)


def test_close_is_idempotent(tmp_path) -> None:
    dest = Destination.open(str(tmp_path / "app.log"))
    dest.close()
    dest.close()
    assert dest.closed


def test_write_after_close_raises(tmp_path) -> None:
    dest = Destination.open(str(tmp_path / "app.log"))
    dest.close()
    with pytest.raises(DestinationClosedError):
        dest.write("late\n")


def test_stdout_destination(capsys) -> None:
    dest = Destination.open("stdout")
    assert dest.is_stream
    dest.write("hello\n")
    dest.close()
    dest.write("still here\n")
    captured = capsys.readouterr()
    assert captured.out == "hello\nstill here\n"


def test_stderr_destination(capsys) -> None:
    dest = Destination.open("STDERR")
    dest.write("oops\n")
    assert capsys.readouterr().err == "oops\n"
