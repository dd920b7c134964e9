import inspect

from dynamic_log.caller_info import CallerInfo, capture_caller


def _outer() -> CallerInfo:
    return _inner()


def _inner() -> CallerInfo:
    return capture_caller(2)


def test_capture_current_function() -> None:
    line = inspect.currentframe().f_lineno + 1
    info = capture_caller()
    assert info.filename == "test_caller_info.py"
    assert info.function == "test_capture_current_function"
    assert info.lineno == line


def test_capture_skips_frames() -> None:
    info = _outer()
    assert info.function == "_outer"


def test_capture_deeper_than_stack() -> None:
    info = capture_caller(10_000)
    assert isinstance(info.lineno, int)


def test_str() -> None:
    assert str(CallerInfo("a.py", "run", 7)) == "a.py run 7"
