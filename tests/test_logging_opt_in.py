import logging

from testgen_action._logging import SilentLogger, TargetFileAdapter, combine_logger


def test_combine_logger_default_is_silent():
    lg = combine_logger()
    assert isinstance(lg, SilentLogger)
    # Should not raise:
    lg.debug("hello")
    lg.warning("world")


def test_combine_logger_enabled_uses_combine_logger(caplog):
    with caplog.at_level(logging.DEBUG):
        lg = combine_logger(enabled=True)
        lg.debug("test message")
    assert [rec.name for rec in caplog.records] == ["testgen_action.combine"]
    assert caplog.records[0].message == "test message"


def test_combine_logger_uses_passed_logger():
    custom = logging.getLogger("x")
    assert combine_logger(logger=custom) is custom
    assert combine_logger(logger=custom, enabled=False) is custom


def test_combine_logger_tags_records_with_target_file(caplog):
    custom = logging.getLogger("testgen_action.apply_tests")
    with caplog.at_level(logging.DEBUG):
        lg = combine_logger(logger=custom, filename="tests/test_todo.py")
        lg.debug("combined 2 fragments into 1 hunks")
    assert isinstance(lg, TargetFileAdapter)
    assert caplog.records[0].message == "[tests/test_todo.py] combined 2 fragments into 1 hunks"


def test_silent_logger_ignores_filename():
    assert isinstance(combine_logger(filename="f.py"), SilentLogger)
