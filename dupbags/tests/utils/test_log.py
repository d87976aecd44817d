import logging

from dupbags.operations.eager import difference, reconcile, symmetric_difference
from dupbags.utils.log import PER_KEY_LOG_LEVEL, VERBOSE_LOG_LEVEL, get_logger


def test_get_logger() -> None:
    assert get_logger("dupbags").name == "dupbags"
    assert get_logger("dupbags.operations.eager").name == "dupbags.operations.eager"
    assert get_logger("helpers").name == "dupbags.helpers"


def test_operations_log_below_debug(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="dupbags"):
        difference({"a": [1]}, {})
    assert caplog.records == []

    with caplog.at_level(PER_KEY_LOG_LEVEL, logger="dupbags"):
        reconcile({"a": [1, 2]}, {"a": [2]})

    levels = {record.levelno for record in caplog.records}
    assert levels == {VERBOSE_LOG_LEVEL, PER_KEY_LOG_LEVEL}
    messages = [record.getMessage() for record in caplog.records]
    assert "reconcile (common) produced 1 keys" in messages


def test_one_sided_keys_are_logged(caplog) -> None:
    with caplog.at_level(PER_KEY_LOG_LEVEL, logger="dupbags"):
        symmetric_difference({"a": [1], "b": [2]}, {"b": [2], "c": [3]})

    messages = [r.getMessage() for r in caplog.records if r.levelno == PER_KEY_LOG_LEVEL]
    assert messages == [
        "symmetric_difference (only first): key 'a' -> [1]",
        "symmetric_difference (only second): key 'c' -> [3]",
        "symmetric_difference: key 'b' -> []",
    ]
