import logging
from pathlib import Path

import pytest
from omegaconf.errors import ReadonlyConfigError, ValidationError

from dupbags.utils.config import (
    DuplicateBagsConfig,
    apply_config,
    get_active_config,
    get_config,
    get_error_message_for_missing_value,
)


def test_defaults() -> None:
    config = get_config()
    assert config.log_level == "WARNING"
    assert config.check_update_results is True


def test_config_files_and_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yml"
    config_path.write_text("log_level: INFO\ncheck_update_results: false\n")

    config = get_config(config_files=[config_path])
    assert config.log_level == "INFO"
    assert config.check_update_results is False

    # Overrides take priority over the yaml file, which takes priority over `defaults`.
    config = get_config(
        config_files=[str(config_path)],
        overrides=["log_level=DEBUG"],
        defaults={"check_update_results": True},
    )
    assert config.log_level == "DEBUG"
    assert config.check_update_results is False


def test_later_config_files_win(tmp_path: Path) -> None:
    first, second = tmp_path / "first.yml", tmp_path / "second.yml"
    first.write_text("log_level: INFO\n")
    second.write_text("log_level: ERROR\n")

    assert get_config(config_files=[first, second]).log_level == "ERROR"
    assert get_config(config_files=[second, first]).log_level == "INFO"


@pytest.mark.parametrize(
    "kwargs", [{"config_files": "config.yml"}, {"overrides": "log_level=INFO"}]
)
def test_single_string_rejected(kwargs) -> None:
    with pytest.raises(TypeError, match="must be a sequence"):
        get_config(**kwargs)


def test_config_is_read_only() -> None:
    config = get_config()
    with pytest.raises(ReadonlyConfigError):
        config.log_level = "DEBUG"


def test_config_is_validated_against_schema() -> None:
    with pytest.raises(ValidationError):
        get_config(overrides=["check_update_results=not_a_bool"])


def test_apply_config() -> None:
    apply_config(get_config(overrides=["log_level=debug"]))

    assert logging.getLogger("dupbags").level == logging.DEBUG
    assert logging.getLogger("dupbags.operations.eager").getEffectiveLevel() == logging.DEBUG
    assert get_active_config().log_level == "DEBUG"


def test_apply_config_invalid_level() -> None:
    with pytest.raises(ValueError, match="log_level should be set to one of"):
        apply_config(DuplicateBagsConfig(log_level="LOUD"))
    assert get_active_config() == DuplicateBagsConfig()


def test_error_message() -> None:
    message = get_error_message_for_missing_value("x", ["a", "b"])
    assert message == "x should be set to one of [a, b]"
