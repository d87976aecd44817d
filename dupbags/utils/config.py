import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar, Union, cast

from omegaconf import DictConfig, ListConfig, OmegaConf

from dupbags.utils.log import ROOT_LOGGER_NAME, get_logger

R = TypeVar("R")

logger = get_logger(__name__)

LOG_LEVEL_NAMES = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


@dataclass
class DuplicateBagsConfig:
    """Library-wide settings."""

    log_level: str = "WARNING"  # level for the `dupbags` logger
    check_update_results: bool = True  # whether `update` checks what the transform returned


_active_config: DuplicateBagsConfig = DuplicateBagsConfig()


def get_config(
    config_files: Sequence[Union[str, Path]] = (),
    overrides: Sequence[str] = (),
    defaults: Optional[Dict[str, Any]] = None,
    config_cls: Callable[..., R] = DuplicateBagsConfig,  # type: ignore[assignment]
) -> R:
    """
    Builds a read-only `OmegaConf` config for the library.

    Sources are merged onto the `config_cls` schema in order of increasing priority: `defaults`,
    then each of `config_files` (later files overwrite earlier ones), then `overrides`.

    Args:
        config_files: Paths to yaml files holding (some of) the config fields.
        overrides: Dotlist overrides such as `"log_level=DEBUG"`.
        defaults: Optional dictionary of values applied on top of the dataclass defaults.
        config_cls: Dataclass object specifying config structure. It should be the class itself,
            not an instance of the class.

    Returns:
        Config object, which will pass as an instance of `config_cls` and can be handed to
        `apply_config`. Values are checked against the schema types while merging.
    """
    for name, value in (("config_files", config_files), ("overrides", overrides)):
        if isinstance(value, (str, bytes, Path)):
            raise TypeError(f"{name} must be a sequence, not a single {type(value).__name__}")

    conf_sources: List[Union[DictConfig, ListConfig]] = []
    if defaults:
        conf_sources.append(OmegaConf.create(defaults))
    conf_sources += [OmegaConf.load(path) for path in config_files]
    conf_sources.append(OmegaConf.from_dotlist(list(overrides)))

    schema = OmegaConf.structured(config_cls)
    config = OmegaConf.merge(schema, *conf_sources)
    OmegaConf.set_readonly(config, True)  # should not be written to
    logger.debug(f"Loaded config from {len(config_files)} file(s) and {len(overrides)} override(s)")
    return cast(R, config)


def get_error_message_for_missing_value(name: str, possible_values: List[str]) -> str:
    return f"{name} should be set to one of [{', '.join(possible_values)}]"


def apply_config(config: DuplicateBagsConfig) -> None:
    """Make `config` the active configuration and set the level of the `dupbags` logger."""
    global _active_config

    log_level = str(config.log_level).upper()
    if log_level not in LOG_LEVEL_NAMES:
        raise ValueError(get_error_message_for_missing_value("log_level", LOG_LEVEL_NAMES))

    logging.getLogger(ROOT_LOGGER_NAME).setLevel(log_level)
    _active_config = DuplicateBagsConfig(
        log_level=log_level, check_update_results=bool(config.check_update_results)
    )
    logger.debug(f"Applied config: {_active_config}")


def get_active_config() -> DuplicateBagsConfig:
    return _active_config
