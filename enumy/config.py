import logging
from dataclasses import dataclass, fields, replace
from typing import Optional, Union

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(message)s'


@dataclass(frozen=True)
class EnumyConfig:
    """process-wide settings"""
    strict_equality: bool = False  # default equality is `==`; True demands same type too
    text_lambdas: bool = True  # accept "(x) => ..." strings wherever a callable is expected
    log_level: Union[int, str] = 'WARNING'


_config = EnumyConfig()


def get_config() -> EnumyConfig:
    return _config


def configure(**overrides) -> EnumyConfig:
    """replace selected settings, returns the new config"""
    global _config
    known = {f.name for f in fields(EnumyConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"unknown setting(s): {', '.join(sorted(unknown))}")
    _config = replace(_config, **overrides)
    logger.debug(f"configuration changed: {overrides}")
    return _config


def reset_config() -> EnumyConfig:
    global _config
    _config = EnumyConfig()
    return _config


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """attach a basic stream handler, mainly for scripts and debugging"""
    logging.basicConfig(level=level or _config.log_level, format=LOG_FORMAT)
    logging.getLogger('enumy').setLevel(level or _config.log_level)
