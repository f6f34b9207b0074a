import configparser
import logging
import os
from typing import Optional

from ligen.constants import (
    CONFIG_FILE_USER,
    CONFIG_SETTINGS_SECTION,
    ENV_SETTING_PREFIX,
    LOAD_MATCH_THRESHOLD,
)

LOG = logging.getLogger(__name__)


def get_config_setting(name: str, default=None) -> Optional[str]:
    """
    Get the configuration setting from the environment, the config file or defaults.

    The environment variable ``LIGEN_<NAME>`` takes precedence over the
    ``[settings]`` section of the user config file.

    Args:
        name (str): The name of the setting to retrieve.
        default: Returned when the setting is not set anywhere.

    Returns:
        Optional[str]: The value of the setting if found, otherwise the default.
    """
    env_value = os.getenv(f"{ENV_SETTING_PREFIX}{name.upper()}")
    if env_value:
        return env_value

    config = configparser.ConfigParser()
    config.read(CONFIG_FILE_USER)

    if CONFIG_SETTINGS_SECTION in config.sections() and name in config[CONFIG_SETTINGS_SECTION]:
        value = config[CONFIG_SETTINGS_SECTION][name]
        if value:
            return value

    return default


def get_default_holder() -> str:
    return get_config_setting("holder", default="")


def get_detection_threshold() -> float:
    """
    The similarity threshold used by ``ligen detect`` when none is given.

    Invalid or out of range values fall back to the default threshold.
    """
    raw = get_config_setting("threshold")

    if raw is None:
        return LOAD_MATCH_THRESHOLD

    try:
        threshold = float(raw)
    except ValueError:
        LOG.warning("Ignoring invalid threshold setting %r", raw)
        return LOAD_MATCH_THRESHOLD

    if not 0.0 <= threshold <= 1.0:
        LOG.warning("Ignoring out of range threshold setting %r", raw)
        return LOAD_MATCH_THRESHOLD

    return threshold
