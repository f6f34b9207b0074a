# -*- coding: utf-8 -*-
import os
from pathlib import Path

from ligen.meta import get_version

# Maximum amount of chars a copyright holder or project name can contain
MAX_NAME_LENGTH = 128
# Maximum amount of years a copyright can be backdated
MAX_YEARS_PAST = 50

# Threshold used when a license is loaded from storage
LOAD_MATCH_THRESHOLD = 0.90

# Artifact paths
LICENSE_FILE_NAME = "LICENSE"
UNLICENSE_FILE_NAME = "UNLICENSE"
COPYING_LESSER_FILE_NAME = "COPYING.LESSER"
NOTICE_FILE_NAME = "NOTICE"

# Files without extensions first (standard convention)
PRIMARY_LICENSE_CANDIDATES = (
    LICENSE_FILE_NAME,
    UNLICENSE_FILE_NAME,
    COPYING_LESSER_FILE_NAME,
)
FALLBACK_LICENSE_CANDIDATES = (
    "LICENSE.txt",
    "LICENSE.md",
)

DIR_NAME = ".ligen"


def get_user_dir() -> Path:
    """
    Get the user directory for the ligen configuration.

    Returns:
        Path: The user directory path.
    """
    raw_dir = os.getenv("LIGEN_CONFIG_DIR")

    if raw_dir:
        return Path(raw_dir)

    return Path("~", DIR_NAME).expanduser()


USER_CONFIG_DIR = get_user_dir()

CONFIG_FILE_NAME = "config.ini"
CONFIG_FILE_USER = USER_CONFIG_DIR / CONFIG_FILE_NAME
CONFIG_SETTINGS_SECTION = "settings"
ENV_SETTING_PREFIX = "LIGEN_"

# Exit codes
EXIT_CODE_OK = 0
EXIT_CODE_FAILURE = 1
EXIT_CODE_INVALID_COPYRIGHT = 65
EXIT_CODE_INVALID_PROJECT_NAME = 66
EXIT_CODE_UNSUPPORTED_LICENSE_TYPE = 67
EXIT_CODE_DETECTION_FAILED = 68
EXIT_CODE_COPYRIGHT_NOT_FOUND = 69
EXIT_CODE_LICENSE_FILE_NOT_FOUND = 70
EXIT_CODE_SOURCE_UNAVAILABLE = 71
EXIT_CODE_INVALID_NOTICE = 72
EXIT_CODE_RENDER_FAILED = 73

CLI_VERSION = get_version()
CLI_PROJECT_URL = "https://github.com/MoonMoon1919/ligen"

# Main ligen --help data:
CLI_MAIN_INTRODUCTION = (
    "ligen - License files for your projects\n\n"
    "Create license files from templates, detect which license an existing file "
    "contains and keep copyright holders and years up to date.\n\n"
    f"Project: {CLI_PROJECT_URL}\n"
)

DEFAULT_EPILOG = f"\nligen version: {CLI_VERSION}\n\n{CLI_PROJECT_URL}\n"

CLI_DEBUG_HELP = "Enable debug logging."
CLI_PATH_HELP = "Directory holding the license files. Default: current directory"
CLI_FILE_HELP = (
    "License file to read. Default: the first of LICENSE, UNLICENSE, "
    "COPYING.LESSER, LICENSE.txt or LICENSE.md found in --path"
)

CLI_CREATE_HELP = "Create license files for a project."
CLI_CREATE_TYPE_HELP = "License to generate."
CLI_CREATE_HOLDER_HELP = (
    "Copyright holder. Default: the 'holder' setting of the ligen config file"
)
CLI_CREATE_PROJECT_NAME_HELP = (
    "Project name, written to the NOTICE file of licenses that need one."
)
CLI_CREATE_START_YEAR_HELP = "First year of the copyright. Default: current year"
CLI_CREATE_END_YEAR_HELP = "Last year of the copyright, 0 for ongoing. Default: 0"

CLI_DETECT_HELP = "Detect the license contained in a file."
CLI_DETECT_THRESHOLD_HELP = (
    "Minimum similarity (0-1) the best candidate must reach. Default: 0.90"
)

CLI_SHOW_HELP = "Show the license type, project and copyright of a license file."
CLI_LIST_HELP = "List the supported licenses."

CLI_UPDATE_HELP = "Update the project name or copyright of existing license files."
CLI_UPDATE_HOLDER_HELP = "Replace the copyright holder."
CLI_UPDATE_PROJECT_NAME_HELP = "Replace the project name in the NOTICE file."
CLI_UPDATE_START_YEAR_HELP = "Replace the first year of the copyright."
CLI_UPDATE_END_YEAR_HELP = "Replace the last year of the copyright, 0 for ongoing."
