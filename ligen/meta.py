from importlib.metadata import PackageNotFoundError, version
import logging
from typing import Optional


LOG = logging.getLogger(__name__)


def get_version() -> Optional[str]:
    """
    Get the version of the ligen package.

    Falls back to the bundled VERSION file when ligen runs from a source
    checkout that isn't installed.

    Returns:
      Optional[str]: The ligen version if found, otherwise None.
    """
    try:
        return version("ligen")
    except PackageNotFoundError:
        LOG.debug("ligen is not installed, reading the bundled VERSION file.")

    try:
        from ligen import VERSION
    except OSError:
        LOG.exception("Unable to get ligen version.")
        return None

    return VERSION
