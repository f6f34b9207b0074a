import logging
from pathlib import Path
from typing import TextIO, Union

from ligen.constants import (
    FALLBACK_LICENSE_CANDIDATES,
    NOTICE_FILE_NAME,
    PRIMARY_LICENSE_CANDIDATES,
)
from ligen.errors import LicenseFileNotFoundError, SourceUnavailableError
from ligen.ligen import License, TextSource, load
from ligen.logs_helpers import log_call
from ligen.models import Writeable
from ligen.service import Repository

LOG = logging.getLogger(__name__)


def write(stream: TextIO, writeable: Writeable) -> None:
    stream.write(writeable.content)


def read_text(path: Path) -> str:
    """
    Read a whole text file.

    Raises:
        SourceUnavailableError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(path=str(path), reason=str(e)) from e


def file_source(path: Path) -> TextSource:
    def source() -> str:
        LOG.debug("Reading %s", path)
        return read_text(path)

    return source


def discover_license_file(directory: Union[str, Path] = ".") -> str:
    """
    Guess the license file of a directory.

    Files without extensions are preferred; LICENSE.txt and LICENSE.md are
    only considered when none of them exists.

    Args:
        directory: The directory to search.

    Returns:
        str: The name of the license file, relative to ``directory``.

    Raises:
        LicenseFileNotFoundError: If none of the candidates exists.
    """
    directory = Path(directory)

    for candidate in PRIMARY_LICENSE_CANDIDATES + FALLBACK_LICENSE_CANDIDATES:
        if (directory / candidate).is_file():
            LOG.debug("Discovered license file %s in %s", candidate, directory)
            return candidate

    raise LicenseFileNotFoundError(directory=str(directory))


class FileRepository(Repository):
    """
    Stores license files in a directory on disk.

    The NOTICE file is always expected next to the license file, at
    ``root / NOTICE``.
    """

    def __init__(self, root: Union[str, Path] = "."):
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"FileRepository(root={str(self.root)!r})"

    @log_call()
    def load(self, path: str) -> License:
        return load(
            License(),
            file_source(self.root / path),
            file_source(self.root / NOTICE_FILE_NAME),
        )

    @log_call()
    def write(self, license: License) -> None:
        writeables = license.render()

        for writeable in writeables:
            target = self.root / writeable.path
            LOG.debug("Writing %s", target)

            try:
                with open(target, "w", encoding="utf-8", newline="") as f:
                    write(f, writeable)
            except OSError as e:
                raise SourceUnavailableError(path=str(target), reason=str(e)) from e
