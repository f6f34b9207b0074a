import logging
from abc import ABC, abstractmethod
from typing import Callable

from ligen.catalog import LicenseType
from ligen.ligen import License
from ligen.logs_helpers import log_call
from ligen.models import CopyrightYears

LOG = logging.getLogger(__name__)


class Repository(ABC):
    """
    Loads and writes licenses from a storage backend.
    """

    @abstractmethod
    def load(self, path: str) -> License:
        """
        Load the license stored at ``path``.
        """

    @abstractmethod
    def write(self, license: License) -> None:
        """
        Render ``license`` and persist every artifact.
        """


class Service:
    """
    License operations on top of a repository.

    Every update loads the license, changes a single field and writes the
    license back. Nothing is written when the change is rejected.
    """

    def __init__(self, repo: Repository):
        self.repo = repo

    @log_call()
    def create(self, project_name: str, holder: str, start: int, end: int,
               license_type: LicenseType) -> License:
        license = License.create(project_name, holder, start, end, license_type)
        self.repo.write(license)

        return license

    @log_call(show_result=True)
    def get_license(self, path: str) -> License:
        return self.repo.load(path)

    def get_years(self, path: str) -> CopyrightYears:
        return self.get_license(path).copyright.years

    def get_license_type(self, path: str) -> LicenseType:
        return self.get_license(path).license_type

    def _load_set_flush(self, path: str, op: Callable[[License], None]) -> License:
        license = self.repo.load(path)
        op(license)
        self.repo.write(license)

        return license

    @log_call()
    def update_project_name(self, path: str, name: str) -> License:
        return self._load_set_flush(path, lambda license: license.set_project_name(name))

    @log_call()
    def update_holder(self, path: str, holder: str) -> License:
        return self._load_set_flush(path, lambda license: license.set_holder(holder))

    @log_call()
    def update_start_year(self, path: str, year: int) -> License:
        return self._load_set_flush(path, lambda license: license.set_copyright_start_year(year))

    @log_call()
    def update_end_year(self, path: str, year: int) -> License:
        return self._load_set_flush(path, lambda license: license.set_copyright_end_year(year))
