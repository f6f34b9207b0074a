from collections import namedtuple
from dataclasses import dataclass
from datetime import date

from ligen.constants import MAX_NAME_LENGTH, MAX_YEARS_PAST
from ligen.errors import (
    EmptyHolderError,
    EndYearBeforeStartError,
    EndYearTooOldError,
    HolderTooLongError,
    StartYearTooNewError,
    StartYearTooOldError,
)


CopyrightYears = namedtuple('CopyrightYears', ['start', 'end'])


def current_year() -> int:
    return date.today().year


def clean_holder(holder: str) -> str:
    """
    Trim a copyright holder and check it is neither blank nor too long.

    Args:
        holder (str): The raw holder name.

    Returns:
        str: The trimmed holder name.

    Raises:
        EmptyHolderError: If nothing is left after trimming.
        HolderTooLongError: If the trimmed name exceeds MAX_NAME_LENGTH chars.
    """
    stripped = holder.strip()

    if not stripped:
        raise EmptyHolderError()

    if len(stripped) > MAX_NAME_LENGTH:
        raise HolderTooLongError(length=len(stripped))

    return stripped


@dataclass
class Copyright:
    """
    Holder and year range of a copyright.

    An end year of 0 means the copyright is ongoing. The zero value
    (empty holder, both years 0) stands for "no copyright", which is what
    licenses without a copyright line load as.

    Only ``create`` enforces the temporal rules (start year within the last
    MAX_YEARS_PAST years and not in the future, closed ranges not ending in
    the past). ``validate`` and the setters only enforce the ordering of
    the two years.
    """
    holder: str = ""
    start_year: int = 0
    end_year: int = 0

    @classmethod
    def create(cls, holder: str, start_year: int, end_year: int = 0) -> "Copyright":
        year = current_year()

        if start_year > year:
            raise StartYearTooNewError(start_year, year)

        if start_year < year - MAX_YEARS_PAST:
            raise StartYearTooOldError(start_year, year)

        stripped = clean_holder(holder)

        if end_year != 0:
            if end_year < start_year:
                raise EndYearBeforeStartError(start_year, end_year)

            if end_year < year:
                raise EndYearTooOldError(end_year, year)

        return cls(holder=stripped, start_year=start_year, end_year=end_year)

    def validate(self) -> None:
        """
        Check the end year does not precede the start year.

        Raises:
            EndYearBeforeStartError: If the range is reversed.
        """
        if self.end_year != 0 and self.end_year < self.start_year:
            raise EndYearBeforeStartError(self.start_year, self.end_year)

    def set_holder(self, holder: str) -> None:
        self.holder = clean_holder(holder)

    def set_start_year(self, year: int) -> None:
        if self.end_year != 0 and self.end_year < year:
            raise EndYearBeforeStartError(year, self.end_year)

        self.start_year = year

    def set_end_year(self, year: int) -> None:
        if year != 0 and year < self.start_year:
            raise EndYearBeforeStartError(self.start_year, year)

        self.end_year = year

    @property
    def years(self) -> CopyrightYears:
        return CopyrightYears(start=self.start_year, end=self.end_year)


@dataclass(frozen=True)
class Writeable:
    """
    A rendered license artifact and the path it belongs at.
    """
    content: str
    path: str


@dataclass(frozen=True)
class NoticeInput:
    project_name: str
    holder: str
    start_year: int
    end_year: int

    @classmethod
    def from_copyright(cls, project_name: str, copyright: Copyright) -> "NoticeInput":
        return cls(
            project_name=project_name,
            holder=copyright.holder,
            start_year=copyright.start_year,
            end_year=copyright.end_year,
        )
