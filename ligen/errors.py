from typing import Optional

from ligen.constants import (
    EXIT_CODE_COPYRIGHT_NOT_FOUND,
    EXIT_CODE_DETECTION_FAILED,
    EXIT_CODE_FAILURE,
    EXIT_CODE_INVALID_COPYRIGHT,
    EXIT_CODE_INVALID_NOTICE,
    EXIT_CODE_INVALID_PROJECT_NAME,
    EXIT_CODE_LICENSE_FILE_NOT_FOUND,
    EXIT_CODE_RENDER_FAILED,
    EXIT_CODE_SOURCE_UNAVAILABLE,
    EXIT_CODE_UNSUPPORTED_LICENSE_TYPE,
    MAX_NAME_LENGTH,
    MAX_YEARS_PAST,
)


class LigenException(Exception):
    """
    Base exception for unexpected ligen CLI failures.

    Args:
        message (str): The error message template.
        info (str): Additional information to include in the error message.
    """
    def __init__(self, message: str = "An unexpected error occurred in ligen: {info}\n"
                                      "If this issue persists, please report it at: https://github.com/MoonMoon1919/ligen/issues",
                 info: str = ""):
        self.message = message.format(info=info)
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        """
        Get the exit code associated with this exception.

        Returns:
            int: The exit code.
        """
        return EXIT_CODE_FAILURE


class LigenError(Exception):
    """
    Generic ligen error.

    Args:
        message (str): The error message.
    """
    def __init__(self, message: str = "An error occurred while managing license files."):
        self.message = message
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        """
        Get the exit code associated with this error.

        Returns:
            int: The exit code.
        """
        return EXIT_CODE_FAILURE


class CopyrightError(LigenError):
    """
    Base error for an invalid copyright holder or year range.
    """

    def get_exit_code(self) -> int:
        return EXIT_CODE_INVALID_COPYRIGHT


class StartYearTooNewError(CopyrightError):
    """
    Error raised when the copyright start year lies in the future.

    Args:
        year (int): The rejected year.
        current_year (int): The year at validation time.
    """
    def __init__(self, year: int, current_year: int,
                 message: str = "Invalid start year {year}: it must not be later than {current_year}."):
        self.year = year
        super().__init__(message.format(year=year, current_year=current_year))


class StartYearTooOldError(CopyrightError):
    """
    Error raised when the copyright start year is backdated too far.

    Args:
        year (int): The rejected year.
        current_year (int): The year at validation time.
    """
    def __init__(self, year: int, current_year: int,
                 message: str = "Invalid start year {year}: it must not be earlier than {oldest} "
                                "(at most {years} years ago)."):
        self.year = year
        super().__init__(message.format(year=year, oldest=current_year - MAX_YEARS_PAST,
                                        years=MAX_YEARS_PAST))


class EmptyHolderError(CopyrightError):
    """
    Error raised when the copyright holder is blank.
    """
    def __init__(self, message: str = "Copyright holder must not be empty."):
        super().__init__(message)


class HolderTooLongError(CopyrightError):
    """
    Error raised when the copyright holder exceeds the maximum length.

    Args:
        length (int): The length of the rejected holder.
    """
    def __init__(self, length: int,
                 message: str = "Copyright holder must be at most {limit} chars, got {length}."):
        self.length = length
        super().__init__(message.format(limit=MAX_NAME_LENGTH, length=length))


class EndYearBeforeStartError(CopyrightError):
    """
    Error raised when the copyright end year precedes the start year.

    Args:
        start_year (int): The copyright start year.
        end_year (int): The rejected end year.
    """
    def __init__(self, start_year: int, end_year: int,
                 message: str = "Invalid end year {end_year}: it must not be earlier than the start year {start_year}."):
        self.start_year = start_year
        self.end_year = end_year
        super().__init__(message.format(start_year=start_year, end_year=end_year))


class EndYearTooOldError(CopyrightError):
    """
    Error raised when a closed copyright range ends before the current year.

    Args:
        end_year (int): The rejected end year.
        current_year (int): The year at validation time.
    """
    def __init__(self, end_year: int, current_year: int,
                 message: str = "Invalid end year {end_year}: it must not be earlier than {current_year}.\n"
                                "Use 0 as end year for an ongoing copyright."):
        self.end_year = end_year
        super().__init__(message.format(end_year=end_year, current_year=current_year))


class ProjectNameError(LigenError):
    """
    Base error for an invalid project name.
    """

    def get_exit_code(self) -> int:
        return EXIT_CODE_INVALID_PROJECT_NAME


class EmptyProjectNameError(ProjectNameError):
    """
    Error raised when a project name is required but blank.
    """
    def __init__(self, message: str = "Project name must not be empty."):
        super().__init__(message)


class ProjectNameTooLongError(ProjectNameError):
    """
    Error raised when the project name exceeds the maximum length.

    Args:
        length (int): The length of the rejected name.
    """
    def __init__(self, length: int,
                 message: str = "Project name must be at most {limit} chars, got {length}."):
        self.length = length
        super().__init__(message.format(limit=MAX_NAME_LENGTH, length=length))


class NoMatchError(CopyrightError):
    """
    Error raised when a line does not follow the copyright line format.

    Args:
        line (str): The rejected line.
    """
    def __init__(self, line: str = "",
                 message: str = "Line does not match copyright pattern: {line!r}"):
        self.line = line
        super().__init__(message.format(line=line))


class CopyrightNotFoundError(LigenError):
    """
    Error raised when no line of a document is a copyright line.
    """
    def __init__(self, message: str = "No copyright line found.\n"
                                      "Expected a line like 'Copyright (c) 2024-2025 Jane Doe'."):
        super().__init__(message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_COPYRIGHT_NOT_FOUND


class InvalidNoticeError(LigenError):
    """
    Error raised when a NOTICE document does not start with a project name.

    Args:
        reason (str): Why the notice was rejected.
    """
    def __init__(self, reason: str = "empty document",
                 message: str = "Unable to read the project name from the notice: {reason}."):
        self.reason = reason
        super().__init__(message.format(reason=reason))

    def get_exit_code(self) -> int:
        return EXIT_CODE_INVALID_NOTICE


class UnsupportedLicenseTypeError(LigenError):
    """
    Error raised for a license type outside the supported catalog.

    Args:
        license_type (object): The rejected license type.
    """
    def __init__(self, license_type: object = None,
                 message: str = "Unsupported license type: {license_type}\n"
                                "Run 'ligen list' to see the supported licenses."):
        self.license_type = license_type
        super().__init__(message.format(license_type=license_type))

    def get_exit_code(self) -> int:
        return EXIT_CODE_UNSUPPORTED_LICENSE_TYPE


class DetectionFailedError(LigenError):
    """
    Error raised when no known license is similar enough to the given text.

    Args:
        reason (Optional[str]): The reason for the error.
    """
    def __init__(self, reason: Optional[str] = None,
                 message: str = "License detection failed: the text does not match any supported license."):
        self.message = message
        if reason:
            self.message += f"\nDetails: {reason}"
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_DETECTION_FAILED


class LicenseFileNotFoundError(LigenError):
    """
    Error raised when no license file can be discovered.

    Args:
        directory (str): The searched directory.
    """
    def __init__(self, directory: str = ".",
                 message: str = "No license file found in {directory}\n"
                                "Looked for LICENSE, UNLICENSE, COPYING.LESSER, LICENSE.txt and LICENSE.md."):
        self.directory = directory
        super().__init__(message.format(directory=directory))

    def get_exit_code(self) -> int:
        return EXIT_CODE_LICENSE_FILE_NOT_FOUND


class SourceUnavailableError(LigenError):
    """
    Error raised when a license or notice file cannot be read or written.

    Args:
        path (str): The file path.
        reason (Optional[str]): The reason for the error.
    """
    def __init__(self, path: str, reason: Optional[str] = None,
                 message: str = "Unable to access {path}\n"
                                "Please verify the file exists and you have the required permissions."):
        self.path = path
        self.message = message.format(path=path)
        if reason:
            self.message += f"\nDetails: {reason}"
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_SOURCE_UNAVAILABLE


class RenderError(LigenError):
    """
    Error raised when a license template cannot be rendered.

    Args:
        template (str): The template name.
        reason (Optional[str]): The reason for the error.
    """
    def __init__(self, template: str, reason: Optional[str] = None,
                 message: str = "Unable to render license template {template}."):
        self.template = template
        self.message = message.format(template=template)
        if reason:
            self.message += f"\nDetails: {reason}"
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_RENDER_FAILED
