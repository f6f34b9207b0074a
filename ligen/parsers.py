import re

from ligen.errors import CopyrightError, CopyrightNotFoundError, InvalidNoticeError, NoMatchError
from ligen.models import Copyright

# Copyright [(C)|(c)] YYYY[-YYYY] Holder Name
COPYRIGHT_LINE_REGEX = re.compile(
    r"^Copyright\s*(?:\([Cc]\)\s*)?(\d{4})(?:-(\d{4}))?\s+(.+?)\s*$",
    re.ASCII,
)


def parse_project_name_from_notice(document: str) -> str:
    """
    Extract the project name from the first line of a NOTICE document.

    The project name is the entire first line, trimmed. Later lines are
    never considered.

    Args:
        document (str): The NOTICE file content.

    Returns:
        str: The project name.

    Raises:
        InvalidNoticeError: If the document is empty or its first line is blank.
    """
    if not document:
        raise InvalidNoticeError(reason="empty document")

    first_line = document.split("\n", 1)[0].rstrip("\r").strip()

    if not first_line:
        raise InvalidNoticeError(reason="first line is empty")

    return first_line


def parse_doc_for_copyright(document: str) -> Copyright:
    """
    Scan a document line by line and return the first valid copyright.

    Lines that are not copyright lines, or whose year range is reversed,
    are skipped.

    Raises:
        CopyrightNotFoundError: If no line parses as a copyright.
    """
    for line in document.splitlines():
        try:
            return parse_copyright(line)
        except CopyrightError:
            continue

    raise CopyrightNotFoundError()


def parse_copyright(line: str) -> Copyright:
    """
    Parse a copyright line and extract the holder name and year range.

    Accepts ``Copyright``, ``Copyright (C)`` and ``Copyright (c)``, followed
    by a year or a ``YYYY-YYYY`` range and the holder. The parsed years are
    only checked for ordering, not against the current date.

    Args:
        line (str): The line to parse.

    Returns:
        Copyright: The parsed copyright. ``end_year`` is 0 without a range.

    Raises:
        NoMatchError: If the trimmed line is not a copyright line.
        EndYearBeforeStartError: If the range is reversed.
    """
    matches = COPYRIGHT_LINE_REGEX.match(line.strip())
    if not matches:
        raise NoMatchError(line=line)

    start_year = int(matches.group(1))
    end_year = int(matches.group(2)) if matches.group(2) else 0

    copyright = Copyright(holder=matches.group(3), start_year=start_year, end_year=end_year)
    copyright.validate()

    return copyright
