from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ligen.catalog import LicenseType, catalog_entry
from ligen.constants import LOAD_MATCH_THRESHOLD, MAX_NAME_LENGTH
from ligen.errors import EmptyProjectNameError, ProjectNameTooLongError
from ligen.matchers import match
from ligen.models import Copyright, Writeable
from ligen.parsers import parse_doc_for_copyright, parse_project_name_from_notice

TextSource = Callable[[], str]


def clean_project_name(name: str, required: bool = True) -> str:
    """
    Trim a project name and check its length.

    Args:
        name (str): The raw project name.
        required (bool): Whether a blank name is rejected.

    Returns:
        str: The trimmed project name.
    """
    stripped = name.strip()

    if required and not stripped:
        raise EmptyProjectNameError()

    if len(stripped) > MAX_NAME_LENGTH:
        raise ProjectNameTooLongError(length=len(stripped))

    return stripped


@dataclass
class License:
    """
    A project's license: which license it is, who holds the copyright and,
    for licenses shipping a NOTICE file, the project name.

    ``create`` validates every field together. The setters validate only
    the field they change; the copyright year setters check the years are
    ordered but not the date window enforced on creation.
    """
    project_name: str = ""
    copyright: Copyright = field(default_factory=Copyright)
    license_type: Optional[LicenseType] = None

    @classmethod
    def create(cls, project_name: str, holder: str, start_year: int, end_year: int,
               license_type: LicenseType) -> "License":
        copyright = Copyright.create(holder, start_year, end_year)
        entry = catalog_entry(license_type)

        return cls(
            project_name=clean_project_name(project_name, required=entry.requires_notice),
            copyright=copyright,
            license_type=license_type,
        )

    def set_project_name(self, name: str) -> None:
        self.project_name = clean_project_name(name)

    def set_holder(self, holder: str) -> None:
        self.copyright.set_holder(holder)

    def set_copyright_start_year(self, year: int) -> None:
        self.copyright.set_start_year(year)

    def set_copyright_end_year(self, year: int) -> None:
        self.copyright.set_end_year(year)

    def set_license_type(self, license_type: LicenseType) -> None:
        self.license_type = license_type

    def render(self) -> List[Writeable]:
        """
        Render the license artifacts, in the order the license defines them.

        Raises:
            UnsupportedLicenseTypeError: If the license type is not supported.
            RenderError: If a template fails to render. Nothing is returned
                in that case, not even the artifacts rendered before.
        """
        generator_func = catalog_entry(self.license_type).generator

        return generator_func(self.project_name, self.copyright)


def load(license: License, license_source: TextSource, notice_source: TextSource) -> License:
    """
    Reconstruct a license from the text of its files.

    The license type is detected from the license text. Licenses that
    require a notice take their project name and copyright from the notice
    text, the others take the copyright from the license text. Licenses
    that don't require a copyright keep the zero value copyright.

    The loaded fields are assigned as they are, without the validation
    ``License.create`` applies.

    Args:
        license (License): The license to populate.
        license_source (TextSource): Returns the license file text.
        notice_source (TextSource): Returns the NOTICE file text. Only
            called when the detected license requires a notice.

    Returns:
        License: The populated license.
    """
    license_text = license_source()
    license_type = match(license_text, LOAD_MATCH_THRESHOLD)

    project_name = ""
    copyright_source = license_text

    if license_type.requires_notice:
        notice_text = notice_source()
        copyright_source = notice_text
        project_name = parse_project_name_from_notice(notice_text)

    copyright = Copyright()
    if license_type.requires_copyright:
        copyright = parse_doc_for_copyright(copyright_source)

    license.project_name = project_name
    license.copyright = copyright
    license.set_license_type(license_type)

    return license
