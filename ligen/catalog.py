"""
Supported licenses and how each of them is rendered.

Every license type has exactly one entry in ``CATALOG``. The entry holds
the template that is rendered to produce the license and compared against
when detecting a license, the generator producing the license artifacts
and whether the license needs a NOTICE file and a copyright line.

The catalog is ordered: matching walks it front to back, so the order
decides which license wins an exact match and how equal scores are ranked.
"""
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, List, Optional, Tuple

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from ligen.constants import (
    COPYING_LESSER_FILE_NAME,
    LICENSE_FILE_NAME,
    NOTICE_FILE_NAME,
    UNLICENSE_FILE_NAME,
)
from ligen.errors import RenderError, UnsupportedLicenseTypeError
from ligen.models import Copyright, NoticeInput, Writeable

WriteableGenerator = Callable[[str, Copyright], List[Writeable]]
Comparator = Callable[[str, str], float]

MIT_TEMPLATE = "mit.jinja2"
BOOST_TEMPLATE = "boost.jinja2"
UNLICENSE_TEMPLATE = "unlicense.jinja2"
APACHE_TEMPLATE = "apache.jinja2"
MOZILLA_TEMPLATE = "mozilla.jinja2"
LGPL_TEMPLATE = "lgpl.jinja2"
NOTICE_TEMPLATE = "notice.jinja2"
LGPL_NOTICE_TEMPLATE = "lgpl_notice.jinja2"


class LicenseType(str, Enum):
    MIT = "MIT"
    BOOST_1_0 = "BOOST_1_0"
    UNLICENSE = "UNLICENSE"
    APACHE_2_0 = "APACHE_2_0"
    MOZILLA_2_0 = "MOZILLA_2_0"
    GNU_LESSER_3_0 = "GNU_LESSER_3_0"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "LicenseType":
        """
        Case-insensitive lookup of a license type by its canonical name.

        Raises:
            UnsupportedLicenseTypeError: If the name is not a known license type.
        """
        try:
            return cls(name.strip().upper())
        except ValueError:
            raise UnsupportedLicenseTypeError(license_type=name)

    @property
    def requires_notice(self) -> bool:
        return catalog_entry(self).requires_notice

    @property
    def requires_copyright(self) -> bool:
        return catalog_entry(self).requires_copyright

    def template(self) -> str:
        """
        The raw, unrendered template text of this license.
        """
        return template_source(catalog_entry(self).template)

    def generator_func(self) -> WriteableGenerator:
        return catalog_entry(self).generator

    def compare(self, content: str, comparator: Comparator) -> float:
        return comparator(content, self.template())


@lru_cache()
def get_environment() -> Environment:
    return Environment(
        loader=PackageLoader("ligen", "templates"),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


@lru_cache()
def template_source(name: str) -> str:
    env = get_environment()
    source, _, _ = env.loader.get_source(env, name)
    return source


def render_template(name: str, **kwargs: Any) -> str:
    """
    Render one of the packaged license templates.

    Args:
        name (str): The template file name.
        **kwargs: The template variables.

    Returns:
        str: The rendered text.

    Raises:
        RenderError: If the template is missing or fails to render.
    """
    try:
        template = get_environment().get_template(name)
        return template.render(**kwargs)
    except TemplateError as e:
        raise RenderError(template=name, reason=str(e)) from e


def render_copyright_template(name: str, copyright: Copyright) -> str:
    return render_template(
        name,
        holder=copyright.holder,
        start_year=copyright.start_year,
        end_year=copyright.end_year,
    )


def render_notice_template(name: str, notice: NoticeInput) -> str:
    return render_template(
        name,
        project_name=notice.project_name,
        holder=notice.holder,
        start_year=notice.start_year,
        end_year=notice.end_year,
    )


def mit_generator(project_name: str, copyright: Copyright) -> List[Writeable]:
    return [
        Writeable(content=render_copyright_template(MIT_TEMPLATE, copyright), path=LICENSE_FILE_NAME),
    ]


def boost_generator(project_name: str, copyright: Copyright) -> List[Writeable]:
    return [
        Writeable(content=render_template(BOOST_TEMPLATE), path=LICENSE_FILE_NAME),
    ]


def unlicense_generator(project_name: str, copyright: Copyright) -> List[Writeable]:
    return [
        Writeable(content=render_template(UNLICENSE_TEMPLATE), path=UNLICENSE_FILE_NAME),
    ]


def apache_generator(project_name: str, copyright: Copyright) -> List[Writeable]:
    notice = NoticeInput.from_copyright(project_name, copyright)

    return [
        Writeable(content=render_copyright_template(APACHE_TEMPLATE, copyright), path=LICENSE_FILE_NAME),
        Writeable(content=render_notice_template(NOTICE_TEMPLATE, notice), path=NOTICE_FILE_NAME),
    ]


def mozilla_generator(project_name: str, copyright: Copyright) -> List[Writeable]:
    notice = NoticeInput.from_copyright(project_name, copyright)

    return [
        Writeable(content=render_template(MOZILLA_TEMPLATE), path=LICENSE_FILE_NAME),
        Writeable(content=render_notice_template(NOTICE_TEMPLATE, notice), path=NOTICE_FILE_NAME),
    ]


def gnu_lesser_generator(project_name: str, copyright: Copyright) -> List[Writeable]:
    notice = NoticeInput.from_copyright(project_name, copyright)

    return [
        Writeable(content=render_template(LGPL_TEMPLATE), path=COPYING_LESSER_FILE_NAME),
        Writeable(content=render_notice_template(LGPL_NOTICE_TEMPLATE, notice), path=NOTICE_FILE_NAME),
    ]


@dataclass(frozen=True)
class CatalogEntry:
    license_type: LicenseType
    template: str
    generator: WriteableGenerator
    requires_notice: bool
    requires_copyright: bool
    title: str
    artifacts: Tuple[str, ...]


CATALOG: Tuple[CatalogEntry, ...] = (
    CatalogEntry(LicenseType.MIT, MIT_TEMPLATE, mit_generator,
                 requires_notice=False, requires_copyright=True,
                 title="MIT License",
                 artifacts=(LICENSE_FILE_NAME,)),
    CatalogEntry(LicenseType.BOOST_1_0, BOOST_TEMPLATE, boost_generator,
                 requires_notice=False, requires_copyright=False,
                 title="Boost Software License 1.0",
                 artifacts=(LICENSE_FILE_NAME,)),
    CatalogEntry(LicenseType.UNLICENSE, UNLICENSE_TEMPLATE, unlicense_generator,
                 requires_notice=False, requires_copyright=False,
                 title="The Unlicense",
                 artifacts=(UNLICENSE_FILE_NAME,)),
    CatalogEntry(LicenseType.APACHE_2_0, APACHE_TEMPLATE, apache_generator,
                 requires_notice=True, requires_copyright=True,
                 title="Apache License 2.0",
                 artifacts=(LICENSE_FILE_NAME, NOTICE_FILE_NAME)),
    CatalogEntry(LicenseType.MOZILLA_2_0, MOZILLA_TEMPLATE, mozilla_generator,
                 requires_notice=True, requires_copyright=True,
                 title="Mozilla Public License 2.0",
                 artifacts=(LICENSE_FILE_NAME, NOTICE_FILE_NAME)),
    CatalogEntry(LicenseType.GNU_LESSER_3_0, LGPL_TEMPLATE, gnu_lesser_generator,
                 requires_notice=True, requires_copyright=True,
                 title="GNU Lesser General Public License 3.0",
                 artifacts=(COPYING_LESSER_FILE_NAME, NOTICE_FILE_NAME)),
)


def all_license_types() -> List[LicenseType]:
    return [entry.license_type for entry in CATALOG]


def catalog_entry(license_type: Optional[LicenseType]) -> CatalogEntry:
    """
    Look up the catalog entry of a license type.

    Raises:
        UnsupportedLicenseTypeError: If the license type is not in the catalog.
    """
    for entry in CATALOG:
        if entry.license_type is license_type:
            return entry

    raise UnsupportedLicenseTypeError(license_type=license_type)
