import unittest
from datetime import date
from unittest.mock import Mock

from ligen.catalog import LicenseType
from ligen.constants import MAX_NAME_LENGTH, NOTICE_FILE_NAME
from ligen.errors import (
    CopyrightNotFoundError,
    DetectionFailedError,
    EmptyHolderError,
    EmptyProjectNameError,
    EndYearBeforeStartError,
    InvalidNoticeError,
    ProjectNameTooLongError,
    StartYearTooNewError,
    UnsupportedLicenseTypeError,
)
from ligen.ligen import License, load
from ligen.models import Copyright

CURRENT_YEAR = date.today().year


def sources(license):
    """
    Render a license and return sources serving its artifacts.
    """
    writeables = license.render()
    notice = next((w.content for w in writeables if w.path == NOTICE_FILE_NAME), "")

    return (lambda: writeables[0].content), (lambda: notice)


class TestLicenseCreate(unittest.TestCase):

    def test_create(self):
        license = License.create(" acme ", "Max Moon", CURRENT_YEAR - 1, CURRENT_YEAR,
                                 LicenseType.APACHE_2_0)

        self.assertEqual(license.project_name, "acme")
        self.assertEqual(license.copyright, Copyright("Max Moon", CURRENT_YEAR - 1, CURRENT_YEAR))
        self.assertIs(license.license_type, LicenseType.APACHE_2_0)

    def test_project_name_optional_without_notice(self):
        license = License.create("", "Max Moon", CURRENT_YEAR, 0, LicenseType.MIT)
        self.assertEqual(license.project_name, "")

    def test_project_name_required_with_notice(self):
        for license_type in [LicenseType.APACHE_2_0, LicenseType.MOZILLA_2_0,
                             LicenseType.GNU_LESSER_3_0]:
            with self.subTest(license_type=license_type):
                with self.assertRaises(EmptyProjectNameError):
                    License.create("  ", "Max Moon", CURRENT_YEAR, 0, license_type)

    def test_project_name_too_long(self):
        with self.assertRaises(ProjectNameTooLongError):
            License.create("a" * (MAX_NAME_LENGTH + 1), "Max Moon", CURRENT_YEAR, 0,
                           LicenseType.MIT)

    def test_invalid_copyright(self):
        with self.assertRaises(StartYearTooNewError):
            License.create("acme", "Max Moon", CURRENT_YEAR + 1, 0, LicenseType.MIT)

        with self.assertRaises(EmptyHolderError):
            License.create("acme", "", CURRENT_YEAR, 0, LicenseType.MIT)

    def test_unsupported_license_type(self):
        with self.assertRaises(UnsupportedLicenseTypeError):
            License.create("acme", "Max Moon", CURRENT_YEAR, 0, "WTFPL")

    def test_render_without_license_type(self):
        with self.assertRaises(UnsupportedLicenseTypeError):
            License().render()


class TestLicenseSetters(unittest.TestCase):

    def setUp(self):
        self.license = License.create("acme", "Max Moon", CURRENT_YEAR - 3, CURRENT_YEAR,
                                      LicenseType.APACHE_2_0)

    def test_set_project_name(self):
        self.license.set_project_name(" widgets ")
        self.assertEqual(self.license.project_name, "widgets")

        with self.assertRaises(EmptyProjectNameError):
            self.license.set_project_name("")

    def test_set_project_name_always_required(self):
        license = License.create("", "Max Moon", CURRENT_YEAR, 0, LicenseType.MIT)

        with self.assertRaises(EmptyProjectNameError):
            license.set_project_name(" ")

    def test_set_holder(self):
        self.license.set_holder("Peanut Butter")
        self.assertEqual(self.license.copyright.holder, "Peanut Butter")

    def test_set_years(self):
        self.license.set_copyright_start_year(CURRENT_YEAR - 1)
        self.license.set_copyright_end_year(CURRENT_YEAR + 1)

        self.assertEqual(self.license.copyright.years, (CURRENT_YEAR - 1, CURRENT_YEAR + 1))

        with self.assertRaises(EndYearBeforeStartError):
            self.license.set_copyright_end_year(CURRENT_YEAR - 2)

    def test_set_license_type(self):
        self.license.set_license_type(LicenseType.MIT)
        self.assertEqual([w.path for w in self.license.render()], ["LICENSE"])


class TestLoad(unittest.TestCase):

    def test_round_trip(self):
        for license_type in LicenseType:
            with self.subTest(license_type=license_type):
                original = License.create("acme", "Peanut Butter", CURRENT_YEAR - 1,
                                          CURRENT_YEAR, license_type)

                loaded = load(License(), *sources(original))

                self.assertIs(loaded.license_type, license_type)

                if license_type.requires_copyright:
                    self.assertEqual(loaded.copyright, original.copyright)
                else:
                    self.assertEqual(loaded.copyright, Copyright())

                if license_type.requires_notice:
                    self.assertEqual(loaded.project_name, "acme")
                else:
                    self.assertEqual(loaded.project_name, "")

    def test_populates_the_given_license(self):
        original = License.create("", "Max Moon", CURRENT_YEAR, 0, LicenseType.MIT)
        target = License()

        self.assertIs(load(target, *sources(original)), target)
        self.assertEqual(target, original)

    def test_notice_not_read_when_not_required(self):
        original = License.create("", "Max Moon", CURRENT_YEAR, 0, LicenseType.MIT)
        license_source, _ = sources(original)
        notice_source = Mock(side_effect=AssertionError("notice must not be read"))

        load(License(), license_source, notice_source)

        notice_source.assert_not_called()

    def test_copyright_comes_from_notice(self):
        original = License.create("acme", "Max Moon", CURRENT_YEAR, 0, LicenseType.MOZILLA_2_0)
        license_source, _ = sources(original)

        loaded = load(License(), license_source, lambda: "widgets\nCopyright 2001-2002 Jane Doe")

        self.assertEqual(loaded.project_name, "widgets")
        self.assertEqual(loaded.copyright, Copyright("Jane Doe", 2001, 2002))

    def test_loaded_years_are_not_checked_against_today(self):
        original = License.create("", "Max Moon", CURRENT_YEAR, 0, LicenseType.MIT)
        license_source, _ = sources(original)
        old_license = license_source().replace(f"{CURRENT_YEAR} Max Moon", "1970 Max Moon")

        loaded = load(License(), lambda: old_license, lambda: "")

        self.assertEqual(loaded.copyright, Copyright("Max Moon", 1970, 0))

    def test_missing_copyright(self):
        original = License.create("acme", "Max Moon", CURRENT_YEAR, 0, LicenseType.APACHE_2_0)
        license_source, _ = sources(original)

        with self.assertRaises(CopyrightNotFoundError):
            load(License(), license_source, lambda: "acme\nAll rights reserved")

    def test_invalid_notice(self):
        original = License.create("acme", "Max Moon", CURRENT_YEAR, 0, LicenseType.APACHE_2_0)
        license_source, _ = sources(original)

        with self.assertRaises(InvalidNoticeError):
            load(License(), license_source, lambda: "")

    def test_unknown_license(self):
        with self.assertRaises(DetectionFailedError):
            load(License(), lambda: "The dog likes to jump and play.", lambda: "")
