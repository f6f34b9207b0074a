import pytest

from ligen.errors import (
    CopyrightNotFoundError,
    EndYearBeforeStartError,
    InvalidNoticeError,
    NoMatchError,
)
from ligen.models import Copyright
from ligen.parsers import (
    parse_copyright,
    parse_doc_for_copyright,
    parse_project_name_from_notice,
)


class TestParseCopyright:

    @pytest.mark.parametrize("line, expected", [
        ("Copyright (C) 2024-2025 Max Moon", Copyright("Max Moon", 2024, 2025)),
        ("Copyright (c) 2024 Max Moon", Copyright("Max Moon", 2024, 0)),
        ("Copyright 2019-2030 Peanut Butter Inc.", Copyright("Peanut Butter Inc.", 2019, 2030)),
        ("Copyright(c)2001 Jane", Copyright("Jane", 2001, 0)),
        ("   Copyright 2020 Indented Holder  ", Copyright("Indented Holder", 2020, 0)),
        ("Copyright 1975 Old Holder", Copyright("Old Holder", 1975, 0)),
    ])
    def test_valid_lines(self, line, expected):
        assert parse_copyright(line) == expected

    @pytest.mark.parametrize("line", [
        "Copyright (C) LALA-L000 Max Moon",
        "Copyright 2024",
        "copyright 2024 Max Moon",
        "Copyright (X) 2024 Max Moon",
        "Copyright 24 Max Moon",
        "MIT License",
        "",
    ])
    def test_no_match(self, line):
        with pytest.raises(NoMatchError):
            parse_copyright(line)

    def test_reversed_range(self):
        with pytest.raises(EndYearBeforeStartError):
            parse_copyright("Copyright 2025-2024 Max Moon")

    def test_non_ascii_digits_are_rejected(self):
        with pytest.raises(NoMatchError):
            parse_copyright("Copyright ٢٠٢٤ Max Moon")


class TestParseDocForCopyright:

    def test_first_valid_line_wins(self):
        document = (
            "MIT License\n"
            "\n"
            "Copyright (c) 2020-2022 First Holder\n"
            "Copyright (c) 2021 Second Holder\n"
        )

        assert parse_doc_for_copyright(document) == Copyright("First Holder", 2020, 2022)

    def test_skips_reversed_ranges(self):
        document = "Copyright 2030-2020 Wrong\nCopyright 2020 Right\n"
        assert parse_doc_for_copyright(document).holder == "Right"

    def test_windows_line_endings(self):
        document = "acme\r\nCopyright 2021 Max Moon\r\n"
        assert parse_doc_for_copyright(document) == Copyright("Max Moon", 2021, 0)

    @pytest.mark.parametrize("document", ["", "\n\n", "Permission is hereby granted"])
    def test_not_found(self, document):
        with pytest.raises(CopyrightNotFoundError):
            parse_doc_for_copyright(document)


class TestParseProjectNameFromNotice:

    def test_first_line(self):
        assert parse_project_name_from_notice("ligen\nCopyright 2024 Max Moon") == "ligen"

    def test_whole_first_line_is_trimmed(self):
        assert parse_project_name_from_notice("  my project \r\nCopyright 2024 Max") == "my project"

    def test_single_line(self):
        assert parse_project_name_from_notice("ligen") == "ligen"

    def test_empty_document(self):
        with pytest.raises(InvalidNoticeError, match="empty document"):
            parse_project_name_from_notice("")

    @pytest.mark.parametrize("document", ["\nligen", "   \nligen", "\r\n"])
    def test_blank_first_line(self, document):
        with pytest.raises(InvalidNoticeError, match="first line is empty"):
            parse_project_name_from_notice(document)
