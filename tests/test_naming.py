"""
Unit tests for sign_library/pipeline/naming.py
"""

import pytest

from sign_library.analysis.color_classifier import COLOR_CODES
from sign_library.pipeline.naming import ColorCounterTable, allocate_name, file_extension


class TestColorCounterTable:

    def test_every_code_starts_at_one(self):
        table = ColorCounterTable()
        assert table.snapshot() == {code: 1 for code in COLOR_CODES}

    def test_take_advances_only_that_code(self):
        table = ColorCounterTable()
        assert table.take("R") == 1
        assert table.take("R") == 2
        assert table.peek("R") == 3
        assert table.peek("G") == 1

    def test_unknown_code(self):
        with pytest.raises(ValueError):
            ColorCounterTable().take("X")

    def test_tables_are_independent(self):
        first, second = ColorCounterTable(), ColorCounterTable()
        first.take("B")
        assert second.peek("B") == 1


class TestAllocateName:

    def test_padded_name(self):
        assert allocate_name("Y", ColorCounterTable(), "png") == "Y001.png"

    def test_sequence_has_no_gaps_or_duplicates(self):
        table = ColorCounterTable()
        names = [allocate_name("R", table, "jpg") for _ in range(250)]
        assert names == [f"R{i:03d}.jpg" for i in range(1, 251)]
        assert len(set(names)) == 250

    def test_counter_grows_past_three_digits(self):
        table = ColorCounterTable()
        for _ in range(999):
            allocate_name("K", table, "png")
        assert allocate_name("K", table, "png") == "K1000.png"

    def test_extension_is_used_verbatim(self):
        assert allocate_name("W", ColorCounterTable(), "JPEG") == "W001.JPEG"


class TestFileExtension:

    @pytest.mark.parametrize("name,expected", [
        ("stop.png", "png"),
        ("Yield.PNG", "PNG"),
        ("sign.final.webp", "webp"),
        ("noext", "noext"),
    ])
    def test_last_suffix_case_preserved(self, name, expected):
        assert file_extension(name) == expected
