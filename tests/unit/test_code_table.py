"""
Tests for the compiled-in ISO 4217 table.

- Both key sets are unique and the two code maps are mutual inverses.
- Mappings are read-only.
- Hand-built tables reject duplicate and malformed entries.
"""

import pytest

from currency_kernel.domain.code_table import ISO4217_TABLE, CodeTable
from currency_kernel.domain.iso4217_data import ISO4217_ENTRIES, NumericCode
from currency_kernel.domain.values import CodeEntry, Metadata


class TestDatasetShape:
    """The shipped dataset itself."""

    def test_every_entry_indexed(self):
        assert len(ISO4217_TABLE) == len(ISO4217_ENTRIES)
        assert len(ISO4217_TABLE.alpha_to_numeric) == len(ISO4217_ENTRIES)
        assert len(ISO4217_TABLE.numeric_to_alpha) == len(ISO4217_ENTRIES)
        assert len(ISO4217_TABLE.numeric_to_metadata) == len(ISO4217_ENTRIES)

    def test_maps_are_mutual_inverses(self):
        for alpha, numeric in ISO4217_TABLE.alpha_to_numeric.items():
            assert ISO4217_TABLE.numeric_to_alpha[numeric] == alpha
        for numeric, alpha in ISO4217_TABLE.numeric_to_alpha.items():
            assert ISO4217_TABLE.alpha_to_numeric[alpha] == numeric

    def test_metadata_alpha_matches_index(self):
        for numeric, metadata in ISO4217_TABLE.numeric_to_metadata.items():
            assert metadata.alpha_code == ISO4217_TABLE.numeric_to_alpha[numeric]

    def test_alpha_keys_canonical(self):
        for alpha in ISO4217_TABLE.alpha_to_numeric:
            assert len(alpha) == 3
            assert alpha == alpha.strip().upper()

    def test_numeric_codes_in_range(self):
        assert all(1 <= n <= 999 for n in ISO4217_TABLE.numeric_to_alpha)

    def test_descriptions_non_empty_and_minor_units_non_negative(self):
        for entry in ISO4217_TABLE:
            assert entry.description
            assert entry.description == entry.description.strip()
            assert entry.minor_units >= 0

    def test_only_reserve_currencies_carry_symbols(self):
        with_symbol = {e.alpha_code: e.symbol for e in ISO4217_TABLE if e.symbol}
        assert with_symbol == {"USD": "$", "EUR": "€", "GBP": "£"}

    @pytest.mark.parametrize(
        "alpha, numeric, minor_units",
        [
            ("JPY", 392, 0),
            ("KWD", 414, 3),
            ("CLF", 990, 4),
            ("UYW", 927, 4),
            ("XXX", 999, 0),
            ("ALL", 8, 2),
        ],
    )
    def test_spot_values(self, alpha, numeric, minor_units):
        assert ISO4217_TABLE.alpha_to_numeric[alpha] == numeric
        assert ISO4217_TABLE.numeric_to_metadata[numeric].minor_units == minor_units


class TestNumericCode:
    """Named constants mirror the table one for one."""

    def test_one_member_per_entry(self):
        assert len(NumericCode) == len(ISO4217_TABLE) == 179

    def test_members_match_table(self):
        assert {m.name: int(m) for m in NumericCode} == dict(ISO4217_TABLE.alpha_to_numeric)

    def test_known_constants(self):
        assert NumericCode.USD == 840
        assert NumericCode.RUB == 643
        assert NumericCode.BHD == 48
        assert NumericCode.XXX == 999

    def test_lookup_by_value(self):
        assert NumericCode(978) is NumericCode.EUR
        with pytest.raises(ValueError):
            NumericCode(1000)


class TestImmutability:
    """The table exposes read-only views only."""

    def test_alpha_map_rejects_writes(self):
        with pytest.raises(TypeError):
            ISO4217_TABLE.alpha_to_numeric["ZZZ"] = 1  # type: ignore[index]

    def test_numeric_map_rejects_writes(self):
        with pytest.raises(TypeError):
            ISO4217_TABLE.numeric_to_alpha[1] = "ZZZ"  # type: ignore[index]

    def test_metadata_map_rejects_deletes(self):
        with pytest.raises(TypeError):
            del ISO4217_TABLE.numeric_to_metadata[840]  # type: ignore[attr-defined]

    def test_metadata_values_frozen(self):
        metadata = ISO4217_TABLE.numeric_to_metadata[840]
        with pytest.raises(AttributeError):
            metadata.symbol = "US$"  # type: ignore[misc]

    def test_table_attributes_not_reassignable(self):
        with pytest.raises(AttributeError):
            ISO4217_TABLE.alpha_to_numeric = {}  # type: ignore[misc]


class TestHandBuiltTables:
    """CodeTable construction checks."""

    def test_small_table(self):
        table = CodeTable([
            CodeEntry(1, "AAA", "Alpha", 2),
            CodeEntry(2, "BBB", "Beta", 0, "b"),
        ])
        assert table.alpha_to_numeric == {"AAA": 1, "BBB": 2}
        assert table.numeric_to_metadata[2] == Metadata("Beta", 0, "BBB", "b")
        assert [e.alpha_code for e in table] == ["AAA", "BBB"]

    def test_duplicate_numeric_rejected(self):
        with pytest.raises(ValueError, match="Duplicate numeric code"):
            CodeTable([CodeEntry(1, "AAA", "Alpha", 2), CodeEntry(1, "BBB", "Beta", 2)])

    def test_duplicate_alpha_rejected(self):
        with pytest.raises(ValueError, match="Duplicate alpha code"):
            CodeTable([CodeEntry(1, "AAA", "Alpha", 2), CodeEntry(2, "AAA", "Beta", 2)])

    @pytest.mark.parametrize(
        "entry",
        [
            CodeEntry(0, "AAA", "Alpha", 2),
            CodeEntry(1000, "AAA", "Alpha", 2),
            CodeEntry(1, "aaa", "Alpha", 2),
            CodeEntry(1, "AAAA", "Alpha", 2),
            CodeEntry(1, "A1A", "Alpha", 2),
            CodeEntry(1, "AAA", "", 2),
            CodeEntry(1, "AAA", "Alpha", -1),
        ],
    )
    def test_malformed_entry_rejected(self, entry):
        with pytest.raises(ValueError):
            CodeTable([entry])
