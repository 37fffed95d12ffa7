from floodwatch.core.parser import ReportIndexParser, parse_index, select_in_range
from tests.conftest import INDEX_HEADER, INDEX_TEXT


class TestParseIndex:
    def test_keeps_only_water_level_rows(self):
        records = parse_index(INDEX_TEXT)
        assert [r.doc_id for r in records] == ["X", "Y", "W"]

    def test_fields_mapped_by_header(self):
        record = parse_index(INDEX_TEXT)[0]
        assert record.date_str == "2025-12-18"
        assert record.time_str == "09:30"
        assert record.ut == "1766030400"
        assert record.remarks == ""
        assert record.cells["description"] == "River water level report"

    def test_empty_input(self):
        assert parse_index("") == []
        assert parse_index("   \n") == []
        assert parse_index(INDEX_HEADER) == []

    def test_short_rows_padded_not_dropped(self):
        text = "description\tdate_str\tdoc_id\tut\nwater level\t2025-12-18"
        records = parse_index(text)
        assert len(records) == 1
        assert records[0].doc_id == ""
        assert records[0].ut == ""

    def test_columns_in_any_order(self):
        text = "description\tdoc_id\tdate_str\nWATER LEVEL bulletin\tA1\t2025-01-02\r\n"
        record = parse_index(text)[0]
        assert record.doc_id == "A1"
        assert record.date_str == "2025-01-02"


class TestSelectInRange:
    def test_inclusive_bounds(self):
        records = parse_index(INDEX_TEXT)
        selected = select_in_range(records, "2025-12-17", "2025-12-18")
        assert [r.doc_id for r in selected] == ["X", "Y"]

    def test_single_day(self):
        records = parse_index(INDEX_TEXT)
        assert [r.doc_id for r in select_in_range(records, "2025-12-10", "2025-12-10")] == ["W"]

    def test_cap_in_file_order(self):
        rows = [INDEX_HEADER] + [
            f"D{i}\t2025-12-18\t10:00\t\twater level" for i in range(15)
        ]
        parser = ReportIndexParser(max_candidates=10)
        selected = parser.candidates(parser.parse("\n".join(rows)), "2025-12-18", "2025-12-18")
        assert len(selected) == 10
        assert selected[0].doc_id == "D0"
        assert selected[-1].doc_id == "D9"

    def test_nothing_in_range(self):
        records = parse_index(INDEX_TEXT)
        assert select_in_range(records, "2026-01-01", "2026-01-31") == []
