"""DMC document index parser."""

from typing import Iterable, List

from loguru import logger

from floodwatch.core.models import RawReportRecord
from floodwatch.utils.constants import MEASUREMENT_KEYWORD

DELIMITER = "\t"


def parse_index(text: str) -> List[RawReportRecord]:
    """Parse the tab-separated index into water level report records.

    Rows shorter than the header get empty strings for the missing cells.
    Only rows whose description mentions a water level are returned.
    """
    lines = (text or "").strip().split("\n")
    if not lines or not lines[0].strip():
        return []

    headers = [h.strip() for h in lines[0].rstrip("\r").split(DELIMITER)]
    records = []
    for line in lines[1:]:
        values = line.rstrip("\r").split(DELIMITER)
        cells = {
            header: values[i] if i < len(values) else ""
            for i, header in enumerate(headers)
        }
        record = RawReportRecord.from_cells(cells)
        if MEASUREMENT_KEYWORD in record.description.lower():
            records.append(record)
    return records


def select_in_range(
    records: Iterable[RawReportRecord],
    start_date: str,
    end_date: str,
    limit: int = 10,
) -> List[RawReportRecord]:
    """Keep records dated within [start_date, end_date], first `limit` in file order."""
    in_range = [r for r in records if start_date <= r.date_str <= end_date]
    return in_range[:limit]


class ReportIndexParser:
    """Parse the upstream index and pick in-range measurement candidates."""

    def __init__(self, max_candidates: int = 10):
        self.max_candidates = max_candidates

    def parse(self, text: str) -> List[RawReportRecord]:
        records = parse_index(text)
        logger.debug(f"Parsed {len(records)} water level records from index")
        return records

    def candidates(
        self, records: List[RawReportRecord], start_date: str, end_date: str
    ) -> List[RawReportRecord]:
        selected = select_in_range(records, start_date, end_date, self.max_candidates)
        logger.info(f"Found {len(selected)} water level reports in {start_date}..{end_date}")
        return selected
