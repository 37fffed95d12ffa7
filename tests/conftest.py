import httpx
import pytest

from floodwatch.data_sources.dmc_client import DMCClient

BASE_URL = "https://dmc.test/data"

INDEX_HEADER = "doc_id\tdate_str\ttime_str\tut\tdescription"

INDEX_TEXT = "\n".join([
    INDEX_HEADER,
    "X\t2025-12-18\t09:30\t1766030400\tRiver water level report",
    "Y\t2025-12-17\t15:30\t\tWater Level and Flood Warnings",
    "Z\t2025-12-18\t10:00\t1766032200\tLandslide early warning",
    "W\t2025-12-10\t08:00\t1765333800\tWater level report",
])

BLOCKS = [{"page": 1, "lines": ["Kelani Ganga", "Nagalagam Street", "2.15"]}]


def make_transport(index_text=INDEX_TEXT, index_status=200, blocks=BLOCKS, blocks_status=200, calls=None):
    """Fake upstream: serves the index and any blocks.json path."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(str(request.url))
        path = request.url.path
        if path.endswith("docs_last100.tsv"):
            return httpx.Response(index_status, text=index_text)
        if path.endswith("blocks.json"):
            if blocks_status != 200:
                return httpx.Response(blocks_status, text="Not Found")
            return httpx.Response(200, json=blocks)
        return httpx.Response(404)

    return httpx.MockTransport(handler)


@pytest.fixture
def index_text():
    return INDEX_TEXT


@pytest.fixture
def dmc_client():
    return DMCClient(base_url=BASE_URL, transport=make_transport())


@pytest.fixture
def small_districts():
    return {
        "Colombo": (6.9271, 79.8612),
        "Galle": (6.0535, 80.2210),
        "Matara": (5.9549, 80.5550),
    }
