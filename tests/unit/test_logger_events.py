import json

from refsearch.core.logger import RefSearchLogger


def _events(log) -> list[dict]:
    return [json.loads(line) for line in log.log_file.read_text(encoding="utf-8").splitlines()]


def test_search_lifecycle_written_as_json_lines(tmp_path):
    log = RefSearchLogger(tmp_path)
    log.search_dispatched(3, "us", ["countries", "currencies"])
    log.category_failed("currencies", "timeout", "no response\nwithin 5s", 5.0)
    log.category_settled(3, "countries", 1, 0.002)
    log.search_settled(3, 1, ["currencies"], 5.01)

    events = _events(log)
    assert [e["event_type"] for e in events] == [
        "SEARCH_DISPATCHED",
        "CATEGORY_FAILED",
        "CATEGORY_SETTLED",
        "SEARCH_SETTLED",
    ]
    assert events[0]["data"] == {"generation": 3, "query": "us", "categories": ["countries", "currencies"]}
    assert events[1]["data"]["kind"] == "timeout"
    assert events[3]["data"]["failed_categories"] == ["currencies"]
    assert all("timestamp" in e for e in events)


def test_error_records_exception_text(tmp_path):
    log = RefSearchLogger(tmp_path)
    log.error("Search listener failed", exception=ValueError("bad snapshot"))
    (event,) = _events(log)
    assert event["event_type"] == "ERROR"
    assert event["data"]["exception"] == "bad snapshot"
