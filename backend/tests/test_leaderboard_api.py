from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi import HTTPException

from clanboard.api.deps import get_error_sink, get_leaderboard_source
from clanboard.api.routes.leaderboards import leaderboard
from clanboard.services.error_sink import LoggingErrorSink
from clanboard.services.leaderboard_source import SqlLeaderboardSource
from tests.testkit import ApiError, FailingSource, StaticSource, rows


def test_route_returns_ranked_entries(sink):
    source = StaticSource(rows(("Bob", 50), ("Alice", 100)))

    out = leaderboard("Raids", source=source, sink=sink)

    assert out.category == "raids"
    assert [(e.display_name, e.standing) for e in out.entries] == [("Alice", 1), ("Bob", 2)]
    assert out.entries[1].amount == Decimal(50)
    assert out.entries[1].percent_distance == 50.0
    assert out.entries[1].percent_ranking == 50.0


def test_route_fetch_failure_returns_empty_entries(sink):
    out = leaderboard("titles", source=FailingSource(), sink=sink)

    assert out.category == "titles"
    assert out.entries == []
    assert len(sink.records) == 1


def test_route_unknown_category_is_400(sink):
    source = StaticSource([])

    with pytest.raises(HTTPException) as exc_info:
        leaderboard("trials", source=source, sink=sink)

    assert exc_info.value.status_code == 400
    assert source.calls == []


def test_route_serializes_to_json(sink):
    out = leaderboard("raids", source=StaticSource(rows(("Alice", 3))), sink=sink)

    payload = out.model_dump(mode="json")

    assert payload["entries"][0]["display_name"] == "Alice"
    assert payload["entries"][0]["standing"] == 1
    assert payload["entries"][0]["percent_distance"] == 100.0


def test_default_dependencies():
    assert isinstance(get_error_sink(), LoggingErrorSink)
    source = get_leaderboard_source(db=object())
    assert isinstance(source, SqlLeaderboardSource)


@pytest.mark.integration
@pytest.mark.parametrize("category", ["titles", "raids"])
def test_live_leaderboard_shape(api, category):
    out = api.call("GET", f"/leaderboards/{category}")

    assert out["category"] == category
    entries = out["entries"]
    assert [e["standing"] for e in entries] == list(range(1, len(entries) + 1))
    if entries:
        assert entries[0]["percent_distance"] == 100.0
        assert entries[0]["percent_ranking"] == 100.0
    for prev, cur in zip(entries, entries[1:]):
        assert Decimal(str(prev["amount"])) >= Decimal(str(cur["amount"]))
        assert prev["percent_ranking"] >= cur["percent_ranking"]


@pytest.mark.integration
def test_live_unknown_category_is_400(api):
    with pytest.raises(ApiError) as exc_info:
        api.call("GET", "/leaderboards/trials")

    assert exc_info.value.status_code == 400

