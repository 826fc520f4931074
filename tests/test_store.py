"""Tests for the DataStore module."""

from __future__ import annotations

import json
from datetime import UTC, date, datetime, timedelta
from pathlib import Path

import pytest

from ice_popsicles.store import DataStore


class TestDataStoreInit:
    """Test DataStore initialization."""

    def test_creates_tier_paths(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.base == tmp_path
        assert store.raw == tmp_path / "raw"
        assert store.reference == tmp_path / "reference"
        assert store.derived == tmp_path / "derived"


class TestDataStoreWrite:
    """Test writing data with metadata envelopes."""

    def test_write_envelope_format(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        valid = datetime(2026, 3, 1, tzinfo=UTC)
        store.write(Path("raw/dv/WI.json"), [{"site_id": "1"}], source="usgs", valid_until=valid)

        data = json.loads((tmp_path / "raw" / "dv" / "WI.json").read_text())
        assert data["meta"]["source"] == "usgs"
        assert "fetched_at" in data["meta"]
        assert data["meta"]["valid_until"] == valid.isoformat()
        assert data["data"] == [{"site_id": "1"}]

    def test_write_extra_params(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("raw/x.json"), [], source="test", state_code="WI")
        assert store.read_meta(Path("raw/x.json"))["state_code"] == "WI"

    def test_write_serializes_dates(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/d.json"), {"day": date(2020, 12, 1)}, source="test")
        assert store.read(Path("derived/d.json")) == {"day": "2020-12-01"}

    def test_write_rejects_escaping_path(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "store")
        with pytest.raises(ValueError, match="escapes"):
            store.write(Path("../outside.json"), {}, source="test")


class TestDataStoreRead:
    """Test reading payloads and envelopes."""

    def test_read_missing(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.read(Path("raw/nope.json")) is None
        assert store.read_raw(Path("raw/nope.json")) is None
        assert store.read_meta(Path("raw/nope.json")) == {}

    def test_read_list_payload(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("raw/a.json"), [1, 2, 3], source="test")
        assert store.read(Path("raw/a.json")) == [1, 2, 3]


class TestDataStoreFreshness:
    """Test TTL checks."""

    def test_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(
            Path("raw/a.json"), [], source="t", valid_until=datetime.now(UTC) + timedelta(hours=1)
        )
        assert store.is_fresh(Path("raw/a.json"))

    def test_expired(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(
            Path("raw/a.json"), [], source="t", valid_until=datetime.now(UTC) - timedelta(hours=1)
        )
        assert not store.is_fresh(Path("raw/a.json"))

    def test_no_valid_until_is_stale(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/a.json"), [], source="t")
        assert not store.is_fresh(Path("derived/a.json"))

    def test_missing_is_stale(self, tmp_path: Path) -> None:
        assert not DataStore(tmp_path).is_fresh(Path("raw/missing.json"))

    def test_naive_expiry_treated_as_utc(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        full = tmp_path / "raw" / "a.json"
        full.parent.mkdir(parents=True)
        future = (datetime.now(UTC) + timedelta(hours=1)).replace(tzinfo=None)
        full.write_text(json.dumps({"meta": {"valid_until": future.isoformat()}, "data": []}))
        assert store.is_fresh(Path("raw/a.json"))
