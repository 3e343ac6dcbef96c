"""神社リポジトリのテスト"""
import math
from unittest.mock import MagicMock

import pytest

from shrine_log.features.detection.domain.models import ShrineRecord
from shrine_log.features.storage.repositories.shrine_repository import ShrineRepository
from shrine_log.shared.exceptions.errors import StorageError


@pytest.fixture
def firestore_client() -> MagicMock:
    return MagicMock()


def test_find_by_latitude_range_queries_lat_field(firestore_client: MagicMock) -> None:
    """lat フィールドの範囲と上限で問い合わせる"""
    firestore_client.query_range.return_value = []
    repository = ShrineRepository(firestore_client)

    repository.find_by_latitude_range(35.0, 35.1, 200)

    firestore_client.query_range.assert_called_once_with("shrines", "lat", 35.0, 35.1, limit=200)


def test_find_by_latitude_range_uses_configured_collection(firestore_client: MagicMock) -> None:
    firestore_client.query_range.return_value = []
    repository = ShrineRepository(firestore_client, collection_name="test_shrines")

    repository.find_by_latitude_range(35.0, 35.1, 10)

    assert firestore_client.query_range.call_args.args[0] == "test_shrines"


def test_find_by_latitude_range_keeps_fetch_order(firestore_client: MagicMock) -> None:
    """Firestoreの返却順を保つ"""
    firestore_client.query_range.return_value = [
        ("b", {"name": "乙", "lat": 35.05, "lng": 139.0}),
        ("a", {"name": "甲", "lat": 35.02, "lng": 139.0, "prefecture": "東京都"}),
    ]

    shrines = ShrineRepository(firestore_client).find_by_latitude_range(35.0, 35.1, 200)

    assert [shrine.shrine_id for shrine in shrines] == ["b", "a"]
    assert shrines[1] == ShrineRecord("a", name="甲", prefecture="東京都", latitude=35.02, longitude=139.0)


def test_find_by_latitude_range_wraps_unexpected_errors(firestore_client: MagicMock) -> None:
    firestore_client.query_range.side_effect = RuntimeError("permission denied")

    with pytest.raises(StorageError, match="permission denied"):
        ShrineRepository(firestore_client).find_by_latitude_range(35.0, 35.1, 200)


def test_find_by_latitude_range_reraises_storage_error(firestore_client: MagicMock) -> None:
    original = StorageError("unavailable")
    firestore_client.query_range.side_effect = original

    with pytest.raises(StorageError) as exc_info:
        ShrineRepository(firestore_client).find_by_latitude_range(35.0, 35.1, 200)

    assert exc_info.value is original


def test_count_delegates_to_client(firestore_client: MagicMock) -> None:
    firestore_client.count_documents.return_value = 42

    assert ShrineRepository(firestore_client).count() == 42
    firestore_client.count_documents.assert_called_once_with("shrines")


@pytest.mark.parametrize(
    "data,expected",
    [
        (
            {"name": "明治神宮", "prefecture": "東京都", "lat": 35.6764, "lng": 139.6993},
            ShrineRecord("id", name="明治神宮", prefecture="東京都", latitude=35.6764, longitude=139.6993),
        ),
        ({"lat": 35, "lng": 139}, ShrineRecord("id", latitude=35, longitude=139)),
        ({"name": 123, "prefecture": None, "lat": "35.6", "lng": 139.0}, ShrineRecord("id", longitude=139.0)),
        ({"lat": True, "lng": math.nan}, ShrineRecord("id")),
        ({}, ShrineRecord("id")),
    ],
)
def test_shrine_record_from_firestore_dict(data: dict, expected: ShrineRecord) -> None:
    """型が合わないフィールドはNoneになる"""
    assert ShrineRecord.from_firestore_dict("id", data) == expected


def test_shrine_record_coordinate_validity() -> None:
    assert ShrineRecord("id", latitude=35.0, longitude=139.0).has_valid_coordinates
    assert not ShrineRecord("id", latitude=35.0).has_valid_coordinates
    assert not ShrineRecord("id", longitude=139.0).has_valid_coordinates
