"""最寄り神社検索サービス"""
from typing import Optional, Protocol

from ..domain.models import Coordinate, NearestResult, ShrineRecord
from ....shared.logging.config import get_logger
from ....shared.utils.geo import haversine_distance_meters, latitude_band, round_half_up
from ....shared.utils.validation import require_finite_number

logger = get_logger(__name__)

# 検出半径（メートル、固定）
RADIUS_METERS = 1000

# 1回の検索で取得する候補の上限
CANDIDATE_LIMIT = 200


class ShrineSource(Protocol):
    """緯度範囲で神社を取得できるデータソース"""

    def find_by_latitude_range(
        self, min_lat: float, max_lat: float, limit: int
    ) -> list[ShrineRecord]: ...


class NearestShrineFinder:
    """
    指定座標から半径 RADIUS_METERS 以内で最も近い神社を探す

    緯度の帯で候補を絞り込んでから、候補ごとにHaversine距離を計算する。
    経度方向は絞り込まないため、極付近や日付変更線をまたぐ場合は近似になる。
    """

    def __init__(self, shrine_source: ShrineSource) -> None:
        """
        Args:
            shrine_source: 神社データの取得元（通常は ShrineRepository）
        """
        self.shrine_source = shrine_source

    def find(self, query: Coordinate) -> NearestResult:
        """
        最寄りの神社を検索

        Args:
            query: 検索地点

        Returns:
            NearestResult: 検索結果（見つからない場合は全フィールドNone）

        Raises:
            InvalidArgumentError: 緯度・経度が有限の数値でない場合（取得前に判定）
            StorageError: 神社データの取得に失敗した場合
        """
        lat = require_finite_number(query.latitude, "lat")
        lng = require_finite_number(query.longitude, "lng")

        min_lat, max_lat = latitude_band(lat, RADIUS_METERS)
        candidates = self.shrine_source.find_by_latitude_range(
            min_lat, max_lat, CANDIDATE_LIMIT
        )

        best: Optional[ShrineRecord] = None
        best_distance = 0.0

        for shrine in candidates:
            if not shrine.has_valid_coordinates:
                logger.debug(f"Skipping shrine without coordinates: {shrine.shrine_id}")
                continue

            distance = haversine_distance_meters(lat, lng, shrine.latitude, shrine.longitude)
            if distance > RADIUS_METERS:
                continue

            # 同距離の場合は先に取得した方を優先
            if best is None or distance < best_distance:
                best = shrine
                best_distance = distance

        if best is None:
            logger.info(
                f"No shrine within {RADIUS_METERS}m of ({lat}, {lng}) "
                f"among {len(candidates)} candidates"
            )
            return NearestResult.not_found()

        result = NearestResult(
            shrine_id=best.shrine_id,
            name=best.name,
            distance_meters=round_half_up(best_distance),
            prefecture=best.prefecture,
            latitude=best.latitude,
            longitude=best.longitude,
        )
        logger.info(
            f"Nearest shrine for ({lat}, {lng}): {result.shrine_id} - {result.name} "
            f"({result.distance_meters}m)"
        )
        return result
