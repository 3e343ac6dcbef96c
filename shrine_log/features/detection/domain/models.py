"""神社検出機能のドメインモデル"""
from dataclasses import dataclass
from typing import Any, Optional

from ....shared.utils.validation import is_finite_number


@dataclass(frozen=True)
class Coordinate:
    """検索地点（度）"""

    latitude: float  # 緯度
    longitude: float  # 経度

    def __repr__(self) -> str:
        return f"Coordinate(lat={self.latitude}, lng={self.longitude})"


@dataclass(frozen=True)
class ShrineRecord:
    """
    神社データ（Firestore `shrines` コレクション、読み取り専用）

    緯度・経度が数値でないドキュメントもそのまま保持し、
    検索時に has_valid_coordinates で除外する
    """

    shrine_id: str
    name: Optional[str] = None
    prefecture: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_valid_coordinates(self) -> bool:
        """緯度・経度がともに有限の数値か"""
        return is_finite_number(self.latitude) and is_finite_number(self.longitude)

    @classmethod
    def from_firestore_dict(cls, shrine_id: str, data: dict[str, Any]) -> "ShrineRecord":
        """Firestoreのドキュメントから生成（型が合わないフィールドはNone）"""
        name = data.get("name")
        prefecture = data.get("prefecture")
        lat = data.get("lat")
        lng = data.get("lng")
        return cls(
            shrine_id=shrine_id,
            name=name if isinstance(name, str) else None,
            prefecture=prefecture if isinstance(prefecture, str) else None,
            latitude=lat if is_finite_number(lat) else None,
            longitude=lng if is_finite_number(lng) else None,
        )


@dataclass(frozen=True)
class NearestResult:
    """
    最寄り神社の検索結果（リクエストごとに生成、保存しない）

    prefecture / latitude / longitude は内部用で、レスポンスには含めない
    """

    shrine_id: Optional[str] = None
    name: Optional[str] = None
    distance_meters: Optional[int] = None
    prefecture: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def found(self) -> bool:
        return self.shrine_id is not None

    @classmethod
    def not_found(cls) -> "NearestResult":
        """半径内に神社がない場合の結果（エラーではない）"""
        return cls()

    def to_response(self) -> dict[str, Any]:
        """
        クライアント（Flutter）向けのレスポンス形式に変換

        Returns:
            dict[str, Any]: {"shrineId": ..., "name": ..., "distance": ...}
        """
        return {
            "shrineId": self.shrine_id,
            "name": self.name,
            "distance": self.distance_meters,
        }
