"""神社リポジトリ"""
from ...detection.domain.models import ShrineRecord
from ....shared.exceptions.errors import StorageError
from ....shared.logging.config import get_logger
from ..clients.firestore_client import FirestoreClient

logger = get_logger(__name__)


class ShrineRepository:
    """神社データのリポジトリ（読み取り専用）"""

    COLLECTION_NAME = "shrines"
    LATITUDE_FIELD = "lat"

    def __init__(
        self, firestore_client: FirestoreClient, collection_name: str = COLLECTION_NAME
    ) -> None:
        """
        ShrineRepositoryを初期化

        Args:
            firestore_client: Firestoreクライアント
            collection_name: コレクション名（エミュレータ・テスト用に変更可能）
        """
        self.client = firestore_client
        self.collection_name = collection_name

    def find_by_latitude_range(
        self, min_lat: float, max_lat: float, limit: int
    ) -> list[ShrineRecord]:
        """
        緯度の範囲（両端を含む）で神社を取得

        Firestoreは緯度・経度の両方に範囲条件をかけられないため、緯度だけで絞り込む。
        並び順はFirestore側の順序のまま。

        Args:
            min_lat: 緯度の下限
            max_lat: 緯度の上限
            limit: 取得件数の上限

        Returns:
            list[ShrineRecord]: 神社データのリスト

        Raises:
            StorageError: 取得に失敗した場合
        """
        try:
            docs = self.client.query_range(
                self.collection_name,
                self.LATITUDE_FIELD,
                min_lat,
                max_lat,
                limit=limit,
            )
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(
                f"Failed to get shrines between lat {min_lat} and {max_lat}: {e}"
            ) from e

        shrines = [ShrineRecord.from_firestore_dict(doc_id, data) for doc_id, data in docs]
        logger.info(
            f"Retrieved {len(shrines)} shrines for lat range [{min_lat:.6f}, {max_lat:.6f}]"
        )
        return shrines

    def count(self) -> int:
        """神社の総数をカウント"""
        return self.client.count_documents(self.collection_name)
