"""Firestoreクライアント"""
import os
from typing import Any, Optional

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from ....infrastructure.config.settings import Settings
from ....shared.exceptions.errors import StorageError
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

# プロセス内で共有するクライアント（関数インスタンスの生存期間中は再利用）
_shared_client: Optional["FirestoreClient"] = None


class FirestoreClient:
    """Firestore操作クライアント"""

    def __init__(
        self, project_id: Optional[str] = None, database_id: str = "(default)"
    ) -> None:
        """
        Firestoreクライアントを初期化

        Args:
            project_id: GCPプロジェクトID（Noneの場合は実行環境から推定）
            database_id: データベースID（デフォルトは"(default)"）
        """
        self.project_id = project_id
        self.database_id = database_id

        # エミュレータモードの検出
        emulator_host = os.environ.get("FIRESTORE_EMULATOR_HOST")

        try:
            self.client = firestore.Client(project=project_id, database=database_id)

            if emulator_host:
                logger.info(
                    f"Firestore client initialized (EMULATOR MODE): "
                    f"host={emulator_host}, project={project_id}, database={database_id}"
                )
            else:
                logger.info(
                    f"Firestore client initialized: project={project_id}, database={database_id}"
                )
        except Exception as e:
            raise StorageError(f"Failed to initialize Firestore client: {e}") from e

    def get_collection(self, collection_path: str) -> firestore.CollectionReference:
        """
        コレクション参照を取得

        Args:
            collection_path: コレクションパス

        Returns:
            CollectionReference: コレクション参照
        """
        return self.client.collection(collection_path)

    def query_range(
        self,
        collection_path: str,
        field: str,
        lower: Any,
        upper: Any,
        limit: Optional[int] = None,
    ) -> list[tuple[str, dict[str, Any]]]:
        """
        フィールドの範囲（両端を含む）でドキュメントを取得

        並び順は指定しない（Firestore側の順序のまま返す）

        Args:
            collection_path: コレクションパス
            field: 範囲条件をかけるフィールド名
            lower: 下限（以上）
            upper: 上限（以下）
            limit: 取得件数の上限

        Returns:
            list[tuple[str, dict[str, Any]]]: (ドキュメントID, データ) のリスト

        Raises:
            StorageError: 取得に失敗した場合

        Example:
            >>> client.query_range("shrines", "lat", 35.667, 35.685, limit=200)
        """
        try:
            query = (
                self.get_collection(collection_path)
                .where(filter=FieldFilter(field, ">=", lower))
                .where(filter=FieldFilter(field, "<=", upper))
            )

            if limit:
                query = query.limit(limit)

            return [(doc.id, doc.to_dict() or {}) for doc in query.stream() if doc.exists]

        except Exception as e:
            raise StorageError(
                f"Failed to query {collection_path} by {field} range: {e}"
            ) from e

    def count_documents(self, collection_path: str) -> int:
        """
        ドキュメント数をカウント

        Args:
            collection_path: コレクションパス

        Returns:
            int: ドキュメント数
        """
        try:
            agg_query = self.get_collection(collection_path).count()
            result = agg_query.get()
            return result[0][0].value

        except Exception as e:
            raise StorageError(
                f"Failed to count documents in {collection_path}: {e}"
            ) from e


def get_firestore_client(settings: Settings) -> FirestoreClient:
    """
    プロセス共有のFirestoreクライアントを取得（初回呼び出し時に生成）

    Args:
        settings: アプリケーション設定

    Returns:
        FirestoreClient: 共有クライアント
    """
    global _shared_client

    if _shared_client is not None:
        return _shared_client

    # Firestoreエミュレータの設定を環境変数に反映
    if settings.firestore_emulator_host:
        os.environ["FIRESTORE_EMULATOR_HOST"] = settings.firestore_emulator_host

    _shared_client = FirestoreClient(
        project_id=settings.gcp_project_id,
        database_id=settings.firestore_database_id,
    )

    return _shared_client


def reset_firestore_client() -> None:
    """共有クライアントを破棄（テスト用）"""
    global _shared_client
    _shared_client = None
