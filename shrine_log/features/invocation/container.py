"""サービスコンテナ"""
from functools import lru_cache
from typing import Optional

from ...infrastructure.config.settings import Settings, get_settings
from ...shared.logging.config import get_logger
from ..captions.services.caption_generator import CaptionGenerator
from ..detection.services.nearest_shrine_finder import NearestShrineFinder, ShrineSource
from ..posting.services.sns_poster import SnsPoster
from ..storage.clients.firestore_client import get_firestore_client
from ..storage.repositories.shrine_repository import ShrineRepository

logger = get_logger(__name__)


class ServiceContainer:
    """
    サービスコンテナ

    各Featureを統合し、依存性注入を行う。
    Firestoreへの接続は最初に神社検索が呼ばれた時点で行う。
    """

    def __init__(
        self, settings: Settings, shrine_source: Optional[ShrineSource] = None
    ) -> None:
        """
        Args:
            settings: アプリケーション設定
            shrine_source: 神社データの取得元（Noneの場合はFirestoreを使用）
        """
        self.settings = settings
        self._shrine_source = shrine_source
        self._finder: Optional[NearestShrineFinder] = None

        self.caption_generator = CaptionGenerator()
        self.sns_poster = SnsPoster()

        logger.info("ServiceContainer initialized")

    @property
    def shrine_source(self) -> ShrineSource:
        """神社データの取得元"""
        if self._shrine_source is None:
            firestore_client = get_firestore_client(self.settings)
            self._shrine_source = ShrineRepository(
                firestore_client,
                collection_name=self.settings.firestore_shrines_collection,
            )
        return self._shrine_source

    @property
    def finder(self) -> NearestShrineFinder:
        """最寄り神社検索サービス"""
        if self._finder is None:
            self._finder = NearestShrineFinder(self.shrine_source)
        return self._finder


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """プロセス内で共有するサービスコンテナを取得"""
    return ServiceContainer(get_settings())
