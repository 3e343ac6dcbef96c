"""SNS投稿サービス"""
from typing import Any, Optional

from ..domain.enums import PostErrorCode
from ..domain.models import PostError, PostResult
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

NOT_IMPLEMENTED_MESSAGE = "SNS posting is not implemented yet."


class SnsPoster:
    """
    SNS投稿（未実装）

    各SNSのAPI連携にはアクセストークンと審査が必要なため、
    現状はどのSNSにも投稿せず not-implemented を返す
    """

    def post(self, data: Optional[dict[str, Any]] = None) -> PostResult:
        """
        SNSに投稿

        Args:
            data: 投稿内容（例: {"postId": ..., "targets": {"x": true}}）。現状は未使用

        Returns:
            PostResult: すべて未投稿、エラー not-implemented
        """
        logger.info("SNS posting requested but not implemented")
        return PostResult(
            errors=[PostError(PostErrorCode.NOT_IMPLEMENTED, NOT_IMPLEMENTED_MESSAGE)]
        )
