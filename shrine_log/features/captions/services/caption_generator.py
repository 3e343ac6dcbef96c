"""キャプション生成サービス（テンプレート）"""
from ..domain.models import CaptionRequest, Captions
from ....shared.logging.config import get_logger
from ....shared.utils.text import join_lines, remove_whitespace, truncate_utf16, utf16_length

logger = get_logger(__name__)

# Xの文字数上限（UTF-16コードユニット数）
X_MAX_LENGTH = 280

GOSHUIN_LINE = "御朱印もいただきました。"
BASE_HASHTAGS = ("#神社", "#参拝")


class CaptionGenerator:
    """
    参拝記録からSNS投稿用のキャプションを生成

    Instagram と Threads は同じ本文、X はUTF-16で280コードユニットに切り詰める
    """

    def generate(self, request: CaptionRequest) -> Captions:
        """
        キャプションを生成

        Args:
            request: キャプション生成の入力

        Returns:
            Captions: SNSごとのキャプション
        """
        base = join_lines(
            f"⛩️ {request.shrine_name} に参拝しました。",
            request.text,
            GOSHUIN_LINE if request.goshuin else None,
        )
        hashtags = self.build_hashtags(request.shrine_name)

        instagram_caption = f"{base}\n\n{hashtags}"
        x_caption = truncate_utf16(f"{base}\n{hashtags}", X_MAX_LENGTH)

        logger.info(
            f"Captions generated for {request.shrine_name}: "
            f"goshuin={request.goshuin}, x_length={utf16_length(x_caption)}"
        )

        return Captions(
            instagram=instagram_caption,
            x=x_caption,
            threads=instagram_caption,
        )

    @staticmethod
    def build_hashtags(shrine_name: str) -> str:
        """ハッシュタグ行を生成（神社名の空白は除去）"""
        return " ".join([*BASE_HASHTAGS, f"#{remove_whitespace(shrine_name)}"])
