"""
呼び出しハンドラー

Firebase Callable / HTTPサーバー / CLI から共通で使う。
入力は呼び出しの data（JSONオブジェクト）、出力はレスポンス用の辞書。
"""
from typing import Any, Callable, Optional

from ..captions.domain.models import CaptionRequest
from ..detection.domain.models import Coordinate
from ...shared.logging.config import get_logger
from ...shared.utils.validation import (
    require_finite_number,
    require_non_blank_string,
    require_payload,
    require_string,
)
from .container import ServiceContainer, get_container

logger = get_logger(__name__)

Handler = Callable[[Any, Optional[ServiceContainer]], dict[str, Any]]


def detect_shrine(
    data: Any, container: Optional[ServiceContainer] = None
) -> dict[str, Any]:
    """
    現在地から最寄りの神社を検出

    Args:
        data: {"lat": number, "lng": number, "text"?: string}（textは未使用）
        container: サービスコンテナ（Noneの場合はプロセス共有のもの）

    Returns:
        dict[str, Any]: {"shrineId": ..., "name": ..., "distance": ...}

    Raises:
        InvalidArgumentError: data がない、または緯度・経度が不正な場合
        StorageError: Firestoreからの取得に失敗した場合
    """
    payload = require_payload(data)

    # Firestoreに接続する前に検証する
    query = Coordinate(
        latitude=require_finite_number(payload.get("lat"), "lat"),
        longitude=require_finite_number(payload.get("lng"), "lng"),
    )
    container = container or get_container()
    logger.info(f"detectShrine called: {query!r}")

    return container.finder.find(query).to_response()


def generate_captions(
    data: Any, container: Optional[ServiceContainer] = None
) -> dict[str, Any]:
    """
    SNS投稿用のキャプションを生成

    Args:
        data: {"shrineName": string, "text": string, "metadata"?: {"goshuin"?: boolean}}
        container: サービスコンテナ

    Returns:
        dict[str, Any]: {"instagramCaption": ..., "xCaption": ..., "threadsCaption": ...}

    Raises:
        InvalidArgumentError: data がない、shrineName が空、text が文字列でない場合
    """
    payload = require_payload(data)
    shrine_name = require_non_blank_string(payload.get("shrineName"), "shrineName")
    text = require_string(payload.get("text"), "text")

    # 真偽値はPythonの規則で判定する（{} や [] は False）。
    # 空白の除去も str.strip の空白定義に従う
    metadata = payload.get("metadata")
    goshuin = bool(metadata.get("goshuin")) if isinstance(metadata, dict) else False

    container = container or get_container()
    request = CaptionRequest(shrine_name=shrine_name, text=text.strip(), goshuin=goshuin)
    return container.caption_generator.generate(request).to_response()


def post_to_sns(
    data: Any = None, container: Optional[ServiceContainer] = None
) -> dict[str, Any]:
    """SNSに投稿（未実装。常に not-implemented を返す）"""
    container = container or get_container()
    return container.sns_poster.post(data if isinstance(data, dict) else None).to_response()


# 外部公開する関数名 → ハンドラー
OPERATIONS: dict[str, Handler] = {
    "detectShrine": detect_shrine,
    "generateCaptions": generate_captions,
    "postToSNS": post_to_sns,
}
