"""Cloud Functions for Firebase エントリーポイント（Callable関数）"""
from typing import Any

from firebase_functions import https_fn, options

from shrine_log.features.invocation.handlers import (
    Handler,
    detect_shrine,
    generate_captions,
    post_to_sns,
)
from shrine_log.infrastructure.config.settings import get_settings
from shrine_log.shared.exceptions.errors import InvalidArgumentError
from shrine_log.shared.logging.config import get_logger, setup_logging

settings = get_settings()

setup_logging(
    level=settings.log_level,
    enable_cloud_logging=settings.gcp_logging_enabled,
    project_id=settings.gcp_project_id,
)
logger = get_logger(__name__)

options.set_global_options(region=settings.gcp_region)


def invoke(handler: Handler, data: Any) -> dict[str, Any]:
    """
    ハンドラーを実行し、入力エラーをCallableのエラーに変換

    それ以外の例外はそのまま送出する（Firebase側で INTERNAL として返される）
    """
    try:
        return handler(data, None)
    except InvalidArgumentError as e:
        raise https_fn.HttpsError(
            code=https_fn.FunctionsErrorCode.INVALID_ARGUMENT,
            message=e.message,
        ) from e


@https_fn.on_call()
def detectShrine(req: https_fn.CallableRequest) -> dict[str, Any]:
    """現在地から最寄りの神社を検出"""
    return invoke(detect_shrine, req.data)


@https_fn.on_call()
def generateCaptions(req: https_fn.CallableRequest) -> dict[str, Any]:
    """SNS投稿用キャプションを生成"""
    return invoke(generate_captions, req.data)


@https_fn.on_call()
def postToSNS(req: https_fn.CallableRequest) -> dict[str, Any]:
    """SNS投稿（未実装）"""
    return invoke(post_to_sns, req.data)
