"""
Cloud Run / ローカル用HTTPサーバー（FastAPI）

Firebase Callableと同じプロトコルで各関数を公開する:
    POST /{関数名}  body: {"data": {...}}
    成功:  200 {"result": {...}}
    失敗:  4xx/5xx {"error": {"status": "INVALID_ARGUMENT", "message": "..."}}
"""
from typing import Any

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from .features.invocation.handlers import OPERATIONS
from .infrastructure.config.settings import get_settings
from .shared.exceptions.errors import InvalidArgumentError, StorageError
from .shared.logging.config import get_logger, setup_logging

settings = get_settings()

setup_logging(
    level=settings.log_level,
    enable_cloud_logging=settings.gcp_logging_enabled,
    project_id=settings.gcp_project_id,
)
logger = get_logger(__name__)

app = FastAPI(
    title="参拝ログ API",
    description="神社参拝ログアプリ向けの神社検出・キャプション生成API",
    version="1.0.0",
    # 本番ではAPIドキュメントを公開しない
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None if settings.is_production else "/redoc",
)


def _error_response(status_code: int, status: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"status": status, "message": message}},
    )


@app.on_event("startup")
async def startup_event() -> None:
    """起動時の処理"""
    logger.info("Application starting up")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Project: {settings.project_name}")


@app.get("/")
async def root() -> dict[str, Any]:
    """ルートエンドポイント"""
    return {
        "service": "参拝ログ API",
        "version": "1.0.0",
        "status": "running",
        "environment": settings.environment,
        "functions": sorted(OPERATIONS),
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """ヘルスチェックエンドポイント"""
    return {"status": "healthy"}


@app.post("/{function_name}")
async def invoke(function_name: str, request: Request) -> Any:
    """
    関数を呼び出す

    Args:
        function_name: 関数名（detectShrine, generateCaptions, postToSNS）
        request: リクエスト（body: {"data": ...}）

    Returns:
        dict[str, Any]: {"result": ...}
    """
    handler = OPERATIONS.get(function_name)
    if handler is None:
        logger.warning(f"Unknown function called: {function_name}")
        return _error_response(404, "NOT_FOUND", f"Function not found: {function_name}")

    try:
        body = await request.json()
    except ValueError:
        body = None
    data = body.get("data") if isinstance(body, dict) else None

    logger.info(f"Received call: {function_name}")

    # Firestoreクライアントは同期APIのためスレッドプールで実行
    result = await run_in_threadpool(handler, data)
    return {"result": result}


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    """入力エラー"""
    logger.warning(f"Invalid argument on {request.url.path}: {exc.message}")
    return _error_response(400, "INVALID_ARGUMENT", exc.message)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """ストレージエラー（リトライせずそのまま返す）"""
    logger.error(f"Storage error on {request.url.path}: {exc}", exc_info=True)
    return _error_response(503, "UNAVAILABLE", "Shrine store is unavailable")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """グローバル例外ハンドラー"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return _error_response(500, "INTERNAL", "INTERNAL")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
