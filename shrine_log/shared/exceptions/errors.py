"""カスタム例外定義"""
from typing import Optional


class ShrineLogError(Exception):
    """参拝ログ関数の基底例外"""

    pass


class InvalidArgumentError(ShrineLogError):
    """
    呼び出し元の入力が不正

    Firebase Callableのエラーコード "invalid-argument" に対応する
    """

    code = "invalid-argument"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class StorageError(ShrineLogError):
    """ストレージ関連のエラー（リトライせず呼び出し元へ伝播させる）"""

    pass

