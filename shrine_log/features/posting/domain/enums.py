"""SNS投稿機能の列挙型"""
from enum import Enum


class SnsPlatform(str, Enum):
    """投稿先SNS"""

    X = "x"
    INSTAGRAM = "instagram"
    THREADS = "threads"


class PostErrorCode(str, Enum):
    """投稿エラーコード"""

    NOT_IMPLEMENTED = "not-implemented"
