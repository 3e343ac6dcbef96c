"""SNS投稿機能のドメインモデル"""
from dataclasses import dataclass, field
from typing import Any

from .enums import PostErrorCode, SnsPlatform


@dataclass(frozen=True)
class PostError:
    """投稿エラー"""

    code: PostErrorCode
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}


@dataclass
class PostResult:
    """SNS投稿結果"""

    posted: dict[SnsPlatform, bool] = field(
        default_factory=lambda: {platform: False for platform in SnsPlatform}
    )
    errors: list[PostError] = field(default_factory=list)

    def to_response(self) -> dict[str, Any]:
        """クライアント向けのレスポンス形式に変換"""
        return {
            "posted": {platform.value: posted for platform, posted in self.posted.items()},
            "errors": [error.to_dict() for error in self.errors],
        }
