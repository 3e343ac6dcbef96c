"""キャプション生成機能のドメインモデル"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CaptionRequest:
    """キャプション生成の入力（検証・前後空白除去済み）"""

    shrine_name: str  # 神社名
    text: str  # 本文（空文字可）
    goshuin: bool = False  # 御朱印をいただいたか


@dataclass(frozen=True)
class Captions:
    """SNSごとのキャプション"""

    instagram: str
    x: str
    threads: str

    def to_response(self) -> dict[str, Any]:
        """クライアント向けのレスポンス形式に変換"""
        return {
            "instagramCaption": self.instagram,
            "xCaption": self.x,
            "threadsCaption": self.threads,
        }
