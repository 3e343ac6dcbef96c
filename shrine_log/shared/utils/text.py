"""テキスト処理ユーティリティ"""

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s+")


def remove_whitespace(text: str) -> str:
    """
    空白文字をすべて除去

    全角スペース（U+3000）も空白として扱う（ハッシュタグ生成用）
    """
    return _WHITESPACE.sub("", text)


def utf16_length(text: str) -> int:
    """UTF-16のコードユニット数（JavaScript / Dart の String.length と同じ数え方）"""
    return len(text.encode("utf-16-le")) // 2


def truncate_utf16(text: str, max_units: int) -> str:
    """
    テキストをUTF-16のコードユニット数で切り詰め

    絵文字などサロゲートペアの途中で切れる場合、その文字は含めない

    Args:
        text: 対象テキスト
        max_units: 最大コードユニット数

    Returns:
        切り詰められたテキスト
    """
    encoded = text.encode("utf-16-le")
    if len(encoded) <= max_units * 2:
        return text

    return encoded[: max_units * 2].decode("utf-16-le", errors="ignore")


def join_lines(*lines: Optional[str]) -> str:
    """空・Noneの行を除いて改行で連結"""
    return "\n".join(line for line in lines if line)
