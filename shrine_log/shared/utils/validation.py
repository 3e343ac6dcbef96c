"""入力バリデーションユーティリティ"""
import math
from typing import Any

from ..exceptions.errors import InvalidArgumentError


def is_finite_number(value: Any) -> bool:
    """
    有限の実数かどうか

    bool は数値として扱わない（JSONの true/false は座標ではない）。
    floatに収まらない巨大な整数は無限大とみなす
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def require_finite_number(value: Any, field: str) -> float:
    """
    有限の実数であることを検証して float で返す

    Args:
        value: 検証対象の値
        field: エラーメッセージに使うフィールド名

    Raises:
        InvalidArgumentError: 数値でない、NaN、無限大の場合
    """
    if not is_finite_number(value):
        raise InvalidArgumentError(f"{field} must be a finite number", field=field)
    return float(value)


def require_payload(data: Any) -> dict[str, Any]:
    """リクエストデータ（オブジェクト）が存在することを検証"""
    if not isinstance(data, dict):
        raise InvalidArgumentError("data is required", field="data")
    return data


def require_non_blank_string(value: Any, field: str) -> str:
    """空白以外の文字を含む文字列であることを検証し、前後の空白を除去して返す"""
    if not isinstance(value, str) or value.strip() == "":
        raise InvalidArgumentError(f"{field} is required", field=field)
    return value.strip()


def require_string(value: Any, field: str) -> str:
    """文字列であることを検証（空文字は許容）"""
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{field} is required", field=field)
    return value
