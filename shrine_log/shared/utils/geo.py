"""地理計算ユーティリティ"""
import math

# 地球半径（メートル、球体近似）
EARTH_RADIUS_METERS = 6_371_000

# 緯度1度あたりのおおよその距離（メートル、赤道基準）
METERS_PER_DEGREE_LATITUDE = 111_320


def haversine_distance_meters(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    2点間の大円距離をHaversine公式で計算

    Args:
        lat1: 地点1の緯度（度）
        lng1: 地点1の経度（度）
        lat2: 地点2の緯度（度）
        lng2: 地点2の経度（度）

    Returns:
        float: 距離（メートル）
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def latitude_band(latitude: float, radius_meters: float) -> tuple[float, float]:
    """
    指定半径を覆う緯度の範囲 (min, max) を返す

    経度方向の収束（高緯度）や日付変更線は考慮しない近似
    """
    delta_lat = radius_meters / METERS_PER_DEGREE_LATITUDE
    return latitude - delta_lat, latitude + delta_lat


def round_half_up(value: float) -> int:
    """0.5を切り上げる四捨五入（Pythonのround()は偶数丸め）"""
    return math.floor(value + 0.5)
