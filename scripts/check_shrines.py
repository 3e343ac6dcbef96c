#!/usr/bin/env python3
"""Firestoreの神社データを確認するスクリプト"""
import argparse
import os
import sys
from datetime import datetime
from pathlib import Path

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from shrine_log.features.detection.domain.models import Coordinate
from shrine_log.features.detection.services.nearest_shrine_finder import (
    CANDIDATE_LIMIT,
    RADIUS_METERS,
    NearestShrineFinder,
)
from shrine_log.features.storage.clients.firestore_client import get_firestore_client
from shrine_log.features.storage.repositories.shrine_repository import ShrineRepository
from shrine_log.infrastructure.config.settings import Settings
from shrine_log.shared.utils.geo import haversine_distance_meters, latitude_band


def parse_args():
    """コマンドライン引数をパース"""
    parser = argparse.ArgumentParser(description="Firestore shrine data checker")
    parser.add_argument("--lat", type=float, help="Latitude to inspect (e.g., 35.6764)")
    parser.add_argument("--lng", type=float, help="Longitude to inspect (e.g., 139.6993)")
    return parser.parse_args()


def main():
    args = parse_args()
    settings = Settings()

    if settings.firestore_emulator_host:
        print(f"Using Firestore Emulator: {settings.firestore_emulator_host}")
    elif os.environ.get("FIRESTORE_EMULATOR_HOST"):
        print(f"Using Firestore Emulator: {os.environ['FIRESTORE_EMULATOR_HOST']}")
    else:
        print("Using Production Firestore (no emulator configured)")

    repository = ShrineRepository(
        get_firestore_client(settings),
        collection_name=settings.firestore_shrines_collection,
    )

    print("\n" + "=" * 60)
    print(f"Shrine Data Check Report - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 60)

    print(f"\n[Collection: {repository.collection_name}]")
    print(f"  Total Shrines: {repository.count()}")

    if args.lat is None or args.lng is None:
        return

    # 検索と同じ緯度帯の候補を表示
    min_lat, max_lat = latitude_band(args.lat, RADIUS_METERS)
    candidates = repository.find_by_latitude_range(min_lat, max_lat, CANDIDATE_LIMIT)

    print(f"\n[Candidates in lat band {min_lat:.6f} - {max_lat:.6f} (Limit: {CANDIDATE_LIMIT})]")
    if not candidates:
        print("  No data found.")

    for i, shrine in enumerate(candidates, 1):
        print(f"  {i}. [{shrine.prefecture or '-'}] {shrine.name or '(no name)'}")
        print(f"     ID: {shrine.shrine_id}")
        if shrine.has_valid_coordinates:
            distance = haversine_distance_meters(
                args.lat, args.lng, shrine.latitude, shrine.longitude
            )
            mark = "in radius" if distance <= RADIUS_METERS else "out of radius"
            print(f"     Distance: {distance:.1f}m ({mark})")
        else:
            print("     Distance: N/A (invalid lat/lng)")
        print("     ---")

    result = NearestShrineFinder(repository).find(Coordinate(args.lat, args.lng))
    print("\n[detectShrine result]")
    print(f"  {result.to_response()}")


if __name__ == "__main__":
    main()
