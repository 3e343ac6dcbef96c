"""CLIエントリーポイント"""
import argparse
import json
import sys
from typing import Any, Optional

from .features.invocation.container import ServiceContainer
from .features.invocation.handlers import detect_shrine, generate_captions, post_to_sns
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import InvalidArgumentError
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """コマンドライン引数のパーサーを作成"""
    parser = argparse.ArgumentParser(description="参拝ログ関数のローカル実行ツール")

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    detect = subparsers.add_parser("detect", help="最寄りの神社を検出")
    detect.add_argument("--lat", type=float, required=True, help="緯度")
    detect.add_argument("--lng", type=float, required=True, help="経度")

    captions = subparsers.add_parser("captions", help="SNS投稿用キャプションを生成")
    captions.add_argument("--shrine-name", type=str, required=True, help="神社名")
    captions.add_argument("--text", type=str, default="", help="本文")
    captions.add_argument("--goshuin", action="store_true", help="御朱印をいただいた")

    subparsers.add_parser("post", help="SNSに投稿（未実装）")

    return parser


def run_command(args: argparse.Namespace, container: ServiceContainer) -> dict[str, Any]:
    """サブコマンドに対応するハンドラーを実行"""
    if args.command == "detect":
        return detect_shrine({"lat": args.lat, "lng": args.lng}, container)
    if args.command == "captions":
        return generate_captions(
            {
                "shrineName": args.shrine_name,
                "text": args.text,
                "metadata": {"goshuin": args.goshuin},
            },
            container,
        )
    return post_to_sns({}, container)


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗, 2: 入力エラー）
    """
    args = build_parser().parse_args(argv)

    try:
        settings = Settings(_env_file=args.env_file)

        if args.log_level:
            settings.log_level = args.log_level

        # 結果のJSONを標準出力に出すため、ログは標準エラーへ
        setup_logging(level=settings.log_level, stream=sys.stderr)

        result = run_command(args, ServiceContainer(settings))
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return 0

    except InvalidArgumentError as e:
        logger.error(f"Invalid argument: {e.message}")
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except Exception as e:
        logger.error(f"Command failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
