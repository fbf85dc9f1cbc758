"""Command line entry point"""
import argparse
import sys
from typing import List, Optional

import uvicorn

from inventory_service.infrastructure.config.settings import Settings
from inventory_service.infrastructure.logging_config import get_logger, setup_logging
from inventory_service.main import create_app

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inventory-service",
        description="Inventory registration HTTP service",
    )
    parser.add_argument("-H", "--host", required=True, help="server host")
    parser.add_argument("-p", "--port", required=True, type=int, help="server port")
    parser.add_argument("-c", "--cache", required=True, help="path to cache directory")
    parser.add_argument("--log-level", default=None, help="log level (default: LOG_LEVEL setting)")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Environment settings with the command line flags applied on top"""
    overrides = {"HOST": args.host, "PORT": args.port, "CACHE_DIR": args.cache}
    if args.log_level:
        overrides["LOG_LEVEL"] = args.log_level
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    app_settings = settings_from_args(args)
    setup_logging(app_settings.LOG_LEVEL)

    try:
        app = create_app(app_settings)
    except OSError as e:
        logger.error(f"Cannot use cache directory {app_settings.CACHE_DIR}: {e}")
        return 1

    logger.info(f"Server running at http://{app_settings.HOST}:{app_settings.PORT}")
    uvicorn.run(app, host=app_settings.HOST, port=app_settings.PORT, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
