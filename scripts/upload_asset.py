#!/usr/bin/env python3
"""
Upload Asset - Maintenance Script

Uploads one image or video to LinkedIn and prints the asset entity, or
prints the processing status of an existing asset.

Usage:
    python scripts/upload_asset.py photo.png --owner urn:li:organization:5590506
    python scripts/upload_asset.py https://example.com/clip.mp4 --asset-type video
    python scripts/upload_asset.py --status urn:li:digitalmediaAsset:C5522AQHn46pwH96hxQ
    python scripts/upload_asset.py photo.png --mock     # No network, simulated platform

Exit codes:
    0 - success
    1 - upload failed (the failing phase is printed)
    2 - bad arguments
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from assets import AssetUploaderFactory, UploadFailed  # noqa: E402
from config.settings import (  # noqa: E402
    ASSET_UPLOAD_TIMEOUT,
    LINKEDIN_OWNER,
    LOG_FORMAT,
    LOG_LEVEL,
)

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Upload a media asset to LinkedIn",
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Local path or http(s) URL of the media to upload",
    )
    parser.add_argument(
        "--owner",
        default=LINKEDIN_OWNER,
        help="Owner URN (default: LINKEDIN_OWNER from .env)",
    )
    parser.add_argument(
        "--asset-type",
        default="image",
        choices=["image", "video"],
        help="Recipe type (default: image)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=ASSET_UPLOAD_TIMEOUT,
        help=f"Transfer timeout in seconds (default: {ASSET_UPLOAD_TIMEOUT:g})",
    )
    parser.add_argument(
        "--status",
        metavar="ASSET_URN",
        help="Print the status of an existing asset instead of uploading",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the simulated platform (no network)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    if not args.status and not args.source:
        logger.error("Nothing to do: pass a SOURCE to upload or --status ASSET_URN")
        return 2

    if args.source and not args.owner:
        logger.error("No owner: pass --owner or set LINKEDIN_OWNER in .env")
        return 2

    mode = "mock" if args.mock else "linkedin"

    try:
        orchestrator = AssetUploaderFactory.create_orchestrator(mode=mode)
    except RuntimeError as e:
        logger.error(str(e))
        return 1

    try:
        if args.status:
            status = orchestrator.upload_status(args.status)
            print(f"{args.status}: {status.status}")
            return 0

        asset = orchestrator.upload(
            owner=args.owner,
            source=args.source,
            asset_type=args.asset_type,
            timeout=args.timeout,
        )
        print(asset)
        return 0

    except UploadFailed as e:
        logger.error(f"❌ Upload failed during {e.phase.value}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
