#!/usr/bin/env python3
"""
One-time setup: create the avatar folder and empty avatar records.

Run:
    python seed/setup_avatars.py --entity-ids 1 2 3

Uses the same environment configuration as the Lambda handlers
(AVATAR_S3_BUCKET_NAME, AVATAR_TABLE_NAME, AWS_ENDPOINT_URL, ...).
"""

import argparse
import sys

from aws_lambda_powertools import Logger

from core.models.errors import AvatarServiceError
from core.services.factory import build_avatar_store

logger = Logger(service="setup")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Prepare avatar storage and records")

    parser.add_argument(
        "--entity-ids",
        type=int,
        nargs="*",
        default=[],
        help="Entity IDs to create empty avatar records for",
    )
    parser.add_argument(
        "--site-id",
        default=None,
        help="Site whose settings apply (only with AVATAR_SETTINGS_TABLE_NAME)",
    )

    return parser.parse_args()


def setup_avatars() -> None:
    args = parse_args()

    try:
        store = build_avatar_store(args.site_id)
        store.create_storage_folder()

        for entity_id in args.entity_ids:
            record = store.records.create_record(entity_id=entity_id)
            logger.info(
                "Avatar record ready",
                extra={"entity_id": record.entity_id, "file_extension": record.file_extension},
            )

    except AvatarServiceError as exc:
        logger.exception("Setup failed", extra={"error_code": exc.error_code})
        sys.exit(1)

    logger.info("Setup completed", extra={"records": len(args.entity_ids)})


if __name__ == "__main__":
    setup_avatars()
