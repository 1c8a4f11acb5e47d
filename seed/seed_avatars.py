#!/usr/bin/env python3
"""
Seed script to upload sample avatars via API endpoints.

Run:
    python seed/seed_avatars.py \
      --api-id <API-ID> \
      --api-key <API-KEY> \
      --entity-ids 1 2 3

Entities must already have avatar records (see setup_avatars.py).
"""

import argparse
import base64
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")

AVATAR_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/v1/avatars/{1}"

# 1x1 transparent PNG
SAMPLE_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed avatars via Avatar API")

    parser.add_argument(
        "--api-id",
        required=True,
        help="Base API ID (e.g. LocalStack API Gateway ID)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )
    parser.add_argument(
        "--site-id",
        default=None,
        help="Value for the x-site-id header",
    )
    parser.add_argument(
        "--entity-ids",
        type=int,
        nargs="+",
        required=True,
        help="Entities to upload an avatar for",
    )
    parser.add_argument(
        "--image",
        type=Path,
        default=None,
        help="Image file to upload (defaults to a 1x1 PNG)",
    )

    return parser.parse_args()


def load_image(path: Path | None) -> tuple[str, str]:
    """Return (base64 content, file name) of the image to upload."""
    if path is None:
        return SAMPLE_PNG_BASE64, "sample.png"

    with open(path, "rb") as f:
        return base64.b64encode(f.read()).decode("utf-8"), path.name


def seed_avatars() -> None:
    try:
        args = parse_args()
        encoded_file, file_name = load_image(args.image)

        headers: dict[str, str] = {"Content-Type": "application/json"}
        if args.api_key:
            headers["x-api-key"] = args.api_key
        if args.site_id:
            headers["x-site-id"] = args.site_id

        logger.info("Starting seeding process", extra={"entities": args.entity_ids})

        for entity_id in args.entity_ids:
            response = requests.put(
                AVATAR_API_URL.format(args.api_id, entity_id),
                headers=headers,
                json={"file": encoded_file, "file_name": file_name},
                timeout=30,
            )

            response_json = cast(dict[str, Any], response.json())

            if response.ok:
                logger.info(
                    "Seeded avatar",
                    extra={"entity_id": entity_id, "avatar_url": response_json.get("avatar_url")},
                )
            else:
                logger.error(
                    "Failed to seed avatar",
                    extra={
                        "entity_id": entity_id,
                        "status": response.status_code,
                        "response": response_json,
                    },
                )

        logger.info("Seeding completed")

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_avatars()
