#!/usr/bin/env python3
"""
Cleanup script to remove seeded avatars via API endpoints.

Run:
    python seed/cleanup_avatars.py \
      --api-id <API-ID> \
      --api-key <API-KEY> \
      --entity-ids 1 2 3
"""

import argparse
import sys

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="cleanup")

AVATAR_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/v1/avatars/{1}"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cleanup seeded avatars via Avatar API")

    parser.add_argument(
        "--api-id",
        required=True,
        help="API Gateway ID (LocalStack)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )
    parser.add_argument(
        "--entity-ids",
        type=int,
        nargs="+",
        required=True,
        help="Entities whose avatars should be deleted",
    )

    return parser.parse_args()


def cleanup_avatars() -> None:
    try:
        args = parse_args()

        headers: dict[str, str] = {}
        if args.api_key:
            headers["x-api-key"] = args.api_key

        failures = 0

        for entity_id in args.entity_ids:
            response = requests.delete(
                AVATAR_API_URL.format(args.api_id, entity_id),
                headers=headers,
                timeout=30,
            )

            if response.ok:
                logger.info("Deleted avatar", extra={"entity_id": entity_id})
            else:
                failures += 1
                logger.error(
                    "Failed to delete avatar",
                    extra={
                        "entity_id": entity_id,
                        "status": response.status_code,
                        "response": response.text,
                    },
                )

        logger.info("Cleanup completed", extra={"failures": failures})

        if failures:
            sys.exit(1)

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_avatars()
