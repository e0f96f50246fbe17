#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging

from authkit.link import EventLinkAPI, PaginationOptions


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch every authkit connection and build a link token response")
    p.add_argument("base_url")
    p.add_argument("--authorization", default=None, help="Authorization header value")
    p.add_argument("--limit", type=int, default=100)
    p.add_argument("--concurrency", type=int, default=3)
    p.add_argument("--retries", type=int, default=3)
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    headers = {"Authorization": args.authorization} if args.authorization else {}
    options = PaginationOptions(
        limit=args.limit,
        max_concurrent_requests=args.concurrency,
        max_retries=args.retries,
    )
    async with EventLinkAPI(args.base_url, headers=headers, options=options) as api:
        result = await api.create_event_link_token()

    if result.ok:
        data = result.data
        print(f"{len(data.rows)} connections (total={data.total}, whitelist={data.is_whitelist})")
        print(f"requestId: {data.request_id}")
    else:
        print(f"{type(result).__name__}:")
        print(json.dumps(result.to_response(), indent=2, default=str))


if __name__ == "__main__":
    asyncio.run(main())
