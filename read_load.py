"""
read_load.py: async load script that opens previously created links

Usage:
  python read_load.py --base http://127.0.0.1:8000 --in links_created.jsonl --count 15000 --concurrency 200

Redirects are not followed; a 303 pointing at the recorded URL counts as ok.
"""
import argparse
import asyncio
import json
import random
import time
from datetime import datetime, timezone

import httpx


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def _load_links(path):
    links = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            obj = json.loads(line)
            links.append((int(obj["id"]), obj["url"]))
    return links


async def _open_one(client: httpx.AsyncClient, base: str, link_id: int, url: str) -> bool:
    try:
        r = await client.get(f"{base}/open/{link_id}", follow_redirects=False, timeout=10)
    except httpx.HTTPError:
        return False
    return r.status_code == 303 and r.headers.get("location") == url


async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:8000")
    parser.add_argument("--in", dest="links_file", default="links_created.jsonl")
    parser.add_argument("--count", type=int, default=15000)
    parser.add_argument("--concurrency", type=int, default=200)
    args = parser.parse_args()

    links = _load_links(args.links_file)
    if not links:
        print(f"No links found in {args.links_file}. Run write_load.py first.")
        return

    start_iso = _now_iso()
    t0 = time.perf_counter()
    success = 0

    limit = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    async with httpx.AsyncClient(limits=limit) as client:
        sem = asyncio.Semaphore(args.concurrency)

        async def _task(i):
            nonlocal success
            async with sem:
                link_id, url = random.choice(links)
                if await _open_one(client, args.base, link_id, url):
                    success += 1

        await asyncio.gather(*(_task(i) for i in range(args.count)))

    dt = time.perf_counter() - t0
    print(f"START: {start_iso}")
    print(f"END:   {_now_iso()}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"OPS:   reads={args.count}, ok={success}, fail={args.count - success}")
    if dt > 0:
        print(f"RPS:   {success/dt:.1f} req/s")


if __name__ == "__main__":
    asyncio.run(main())
