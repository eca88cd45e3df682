"""
read_load.py — async load script that resolves short codes

Reads codes written by write_load.py and hits GET /{code} without following
redirects; a hit counts as OK only on 307 with the expected Location.

Usage:
  python read_load.py --base http://127.0.0.1:8000 --in codes_created.jsonl --count 15000 --concurrency 200
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


def _load_pairs(path):
    pairs = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if obj.get("code") and obj.get("url"):
                pairs.append((obj["code"], obj["url"]))
    return pairs


async def _hit_one(client: httpx.AsyncClient, base: str, code: str, url: str):
    try:
        r = await client.get(f"{base}/{code}", follow_redirects=False, timeout=10)
        return r.status_code == 307 and r.headers.get("location") == url
    except httpx.HTTPError:
        return False


async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:8000")
    parser.add_argument("--in", dest="codes_file", default="codes_created.jsonl")
    parser.add_argument("--count", type=int, default=15000)
    parser.add_argument("--concurrency", type=int, default=200)
    args = parser.parse_args()

    pairs = _load_pairs(args.codes_file)
    if not pairs:
        print(f"No codes found in {args.codes_file}. Run write_load.py first.")
        return

    start_iso = _now_iso()
    t0 = time.perf_counter()
    success = 0

    limit = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    async with httpx.AsyncClient(limits=limit) as client:
        sem = asyncio.Semaphore(args.concurrency)

        async def _task(i):
            nonlocal success
            code, url = random.choice(pairs)
            async with sem:
                ok = await _hit_one(client, args.base, code, url)
                if ok:
                    success += 1

        await asyncio.gather(*(_task(i) for i in range(args.count)))

    dt = time.perf_counter() - t0
    end_iso = _now_iso()
    print(f"START: {start_iso}")
    print(f"END:   {end_iso}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"OPS:   reads={args.count}, ok={success}, fail={args.count - success}")
    if dt > 0:
        print(f"RPS:   {success/dt:.1f} req/s")


if __name__ == "__main__":
    asyncio.run(main())
