"""
write_load.py — async load script that creates short codes

Posts random URLs (plus a share of repeated ones, to exercise the idempotent
path) and writes every issued code to a JSONL file for read_load.py.

Usage:
  python write_load.py --base http://127.0.0.1:8000 --count 2000 --concurrency 100 --out codes_created.jsonl
"""
import argparse
import asyncio
import json
import random
import string
import time
from datetime import datetime, timezone

import httpx


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def _rand_host():
    tlds = ["com", "net", "org", "io", "ai"]
    names = ["example", "sample", "demo", "test", "alpha", "beta", "gamma"]
    return f"{random.choice(names)}.{random.choice(tlds)}"


def _rand_path(n=6):
    alphabet = string.ascii_letters + string.digits
    return "".join(random.choice(alphabet) for _ in range(n))


async def _create_one(client: httpx.AsyncClient, base: str, url: str):
    try:
        r = await client.post(f"{base}/", content=url.encode("utf-8"), timeout=10)
        if r.status_code != 201:
            return None
        # Body is the full short URL; the code is its last path segment.
        return r.text.rsplit("/", 1)[-1]
    except httpx.HTTPError:
        return None


async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:8000")
    parser.add_argument("--count", type=int, default=2000)
    parser.add_argument("--concurrency", type=int, default=100)
    parser.add_argument("--repeat-ratio", type=float, default=0.1,
                        help="share of requests that re-post an earlier URL")
    parser.add_argument("--out", default="codes_created.jsonl")
    args = parser.parse_args()

    start_iso = _now_iso()
    t0 = time.perf_counter()
    success = 0
    issued = {}
    mismatched = 0

    urls = []
    for i in range(args.count):
        if urls and random.random() < args.repeat_ratio:
            urls.append(random.choice(urls))
        else:
            urls.append(f"https://{_rand_host()}/{_rand_path(8)}?q={i}")

    limit = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    async with httpx.AsyncClient(limits=limit) as client:
        sem = asyncio.Semaphore(args.concurrency)

        async def _task(url):
            nonlocal success, mismatched
            async with sem:
                code = await _create_one(client, args.base, url)
            if code is None:
                return
            success += 1
            previous = issued.setdefault(url, code)
            if previous != code:
                mismatched += 1

        await asyncio.gather(*(_task(u) for u in urls))

    with open(args.out, "w", encoding="utf-8") as out_f:
        for url, code in issued.items():
            out_f.write(json.dumps({"code": code, "url": url}) + "\n")

    dt = time.perf_counter() - t0
    end_iso = _now_iso()
    print(f"START: {start_iso}")
    print(f"END:   {end_iso}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"OPS:   writes={args.count}, ok={success}, fail={args.count - success}")
    print(f"URLS:  distinct={len(issued)}, idempotency_mismatches={mismatched}")
    if dt > 0:
        print(f"TPS:   {success/dt:.1f} req/s")


if __name__ == "__main__":
    asyncio.run(main())
