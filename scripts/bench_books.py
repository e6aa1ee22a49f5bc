#!/usr/bin/env python3
"""Smoke-check and benchmark a running catalog service: latency (p50, p95, p99) and QPS.

Usage:
    export API_URL=http://localhost:3002
    uv run python scripts/bench_books.py [--num-books 200] [--num-queries 50]

Runs the create/list/update/delete round trip once, then seeds books and
times GET /books. Seeded books are deleted at the end.
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def smoke(client: httpx.Client, api_url: str) -> None:
    """Create, update, delete and re-delete one book; raise on unexpected status."""
    r = client.get(f"{api_url}/health")
    r.raise_for_status()

    r = client.post(
        f"{api_url}/books",
        json={"title": "Dune", "author": "Herbert", "price": 9.99, "stock": 5},
    )
    r.raise_for_status()
    book_id = r.json()["id"]

    listed = client.get(f"{api_url}/books").json()
    if not any(b["id"] == book_id for b in listed):
        raise RuntimeError(f"created book {book_id} missing from list")

    client.put(
        f"{api_url}/books/{book_id}",
        json={"title": "Dune", "author": "Herbert", "price": 12.50, "stock": 3},
    ).raise_for_status()
    client.delete(f"{api_url}/books/{book_id}").raise_for_status()

    r = client.delete(f"{api_url}/books/{book_id}")
    if r.status_code != 404:
        raise RuntimeError(f"second delete returned {r.status_code}, expected 404")


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark book listing")
    parser.add_argument("--num-books", type=int, default=200, help="Books to create before listing")
    parser.add_argument("--num-queries", type=int, default=50, help="Number of list requests")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:3002").rstrip("/")

    with httpx.Client(timeout=30.0) as client:
        print("Running smoke check...")
        smoke(client, api_url)

        print(f"Seeding {args.num_books} books...")
        created: list[str] = []
        for i in range(args.num_books):
            r = client.post(
                f"{api_url}/books",
                json={"title": f"Bench book {i}", "author": "bench", "price": 1.0, "stock": i},
            )
            r.raise_for_status()
            created.append(r.json()["id"])

        latencies: list[float] = []
        errors = 0
        print(f"Running {args.num_queries} list requests...")
        start_total = time.perf_counter()
        for _ in range(args.num_queries):
            t0 = time.perf_counter()
            r = client.get(f"{api_url}/books")
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
        total_elapsed = time.perf_counter() - start_total

        for book_id in created:
            client.delete(f"{api_url}/books/{book_id}")

    n = len(latencies)
    if n == 0:
        print("No successful list requests.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    print(
        f"List benchmark (books={args.num_books}, queries={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
