"""Cat store latency benchmark."""

from __future__ import annotations

import time

from services.cats.cats import CatsService
from services.gateway.app.schemas.cat import Cat


def main(count: int = 10_000) -> None:
    service = CatsService()
    start = time.perf_counter()
    for idx in range(count):
        service.create(Cat(name=f"cat-{idx}", age=idx % 20, breed="Tabby"))
    inserted = time.perf_counter() - start

    start = time.perf_counter()
    service.find_one(f"cat-{count - 1}")
    lookup = time.perf_counter() - start
    print(f"Inserted {len(service)} cats in {inserted * 1000:.2f} ms")
    print(f"Worst-case lookup took {lookup * 1000:.3f} ms")


if __name__ == "__main__":
    main()
