from concurrent.futures import ThreadPoolExecutor

from appfresh.core.cache import ListingCache
from appfresh.core.models import ListingRecord


def test_starts_empty():
    assert ListingCache().read() is None


def test_store_overwrites_slot():
    cache = ListingCache()
    first = ListingRecord(latest_version="1.0")
    second = ListingRecord.not_found()

    cache.store(first)
    cache.store(second)

    assert cache.read() is second


def test_instances_are_independent():
    a, b = ListingCache(), ListingCache()
    a.store(ListingRecord(latest_version="1.0"))
    assert b.read() is None


def test_concurrent_store_and_read_never_tear():
    cache = ListingCache()
    records = [
        ListingRecord(
            latest_version=f"{i}.0",
            display_name=f"app-{i}",
            destination_url=f"https://apps.example.com/{i}",
            minimum_os_version=f"{i}.1",
        )
        for i in range(64)
    ]

    def write(record):
        for _ in range(200):
            cache.store(record)

    def read(_):
        seen = []
        for _ in range(500):
            record = cache.read()
            if record is not None:
                seen.append(record)
        return seen

    with ThreadPoolExecutor(max_workers=16) as pool:
        writers = [pool.submit(write, r) for r in records]
        readers = [pool.submit(read, i) for i in range(8)]
        for f in writers:
            f.result()
        observed = [r for f in readers for r in f.result()]

    for record in observed:
        i = record.latest_version.split(".")[0]
        assert record.display_name == f"app-{i}"
        assert record.destination_url.endswith(f"/{i}")
        assert record.minimum_os_version == f"{i}.1"
    assert cache.read() in records
