import threading

from hcl_palette.ids import IdAllocator


def test_prefixes_share_one_counter():
    ids = IdAllocator(start=7)
    assert [ids.next("col-"), ids.next("hue-"), ids.next()] == ["col-7", "hue-8", "9"]
    assert ids.peek() == 10


def test_concurrent_allocation_is_unique():
    ids = IdAllocator()
    out = []
    peeks = []

    def worker():
        for _ in range(500):
            out.append(ids.next("col-"))
            peeks.append(ids.peek())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(set(out)) == 4000
    assert ids.peek() == 4001
    assert all(2 <= p <= 4001 for p in peeks)
