"""
key_locked_storage — Hello World

Every mutation of a key is a locked read-modify-write transaction.
Change the value through a handle; it is written only if it changed.
"""

from key_locked_storage import LockedList, LockedValue, SQLStorage

# ─── Your functions (plain callables, no framework types needed) ───


def record_visit(stats: LockedValue) -> int:
    current = stats.get()
    stats.set({**current, "visits": current["visits"] + 1})
    return stats.get()["visits"]


def take_two(queue: LockedList) -> list:
    return queue.shift(2)


def main():
    # ──────────────────────────────────────
    #  1. Create the storage (table is created on first use)
    # ──────────────────────────────────────
    storage = SQLStorage("sqlite:///hello_world.db")

    # ──────────────────────────────────────
    #  2. Counters: no lost updates, even across processes
    # ──────────────────────────────────────
    for _ in range(3):
        visits = storage.value("stats:home", lambda: {"visits": 0}, record_visit)
        print(f"  visits={visits}")

    # ──────────────────────────────────────
    #  3. Queues
    # ──────────────────────────────────────
    storage.push("jobs", "resize", "thumbnail", "upload")
    print(f"  took {storage.list('jobs', list, take_two)}")
    print(f"  left {storage.get('jobs')}")

    # ──────────────────────────────────────
    #  4. Changed your mind? Roll back.
    # ──────────────────────────────────────
    def try_reset(stats: LockedValue) -> None:
        stats.set({"visits": 0})
        stats.rollback()

    storage.value("stats:home", lambda: {"visits": 0}, try_reset)
    print(f"  still {storage.get('stats:home')}")

    # ──────────────────────────────────────
    #  5. Read and clear in one step
    # ──────────────────────────────────────
    print(f"  final {storage.get('stats:home', delete=True)}")
    storage.close()


if __name__ == "__main__":
    main()
