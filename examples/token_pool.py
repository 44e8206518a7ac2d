"""
key_locked_storage — Token pool from configuration

Hands out single-use tokens from a pool that refills itself when empty.
Run it from several terminals at once: no token is handed out twice.
"""

import secrets
import sys

from key_locked_storage import StorageFactory


def new_batch() -> list[str]:
    return [secrets.token_hex(4) for _ in range(5)]


def main():
    url = sys.argv[1] if len(sys.argv) > 1 else "sqlite:///token_pool.db"
    storage = StorageFactory.create({"type": "sql", "url": url, "table_name": "token_pools"})

    for _ in range(7):
        [token] = storage.shift_or_init("pool:api", new_batch)
        print(f"  token={token}")

    storage.close()


if __name__ == "__main__":
    main()
