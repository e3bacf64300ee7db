"""
Example: Using the FSFTBuffer

Caches a handful of user profiles in a small buffer and shows LRU
replacement, touch-based refresh and timeout expiry.
"""

import logging
import time

from pydantic import BaseModel

from fsft_buffer import FSFTBuffer, ItemNotFoundError


class UserProfile(BaseModel):
    """Any object with a stable id() can be cached"""
    username: str
    display_name: str

    def id(self) -> str:
        return self.username


def main():
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    buffer = FSFTBuffer(capacity=2, timeout=1)

    buffer.put(UserProfile(username="ada", display_name="Ada"))
    buffer.put(UserProfile(username="grace", display_name="Grace"))

    # Reading ada makes grace the LRU entry
    print(f"Read: {buffer.get('ada').display_name}")
    buffer.put(UserProfile(username="linus", display_name="Linus"))
    print(f"LRU order after third put: {buffer.get_lru_order()}")

    # Reads do not refresh; touches do
    time.sleep(0.6)
    buffer.touch("linus")
    time.sleep(0.6)

    for username in ("ada", "linus"):
        try:
            print(f"{username}: {buffer.get(username).display_name}")
        except ItemNotFoundError as e:
            print(f"{username}: {e}")

    print(f"Stats: {buffer.get_stats().model_dump()}")


if __name__ == "__main__":
    main()
