"""Deterministic rolling hash used as the source of repeatable pseudo-randomness."""

HASH_MULTIPLIER = 31
HASH_MODULUS = 2**32


def content_hash(data: str | bytes) -> int:
    """Polynomial rolling hash with 32-bit wraparound.

    Identical input always yields the identical non-negative integer. Strings
    are hashed by code point, bytes by value. Not cryptographic.
    """
    codes = data if isinstance(data, bytes) else (ord(ch) for ch in data)
    value = 0
    for code in codes:
        value = (value * HASH_MULTIPLIER + code) % HASH_MODULUS
    return abs(value)


def pick(vocabulary: list[str], seed: int, count: int = 1) -> list[str]:
    """Select ``count`` consecutive entries starting at ``seed mod len``."""
    if not vocabulary:
        return []
    return [vocabulary[(seed + i) % len(vocabulary)] for i in range(count)]
