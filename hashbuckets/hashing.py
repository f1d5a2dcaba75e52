"""String hashing used to pick a bucket for each value."""

DEFAULT_MODULUS = 53
MULTIPLIER = 13


def compute_hash(text: str, modulus: int = DEFAULT_MODULUS) -> int:
    """Return the polynomial hash of ``text`` reduced modulo ``modulus``.

    Each UTF-8 byte is folded in as ``hash = (13 * hash + byte) % modulus``.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 0
    for byte in text.encode("utf-8"):
        result = (MULTIPLIER * result + byte) % modulus
    return result