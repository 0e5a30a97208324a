"""
Content-addressed document identifiers.

Identical text always maps to the same identifier, so storing it twice
overwrites one index entry instead of creating a duplicate.

SHA-1 is collision-findable. It is used here to detect accidental duplicates,
not to resist adversarial collisions.

Dependencies: hashlib (stdlib)
System role: Deterministic document ID generation
"""

import hashlib


def identify(text: str) -> str:
    """
    Compute the identifier for a block of text.

    Args:
        text: Raw document text

    Returns:
        str: 40-character lowercase hex SHA-1 digest of the UTF-8 bytes
    """
    return hashlib.sha1(text.encode("utf-8"), usedforsecurity=False).hexdigest()
