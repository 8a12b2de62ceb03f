"""
File hashing utility — MD5 hash used to tag stored records with their upload.
"""

import hashlib


def md5_hash(data: bytes) -> str:
    """Return hex MD5 digest of raw bytes."""
    return hashlib.md5(data).hexdigest()
