import hashlib


def sha1_code(code: str) -> str:
    """Return the SHA1 hash of the given source text, used as the parse cache key."""
    return hashlib.sha1(code.encode("utf8")).hexdigest()
