"""SHA-1 digests of raw content.

Digests cover the bytes exactly as stored; there is no object header,
so a blob's digest equals `sha1sum` of the file it came from.
"""

import hashlib
import re

HEX_DIGEST = re.compile(r'^[0-9a-f]{40}$')

# Read size when streaming files through the hasher
CHUNK_SIZE = 64 * 1024


def hash_object(data: bytes) -> str:
    """40-character lowercase hex SHA-1 of data."""
    return hashlib.sha1(data).hexdigest()


def hash_file(filepath, chunk_size: int = CHUNK_SIZE) -> str:
    """
    Digest of a file's content without loading it whole.

    Args:
        filepath: Path to the file
        chunk_size: Bytes read per step

    Returns:
        str: Same digest hash_object would give for the file's bytes

    Raises:
        OSError: If the file cannot be opened or read
    """
    sha = hashlib.sha1()
    with open(filepath, 'rb') as stream:
        for chunk in iter(lambda: stream.read(chunk_size), b''):
            sha.update(chunk)
    return sha.hexdigest()


def is_digest(text) -> bool:
    """True for a full 40-character lowercase hex digest."""
    return isinstance(text, str) and bool(HEX_DIGEST.match(text))
