import re
from typing import Iterator, Union

# everything that is not a lowercase ASCII alphanumeric, a space, or a high-bit byte
_strip_re = re.compile(rb"[^0-9a-z \x80-\xff]+")


def normalize(text: Union[bytes, str]) -> bytes:
    """Lowercase ASCII letters and drop punctuation, keeping high-bit bytes verbatim."""
    if text is None:
        return b""
    if isinstance(text, str):
        text = text.encode("utf-8")
    # bytes.lower() only touches A-Z, so multi-byte sequences pass through untouched
    t = bytes(text).lower()
    return _strip_re.sub(b"", t)


def iter_shingles(text: bytes, n: int) -> Iterator[bytes]:
    """Yield every n-byte window of text, left to right."""
    if n < 1:
        raise ValueError(f"shingle length must be positive, got {n}")
    for i in range(len(text) - n + 1):
        yield text[i:i + n]
