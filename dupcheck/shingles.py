import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .text import iter_shingles

logger = logging.getLogger(__name__)


class ShingleSet:
    """
    Multiset of fixed-length byte shingles with occurrence counts.
    Keys are the exact n-byte slices of the normalized text; each distinct
    shingle is stored once together with how many window positions produced it.
    """

    def __init__(self, n: int):
        if n < 1:
            raise ValueError(f"shingle length must be positive, got {n}")
        self.n = n
        self.counts: Dict[bytes, int] = {}
        self._total = 0

    @classmethod
    def build(cls, text: bytes, n: int, table_size_hint: Optional[int] = None) -> "ShingleSet":
        """Slide an n-byte window over text and count every shingle."""
        shingles = cls(n)
        for gram in iter_shingles(text, n):
            shingles.add(gram)
        if table_size_hint is not None and len(shingles) > table_size_hint:
            logger.debug("distinct shingles (%d) exceed table size hint (%d)", len(shingles), table_size_hint)
        logger.debug("built %d distinct shingles from %d windows", len(shingles), shingles.total)
        return shingles

    def add(self, gram: bytes) -> None:
        if len(gram) != self.n:
            raise ValueError(f"expected a {self.n}-byte shingle, got {len(gram)} bytes")
        self.counts[gram] = self.counts.get(gram, 0) + 1
        self._total += 1

    def count(self, gram: bytes) -> int:
        return self.counts.get(gram, 0)

    @property
    def total(self) -> int:
        # number of window positions, with multiplicity
        return self._total

    def items(self):
        return self.counts.items()

    def most_common(self, k: Optional[int] = None) -> List[Tuple[bytes, int]]:
        ranked = sorted(self.counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked if k is None else ranked[:k]

    def __len__(self) -> int:
        return len(self.counts)

    def __contains__(self, gram) -> bool:
        return gram in self.counts

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.counts)

    def __repr__(self) -> str:
        return f"ShingleSet(n={self.n}, distinct={len(self)}, total={self.total})"


def build_shingles(text: bytes, n: int, table_size_hint: Optional[int] = None) -> ShingleSet:
    return ShingleSet.build(text, n, table_size_hint=table_size_hint)
