from dataclasses import dataclass
from typing import Optional, Union

from .shingles import ShingleSet
from .text import normalize


@dataclass(frozen=True)
class SimilarityReport:
    intersection: int
    union: int
    score: float


def intersection_count(a: ShingleSet, b: ShingleSet) -> int:
    """Sum of min(count_a, count_b) over shingles present in both sets."""
    # walk the smaller set and probe the larger one
    small, large = (a, b) if len(a) <= len(b) else (b, a)
    inter = 0
    for gram, c in small.items():
        other = large.count(gram)
        if other:
            inter += min(c, other)
    return inter


def union_count(a: ShingleSet, b: ShingleSet, intersection: Optional[int] = None) -> int:
    if intersection is None:
        intersection = intersection_count(a, b)
    return a.total + b.total - intersection


def compare(a: ShingleSet, b: ShingleSet) -> SimilarityReport:
    """
    Bag-Jaccard comparison of two shingle multisets.
    Returns intersection, union and the ratio (0.0 when the union is empty).
    """
    inter = intersection_count(a, b)
    union = union_count(a, b, inter)
    score = inter / union if union > 0 else 0.0
    return SimilarityReport(intersection=inter, union=union, score=float(score))


def similarity(a: ShingleSet, b: ShingleSet) -> float:
    return compare(a, b).score


def compare_texts(a: Union[bytes, str], b: Union[bytes, str], n: int = 3) -> SimilarityReport:
    """Normalize two raw texts, shingle them and compare."""
    return compare(ShingleSet.build(normalize(a), n), ShingleSet.build(normalize(b), n))
