from .text import normalize
from .shingles import ShingleSet, build_shingles
from .similarity import SimilarityReport, compare, compare_texts, similarity

__version__ = "0.1.0"
