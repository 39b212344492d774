from .corpus import WordCorpus, load_corpus, normalize_words
from .validator import validate_corpus, pretty_summary
from .io import read_lines

__all__ = ["WordCorpus", "load_corpus", "normalize_words", "validate_corpus", "pretty_summary",
           "read_lines"]
