"""shannon — Shannon entropy of text, in bits per code point."""

from shannon.entropy import entropy, shannon_entropy
from shannon.text import EntropyText

__version__ = "0.3.0"

__all__ = [
    "EntropyText",
    "entropy",
    "shannon_entropy",
]
