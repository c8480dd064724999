from .extractor import Extractor
from .reassembler import Reassembler
from .tokenizer import Tokenizer, tokenize

__all__ = ["Extractor", "Reassembler", "Tokenizer", "tokenize"]
