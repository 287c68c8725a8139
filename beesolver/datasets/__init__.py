from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines
from .dictionary import (
    Dictionary,
    DictionaryError,
    WORD_LIST_URL,
    fetch_dictionary,
    load_dictionary,
)

__all__ = [
    "validate_wordlist", "pretty_summary",
    "Dictionary", "DictionaryError", "WORD_LIST_URL",
    "fetch_dictionary", "load_dictionary", "read_lines", "write_lines",
]
