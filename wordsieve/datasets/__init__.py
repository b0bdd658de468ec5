from .validator import validate_wordlist, pretty_summary
from .io import iter_lines, sha256_file
from .dictionary import (Dictionary, DictionaryCatalog, DictionaryId, load_dictionary,
                         resolve_dictionary_id)

__all__ = ["validate_wordlist", "pretty_summary", "iter_lines", "sha256_file",
           "Dictionary", "DictionaryCatalog", "DictionaryId", "load_dictionary",
           "resolve_dictionary_id"]
