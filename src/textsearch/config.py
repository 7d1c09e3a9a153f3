from __future__ import annotations
import os

# A "word" is a run of letters/digits/apostrophes/quotes. Trailing whitespace is
# folded into the same token, so context strings keep the document's spacing.
WORD_PATTERN: str = r"[A-Za-z0-9\"']+(\s*)"

# Words of context on each side when the caller does not ask for a width
DEFAULT_CONTEXT_WORDS: int = 3

# Document decoding
ENCODING: str = "utf-8"
ENCODING_ERRORS: str = "strict"

# Progress logging (set TEXTSEARCH_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("TEXTSEARCH_VERBOSE") == "1"

# Flask UI
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
