"""Character sets for O(1) classification in the tokenizer.

All sets are frozensets so membership tests stay O(1) and the sets can be
shared freely.
"""

# Skipped between tokens. Carriage return is included so CRLF sources
# tokenize the same as LF sources.
SEPARATORS: frozenset[str] = frozenset("\t\n\r")

# Terminates a control keyword (\keyword)
END_OF_CONTROL: frozenset[str] = frozenset(" ()[]{}")

# Terminates a paragraph
CONTROL_CHARS: frozenset[str] = frozenset("\\#[")

# Opening delimiter -> closing delimiter
DELIMITERS: dict[str, str] = {
    "[": "]",
    "(": ")",
    "{": "}",
}

WHITESPACE: frozenset[str] = frozenset(" \t\n\r")

CTRL_SIGIL = "\\"
HEADING_SIGIL = "#"
COMMENT = "//"
