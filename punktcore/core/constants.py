"""
Default language variables for the Punkt word tokenizer and classifier.
"""

# Characters that are candidates for sentence boundaries
SENT_END_CHARS = (".", "?", "!")

# Sentence-internal punctuation, which indicates an abbreviation if
# preceded by a period-final token
INTERNAL_PUNCTUATION = (",", ":", ";")

# Characters that cannot appear within words
RE_NON_WORD_CHARS = r"(?:[?!)\";}\]\*:@\'\({\[])"

# Hyphen and ellipsis are multi-character punctuation
RE_MULTI_CHAR_PUNCT = r"(?:\-{2,}|\.{2,}|(?:\.\s){2,}\.)"

# Excludes some characters from starting word tokens
RE_WORD_START = r"[^\(\"\`{\[:;&\#\*@\)}\]\-,]"

# A token ending in two or more periods, spaced periods or the ellipsis character
RE_ELLIPSIS = r"(?:\.{2,}|(?:\.\s+){2,}\.|\u2026)$"

# Split punctuation other than periods from words
WORD_TOKENIZE_FMT = r"""(
    %(MultiChar)s
    |
    (?=%(WordStart)s)\S+?                   # Accept word characters until end is found
    (?=                                     # Sequences marking a word's end
        \s|                                 # White-space
        $|                                  # End-of-string
        %(NonWord)s|%(MultiChar)s|          # Punctuation
        ,(?=$|\s|%(NonWord)s|%(MultiChar)s) # Comma if at end of word
    )
    |
    \S
)"""

# A token ending in a potential sentence break, with the following token
# captured in a lookahead
PERIOD_CONTEXT_FMT = r"""
    \S*                                     # some word material
    %(SentEndChars)s                        # a potential sentence ending
    (?=(?P<after_tok>
        %(NonWord)s                         # either other punctuation
        |
        \s+(?P<next_tok>\S+)                # or whitespace and some other token
    ))"""

# Normalized type for numeric tokens
NUMBER_TYPE = "##number##"
