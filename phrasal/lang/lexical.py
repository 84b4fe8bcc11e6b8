"""Lexical analysis for the phrasal language. Converts a whole program into a list of tokens before anything is run;
there is no lazy token stream.

Lexical grammar can be loosely defined as follows:

```
<word>    ::= <letter> (<letter> | <digit> | "_")*  ; keyword if in KEYWORDS, else identifier (case-sensitive)
<number>  ::= <digit>+                              ; no sign, no decimal point
<string>  ::= '"' <char>* '"'                       ; verbatim, no escapes (unterminated runs to end of input)
<symbol>  ::= "==" | "=" | "+" | "-" | ";" | "(" | ")" | "." | ","
```

Whitespace separates tokens and any other character is skipped without a trace. The token list always ends with
exactly one END token.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the lexer can produce."""
    IDENTIFIER = auto()
    NUMBER = auto()
    STRING = auto()
    ASSIGN = auto()     # =
    PLUS = auto()       # +
    MINUS = auto()      # -
    EQUALS = auto()     # ==
    PHRASE = auto()     # print statement
    NL = auto()         # newline statement
    COMPL = auto()      # input statement
    SEMICOLON = auto()  # ;
    IOV = auto()        # string type
    NU = auto()         # integer type
    DECI = auto()       # decimal type
    SINCH = auto()      # string type
    LOOP = auto()       # reserved
    IF = auto()         # reserved
    ELSE = auto()       # reserved
    END = auto()
    TOKEN = auto()      # declaration block
    LPAREN = auto()     # (
    RPAREN = auto()     # )
    DOT = auto()        # .
    COMMA = auto()      # ,


@dataclass(frozen=True)
class Token:
    """Smallest lexical unit: a kind and the literal text it was read from."""
    type: TokenType
    text: str

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"


KEYWORDS = {
    "phrase": TokenType.PHRASE,
    "complem": TokenType.COMPL,
    "iov": TokenType.IOV,
    "nuv": TokenType.NU,
    "nu": TokenType.NU,
    "deci": TokenType.DECI,
    "sinch": TokenType.SINCH,
    "loop": TokenType.LOOP,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "token": TokenType.TOKEN,
    "nl": TokenType.NL,
}

SYMBOLS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
}


def is_word_char(char):
    """Letters, digits and underscores may continue a word. Only ASCII is recognized."""
    return char.isascii() and (char.isalnum() or char == "_")


def tokenize(source):
    """Returns list of Tokens for source, terminated by a single END token."""
    tokens = []
    idx = 0

    while idx < len(source):
        char = source[idx]

        if char.isspace():
            idx += 1

        elif char.isascii() and char.isalpha():
            start = idx
            while idx < len(source) and is_word_char(source[idx]):
                idx += 1
            word = source[start:idx]
            tokens.append(Token(KEYWORDS.get(word, TokenType.IDENTIFIER), word))

        elif char.isascii() and char.isdigit():
            start = idx
            while idx < len(source) and source[idx].isascii() and source[idx].isdigit():
                idx += 1
            tokens.append(Token(TokenType.NUMBER, source[start:idx]))

        elif char == "\"":
            end = source.find("\"", idx + 1)
            if end == -1:
                end = len(source)  # unterminated string swallows the rest of the input
            tokens.append(Token(TokenType.STRING, source[idx + 1:end]))
            idx = end + 1

        elif source.startswith("==", idx):
            tokens.append(Token(TokenType.EQUALS, "=="))
            idx += 2

        elif char == "=":
            tokens.append(Token(TokenType.ASSIGN, "="))
            idx += 1

        elif char in SYMBOLS:
            tokens.append(Token(SYMBOLS[char], char))
            idx += 1

        else:
            idx += 1  # unrecognized characters are skipped

    tokens.append(Token(TokenType.END, ""))
    for token in tokens:
        logging.debug("lexed %r", token)
    return tokens
