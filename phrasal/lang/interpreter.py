"""Single-pass interpreter for phrasal. There is no syntax tree: the interpreter walks the token list once with a forward
cursor and executes each statement as soon as it is recognized.

Statement forms, tried in this order:

```
<declare_stmt> ::= "token" "(" <type> ["."] <name> ("," <type> ["."] <name>)* ")"
<print_stmt>   ::= "phrase" <token>* [";"]          ; strings and variables are printed, anything else is ignored
<nl_stmt>      ::= "nl"
<input_stmt>   ::= "complem" <name>                 ; reads one line, typed by the name's existing registration
<legacy_stmt>  ::= ("iov" | "nu") <name> ["="] <value>
<assign_stmt>  ::= <name> "==" <value>               ; note: "==", a plain "=" does not assign here
```

Any token that does not start one of these is skipped. Quirks of the language are kept as they are: declarations only
give defaults to string and integer types, and a `deci` value token is converted from its own text, which always fails.
"""

import logging
import sys

from phrasal.lang import numerical
from phrasal.lang.environment import Environment, Value, ValueKind
from phrasal.lang.lexical import TokenType


TYPE_KEYWORDS = {
    TokenType.IOV: ValueKind.STRING,
    TokenType.SINCH: ValueKind.STRING,
    TokenType.NU: ValueKind.INTEGER,
    TokenType.DECI: ValueKind.DECIMAL,
}


class Interpreter:
    """Executes a list of tokens produced by phrasal.lang.lexical.tokenize."""

    def __init__(self, tokens, stdin=None, stdout=None):
        assert tokens and tokens[-1].type is TokenType.END, "token list must end with END"

        self.tokens = tokens
        self.current = 0
        self.env = Environment()

        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

        # (leading token types, handler) in order of priority, then identifier assignment, then skip
        self.statements = [
            ((TokenType.TOKEN,), self._declare),
            ((TokenType.PHRASE,), self._print),
            ((TokenType.NL,), self._newline),
            ((TokenType.COMPL,), self._input),
            ((TokenType.IOV, TokenType.NU), self._legacy_assign),
        ]

    def peek(self):
        return self.tokens[self.current]

    def advance(self):
        """Returns current token and moves past it. The cursor never moves past END."""
        token = self.tokens[self.current]
        if token.type is not TokenType.END:
            self.current += 1
        return token

    def match(self, *types):
        """Consumes and returns current token if it is one of types, else returns None."""
        if self.peek().type in types:
            return self.advance()
        return None

    def run(self):
        """Executes statements until END is reached."""
        while self.peek().type is not TokenType.END:
            self.statement()

    def statement(self):
        """Executes the single statement starting at the cursor."""
        logging.debug("statement at %d: %r", self.current, self.peek())

        for types, handler in self.statements:
            if self.match(*types):
                return handler()

        if self.peek().type is TokenType.IDENTIFIER:
            return self._assign()
        self.advance()

    def evaluate_expression(self):
        """Evaluates `<value> (("+" | "-") <value>)*` strictly left to right. Values are integer literals or integer
        variables; unknown variables count as 0.
        """
        result = self._operand()
        while self.peek().type in (TokenType.PLUS, TokenType.MINUS):
            operator = self.advance()
            operand = self._operand()
            result = result + operand if operator.type is TokenType.PLUS else result - operand
        return result

    def write(self, text=""):
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def _operand(self):
        token = self.advance()
        if token.type is TokenType.NUMBER:
            return numerical.integer(token.text)

        if token.type is TokenType.IDENTIFIER:
            value = self.env.get(token.text, ValueKind.INTEGER)
            if value is not None:
                return value.data
        return 0

    def _declare(self):
        if not self.match(TokenType.LPAREN):
            return

        while not self.match(TokenType.RPAREN):
            type_token = self.advance()
            self.match(TokenType.DOT)
            name = self.advance().text

            kind = TYPE_KEYWORDS.get(type_token.type)
            if kind is not None:
                self.env.declare(name, kind)

            if not self.match(TokenType.COMMA):
                break

    def _print(self):
        line = ""
        while self.peek().type not in (TokenType.END, TokenType.SEMICOLON):
            token = self.advance()
            if token.type is TokenType.STRING:
                line += token.text
            elif token.type is TokenType.IDENTIFIER:
                value = self.env.lookup(token.text)
                if value is not None:
                    line += numerical.display(value.data)

        self.write(line)
        self.match(TokenType.SEMICOLON)

    def _newline(self):
        self.write()

    def _input(self):
        name = self.advance().text
        line = self.stdin.readline()
        if line.endswith("\n"):
            line = line[:-1]

        if self.env.has(name, ValueKind.INTEGER):
            self.env.set(name, Value(ValueKind.INTEGER, numerical.integer(line)))
        elif self.env.has(name, ValueKind.DECIMAL):
            self.env.set(name, Value(ValueKind.DECIMAL, numerical.decimal(line)))
        else:
            self.env.set(name, Value(ValueKind.STRING, line))

    def _legacy_assign(self):
        name = self.advance().text
        self.match(TokenType.ASSIGN)
        self._store(name, self.advance())

    def _assign(self):
        name = self.advance().text
        if self.match(TokenType.EQUALS):
            token = self.match(TokenType.STRING, TokenType.NUMBER, TokenType.DECI)
            if token is not None:
                self._store(name, token)

    def _store(self, name, token):
        """Assigns the value token to name in the environment its kind selects. Other tokens are ignored."""
        if token.type is TokenType.STRING:
            self.env.set(name, Value(ValueKind.STRING, token.text))
        elif token.type is TokenType.NUMBER:
            self.env.set(name, Value(ValueKind.INTEGER, numerical.integer(token.text)))
        elif token.type is TokenType.DECI:
            self.env.set(name, Value(ValueKind.DECIMAL, numerical.decimal(token.text)))
