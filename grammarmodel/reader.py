"""Builds a `Grammar` from its textual form.

One alternative per line::

    EXPR : EXPR + TERM
         | TERM
    TERM : id

The first non-terminal defined is the start symbol. Symbols are split on
whitespace and classified by case. `A :` with nothing after the colon is a
rule with an empty body.
"""

import logging

from .grammar import Grammar, Rule
from .symbols import is_nonterminal

logger = logging.getLogger(__name__)


class GrammarError(Exception):
    def __init__(self, msg: str, lineno: int | None = None, line: str | None = None):
        self.msg = msg
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            msg = f"line {lineno}: {msg}: {line!r}"
        super().__init__(msg)


def read_grammar(
    text: str, strict: bool = False, log: logging.Logger | None = None
) -> Grammar:
    log = log or logger
    terminals = set()
    nonterminals = set()
    start = None
    rules = []
    current = None

    for lineno, line in enumerate(text.splitlines(), start=1):
        chars = line.split()
        if not chars:
            continue

        if is_nonterminal(chars[0]) and len(chars) > 1 and chars[1] == ":":
            current = chars[0]
            nonterminals.add(current)
            if start is None:
                start = current
                log.debug("start symbol: %s", start)
            rhs = chars[2:]
        elif chars[0] == "|" and current is not None:
            rhs = chars[1:]
        else:
            if strict:
                raise GrammarError("unexpected input", lineno, line)
            log.warning("Unexpected input at line %d: %s", lineno, line.strip())
            continue

        rules.append(Rule(current, rhs))
        for symbol in rhs:
            if is_nonterminal(symbol):
                nonterminals.add(symbol)
            else:
                terminals.add(symbol)

    if start is None:
        raise GrammarError("no rules found")

    log.debug("terminals: %s", sorted(terminals))
    log.debug("non-terminals: %s", sorted(nonterminals))

    grammar = Grammar(start, terminals, nonterminals, rules, log)
    if strict:
        errors = grammar.validate()
        if errors:
            raise GrammarError("; ".join(errors))
    return grammar


def read_grammar_file(path: str, strict: bool = False, log: logging.Logger | None = None) -> Grammar:
    with open(path, encoding="utf-8") as f:
        return read_grammar(f.read(), strict, log)
