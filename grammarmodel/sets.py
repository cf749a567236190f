import logging
from pprint import pformat
from typing import TYPE_CHECKING, Iterator

from .symbols import EOF, is_nonterminal

if TYPE_CHECKING:
    from .grammar import Grammar

logger = logging.getLogger(__name__)


def _snapshot(sets: dict[str, set]) -> dict[str, set]:
    return {k: set(v) for k, v in sets.items()}


class First:
    """FIRST sets of every non-terminal.

    Only the leading symbol of each rule body is looked at: there is no
    nullability tracking, so a rule with an empty body contributes `None`
    to the FIRST set of its result.
    """

    def __init__(self, grammar: "Grammar", log: logging.Logger | None = None):
        self.first: dict[str, set] = First.build(grammar, log)

    def __getitem__(self, symbols: list[str] | tuple[str, ...]) -> set:
        if not symbols:
            return set()
        head = symbols[0]
        if is_nonterminal(head):
            return set(self.first.get(head, set()))
        return {head}

    @staticmethod
    def iterate(
        grammar: "Grammar", log: logging.Logger | None = None
    ) -> Iterator[dict[str, set]]:
        """Yields a copy of the FIRST sets after every full pass over the rules."""
        log = log or logger
        first: dict[str, set] = {}
        for rule in grammar.rules:
            first[rule.lhs] = set()

        passes = 0
        is_changing = True
        while is_changing:
            is_changing = False
            passes += 1
            for rule in grammar.rules:
                head = rule.rhs[0] if rule.rhs else None
                if is_nonterminal(head):
                    rhs = first.get(head, set())
                else:
                    rhs = {head}

                if rhs - first[rule.lhs]:
                    is_changing = True
                    first[rule.lhs] |= rhs
            log.debug("FIRST pass %d: %s", passes, "changed" if is_changing else "stable")
            yield _snapshot(first)

    @staticmethod
    def build(grammar: "Grammar", log: logging.Logger | None = None) -> dict[str, set]:
        first: dict[str, set] = {}
        for first in First.iterate(grammar, log):
            pass
        return first

    def __str__(self) -> str:
        return pformat(self.first)


class Follow:
    """FOLLOW sets of every non-terminal.

    A non-terminal followed by another non-terminal `Y` only receives FIRST(Y).
    Whether `Y` can derive the empty string is never considered.
    """

    def __init__(
        self, grammar: "Grammar", first: First, log: logging.Logger | None = None
    ):
        self.follow: dict[str, set] = Follow.build(grammar, first, log)

    def __getitem__(self, symbol: str) -> set:
        return self.follow[symbol]

    @staticmethod
    def iterate(
        grammar: "Grammar", first: First, log: logging.Logger | None = None
    ) -> Iterator[dict[str, set]]:
        """Yields a copy of the FOLLOW sets after every full pass over the rules."""
        log = log or logger
        follow: dict[str, set] = {}
        for rule in grammar.rules:
            follow[rule.lhs] = set()
        for nt in sorted(grammar.nonterminals):
            follow.setdefault(nt, set())
        for rule in grammar.rules:
            for s in rule.rhs:
                if is_nonterminal(s):
                    follow.setdefault(s, set())

        follow.setdefault(grammar.start, set()).add(EOF)

        passes = 0
        is_changing = True
        while is_changing:
            is_changing = False
            passes += 1
            for rule in grammar.rules:
                rhs = rule.rhs
                for i, symbol in enumerate(rhs):
                    if not is_nonterminal(symbol):
                        continue

                    if i == len(rhs) - 1:
                        new = follow[rule.lhs]
                    elif is_nonterminal(rhs[i + 1]):
                        new = first[rhs[i + 1:]]
                    else:
                        new = {rhs[i + 1]}

                    if new - follow[symbol]:
                        is_changing = True
                        follow[symbol] |= new
            log.debug("FOLLOW pass %d: %s", passes, "changed" if is_changing else "stable")
            yield _snapshot(follow)

    @staticmethod
    def build(
        grammar: "Grammar", first: First, log: logging.Logger | None = None
    ) -> dict[str, set]:
        follow: dict[str, set] = {}
        for follow in Follow.iterate(grammar, first, log):
            pass
        return follow

    def __str__(self) -> str:
        return pformat(self.follow)
