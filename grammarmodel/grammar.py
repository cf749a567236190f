import logging
from dataclasses import dataclass
from typing import Iterable

from .automaton import build_canonical_collection
from .sets import First, Follow
from .symbols import is_nonterminal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    lhs: str
    rhs: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "rhs", tuple(self.rhs))

    def is_empty(self) -> bool:
        return len(self.rhs) == 0

    def __str__(self) -> str:
        return f"{self.lhs} : {' '.join(self.rhs)}"


class Grammar:
    """A context-free grammar together with everything derived from it.

    `first`, `follow`, `states` and `trace` are recomputed from scratch
    whenever `rules` is reassigned. The input is taken as is: undeclared
    symbols or non-terminals without rules are not rejected here, they just
    end up with empty sets or are never reached. See `validate`.
    """

    def __init__(
        self,
        start: str,
        terminals: Iterable[str],
        nonterminals: Iterable[str],
        rules: Iterable[Rule],
        log: logging.Logger | None = None,
    ):
        self.start = start
        self.terminals = set(terminals)
        self.nonterminals = set(nonterminals)
        self.log = log or logger
        self.rules = rules

    @property
    def rules(self) -> list[Rule]:
        return self._rules

    @rules.setter
    def rules(self, rules: Iterable[Rule]):
        self._rules = list(rules)
        self.update()

    def update(self):
        first = First(self, self.log)
        self.first = first.first
        self.follow = Follow.build(self, first, self.log)
        self.states, self.trace = build_canonical_collection(self, self.log)

    def rules_for(self, symbol: str) -> list[Rule]:
        return [rule for rule in self._rules if rule.lhs == symbol]

    def symbols(self) -> set[str]:
        s = self.terminals | self.nonterminals
        for r in self._rules:
            s.add(r.lhs)
            s.update(r.rhs)
        return s

    def validate(self) -> list[str]:
        errors = []

        if not self.rules_for(self.start):
            errors.append(f"No rules for start symbol '{self.start}'")

        for rule in self._rules:
            if rule.lhs not in self.nonterminals:
                errors.append(f"Rule '{rule}' produces undeclared non-terminal '{rule.lhs}'")
            for s in rule.rhs:
                if s not in self.terminals and s not in self.nonterminals:
                    errors.append(f"Symbol '{s}' in rule '{rule}' is not declared")

        both = self.terminals & self.nonterminals
        if both:
            errors.append(f"Symbols declared both terminal and non-terminal: {sorted(both)}")

        defined = {rule.lhs for rule in self._rules}
        for nt in sorted(self.nonterminals - defined):
            errors.append(f"Non-terminal '{nt}' has no rules")

        for s in sorted(self.terminals):
            if is_nonterminal(s):
                errors.append(f"Terminal '{s}' is spelled like a non-terminal")

        return errors

    def __str__(self) -> str:
        lines = [f"start: {self.start}"]
        lines.extend(f"  {i}: {rule}" for i, rule in enumerate(self._rules))
        return "\n".join(lines)
