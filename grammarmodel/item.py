from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from .symbols import DOT

if TYPE_CHECKING:
    from .grammar import Rule


@dataclass(frozen=True)
class Item:
    lhs: str
    rhs: tuple[str, ...]
    dot_pos: int = 0

    @classmethod
    def from_rule(cls, rule: "Rule", dot_pos: int = 0) -> Self:
        return cls(lhs=rule.lhs, rhs=tuple(rule.rhs), dot_pos=dot_pos)

    @classmethod
    def from_moving(cls, item: Self) -> Self:
        if item.dot_pos + 1 > len(item.rhs):
            raise IndexError("Dot position exceeds symbols amount")

        return cls(lhs=item.lhs, rhs=item.rhs, dot_pos=item.dot_pos + 1)

    def __repr__(self):
        return f"Item({self})"

    def __str__(self) -> str:
        before = " ".join(self.rhs[: self.dot_pos])
        after = " ".join(self.rhs[self.dot_pos :])
        return f"{self.lhs} : {before} {DOT} {after}"

    # Items are identified by their dotted form, not by the rule they came from
    def __hash__(self):
        return hash(str(self))

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Item):
            return NotImplemented
        return str(self) == str(value)

    def is_complete(self) -> bool:
        return self.dot_pos >= len(self.rhs)

    def next_symbol(self) -> str | None:
        """Returns the symbol right after the dot.

        For `A : b • C d` it is `C`; for a completed item `A : b C d •`
        there is nothing to read and `None` is returned.
        """
        if self.is_complete():
            return None
        return self.rhs[self.dot_pos]


@dataclass(eq=False)
class State:
    """A node of the LR(0) automaton.

    `items` keeps insertion order, which only matters for display and for the
    order in which transitions are explored. Two states are equal when they
    hold the same set of items, whatever their numbers.
    """

    number: int
    items: list[Item] = field(default_factory=list)

    @property
    def key(self) -> frozenset[Item]:
        return frozenset(self.items)

    def add(self, item: Item) -> bool:
        if item in self.items:
            return False
        self.items.append(item)
        return True

    def symbols(self) -> list[str]:
        """Distinct symbols found right after the dot, in item order."""
        return list(
            dict.fromkeys(
                item.next_symbol() for item in self.items if not item.is_complete()
            )
        )

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, State):
            return NotImplemented
        return len(self.items) == len(value.items) and all(
            item in value.items for item in self.items
        )

    # Items are appended during closure, so a State is not hashable: use `key`
    __hash__ = None

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self):
        return f"State({self.number}, {len(self.items)} items)"

    def __str__(self) -> str:
        lines = [f"State {self.number}"]
        lines.extend(f"  {item}" for item in self.items)
        return "\n".join(lines)
