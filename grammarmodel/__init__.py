from .automaton import build_canonical_collection, closure, goto, to_graph, visualize
from .grammar import Grammar, Rule
from .item import Item, State
from .reader import GrammarError, read_grammar, read_grammar_file
from .sets import First, Follow
from .symbols import DOT, EOF, MATH_NA, is_nonterminal, is_terminal

__all__ = [
    "DOT",
    "EOF",
    "MATH_NA",
    "First",
    "Follow",
    "Grammar",
    "GrammarError",
    "Item",
    "Rule",
    "State",
    "build_canonical_collection",
    "closure",
    "goto",
    "is_nonterminal",
    "is_terminal",
    "read_grammar",
    "read_grammar_file",
    "to_graph",
    "visualize",
]
