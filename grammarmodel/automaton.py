import logging
from pprint import pprint
from typing import TYPE_CHECKING, Iterable

import networkx as nx
import pandas as pd
from matplotlib import pyplot as plt

from .item import Item, State
from .symbols import MATH_NA, is_nonterminal

if TYPE_CHECKING:
    from .grammar import Grammar

logger = logging.getLogger(__name__)


def closure(grammar: "Grammar", s: State, log: logging.Logger | None = None) -> State:
    log = log or logger
    # A non-terminal is expanded at most once per call: all its rules go in together
    expanded = set()

    is_changing = True
    while is_changing:
        is_changing = False
        for item in list(s.items):
            c = item.next_symbol()
            if not is_nonterminal(c) or c in expanded:
                continue

            expanded.add(c)
            log.debug("expanding non-terminal %s", c)
            for rule in grammar.rules_for(c):
                if s.add(Item.from_rule(rule)):
                    is_changing = True
    return s


def goto(
    grammar: "Grammar",
    s: State,
    x: str,
    number: int = -1,
    log: logging.Logger | None = None,
) -> State:
    t = State(number)

    for item in s.items:
        if item.next_symbol() == x:
            t.add(Item.from_moving(item))

    return closure(grammar, t, log)


def build_canonical_collection(
    grammar: "Grammar", log: logging.Logger | None = None
) -> tuple[list[State], pd.DataFrame]:
    log = log or logger

    cc0 = State(0, [Item.from_rule(rule) for rule in grammar.rules_for(grammar.start)])
    closure(grammar, cc0, log)
    log.debug("new state %d created", cc0.number)

    symbols = sorted(grammar.symbols())

    # The states list doubles as the work queue
    CC = [cc0]
    check_set = {cc0.key: cc0.number}

    trace_records = []
    processed = 0

    while processed < len(CC):
        cci = CC[processed]
        processed += 1
        record = {v: MATH_NA for v in symbols}

        for x in cci.symbols():
            t = goto(grammar, cci, x, len(CC), log)
            if t.key not in check_set:
                CC.append(t)
                check_set[t.key] = t.number
                log.debug("new state %d created", t.number)
            record[x] = check_set[t.key]
        trace_records.append(record)

    # State numbers live in the index, apart from the symbol columns
    df = pd.DataFrame.from_records(
        trace_records, index=[s.number for s in CC], columns=symbols
    )
    df.index.name = "From"

    return CC, df.sort_index()


def transitions(trace: pd.DataFrame) -> Iterable[tuple[int, str, int]]:
    """Yields `(from, symbol, to)` for every non-empty cell of the trace."""
    for i, row in trace.iterrows():
        for x, target in row.items():
            if target != MATH_NA:
                yield int(i), x, int(target)


def set2str(cc: State | Iterable[Item]) -> list[str]:
    return list(sorted(map(str, cc)))


def print_states(CC: list[State]):
    pprint({s.number: set2str(s) for s in CC})


def to_graph(CC: list[State], trace: pd.DataFrame) -> nx.DiGraph:
    graph = nx.DiGraph()

    for s in CC:
        graph.add_node(s.number, items=set2str(s))

    # Several symbols may lead to the same state; keep them all on one edge
    for i, x, target in transitions(trace):
        if graph.has_edge(i, target):
            graph.edges[i, target]["symbol"] += f", {x}"
        else:
            graph.add_edge(i, target, symbol=x)

    return graph


def visualize(grammar: "Grammar", path: str | None = None):
    graph = to_graph(grammar.states, grammar.trace)
    pos = nx.spring_layout(graph, seed=0)

    plt.figure(figsize=(12, 8))
    nx.draw(graph, pos, arrows=True, node_shape="o", node_size=1500, alpha=0.4)
    nx.draw_networkx_labels(graph, pos, labels={n: f"I{n}" for n in graph.nodes})
    nx.draw_networkx_edge_labels(
        graph, pos, edge_labels=nx.get_edge_attributes(graph, "symbol")
    )

    if path:
        plt.savefig(path)
        plt.close()
    else:
        plt.show()
