from grammarmodel import Grammar, Rule


def simple():
    return Grammar(
        start="S",
        terminals={"a", "b"},
        nonterminals={"S", "A", "B"},
        rules=[
            Rule("S", ["A", "B"]),
            Rule("A", ["a"]),
            Rule("B", ["b"]),
        ],
    )


def recursive():
    return Grammar(
        start="S",
        terminals={"a"},
        nonterminals={"S", "A"},
        rules=[
            Rule("S", ["A"]),
            Rule("A", ["a", "A"]),
            Rule("A", ["a"]),
        ],
    )


def math():
    return Grammar(
        start="E",
        terminals={"+", "*", "(", ")", "id"},
        nonterminals={"E", "T", "F"},
        rules=[
            Rule("E", ["E", "+", "T"]),
            Rule("E", ["T"]),
            Rule("T", ["T", "*", "F"]),
            Rule("T", ["F"]),
            Rule("F", ["(", "E", ")"]),
            Rule("F", ["id"]),
        ],
    )


def empty():
    return Grammar(
        start="S",
        terminals={"b"},
        nonterminals={"S", "A"},
        rules=[
            Rule("S", ["A", "b"]),
            Rule("A", []),
        ],
    )
