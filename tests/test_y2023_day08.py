import pytest

from advent_puzzles.y2023_day08 import count_steps, parse_network, part1, part2

FIRST_EXAMPLE = """RL

AAA = (BBB, CCC)
BBB = (DDD, EEE)
CCC = (ZZZ, GGG)
DDD = (DDD, DDD)
EEE = (EEE, EEE)
GGG = (GGG, GGG)
ZZZ = (ZZZ, ZZZ)
"""

SECOND_EXAMPLE = """LLR

AAA = (BBB, BBB)
BBB = (AAA, ZZZ)
ZZZ = (ZZZ, ZZZ)
"""

GHOST_EXAMPLE = """LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, XXX)
22B = (22C, 22C)
22C = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)
"""


def test_parse_network():
    instructions, nodes = parse_network(SECOND_EXAMPLE)
    assert instructions == "LLR"
    assert nodes == {
        "AAA": ("BBB", "BBB"),
        "BBB": ("AAA", "ZZZ"),
        "ZZZ": ("ZZZ", "ZZZ"),
    }


def test_part1_examples():
    assert part1(FIRST_EXAMPLE) == 2
    assert part1(SECOND_EXAMPLE) == 6


def test_part2_example():
    assert part2(GHOST_EXAMPLE) == 6


def test_part2_with_single_start_matches_part1():
    assert part2(SECOND_EXAMPLE) == part1(SECOND_EXAMPLE)
    assert part2(FIRST_EXAMPLE) == part1(FIRST_EXAMPLE)


def test_count_steps_is_zero_when_already_at_end():
    _, nodes = parse_network(FIRST_EXAMPLE)
    assert count_steps("RL", nodes, "ZZZ", lambda node: node == "ZZZ") == 0


def test_count_steps_reaches_an_end_node():
    instructions, nodes = parse_network(SECOND_EXAMPLE)
    steps = count_steps(instructions, nodes, "AAA", lambda node: node == "ZZZ")
    node = "AAA"
    for index in range(steps):
        left, right = nodes[node]
        node = left if instructions[index % len(instructions)] == "L" else right
    assert node == "ZZZ"


def test_invalid_instruction_raises():
    with pytest.raises(ValueError):
        parse_network("LXR\n\nAAA = (ZZZ, ZZZ)\n")


def test_missing_node_raises():
    with pytest.raises(ValueError):
        part1("L\n\nAAA = (BBB, BBB)\n")


def test_empty_instructions_raise():
    with pytest.raises(ValueError):
        count_steps("", {"AAA": ("ZZZ", "ZZZ")}, "AAA", lambda node: node == "ZZZ")


def test_part2_without_start_raises():
    with pytest.raises(ValueError):
        part2("L\n\nZZZ = (ZZZ, ZZZ)\n")