"""Camel Cards: ranking hands and summing winnings."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import lru_cache

from aocsolutions.textutil import split, to_int

CARDS = "AKQJT98765432"
FIVE_OF_A_KIND = 7

_VALUES = {card: 13 - index for index, card in enumerate(CARDS)}
_VALUES_JOKER = {**_VALUES, "J": 0}
_JOKER_REPLACEMENTS = "AKQT98765432"


def hand_type(cards: str) -> int:
    """Hand rank from 1 (high card) to 7 (five of a kind)."""
    counts = [cards.count(card) for card in CARDS]
    if 5 in counts:
        return FIVE_OF_A_KIND
    if 4 in counts:
        return 6
    if 3 in counts and 2 in counts:
        return 5
    if 3 in counts:
        return 4
    if counts.count(2) == 2:
        return 3
    if 2 in counts:
        return 2
    return 1


@lru_cache(maxsize=None)
def hand_type_joker(cards: str) -> int:
    """Best hand rank when every 'J' may stand for any other card."""
    if "J" not in cards:
        return hand_type(cards)
    pos = cards.find("J", 0, 5)
    if pos < 0:
        return 0
    best = 0
    for card in _JOKER_REPLACEMENTS:
        best = max(best, hand_type_joker(cards[:pos] + card + cards[pos + 1 :]))
        if best == FIVE_OF_A_KIND:
            break
    return best


def _strengths(cards: str, table: dict[str, int]) -> tuple[int, ...]:
    if len(cards) < 5:
        raise ValueError(f"hand too short: {cards!r}")
    try:
        return tuple(table[card] for card in cards[:5])
    except KeyError as exc:
        raise ValueError(f"unknown card {exc.args[0]!r} in {cards!r}") from None


def _parse(lines: Iterable[str]) -> list[tuple[str, int]]:
    hands = []
    for line in lines:
        fields = split(line, " ")
        if len(fields) < 2:
            raise ValueError(f"malformed hand line {line!r}")
        hands.append((fields[0], to_int(fields[1])))
    return hands


def _winnings(
    hands: list[tuple[str, int]], key: Callable[[str], tuple[int, tuple[int, ...]]]
) -> int:
    ranked = sorted(hands, key=lambda hand: key(hand[0]))
    return sum(rank * bid for rank, (_, bid) in enumerate(ranked, start=1))


def part1(lines: Iterable[str]) -> int:
    """Total winnings with ordinary rules."""
    return _winnings(
        _parse(lines), lambda cards: (hand_type(cards), _strengths(cards, _VALUES))
    )


def part2(lines: Iterable[str]) -> int:
    """Total winnings with 'J' as a weak wildcard."""
    return _winnings(
        _parse(lines),
        lambda cards: (hand_type_joker(cards), _strengths(cards, _VALUES_JOKER)),
    )