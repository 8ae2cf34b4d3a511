"""Pulse propagation through flip-flops and conjunctions."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from aocsolutions.textutil import remove_all, split, trim

LOW, HIGH = 0, 1
BUTTON = "button"
BROADCASTER = "broadcaster"
FINAL = "rx"
PART1_PRESSES = 1000
MAX_PRESSES = 100_000

Pulse = tuple[str, str, int]


class ModuleType(Enum):
    FLIP_FLOP = "%"
    CONJUNCTION = "&"


@dataclass
class Module:
    """A flip-flop or a conjunction with its outputs and state."""

    kind: ModuleType
    outputs: list[str]
    state: int = LOW
    memory: dict[str, int] = field(default_factory=dict)

    def process(self, sender: str, signal: int) -> int | None:
        """Handle a pulse; return the pulse to send, or None to send nothing."""
        if self.kind is ModuleType.FLIP_FLOP:
            if signal == HIGH:
                return None
            self.state = HIGH - self.state
            return self.state
        self.memory[sender] = signal
        return LOW if all(value != LOW for value in self.memory.values()) else HIGH


def parse_modules(lines: Iterable[str]) -> tuple[dict[str, Module], list[str]]:
    """Return the modules by name and the broadcaster's targets."""
    modules: dict[str, Module] = {}
    broadcaster: list[str] = []
    for line in lines:
        sides = split(line, ">")
        if len(sides) < 2:
            raise ValueError(f"malformed module line {line!r}")
        kind = trim(sides[0], " -")
        targets = split(remove_all(sides[1], " "), ",")
        if kind == BROADCASTER:
            broadcaster = targets
        elif kind.startswith(("%", "&")):
            modules[trim(kind, "%& ")] = Module(ModuleType(kind[0]), targets)
    for name, module in modules.items():
        for target in module.outputs:
            receiver = modules.get(target)
            if receiver is not None and receiver.kind is ModuleType.CONJUNCTION:
                receiver.memory[name] = LOW
    return modules, broadcaster


def press_button(modules: Mapping[str, Module], broadcaster: Sequence[str]) -> list[Pulse]:
    """Push the button once; return every pulse as (sender, target, signal) in order."""
    pulses: list[Pulse] = [(BUTTON, BROADCASTER, LOW)]
    queue: deque[Pulse] = deque((BROADCASTER, target, LOW) for target in broadcaster)
    while queue:
        pulse = queue.popleft()
        pulses.append(pulse)
        sender, target, signal = pulse
        module = modules.get(target)
        if module is None:
            continue
        sent = module.process(sender, signal)
        if sent is not None:
            queue.extend((target, out, sent) for out in module.outputs)
    return pulses


def part1(lines: Iterable[str], presses: int = PART1_PRESSES) -> int:
    """Product of low and high pulse counts over ``presses`` button pushes."""
    modules, broadcaster = parse_modules(lines)
    low = high = 0
    for _ in range(presses):
        for _, _, signal in press_button(modules, broadcaster):
            if signal == LOW:
                low += 1
            else:
                high += 1
    return low * high


def part2(lines: Iterable[str]) -> int:
    """Fewest presses until a low pulse reaches 'rx'.

    Assumes 'rx' is fed by a single conjunction whose inputs each send a high
    pulse periodically, first at their period; the answer is the lcm of those.
    """
    modules, broadcaster = parse_modules(lines)
    feeders = [name for name, module in modules.items() if FINAL in module.outputs]
    if len(feeders) != 1 or modules[feeders[0]].kind is not ModuleType.CONJUNCTION:
        raise ValueError(f"{FINAL!r} must be fed by exactly one conjunction")
    feeder = feeders[0]
    first_high: dict[str, int | None] = dict.fromkeys(modules[feeder].memory)
    if not first_high:
        raise ValueError(f"conjunction {feeder!r} has no inputs")
    for press in range(1, MAX_PRESSES + 1):
        for sender, target, signal in press_button(modules, broadcaster):
            if target == feeder and signal == HIGH and sender in first_high:
                if first_high[sender] is None:
                    first_high[sender] = press
        if all(value is not None for value in first_high.values()):
            return math.lcm(*(value for value in first_high.values() if value))
    raise ValueError(f"no answer within {MAX_PRESSES} presses")