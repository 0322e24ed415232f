from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ComponentKind(str, Enum):
    """
    Kinds of two-terminal lab components understood by the solver.
    """
    BATTERY = "BATTERY"
    SOLAR_PANEL = "SOLAR_PANEL"
    RESISTOR = "RESISTOR"
    POTENTIOMETER = "POTENTIOMETER"
    LDR = "LDR"
    CAPACITOR = "CAPACITOR"
    SWITCH = "SWITCH"
    FUSE = "FUSE"
    DIODE = "DIODE"
    AMMETER = "AMMETER"
    VOLTMETER = "VOLTMETER"
    LED = "LED"
    MOTOR = "MOTOR"
    BUZZER = "BUZZER"
    BULB = "BULB"
    HEATER = "HEATER"


SOURCE_KINDS = frozenset({ComponentKind.BATTERY, ComponentKind.SOLAR_PANEL})
ACTUATOR_KINDS = frozenset({
    ComponentKind.LED,
    ComponentKind.MOTOR,
    ComponentKind.BUZZER,
    ComponentKind.BULB,
    ComponentKind.HEATER,
})


def terminal_id(component_id: str, index: int) -> str:
    return f"{component_id}-{index}"


@dataclass(frozen=True)
class Terminal:
    """
    One of the two connection points of a component.

    Attributes:
        component_id: Owning component.
        index: 0 or 1.
        polarity: "pos"/"neg" for power sources, "generic" otherwise.
    """
    component_id: str
    index: int
    polarity: str = "generic"

    @property
    def id(self) -> str:
        return terminal_id(self.component_id, self.index)


@dataclass
class Component:
    """
    A two-terminal lab component as handed over by the editing layer.

    Only the fields below matter to the solver; ``current``, the actuator
    ``state`` and the meter ``value`` are overwritten on the copies returned by
    ``simulate``.

    Attributes:
        id: Unique identifier, also the prefix of the terminal ids.
        kind: Component kind.
        state: Switch closed flag, or derived "is active" for actuators.
        value: Kind dependent number (ohms, light percent, mA, V).
        current: Last computed current magnitude in A.
        max_current: Fuse threshold in A (None means default).
        is_blown: Fuse blown flag.
        flipped: Source polarity swap.
        position: Canvas position, carried through untouched.
    """
    id: str
    kind: ComponentKind
    state: bool = False
    value: float | None = None
    current: float = 0.0
    max_current: float | None = None
    is_blown: bool = False
    flipped: bool = False
    position: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.kind = ComponentKind(self.kind)

    @property
    def is_source(self) -> bool:
        return self.kind in SOURCE_KINDS

    @property
    def is_actuator(self) -> bool:
        return self.kind in ACTUATOR_KINDS

    @property
    def positive_index(self) -> int:
        return 1 if self.flipped else 0

    @property
    def negative_index(self) -> int:
        return 0 if self.flipped else 1

    def terminal(self, index: int) -> Terminal:
        if index not in (0, 1):
            raise ValueError(f"Component '{self.id}' has no terminal {index}.")
        polarity = "generic"
        if self.is_source:
            polarity = "pos" if index == self.positive_index else "neg"
        return Terminal(self.id, index, polarity)

    @property
    def terminals(self) -> Tuple[Terminal, Terminal]:
        return self.terminal(0), self.terminal(1)

    @property
    def terminal_ids(self) -> Tuple[str, str]:
        return terminal_id(self.id, 0), terminal_id(self.id, 1)


@dataclass
class Wire:
    """
    Undirected connection between two terminal ids.

    ``is_active``, ``has_flow``, ``current`` and ``direction`` are annotations
    filled in by the solver; ``direction`` is +1 when conventional current runs
    from ``from_terminal_id`` to ``to_terminal_id`` and -1 otherwise.
    """
    id: str
    from_terminal_id: str
    to_terminal_id: str
    is_active: bool = False
    has_flow: bool = False
    current: float = 0.0
    direction: int = 1
