"""
Data handed to the external circuit explanation service.

The solver never writes prose. It only builds a small summary (component counts
by kind, switch positions, wire count) and forwards a prompt to whatever text
generator the application plugs in.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import json
import logging
from typing import Callable, Dict, List, Optional, Sequence

from .components.base import Component, ComponentKind, Wire

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_TEXT = "I'm having trouble analyzing the circuit right now."
OFFLINE_TEXT = "The circuit analyst is currently offline, but your simulation is still active!"

TextGenerator = Callable[[str], Optional[str]]


@dataclass
class CircuitSummary:
    component_counts: Dict[str, int] = field(default_factory=dict)
    switches: List[str] = field(default_factory=list)
    wire_count: int = 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "componentCounts": dict(self.component_counts),
            "switches": list(self.switches),
            "wireCount": self.wire_count,
        }


def circuit_summary(components: Sequence[Component], wires: Sequence[Wire]) -> CircuitSummary:
    counts: Dict[str, int] = {}
    for comp in components:
        counts[comp.kind.value] = counts.get(comp.kind.value, 0) + 1
    switches = [
        "Closed" if comp.state else "Open"
        for comp in components
        if comp.kind == ComponentKind.SWITCH
    ]
    return CircuitSummary(component_counts=counts, switches=switches, wire_count=len(wires))


def build_prompt(summary: CircuitSummary) -> str:
    return (
        "Analyze this simple DC circuit configuration and explain its behavior "
        "like a professional electrical engineer.\n"
        f"Components: {json.dumps(summary.to_dict())}\n\n"
        "Give a short, engaging, and educational summary of whether the circuit "
        "should work, what might be wrong, or interesting facts about these components.\n"
        "Keep it under 150 words."
    )


def explain_circuit(
    components: Sequence[Component],
    wires: Sequence[Wire],
    generate: TextGenerator,
) -> str:
    """
    Ask an external text generator to explain the circuit.

    Args:
        components: Current components.
        wires: Current wires.
        generate: Callable taking the prompt and returning text (or None).

    Returns:
        The generated text, or a fixed fallback message when the generator
        returns nothing or fails.
    """
    prompt = build_prompt(circuit_summary(components, wires))
    try:
        text = generate(prompt)
    except Exception as exc:
        logger.warning("Circuit explanation failed: %s", exc)
        return OFFLINE_TEXT
    return text or EMPTY_RESPONSE_TEXT
