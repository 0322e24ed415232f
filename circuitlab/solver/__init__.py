from .gauss import gauss_solve  # noqa: F401
from .stamps import StampData  # noqa: F401
from .assembler import assemble, ground_node, power_sources, source_emf  # noqa: F401
from .resolver import Resolution, resolve  # noqa: F401

__all__ = [
    "gauss_solve",
    "StampData",
    "assemble",
    "ground_node",
    "power_sources",
    "source_emf",
    "Resolution",
    "resolve",
]
