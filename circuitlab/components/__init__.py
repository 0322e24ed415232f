from .base import (  # noqa: F401
    ACTUATOR_KINDS,
    SOURCE_KINDS,
    Component,
    ComponentKind,
    Terminal,
    Wire,
    terminal_id,
)
from .resistance import OPEN, conductance, resistance  # noqa: F401
from .edits import (  # noqa: F401
    flip,
    reset_fuse,
    set_fuse_rating,
    set_light_level,
    set_resistance,
    toggle_switch,
)
