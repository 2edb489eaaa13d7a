"""Base class of the parts a game object is built from."""

from __future__ import annotations

import copy
from typing import Any


class Component:
    """A part of a game object, made by cloning a registered prototype."""

    def __init__(self, device, game_instance=None):
        self.device = device
        self.game_instance = game_instance

    def initialize_prototype(self) -> None:
        """Prepare the prototype once, when it is registered."""

    def initialize(self, arg: Any) -> None:
        """Prepare a clone with the argument it was cloned with."""

    def clone(self, arg: Any) -> "Component":
        """Return a copy of this prototype, initialised with ``arg``."""
        twin = copy.copy(self)
        twin.initialize(arg)
        return twin