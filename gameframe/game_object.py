"""Base class of the objects placed in a level."""

from __future__ import annotations

import copy
from typing import Any

from gameframe.component import Component
from gameframe.enums import Prototype
from gameframe.structs import EngineError


class GameObject:
    """An object built from components cloned out of registered prototypes."""

    def __init__(self, device, game_instance=None):
        self.device = device
        self.game_instance = game_instance
        self.components: dict[str, Component] = {}
        self.is_prototype = False

    def get_component(self, tag) -> Component | None:
        return self.components.get(tag)

    def initialize_prototype(self) -> None:
        """Prepare the prototype once, when it is registered."""
        self.is_prototype = True

    def initialize(self, arg: Any) -> None:
        """Prepare a clone with the argument it was cloned with."""

    def priority_update(self, time_delta) -> None:
        pass

    def update(self, time_delta) -> None:
        pass

    def late_update(self, time_delta) -> None:
        pass

    def render(self) -> None:
        pass

    def add_component(self, prototype_level, prototype_tag, component_tag, arg=None) -> Component:
        """Clone a component prototype and keep it under ``component_tag``."""
        if component_tag in self.components:
            raise EngineError(f"component {component_tag!r} already added")
        if self.game_instance is None:
            raise EngineError("no game instance to clone components from")
        component = self.game_instance.clone_prototype(
            Prototype.COMPONENT, prototype_level, prototype_tag, arg
        )
        if not isinstance(component, Component):
            raise EngineError(f"no component prototype {prototype_tag!r}")
        self.components[component_tag] = component
        return component

    def clone(self, arg: Any) -> "GameObject":
        """Return a copy of this prototype without its components, initialised with ``arg``."""
        twin = copy.copy(self)
        twin.components = {}
        twin.is_prototype = False
        twin.initialize(arg)
        return twin