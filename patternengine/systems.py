"""Engine systems that hold components and drive their per-frame callbacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from .datas import CollisionInfo, RenderLayer

# Contacts shallower than this start or end no event.
MIN_EVENT_DEPTH = 0.1

C = TypeVar("C")


class MonoBehaviorLike(Protocol):
    active_self: bool

    def on_update(self) -> None: ...
    def on_fixed_update(self) -> None: ...


class ComponentRegistry(Generic[C]):
    """An ordered list of registered components."""

    def __init__(self) -> None:
        self._components: list[C] = []

    def register(self, component: C) -> None:
        """Add a component at the end of the list."""
        self._components.append(component)

    def unregister(self, component: C) -> None:
        """Remove the first occurrence of a component; unknown ones are ignored."""
        try:
            self._components.remove(component)
        except ValueError:
            pass

    def clear_all(self) -> None:
        """Forget every component."""
        self._components.clear()

    def __iter__(self) -> Iterator[C]:
        return iter(list(self._components))

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, component: object) -> bool:
        return component in self._components


class MonoBehaviorSystem(ComponentRegistry[Any]):
    """Runs behaviour scripts; new ones join only after the pending step."""

    def __init__(self) -> None:
        super().__init__()
        self._pending: list[Any] = []

    def register(self, component: Any) -> None:
        """Queue a behaviour; it runs after process_pending_components."""
        self._pending.append(component)

    def unregister(self, component: Any) -> None:
        """Remove an active behaviour; pending ones are left alone."""
        super().unregister(component)

    def clear_all(self) -> None:
        """Forget every active behaviour."""
        super().clear_all()

    @property
    def pending(self) -> list[Any]:
        """Behaviours registered but not yet active."""
        return list(self._pending)

    def update(self) -> None:
        """Call on_update on every active-self behaviour."""
        for mono in self:
            if mono.active_self:
                mono.on_update()

    def fixed_update(self) -> None:
        """Call on_fixed_update on every active-self behaviour."""
        for mono in self:
            if mono.active_self:
                mono.on_fixed_update()

    def process_pending_components(self) -> None:
        """Move queued behaviours to the active list."""
        self._components.extend(self._pending)
        self._pending.clear()


class ScriptSystem(ComponentRegistry[Any]):
    """Updates script components."""

    def update(self) -> None:
        """Call update on every script."""
        for component in self:
            component.update()


class TransformSystem(ComponentRegistry[Any]):
    """Recomputes world matrices of started transforms."""

    def update(self) -> None:
        """Compute every started transform's matrix, then clear their dirty flags."""
        started = [transform for transform in self if transform.started]
        for transform in started:
            transform.calculate_final_matrix()
        for transform in started:
            transform.reset_dirty()


class UISystem(ComponentRegistry[Any]):
    """Updates UI components."""

    def update(self) -> None:
        """Call update on every UI component."""
        for component in self:
            component.update()


class PhysicSystem(ComponentRegistry[Any]):
    """Steps physics components."""

    def fixed_update(self, collisions: list[CollisionInfo]) -> None:
        """Step every physics component with this frame's collisions."""
        for component in self:
            component.fixed_update(collisions)


class CollisionEvent(Enum):
    """Phase of a contact between two colliders."""

    ENTER = "enter"
    STAY = "stay"
    EXIT = "exit"


def _pair_key(a: Any, b: Any) -> tuple[Any, Any]:
    return (a, b) if id(a) < id(b) else (b, a)


class CollisionSystem(ComponentRegistry[Any]):
    """Detects contacts and sends enter, stay and exit events to behaviours."""

    def __init__(self) -> None:
        super().__init__()
        self._prev_pairs: dict[tuple[int, int], tuple[tuple[Any, Any], CollisionInfo]] = {}

    def register(self, component: Any) -> None:
        """Add a collider."""
        super().register(component)

    def unregister(self, component: Any) -> None:
        """Remove a collider; unknown ones are ignored."""
        super().unregister(component)

    def clear_all(self) -> None:
        """Forget every collider and every remembered contact."""
        super().clear_all()
        self._prev_pairs.clear()

    @property
    def active_pairs(self) -> list[tuple[Any, Any]]:
        """Collider pairs in contact during the last event update."""
        return [pair for pair, _ in self._prev_pairs.values()]

    def fixed_update(self, out_infos: list[CollisionInfo]) -> None:
        """Let every started collider add its contacts, then send the events."""
        components = list(self._components)
        for component in components:
            if not component.started:
                continue
            component.fixed_update(components, out_infos)
        self.event_update(out_infos)

    def check_prev_pair_removal(self) -> None:
        """Forget contacts whose owners are marked for removal."""
        self._prev_pairs = {
            key: entry
            for key, entry in self._prev_pairs.items()
            if not (
                entry[0][0].owner.marked_for_removal
                or entry[0][1].owner.marked_for_removal
            )
        }

    def event_update(self, infos: list[CollisionInfo]) -> None:
        """Compare this frame's contacts with the last and send the events."""
        current: dict[tuple[int, int], tuple[tuple[Any, Any], CollisionInfo]] = {}
        for info in infos:
            pair = _pair_key(info.a, info.b)
            key = (id(pair[0]), id(pair[1]))
            current.setdefault(key, (pair, info))

        for key, (pair, info) in current.items():
            if key in self._prev_pairs:
                self._call_event(pair[0], pair[1], CollisionEvent.STAY)
            elif info.penetration_depth > MIN_EVENT_DEPTH:
                self._call_event(pair[0], pair[1], CollisionEvent.ENTER)

        for key, (pair, info) in self._prev_pairs.items():
            if key not in current and info.penetration_depth > MIN_EVENT_DEPTH:
                self._call_event(pair[0], pair[1], CollisionEvent.EXIT)

        self._prev_pairs = current

    @staticmethod
    def _call_event(a: Any, b: Any, event: CollisionEvent) -> None:
        def notify(caller: Any, target: Any, trigger: bool) -> None:
            kind = "trigger" if trigger else "collider"
            hook = f"on_{kind}_{event.value}"
            for mono in list(caller.mono_behaviors):
                getattr(mono, hook)(target)

        notify(a.owner, b.owner, bool(a.is_trigger))
        notify(b.owner, a.owner, bool(b.is_trigger))


class RenderSystem:
    """Draws render components layer by layer, each layer by order in layer."""

    def __init__(self, render_manager: Any = None, resource_manager: Any = None) -> None:
        self.render_manager = render_manager
        self.resource_manager = resource_manager
        self._groups: dict[Any, list[Any]] = {}

    def register(self, component: Any) -> None:
        """Add a component to its owner's layer and hand it the managers."""
        self._groups.setdefault(component.owner.render_layer, []).append(component)
        component.render_manager = self.render_manager
        component.resource_manager = self.resource_manager

    def unregister(self, component: Any) -> None:
        """Remove a component from its owner's layer, if it is there."""
        group = self._groups.get(component.owner.render_layer)
        if group is None:
            return
        try:
            group.remove(component)
        except ValueError:
            pass

    def initialize_render_layers(self) -> None:
        """Start every layer with an empty list."""
        for layer in RenderLayer:
            self._groups[layer] = []

    def clear_all(self) -> None:
        """Forget every layer and component."""
        self._groups.clear()

    def layer(self, layer: Any) -> list[Any]:
        """The components registered on a layer."""
        return list(self._groups.get(layer, []))

    @property
    def layers(self) -> list[Any]:
        """The layers that currently exist, in drawing order."""
        return sorted(self._groups)

    def update(self, manager: Any) -> None:
        """Sort each layer by order in layer and render every component."""
        if manager is None:
            raise ValueError("render manager is None")
        for group in self._groups.values():
            group.sort(key=lambda component: component.order_in_layer)
        for layer in sorted(self._groups):
            for component in list(self._groups[layer]):
                component.render(manager)


@dataclass
class EngineSystems:
    """Every engine system a scene drives."""

    script: ScriptSystem = field(default_factory=ScriptSystem)
    collision: CollisionSystem = field(default_factory=CollisionSystem)
    physic: PhysicSystem = field(default_factory=PhysicSystem)
    transform: TransformSystem = field(default_factory=TransformSystem)
    render: RenderSystem = field(default_factory=RenderSystem)
    mono_behavior: MonoBehaviorSystem = field(default_factory=MonoBehaviorSystem)
    ui: UISystem = field(default_factory=UISystem)

    def clear_all(self) -> None:
        """Empty every system, as done when a scene is left."""
        self.script.clear_all()
        self.collision.clear_all()
        self.physic.clear_all()
        self.transform.clear_all()
        self.render.clear_all()
        self.mono_behavior.clear_all()
        self.ui.clear_all()