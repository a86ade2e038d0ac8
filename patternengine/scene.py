"""Scenes that own game objects, and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Protocol

from .datas import CollisionInfo
from .systems import EngineSystems


class GameObjectQuery(Protocol):
    """Something that can look up game objects by name."""

    def find_by_name(self, name: str) -> Any | None: ...


class SceneState(Enum):
    """Life-cycle state of a scene."""

    ENTER = 0
    PLAYING = 1
    READY_TO_CHANGE = 2
    EXIT = 3


class Scene(ABC):
    """A set of game objects updated together; subclasses fill in the hooks.

    Objects added during a frame become active on the next post_update, and
    objects marked for removal are destroyed by clean_up_destroyed_objects.
    """

    def __init__(self, systems: EngineSystems | None = None) -> None:
        self.systems = systems if systems is not None else EngineSystems()
        self.active_objects: list[Any] = []
        self.objects_to_destroy: list[Any] = []
        self.objects_to_add: list[Any] = []
        self.state = SceneState.EXIT

    @abstractmethod
    def on_enter_impl(self) -> None:
        """Set the scene up when it starts."""

    @abstractmethod
    def on_exit_impl(self) -> None:
        """Tear the scene down when it ends."""

    @abstractmethod
    def update_impl(self) -> None:
        """Per-frame scene logic, run after the systems update."""

    def on_enter(self) -> None:
        """Enter the scene and start playing it."""
        self.state = SceneState.ENTER
        self.on_enter_impl()
        self.state = SceneState.PLAYING

    def post_update(self) -> None:
        """Activate new objects and behaviours and run pending start callbacks."""
        self._add_created_objects()
        self.systems.mono_behavior.process_pending_components()
        self._check_game_object_start_queue()

    def fixed_update(self, collision_infos: list[CollisionInfo]) -> None:
        """Step behaviours, collisions and physics."""
        self.systems.mono_behavior.fixed_update()
        self.systems.collision.fixed_update(collision_infos)
        self.systems.physic.fixed_update(collision_infos)

    def update(self) -> None:
        """Update behaviours, scripts and transforms, then the scene logic."""
        self.systems.mono_behavior.update()
        self.systems.script.update()
        self.systems.transform.update()
        if self.state is SceneState.READY_TO_CHANGE:
            return
        self.update_impl()

    def late_update(self) -> None:
        """Update the UI after everything else."""
        self.systems.ui.update()

    def on_exit(self) -> None:
        """Leave the scene, destroying every object it holds."""
        self.on_exit_impl()
        for group in (self.objects_to_add, self.active_objects, self.objects_to_destroy):
            for game_object in group:
                game_object.destroy()
        self.objects_to_add.clear()
        self.active_objects.clear()
        self.objects_to_destroy.clear()
        self.state = SceneState.EXIT

    def clean_up_destroyed_objects(self) -> None:
        """Destroy every active object marked for removal."""
        self.find_remove_object()
        for target in self.objects_to_destroy:
            if target in self.active_objects:
                self.active_objects.remove(target)
                target.destroy()
        self.objects_to_destroy.clear()

    def add_game_object(self, game_object: Any) -> None:
        """Queue an object; it becomes active on the next post_update."""
        self.objects_to_add.append(game_object)
        game_object.query = self

    def find_remove_object(self) -> None:
        """Queue every active object marked for removal for destruction."""
        self.objects_to_destroy.extend(
            game_object for game_object in self.active_objects if game_object.marked_for_removal
        )

    def find_by_name(self, name: str) -> Any | None:
        """Return the first active object with this name, or None."""
        return next((obj for obj in self.active_objects if obj.name == name), None)

    def _add_created_objects(self) -> None:
        for game_object in self.objects_to_add:
            self.active_objects.append(game_object)
            game_object.mark_setup_complete()
        self.objects_to_add.clear()

    def _check_game_object_start_queue(self) -> None:
        for game_object in list(self.active_objects):
            game_object.process_start_queue()


class SceneManager:
    """Holds scenes by index and switches between them between frames."""

    def __init__(self, systems: EngineSystems | None = None) -> None:
        self.systems = systems if systems is not None else EngineSystems()
        self._scenes: dict[int, Scene] = {}
        self._current: Scene | None = None
        self._current_index = -1
        self._target_index = -1
        self._scene_count = 0

    @property
    def current_scene_index(self) -> int:
        """Index of the running scene, -1 before a switch has happened."""
        return self._current_index

    @property
    def scene_count(self) -> int:
        """Number of scenes added."""
        return self._scene_count

    def init(self) -> None:
        """Enter the first scene; raise RuntimeError if there is none."""
        if not self._scenes:
            raise RuntimeError(
                "SceneManager has no scene, please add scene at application initialize."
            )
        self._current = self._scenes[0]
        self.systems.render.initialize_render_layers()
        self._current.on_enter()

    def load_scene(self, scene_index: int) -> None:
        """Ask for a switch to this scene; unknown indexes are ignored."""
        if not 0 <= scene_index < self._scene_count:
            return
        if self._current is None:
            raise RuntimeError("SceneManager has not been initialised")
        self._current.state = SceneState.READY_TO_CHANGE
        self._target_index = scene_index

    def check_scene_load(self) -> None:
        """Perform a requested switch: leave the current scene, enter the next."""
        current = self._current
        if current is None or current.state is not SceneState.READY_TO_CHANGE:
            return
        current.on_exit()
        self.systems.clear_all()

        self._current = self._scenes[self._target_index]
        self._current_index = self._target_index

        self.systems.render.initialize_render_layers()
        self._current.on_enter()
        self._target_index = -1

    def add_scene(self, scene: Scene) -> None:
        """Add a scene under the next free index; it shares the manager's systems."""
        scene.systems = self.systems
        self._scenes[self._scene_count] = scene
        self._scene_count += 1

    def current_scene(self) -> Scene | None:
        """The running scene, or None before init."""
        return self._current