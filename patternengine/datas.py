"""Plain data records shared by the engine: animation, sprites, layers, collisions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

WINDOW_NAME = "WindowClass"
TITLE_NAME = "DirectX11 2D Physics Test"
SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080


class ParameterType(IntEnum):
    """Type of an animator parameter."""

    INT = 0
    FLOAT = 1
    BOOL = 2
    TRIGGER = 3


@dataclass
class Parameter:
    """An animator controller parameter with its default values."""

    name: str = ""
    type: str = ""
    default_float: float = 0.0
    default_int: int = 0
    default_bool: bool = False


@dataclass
class Condition:
    """A condition guarding a transition."""

    parameter: str = ""
    mode: str = ""
    type: ParameterType = ParameterType.INT
    threshold: float = 0.0


@dataclass
class Transition:
    """A transition between two states."""

    from_state: str = ""
    to_state: str = ""
    has_exit_time: bool = False
    exit_time: float = -1.0
    conditions: list[Condition] = field(default_factory=list)


@dataclass
class AnyStateTransition:
    """A transition that may fire from any state."""

    to_state: str = ""
    conditions: list[Condition] = field(default_factory=list)


@dataclass
class State:
    """A state of the animator state machine."""

    index: int = -1
    name: str = ""
    motion_name: str = ""
    clip_length: float = 1.0
    loop: bool = False
    transitions: list[Transition] = field(default_factory=list)


@dataclass
class AnimatorController:
    """An animator state machine with its parameters and states."""

    controller_name: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    default_state: str = ""
    states: list[State] = field(default_factory=list)
    state_name_to_index: dict[str, int] = field(default_factory=dict)
    param_name_to_type: dict[str, ParameterType] = field(default_factory=dict)
    any_state_transitions: list[AnyStateTransition] = field(default_factory=list)

    def get_state(self, state_name: str) -> State | None:
        """Return the state with this name, or None if there is none."""
        index = self.state_name_to_index.get(state_name)
        return None if index is None else self.states[index]


@dataclass
class FrameInfo:
    """One frame of an animation clip."""

    sprite: str = ""
    sprite_sheet_index: int = -1
    duration: float = 0.0


@dataclass
class AnimationClip:
    """A named sequence of sprite frames."""

    clip_name: str = ""
    texture_path: str = ""
    loop: bool = False
    duration: float = 0.0
    frames: list[FrameInfo] = field(default_factory=list)


@dataclass
class Sprite:
    """A rectangle on a sprite sheet with its pivot."""

    name: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    pivot_x: float = 0.0
    pivot_y: float = 0.0


@dataclass
class SpriteSheet:
    """A texture and the sprites cut from it."""

    texture: str = ""
    texture_width: float = 0.0
    texture_height: float = 0.0
    sprites: list[Sprite] = field(default_factory=list)
    sprite_index_map: dict[str, int] = field(default_factory=dict)

    def index_of(self, sprite_name: str) -> int:
        """Return the index of the named sprite; raise KeyError if unknown."""
        try:
            return self.sprite_index_map[sprite_name]
        except KeyError:
            raise KeyError(f"Sprite not found in sprite sheet: {sprite_name}") from None


class RenderLayer(IntEnum):
    """Render layers; lower values are drawn first."""

    NONE = 0
    GAME_OBJECT = 1
    PLAYER = 2
    UI = 3


@dataclass
class CollisionInfo:
    """A contact between two collision components."""

    a: Any = None
    b: Any = None
    normal: tuple[float, float] = (0.0, 0.0)
    penetration_depth: float = 0.0