"""Loading sprite sheets, animation clips and animator controllers from JSON."""

from __future__ import annotations

import json
import os
from typing import Any, Union

from .datas import (
    AnimationClip,
    AnimatorController,
    AnyStateTransition,
    Condition,
    FrameInfo,
    Parameter,
    ParameterType,
    Sprite,
    SpriteSheet,
    State,
    Transition,
)

PathLike = Union[str, "os.PathLike[str]"]

_PARAMETER_TYPES = {
    "Int": ParameterType.INT,
    "Float": ParameterType.FLOAT,
    "Bool": ParameterType.BOOL,
    "Trigger": ParameterType.TRIGGER,
}


class LoaderError(Exception):
    """Raised when a resource file cannot be read or is malformed."""


def _read_json(file_path: PathLike, what: str) -> Any:
    try:
        with open(file_path, encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise LoaderError(f"Failed to open {what} file: {os.fspath(file_path)}") from exc
    except json.JSONDecodeError as exc:
        raise LoaderError(f"Invalid JSON in {what} file: {os.fspath(file_path)}") from exc


def _field(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict) or key not in obj:
        raise LoaderError(f"Missing field: {key}")
    return obj[key]


def _str(obj: Any, key: str) -> str:
    value = _field(obj, key)
    if not isinstance(value, str):
        raise LoaderError(f"Field {key} must be a string")
    return value


def _float(obj: Any, key: str) -> float:
    value = _field(obj, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LoaderError(f"Field {key} must be a number")
    return float(value)


def _int(obj: Any, key: str) -> int:
    value = _field(obj, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LoaderError(f"Field {key} must be a number")
    return int(value)


def _bool(obj: Any, key: str) -> bool:
    value = _field(obj, key)
    if not isinstance(value, bool):
        raise LoaderError(f"Field {key} must be a boolean")
    return value


def _list(obj: Any, key: str) -> list[Any]:
    value = _field(obj, key)
    if not isinstance(value, list):
        raise LoaderError(f"Field {key} must be a list")
    return value


def _optional_list(obj: Any, key: str) -> list[Any]:
    return _list(obj, key) if isinstance(obj, dict) and key in obj else []


def _sprite(obj: Any) -> Sprite:
    return Sprite(
        name=_str(obj, "name"),
        x=_float(obj, "x"),
        y=_float(obj, "y"),
        width=_float(obj, "width"),
        height=_float(obj, "height"),
        pivot_x=_float(obj, "pivotX"),
        pivot_y=_float(obj, "pivotY"),
    )


def load_sprite_sheet(file_path: PathLike) -> SpriteSheet:
    """Read a sprite sheet description and index its sprites by name."""
    data = _read_json(file_path, "sprite sheet")
    sheet = SpriteSheet(
        texture=_str(data, "texture"),
        texture_width=_float(data, "textureWidth"),
        texture_height=_float(data, "textureHeight"),
        sprites=[_sprite(item) for item in _list(data, "sprites")],
    )
    for index, sprite in enumerate(sheet.sprites):
        sheet.sprite_index_map[sprite.name] = index
    return sheet


def load_animation_clip(file_path: PathLike, sprite_sheet: SpriteSheet) -> AnimationClip:
    """Read an animation clip and resolve its frames against the sprite sheet."""
    data = _read_json(file_path, "animation clip")
    clip = AnimationClip(
        clip_name=_str(data, "clipName"),
        texture_path=_str(data, "texturePath"),
        loop=_bool(data, "loop"),
        duration=_float(data, "duration"),
        frames=[
            FrameInfo(sprite=_str(item, "sprite"), duration=_float(item, "time"))
            for item in _list(data, "frames")
        ],
    )
    for frame in clip.frames:
        try:
            frame.sprite_sheet_index = sprite_sheet.index_of(frame.sprite)
        except KeyError:
            raise LoaderError(f"Sprite not found in sprite sheet: {frame.sprite}") from None
    return clip


def _parameter(obj: Any) -> Parameter:
    return Parameter(
        name=_str(obj, "name"),
        type=_str(obj, "type"),
        default_float=_float(obj, "defaultFloat"),
        default_int=_int(obj, "defaultInt"),
        default_bool=_bool(obj, "defaultBool"),
    )


def _condition(obj: Any) -> Condition:
    return Condition(
        parameter=_str(obj, "parameter"),
        mode=_str(obj, "mode"),
        threshold=_float(obj, "threshold"),
    )


def _transition(obj: Any) -> Transition:
    return Transition(
        from_state=_str(obj, "fromState"),
        to_state=_str(obj, "toState"),
        conditions=[_condition(item) for item in _optional_list(obj, "conditions")],
        exit_time=_float(obj, "exitTime"),
        has_exit_time=_bool(obj, "hasExitTime"),
    )


def _any_state_transition(obj: Any) -> AnyStateTransition:
    return AnyStateTransition(
        to_state=_str(obj, "toState"),
        conditions=[_condition(item) for item in _optional_list(obj, "conditions")],
    )


def _state(obj: Any) -> State:
    return State(
        name=_str(obj, "name"),
        motion_name=_str(obj, "motionName"),
        clip_length=_float(obj, "clipLength"),
        loop=_bool(obj, "loop"),
        transitions=[_transition(item) for item in _optional_list(obj, "transitions")],
    )


def load_animator_controller(file_path: PathLike) -> AnimatorController:
    """Read an animator controller, typing its conditions from its parameters."""
    data = _read_json(file_path, "animator controller")
    controller = AnimatorController(
        controller_name=_str(data, "controllerName"),
        parameters=[_parameter(item) for item in _list(data, "parameters")],
        default_state=_str(data, "defaultState"),
    )
    for parameter in controller.parameters:
        controller.param_name_to_type[parameter.name] = _PARAMETER_TYPES.get(
            parameter.type, ParameterType.INT
        )

    def type_of(name: str) -> ParameterType:
        return controller.param_name_to_type.get(name, ParameterType.INT)

    controller.states = [_state(item) for item in _optional_list(data, "states")]
    for index, state in enumerate(controller.states):
        controller.state_name_to_index[state.name] = index
        state.index = index
        for transition in state.transitions:
            for condition in transition.conditions:
                condition.type = type_of(condition.parameter)

    controller.any_state_transitions = [
        _any_state_transition(item) for item in _optional_list(data, "anyStateTransitions")
    ]
    for transition in controller.any_state_transitions:
        for condition in transition.conditions:
            condition.type = type_of(condition.parameter)
    return controller