import json

import pytest

from patternengine.datas import ParameterType, SpriteSheet
from patternengine.loaders import (
    LoaderError,
    load_animation_clip,
    load_animator_controller,
    load_sprite_sheet,
)


def _sprite(name, x):
    return {"name": name, "x": x, "y": 2, "width": 16, "height": 32, "pivotX": 0.5, "pivotY": 0.25}


SHEET = {
    "texture": "hero.png",
    "textureWidth": 256,
    "textureHeight": 128,
    "sprites": [_sprite("hero_0", 0), _sprite("hero_1", 16)],
}

CONTROLLER = {
    "controllerName": "Hero",
    "parameters": [
        {"name": "speed", "type": "Float", "defaultFloat": 0.0, "defaultInt": 0, "defaultBool": False},
        {"name": "jump", "type": "Trigger", "defaultFloat": 0.0, "defaultInt": 0, "defaultBool": False},
        {"name": "odd", "type": "Vector", "defaultFloat": 0.0, "defaultInt": 3, "defaultBool": True},
    ],
    "defaultState": "Idle",
    "states": [
        {
            "name": "Idle",
            "motionName": "idle_clip",
            "clipLength": 0.5,
            "loop": True,
            "transitions": [
                {
                    "fromState": "Idle",
                    "toState": "Run",
                    "conditions": [{"parameter": "speed", "mode": "Greater", "threshold": 0.1}],
                    "exitTime": 0.75,
                    "hasExitTime": True,
                }
            ],
        },
        {"name": "Run", "motionName": "run_clip", "clipLength": 1.5, "loop": False},
    ],
    "anyStateTransitions": [
        {"toState": "Idle", "conditions": [{"parameter": "jump", "mode": "If", "threshold": 0}]}
    ],
}


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_sprite_sheet(tmp_path):
    sheet = load_sprite_sheet(_write(tmp_path, "sheet.json", SHEET))
    assert sheet.texture == "hero.png"
    assert (sheet.texture_width, sheet.texture_height) == (256.0, 128.0)
    assert [s.name for s in sheet.sprites] == ["hero_0", "hero_1"]
    assert sheet.sprites[1].x == 16.0
    assert sheet.sprites[0].pivot_y == 0.25
    assert sheet.sprite_index_map == {"hero_0": 0, "hero_1": 1}


def test_sprite_sheet_duplicate_name_keeps_last_index(tmp_path):
    data = dict(SHEET, sprites=[_sprite("same", 0), _sprite("same", 8)])
    sheet = load_sprite_sheet(_write(tmp_path, "dup.json", data))
    assert sheet.index_of("same") == len(sheet.sprites) - 1


def test_sprite_sheet_missing_file(tmp_path):
    with pytest.raises(LoaderError):
        load_sprite_sheet(tmp_path / "absent.json")


def test_sprite_sheet_missing_field(tmp_path):
    data = {k: v for k, v in SHEET.items() if k != "textureWidth"}
    with pytest.raises(LoaderError):
        load_sprite_sheet(_write(tmp_path, "bad.json", data))


def test_sprite_sheet_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LoaderError):
        load_sprite_sheet(path)


def test_load_animation_clip_resolves_indices(tmp_path):
    sheet = load_sprite_sheet(_write(tmp_path, "sheet.json", SHEET))
    clip_data = {
        "clipName": "walk",
        "texturePath": "hero.png",
        "loop": True,
        "duration": 0.4,
        "frames": [{"sprite": "hero_1", "time": 0.2}, {"sprite": "hero_0", "time": 0.2}],
    }
    clip = load_animation_clip(_write(tmp_path, "clip.json", clip_data), sheet)
    assert clip.clip_name == "walk"
    assert clip.loop is True
    assert clip.duration == 0.4
    assert [f.sprite_sheet_index for f in clip.frames] == [
        sheet.index_of("hero_1"),
        sheet.index_of("hero_0"),
    ]
    assert [f.duration for f in clip.frames] == [0.2, 0.2]


def test_load_animation_clip_unknown_sprite(tmp_path):
    clip_data = {
        "clipName": "walk",
        "texturePath": "hero.png",
        "loop": False,
        "duration": 0.1,
        "frames": [{"sprite": "ghost", "time": 0.1}],
    }
    with pytest.raises(LoaderError, match="ghost"):
        load_animation_clip(_write(tmp_path, "clip.json", clip_data), SpriteSheet())


def test_load_animation_clip_missing_file(tmp_path):
    with pytest.raises(LoaderError):
        load_animation_clip(tmp_path / "nope.json", SpriteSheet())


def test_load_animator_controller(tmp_path):
    controller = load_animator_controller(_write(tmp_path, "ctrl.json", CONTROLLER))
    assert controller.controller_name == "Hero"
    assert controller.default_state == "Idle"
    assert controller.param_name_to_type == {
        "speed": ParameterType.FLOAT,
        "jump": ParameterType.TRIGGER,
        "odd": ParameterType.INT,
    }
    assert controller.parameters[2].default_int == 3
    assert controller.parameters[2].default_bool is True
    run = controller.get_state("Run")
    assert run.index == 1
    assert run.motion_name == "run_clip"
    assert run.transitions == []
    idle = controller.get_state("Idle")
    transition = idle.transitions[0]
    assert (transition.from_state, transition.to_state) == ("Idle", "Run")
    assert transition.exit_time == 0.75
    assert transition.has_exit_time is True
    assert transition.conditions[0].type is ParameterType.FLOAT
    assert transition.conditions[0].mode == "Greater"
    any_condition = controller.any_state_transitions[0].conditions[0]
    assert any_condition.type is ParameterType.TRIGGER


def test_controller_without_states(tmp_path):
    data = {k: v for k, v in CONTROLLER.items() if k not in ("states", "anyStateTransitions")}
    controller = load_animator_controller(_write(tmp_path, "ctrl.json", data))
    assert controller.states == []
    assert controller.any_state_transitions == []
    assert controller.get_state("Idle") is None


def test_controller_missing_parameters(tmp_path):
    data = {k: v for k, v in CONTROLLER.items() if k != "parameters"}
    with pytest.raises(LoaderError):
        load_animator_controller(_write(tmp_path, "ctrl.json", data))