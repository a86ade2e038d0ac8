import pytest

from patternengine.datas import (
    AnimatorController,
    CollisionInfo,
    Condition,
    RenderLayer,
    Sprite,
    SpriteSheet,
    State,
    Transition,
)


def test_get_state_found():
    idle = State(index=0, name="Idle")
    run = State(index=1, name="Run")
    controller = AnimatorController(
        states=[idle, run], state_name_to_index={"Idle": 0, "Run": 1}
    )
    assert controller.get_state("Run") is run


def test_get_state_missing_returns_none():
    controller = AnimatorController(states=[State(name="Idle")], state_name_to_index={"Idle": 0})
    assert controller.get_state("Jump") is None


def test_state_defaults_follow_source():
    state = State()
    assert state.index == -1
    assert state.clip_length == 1.0
    assert state.loop is False
    assert state.transitions == []


def test_transition_defaults():
    transition = Transition()
    assert transition.exit_time == -1.0
    assert transition.has_exit_time is False


def test_default_lists_are_independent():
    first, second = Transition(), Transition()
    first.conditions.append(Condition(parameter="speed"))
    assert second.conditions == []


def test_sprite_sheet_index_of():
    sheet = SpriteSheet(sprites=[Sprite(name="a"), Sprite(name="b")], sprite_index_map={"a": 0, "b": 1})
    assert sheet.index_of("b") == 1


def test_sprite_sheet_index_of_missing():
    with pytest.raises(KeyError):
        SpriteSheet().index_of("nothing")


def test_render_layer_from_value_follows_render_order():
    assert [RenderLayer(value) for value in range(4)] == [
        RenderLayer.NONE,
        RenderLayer.GAME_OBJECT,
        RenderLayer.PLAYER,
        RenderLayer.UI,
    ]


def test_render_layer_unknown_value_raises():
    with pytest.raises(ValueError):
        RenderLayer(99)


def test_collision_info_holds_values():
    info = CollisionInfo(a="left", b="right", normal=(1.0, 0.0), penetration_depth=0.5)
    assert (info.a, info.b, info.normal, info.penetration_depth) == ("left", "right", (1.0, 0.0), 0.5)