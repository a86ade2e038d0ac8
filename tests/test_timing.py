import pytest

from patternengine.timing import FpsCounter, GameTime, format_bytes


def _clock(values):
    iterator = iter(values)
    return lambda: next(iterator)


def test_delta_time_measures_between_updates():
    game_time = GameTime(clock=_clock([10.0, 10.5, 11.25]))
    game_time.init_time()
    assert game_time.delta_time() == 0.0
    game_time.update_time()
    assert game_time.delta_time() == pytest.approx(0.5)
    game_time.update_time()
    assert game_time.delta_time() == pytest.approx(0.75)


def test_elapsed_time_since_init():
    game_time = GameTime(clock=_clock([100.0, 103.0]))
    game_time.init_time()
    assert game_time.elapsed_time() == pytest.approx(3.0)


def test_fixed_delta_time():
    assert GameTime().fixed_delta_time() == pytest.approx(1.0 / 60.0)


def test_real_clock_elapsed_is_non_negative():
    game_time = GameTime()
    game_time.init_time()
    assert game_time.elapsed_time() >= 0.0


def test_fps_counter_reports_after_window():
    counter = FpsCounter()
    for _ in range(4):
        counter.update(0.3)
    assert counter.fps() == 4


def test_fps_counter_zero_before_window_closes():
    counter = FpsCounter()
    counter.update(0.5)
    counter.update(0.5)
    assert counter.fps() == 0


def test_format_bytes_units():
    assert format_bytes(512) == "512 B"
    assert format_bytes(1024) == "1.00 KB"
    assert format_bytes(1024 * 1024).endswith(" MB")
    assert format_bytes(1024 ** 3).endswith(" GB")


def test_format_bytes_rejects_negative():
    with pytest.raises(ValueError):
        format_bytes(-1)