import itertools

import pytest

from patternengine.pattern import Box, Line, Point, PatternManager, TrailStamp

RADIUS = 45.0
CENTERS = [
    Point(300, 200), Point(450, 200), Point(600, 200),
    Point(300, 350), Point(450, 350), Point(600, 350),
    Point(300, 500), Point(450, 500), Point(600, 500),
]


@pytest.fixture
def manager():
    pm = PatternManager()
    pm.set_nodes(CENTERS, RADIUS)
    return pm


def stamps(*numbers, active=True):
    return [TrailStamp(CENTERS[n - 1], active) for n in numbers]


def test_skipped_node_from_source_example(manager):
    assert manager.get_skipped_node(1, 3) == 2


def test_skipped_node_is_geometric_midpoint(manager):
    for a, b in itertools.permutations(range(1, 10), 2):
        skipped = manager.get_skipped_node(a, b)
        mid = Point((CENTERS[a - 1].x + CENTERS[b - 1].x) / 2,
                    (CENTERS[a - 1].y + CENTERS[b - 1].y) / 2)
        if skipped is None:
            assert mid not in CENTERS or mid in (CENTERS[a - 1], CENTERS[b - 1]) or (
                abs(CENTERS[a - 1].x - CENTERS[b - 1].x) != 300
                and abs(CENTERS[a - 1].y - CENTERS[b - 1].y) != 300
            ) or mid not in CENTERS
        else:
            assert CENTERS[skipped - 1] == mid


def test_skipped_node_symmetric(manager):
    for a, b in itertools.combinations(range(1, 10), 2):
        assert manager.get_skipped_node(a, b) == manager.get_skipped_node(b, a)


def test_adjacent_nodes_skip_nothing(manager):
    assert manager.get_skipped_node(1, 2) is None
    assert manager.get_skipped_node(1, 5) is None


def test_check_trails_inserts_skipped_node(manager):
    assert manager.check_trails(stamps(1, 3)) == [1, 2, 3]
    assert manager.pattern() == [1, 2, 3]


def test_repeated_nodes_recorded_once(manager):
    result = manager.check_trails(stamps(1, 1, 5, 1))
    assert result == [1, 5]


def test_inactive_stamps_ignored(manager):
    trail = stamps(1) + stamps(9, active=False) + stamps(2)
    assert manager.check_trails(trail) == [1, 2]


def test_check_trails_resets_hits(manager):
    first = manager.check_trails(stamps(7, 4, 1))
    second = manager.check_trails(stamps(7, 4, 1))
    assert first == second
    assert all(not node.is_hit for node in manager.nodes)


def test_radius_boundary_counts_as_hit(manager):
    on_edge = TrailStamp(Point(CENTERS[0].x + RADIUS, CENTERS[0].y))
    outside = TrailStamp(Point(CENTERS[0].x + RADIUS + 1, CENTERS[0].y))
    assert manager.check_trails([on_edge]) == [1]
    assert manager.check_trails([outside]) == []


def test_path_positions_follow_pattern(manager):
    manager.check_trails(stamps(1, 5, 6))
    assert manager.pattern_path_positions() == [
        Line(CENTERS[0], CENTERS[4]),
        Line(CENTERS[4], CENTERS[5]),
    ]


def test_single_node_has_no_path(manager):
    manager.check_trails(stamps(5))
    assert manager.pattern_path_positions() == []


def test_box_encloses_nodes(manager):
    padding = RADIUS * 1.5
    assert manager.pattern_box == Box(300 - padding, 200 - padding, 600 + padding, 500 + padding)
    for center in CENTERS:
        assert manager.check_out_of_box(center) is False


def test_out_of_box(manager):
    box = manager.pattern_box
    assert manager.check_out_of_box((box.left, box.top)) is False
    assert manager.check_out_of_box((box.left - 1, CENTERS[0].y)) is True
    assert manager.check_out_of_box((CENTERS[0].x, box.bottom + 1)) is True


def test_set_pattern_box(manager):
    manager.set_pattern_box(Box(0, 0, 10, 10))
    assert manager.check_out_of_box((5, 5)) is False
    assert manager.check_out_of_box(CENTERS[0]) is True


def test_set_nodes_requires_nine(manager):
    with pytest.raises(ValueError):
        manager.set_nodes(CENTERS[:8], RADIUS)


def test_add_node(manager):
    manager.add_node((10, 10), 5.0, 0)
    assert manager.nodes[0].position == Point(10, 10)
    assert manager.check_trails([TrailStamp(Point(10, 10))]) == [1]
    with pytest.raises(IndexError):
        manager.add_node((0, 0), 1.0, 9)