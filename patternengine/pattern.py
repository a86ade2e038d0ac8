"""Unlock-pattern detection on a 3x3 grid of nodes from a mouse trail."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Union

GRID_SIZE = 3
NODE_COUNT = GRID_SIZE * GRID_SIZE
BOX_PADDING_FACTOR = 1.5


@dataclass(frozen=True)
class Point:
    """A 2D position."""

    x: float = 0.0
    y: float = 0.0


PointLike = Union[Point, Sequence[float]]


def _as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


@dataclass(frozen=True)
class Line:
    """A segment between two node centres."""

    start: Point
    end: Point


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


@dataclass(frozen=True)
class TrailStamp:
    """One recorded point of the mouse trail."""

    position: Point
    is_active: bool = True


@dataclass
class Node:
    """A grid node: its centre, hit radius and whether it was hit."""

    position: Point = field(default_factory=Point)
    radius: float = 0.0
    is_hit: bool = False


def _grid_cell(node_number: int) -> tuple[int, int]:
    index = node_number - 1
    return index % GRID_SIZE, index // GRID_SIZE


class PatternManager:
    """Turns a trail into the ordered list of nodes (1-9) it passed through."""

    def __init__(self) -> None:
        self.nodes: list[Node] = [Node() for _ in range(NODE_COUNT)]
        self.pattern_box = Box()
        self._pattern: list[int] = []

    def set_nodes(self, centers: Sequence[PointLike], radius: float) -> None:
        """Place the nine nodes and build the padded box enclosing them."""
        if len(centers) != NODE_COUNT:
            raise ValueError(f"expected {NODE_COUNT} node centres, got {len(centers)}")
        points = [_as_point(center) for center in centers]
        self.nodes = [Node(position=point, radius=radius) for point in points]

        padding = radius * BOX_PADDING_FACTOR
        self.pattern_box = Box(
            left=min(p.x for p in points) - padding,
            top=min(p.y for p in points) - padding,
            right=max(p.x for p in points) + padding,
            bottom=max(p.y for p in points) + padding,
        )

    def set_pattern_box(self, box: Box) -> None:
        """Replace the box used by check_out_of_box."""
        self.pattern_box = box

    def add_node(self, position: PointLike, radius: float, index: int) -> None:
        """Place a single node at a zero-based index."""
        if not 0 <= index < NODE_COUNT:
            raise IndexError(f"node index out of range: {index}")
        self.nodes[index] = Node(position=_as_point(position), radius=radius)

    def get_skipped_node(self, start: int, end: int) -> int | None:
        """Return the node lying halfway between two nodes on a line, if any."""
        ax, ay = _grid_cell(start)
        bx, by = _grid_cell(end)
        mx = (ax + bx) // 2
        my = (ay + by) // 2

        horizontal = abs(ax - bx) == 2 and ay == by
        vertical = abs(ay - by) == 2 and ax == bx
        diagonal = abs(ax - bx) == 2 and abs(ay - by) == 2
        if horizontal or vertical or diagonal:
            return my * GRID_SIZE + mx + 1
        return None

    def check_trails(self, trails: Iterable[TrailStamp]) -> list[int]:
        """Record the nodes hit by the active stamps, in order, and return them."""
        self._pattern = []
        last_hit: int | None = None

        for stamp in trails:
            if not stamp.is_active:
                continue
            pos = _as_point(stamp.position)
            for index, node in enumerate(self.nodes):
                if node.is_hit:
                    continue
                dx = pos.x - node.position.x
                dy = pos.y - node.position.y
                if dx * dx + dy * dy > node.radius * node.radius:
                    continue

                current = index + 1
                if last_hit is not None:
                    skipped = self.get_skipped_node(last_hit, current)
                    if skipped is not None and not self.nodes[skipped - 1].is_hit:
                        self.nodes[skipped - 1].is_hit = True
                        self._pattern.append(skipped)

                node.is_hit = True
                self._pattern.append(current)
                last_hit = current

        for node in self.nodes:
            node.is_hit = False
        return list(self._pattern)

    def check_out_of_box(self, position: PointLike) -> bool:
        """True if the position lies outside the pattern box."""
        pos = _as_point(position)
        box = self.pattern_box
        return pos.x < box.left or pos.x > box.right or pos.y < box.top or pos.y > box.bottom

    def pattern_path_positions(self) -> list[Line]:
        """Segments joining consecutive nodes of the pattern; empty below two nodes."""
        lines = []
        for start, end in zip(self._pattern, self._pattern[1:]):
            if not (1 <= start <= NODE_COUNT and 1 <= end <= NODE_COUNT):
                continue
            lines.append(Line(self.nodes[start - 1].position, self.nodes[end - 1].position))
        return lines

    def pattern(self) -> list[int]:
        """The node numbers (1-9) of the last checked trail."""
        return list(self._pattern)