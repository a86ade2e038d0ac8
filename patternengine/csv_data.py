"""Record types read from the game's CSV data tables."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

NULL_CELL = "null"
NO_MATCH_PLAYER = "일치하는 목록이 없습니다 "
NO_MATCH_PATTERN = "일치하는 목록이 없습니다"

NODE_COUNT = 9
ENEMY_PATTERN_COUNT = 16

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _parse_int(text: str) -> int:
    """Parse the leading integer of a cell, ignoring trailing characters."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer cell: {text!r}")
    return int(match.group())


def _parse_float(text: str) -> float:
    """Parse the leading number of a cell, ignoring trailing characters."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number cell: {text!r}")
    return float(match.group())


def _int_or_zero(text: str) -> int:
    return 0 if text == NULL_CELL else _parse_int(text)


def _float_or_zero(text: str) -> float:
    return 0.0 if text == NULL_CELL else _parse_float(text)


def _require(row: Sequence[str], count: int, what: str) -> None:
    if len(row) < count:
        raise ValueError(f"{what} row needs {count} columns, got {len(row)}")


class BaseData(ABC):
    """A record filled from one CSV row."""

    @abstractmethod
    def set_data(self, row: Sequence[str]) -> None:
        """Fill the record from the cells of one row."""

    @abstractmethod
    def describe(self) -> str:
        """Return a one-record text summary."""

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "BaseData":
        """Create a record and fill it from a row."""
        record = cls()
        record.set_data(row)
        return record


@dataclass
class AllNodePattern(BaseData):
    """A node pattern: an id and up to nine node numbers (0 for null)."""

    node_pattern_id: str = ""
    node_numbers: list[int] = field(default_factory=list)

    def set_data(self, row: Sequence[str]) -> None:
        _require(row, NODE_COUNT + 1, "node pattern")
        self.node_pattern_id = row[0]
        self.node_numbers = [_int_or_zero(cell) for cell in row[1 : NODE_COUNT + 1]]

    def describe(self) -> str:
        numbers = "".join(f"{number} " for number in self.node_numbers)
        return f"Node_pattern_ID: {self.node_pattern_id} {numbers}"


@dataclass
class EnemyAttackPattern(BaseData):
    """An enemy attack pattern with its group, node pattern and cooldown."""

    pattern_id: str = ""
    attack_group: int = 0
    node_pattern: str = ""
    attack_cooldown: float = 0.0

    def set_data(self, row: Sequence[str]) -> None:
        _require(row, 4, "enemy attack pattern")
        self.pattern_id = row[0]
        self.attack_group = _parse_int(row[1])
        self.node_pattern = row[2]
        self.attack_cooldown = _parse_float(row[3])

    def describe(self) -> str:
        return (
            f"Node_pattern_ID: {self.pattern_id} "
            f"atkPetternGroup: {self.attack_group} "
            f"eNodepattern: {self.node_pattern} "
            f"eAtkCoolDown: {self.attack_cooldown:g}"
        )


@dataclass
class EnemyData(BaseData):
    """An enemy's stats and the sixteen attack patterns it may use."""

    enemy_id: str = ""
    name: str = ""
    difficulty: str = ""
    health: float = 0.0
    damage: float = 0.0
    cooldown: float = 0.0
    spirit_damage: float = 0.0
    spirit_amount: float = 0.0
    guard_rate: float = 0.0
    patterns: list[str] = field(default_factory=list)

    def set_data(self, row: Sequence[str]) -> None:
        _require(row, 9 + ENEMY_PATTERN_COUNT, "enemy")
        self.enemy_id = row[0]
        self.name = row[1]
        self.difficulty = row[2]
        self.health = _parse_float(row[3])
        self.damage = _parse_float(row[4])
        self.cooldown = _parse_float(row[5])
        self.spirit_damage = _parse_float(row[6])
        self.spirit_amount = _parse_float(row[7])
        self.guard_rate = _parse_float(row[8])
        self.patterns = list(row[9 : 9 + ENEMY_PATTERN_COUNT])

    def describe(self) -> str:
        patterns = "".join(
            f"enemyPattern{index} : {pattern}" for index, pattern in enumerate(self.patterns)
        )
        return (
            f"enemyID : {self.enemy_id}"
            f"enemyDifficulty : {self.difficulty}"
            f"enemyHealth : {self.health:g}"
            f"enemyDamage : {self.damage:g}\n"
            f"enemyCooldown : {self.cooldown:g}"
            f"enemySpiritamount : {self.spirit_amount:g}"
            f"enemyGuardRate : {self.guard_rate:g}\n"
            f"{patterns}"
        )


_PLAYER_NUMBERS = {
    "Character_helath": "health",
    "Character_damage": "damage",
    "Character_spritdamage": "spirit_damage",
    "Character_guard_rate": "guard_rate",
}


@dataclass
class PlayerData(BaseData):
    """A player character's stats; null cells read as 0."""

    character_id: str = ""
    name: str = ""
    health: float = 0.0
    damage: float = 0.0
    spirit_damage: float = 0.0
    guard_rate: float = 0.0

    def set_data(self, row: Sequence[str]) -> None:
        _require(row, 6, "player")
        self.character_id = row[0]
        self.name = row[0]
        self.health = _float_or_zero(row[2])
        self.damage = _float_or_zero(row[3])
        self.spirit_damage = _float_or_zero(row[4])
        self.guard_rate = _float_or_zero(row[5])

    def get_int(self, name: str) -> int:
        """Return the named stat truncated to an int, or 0 for unknown names."""
        attribute = _PLAYER_NUMBERS.get(name)
        return 0 if attribute is None else int(getattr(self, attribute))

    def get_string(self, name: str) -> str:
        """Return the named text field, or a no-match message."""
        if name == "Character_ID":
            return self.character_id
        return NO_MATCH_PLAYER

    def describe(self) -> str:
        return (
            f"Character_ID: {self.character_id} "
            f"Character_helath: {self.health:g} "
            f"Character_damage: {self.damage:g} "
            f"Character_guard_rate: {self.guard_rate:g} "
            f"Character_spritdamage: {self.spirit_damage:g}"
        )


@dataclass
class PlayerAttackPattern(BaseData):
    """A player attack pattern made of two node patterns."""

    pattern_id: str = ""
    node_pattern01: str = ""
    node_pattern02: str = ""

    def set_data(self, row: Sequence[str]) -> None:
        _require(row, 3, "player attack pattern")
        self.pattern_id = row[0]
        self.node_pattern01 = row[1]
        self.node_pattern02 = row[2]

    def get_string(self, name: str) -> str:
        """Return the named field, or a no-match message."""
        fields = {
            "Player_pattern_ID": self.pattern_id,
            "Node_pattern01": self.node_pattern01,
            "Node_pattern02": self.node_pattern02,
        }
        return fields.get(name, NO_MATCH_PATTERN)

    def describe(self) -> str:
        return (
            f"Player_pattern_ID: {self.pattern_id} "
            f"Node_pattern01: {self.node_pattern01} "
            f"Node_pattern02: {self.node_pattern02}"
        )


@dataclass
class NodeList:
    """Nine node slots; cells beyond the row's length stay at 0."""

    nodes: list[int] = field(default_factory=lambda: [0] * NODE_COUNT)

    def set_data(self, row: Sequence[str]) -> None:
        """Fill up to nine slots from the row; null cells become 0."""
        for index, cell in enumerate(row[:NODE_COUNT]):
            self.nodes[index] = _int_or_zero(cell)


class NodeData:
    """Node lists indexed by id."""

    def __init__(self) -> None:
        self._data: dict[str, NodeList] = {}

    def add(self, node_id: str, node_list: NodeList) -> None:
        """Store a node list under this id, replacing any previous one."""
        self._data[node_id] = node_list

    def get_node_data(self, node_id: str) -> NodeList:
        """Return the node list for this id; raise KeyError if unknown."""
        try:
            return self._data[node_id]
        except KeyError:
            raise KeyError(f"no node list with id {node_id!r}") from None