"""Combatants: the player and enemies, filled from the CSV data tables."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from .csv_data import EnemyData, PlayerAttackPattern, PlayerData
from .csv_store import CsvDataManager

SPIRIT_DECAY_PER_SECOND = 0.3
DEFAULT_COOL_TIME = 1.0


@dataclass
class LiveObject:
    """Stats shared by everything that fights."""

    object_id: str = ""
    name: str = ""
    hp: float = 0.0
    attack: float = 0.0
    spirit_attack: float = 0.0
    defense_rate: float = 0.0

    spirit_amount: float = 0.0
    now_spirit_amount: float = 0.0
    over_time_spirit: float = 0.0

    cool_time: float = 0.0
    now_cool_time: float = 0.0

    scene_delta_time: float = 0.0

    def take_damage(self, amount: float) -> None:
        """Lose this much health."""
        self.hp -= amount

    def take_spirit_damage(self, amount: float) -> None:
        """Lose this much spirit."""
        self.spirit_amount -= amount

    def set_delta_time(self, delta_time: float) -> None:
        """Set the frame time shared by the whole scene."""
        self.scene_delta_time = delta_time


@dataclass
class Player(LiveObject):
    """The player: stats from the player sheet, patterns from the pattern sheet."""

    pattern_ids: list[str] = field(default_factory=list)
    player_data: PlayerData | None = None
    attack_pattern: PlayerAttackPattern | None = None

    def set_stat_data(
        self, player_id: str, spirit_amount: float, manager: CsvDataManager
    ) -> None:
        """Copy stats from the player record; spirit comes from the enemy."""
        record = manager.get(PlayerData, player_id)
        self.player_data = record
        self.object_id = record.character_id
        self.name = record.name
        self.hp = record.health
        self.attack = record.damage
        self.spirit_attack = record.spirit_damage
        self.defense_rate = record.guard_rate
        self.spirit_amount = spirit_amount
        self.now_spirit_amount = spirit_amount / 2.0
        self.pattern_ids = manager.ids(PlayerAttackPattern)
        self.cool_time = DEFAULT_COOL_TIME
        self.now_cool_time = DEFAULT_COOL_TIME

    def set_attack_pattern(self, pattern_id: str, manager: CsvDataManager) -> None:
        """Point at the attack pattern with this id."""
        self.attack_pattern = manager.get(PlayerAttackPattern, pattern_id)

    def reset_spirit_amount(self) -> None:
        """Restore spirit to half of its total."""
        self.now_spirit_amount = self.spirit_amount / 2.0

    def select_pattern(
        self, manager: CsvDataManager, rng: random.Random | None = None
    ) -> PlayerAttackPattern:
        """Pick a random attack pattern, make it current and return it."""
        if not self.pattern_ids:
            raise ValueError("no attack patterns to choose from")
        rng = rng or random.Random()
        choice = rng.randint(1, len(self.pattern_ids))
        self.set_attack_pattern(self.pattern_ids[choice - 1], manager)
        return self.attack_pattern

    def cal_cool_time(self) -> None:
        """Count the cooldown down, restarting it once it has run out."""
        if self.now_cool_time <= 0.0:
            self.set_cool_time()
        self.now_cool_time -= self.scene_delta_time

    def set_cool_time(self) -> None:
        """Restart the cooldown, scaled by the current share of spirit."""
        self.now_cool_time = (
            self.now_spirit_amount / self.spirit_amount * 100.0 * self.cool_time
        )

    def cal_spirit_time(self) -> None:
        """Drain spirit by a fixed amount for every full second that passes."""
        if self.over_time_spirit >= 1:
            self.now_spirit_amount -= SPIRIT_DECAY_PER_SECOND
            self.over_time_spirit = math.fmod(self.over_time_spirit, 1.0)
        self.over_time_spirit += self.scene_delta_time


@dataclass
class Enemy(LiveObject):
    """An enemy, with stats copied from the enemy sheet."""

    difficulty: str = ""
    enemy_data: EnemyData | None = None

    def set_all_data(self, enemy_id: str, manager: CsvDataManager) -> None:
        """Copy every stat from the enemy record with this id."""
        record = manager.get(EnemyData, enemy_id)
        self.enemy_data = record
        self.object_id = record.enemy_id
        self.name = record.name
        self.hp = record.health
        self.attack = record.damage
        self.spirit_attack = record.spirit_damage
        self.defense_rate = record.guard_rate
        self.spirit_amount = record.spirit_amount
        self.difficulty = record.difficulty