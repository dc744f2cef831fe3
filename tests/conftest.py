"""
Shared fixtures for the Flagship Duel test suite.
"""

from typing import List, Optional

import pytest

from flagship_duel.command import CommandCenter
from flagship_duel.fleet import ShipLayout, TorpedoAttack
from flagship_duel.rng import FixedRandomSource, RandomSource


class ScriptedCommandCenter(CommandCenter):
    """
    Command center that always fires the same attack and correction.

    Records every call it receives, optionally into a shared call log so
    that the relative order of both sides' calls can be checked.
    """

    def __init__(
        self,
        attack: TorpedoAttack = TorpedoAttack(0, 0),
        correction: int = 0,
        label: str = "scripted",
        call_log: Optional[List[str]] = None,
    ) -> None:
        super().__init__(f"Scripted {label}", FixedRandomSource([0]))
        self.attack = attack
        self.correction = correction
        self.label = label
        self.call_log = call_log if call_log is not None else []
        self.layouts_seen: List[ShipLayout] = []
        self.detected: List[TorpedoAttack] = []
        self.guided: List[TorpedoAttack] = []

    def fire_torpedo(self, ships: ShipLayout) -> TorpedoAttack:
        self.call_log.append(f"{self.label}.fire")
        self.layouts_seen.append(ships)
        return self.attack

    def guide_torpedo(self, attack: TorpedoAttack) -> int:
        self.call_log.append(f"{self.label}.guide")
        self.guided.append(attack)
        return self.correction

    def on_torpedo_detected(self, attack: TorpedoAttack) -> None:
        self.call_log.append(f"{self.label}.detect")
        self.detected.append(attack)


@pytest.fixture
def seeded_rng() -> RandomSource:
    """Create a seeded random source for deterministic tests."""
    return RandomSource(seed=42)


@pytest.fixture
def zero_rng() -> FixedRandomSource:
    """Random source that always places flagships at slot 0."""
    return FixedRandomSource([0])


@pytest.fixture
def scripted_pair():
    """Factory for a (you, enemy) pair of scripted command centers sharing a call log."""
    def _create(
        your_attack: TorpedoAttack = TorpedoAttack(0, 0),
        enemy_attack: TorpedoAttack = TorpedoAttack(0, 0),
        your_correction: int = 0,
        enemy_correction: int = 0,
    ):
        call_log: List[str] = []
        you = ScriptedCommandCenter(your_attack, your_correction, "you", call_log)
        enemy = ScriptedCommandCenter(enemy_attack, enemy_correction, "enemy", call_log)
        return you, enemy, call_log
    return _create
