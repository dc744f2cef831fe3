#!/usr/bin/env python3
"""
Command Center Module for the Flagship Duel simulator.

A command center is the strategy controlling one side of a duel. The
match engine calls it three times per match:

1. fire_torpedo(ships): pick a firing ship and an aim slot
2. on_torpedo_detected(attack): learn the opponent's firing ship and aim
3. guide_torpedo(attack): nudge own torpedo by -1, 0 or +1

The same instance plays every match of a run, so anything it remembers
carries over from one match to the next.

Command centers:
- CommandCenter: Base class with the default (baseline) behaviour
- BaselineCommandCenter: Named baseline, fires from the flagship at random
- HiddenFlagshipCommandCenter: Never fires from its flagship or the attacked ship
- CounterFireCommandCenter: Steers away from the enemy's firing ship

Registry:
- COMMAND_CENTER_REGISTRY / create_command_center: Build strategies by name
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .fleet import FLEET_SIZE, NO_SHIP, ShipLayout, TorpedoAttack
from .rng import RandomSource, get_default_random_source


# =============================================================================
# COMMAND CENTER BASE CLASS
# =============================================================================

class CommandCenter:
    """
    Base class for duel strategies.

    The default behaviour is the baseline every strategy is measured
    against: fire from the flagship at a random slot, guide at random and
    ignore the enemy's torpedo. Subclasses override any of the three
    operations.
    """

    def __init__(
        self,
        name: str = "Command Center",
        rng: Optional[RandomSource] = None
    ) -> None:
        """
        Initialize the command center.

        Args:
            name: Display name for this command center.
            rng: Random source (defaults to the process-wide source).
        """
        self.name = name
        self.rng = rng or get_default_random_source()

    def fire_torpedo(self, ships: ShipLayout) -> TorpedoAttack:
        """
        Fire the side's single torpedo.

        Args:
            ships: Own ship layout. The opponent's layout is never visible.

        Returns:
            TorpedoAttack with source and target in [0, FLEET_SIZE).
        """
        return TorpedoAttack(ships.flagship_index, self.rng.next_int(FLEET_SIZE))

    def guide_torpedo(self, attack: TorpedoAttack) -> int:
        """
        Correct the course of own torpedo.

        Args:
            attack: The attack this side fired earlier in the match.

        Returns:
            -1, 0 or 1.
        """
        return self.rng.next_int(3) - 1

    def on_torpedo_detected(self, attack: TorpedoAttack) -> None:
        """
        Called when the opponent fires.

        Args:
            attack: The opponent's attack for this match.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


# =============================================================================
# SPECIFIC COMMAND CENTERS
# =============================================================================

class BaselineCommandCenter(CommandCenter):
    """
    Baseline command center: the default behaviour, unchanged.

    Intentionally weak. Two baselines facing each other should split
    their wins evenly.
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        super().__init__("Baseline Command Center", rng)


class HiddenFlagshipCommandCenter(CommandCenter):
    """
    Hidden flagship command center: never gives away its flagship.

    Tactics:
    - Fire from a random ship that is neither the flagship nor the slot
      the opponent just aimed at
    - Aim anywhere at random
    - Guide only when the target is an inner slot (1-3), so the torpedo
      never drifts off the row
    - Remember the slot the opponent aimed at
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        super().__init__("Hidden Flagship Command Center", rng)
        self.attacked_ship = NO_SHIP

    def fire_torpedo(self, ships: ShipLayout) -> TorpedoAttack:
        flagship = ships.flagship_index
        source = self.rng.next_int(FLEET_SIZE)
        while source == flagship or source == self.attacked_ship:
            source = self.rng.next_int(FLEET_SIZE)
        return TorpedoAttack(source, self.rng.next_int(FLEET_SIZE))

    def guide_torpedo(self, attack: TorpedoAttack) -> int:
        if 1 <= attack.target <= FLEET_SIZE - 2:
            return self.rng.next_int(3) - 1
        return 0

    def on_torpedo_detected(self, attack: TorpedoAttack) -> None:
        self.attacked_ship = attack.target


class CounterFireCommandCenter(CommandCenter):
    """
    Counter-fire command center: exploits the hidden flagship tactic.

    An opponent that never fires from its flagship tells us one slot the
    flagship is not in. Steering away from the firing ship skips that slot.

    Tactics:
    - Fire from any ship; the opponent does not look at the source
    - Aim at an inner slot (1-3) so both corrections stay on the row
    - Guide away from the opponent's firing ship when it is adjacent to
      the target, otherwise swerve left or right at random
    - Remember the opponent's firing ship
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        super().__init__("Counter-Fire Command Center", rng)
        self.last_source = NO_SHIP

    def fire_torpedo(self, ships: ShipLayout) -> TorpedoAttack:
        return TorpedoAttack(
            self.rng.next_int(FLEET_SIZE),
            self.rng.next_int(FLEET_SIZE - 2) + 1
        )

    def guide_torpedo(self, attack: TorpedoAttack) -> int:
        if self.last_source == attack.target + 1:
            return -1
        if self.last_source == attack.target - 1:
            return 1
        return -1 if self.rng.next_bool() else 1

    def on_torpedo_detected(self, attack: TorpedoAttack) -> None:
        self.last_source = attack.source


# =============================================================================
# COMMAND CENTER REGISTRY
# =============================================================================

CommandCenterFactory = Callable[[Optional[RandomSource]], CommandCenter]

COMMAND_CENTER_REGISTRY: Dict[str, CommandCenterFactory] = {
    "baseline": BaselineCommandCenter,
    "hidden_flagship": HiddenFlagshipCommandCenter,
    "counter_fire": CounterFireCommandCenter,
}


def list_command_centers() -> List[str]:
    """Get the names of all registered command centers."""
    return list(COMMAND_CENTER_REGISTRY.keys())


def create_command_center(
    name: str,
    rng: Optional[RandomSource] = None
) -> CommandCenter:
    """
    Create a command center by registry name.

    Args:
        name: Registry name (see list_command_centers()).
        rng: Random source for the strategy.

    Returns:
        A fresh CommandCenter instance.

    Raises:
        KeyError: If the name is not registered.
    """
    if name not in COMMAND_CENTER_REGISTRY:
        raise KeyError(
            f"Command center '{name}' not found. "
            f"Available: {', '.join(list_command_centers())}"
        )
    return COMMAND_CENTER_REGISTRY[name](rng)
