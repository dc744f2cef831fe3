#!/usr/bin/env python3
"""
Match Engine for the Flagship Duel simulator.

Plays a single match between two command centers. Every match runs the
same five steps in the same order:

1. Setup: place each side's flagship at a random slot
2. First fire: you fire, the enemy detects your torpedo
3. Second fire: the enemy fires, you detect its torpedo
4. Guidance: you guide, then the enemy guides
5. Resolution: check whether each torpedo landed on a flagship

Both sides are scored independently, so both flagships (or neither) can
be hit in the same match.

Usage:
    engine = MatchEngine(rng=RandomSource(seed=42))
    outcome = engine.play(your_cc, enemy_cc)
    your_hit, enemy_hit = outcome
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Iterator, List, Optional

from .command import CommandCenter
from .fleet import ShipLayout, TorpedoAttack, impact_index
from .rng import RandomSource, get_default_random_source


# =============================================================================
# SIDES AND EVENTS
# =============================================================================

class Side(Enum):
    """The two sides of a duel."""
    YOU = "you"
    ENEMY = "enemy"


class MatchEventType(Enum):
    """Types of events emitted while a match is played."""
    FLAGSHIPS_PLACED = auto()
    TORPEDO_FIRED = auto()
    TORPEDO_DETECTED = auto()
    TORPEDO_GUIDED = auto()
    FLAGSHIP_HIT = auto()
    MATCH_COMPLETE = auto()


@dataclass
class MatchEvent:
    """
    An event that occurs during a match.

    Attributes:
        event_type: The type of event.
        match_number: 1-based number of the match within the engine's life.
        side: Side the event concerns (None for match-wide events).
        data: Additional event-specific data.
    """
    event_type: MatchEventType
    match_number: int
    side: Optional[Side] = None
    data: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "event_type": self.event_type.name.lower(),
            "match": self.match_number,
            "side": self.side.value if self.side else None,
            "data": self.data,
        }

    def __str__(self) -> str:
        side_str = f"[{self.side.value}] " if self.side else ""
        return f"#{self.match_number} {side_str}{self.event_type.name}"


# =============================================================================
# MATCH OUTCOME
# =============================================================================

@dataclass(frozen=True)
class MatchOutcome:
    """
    Result of one match.

    Unpacks as (your_flagship_hit, enemy_flagship_hit).

    Attributes:
        your_flagship_hit: The enemy torpedo landed on your flagship.
        enemy_flagship_hit: Your torpedo landed on the enemy flagship.
        your_attack: Your torpedo as fired.
        enemy_attack: The enemy torpedo as fired.
        your_impact: Slot your torpedo landed on after guidance.
        enemy_impact: Slot the enemy torpedo landed on after guidance.
    """
    your_flagship_hit: bool
    enemy_flagship_hit: bool
    your_attack: Optional[TorpedoAttack] = None
    enemy_attack: Optional[TorpedoAttack] = None
    your_impact: Optional[int] = None
    enemy_impact: Optional[int] = None

    @property
    def you_won(self) -> bool:
        return self.enemy_flagship_hit

    @property
    def enemy_won(self) -> bool:
        return self.your_flagship_hit

    def __iter__(self) -> Iterator[bool]:
        return iter((self.your_flagship_hit, self.enemy_flagship_hit))


# =============================================================================
# MATCH ENGINE
# =============================================================================

class MatchEngine:
    """
    Plays single matches between two command centers.

    Exceptions raised by a command center are not caught; they abort the
    match and whatever run is driving it.

    Attributes:
        rng: Random source used for flagship placement.
        matches_played: Number of matches played so far.
        events: Events of the latest match (only when record_events is set).
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        record_events: bool = False
    ) -> None:
        """
        Initialize the match engine.

        Args:
            rng: Random source for placement (defaults to the process-wide source).
            record_events: Keep the latest match's events in self.events.
        """
        self.rng = rng or get_default_random_source()
        self.record_events = record_events
        self.matches_played = 0
        self.events: List[MatchEvent] = []

        # Event callbacks (for external recording/logging)
        self._event_callbacks: List[Callable[[MatchEvent], None]] = []

    # -------------------------------------------------------------------------
    # Event Handling
    # -------------------------------------------------------------------------

    def add_event_callback(self, callback: Callable[[MatchEvent], None]) -> None:
        """
        Register a callback to be called for each match event.

        Args:
            callback: Function that takes a MatchEvent.
        """
        self._event_callbacks.append(callback)

    def remove_event_callback(self, callback: Callable[[MatchEvent], None]) -> None:
        """Remove an event callback."""
        if callback in self._event_callbacks:
            self._event_callbacks.remove(callback)

    def _log_event(
        self,
        event_type: MatchEventType,
        side: Optional[Side] = None,
        data: Optional[dict] = None
    ) -> None:
        """Log a match event and notify callbacks."""
        if not self.record_events and not self._event_callbacks:
            return

        event = MatchEvent(
            event_type=event_type,
            match_number=self.matches_played,
            side=side,
            data=data or {}
        )
        if self.record_events:
            self.events.append(event)

        for callback in self._event_callbacks:
            callback(event)

    # -------------------------------------------------------------------------
    # Match Protocol
    # -------------------------------------------------------------------------

    def play(self, your_cc: CommandCenter, enemy_cc: CommandCenter) -> MatchOutcome:
        """
        Play one match.

        Args:
            your_cc: Command center for your side (acts first).
            enemy_cc: Command center for the enemy side.

        Returns:
            MatchOutcome for this match.
        """
        self.matches_played += 1
        self.events = []

        # Setup
        your_ships = ShipLayout.place_random(self.rng)
        enemy_ships = ShipLayout.place_random(self.rng)
        self._log_event(MatchEventType.FLAGSHIPS_PLACED, data={
            "your_flagship": your_ships.flagship_index,
            "enemy_flagship": enemy_ships.flagship_index,
        })

        # You fire first
        your_attack = your_cc.fire_torpedo(your_ships)
        self._log_attack(MatchEventType.TORPEDO_FIRED, Side.YOU, your_attack)
        enemy_cc.on_torpedo_detected(your_attack)
        self._log_attack(MatchEventType.TORPEDO_DETECTED, Side.ENEMY, your_attack)

        # Enemy fires second
        enemy_attack = enemy_cc.fire_torpedo(enemy_ships)
        self._log_attack(MatchEventType.TORPEDO_FIRED, Side.ENEMY, enemy_attack)
        your_cc.on_torpedo_detected(enemy_attack)
        self._log_attack(MatchEventType.TORPEDO_DETECTED, Side.YOU, enemy_attack)

        # Guidance, you first
        your_correction = your_cc.guide_torpedo(your_attack)
        your_impact = impact_index(your_attack, your_correction)
        self._log_event(MatchEventType.TORPEDO_GUIDED, Side.YOU, {
            "correction": your_correction,
            "impact": your_impact,
        })

        enemy_correction = enemy_cc.guide_torpedo(enemy_attack)
        enemy_impact = impact_index(enemy_attack, enemy_correction)
        self._log_event(MatchEventType.TORPEDO_GUIDED, Side.ENEMY, {
            "correction": enemy_correction,
            "impact": enemy_impact,
        })

        # Resolution: each torpedo is checked against the opposing row
        outcome = MatchOutcome(
            your_flagship_hit=your_ships.is_flagship(enemy_impact),
            enemy_flagship_hit=enemy_ships.is_flagship(your_impact),
            your_attack=your_attack,
            enemy_attack=enemy_attack,
            your_impact=your_impact,
            enemy_impact=enemy_impact,
        )

        if outcome.your_flagship_hit:
            self._log_event(MatchEventType.FLAGSHIP_HIT, Side.YOU, {"impact": enemy_impact})
        if outcome.enemy_flagship_hit:
            self._log_event(MatchEventType.FLAGSHIP_HIT, Side.ENEMY, {"impact": your_impact})
        self._log_event(MatchEventType.MATCH_COMPLETE, data={
            "your_flagship_hit": outcome.your_flagship_hit,
            "enemy_flagship_hit": outcome.enemy_flagship_hit,
        })

        return outcome

    def _log_attack(
        self,
        event_type: MatchEventType,
        side: Side,
        attack: TorpedoAttack
    ) -> None:
        """Log a fire or detection event for an attack."""
        self._log_event(event_type, side, {
            "source": attack.source,
            "target": attack.target,
        })
