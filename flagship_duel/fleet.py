#!/usr/bin/env python3
"""
Fleet Module for the Flagship Duel simulator.

Value types shared by the match engine and command centers:
- ShipLayout: A side's row of five ships, exactly one of them the flagship
- TorpedoAttack: Firing ship and initial aim slot of a guided torpedo

Guidance helpers:
- guidance_offset: Reduce a course correction the way the duel scores it
- impact_index: Final slot a guided torpedo lands on

    [ ] [*] [ ] [ ] [ ]   <- YOU
             V            <- guided torpedo
    [ ] [ ] [ ] [*] [ ]   <- ENEMY
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .rng import RandomSource


# =============================================================================
# CONSTANTS
# =============================================================================

FLEET_SIZE = 5  # Ships per side, one of them the flagship
GUIDANCE_CORRECTIONS = (-1, 0, 1)  # Corrections the built-in command centers return
NO_SHIP = -1  # Marker for "no ship remembered yet"


# =============================================================================
# SHIP LAYOUT
# =============================================================================

@dataclass(frozen=True)
class ShipLayout:
    """
    One side's row of ships. True marks the flagship.

    Layouts are immutable; a fresh one is placed for every match.

    Attributes:
        slots: Tuple of FLEET_SIZE booleans with exactly one True
    """
    slots: Tuple[bool, ...]

    def __post_init__(self) -> None:
        """Validate the layout shape."""
        if len(self.slots) != FLEET_SIZE:
            raise ValueError(
                f"Layout must have {FLEET_SIZE} slots, got {len(self.slots)}"
            )
        if sum(1 for slot in self.slots if slot) != 1:
            raise ValueError("Layout must contain exactly one flagship")

    @classmethod
    def with_flagship_at(cls, index: int) -> ShipLayout:
        """Build a layout with the flagship at a given slot."""
        if not 0 <= index < FLEET_SIZE:
            raise ValueError(f"Flagship index must be in [0, {FLEET_SIZE}), got {index}")
        return cls(tuple(i == index for i in range(FLEET_SIZE)))

    @classmethod
    def place_random(cls, rng: RandomSource) -> ShipLayout:
        """Place the flagship at a uniformly random slot."""
        return cls.with_flagship_at(rng.next_int(FLEET_SIZE))

    @property
    def flagship_index(self) -> int:
        """Slot holding the flagship."""
        return self.slots.index(True)

    def is_flagship(self, index: int) -> bool:
        """
        Check whether a slot holds the flagship.

        Indices outside the row, negative ones included, are open water
        and never hold the flagship.
        """
        if not 0 <= index < FLEET_SIZE:
            return False
        return self.slots[index]

    def __len__(self) -> int:
        return FLEET_SIZE

    def __getitem__(self, index: int) -> bool:
        # No wrap-around: layout[-1] is not the last ship
        if not 0 <= index < FLEET_SIZE:
            raise IndexError(f"Slot index must be in [0, {FLEET_SIZE}), got {index}")
        return self.slots[index]

    def __iter__(self) -> Iterator[bool]:
        return iter(self.slots)

    def __str__(self) -> str:
        return " ".join("[*]" if slot else "[ ]" for slot in self.slots)


# =============================================================================
# TORPEDO ATTACK
# =============================================================================

@dataclass(frozen=True)
class TorpedoAttack:
    """
    A fired torpedo before guidance.

    Attributes:
        source: Index of the firing ship (0-4)
        target: Initially locked aim slot (0-4)
    """
    source: int
    target: int

    def __post_init__(self) -> None:
        """Validate that both indices lie within the row."""
        for label, value in (("source", self.source), ("target", self.target)):
            if not 0 <= value < FLEET_SIZE:
                raise ValueError(
                    f"Torpedo {label} must be in [0, {FLEET_SIZE}), got {value}"
                )


# =============================================================================
# GUIDANCE
# =============================================================================

def guidance_offset(correction: int) -> int:
    """
    Reduce a course correction modulo 2.

    Uses the truncated remainder (sign follows the correction): -1, 0 and 1
    pass through unchanged, 2 becomes 0, 3 becomes 1 and -3 becomes -1.
    Python's own % operator would turn -1 into 1.

    Args:
        correction: Course correction returned by guide_torpedo

    Returns:
        The offset added to the locked target
    """
    remainder = abs(correction) % 2
    return -remainder if correction < 0 else remainder


def impact_index(attack: TorpedoAttack, correction: int) -> int:
    """Slot the torpedo lands on. Not clamped; may fall outside the row."""
    return attack.target + guidance_offset(correction)
