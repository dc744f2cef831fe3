"""Flagship Duel: guided torpedo duel simulator for comparing command centers."""

from .rng import (
    RandomSource,
    FixedRandomSource,
    get_default_random_source,
)

from .fleet import (
    FLEET_SIZE,
    GUIDANCE_CORRECTIONS,
    ShipLayout,
    TorpedoAttack,
    guidance_offset,
    impact_index,
)

from .command import (
    # Command centers
    CommandCenter,
    BaselineCommandCenter,
    HiddenFlagshipCommandCenter,
    CounterFireCommandCenter,
    # Registry
    COMMAND_CENTER_REGISTRY,
    create_command_center,
    list_command_centers,
)

from .engine import (
    Side,
    MatchEventType,
    MatchEvent,
    MatchOutcome,
    MatchEngine,
)

from .trials import (
    DEFAULT_TRIALS,
    TrialSummary,
    TrialRunner,
    run_matchup,
)

from .report import (
    OutcomeTier,
    classify_ratio,
    win_ratio,
)

__all__ = [
    # Random source
    "RandomSource",
    "FixedRandomSource",
    "get_default_random_source",
    # Fleet
    "FLEET_SIZE",
    "GUIDANCE_CORRECTIONS",
    "ShipLayout",
    "TorpedoAttack",
    "guidance_offset",
    "impact_index",
    # Command centers
    "CommandCenter",
    "BaselineCommandCenter",
    "HiddenFlagshipCommandCenter",
    "CounterFireCommandCenter",
    "COMMAND_CENTER_REGISTRY",
    "create_command_center",
    "list_command_centers",
    # Engine
    "Side",
    "MatchEventType",
    "MatchEvent",
    "MatchOutcome",
    "MatchEngine",
    # Trials
    "DEFAULT_TRIALS",
    "TrialSummary",
    "TrialRunner",
    "run_matchup",
    # Report
    "OutcomeTier",
    "classify_ratio",
    "win_ratio",
]
