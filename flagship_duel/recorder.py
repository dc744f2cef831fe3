"""
Match Recorder - Records match events of a duel run to JSON.

Captures:
- Flagship placement of every recorded match
- Both torpedoes as fired and as detected by the opponent
- Guidance corrections and final impact slots
- Flagship hits
- Run metadata and the final summary

Only the first max_matches matches are kept, so long runs stay small.
"""

import json
from dataclasses import dataclass, field, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, List, Optional

from .engine import MatchEngine, MatchEvent, MatchEventType


@dataclass
class MatchRecording:
    """Complete recording of a duel run."""
    # Metadata
    recording_version: str = "1.0"
    recorded_at: str = ""
    your_command_center: str = ""
    enemy_command_center: str = ""
    trials: int = 0
    seed: Optional[int] = None

    # Recorded matches: [{"match": n, "events": [...]}, ...]
    matches: List[Dict[str, Any]] = field(default_factory=list)

    # Result
    summary: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


class MatchRecorder:
    """
    Records match events for later inspection.

    Usage:
        recorder = MatchRecorder(max_matches=50)
        recorder.start_recording("Counter-Fire", "Hidden Flagship", trials, seed)
        recorder.attach(engine)

        # ... run trials ...

        recorder.end_recording(summary)
        recorder.save("recordings/duel.json")
    """

    def __init__(self, max_matches: int = 100) -> None:
        self.max_matches = max_matches
        self.recording = MatchRecording()
        self._current: Optional[Dict[str, Any]] = None
        self._is_recording = False

    @property
    def is_recording(self) -> bool:
        return self._is_recording

    def start_recording(
        self,
        your_command_center: str,
        enemy_command_center: str,
        trials: int,
        seed: Optional[int] = None,
    ) -> None:
        """Start recording a new run."""
        self._is_recording = True
        self._current = None
        self.recording = MatchRecording(
            recorded_at=datetime.now().isoformat(),
            your_command_center=your_command_center,
            enemy_command_center=enemy_command_center,
            trials=trials,
            seed=seed,
        )

    def attach(self, engine: MatchEngine) -> None:
        """Subscribe to an engine's match events."""
        engine.add_event_callback(self.record_event)

    def detach(self, engine: MatchEngine) -> None:
        engine.remove_event_callback(self.record_event)

    def record_event(self, event: MatchEvent) -> None:
        """Event callback: store the event if its match is being kept."""
        if not self._is_recording:
            return

        if self._current is None or self._current["match"] != event.match_number:
            if len(self.recording.matches) >= self.max_matches:
                return
            self._current = {"match": event.match_number, "events": []}
            self.recording.matches.append(self._current)

        self._current["events"].append(event.to_dict())

        if event.event_type == MatchEventType.MATCH_COMPLETE:
            self._current = None

    def end_recording(self, summary: Any) -> None:
        """End recording and store the run summary."""
        self.recording.summary = summary.to_dict()
        self._is_recording = False

    def save(self, filepath: str) -> str:
        """Save recording to JSON file."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            f.write(self.recording.to_json())

        return str(path)


def load_recording(filepath: str) -> Dict[str, Any]:
    """Load a saved recording."""
    with open(filepath) as f:
        return json.load(f)
