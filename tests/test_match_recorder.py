"""
Tests for the MatchRecorder module.

Tests cover:
- Recording events from an engine through callbacks
- Limiting the number of recorded matches
- Run metadata and summary
- JSON serialization

Run with: python -m pytest tests/test_match_recorder.py -v
"""

import json

import pytest

from flagship_duel.command import BaselineCommandCenter
from flagship_duel.engine import MatchEngine
from flagship_duel.recorder import MatchRecorder, MatchRecording, load_recording
from flagship_duel.rng import RandomSource
from flagship_duel.trials import TrialRunner


@pytest.fixture
def recorded_run():
    """Run a short seeded duel with a recorder attached."""
    def _run(trials: int = 10, max_matches: int = 3):
        rng = RandomSource(seed=5)
        engine = MatchEngine(rng=rng)
        recorder = MatchRecorder(max_matches=max_matches)
        recorder.start_recording("Baseline A", "Baseline B", trials, seed=5)
        recorder.attach(engine)

        runner = TrialRunner(BaselineCommandCenter(rng), BaselineCommandCenter(rng), engine=engine)
        runner.run(trials)
        recorder.end_recording(runner.summary())
        return recorder, runner
    return _run


class TestMatchRecorder:
    """Tests for recording match events."""

    def test_not_recording_until_started(self, zero_rng, scripted_pair):
        engine = MatchEngine(rng=zero_rng)
        recorder = MatchRecorder()
        recorder.attach(engine)
        engine.play(*scripted_pair()[:2])

        assert not recorder.is_recording
        assert recorder.recording.matches == []

    def test_records_up_to_max_matches(self, recorded_run):
        recorder, _ = recorded_run(trials=10, max_matches=3)
        assert [m["match"] for m in recorder.recording.matches] == [1, 2, 3]

    def test_records_all_matches_under_limit(self, recorded_run):
        recorder, _ = recorded_run(trials=4, max_matches=10)
        assert len(recorder.recording.matches) == 4

    def test_zero_max_matches_records_nothing(self, recorded_run):
        recorder, _ = recorded_run(trials=5, max_matches=0)
        assert recorder.recording.matches == []

    def test_each_match_complete(self, recorded_run):
        recorder, _ = recorded_run()
        for match in recorder.recording.matches:
            types = [e["event_type"] for e in match["events"]]
            assert types[0] == "flagships_placed"
            assert types[-1] == "match_complete"
            assert types.count("torpedo_fired") == 2
            assert types.count("torpedo_guided") == 2

    def test_metadata_and_summary(self, recorded_run):
        recorder, runner = recorded_run(trials=10)
        recording = recorder.recording

        assert recording.your_command_center == "Baseline A"
        assert recording.enemy_command_center == "Baseline B"
        assert recording.trials == 10
        assert recording.seed == 5
        assert recording.recorded_at
        assert recording.summary["trials"] == 10
        assert recording.summary["your_wins"] == runner.your_wins
        assert not recorder.is_recording

    def test_detach_stops_recording(self, zero_rng, scripted_pair):
        engine = MatchEngine(rng=zero_rng)
        recorder = MatchRecorder()
        recorder.start_recording("a", "b", 2)
        recorder.attach(engine)
        you, enemy, _ = scripted_pair()
        engine.play(you, enemy)
        recorder.detach(engine)
        engine.play(you, enemy)

        assert len(recorder.recording.matches) == 1

    def test_save_and_load(self, recorded_run, tmp_path):
        recorder, _ = recorded_run()
        path = recorder.save(str(tmp_path / "nested" / "duel.json"))

        data = load_recording(path)
        assert data["recording_version"] == "1.0"
        assert len(data["matches"]) == 3
        assert data["summary"]["trials"] == 10

    def test_recording_to_json(self):
        recording = MatchRecording(your_command_center="x", trials=1)
        data = json.loads(recording.to_json())
        assert data["your_command_center"] == "x"
        assert data["matches"] == []
