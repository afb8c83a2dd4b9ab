"""
Tests for progress persistence.
"""

import json

import pytest


@pytest.fixture
def sample_record(mock_pygame_module):
    from gridsnake.games.snake.progress import LevelData, ProgressRecord

    return ProgressRecord(
        max_unlocked_level=3,
        level_data={1: LevelData(4, 50), 2: LevelData(6, 120)},
        hardcore_high_score=260,
        survival_high_score=90,
    )


class TestProgressStore:
    """Tests for the JSON-file store."""

    def test_missing_file_gives_fresh_record(self, progress_path):
        """No file means level 1 unlocked and no scores."""
        from gridsnake.games.snake.progress import ProgressStore

        record = ProgressStore(progress_path).load()

        assert record.max_unlocked_level == 1
        assert record.level_data == {}
        assert record.hardcore_high_score == 0
        assert record.survival_high_score == 0

    def test_round_trip(self, progress_path, sample_record):
        """Saving and reloading yields an identical record."""
        from gridsnake.games.snake.progress import ProgressStore

        assert ProgressStore(progress_path).save(sample_record) is True

        loaded = ProgressStore(progress_path).load()

        assert loaded == sample_record
        assert loaded.level_data[2].snake_length == 6

    def test_document_layout(self, progress_path, sample_record):
        """The file is a single JSON object with string level keys."""
        from gridsnake.games.snake.progress import ProgressStore

        ProgressStore(progress_path).save(sample_record)
        data = json.loads(progress_path.read_text())

        assert data["max_unlocked_level"] == 3
        assert data["level_data"]["1"] == {"snake_length": 4, "score": 50}
        assert data["hardcore_high_score"] == 260
        assert data["survival_high_score"] == 90

    def test_corrupt_file_falls_back(self, progress_path, capsys):
        """Unparseable JSON is logged and replaced by a fresh record."""
        from gridsnake.games.snake.progress import ProgressStore

        progress_path.write_text("{not json")

        record = ProgressStore(progress_path).load()

        assert record.max_unlocked_level == 1
        assert "[Progress] Failed to load" in capsys.readouterr().out

    def test_wrong_shape_falls_back(self, progress_path):
        """Valid JSON with the wrong shape is treated as unreadable."""
        from gridsnake.games.snake.progress import ProgressStore

        progress_path.write_text(json.dumps([1, 2, 3]))
        assert ProgressStore(progress_path).load().max_unlocked_level == 1

        progress_path.write_text(json.dumps({"level_data": {"x": {"score": 1}}}))
        assert ProgressStore(progress_path).load().level_data == {}

    def test_failed_save_is_swallowed(self, tmp_path, sample_record, capsys):
        """A write failure returns False and never raises."""
        from gridsnake.games.snake.progress import ProgressStore

        # A directory cannot be opened for writing
        store = ProgressStore(tmp_path)

        assert store.save(sample_record) is False
        assert "[Progress] Failed to save" in capsys.readouterr().out

    def test_update_max_unlocked_level(self, progress_path):
        """Raising the unlocked level persists immediately."""
        from gridsnake.games.snake.progress import ProgressStore

        store = ProgressStore(progress_path)
        store.load()

        store.update_max_unlocked_level(4)

        assert ProgressStore(progress_path).load().max_unlocked_level == 4

    def test_update_max_unlocked_level_ignores_lower(self, progress_path):
        """Lower or equal levels are a no-op and write nothing."""
        from gridsnake.games.snake.progress import ProgressStore

        store = ProgressStore(progress_path)
        store.load()

        store.update_max_unlocked_level(1)

        assert not progress_path.exists()
        assert store.record.max_unlocked_level == 1

    def test_nested_directory_created(self, tmp_path, sample_record):
        """Saving creates missing parent directories."""
        from gridsnake.games.snake.progress import ProgressStore

        path = tmp_path / "saves" / "progress.json"

        assert ProgressStore(path).save(sample_record) is True
        assert path.exists()


class TestMemoryProgressStore:
    """Tests for the in-memory store."""

    def test_load_returns_copy(self, sample_record):
        """Unsaved edits to a loaded record do not leak into the store."""
        from gridsnake.games.snake.progress import MemoryProgressStore

        store = MemoryProgressStore(sample_record)
        record = store.load()
        record.survival_high_score = 999

        assert store.load().survival_high_score == 90

    def test_save_counts(self, sample_record):
        """Each save is counted and becomes visible to later loads."""
        from gridsnake.games.snake.progress import MemoryProgressStore

        store = MemoryProgressStore()
        store.save(sample_record)

        assert store.save_count == 1
        assert store.load() == sample_record

    def test_engines_share_a_store(self, mock_pygame_module):
        """A level unlocked in one session is visible to the next."""
        import random

        from gridsnake.games.snake.game import SnakeGame
        from gridsnake.games.snake.progress import MemoryProgressStore

        store = MemoryProgressStore()
        first = SnakeGame(store=store, rng=random.Random(5))
        first.score = 120
        first._level_up()
        first._level_up()

        second = SnakeGame(start_level=2, store=store, rng=random.Random(6))

        assert store.load().max_unlocked_level == 3
        assert second.level == 2
        assert second.score == 120
        # Resumed from the level-2 checkpoint, not the default length of 4
        assert len(second.snake) == 3

    def test_level_up_after_another_session_loads(self, mock_pygame_module):
        """A checkpoint survives another engine loading the same store."""
        import random

        from gridsnake.games.snake.game import GameMode, SnakeGame
        from gridsnake.games.snake.progress import LevelData, MemoryProgressStore

        store = MemoryProgressStore()
        classic = SnakeGame(store=store, rng=random.Random(5))
        SnakeGame(mode=GameMode.SURVIVAL, store=store, rng=random.Random(6))
        classic.score = 50

        classic._level_up()

        saved = store.load()
        assert saved.max_unlocked_level == 2
        assert saved.level_data[1] == LevelData(3, 50)
        assert classic.progress.max_unlocked_level == 2

        classic.score = 110
        classic._level_up()

        saved = store.load()
        assert saved.max_unlocked_level == 3
        assert set(saved.level_data) == {1, 2}
