"""
Key-value storage port for client-owned records, and the game statistics kept on it.

The game engine never touches storage. Callers pick an adapter: in-memory for
tests and embedding, or the database-backed one used by the API.
"""
import logging
import threading
from typing import Callable, Dict, Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ninetoes.core.exceptions import GameNotFinished, StatsNotFound
from ninetoes.models.stored_value import StoredValue
from ninetoes.schemas.game import GameState, Outcome
from ninetoes.schemas.stats import Stats

logger = logging.getLogger(__name__)

MAX_UPDATE_ATTEMPTS = 3


class KeyValueStore(Protocol):
    def read(self, key: str) -> Optional[str]: ...

    def write(self, key: str, value: str) -> None: ...

    def update(self, key: str, change: Callable[[Optional[str]], str]) -> str:
        """Replace the value under ``key`` with ``change(current)`` atomically."""
        ...

    def delete(self, key: str) -> bool: ...


class MemoryStore:
    def __init__(self):
        self._values: Dict[str, str] = {}
        self._lock = threading.Lock()

    def read(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def write(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value

    def update(self, key: str, change: Callable[[Optional[str]], str]) -> str:
        with self._lock:
            value = change(self._values.get(key))
            self._values[key] = value
            return value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._values.pop(key, None) is not None


class DatabaseStore:
    """Stores values in the ``stored_values`` table, one row per key."""

    def __init__(self, db: Session):
        self.db = db

    def read(self, key: str) -> Optional[str]:
        row = self.db.query(StoredValue).filter(StoredValue.key == key).first()
        return row.value if row else None

    def write(self, key: str, value: str) -> None:
        self.update(key, lambda _: value)

    def update(self, key: str, change: Callable[[Optional[str]], str]) -> str:
        """
        Read, change and write one value in a single transaction.

        The row is write-locked before it is read, so concurrent updates of
        the same key apply one after another. A key created by another
        transaction in the meantime is retried against the new row.
        """
        for attempt in range(1, MAX_UPDATE_ATTEMPTS + 1):
            try:
                return self._update_once(key, change)
            except IntegrityError:
                self.db.rollback()
                if attempt == MAX_UPDATE_ATTEMPTS:
                    raise
                logger.warning(f"Key '{key}' was created concurrently, retrying (attempt {attempt})")
            except Exception:
                self.db.rollback()
                raise

    def _update_once(self, key: str, change: Callable[[Optional[str]], str]) -> str:
        # A no-op UPDATE takes the write lock; SQLite ignores FOR UPDATE.
        touched = self.db.query(StoredValue).filter(StoredValue.key == key).update(
            {StoredValue.value: StoredValue.value}, synchronize_session=False
        )
        row = None
        if touched:
            row = self.db.query(StoredValue).filter(
                StoredValue.key == key
            ).with_for_update().populate_existing().first()

        value = change(row.value if row else None)
        if row:
            row.value = value
        else:
            self.db.add(StoredValue(key=key, value=value))
        self.db.commit()
        return value

    def delete(self, key: str) -> bool:
        deleted = self.db.query(StoredValue).filter(StoredValue.key == key).delete()
        self.db.commit()
        return deleted > 0


def add_result(stats: Stats, state: GameState, use_cube: bool = False) -> Stats:
    """Fold one finished game into the totals. Wins score the cube value when it is in play."""
    if not state.is_over:
        raise GameNotFinished("Only finished games can be recorded")

    points = state.cube_value if use_cube else 1
    x_won = state.result == Outcome.X
    o_won = state.result == Outcome.O
    return Stats(
        games=stats.games + 1,
        x_wins=stats.x_wins + int(x_won),
        o_wins=stats.o_wins + int(o_won),
        draws=stats.draws + int(state.result == Outcome.DRAW),
        x_points=stats.x_points + (points if x_won else 0),
        o_points=stats.o_points + (points if o_won else 0),
    )


class StatsService:
    def load(self, store: KeyValueStore, key: str) -> Stats:
        raw = store.read(key)
        if raw is None:
            raise StatsNotFound(f"No statistics stored under '{key}'")
        return Stats.model_validate_json(raw)

    def load_or_empty(self, store: KeyValueStore, key: str) -> Stats:
        try:
            return self.load(store, key)
        except StatsNotFound:
            return Stats()

    def record_game(self, store: KeyValueStore, key: str, state: GameState,
                    use_cube: bool = False) -> Stats:
        def fold(raw: Optional[str]) -> str:
            stats = Stats() if raw is None else Stats.model_validate_json(raw)
            return add_result(stats, state, use_cube).model_dump_json()

        stats = Stats.model_validate_json(store.update(key, fold))
        logger.info(
            f"Recorded {state.result.value} under '{key}': "
            f"{stats.games} games, X {stats.x_wins} ({stats.x_points} pts), "
            f"O {stats.o_wins} ({stats.o_points} pts), {stats.draws} draws"
        )
        return stats

    def reset(self, store: KeyValueStore, key: str) -> None:
        if not store.delete(key):
            raise StatsNotFound(f"No statistics stored under '{key}'")
        logger.info(f"Cleared statistics under '{key}'")


stats_service_obj = StatsService()
