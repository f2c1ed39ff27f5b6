# dupchecker/database/manager.py
import logging
import sqlite3
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from ..config import INDEX_TABLE
from ..errors import StorageFatalError
from ..models.image_record import ImageRecord
from ..models.index_entry import DedupIndexEntry, InsertOutcome
from .init import apply_pragmas, init_db_if_needed
from .schema import INDEX_SCHEMA

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome counts of one committed batch."""
    inserted: int = 0
    duplicates: int = 0
    # (duplicate path, path already in the index)
    duplicate_pairs: List[tuple] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return self.inserted + self.duplicates


class DedupIndex:
    """Manages the SQLite fingerprint -> path table."""

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        init_db_if_needed(self.db_path)
        try:
            self.conn = sqlite3.connect(str(self.db_path))
            apply_pragmas(self.conn)
        except sqlite3.Error as e:
            raise StorageFatalError(f"Cannot open index {self.db_path}: {e}") from e

    def get_connection(self) -> sqlite3.Connection:
        return self.conn

    def close(self) -> None:
        try:
            self.conn.close()
        except sqlite3.Error as e:
            logger.debug("Ignoring error while closing %s: %s", self.db_path, e)

    def __enter__(self) -> 'DedupIndex':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def ensure_schema(self) -> None:
        """Create the index table if it does not exist yet."""
        try:
            self.conn.executescript(INDEX_SCHEMA)
            self.conn.commit()
        except sqlite3.Error as e:
            raise StorageFatalError(f"Cannot create schema in {self.db_path}: {e}") from e

    def try_insert(self, fingerprint: str, path: str) -> InsertOutcome:
        """
        Record path for fingerprint unless the fingerprint is already known.

        Runs inside whatever transaction is open on the connection; callers
        outside commit_batch must commit themselves.
        """
        cursor = self.conn.execute(
            f"INSERT OR IGNORE INTO {INDEX_TABLE} (fingerprint, path) VALUES (?, ?)",
            (fingerprint, path),
        )
        if cursor.rowcount == 1:
            return InsertOutcome.INSERTED
        return InsertOutcome.ALREADY_PRESENT

    def commit_batch(self, records: Iterable[ImageRecord]) -> BatchResult:
        """
        Apply every hashed record in a single transaction.

        Either all insert attempts are committed or none are. Records that
        did not hash are ignored.
        """
        result = BatchResult()
        try:
            with self.conn:
                for rec in records:
                    if not rec.ok:
                        continue
                    outcome = self.try_insert(rec.fingerprint, rec.path)
                    if outcome is InsertOutcome.INSERTED:
                        result.inserted += 1
                    else:
                        result.duplicates += 1
                        existing = self._lookup_path(rec.fingerprint)
                        result.duplicate_pairs.append((rec.path, existing))
                        logger.debug("Duplicate: %s matches %s", rec.path, existing)
        except sqlite3.Error as e:
            raise StorageFatalError(f"Commit to {self.db_path} failed: {e}") from e

        logger.info("Committed batch: %d inserted, %d duplicates",
                    result.inserted, result.duplicates)
        return result

    def _lookup_path(self, fingerprint: str) -> Optional[str]:
        row = self.conn.execute(
            f"SELECT path FROM {INDEX_TABLE} WHERE fingerprint = ?", (fingerprint,)
        ).fetchone()
        return row[0] if row else None

    def lookup(self, fingerprint: str) -> Optional[DedupIndexEntry]:
        row = self.conn.execute(
            f"SELECT id, fingerprint, path FROM {INDEX_TABLE} WHERE fingerprint = ?",
            (fingerprint,),
        ).fetchone()
        return DedupIndexEntry(*row) if row else None

    def all_entries(self) -> List[DedupIndexEntry]:
        """Full scan of the index in insertion order."""
        rows = self.conn.execute(
            f"SELECT id, fingerprint, path FROM {INDEX_TABLE} ORDER BY id"
        ).fetchall()
        return [DedupIndexEntry(*row) for row in rows]

    def count(self) -> int:
        return self.conn.execute(f"SELECT COUNT(*) FROM {INDEX_TABLE}").fetchone()[0]
