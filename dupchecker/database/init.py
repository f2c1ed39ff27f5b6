from pathlib import Path
import sqlite3

from ..errors import StorageFatalError
from .schema import INDEX_SCHEMA, PRAGMAS


def apply_pragmas(conn: sqlite3.Connection) -> None:
    for pragma in PRAGMAS:
        conn.execute(pragma)


def init_db_if_needed(db_path: Path) -> None:
    """Create the index file and its table if either is missing."""
    db_path = Path(db_path)
    try:
        conn = sqlite3.connect(str(db_path))
    except sqlite3.Error as e:
        raise StorageFatalError(f"Cannot open index {db_path}: {e}") from e
    try:
        apply_pragmas(conn)
        conn.executescript(INDEX_SCHEMA)
        conn.commit()
    except sqlite3.Error as e:
        raise StorageFatalError(f"Cannot create schema in {db_path}: {e}") from e
    finally:
        conn.close()
