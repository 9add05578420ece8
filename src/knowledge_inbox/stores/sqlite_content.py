# src/knowledge_inbox/stores/sqlite_content.py
"""SQLite content store implementation."""

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path

from knowledge_inbox.models import Chunk, ChunkRecord, Item, ItemType
from knowledge_inbox.stores.base import ContentStore

_CHUNK_RECORD_COLUMNS = """
    c.id, c.item_id, c.content, c.chunk_index, c.embedding_ref, i.type, i.metadata
"""


def _to_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def _from_millis(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


class SQLiteContentStore(ContentStore):
    """SQLite-based content store.

    Items and chunks live in two tables; deleting an item cascades to its
    chunks. Timestamps are stored as epoch milliseconds.
    """

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS items (
                    id TEXT PRIMARY KEY,
                    type TEXT NOT NULL,
                    content TEXT NOT NULL,
                    metadata TEXT NOT NULL,
                    created_at INTEGER NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS chunks (
                    id TEXT PRIMARY KEY,
                    item_id TEXT NOT NULL REFERENCES items(id) ON DELETE CASCADE,
                    content TEXT NOT NULL,
                    chunk_index INTEGER NOT NULL,
                    embedding_ref INTEGER
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_chunks_item ON chunks(item_id)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_items_created ON items(created_at)")
            conn.commit()

    def insert_item(self, item: Item) -> None:
        """Store a new item."""
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO items (id, type, content, metadata, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    item.id,
                    item.type.value,
                    item.content,
                    json.dumps(item.metadata),
                    _to_millis(item.created_at),
                ),
            )
            conn.commit()

    def insert_chunk(self, chunk: Chunk) -> None:
        """Store a new chunk."""
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO chunks (id, item_id, content, chunk_index, embedding_ref)
                VALUES (?, ?, ?, ?, ?)
                """,
                (chunk.id, chunk.item_id, chunk.content, chunk.chunk_index, chunk.embedding_ref),
            )
            conn.commit()

    def set_embedding_ref(self, chunk_id: str, embedding_id: int) -> None:
        with self._connect() as conn:
            conn.execute(
                "UPDATE chunks SET embedding_ref = ? WHERE id = ?",
                (embedding_id, chunk_id),
            )
            conn.commit()

    def get_all_items(self) -> list[Item]:
        """Get every item, newest first."""
        with self._connect() as conn:
            cursor = conn.execute(
                """
                SELECT id, type, content, metadata, created_at FROM items
                ORDER BY created_at DESC, rowid DESC
                """
            )
            return [self._row_to_item(row) for row in cursor.fetchall()]

    def get_item(self, item_id: str) -> Item | None:
        """Retrieve an item by ID."""
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT id, type, content, metadata, created_at FROM items WHERE id = ?",
                (item_id,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return self._row_to_item(row)

    def get_chunks_by_ids(self, chunk_ids: list[str]) -> list[ChunkRecord]:
        """Retrieve chunks joined with their item, in the order requested."""
        if not chunk_ids:
            return []
        placeholders = ",".join("?" * len(chunk_ids))
        with self._connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_CHUNK_RECORD_COLUMNS}
                FROM chunks c JOIN items i ON c.item_id = i.id
                WHERE c.id IN ({placeholders})
                """,
                chunk_ids,
            )
            found = {row[0]: self._row_to_record(row) for row in cursor.fetchall()}
        return [found[chunk_id] for chunk_id in chunk_ids if chunk_id in found]

    def get_all_chunks(self) -> list[ChunkRecord]:
        """Get every chunk, ordered by item creation then chunk index."""
        with self._connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_CHUNK_RECORD_COLUMNS}
                FROM chunks c JOIN items i ON c.item_id = i.id
                ORDER BY i.created_at ASC, i.rowid ASC, c.chunk_index ASC
                """
            )
            return [self._row_to_record(row) for row in cursor.fetchall()]

    def count_items(self) -> int:
        with self._connect() as conn:
            cursor = conn.execute("SELECT COUNT(id) FROM items")
            count = cursor.fetchone()
            return count[0] if count else 0

    def count_chunks(self) -> int:
        with self._connect() as conn:
            cursor = conn.execute("SELECT COUNT(id) FROM chunks")
            count = cursor.fetchone()
            return count[0] if count else 0

    @staticmethod
    def _row_to_item(row: tuple) -> Item:
        return Item(
            id=row[0],
            type=ItemType(row[1]),
            content=row[2],
            metadata=json.loads(row[3]),
            created_at=_from_millis(row[4]),
        )

    @staticmethod
    def _row_to_record(row: tuple) -> ChunkRecord:
        return ChunkRecord(
            id=row[0],
            item_id=row[1],
            content=row[2],
            chunk_index=row[3],
            embedding_ref=row[4],
            item_type=ItemType(row[5]),
            item_metadata=json.loads(row[6]),
        )
