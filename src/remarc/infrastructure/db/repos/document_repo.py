from __future__ import annotations

import json
import sqlite3
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Protocol

from remarc.core.errors import DocumentSinkError
from remarc.domain.models.item import StoredDocument
from remarc.infrastructure.db.sqlite import connect


class DocumentSink(Protocol):
    def insert(self, collection: str, document: Mapping[str, Any]) -> None: ...


class DocumentRepo:
    """SQLite-backed document collections; every insert adds a new row."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path

    def insert(self, collection: str, document: Mapping[str, Any]) -> None:
        item_id = document.get("id")
        if item_id is None:
            raise DocumentSinkError("Document is missing an id")
        content = {k: v for k, v in document.items() if k not in ("id", "theme", "decade")}

        try:
            with connect(self.db_path) as conn:
                conn.execute(
                    """
                    INSERT INTO documents (
                        row_id,
                        collection,
                        item_id,
                        theme,
                        decade,
                        content_json,
                        inserted_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        str(uuid.uuid4()),
                        collection,
                        item_id,
                        document.get("theme"),
                        document.get("decade"),
                        json.dumps(content, ensure_ascii=False),
                        datetime.now(timezone.utc).replace(microsecond=0).isoformat(),
                    ),
                )
                conn.commit()
        except sqlite3.Error as exc:
            raise DocumentSinkError(f"Could not insert {item_id} into {collection}: {exc}") from exc

    def list(self, collection: str, limit: int = 100) -> list[StoredDocument]:
        with connect(self.db_path) as conn:
            rows = conn.execute(
                """
                SELECT * FROM documents
                WHERE collection = ?
                ORDER BY inserted_at DESC, rowid DESC
                LIMIT ?
                """,
                (collection, limit),
            ).fetchall()
        return [self._to_model(row) for row in rows]

    def count(self, collection: str | None = None) -> int:
        with connect(self.db_path) as conn:
            if collection is None:
                row = conn.execute("SELECT COUNT(*) AS n FROM documents").fetchone()
            else:
                row = conn.execute(
                    "SELECT COUNT(*) AS n FROM documents WHERE collection = ?",
                    (collection,),
                ).fetchone()
        return int(row["n"])

    @staticmethod
    def _to_model(row) -> StoredDocument:
        return StoredDocument(
            row_id=row["row_id"],
            collection=row["collection"],
            item_id=row["item_id"],
            theme=row["theme"],
            decade=row["decade"],
            content=json.loads(row["content_json"]),
            inserted_at=row["inserted_at"],
        )
