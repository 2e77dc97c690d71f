"""Payload library persistence for Store."""

from sqlalchemy import or_

from .db_models import PayloadLibraryEntry


class LibraryMixin:
    """Provide payload library queries and inserts."""

    def add_library_payload(
        self,
        name: str,
        type: str,
        payload: str,
        source: str,
        category: str,
        description: str | None = None,
        source_url: str | None = None,
    ) -> PayloadLibraryEntry:
        entry = PayloadLibraryEntry(
            name=name,
            type=type,
            payload=payload,
            description=description,
            source=source,
            source_url=source_url,
            category=category,
        )
        with self._guard("store library payload"):
            self.session.add(entry)
            self.session.commit()
        return entry

    def has_library_payload(self, payload: str, type: str) -> bool:
        """Return True when the exact (payload, type) pair is already stored."""
        with self._guard("look up library payload"):
            return (
                self.session.query(PayloadLibraryEntry.id)
                .filter_by(payload=payload, type=type)
                .first()
                is not None
            )

    def list_library(
        self, type: str | None = None, category: str | None = None
    ) -> list[PayloadLibraryEntry]:
        """List library payloads, newest first, optionally filtered."""
        with self._guard("list library payloads"):
            query = self.session.query(PayloadLibraryEntry)
            if type:
                query = query.filter_by(type=type)
            if category:
                query = query.filter_by(category=category)
            return query.order_by(PayloadLibraryEntry.created_at.desc()).all()

    def search_library(self, text: str, type: str | None = None) -> list[PayloadLibraryEntry]:
        """Case-insensitive substring search over name, description and payload."""
        with self._guard("search library payloads"):
            query = self.session.query(PayloadLibraryEntry).filter(
                or_(
                    PayloadLibraryEntry.name.icontains(text, autoescape=True),
                    PayloadLibraryEntry.description.icontains(text, autoescape=True),
                    PayloadLibraryEntry.payload.icontains(text, autoescape=True),
                )
            )
            if type:
                query = query.filter_by(type=type)
            return query.order_by(PayloadLibraryEntry.created_at.desc()).all()
