"""Shared transaction handling for Store mixins."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from secscope.errors import DependencyError

logger = logging.getLogger(__name__)


class StoreBase:
    """Provide the session guard every mixin writes through."""

    session = None  # set by Store.__init__

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        """Roll back and raise DependencyError when ``action`` hits a storage error."""
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error("Storage error while trying to %s", action, exc_info=True)
            self.session.rollback()
            raise DependencyError(f"Failed to {action}: {exc}") from exc
