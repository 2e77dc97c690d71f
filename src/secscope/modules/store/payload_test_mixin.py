"""Payload test persistence for Store."""

from sqlalchemy.orm import joinedload

from secscope.errors import ValidationError
from secscope.models import VERDICTS

from .db_models import PayloadTest


class PayloadTestMixin:
    """Provide payload test recording and lookup."""

    def record_payload_test(
        self,
        target_url: str,
        payload: str,
        payload_type: str,
        status: str,
        response_data: str | None = None,
        response_time: int | None = None,
        vulnerability_id: str | None = None,
        executed_by: str = "payload-tester",
    ) -> PayloadTest:
        """Persist the outcome of one payload test."""
        if status not in VERDICTS:
            raise ValidationError(f"status must be one of {', '.join(VERDICTS)}, got '{status}'")
        test = PayloadTest(
            vulnerability_id=vulnerability_id,
            target_url=target_url,
            payload=payload,
            payload_type=payload_type,
            status=status,
            response_data=response_data,
            response_time=response_time,
            executed_by=executed_by,
        )
        with self._guard("store payload test"):
            self.session.add(test)
            self.session.commit()
        return test

    def list_payload_tests(self, vulnerability_ids: list[str]) -> list[PayloadTest]:
        """Return tests run against any of ``vulnerability_ids``, newest first."""
        if not vulnerability_ids:
            return []

        with self._guard("fetch payload tests"):
            return (
                self.session.query(PayloadTest)
                .options(joinedload(PayloadTest.vulnerability))
                .filter(PayloadTest.vulnerability_id.in_(vulnerability_ids))
                .order_by(PayloadTest.executed_at.desc())
                .all()
            )

    def recent_payload_tests(self, limit: int = 20) -> list[PayloadTest]:
        """Return the latest tests across all targets, newest first."""
        with self._guard("fetch payload tests"):
            return (
                self.session.query(PayloadTest)
                .options(joinedload(PayloadTest.vulnerability))
                .order_by(PayloadTest.executed_at.desc())
                .limit(limit)
                .all()
            )
