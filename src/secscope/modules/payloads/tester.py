"""Payload test service: classify a payload and record the outcome."""

import logging
from dataclasses import dataclass
from typing import Any

from secscope.errors import DependencyError, NotFoundError, ValidationError
from secscope.modules.store import Store

from .classifier import PayloadClassifier, PayloadVerdict

logger = logging.getLogger(__name__)

EXECUTED_BY = "payload-tester"


@dataclass(frozen=True, slots=True)
class PayloadTestOutcome:
    test_id: str | None
    target: str
    payload: str
    payload_type: str
    result: PayloadVerdict

    def to_dict(self) -> dict[str, Any]:
        return {
            "testId": self.test_id,
            "target": self.target,
            "payload": self.payload,
            "payloadType": self.payload_type,
            "result": self.result.to_dict(),
        }


class PayloadTester:
    """Runs the lexical classifier and persists a PayloadTest row per run."""

    def __init__(self, store: Store, classifier: PayloadClassifier | None = None):
        self.store = store
        self.classifier = classifier or PayloadClassifier()

    def run(
        self,
        target: str,
        payload: str,
        payload_type: str,
        vulnerability_id: str | None = None,
    ) -> PayloadTestOutcome:
        if not target or not payload or not payload_type:
            raise ValidationError("Target, payload, and payload type are required")
        if vulnerability_id and self.store.get_vulnerability(vulnerability_id) is None:
            raise NotFoundError("Vulnerability not found")

        logger.info("Testing %s payload on target: %s", payload_type, target)
        verdict = self.classifier.classify(target, payload_type, payload)

        try:
            test = self.store.record_payload_test(
                target_url=target,
                payload=payload,
                payload_type=payload_type,
                status=verdict.status,
                response_data=verdict.response,
                response_time=verdict.response_time,
                vulnerability_id=vulnerability_id or None,
                executed_by=EXECUTED_BY,
            )
            test_id = test.id
        except DependencyError:
            logger.error("Error storing test result for %s", target, exc_info=True)
            test_id = None

        return PayloadTestOutcome(
            test_id=test_id,
            target=target,
            payload=payload,
            payload_type=payload_type,
            result=verdict,
        )
