"""Lexical payload verdict classifier.

The classifier never contacts the target: the verdict depends only on the
payload text and a draw from the injected random source.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from secscope.errors import ClassificationFailure

from .indicators import DEFAULT_THRESHOLDS, GENERIC_TYPE, INDICATOR_SETS, IndicatorSet

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]


@dataclass(frozen=True, slots=True)
class PayloadVerdict:
    """Outcome of classifying one payload."""

    status: str  # success | failed | blocked
    response: str
    response_time: int  # milliseconds
    details: str

    def to_dict(self) -> dict[str, str | int]:
        return {
            "status": self.status,
            "response": self.response,
            "responseTime": self.response_time,
            "details": self.details,
        }


def _elapsed_ms(start: float) -> int:
    return max(0, int((time.perf_counter() - start) * 1000))


class PayloadClassifier:
    """Map (payload type, payload text) to a success/blocked/failed verdict."""

    def __init__(
        self,
        thresholds: Mapping[str, float] | None = None,
        random_source: RandomSource = random.random,
    ):
        self.thresholds = dict(DEFAULT_THRESHOLDS)
        if thresholds:
            self.thresholds.update(thresholds)
        self.random_source = random_source

    def classify(self, target: str, payload_type: str, payload: str) -> PayloadVerdict:
        """Classify ``payload``; ``target`` is recorded by callers but never contacted."""
        start = time.perf_counter()
        try:
            status, response, details = self._evaluate(payload_type, payload)
        except Exception as exc:
            logger.warning("Payload classification failed for %s: %s", target, exc)
            return PayloadVerdict(
                status="failed",
                response=f"Error: {exc}",
                response_time=_elapsed_ms(start),
                details="Payload execution failed due to error",
            )

        return PayloadVerdict(
            status=status,
            response=response,
            response_time=_elapsed_ms(start),
            details=details or "Payload execution completed",
        )

    def _draw(self) -> float:
        value = self.random_source()
        if not isinstance(value, (int, float)) or not 0 <= value <= 1:
            raise ClassificationFailure(f"random source returned {value!r}, expected [0, 1]")
        return float(value)

    def _threshold(self, payload_type: str) -> float:
        return self.thresholds.get(payload_type, self.thresholds[GENERIC_TYPE])

    def _evaluate(self, payload_type: str, payload: str) -> tuple[str, str, str]:
        if not isinstance(payload, str):
            raise ClassificationFailure(f"payload must be text, got {type(payload).__name__}")

        indicator = INDICATOR_SETS.get(payload_type)
        if indicator is None:
            return self._evaluate_generic(payload_type)
        return self._evaluate_indicator(indicator, payload)

    def _evaluate_indicator(self, indicator: IndicatorSet, payload: str) -> tuple[str, str, str]:
        logger.debug("Testing %s payload: %s", indicator.payload_type, payload)
        if not indicator.matches(payload):
            return "failed", indicator.normal_response, indicator.normal_details

        hit = self._draw() > self._threshold(indicator.payload_type)
        status = "success" if hit else indicator.miss_status
        response = indicator.hit_response.replace("{payload}", payload)
        return status, response, indicator.hit_details

    def _evaluate_generic(self, payload_type: str) -> tuple[str, str, str]:
        logger.debug("Testing generic payload of type %r", payload_type)
        success = self._draw() > self._threshold(payload_type)
        if success:
            response = (
                "HTTP/1.1 200 OK\nContent-Type: text/html\n\n"
                "<html><body>Payload executed</body></html>"
            )
            return "success", response, "Generic payload test succeeded"
        response = (
            "HTTP/1.1 400 Bad Request\nContent-Type: text/html\n\n"
            "<html><body>Payload blocked</body></html>"
        )
        return "failed", response, "Generic payload test failed"
