"""
Slot Eligibility
================

Runs the slot matcher over every registered slot for an incoming session
request. Selection among eligible slots (load balancing, tie-breaking)
is left to the caller.

Large slot sets are checked on a thread pool; the matcher is pure, so
checks need no locking and results come back in input order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Mapping, Optional

from ..capabilities import Capabilities
from ..config import SlotgridSettings
from ..matching.matcher import DEFAULT_MATCHER, DefaultSlotMatcher, SlotMatcher
from .models import Slot

logger = logging.getLogger(__name__)


class SlotEvaluator:
    """Builds the set of slots able to host a requested session."""

    def __init__(
        self,
        matcher: Optional[SlotMatcher] = None,
        parallel_threshold: int = 256,
        max_workers: int = 8,
    ) -> None:
        self.matcher = matcher or DEFAULT_MATCHER
        self.parallel_threshold = max(1, parallel_threshold)
        self.max_workers = max(1, max_workers)

    @classmethod
    def from_settings(cls, settings: SlotgridSettings) -> "SlotEvaluator":
        return cls(
            matcher=settings.build_matcher(),
            parallel_threshold=settings.parallel_threshold,
            max_workers=settings.max_workers,
        )

    def is_eligible(self, slot: Slot, requested: Mapping[str, Any]) -> bool:
        """Check a single slot, logging the reason when it is rejected."""
        if isinstance(self.matcher, DefaultSlotMatcher):
            reason = self.matcher.explain(slot.capabilities, requested)
            if reason is not None:
                logger.debug("Slot %s rejected: %s", slot.key, reason)
            return reason is None
        return self.matcher.matches(slot.capabilities, requested)

    def eligible_slots(self, slots: Iterable[Slot], requested: Mapping[str, Any]) -> List[Slot]:
        """Return every slot whose stereotype satisfies ``requested``.

        Args:
            slots: Registered slots to consider.
            requested: Capabilities from the new session request.

        Returns:
            Matching slots, in the order they were given.

        Raises:
            CapabilitiesFormatError: if ``requested`` has non-string keys.
        """
        requested = Capabilities.of(requested)
        candidates = list(slots)

        if len(candidates) >= self.parallel_threshold and self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                verdicts = list(pool.map(lambda s: self.is_eligible(s, requested), candidates))
        else:
            verdicts = [self.is_eligible(s, requested) for s in candidates]

        eligible = [slot for slot, ok in zip(candidates, verdicts) if ok]

        if candidates and not eligible:
            logger.info(
                "No slot among %d satisfies requested capabilities %s",
                len(candidates), requested.to_json(),
            )
        else:
            logger.debug("%d of %d slots eligible", len(eligible), len(candidates))
        return eligible

    def supports(self, slots: Iterable[Slot], requested: Mapping[str, Any]) -> bool:
        """True if at least one slot could ever host ``requested``.

        Lets a caller reject a request up front instead of queueing a
        session no registered slot can run.
        """
        requested = Capabilities.of(requested)
        return any(self.matcher.matches(slot.capabilities, requested) for slot in slots)
