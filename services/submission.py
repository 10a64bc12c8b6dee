"""Contact submission endpoints.

Only a simulated endpoint exists: it waits for a fixed delay and always
succeeds. A real forms service plugs in by implementing ``send``.
"""
import asyncio
import logging
from typing import Dict, Protocol

from domain.models import SubmitResult

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 0.6


class SubmissionEndpoint(Protocol):
    async def send(self, payload: Dict[str, str]) -> SubmitResult:
        ...


class SimulatedEndpoint:
    def __init__(self, delay_seconds: float = DEFAULT_DELAY_SECONDS):
        self.delay_seconds = delay_seconds

    async def send(self, payload: Dict[str, str]) -> SubmitResult:
        # No network call; message body is never logged.
        logger.info("Simulated contact submission from %s (company=%r, team_size=%r)",
                    payload.get('email'), payload.get('company'), payload.get('team_size'))
        await asyncio.sleep(self.delay_seconds)
        return SubmitResult(ok=True, detail="simulated")
