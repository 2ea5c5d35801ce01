# spacedash/normalizers/base.py
from typing import List, Protocol
from .types import NormalizedEvent, RawPayload

class EventNormalizer(Protocol):
    def normalize(self, payload: RawPayload) -> List[NormalizedEvent]:
        """Return events in discovery order. Must not raise on odd payloads."""
        ...
