from __future__ import annotations

from dataclasses import dataclass


POOL_PAGE_SIZE = 1000


@dataclass(frozen=True)
class ReturnTagsInput:
    network_id: str
    credential: str
