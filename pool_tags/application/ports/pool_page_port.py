from __future__ import annotations

from typing import Protocol

from pool_tags.domain.entities.pool import Pool


class PoolPagePort(Protocol):
    def resolve_endpoint(self, *, network_id: str, credential: str) -> str:
        ...

    def fetch_page(self, *, endpoint: str, cursor: int) -> list[Pool]:
        ...
