from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PoolToken:
    id: str
    name: str
    symbol: str


@dataclass(frozen=True)
class Pool:
    id: str
    created_timestamp: int | str
    tokens: tuple[PoolToken, ...]
    name: str | None = None
