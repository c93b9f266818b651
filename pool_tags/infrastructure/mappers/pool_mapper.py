from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pool_tags.domain.entities.pool import Pool, PoolToken
from pool_tags.domain.exceptions import SubgraphShapeError


def map_row_to_token(row: Mapping[str, Any]) -> PoolToken:
    return PoolToken(
        id=str(row.get("id") or row.get("address") or ""),
        name=str(row.get("name") or ""),
        symbol=str(row.get("symbol") or ""),
    )


def map_liquidity_pool_row(row: Mapping[str, Any]) -> Pool:
    return Pool(
        id=row["id"],
        created_timestamp=row.get("createdTimestamp"),
        name=row.get("name"),
        tokens=_map_tokens(row, "inputTokens"),
    )


def map_pair_row(row: Mapping[str, Any]) -> Pool:
    return Pool(
        id=row["id"],
        created_timestamp=row.get("createdAtTimestamp"),
        name=row.get("name"),
        tokens=(map_row_to_token(row.get("token0") or {}), map_row_to_token(row.get("token1") or {})),
    )


def map_weighted_pool_row(row: Mapping[str, Any]) -> Pool:
    return Pool(
        id=row.get("address") or row["id"],
        created_timestamp=row.get("createTime"),
        name=row.get("name"),
        tokens=_map_tokens(row, "tokens"),
    )


def _map_tokens(row: Mapping[str, Any], field: str) -> tuple[PoolToken, ...]:
    tokens = tuple(map_row_to_token(token) for token in row.get(field) or [])
    if not tokens:
        raise SubgraphShapeError(f"No data found: pool {row.get('id')} has no {field}.")
    return tokens
