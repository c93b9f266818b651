from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pool_tags.application.dto.return_tags import POOL_PAGE_SIZE
from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.entities.tag_pipeline import PipelineNetwork, TagPipeline
from pool_tags.domain.exceptions import UnknownPipelineError
from pool_tags.infrastructure.mappers.pool_mapper import (
    map_liquidity_pool_row,
    map_pair_row,
    map_weighted_pool_row,
)


class CursorType(str, Enum):
    INT = "Int"
    BIG_INT = "BigInt"

    def encode(self, value: int) -> int | str:
        # BigInt is a string scalar on the wire.
        if self is CursorType.BIG_INT:
            return str(int(value))
        return int(value)


@dataclass(frozen=True)
class PoolTagPipeline(TagPipeline):
    query: str
    response_field: str
    cursor_type: CursorType
    map_row: Callable[[Mapping[str, Any]], Pool]


UNISWAP_V3_QUERY = f"""
query LiquidityPools($lastTimestamp: BigInt!) {{
  liquidityPools(
    first: {POOL_PAGE_SIZE},
    orderBy: createdTimestamp,
    orderDirection: asc,
    where: {{ createdTimestamp_gt: $lastTimestamp }}
  ) {{
    id
    name
    createdTimestamp
    inputTokens {{
      id
      name
      symbol
    }}
  }}
}}
"""

SUSHISWAP_V2_QUERY = f"""
query Pairs($lastTimestamp: BigInt!) {{
  pairs(
    first: {POOL_PAGE_SIZE},
    orderBy: createdAtTimestamp,
    orderDirection: asc,
    where: {{ createdAtTimestamp_gt: $lastTimestamp }}
  ) {{
    id
    name
    createdAtTimestamp
    token0 {{
      id
      name
      symbol
    }}
    token1 {{
      id
      name
      symbol
    }}
  }}
}}
"""

BALANCER_V2_QUERY = f"""
query Pools($lastTimestamp: Int!) {{
  pools(
    first: {POOL_PAGE_SIZE},
    orderBy: createTime,
    orderDirection: asc,
    where: {{ createTime_gt: $lastTimestamp }}
  ) {{
    id
    address
    name
    createTime
    tokens {{
      address
      name
      symbol
    }}
  }}
}}
"""


UNISWAP_V3 = PoolTagPipeline(
    key="uniswap-v3",
    project_name="Uniswap v3",
    website_template="https://app.uniswap.org/explore/pools/{network}/{address}",
    networks=(
        PipelineNetwork(id="42161", name="Arbitrum One", website_slug="arbitrum"),
        PipelineNetwork(id="137", name="Polygon", website_slug="polygon"),
        PipelineNetwork(id="10", name="Optimism", website_slug="optimism"),
        PipelineNetwork(id="42220", name="Celo", website_slug="celo"),
    ),
    query=UNISWAP_V3_QUERY,
    response_field="liquidityPools",
    cursor_type=CursorType.BIG_INT,
    map_row=map_liquidity_pool_row,
)

SUSHISWAP_V2 = PoolTagPipeline(
    key="sushiswap-v2",
    project_name="SushiSwap v2",
    website_template="https://www.sushi.com/{network}/pool/v2/{address}",
    networks=(PipelineNetwork(id="1", name="Ethereum", website_slug="ethereum"),),
    query=SUSHISWAP_V2_QUERY,
    response_field="pairs",
    cursor_type=CursorType.BIG_INT,
    map_row=map_pair_row,
)

BALANCER_V2 = PoolTagPipeline(
    key="balancer-v2",
    project_name="Balancer v2",
    website_template="https://balancer.fi/pools/{network}/v2/{address}",
    networks=(PipelineNetwork(id="100", name="Gnosis", website_slug="gnosis"),),
    query=BALANCER_V2_QUERY,
    response_field="pools",
    cursor_type=CursorType.INT,
    map_row=map_weighted_pool_row,
)

PIPELINES: Mapping[str, PoolTagPipeline] = {
    pipeline.key: pipeline for pipeline in (UNISWAP_V3, SUSHISWAP_V2, BALANCER_V2)
}

DEFAULT_PIPELINE = UNISWAP_V3.key


def get_pipeline(key: str) -> PoolTagPipeline:
    pipeline = PIPELINES.get(key.strip().lower())
    if pipeline is None:
        raise UnknownPipelineError(
            f"Unknown pipeline '{key}'; expected one of: {', '.join(PIPELINES)}"
        )
    return pipeline
