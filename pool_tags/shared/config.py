from __future__ import annotations

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json(name: str) -> dict:
    value = _env(name)
    if not value:
        return {}
    return json.loads(value)


@dataclass(frozen=True)
class Settings:
    graph_api_key: str
    graph_gateway_base: str
    graph_subgraph_ids: dict
    graph_request_timeout_seconds: float


def get_settings() -> Settings:
    subgraphs = {
        "uniswap-v3": {
            "42161": _env("GRAPH_SUBGRAPH_ID_UNISWAP_V3_ARBITRUM", ""),
            "137": _env("GRAPH_SUBGRAPH_ID_UNISWAP_V3_POLYGON", ""),
            "10": _env("GRAPH_SUBGRAPH_ID_UNISWAP_V3_OPTIMISM", ""),
            "42220": _env("GRAPH_SUBGRAPH_ID_UNISWAP_V3_CELO", ""),
        },
        "sushiswap-v2": {
            "1": _env("GRAPH_SUBGRAPH_ID_SUSHISWAP_V2_ETHEREUM", ""),
        },
        "balancer-v2": {
            "100": _env("GRAPH_SUBGRAPH_ID_BALANCER_V2_GNOSIS", ""),
        },
    }
    for pipeline_key, overrides in _json("GRAPH_SUBGRAPH_OVERRIDES").items():
        subgraphs.setdefault(pipeline_key, {}).update(
            {str(network_id): value for network_id, value in overrides.items()}
        )
    return Settings(
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_gateway_base=_env("GRAPH_GATEWAY_BASE", "https://gateway.thegraph.com/api"),
        graph_subgraph_ids=subgraphs,
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "30")),
    )
