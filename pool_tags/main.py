from __future__ import annotations

import httpx

from pool_tags.api.schemas.contract_tag import ContractTagSchema
from pool_tags.application.dto.return_tags import ReturnTagsInput
from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.infrastructure.clients.pool_subgraph_client import (
    PoolSubgraphClient,
    PoolSubgraphClientSettings,
)
from pool_tags.infrastructure.subgraphs.pipelines import DEFAULT_PIPELINE, get_pipeline
from pool_tags.shared.config import get_settings


def get_return_tags_use_case(
    pipeline_key: str = DEFAULT_PIPELINE,
    *,
    transport: httpx.BaseTransport | None = None,
) -> ReturnTagsUseCase:
    settings = get_settings()
    pipeline = get_pipeline(pipeline_key)
    client = PoolSubgraphClient(
        pipeline,
        PoolSubgraphClientSettings(
            graph_gateway_base=settings.graph_gateway_base,
            graph_subgraph_ids=settings.graph_subgraph_ids.get(pipeline.key, {}),
            timeout_seconds=settings.graph_request_timeout_seconds,
        ),
        transport=transport,
    )
    return ReturnTagsUseCase(pool_page_port=client, pipeline=pipeline)


def return_tags(
    network_id: str,
    credential: str,
    *,
    pipeline: str = DEFAULT_PIPELINE,
    transport: httpx.BaseTransport | None = None,
) -> list[dict[str, str]]:
    use_case = get_return_tags_use_case(pipeline, transport=transport)
    tags = use_case.execute(
        ReturnTagsInput(
            network_id=str(network_id).strip(),
            credential=credential or get_settings().graph_api_key,
        )
    )
    return [ContractTagSchema.from_entity(tag).to_registry() for tag in tags]
