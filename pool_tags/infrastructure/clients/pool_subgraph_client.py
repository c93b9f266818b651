from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.exceptions import (
    SubgraphQueryError,
    SubgraphResolutionError,
    SubgraphShapeError,
    SubgraphTransportError,
)
from pool_tags.infrastructure.subgraphs.pipelines import PoolTagPipeline


logger = logging.getLogger(__name__)


API_KEY_PLACEHOLDERS = ("[api-key]", "{api_key}")


@dataclass(frozen=True)
class PoolSubgraphClientSettings:
    graph_gateway_base: str
    graph_subgraph_ids: dict
    timeout_seconds: float


class PoolSubgraphClient:
    def __init__(
        self,
        pipeline: PoolTagPipeline,
        settings: PoolSubgraphClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._pipeline = pipeline
        self._settings = settings
        self._transport = transport

    def resolve_endpoint(self, *, network_id: str, credential: str) -> str:
        subgraph_id = str(self._settings.graph_subgraph_ids.get(network_id) or "").strip()
        if not subgraph_id:
            raise SubgraphResolutionError(
                f"Missing subgraph id for pipeline '{self._pipeline.key}' (network_id={network_id})."
            )
        api_key = (credential or "").strip()
        if not api_key and not self._is_keyless_url(subgraph_id):
            raise SubgraphResolutionError("GRAPH_API_KEY is required for subgraph access.")
        return self._build_gateway_url(subgraph_id, api_key)

    def fetch_page(self, *, endpoint: str, cursor: int) -> list[Pool]:
        payload = self._post_graphql(
            url=endpoint,
            query=self._pipeline.query,
            variables={"lastTimestamp": self._pipeline.cursor_type.encode(cursor)},
        )

        data = payload.get("data")
        rows = data.get(self._pipeline.response_field) if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise SubgraphShapeError(
                f"No data found: response has no '{self._pipeline.response_field}' list."
            )

        try:
            pools = [self._pipeline.map_row(row) for row in rows]
        except (AttributeError, KeyError, TypeError) as exc:
            raise SubgraphShapeError(f"No data found: malformed pool row ({exc!r}).") from exc

        logger.debug(
            "pool_subgraph_client: fetched_page pipeline=%s cursor=%s rows=%s",
            self._pipeline.key,
            cursor,
            len(pools),
        )
        return pools

    def _post_graphql(self, *, url: str, query: str, variables: dict) -> dict:
        with httpx.Client(timeout=self._settings.timeout_seconds, transport=self._transport) as client:
            response = client.post(
                url,
                json={"query": query, "variables": variables},
                headers={"Content-Type": "application/json", "Accept": "application/json"},
            )
            if not response.is_success:
                logger.warning(
                    "pool_subgraph_client: http_error pipeline=%s status=%s",
                    self._pipeline.key,
                    response.status_code,
                )
                raise SubgraphTransportError(response.status_code)
            try:
                payload = response.json()
            except ValueError as exc:
                raise SubgraphShapeError("No data found: response body is not JSON.") from exc

        if not isinstance(payload, dict):
            raise SubgraphShapeError("No data found: response body is not a JSON object.")

        errors = payload.get("errors") or []
        if not isinstance(errors, list):
            errors = [errors]
        if errors:
            messages = []
            for err in errors:
                message = str(err.get("message", err)) if isinstance(err, dict) else str(err)
                logger.error(
                    "pool_subgraph_client: graphql_error pipeline=%s message=%s",
                    self._pipeline.key,
                    message,
                )
                messages.append(message)
            raise SubgraphQueryError(messages)

        return payload

    @staticmethod
    def _is_url(subgraph_id: str) -> bool:
        return subgraph_id.startswith("http://") or subgraph_id.startswith("https://")

    def _is_keyless_url(self, subgraph_id: str) -> bool:
        return self._is_url(subgraph_id) and not any(
            placeholder in subgraph_id for placeholder in API_KEY_PLACEHOLDERS
        )

    def _build_gateway_url(self, subgraph_id: str, api_key: str) -> str:
        if self._is_url(subgraph_id):
            url = subgraph_id
            for placeholder in API_KEY_PLACEHOLDERS:
                url = url.replace(placeholder, api_key)
            return url.rstrip("/")
        base = self._settings.graph_gateway_base.rstrip("/")
        return f"{base}/{api_key}/subgraphs/id/{subgraph_id}"
