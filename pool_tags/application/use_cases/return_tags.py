from __future__ import annotations

import logging

from pool_tags.application.dto.return_tags import POOL_PAGE_SIZE, ReturnTagsInput
from pool_tags.application.ports.pool_page_port import PoolPagePort
from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.entities.tag_pipeline import TagPipeline
from pool_tags.domain.exceptions import (
    ContractTagsError,
    SubgraphCursorError,
    TagFetchError,
    UnsupportedNetworkError,
)
from pool_tags.domain.services.contract_tag import build_contract_tag


logger = logging.getLogger(__name__)


class ReturnTagsUseCase:
    def __init__(self, *, pool_page_port: PoolPagePort, pipeline: TagPipeline):
        self._pool_page_port = pool_page_port
        self._pipeline = pipeline

    def execute(self, command: ReturnTagsInput) -> list[ContractTag]:
        network = self._pipeline.get_network(command.network_id)
        if network is None:
            raise UnsupportedNetworkError(
                f"Unsupported network '{command.network_id}' for {self._pipeline.key}; "
                f"expected one of: {', '.join(self._pipeline.network_ids)}"
            )

        endpoint = self._pool_page_port.resolve_endpoint(
            network_id=network.id,
            credential=command.credential,
        )

        tags: list[ContractTag] = []
        cursor = 0
        pages = 0
        try:
            while True:
                rows = self._pool_page_port.fetch_page(endpoint=endpoint, cursor=cursor)
                pages += 1
                for pool in rows:
                    tags.append(build_contract_tag(pool, pipeline=self._pipeline, network=network))

                logger.info(
                    "return_tags: fetched_page pipeline=%s network=%s page=%s rows=%s cursor=%s",
                    self._pipeline.key,
                    network.id,
                    pages,
                    len(rows),
                    cursor,
                )
                if len(rows) < POOL_PAGE_SIZE:
                    break
                cursor = _next_cursor(rows, current=cursor)
        except ContractTagsError as exc:
            raise TagFetchError(f"Failed to fetch pools: {exc}") from exc
        except Exception as exc:
            raise TagFetchError("Failed to fetch pools: unknown error") from exc

        logger.info(
            "return_tags: collected_tags pipeline=%s network=%s pages=%s tags=%s",
            self._pipeline.key,
            network.id,
            pages,
            len(tags),
        )
        return tags


def _next_cursor(rows: list[Pool], *, current: int) -> int:
    raw = rows[-1].created_timestamp
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise SubgraphCursorError(f"Unparsable creation timestamp {raw!r} on pool {rows[-1].id}.") from exc
    if value <= current:
        raise SubgraphCursorError(
            f"Pagination cursor did not advance: last timestamp {value} <= current cursor {current}."
        )
    return value
