from __future__ import annotations

import logging
import re

from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.entities.pool import Pool, PoolToken
from pool_tags.domain.entities.tag_pipeline import PipelineNetwork, TagPipeline


logger = logging.getLogger(__name__)


ADDRESS_NAMESPACE = "eip155"

_MARKUP_PATTERN = re.compile(r"<\s*/?\s*[A-Za-z!][^<>]*>")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def build_contract_address(network_id: str, pool_address: str) -> str:
    return f"{ADDRESS_NAMESPACE}:{network_id}:{pool_address}"


def build_public_name(pool: Pool) -> str:
    if pool.name and pool.name.strip():
        return pool.name.strip()
    symbols = "/".join(token.symbol for token in pool.tokens)
    return f"{symbols} Pool"


def build_public_note(pool: Pool, *, project_name: str, network: PipelineNetwork) -> str:
    if len(pool.tokens) > 2:
        ordered = sorted(pool.tokens, key=lambda token: token.symbol)
        listed = [_describe_token(token) for token in ordered]
        tokens_text = f"pool of {', '.join(listed[:-1])} and {listed[-1]}"
    else:
        tokens_text = f"{' / '.join(_describe_token(token) for token in pool.tokens)} pair"
    return f"The liquidity pool contract on {network.name} for the {tokens_text} on {project_name}."


def contains_markup(text: str) -> bool:
    return _MARKUP_PATTERN.search(text) is not None


def strip_markup(text: str) -> str:
    stripped = text
    # Removing one tag can join the pieces of another.
    while contains_markup(stripped):
        stripped = _MARKUP_PATTERN.sub(" ", stripped)
    return _WHITESPACE_PATTERN.sub(" ", stripped).strip()


def build_contract_tag(pool: Pool, *, pipeline: TagPipeline, network: PipelineNetwork) -> ContractTag:
    """Map one pool into the registry tag; same input always gives the same tag."""
    public_name = _sanitize(build_public_name(pool), field="public_name", pool_id=pool.id)
    public_note = _sanitize(
        build_public_note(pool, project_name=pipeline.project_name, network=network),
        field="public_note",
        pool_id=pool.id,
    )
    return ContractTag(
        contract_address=build_contract_address(network.id, pool.id),
        public_name=public_name,
        project_name=pipeline.project_name,
        website_link=pipeline.website_template.format(
            address=pool.id,
            network=network.website_slug,
        ),
        public_note=public_note,
    )


def _describe_token(token: PoolToken) -> str:
    if not token.name.strip():
        return token.symbol
    return f"{token.name} ({token.symbol})"


def _sanitize(text: str, *, field: str, pool_id: str) -> str:
    if not contains_markup(text):
        return text
    cleaned = strip_markup(text)
    assert not contains_markup(cleaned)
    logger.warning(
        "contract_tag: markup_stripped field=%s pool=%s original=%r cleaned=%r",
        field,
        pool_id,
        text,
        cleaned,
    )
    return cleaned
