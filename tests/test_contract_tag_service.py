from __future__ import annotations

import unittest

from pool_tags.domain.entities.pool import Pool, PoolToken
from pool_tags.domain.entities.tag_pipeline import PipelineNetwork, TagPipeline
from pool_tags.domain.services.contract_tag import (
    build_contract_address,
    build_contract_tag,
    build_public_name,
    contains_markup,
    strip_markup,
)


ARBITRUM = PipelineNetwork(id="42161", name="Arbitrum One", website_slug="arbitrum")

PIPELINE = TagPipeline(
    key="uniswap-v3",
    project_name="Uniswap v3",
    website_template="https://app.uniswap.org/explore/pools/{network}/{address}",
    networks=(ARBITRUM,),
)


def _pool(*, pool_id: str = "0xabc", name: str | None = None, tokens: list[tuple[str, str]]) -> Pool:
    return Pool(
        id=pool_id,
        created_timestamp="1700000000",
        name=name,
        tokens=tuple(
            PoolToken(id=f"0x{symbol.lower()}", name=token_name, symbol=symbol)
            for token_name, symbol in tokens
        ),
    )


class ContractTagServiceTests(unittest.TestCase):
    def test_contract_address_is_namespaced_with_network(self):
        self.assertEqual(build_contract_address("42161", "0xabc"), "eip155:42161:0xabc")

    def test_two_token_pool_tag(self):
        pool = _pool(tokens=[("Wrapped Ether", "WETH"), ("USD Coin", "USDC")])

        tag = build_contract_tag(pool, pipeline=PIPELINE, network=ARBITRUM)

        self.assertEqual(tag.contract_address, "eip155:42161:0xabc")
        self.assertEqual(tag.public_name, "WETH/USDC Pool")
        self.assertEqual(tag.project_name, "Uniswap v3")
        self.assertEqual(tag.website_link, "https://app.uniswap.org/explore/pools/arbitrum/0xabc")
        self.assertEqual(
            tag.public_note,
            "The liquidity pool contract on Arbitrum One for the "
            "Wrapped Ether (WETH) / USD Coin (USDC) pair on Uniswap v3.",
        )

    def test_display_name_wins_over_synthesized_name(self):
        pool = _pool(name="  WETH-USDC 0.05%  ", tokens=[("Wrapped Ether", "WETH"), ("USD Coin", "USDC")])

        self.assertEqual(build_public_name(pool), "WETH-USDC 0.05%")

    def test_blank_display_name_falls_back_to_symbols(self):
        pool = _pool(name="", tokens=[("Token X", "X"), ("Token Y", "Y")])

        self.assertEqual(build_public_name(pool), "X/Y Pool")

    def test_multi_token_note_is_sorted_by_symbol(self):
        pool = _pool(
            tokens=[("Tether USD", "USDT"), ("Dai Stablecoin", "DAI"), ("USD Coin", "USDC")],
        )

        tag = build_contract_tag(pool, pipeline=PIPELINE, network=ARBITRUM)

        self.assertEqual(tag.public_name, "USDT/DAI/USDC Pool")
        self.assertEqual(
            tag.public_note,
            "The liquidity pool contract on Arbitrum One for the pool of "
            "Dai Stablecoin (DAI), USD Coin (USDC) and Tether USD (USDT) on Uniswap v3.",
        )

    def test_same_pool_yields_identical_tag(self):
        pool = _pool(tokens=[("Wrapped Ether", "WETH"), ("USD Coin", "USDC")])

        first = build_contract_tag(pool, pipeline=PIPELINE, network=ARBITRUM)
        second = build_contract_tag(pool, pipeline=PIPELINE, network=ARBITRUM)

        self.assertEqual(first, second)

    def test_markup_in_token_names_is_stripped(self):
        pool = _pool(tokens=[("<b>Evil</b> Token", "EVIL"), ("USD Coin", "USDC")])

        with self.assertLogs("pool_tags.domain.services.contract_tag", level="WARNING"):
            tag = build_contract_tag(pool, pipeline=PIPELINE, network=ARBITRUM)

        self.assertFalse(contains_markup(tag.public_note))
        self.assertIn("Evil Token (EVIL)", tag.public_note)

    def test_markup_in_display_name_is_stripped(self):
        pool = _pool(name="<script>x</script>Pool", tokens=[("A", "A"), ("B", "B")])

        with self.assertLogs("pool_tags.domain.services.contract_tag", level="WARNING"):
            tag = build_contract_tag(pool, pipeline=PIPELINE, network=ARBITRUM)

        self.assertEqual(tag.public_name, "x Pool")

    def test_nested_markup_is_stripped_until_clean(self):
        pool = _pool(tokens=[("<<b>script>alert(1)<</b>/script>", "EVIL"), ("USD Coin", "USDC")])

        with self.assertLogs("pool_tags.domain.services.contract_tag", level="WARNING"):
            tag = build_contract_tag(pool, pipeline=PIPELINE, network=ARBITRUM)

        self.assertFalse(contains_markup(tag.public_note))
        self.assertIn("alert(1) (EVIL)", tag.public_note)
        self.assertEqual(strip_markup("<<i>b>x<</i>/b>"), "x")

    def test_strip_markup_keeps_plain_comparisons(self):
        self.assertFalse(contains_markup("price < 1 and > 0"))
        self.assertEqual(strip_markup("a <i>b</i>  c"), "a b c")


if __name__ == "__main__":
    unittest.main()
