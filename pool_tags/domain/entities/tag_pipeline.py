from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineNetwork:
    id: str
    name: str
    website_slug: str


@dataclass(frozen=True)
class TagPipeline:
    key: str
    project_name: str
    website_template: str
    networks: tuple[PipelineNetwork, ...]

    @property
    def network_ids(self) -> list[str]:
        return [network.id for network in self.networks]

    def get_network(self, network_id: str) -> PipelineNetwork | None:
        for network in self.networks:
            if network.id == network_id:
                return network
        return None
