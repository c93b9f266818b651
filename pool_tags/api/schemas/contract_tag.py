from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pool_tags.domain.entities.contract_tag import ContractTag


class ContractTagSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    contract_address: str = Field(alias="Contract Address")
    public_name: str = Field(alias="Public Name Tag")
    project_name: str = Field(alias="Project Name")
    website_link: str = Field(alias="UI/Website Link")
    public_note: str = Field(alias="Public Note")

    @classmethod
    def from_entity(cls, tag: ContractTag) -> "ContractTagSchema":
        return cls(
            contract_address=tag.contract_address,
            public_name=tag.public_name,
            project_name=tag.project_name,
            website_link=tag.website_link,
            public_note=tag.public_note,
        )

    def to_registry(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
