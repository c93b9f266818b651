from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContractTag:
    contract_address: str
    public_name: str
    project_name: str
    website_link: str
    public_note: str
