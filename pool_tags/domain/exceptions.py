from __future__ import annotations


class ContractTagsError(Exception):
    """Base para erros conhecidos do pipeline de tags."""


class UnsupportedNetworkError(ContractTagsError):
    """Rede nao suportada pelo pipeline."""


class UnknownPipelineError(ContractTagsError):
    """Pipeline solicitado nao esta registrado."""


class SubgraphResolutionError(ContractTagsError):
    """Nao foi possivel montar o endpoint do subgraph."""


class SubgraphTransportError(ContractTagsError):
    """Resposta HTTP sem sucesso."""

    def __init__(self, status_code: int):
        super().__init__(f"Subgraph request failed with status code {status_code}.")
        self.status_code = status_code


class SubgraphQueryError(ContractTagsError):
    """Subgraph retornou erros de consulta."""

    def __init__(self, messages: list[str]):
        super().__init__("Subgraph query failed: " + " | ".join(messages))
        self.messages = messages


class SubgraphShapeError(ContractTagsError):
    """Resposta sem o payload esperado."""


class SubgraphCursorError(ContractTagsError):
    """Cursor de paginacao invalido ou sem avanco."""


class TagFetchError(ContractTagsError):
    """Falha ao buscar as pools do subgraph."""
