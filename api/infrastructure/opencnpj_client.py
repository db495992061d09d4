# api/infrastructure/opencnpj_client.py
#
# IO-only: consulta de dados cadastrais no endpoint publico do OpenCNPJ.
#
# Design decisions:
#   - Um httpx.Client pode ser injetado; testes usam httpx.MockTransport e
#     nunca acessam a rede.
#   - 404 vira CNPJNaoEncontrado e 429 vira LimiteConsultaExcedido; qualquer
#     outra falha HTTP ou de transporte vira ConsultaCNPJError com mensagem
#     pronta para exibicao.
#   - O cliente nao normaliza o payload: devolve o JSON cru e a camada de
#     aplicacao (consulta_service) monta o DTO.
from __future__ import annotations

from typing import Any

import httpx

from .config import get_settings


class ConsultaCNPJError(Exception):
    """Falha ao consultar o servico externo de CNPJ."""


class CNPJNaoEncontrado(ConsultaCNPJError):
    """O servico respondeu 404 para o CNPJ consultado."""


class LimiteConsultaExcedido(ConsultaCNPJError):
    """O servico respondeu 429."""


class OpenCNPJClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        settings = get_settings()
        self._base_url = (base_url or settings.opencnpj_base_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.opencnpj_timeout
        self._client = client

    def consultar(self, cnpj: str) -> dict[str, Any]:
        """GET {base_url}/{cnpj}. cnpj deve vir puro (14 caracteres).

        Raises:
            CNPJNaoEncontrado: resposta 404.
            LimiteConsultaExcedido: resposta 429.
            ConsultaCNPJError: demais respostas nao-2xx, JSON invalido ou erro de rede.
        """
        url = f"{self._base_url}/{cnpj}"
        headers = {"Accept": "application/json"}
        try:
            if self._client is not None:
                response = self._client.get(url, headers=headers, timeout=self._timeout)
            else:
                response = httpx.get(url, headers=headers, timeout=self._timeout, follow_redirects=True)
        except httpx.HTTPError as err:
            raise ConsultaCNPJError("Servico do OpenCNPJ indisponivel. Tente novamente em instantes.") from err

        if response.status_code == 404:
            raise CNPJNaoEncontrado("CNPJ nao encontrado na base do OpenCNPJ.")
        if response.status_code == 429:
            raise LimiteConsultaExcedido(
                "Limite de consultas do OpenCNPJ atingido. Aguarde alguns instantes e tente novamente."
            )
        if not response.is_success:
            raise ConsultaCNPJError("Servico do OpenCNPJ indisponivel. Tente novamente em instantes.")

        try:
            payload = response.json()
        except ValueError as err:
            raise ConsultaCNPJError("Resposta invalida do OpenCNPJ.") from err
        if not isinstance(payload, dict):
            raise ConsultaCNPJError("Resposta invalida do OpenCNPJ.")
        return payload
