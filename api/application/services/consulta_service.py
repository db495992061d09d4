# api/application/services/consulta_service.py
from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Protocol

from api.domain.cnpj.value_objects import CNPJ
from api.infrastructure.opencnpj_client import ConsultaCNPJError

from ..dtos.consulta_dto import ConsultaLoteDTO, DadosEmpresaDTO, ResultadoConsultaDTO, SocioDTO

LIMITE_CONSULTA = 10
NAO_INFORMADO = "Nao informado"

_SEPARADORES = re.compile(r"[\s,;]+")

_MESES = (
    "janeiro", "fevereiro", "marco", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)


class ClienteConsulta(Protocol):
    def consultar(self, cnpj: str) -> dict[str, Any]: ...


class ConsultaService:
    """Consulta sequencial de ate LIMITE_CONSULTA CNPJs. Falhas individuais nao abortam o lote."""

    def __init__(self, cliente: ClienteConsulta, limite: int = LIMITE_CONSULTA) -> None:
        self._cliente = cliente
        self._limite = limite

    def consultar(self, texto: str) -> ConsultaLoteDTO:
        entradas = [p for p in _SEPARADORES.split(texto.strip()) if p]
        selecionadas = entradas[: self._limite]

        resultados: list[ResultadoConsultaDTO] = []
        for entrada in selecionadas:
            try:
                cnpj = CNPJ(entrada)
            except ValueError:
                resultados.append(
                    ResultadoConsultaDTO(entrada=entrada, valido=False, dados=None, mensagem="CNPJ invalido.")
                )
                continue

            try:
                payload = self._cliente.consultar(cnpj.valor)
            except ConsultaCNPJError as err:
                resultados.append(ResultadoConsultaDTO(entrada=entrada, valido=False, dados=None, mensagem=str(err)))
                continue

            resultados.append(
                ResultadoConsultaDTO(
                    entrada=entrada,
                    valido=True,
                    dados=normalizar_dados_cnpj(payload, cnpj),
                    mensagem=None,
                )
            )

        return ConsultaLoteDTO(resultados=resultados, ignorados=len(entradas) - len(selecionadas))

    def consultar_um(self, entrada: str) -> DadosEmpresaDTO:
        """Consulta unica; ao contrario do lote, propaga as falhas.

        Raises:
            ValueError: CNPJ invalido.
            CNPJNaoEncontrado: OpenCNPJ respondeu 404.
            ConsultaCNPJError: falha do servico externo.
        """
        cnpj = CNPJ(entrada.strip())
        return normalizar_dados_cnpj(self._cliente.consultar(cnpj.valor), cnpj)


def normalizar_dados_cnpj(payload: dict[str, Any], cnpj: CNPJ) -> DadosEmpresaDTO:
    """Achata a resposta do OpenCNPJ; campos ausentes viram NAO_INFORMADO.

    Aceita o formato aninhado (empresa/estabelecimento) e o formato plano,
    com endereco, telefones, porte_empresa e QSA no topo do documento. Quando
    os dois trazem o mesmo campo, o aninhado prevalece.
    """
    estabelecimento: dict[str, Any] = payload.get("estabelecimento") or {}
    empresa: dict[str, Any] = payload.get("empresa") or {}

    return DadosEmpresaDTO(
        cnpj=cnpj.valor,
        cnpj_formatado=cnpj.formatado,
        nome_empresarial=_primeiro(payload.get("razao_social"), empresa.get("razao_social")),
        nome_fantasia=_primeiro(estabelecimento.get("nome_fantasia"), payload.get("nome_fantasia")),
        situacao=_primeiro(
            estabelecimento.get("descricao_situacao_cadastral"),
            estabelecimento.get("situacao_cadastral"),
            payload.get("descricao_situacao_cadastral"),
            payload.get("situacao_cadastral"),
        ),
        natureza_juridica=_codigo_descricao(empresa.get("natureza_juridica") or payload.get("natureza_juridica")),
        capital_social=formatar_moeda(
            _primeiro_presente(empresa.get("capital_social"), payload.get("capital_social"))
        ),
        porte=_codigo_descricao(empresa.get("porte") or payload.get("porte_empresa")),
        cnae_principal=_codigo_descricao(estabelecimento.get("cnae_principal") or payload.get("cnae_principal")),
        cnaes_secundarios=_cnaes(estabelecimento.get("cnaes_secundarios") or payload.get("cnaes_secundarios")),
        endereco=montar_endereco({**payload, **estabelecimento}),
        telefone=formatar_telefones(estabelecimento.get("telefones") or payload.get("telefones")),
        email=_primeiro(estabelecimento.get("email"), payload.get("email")),
        data_abertura=formatar_data(estabelecimento.get("data_inicio_atividade") or payload.get("data_abertura")),
        socios=_socios(payload.get("QSA") or payload.get("socios")),
    )


def _primeiro(*valores: object) -> str:
    for valor in valores:
        if valor is not None and str(valor).strip():
            return str(valor).strip()
    return NAO_INFORMADO


def _primeiro_presente(*valores: object) -> object:
    for valor in valores:
        if valor is not None and valor != "":
            return valor
    return None


def _codigo_descricao(valor: object) -> str:
    if isinstance(valor, str):
        return valor.strip() or NAO_INFORMADO
    if not isinstance(valor, dict):
        return NAO_INFORMADO
    codigo = str(valor.get("codigo") or "").strip()
    descricao = str(valor.get("descricao") or "").strip()
    if codigo and descricao:
        return f"{codigo} - {descricao}"
    return codigo or descricao or NAO_INFORMADO


def _cnaes(valor: object) -> list[str]:
    if not isinstance(valor, list):
        return []
    cnaes = (_codigo_descricao(c) if isinstance(c, dict) else str(c).strip() for c in valor)
    return [c for c in cnaes if c and c != NAO_INFORMADO]


def _socios(valor: object) -> list[SocioDTO]:
    if not isinstance(valor, list):
        return []
    return [
        SocioDTO(
            nome=_primeiro(s.get("nome_socio"), s.get("nome")),
            qualificacao=_primeiro(s.get("qualificacao_socio"), s.get("qualificacao")),
            data_entrada=formatar_data(s.get("data_entrada_sociedade")),
        )
        for s in valor
        if isinstance(s, dict)
    ]


def formatar_telefones(valor: object) -> str:
    """[{'ddd': '11', 'numero': '3333-4444'}, ...] -> '(11) 3333-4444 / ...'."""
    if not isinstance(valor, list):
        return NAO_INFORMADO
    telefones = [
        f"({t['ddd']}) {t['numero']}"
        for t in valor
        if isinstance(t, dict) and t.get("ddd") and t.get("numero")
    ]
    return " / ".join(telefones) if telefones else NAO_INFORMADO


def formatar_moeda(valor: object) -> str:
    """Formata em BRL: 1234.5 -> 'R$ 1.234,50'. Aceita tambem '1.234,50'."""
    if valor is None or isinstance(valor, bool):
        return NAO_INFORMADO
    texto = str(valor).strip()
    if "," in texto:
        texto = texto.replace(".", "").replace(",", ".")
    try:
        numero = Decimal(texto)
    except InvalidOperation:
        return NAO_INFORMADO
    if not numero.is_finite():
        return NAO_INFORMADO

    sinal = "-" if numero < 0 else ""
    # formato en-US e depois troca de separadores: 1,234.50 -> 1.234,50
    texto = f"{abs(numero):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sinal}R$ {texto}"


def formatar_data(valor: object) -> str:
    """'2023-01-15' (ou ISO com hora) -> '15 de janeiro de 2023'."""
    if not isinstance(valor, str) or not valor.strip():
        return NAO_INFORMADO
    partes = valor.strip().split("T")[0].split("-")
    if len(partes) != 3:
        return NAO_INFORMADO
    try:
        data = date(int(partes[0]), int(partes[1]), int(partes[2]))
    except ValueError:
        return NAO_INFORMADO
    return f"{data.day} de {_MESES[data.month - 1]} de {data.year}"


def formatar_cep(valor: str) -> str:
    digitos = re.sub(r"\D", "", valor)
    if len(digitos) != 8:
        return valor.strip()
    return f"{digitos[:5]}-{digitos[5:]}"


def montar_endereco(estabelecimento: dict[str, Any]) -> str:
    """Linha unica: 'Rua X, 10 (sala 2) • Bairro • Cidade - UF • CEP 01001-000'."""

    def _campo(nome: str) -> str:
        valor = estabelecimento.get(nome)
        return str(valor).strip() if valor is not None else ""

    partes: list[str] = []

    logradouro = " ".join(p for p in (_campo("tipo_logradouro"), _campo("logradouro")) if p)
    if logradouro:
        numero = _campo("numero") or "s/ n"
        complemento = _campo("complemento")
        partes.append(f"{logradouro}, {numero} ({complemento})" if complemento else f"{logradouro}, {numero}")

    if _campo("bairro"):
        partes.append(_campo("bairro"))

    cidade_uf = " - ".join(p for p in (_campo("municipio"), _campo("uf")) if p)
    if cidade_uf:
        partes.append(cidade_uf)

    if _campo("cep"):
        partes.append(f"CEP {formatar_cep(_campo('cep'))}")

    return " • ".join(partes) if partes else NAO_INFORMADO
