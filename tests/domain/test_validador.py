# tests/domain/test_validador.py
import pytest

from api.domain.cnpj.validador import ResultadoValidacao, separar_entradas, validar_cnpj, validar_lote


def test_cnpj_numerico_valido():
    assert validar_cnpj("11444777000161") == ResultadoValidacao("11444777000161", True)


def test_cnpj_numerico_digito_errado():
    resultado = validar_cnpj("11444777000162")
    assert not resultado.valido
    assert resultado.puro == "11444777000162"


def test_cnpj_alfanumerico_com_mascara():
    resultado = validar_cnpj("12.ABC.345/01DE-35")
    assert resultado.valido
    assert resultado.puro == "12ABC34501DE35"


def test_minusculas_sao_aceitas():
    assert validar_cnpj("12.abc.345/01de-35").valido


def test_espacos_sao_removidos():
    assert validar_cnpj(" 12 ABC 345 01DE 35 ").valido


def test_todos_zeros_invalido():
    assert validar_cnpj("00000000000000") == ResultadoValidacao("00000000000000", False)


def test_todos_iguais_invalido():
    assert not validar_cnpj("AAAAAAAAAAAAAA").valido


@pytest.mark.parametrize(
    "entrada",
    [
        "",
        "123",
        "12ABC34501DE355",
        "12ABC34501DEAB",  # digitos verificadores nao numericos
        "12ABC34501DE3@",
        "12_ABC_345_01DE_35",
    ],
)
def test_entradas_invalidas(entrada: str):
    assert validar_cnpj(entrada).valido is False


def test_caractere_estranho_devolve_valor_sem_pontuacao():
    resultado = validar_cnpj("12.ABC#345")
    assert resultado == ResultadoValidacao("12ABC#345", False)


def test_lote_preserva_ordem():
    resultados = validar_lote(["11444777000161", "invalido", "12ABC34501DE35"])
    assert [r.valido for r in resultados] == [True, False, True]
    assert resultados[1].puro == "INVALIDO"


def test_separar_entradas():
    assert separar_entradas(" a ; b,c,, ;d ") == ["a", "b", "c", "d"]
    assert separar_entradas("") == []
