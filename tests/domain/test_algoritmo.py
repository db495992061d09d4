# tests/domain/test_algoritmo.py
import pytest

from api.domain.cnpj.algoritmo import (
    PESOS_PRIMEIRO_DV,
    PESOS_SEGUNDO_DV,
    CaractereInvalido,
    calcular_digito_verificador,
    calcular_digitos_verificadores,
    sequencia_repetida,
    valor_do_caractere,
)


def test_valor_digitos():
    assert [valor_do_caractere(c) for c in "0123456789"] == list(range(10))


def test_valor_letras_usa_deslocamento_ascii():
    """'A' - '0' = 17 e 'Z' - '0' = 42, nao 10..35."""
    assert valor_do_caractere("A") == 17
    assert valor_do_caractere("Z") == 42


def test_valor_minusculas_equivalem_a_maiusculas():
    assert valor_do_caractere("a") == valor_do_caractere("A")
    assert valor_do_caractere("z") == 42


@pytest.mark.parametrize("entrada", ["", "AB", "@", "-", " ", "Ç"])
def test_valor_rejeita_caracteres_invalidos(entrada: str):
    with pytest.raises(CaractereInvalido):
        valor_do_caractere(entrada)


def test_caractere_invalido_e_value_error():
    with pytest.raises(ValueError):
        valor_do_caractere("!")


def test_pesos_tem_tamanhos_fixos():
    assert len(PESOS_PRIMEIRO_DV) == 12
    assert len(PESOS_SEGUNDO_DV) == 13


def test_digito_exemplo_calculado_a_mao():
    """Soma dos quadrados dos pesos = 338; 338 % 11 = 8; 11 - 8 = 3."""
    assert calcular_digito_verificador(PESOS_PRIMEIRO_DV, PESOS_PRIMEIRO_DV) == 3


def test_digito_zero_quando_resto_menor_que_dois():
    assert calcular_digito_verificador([0] * 12, PESOS_PRIMEIRO_DV) == 0
    assert calcular_digito_verificador([1], [1]) == 0
    assert calcular_digito_verificador([2], [1]) == 9


def test_digito_sempre_entre_zero_e_nove():
    for soma in range(200):
        assert 0 <= calcular_digito_verificador([soma], [1]) <= 9


def test_digito_rejeita_tamanhos_diferentes():
    with pytest.raises(ValueError):
        calcular_digito_verificador([1, 2, 3], PESOS_PRIMEIRO_DV)


def test_digitos_cnpj_numerico_conhecido():
    assert calcular_digitos_verificadores("114447770001") == "61"
    assert calcular_digitos_verificadores("112223330001") == "81"


def test_digitos_cnpj_alfanumerico_conhecido():
    """Exemplo publicado pela Receita: 12.ABC.345/01DE-35."""
    assert calcular_digitos_verificadores("12ABC34501DE") == "35"


def test_digitos_deterministicos():
    assert calcular_digitos_verificadores("A1B2C3D4E5F6") == calcular_digitos_verificadores("A1B2C3D4E5F6")


def test_sequencia_repetida():
    assert sequencia_repetida("00000000000000")
    assert sequencia_repetida("AAAAAAAAAAAA")
    assert not sequencia_repetida("00000000000001")
    assert not sequencia_repetida("")
