# tests/integration/test_api_validador.py
from fastapi.testclient import TestClient


def test_validar_alfanumerico(client: TestClient) -> None:
    response = client.get("/api/cnpj/validar", params={"cnpj": "12.ABC.345/01DE-35"})
    assert response.status_code == 200
    assert response.json() == {"puro": "12ABC34501DE35", "mascarado": "12.ABC.345/01DE-35", "valido": True}


def test_validar_invalido_nao_e_erro_http(client: TestClient) -> None:
    response = client.get("/api/cnpj/validar", params={"cnpj": "00000000000000"})
    assert response.status_code == 200
    assert response.json()["valido"] is False


def test_validar_sem_parametro(client: TestClient) -> None:
    assert client.get("/api/cnpj/validar").status_code == 422


def test_validacao_vai_para_historico_sem_duplicata_consecutiva(client: TestClient) -> None:
    for _ in range(2):
        client.get("/api/cnpj/validar", params={"cnpj": "11444777000161"})
    client.get("/api/cnpj/validar", params={"cnpj": "123"})

    historico = client.get("/api/historico/validacoes").json()
    assert historico["total"] == 2
    assert [i["puro"] for i in historico["itens"]] == ["123", "11444777000161"]
    assert historico["itens"][0]["mascarado"] is None


def test_validar_lote_texto(client: TestClient) -> None:
    response = client.post(
        "/api/cnpj/validar/lote",
        json={"texto": "11.444.777/0001-61; 12ABC34501DE35, 11444777000162"},
    )
    assert response.status_code == 200
    data = response.json()
    assert (data["total"], data["validos"], data["invalidos"]) == (3, 2, 1)
    assert [r["valido"] for r in data["resultados"]] == [True, True, False]


def test_validar_lote_lista(client: TestClient) -> None:
    response = client.post("/api/cnpj/validar/lote", json={"cnpjs": ["12ABC34501DE35"]})
    assert response.status_code == 200
    assert response.json()["validos"] == 1


def test_validar_lote_vazio(client: TestClient) -> None:
    response = client.post("/api/cnpj/validar/lote", json={"cnpjs": []})
    assert response.status_code == 422
    assert "ao menos um" in response.json()["detail"]


def test_validar_lote_sem_campos(client: TestClient) -> None:
    assert client.post("/api/cnpj/validar/lote", json={}).status_code == 422


def test_validar_lote_acima_do_limite(client: TestClient) -> None:
    response = client.post("/api/cnpj/validar/lote", json={"cnpjs": ["11444777000161"] * 101})
    assert response.status_code == 422
    assert "Limite de 100" in response.json()["detail"]
    assert client.get("/api/historico/validacoes").json()["total"] == 0
