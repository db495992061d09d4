# tests/integration/test_api_historico.py
import csv
import io
import threading

from fastapi.testclient import TestClient

from api.domain.cnpj.gerador import CNPJGerado
from api.domain.cnpj.historico import HistoricoLimitado
from api.interfaces.api.routes.historico_routes import listar_gerados


def _validar(client: TestClient, *cnpjs: str) -> None:
    for cnpj in cnpjs:
        client.get("/api/cnpj/validar", params={"cnpj": cnpj})


def test_historicos_comecam_vazios(client: TestClient) -> None:
    for tipo in ("gerados", "validacoes"):
        data = client.get(f"/api/historico/{tipo}").json()
        assert data == {"total": 0, "limite": 100, "itens": []}


def test_limpar_gerados(client: TestClient) -> None:
    client.get("/api/cnpj/gerar", params={"quantidade": 3})
    response = client.delete("/api/historico/gerados")
    assert response.status_code == 204
    assert client.get("/api/historico/gerados").json()["total"] == 0


def test_limpar_validacoes(client: TestClient) -> None:
    _validar(client, "12ABC34501DE35")
    assert client.delete("/api/historico/validacoes").status_code == 204
    assert client.get("/api/historico/validacoes").json()["total"] == 0


def test_export_validacoes_csv(client: TestClient) -> None:
    _validar(client, "11444777000162", "12ABC34501DE35")
    response = client.get("/api/historico/validacoes/export", params={"formato": "csv"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "cnpjs_validados.csv" in response.headers["content-disposition"]
    linhas = list(csv.reader(io.StringIO(response.text)))
    assert linhas == [
        ["Posicao", "CNPJ", "Valido"],
        ["1", "12ABC34501DE35", "sim"],
        ["2", "11444777000162", "nao"],
    ]


def test_export_validacoes_json_mascarado(client: TestClient) -> None:
    _validar(client, "12ABC34501DE35")
    response = client.get("/api/historico/validacoes/export", params={"formato": "json", "mascarado": "true"})
    assert response.json() == [{"cnpj": "12.ABC.345/01DE-35", "valido": True}]


def test_export_gerados_txt(client: TestClient) -> None:
    gerados = client.get("/api/cnpj/gerar", params={"quantidade": 2}).json()
    response = client.get("/api/historico/gerados/export", params={"formato": "txt"})
    assert response.status_code == 200
    assert response.text == f"{gerados[1]['puro']},{gerados[0]['puro']}"


def test_export_formato_invalido(client: TestClient) -> None:
    response = client.get("/api/historico/gerados/export", params={"formato": "pdf"})
    assert response.status_code == 422


def test_export_sem_formato(client: TestClient) -> None:
    assert client.get("/api/historico/gerados/export").status_code == 422


def test_listagem_durante_geracao_concorrente() -> None:
    historico: HistoricoLimitado[CNPJGerado] = HistoricoLimitado()
    parar = threading.Event()

    def gerar() -> None:
        i = 0
        while not parar.is_set():
            historico.adicionar(CNPJGerado(puro=f"{i:014d}", mascarado=""))
            i += 1

    gerador = threading.Thread(target=gerar)
    gerador.start()
    try:
        for _ in range(2000):
            dto = listar_gerados(historico)
            assert dto.total == len(dto.itens) <= historico.limite
    finally:
        parar.set()
        gerador.join()
