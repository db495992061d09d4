# api/domain/cnpj/historico.py
from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

LIMITE_HISTORICO = 100

T = TypeVar("T")


class HistoricoLimitado(Generic[T]):
    """Historico em memoria, mais recente primeiro, com capacidade fixa.

    Invariantes:
      - len(self) <= limite; ao exceder, o item mais antigo e descartado.
      - adicionar() ignora o item quando ele e igual ao mais recente
        (so duplicatas consecutivas sao suprimidas).
      - Compartilhado entre threads da API: escrita sob lock, leitura sempre
        sobre uma copia (tuple) do deque.
    """

    def __init__(self, limite: int = LIMITE_HISTORICO) -> None:
        if limite < 1:
            raise ValueError("Limite do historico deve ser positivo")
        self._limite = limite
        self._itens: deque[T] = deque(maxlen=limite)
        self._lock = threading.Lock()

    @property
    def limite(self) -> int:
        return self._limite

    @property
    def itens(self) -> tuple[T, ...]:
        with self._lock:
            return tuple(self._itens)

    @property
    def mais_recente(self) -> T | None:
        with self._lock:
            return self._itens[0] if self._itens else None

    @property
    def cheio(self) -> bool:
        return len(self._itens) >= self._limite

    def adicionar(self, item: T) -> bool:
        """Insere no inicio. Retorna False quando o item repete o mais recente."""
        with self._lock:
            if self._itens and self._itens[0] == item:
                return False
            # deque com maxlen descarta pela direita (o mais antigo) no appendleft
            self._itens.appendleft(item)
            return True

    def limpar(self) -> None:
        with self._lock:
            self._itens.clear()

    def __len__(self) -> int:
        return len(self._itens)

    def __iter__(self) -> Iterator[T]:
        return iter(self.itens)
