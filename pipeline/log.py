# pipeline/log.py
#
# Logger do job em lote com tempo decorrido.
#
# Design decisions:
#   - Uma unica funcao log() usada por todos os modulos do pipeline.
#   - Tempo decorrido no prefixo para o operador ver quanto dura cada fase.
#   - Sem dependencias externas: stdout com flush imediato.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Escreve uma linha '[lote mm:ss] message' no stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[lote {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
