"""
Dump de diagnóstico da configuração resolvida.

Produz uma linha ``chave = valor`` por parâmetro, em ordem fixa, para os
logs de operação de uma run. A ordem e o conjunto de campos são estáveis:
ferramentas que leem esses logs dependem deles.

Formatação:
    - inteiros em decimal
    - reais com dois dígitos significativos (``0.010``, ``1.0e-06``, ``0.50``)
    - booleanos como ``true`` / ``false``
    - reais não finitos como ``NaN``, ``Infinity`` e ``-Infinity``

Rótulos:
    - ``saveIntermediate`` é grafado corretamente; o dump legado usava
      ``saveItermediate``. Ferramentas que buscam o rótulo antigo
      precisam aceitar os dois.
"""

from __future__ import annotations

import math
import sys
from typing import Any, List, Optional, TextIO, Tuple

from .resolver import ResolvedConfiguration


# (rótulo, atributo, formato)
_DUMP_ORDER: Tuple[Tuple[str, str, str], ...] = (
    ("language", "language", "str"),
    ("trainingThreads", "training_threads", "int"),
    ("wordCutOff", "word_cut_off", "int"),
    ("initRange", "init_range", "float"),
    ("maxIter", "max_iter", "int"),
    ("batchSize", "batch_size", "int"),
    ("adaEps", "ada_eps", "float"),
    ("adaAlpha", "ada_alpha", "float"),
    ("regParameter", "reg_parameter", "float"),
    ("dropProb", "drop_prob", "float"),
    ("hiddenSize", "hidden_size", "int"),
    ("embeddingSize", "embedding_size", "int"),
    ("numPreComputed", "num_pre_computed", "int"),
    ("evalPerIter", "eval_per_iter", "int"),
    ("clearGradientsPerIter", "clear_gradients_per_iter", "int"),
    ("saveIntermediate", "save_intermediate", "bool"),
)


def format_real(value: float, significant: int = 2) -> str:
    """
    Formata um real no estilo ``%g`` de precisão fixa.

    Diferente do ``%g`` do Python, zeros à direita são mantidos e a
    notação científica sempre traz a parte decimal: ``0.01`` vira
    ``0.010`` e ``1e-06`` vira ``1.0e-06``. Usa notação fixa quando
    ``1e-4 <= |x| < 10**significant`` após o arredondamento.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "%.*f" % (significant - 1, 0.0)

    scientific = "%.*e" % (significant - 1, value)
    exponent = int(scientific.split("e")[1])
    if -4 <= exponent < significant:
        return "%.*f" % (significant - 1 - exponent, value)
    return scientific


def _format(value: Any, kind: str) -> str:
    if kind == "int":
        return "%d" % value
    if kind == "float":
        return format_real(value)
    if kind == "bool":
        return "true" if value else "false"
    return str(value)


def describe(config: ResolvedConfiguration) -> List[str]:
    """Retorna as 16 linhas do dump, na ordem canônica."""
    return [
        f"{label} = {_format(getattr(config, attr), kind)}"
        for label, attr, kind in _DUMP_ORDER
    ]


def print_parameters(config: ResolvedConfiguration, stream: Optional[TextIO] = None) -> None:
    """Escreve o dump em ``stream`` (default: ``sys.stderr``)."""
    out = stream if stream is not None else sys.stderr
    for line in describe(config):
        out.write(line + "\n")
