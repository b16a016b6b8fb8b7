"""
Conversão tipada de valores brutos de override.

Overrides chegam sempre como strings (linha de comando ou arquivo de
propriedades). Este módulo converte cada string para o tipo declarado
do campo, falhando explicitamente quando a conversão não é possível.

Política de conversão:
    - int   → sinal opcional + dígitos decimais (espaços nas bordas tolerados)
    - float → qualquer literal aceito por ``float()``, exceto agrupamento com ``_``
    - bool  → ``true`` / ``false``, case-insensitive
    - str   → valor bruto, sem alteração

Limites explícitos:
    - Não valida faixas de valores (ex.: dropout em [0, 1])
    - Não trata ``language`` nem ``escaper`` (resolução dinâmica no resolver)
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict

from .errors import TypeParseError
from .fields import FieldSpec


_INT_RE = re.compile(r"[+-]?\d+")


def parse_int(raw: str) -> int:
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not an integer: {raw!r}")
    return int(text)


def parse_float(raw: str) -> float:
    text = raw.strip()
    if "_" in text:
        raise ValueError(f"not a real number: {raw!r}")
    return float(text)


def parse_bool(raw: str) -> bool:
    text = raw.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def parse_str(raw: str) -> str:
    return raw


_PARSERS: Dict[str, Callable[[str], Any]] = {
    "int": parse_int,
    "float": parse_float,
    "bool": parse_bool,
    "str": parse_str,
}

_EXPECTED = {
    "int": "integer",
    "float": "real",
    "bool": "boolean (true/false)",
    "str": "string",
}


def parse_value(spec: FieldSpec, raw: Any) -> Any:
    """
    Converte o valor bruto de um override para o tipo declarado em ``spec``.

    Args:
        spec (FieldSpec): Declaração do campo (chave e tipo).
        raw (Any): Valor bruto do override; deve ser ``str``.

    Returns:
        Any: Valor convertido.

    Raises:
        TypeParseError: Se o valor não for string ou não converter para o tipo.
    """
    if not isinstance(raw, str):
        raise TypeParseError(
            spec.key, raw, _EXPECTED.get(spec.dtype, spec.dtype),
            f"override values must be strings, got {type(raw).__name__}",
        )

    parser = _PARSERS[spec.dtype]
    try:
        return parser(raw)
    except ValueError as e:
        raise TypeParseError(spec.key, raw, _EXPECTED[spec.dtype], str(e)) from e
