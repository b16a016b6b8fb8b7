"""
Loader canônico de fontes de override do nndep.

Este módulo transforma as fontes externas de configuração em um mapa
plano ``chave -> texto``, pronto para o resolver.

Fontes suportadas:
    - arquivos YAML (.yaml, .yml), JSON (.json) e Java properties (.properties)
    - listas de argumentos no formato ``-key value`` (linha de comando)

Responsabilidades do módulo:
    - Carregar e validar estruturalmente arquivos de override
    - Achatar mapas aninhados com ``.`` (``tagger: {model: x}`` → ``tagger.model``)
    - Normalizar escalares para texto (``True`` → ``"true"``)
    - Combinar ``-props FILE`` com a linha de comando (a linha de comando vence)

Princípios fundamentais:
    - Erros estruturais são tratados como falhas fatais
    - A mesma entrada sempre produz o mesmo mapa de overrides

Limites explícitos:
    - Não converte tipos nem aplica defaults (papel do resolver)
    - Não filtra chaves desconhecidas
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml  # PyYAML

from .errors import (
    ConfigKeyConflictError,
    InvalidConfigRootTypeError,
    MalformedArgumentsError,
    OverridesFileNotFoundError,
    OverrideValueTypeError,
    UnsupportedConfigFormatError,
)
from .merge import merge_overrides


logger = logging.getLogger(__name__)

PROPS_KEYS = frozenset({"props", "prop"})

_NUMBER_RE = re.compile(r"-\d+(\.\d*)?([eE][+-]?\d+)?|-\.\d+([eE][+-]?\d+)?")
_PROPERTIES_SEP_RE = re.compile(r"\s*[=:]\s*|\s+")


def _read_properties(path: Path) -> Dict[str, Any]:
    """Lê o subconjunto usual de ``.properties``: ``key=value``, ``key: value`` ou ``key value``."""
    data: Dict[str, Any] = {}
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n").lstrip()
            if not line or line[0] in "#!":
                continue
            parts = _PROPERTIES_SEP_RE.split(line, maxsplit=1)
            key = parts[0]
            value = parts[1] if len(parts) > 1 else ""
            if key in data:
                raise ConfigKeyConflictError(f"Chave duplicada em {path}: '{key}'")
            data[key] = value
    return data


def _scalar_to_text(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise OverrideValueTypeError(
        f"Valor de override não escalar na chave '{key}': {type(value).__name__}"
    )


def flatten_overrides(data: Dict[Any, Any], prefix: str = "") -> Dict[str, str]:
    """
    Achata um mapa aninhado em ``chave.pontuada -> texto``.

    Valores ``None`` removem a chave (equivalem a ausência de override).

    Raises:
        OverrideValueTypeError: Se algum valor não for escalar nem mapa.
        ConfigKeyConflictError: Se duas entradas produzirem a mesma chave.
    """
    out: Dict[str, str] = {}
    for raw_key, value in data.items():
        key = f"{prefix}{raw_key}"
        if isinstance(value, dict):
            items = flatten_overrides(value, prefix=f"{key}.")
        elif value is None:
            continue
        else:
            items = {key: _scalar_to_text(key, value)}

        for k, v in items.items():
            if k in out:
                raise ConfigKeyConflictError(f"Chave de override duplicada: '{k}'")
            out[k] = v
    return out


def load_overrides(path: Union[str, Path]) -> Dict[str, str]:
    """
    Carrega um arquivo de overrides e retorna o mapa plano ``chave -> texto``.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
        - Java properties (.properties)

    Arquivos vazios são interpretados como ausência de overrides.

    Args:
        path (Union[str, Path]): Caminho do arquivo.

    Returns:
        Dict[str, str]: Overrides achatados e normalizados para texto.

    Raises:
        OverridesFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um mapa.
        OverrideValueTypeError: Se algum valor não for escalar.
        ConfigKeyConflictError: Se uma chave aparecer duas vezes.
    """
    path = Path(path)
    if not path.exists():
        raise OverridesFileNotFoundError(f"Arquivo de overrides não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    elif suffix == ".properties":
        data = _read_properties(path)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Raiz dos overrides deve ser dict, recebido: {type(data).__name__}"
        )

    overrides = flatten_overrides(data)
    logger.debug("loaded %d overrides from %s", len(overrides), path)
    return overrides


def _is_flag(token: str) -> bool:
    return token.startswith("-") and len(token) > 1 and not _NUMBER_RE.fullmatch(token)


def args_to_overrides(argv: Sequence[str]) -> Dict[str, str]:
    """
    Converte argumentos ``-key value`` em overrides.

    Regras:
        - ``-key value`` define ``key``; ``--key`` é aceito igualmente
        - ``-key`` sem valor (seguido de outra flag ou no fim) vale ``"true"``
        - números negativos (``-1``, ``-0.5``) são valores, não flags
        - ``-props FILE`` carrega um arquivo; a linha de comando tem precedência

    Raises:
        MalformedArgumentsError: Para valores posicionais sem chave, ou
            ``-props`` sem caminho.
    """
    file_overrides: Optional[Dict[str, str]] = None
    cli: Dict[str, str] = {}
    args: List[str] = list(argv)

    i = 0
    while i < len(args):
        token = args[i]
        key = token.lstrip("-")
        if not _is_flag(token) or not key:
            raise MalformedArgumentsError(f"Argumento posicional inesperado: {token!r}")

        if i + 1 < len(args) and not _is_flag(args[i + 1]):
            value = args[i + 1]
            i += 2
        else:
            value = None
            i += 1

        if key in PROPS_KEYS:
            if value is None:
                raise MalformedArgumentsError(f"-{key} requer um caminho de arquivo")
            file_overrides = load_overrides(value)
        else:
            cli[key] = "true" if value is None else value

    return merge_overrides(file_overrides, cli)
