# src/nndep/core/config/__init__.py

"""
Camada de configuração do nndep.

Este pacote contém as estruturas e utilitários responsáveis por carregar
fontes de override, convertê-las para campos tipados e produzir a
configuração efetiva e imutável consumida pelo pipeline de treino e
análise do parser.

A configuração no nndep é:
    - tipada (cada chave possui tipo e default declarados)
    - determinística
    - imutável após a resolução

Responsabilidades do pacote:
    - Tabela de defaults e constantes estruturais (``fields``)
    - Carregamento de overrides: arquivos e linha de comando (``loader``)
    - Merge ordenado de fontes (``merge``)
    - Conversão tipada e resolução dinâmica (``parsing``, ``resolver``)
    - Dump de diagnóstico e hash canônico (``describe``, ``hashing``)

Limites explícitos:
    - Não valida semântica de combinações de hiperparâmetros
    - Não executa treino ou análise
    - Não persiste configuração entre runs
"""

from .describe import describe, print_parameters
from .errors import (
    ConfigError,
    ConfigurationError,
    StrategyResolutionError,
    TypeParseError,
    UnknownLanguageError,
)
from .fields import NONEXIST, NULL, NUM_TOKENS, ROOT, SEPARATOR, UNKNOWN
from .hashing import compute_config_hash
from .loader import args_to_overrides, load_overrides
from .merge import merge_overrides
from .resolver import ConfigurationResolver, ResolvedConfiguration, resolve

__all__ = [
    "ConfigError",
    "ConfigurationError",
    "ConfigurationResolver",
    "NONEXIST",
    "NULL",
    "NUM_TOKENS",
    "ROOT",
    "SEPARATOR",
    "UNKNOWN",
    "ResolvedConfiguration",
    "StrategyResolutionError",
    "TypeParseError",
    "UnknownLanguageError",
    "args_to_overrides",
    "compute_config_hash",
    "describe",
    "load_overrides",
    "merge_overrides",
    "print_parameters",
    "resolve",
]
