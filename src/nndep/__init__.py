# src/nndep/__init__.py
"""
nndep: configuração tipada do parser de dependências neural.

Ponto de entrada público: ``resolve(overrides)`` produz uma
``ResolvedConfiguration`` imutável a partir de overrides em texto.
"""

from .core.config import (
    ConfigError,
    ConfigurationResolver,
    ResolvedConfiguration,
    describe,
    print_parameters,
    resolve,
)
from .core.languages import Language, LanguagePack

__all__ = [
    "ConfigError",
    "ConfigurationResolver",
    "Language",
    "LanguagePack",
    "ResolvedConfiguration",
    "describe",
    "print_parameters",
    "resolve",
]
