# src/nndep/core/config/errors.py
"""
Exceções canônicas da camada de configuração do nndep.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de overrides, a conversão tipada de valores e a resolução
da configuração efetiva do parser.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Toda falha de resolução é fatal (não há resultado parcial)
    - O core nunca registra erros em log, apenas os levanta

Hierarquia:
    ConfigError
      ├── ConfigurationError (key, raw_value, expected)
      │     ├── TypeParseError
      │     ├── UnknownLanguageError
      │     └── StrategyResolutionError
      ├── OverridesFileNotFoundError
      ├── UnsupportedConfigFormatError
      ├── InvalidConfigRootTypeError
      ├── OverrideValueTypeError
      ├── ConfigKeyConflictError
      └── MalformedArgumentsError

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não apresenta erros ao operador (responsabilidade do chamador)
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do nndep.

    Todas as exceções levantadas durante carregamento de overrides e
    resolução da configuração herdam desta classe, permitindo captura
    genérica no ponto de entrada do pipeline.
    """


class ConfigurationError(ConfigError):
    """
    Falha ao resolver uma chave reconhecida da configuração.

    Carrega o triplo estruturado ``(key, raw_value, expected)``:
        - key: chave de override envolvida (ex.: ``maxIter``)
        - raw_value: valor bruto recebido, sem conversão
        - expected: descrição curta do que era esperado

    Invariantes:
        - Nenhuma configuração parcial existe quando esta exceção é levantada
    """

    kind = "CONFIGURATION_ERROR"

    def __init__(self, key: str, raw_value: Any, expected: str, detail: Optional[str] = None):
        self.key = key
        self.raw_value = raw_value
        self.expected = expected
        self.detail = detail
        message = f"Valor inválido para '{key}': {raw_value!r} (esperado: {expected})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return {
            "type": self.kind,
            "key": self.key,
            "raw_value": self.raw_value,
            "expected": self.expected,
            "detail": self.detail,
        }


class TypeParseError(ConfigurationError):
    """O valor de override não pode ser convertido para o tipo declarado da chave."""

    kind = "TYPE_PARSE_ERROR"


class UnknownLanguageError(ConfigurationError):
    """
    O override de ``language`` não corresponde a nenhum idioma suportado.

    Decisões arquiteturais:
        - Um idioma desconhecido nunca cai silenciosamente no idioma padrão
        - A comparação é case-insensitive, mas exata
    """

    kind = "UNKNOWN_LANGUAGE"

    def __init__(self, raw_value: Any, detail: Optional[str] = None):
        super().__init__("language", raw_value, "unknown language", detail)


class StrategyResolutionError(ConfigurationError):
    """
    O nome de estratégia informado em ``escaper`` não pôde ser carregado
    ou instanciado.

    Invariantes:
        - Um ``escaper`` presente e não resolvível nunca vira None
    """

    kind = "STRATEGY_RESOLUTION_ERROR"

    def __init__(self, raw_value: Any, detail: Optional[str] = None):
        super().__init__("escaper", raw_value, "strategy not found or not instantiable", detail)


class OverridesFileNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de overrides não é encontrado
    no caminho especificado.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de overrides não é
    suportado pelo loader.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
        - Java properties (.properties)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um arquivo de overrides
    não é um mapa chave-valor.
    """


class OverrideValueTypeError(ConfigError):
    """
    Exceção levantada quando um valor de override não é escalar
    (ex.: listas em YAML/JSON), e portanto não possui representação
    textual única.
    """


class ConfigKeyConflictError(ConfigError):
    """
    Exceção levantada quando a mesma chave achatada aparece duas vezes
    na mesma fonte de overrides.

    Exemplo de conflito:
        - ``{"tagger.model": "a", "tagger": {"model": "b"}}``

    Invariantes:
        - Nenhum override parcial é produzido em caso de conflito
    """


class MalformedArgumentsError(ConfigError):
    """
    Exceção levantada quando a lista de argumentos de linha de comando
    contém um valor posicional sem chave ``-key`` correspondente.
    """
