# src/nndep/core/config/resolver.py
"""
Resolver canônico da configuração do parser.

Este módulo produz a configuração efetiva (``ResolvedConfiguration``) a
partir dos defaults compilados (``fields.FIELD_SPECS``) e de um conjunto
de overrides chave/valor em texto.

Política de resolução:
    - Cada chave reconhecida é independente das demais
    - Chave presente → valor convertido para o tipo declarado
    - Chave ausente → default compilado
    - Chaves não reconhecidas são ignoradas (permissivo)
    - ``language`` é resolvido antes do language pack, que é derivado
    - ``escaper`` é instanciado por nome via ``NamedStrategyLoader``

Princípios fundamentais:
    - Resolução tudo-ou-nada: nenhum resultado parcial em caso de erro
    - A mesma entrada sempre produz configurações iguais campo a campo
    - O resultado é imutável (dataclass congelada, sem setters)

Invariantes:
    - ``language_pack`` é sempre função pura de ``language``
    - ``NUM_TOKENS`` é constante de classe, nunca chave de override
    - ``escaper`` é None ou uma estratégia instanciada com sucesso

Limites explícitos:
    - Não valida semântica de combinações de hiperparâmetros
    - Não registra erros em log (apenas os levanta)
    - Não executa treino nem análise
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional

from ...escapers import Escaper
from ..languages import Language, LanguagePack, LanguagePackRegistry
from ..strategies import NamedStrategyLoader, StrategyLoadError
from .errors import StrategyResolutionError, TypeParseError, UnknownLanguageError
from .fields import FIELD_SPECS, NUM_TOKENS, FieldSpec, default_values
from .parsing import parse_value


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedConfiguration:
    """
    Configuração efetiva e imutável de uma run do parser.

    Campos canônicos (chave de override entre parênteses):
    - language (language): idioma ativo
    - training_threads (trainingThreads), word_cut_off (wordCutOff),
      init_range (initRange), max_iter (maxIter), batch_size (batchSize),
      ada_eps (adaEps), ada_alpha (adaAlpha), reg_parameter (regParameter),
      drop_prob (dropProb), hidden_size (hiddenSize),
      embedding_size (embeddingSize): hiperparâmetros de treino
    - num_pre_computed (numPreComputed), eval_per_iter (evalPerIter),
      clear_gradients_per_iter (clearGradientsPerIter),
      save_intermediate (saveIntermediate): cadência operacional
    - sentence_delimiter (sentenceDelimiter), escaper (escaper),
      tagger (tagger.model): opções de análise em runtime
    - escaper_name: nome com que ``escaper`` foi pedido; entra na igualdade
      no lugar da instância

    Derivado:
    - language_pack: calculado a partir de ``language``, nunca armazenado
    """

    NUM_TOKENS: ClassVar[int] = NUM_TOKENS

    language: Language
    training_threads: int
    word_cut_off: int
    init_range: float
    max_iter: int
    batch_size: int
    ada_eps: float
    ada_alpha: float
    reg_parameter: float
    drop_prob: float
    hidden_size: int
    embedding_size: int
    num_pre_computed: int
    eval_per_iter: int
    clear_gradients_per_iter: int
    save_intermediate: bool
    sentence_delimiter: Optional[str]
    tagger: str
    # identidade da estratégia é o nome pedido, não a instância
    escaper: Optional[Escaper] = field(default=None, compare=False)
    escaper_name: Optional[str] = None

    _language_packs: LanguagePackRegistry = field(
        default_factory=LanguagePackRegistry.v1, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.language, Language):
            raise TypeError("language must be a Language")
        # falha na construção se o registry não cobre o idioma
        self._language_packs.lookup(self.language)

    @classmethod
    def defaults(cls) -> "ResolvedConfiguration":
        """Configuração com todos os defaults compilados."""
        return cls(**default_values())

    @property
    def language_pack(self) -> LanguagePack:
        return self._language_packs.lookup(self.language)

    def to_dict(self) -> Dict[str, Any]:
        """Visão serializável em JSON, indexada pelas chaves de override."""
        out: Dict[str, Any] = {}
        for spec in FIELD_SPECS:
            value = getattr(self, spec.attr)
            if spec.dtype == "language":
                value = value.value
            elif spec.dtype == "strategy" and value is not None:
                value = self.escaper_name or f"{type(value).__module__}.{type(value).__qualname__}"
            out[spec.key] = value
        return out


class ConfigurationResolver:
    """
    Resolve overrides em texto contra os defaults compilados.

    Colaboradores:
        - language_packs: ``LanguagePackRegistry`` (default: catálogo v1)
        - strategies: ``NamedStrategyLoader`` (default: catálogo v1)

    O resolver não mantém estado entre chamadas além dos colaboradores.
    """

    def __init__(
        self,
        language_packs: Optional[LanguagePackRegistry] = None,
        strategies: Optional[NamedStrategyLoader] = None,
    ):
        self.language_packs = language_packs or LanguagePackRegistry.v1()
        self.strategies = strategies or NamedStrategyLoader.v1()

    def resolve(self, overrides: Optional[Mapping[str, Any]] = None) -> ResolvedConfiguration:
        """
        Resolve a configuração efetiva a partir de overrides chave/valor.

        Args:
            overrides (Optional[Mapping[str, Any]]): Overrides em texto
                (ex.: ``{"maxIter": "500", "language": "french"}``).

        Returns:
            ResolvedConfiguration: Configuração imutável totalmente resolvida.

        Raises:
            TypeParseError: Se um valor não converter para o tipo declarado.
            UnknownLanguageError: Se ``language`` não for um idioma suportado.
            StrategyResolutionError: Se ``escaper`` não puder ser instanciado.
        """
        overrides = overrides or {}
        values: Dict[str, Any] = {}
        deferred = []

        for spec in FIELD_SPECS:
            if spec.key not in overrides:
                values[spec.attr] = spec.default
                continue

            raw = overrides[spec.key]
            if spec.dtype == "strategy":
                deferred.append((spec, raw))
            elif spec.dtype == "language":
                values[spec.attr] = self._resolve_language(spec, raw)
            else:
                values[spec.attr] = parse_value(spec, raw)
            logger.debug("override %s=%r", spec.key, raw)

        # estratégias dinâmicas por último: idioma já está resolvido
        for spec, raw in deferred:
            values[spec.attr] = self._resolve_strategy(spec, raw)
            values["escaper_name"] = raw.strip()

        for key in overrides:
            if key not in _KNOWN_KEYS:
                logger.debug("ignoring unrecognized override key %r", key)

        return ResolvedConfiguration(_language_packs=self.language_packs, **values)

    def _resolve_language(self, spec: FieldSpec, raw: Any) -> Language:
        if not isinstance(raw, str):
            raise TypeParseError(spec.key, raw, "string")

        language = Language.find(raw)
        if language is None:
            raise UnknownLanguageError(raw)
        try:
            self.language_packs.lookup(language)
        except KeyError as e:
            raise UnknownLanguageError(raw, "no language pack registered") from e
        return language

    def _resolve_strategy(self, spec: FieldSpec, raw: Any) -> Escaper:
        if not isinstance(raw, str):
            raise TypeParseError(spec.key, raw, "string")

        try:
            return self.strategies.load(raw)
        except StrategyLoadError as e:
            raise StrategyResolutionError(raw, str(e)) from e


_KNOWN_KEYS = frozenset(spec.key for spec in FIELD_SPECS)


def resolve(overrides: Optional[Mapping[str, Any]] = None) -> ResolvedConfiguration:
    """Atalho: resolve com os catálogos v1 de idiomas e estratégias."""
    return ConfigurationResolver().resolve(overrides)
