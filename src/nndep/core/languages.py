"""
Idiomas suportados e registry de language packs.

No nndep o idioma é um conjunto fechado (``Language``) e cada idioma
possui exatamente um ``LanguagePack`` com as propriedades de treebank
necessárias para treino e análise (tags de pontuação, pontuação final
de sentença, símbolo inicial).

Este módulo fornece:
- Language: enum fechado de idiomas
- LanguagePack: bundle imutável de propriedades por idioma
- LanguagePackRegistry: ponto único de verdade para ``Language -> LanguagePack``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional


class Language(str, Enum):
    """
    Idiomas suportados pelo parser.

    O valor textual é o nome canônico do idioma, usado tanto na resolução
    de overrides (comparação case-insensitive) quanto no dump de diagnóstico.
    """
    ARABIC = "Arabic"
    CHINESE = "Chinese"
    UNIVERSAL_CHINESE = "UniversalChinese"
    ENGLISH = "English"
    UNIVERSAL_ENGLISH = "UniversalEnglish"
    FRENCH = "French"
    GERMAN = "German"
    HEBREW = "Hebrew"
    SPANISH = "Spanish"
    UNSPECIFIED = "Unspecified"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def find(cls, name: str) -> Optional["Language"]:
        """Busca exata e case-insensitive pelo nome canônico; None se não houver."""
        wanted = name.strip().lower()
        for language in cls:
            if language.value.lower() == wanted:
                return language
        return None


@dataclass(frozen=True)
class LanguagePack:
    """Propriedades de treebank específicas de um idioma."""

    name: str
    punctuation_tags: FrozenSet[str] = field(default_factory=frozenset)
    sentence_final_words: FrozenSet[str] = field(default_factory=frozenset)
    start_symbol: str = "ROOT"

    def is_punctuation_tag(self, tag: str) -> bool:
        return tag in self.punctuation_tags

    def is_sentence_final(self, word: str) -> bool:
        return word in self.sentence_final_words


class LanguagePackRegistry:
    """Registry determinístico de ``Language -> LanguagePack``.

    Extensibilidade é explícita: packs são registrados via `register()`.
    O catálogo `v1()` cobre todo o enum ``Language``.
    """

    def __init__(self, packs: Optional[Dict[Language, LanguagePack]] = None):
        self._packs: Dict[Language, LanguagePack] = {}
        if packs:
            for language, pack in packs.items():
                self.register(language, pack)

    @classmethod
    def v1(cls) -> "LanguagePackRegistry":
        """Factory do catálogo v1 (um pack por idioma suportado)."""
        return cls(packs=_default_packs_v1())

    def register(self, language: Language, pack: LanguagePack) -> None:
        if not isinstance(language, Language):
            raise TypeError("language must be a Language")
        if not isinstance(pack, LanguagePack):
            raise TypeError("pack must be a LanguagePack")
        if language in self._packs:
            raise ValueError(f"language already registered: {language}")
        self._packs[language] = pack

    def languages(self) -> List[Language]:
        return [language for language in Language if language in self._packs]

    def lookup(self, language: Language) -> LanguagePack:
        if language not in self._packs:
            raise KeyError(f"no language pack registered for: {language}")
        return self._packs[language]


def _packs(languages: Iterable[Language], pack: LanguagePack) -> Dict[Language, LanguagePack]:
    return {language: pack for language in languages}


def _penn_pack() -> LanguagePack:
    return LanguagePack(
        name="PennTreebank",
        punctuation_tags=frozenset({"''", "``", "-LRB-", "-RRB-", ".", ":", ","}),
        sentence_final_words=frozenset({".", "?", "!"}),
    )


def _default_packs_v1() -> Dict[Language, LanguagePack]:
    """Catálogo v1: packs de treebank por idioma."""
    penn = _penn_pack()

    chinese = LanguagePack(
        name="ChineseTreebank",
        punctuation_tags=frozenset({"PU"}),
        sentence_final_words=frozenset({"。", "．", "！", "？", "?", "!", "."}),
    )

    arabic = LanguagePack(
        name="ArabicTreebank",
        punctuation_tags=frozenset({"PUNC"}),
        sentence_final_words=frozenset({".", "?", "!", "؟"}),
    )

    french = LanguagePack(
        name="FrenchTreebank",
        punctuation_tags=frozenset({"PUNC"}),
        sentence_final_words=frozenset({".", "?", "!"}),
    )

    german = LanguagePack(
        name="NegraPenn",
        punctuation_tags=frozenset({"$.", "$,", "$*LRB*"}),
        sentence_final_words=frozenset({".", "?", "!"}),
    )

    hebrew = LanguagePack(
        name="HebrewTreebank",
        punctuation_tags=frozenset({
            "yyCLN", "yyCM", "yyDASH", "yyDOT", "yyEXCL",
            "yyLRB", "yyQM", "yyQUOT", "yyRRB", "yySCLN",
        }),
        sentence_final_words=frozenset({".", "?", "!"}),
    )

    spanish = LanguagePack(
        name="SpanishTreebank",
        punctuation_tags=frozenset({
            "faa", "fat", "fc", "fd", "fe", "fg", "fh", "fia", "fit",
            "fp", "fpa", "fpt", "fs", "ft", "fx", "fz",
        }),
        sentence_final_words=frozenset({".", "?", "!"}),
    )

    packs: Dict[Language, LanguagePack] = {}
    packs.update(_packs([Language.ENGLISH, Language.UNIVERSAL_ENGLISH, Language.UNSPECIFIED], penn))
    packs.update(_packs([Language.CHINESE, Language.UNIVERSAL_CHINESE], chinese))
    packs[Language.ARABIC] = arabic
    packs[Language.FRENCH] = french
    packs[Language.GERMAN] = german
    packs[Language.HEBREW] = hebrew
    packs[Language.SPANISH] = spanish
    return packs
