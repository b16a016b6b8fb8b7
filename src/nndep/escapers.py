"""
Escapers de palavras usados na análise de texto cru.

Um escaper é qualquer callable ``List[TaggedWord] -> List[TaggedWord]``.
Ele é resolvido por nome no momento da configuração (ver
``nndep.core.strategies``) e invocado depois pelo pipeline de análise.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class TaggedWord:
    """Token com tag de POS opcional."""

    word: str
    tag: Optional[str] = None


@runtime_checkable
class Escaper(Protocol):
    """Contrato de um escaper: transforma uma sequência de tokens tagueados."""

    def __call__(self, words: Sequence[TaggedWord]) -> List[TaggedWord]:
        ...


_PTB_BRACKETS: Dict[str, str] = {
    "(": "-LRB-",
    ")": "-RRB-",
    "[": "-LSB-",
    "]": "-RSB-",
    "{": "-LCB-",
    "}": "-RCB-",
}


@dataclass(frozen=True)
class PTBEscaper:
    """Substitui colchetes, chaves e parênteses pelos tokens do Penn Treebank."""

    def __call__(self, words: Sequence[TaggedWord]) -> List[TaggedWord]:
        return [replace(w, word=_PTB_BRACKETS.get(w.word, w.word)) for w in words]


def _to_full_width(text: str) -> str:
    chars = []
    for ch in text:
        code = ord(ch)
        if ch == " ":
            chars.append("\u3000")
        elif 0x21 <= code <= 0x7E:
            chars.append(chr(code + 0xFEE0))
        else:
            chars.append(ch)
    return "".join(chars)


@dataclass(frozen=True)
class ChineseEscaper:
    """Converte ASCII imprimível para as formas full-width usadas no CTB."""

    def __call__(self, words: Sequence[TaggedWord]) -> List[TaggedWord]:
        return [replace(w, word=_to_full_width(w.word)) for w in words]
