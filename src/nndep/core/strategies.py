"""
NamedStrategyLoader: instanciação de estratégias por nome.

No nndep, estratégias plugáveis (hoje, o escaper de palavras) são
escolhidas por nome em tempo de configuração e guardadas como um handle
opaco. A resolução segue duas regras, nesta ordem:

1. nomes registrados explicitamente (`register()` / catálogo `v1()`)
2. nomes Python totalmente qualificados (``pacote.modulo.Classe`` ou
   ``pacote.modulo:Classe``), importados e instanciados sem argumentos

Em ambos os casos o objeto resultante precisa ser callable.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..escapers import ChineseEscaper, PTBEscaper


class StrategyLoadError(LookupError):
    """Nome não resolvível, ou objeto não instanciável / não callable."""


@dataclass(frozen=True)
class StrategySpec:
    """Especificação de uma estratégia registrada."""

    name: str
    factory: Callable[[], Any]
    description: str = ""

    def build(self) -> Any:
        return self.factory()


class NamedStrategyLoader:
    """Registry de estratégias com fallback para import por nome qualificado."""

    def __init__(self, specs: Optional[Iterable[StrategySpec]] = None):
        self._specs: Dict[str, StrategySpec] = {}
        if specs:
            for s in specs:
                self.register(s)

    @classmethod
    def v1(cls) -> "NamedStrategyLoader":
        """Factory do catálogo v1 (escapers embutidos)."""
        return cls(specs=_default_specs_v1())

    def register(self, spec: StrategySpec) -> None:
        if not isinstance(spec, StrategySpec):
            raise TypeError("spec must be a StrategySpec")
        if not isinstance(spec.name, str) or not spec.name.strip():
            raise ValueError("name must be a non-empty string")
        if spec.name in self._specs:
            raise ValueError(f"strategy already registered: {spec.name}")
        self._specs[spec.name] = spec

    def list_names(self) -> List[str]:
        return sorted(self._specs.keys())

    def load(self, name: str) -> Any:
        """Resolve ``name`` e retorna uma instância callable.

        Raises:
            StrategyLoadError: se o nome não resolve, a construção falha
                ou o objeto construído não é callable.
        """
        name = name.strip()
        if not name:
            raise StrategyLoadError("strategy name must be a non-empty string")

        spec = self._specs.get(name)
        factory = spec.factory if spec is not None else _import_class(name)

        try:
            strategy = factory()
        except Exception as e:  # noqa: BLE001
            raise StrategyLoadError(f"could not instantiate {name}: {e}") from e

        if not callable(strategy):
            raise StrategyLoadError(f"{name} does not produce a callable strategy")
        return strategy


def _import_class(name: str) -> Callable[[], Any]:
    if ":" in name:
        module_name, _, attr = name.partition(":")
    else:
        module_name, _, attr = name.rpartition(".")
    if not module_name or not attr:
        raise StrategyLoadError(f"not a registered or fully-qualified name: {name}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise StrategyLoadError(f"cannot import module {module_name}: {e}") from e

    target = getattr(module, attr, None)
    if not isinstance(target, type):
        raise StrategyLoadError(f"{name} is not a class")
    return target


def _default_specs_v1() -> List[StrategySpec]:
    """Catálogo v1: escaper PTB e escaper chinês."""
    return [
        StrategySpec(name="ptb", factory=PTBEscaper, description="Brackets -> -LRB-/-RRB-/..."),
        StrategySpec(name="chinese", factory=ChineseEscaper, description="ASCII -> full-width"),
    ]
