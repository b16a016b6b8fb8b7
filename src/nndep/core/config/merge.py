"""
Utilitário canônico de merge de fontes de override.

Overrides do nndep são mapas planos ``chave -> texto``. Várias fontes
(arquivo de propriedades, linha de comando) são combinadas em ordem,
com precedência da fonte mais à direita.

Política de merge:
    - chaves são planas (aninhamento já foi achatado pelo loader)
    - a última fonte que define uma chave vence
    - nenhum input é mutado

Limites explícitos:
    - Não converte tipos (isso é papel do resolver)
    - Não filtra chaves desconhecidas
"""

from typing import Dict, Mapping, Optional

from .errors import OverrideValueTypeError


def merge_overrides(*sources: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Combina fontes de override em um novo dicionário.

    Args:
        *sources: Mapas ``chave -> texto`` em ordem crescente de precedência.
            Fontes ``None`` são ignoradas.

    Returns:
        Dict[str, str]: Novo dicionário com as chaves de todas as fontes.

    Raises:
        OverrideValueTypeError: Se alguma chave ou valor não for string.
    """
    result: Dict[str, str] = {}
    for source in sources:
        if source is None:
            continue
        for key, value in source.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise OverrideValueTypeError(
                    f"Overrides devem ser str -> str, recebido: "
                    f"{type(key).__name__} -> {type(value).__name__}"
                )
            result[key] = value
    return result
