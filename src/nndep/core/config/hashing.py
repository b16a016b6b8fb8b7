# src/nndep/core/config/hashing.py
"""
Hashing canônico da configuração resolvida do nndep.

O hash gerado representa a identidade estrutural da configuração de uma
run e serve para associar modelos treinados e logs à configuração que
os produziu.

Um modelo salvo só é compatível com outro se, além dos hiperparâmetros,
a camada de entrada tiver o mesmo formato. Por isso o payload inclui
``NUM_TOKENS`` e uma versão de política, e não apenas ``to_dict()``.

Invariantes:
    - Configurações iguais campo a campo produzem o mesmo hash
    - Mudar ``NUM_TOKENS`` ou a política invalida todos os hashes
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""


import json
import hashlib
from typing import Any, Dict

from .fields import NUM_TOKENS
from .resolver import ResolvedConfiguration


HASH_POLICY = "nndep-config/v1"


def hash_payload(config: ResolvedConfiguration) -> Dict[str, Any]:
    """Documento que é serializado e hasheado para ``config``."""
    return {
        "policy": HASH_POLICY,
        "numTokens": NUM_TOKENS,
        "parameters": config.to_dict(),
    }


def compute_config_hash(config: ResolvedConfiguration) -> str:
    """
    Gera um hash determinístico da configuração resolvida.

    O documento de ``hash_payload`` é serializado como JSON canônico
    (chaves ordenadas, separadores compactos, UTF-8) e passado ao SHA-256.

    Raises:
        TypeError: Se o objeto fornecido não for uma ResolvedConfiguration.
    """
    if not isinstance(config, ResolvedConfiguration):
        raise TypeError(
            f"Config para hashing deve ser ResolvedConfiguration, recebido: {type(config).__name__}"
        )

    payload = json.dumps(hash_payload(config), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
