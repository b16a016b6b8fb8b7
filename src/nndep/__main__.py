"""
Resolve e imprime a configuração efetiva do parser.

Uso:
    python -m nndep [-props FILE] [-key value ...]

O dump de parâmetros vai para stderr; o hash da configuração vai para
stdout. Erros de configuração terminam com código 2.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .core.config import (
    ConfigError,
    args_to_overrides,
    compute_config_hash,
    print_parameters,
    resolve,
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        config = resolve(args_to_overrides(args))
    except ConfigError as e:
        sys.stderr.write(f"error: {e}\n")
        return 2

    print_parameters(config)
    sys.stdout.write(compute_config_hash(config) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
