# tests/conftest.py
"""
Fixtures compartilhados para testes do nndep.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos de arquivos de override (YAML, JSON, properties)
- a tabela de defaults esperada, escrita à mão
- resolvers com colaboradores controlados

Decisões arquiteturais:
    - Conteúdos de arquivo são fornecidos como strings; o teste decide
      se grava em ``tmp_path``
    - Os defaults esperados são literais, não derivados do código
      testado, para que uma mudança acidental de default seja detectada
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são determinísticas e seguras em paralelo
"""

import pytest


# =====================================================
# Defaults compilados
# =====================================================

@pytest.fixture
def expected_defaults() -> dict:
    """
    Fixture com os defaults compilados esperados, indexados por atributo.

    Decisões arquiteturais:
        - Valores literais, independentes de ``fields.FIELD_SPECS``
        - ``language`` é importado do core (enum fechado)

    Returns:
        dict: ``{atributo: default}`` para todos os campos configuráveis.
    """
    from nndep.core.languages import Language

    return {
        "language": Language.ENGLISH,
        "training_threads": 1,
        "word_cut_off": 1,
        "init_range": 0.01,
        "max_iter": 20000,
        "batch_size": 10000,
        "ada_eps": 1e-6,
        "ada_alpha": 0.01,
        "reg_parameter": 1e-8,
        "drop_prob": 0.5,
        "hidden_size": 200,
        "embedding_size": 50,
        "num_pre_computed": 100000,
        "eval_per_iter": 100,
        "clear_gradients_per_iter": 0,
        "save_intermediate": True,
        "sentence_delimiter": None,
        "tagger": "edu/stanford/nlp/models/pos-tagger/english-left3words/english-left3words-distsim.tagger",
        "escaper": None,
        "escaper_name": None,
    }


# =====================================================
# Fontes de override
# =====================================================

@pytest.fixture
def project_like_overrides_yaml() -> str:
    """
    Fixture que fornece um YAML de overrides semelhante ao uso real.

    Ele é utilizado para validar:
    - leitura de overrides em YAML
    - achatamento de chaves aninhadas (``tagger.model``)
    - normalização de escalares YAML (int, float, bool) para texto

    Returns:
        str: Conteúdo YAML de overrides.
    """
    return """\
language: French
trainingThreads: 4
adaAlpha: 0.02
saveIntermediate: false
tagger:
  model: models/french.tagger
"""


@pytest.fixture
def project_like_overrides_properties() -> str:
    """Conteúdo ``.properties`` com os mesmos overrides do YAML de referência."""
    return """\
# overrides de treino
language = French
trainingThreads=4
adaAlpha: 0.02
! comentário no estilo properties
saveIntermediate false
tagger.model=models/french.tagger
"""


@pytest.fixture
def write_file(tmp_path):
    """
    Fixture factory que grava um arquivo em ``tmp_path`` e retorna seu caminho.

    Returns:
        Callable[[str, str], pathlib.Path]: ``write(nome, conteúdo)``.
    """

    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =====================================================
# Resolvers
# =====================================================

@pytest.fixture
def resolver():
    """Resolver com os catálogos v1 de idiomas e estratégias."""
    from nndep.core.config.resolver import ConfigurationResolver

    return ConfigurationResolver()
