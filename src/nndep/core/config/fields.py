"""
Tabela canônica de campos configuráveis do parser.

Cada campo da configuração é declarado aqui uma única vez, como um
``FieldSpec`` (chave de override, atributo, tipo, default). O resolver
percorre esta tabela; nenhum outro módulo conhece defaults.

Também vivem aqui as constantes estruturais do parser. Elas não são
campos de configuração: formatos de tensores a jusante dependem delas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Tuple

from ..languages import Language


FieldDType = Literal["int", "float", "bool", "str", "language", "strategy"]


# Tokens especiais do vocabulário
UNKNOWN = "-UNKNOWN-"
ROOT = "-ROOT-"
NULL = "-NULL-"
NONEXIST = -1

# Separador usado nas mensagens de treino
SEPARATOR = "###################"

# Total de tokens de entrada do classificador (cada um como embedding).
NUM_TOKENS = 48

DEFAULT_TAGGER_PATH = (
    "edu/stanford/nlp/models/pos-tagger/english-left3words/english-left3words-distsim.tagger"
)


@dataclass(frozen=True)
class FieldSpec:
    """Declara um campo configurável: chave externa, atributo interno, tipo e default."""

    key: str
    attr: str
    dtype: FieldDType
    default: Any
    description: str = ""


FIELD_SPECS: Tuple[FieldSpec, ...] = (
    FieldSpec("language", "language", "language", Language.ENGLISH,
              description="Idioma sendo analisado"),
    FieldSpec("trainingThreads", "training_threads", "int", 1,
              description="Threads de treino (também controla a partição dos mini-batches)"),
    FieldSpec("wordCutOff", "word_cut_off", "int", 1,
              description="Frequência mínima de uma palavra no corpus de treino"),
    FieldSpec("initRange", "init_range", "float", 0.01,
              description="Pesos iniciais uniformes em [-initRange, initRange]"),
    FieldSpec("maxIter", "max_iter", "int", 20000,
              description="Número máximo de iterações de treino"),
    FieldSpec("batchSize", "batch_size", "int", 10000,
              description="Tamanho do mini-batch"),
    FieldSpec("adaEps", "ada_eps", "float", 1e-6,
              description="Epsilon do denominador do AdaGrad"),
    FieldSpec("adaAlpha", "ada_alpha", "float", 0.01,
              description="Taxa de aprendizado global inicial do AdaGrad"),
    FieldSpec("regParameter", "reg_parameter", "float", 1e-8,
              description="Coeficiente de regularização"),
    FieldSpec("dropProb", "drop_prob", "float", 0.5,
              description="Probabilidade de dropout"),
    FieldSpec("hiddenSize", "hidden_size", "int", 200,
              description="Largura da camada oculta"),
    FieldSpec("embeddingSize", "embedding_size", "int", 50,
              description="Dimensionalidade dos embeddings"),
    FieldSpec("numPreComputed", "num_pre_computed", "int", 100000,
              description="Tokens com ativações pré-computadas (0 desativa)"),
    FieldSpec("evalPerIter", "eval_per_iter", "int", 100,
              description="Intervalo de avaliação UAS, em iterações"),
    FieldSpec("clearGradientsPerIter", "clear_gradients_per_iter", "int", 0,
              description="Intervalo de limpeza do histórico AdaGrad (0 = nunca)"),
    FieldSpec("saveIntermediate", "save_intermediate", "bool", True,
              description="Salvar modelo intermediário a cada melhora de UAS"),
    FieldSpec("sentenceDelimiter", "sentence_delimiter", "str", None,
              description="Delimitador de sentenças; None = segmentação automática"),
    FieldSpec("tagger.model", "tagger", "str", DEFAULT_TAGGER_PATH,
              description="Caminho do modelo de POS tagger"),
    FieldSpec("escaper", "escaper", "strategy", None,
              description="Nome da estratégia de escaping de palavras"),
)

FIELDS_BY_KEY: Dict[str, FieldSpec] = {spec.key: spec for spec in FIELD_SPECS}


def default_values() -> Dict[str, Any]:
    """Retorna ``{attr: default}`` para todos os campos da tabela."""
    return {spec.attr: spec.default for spec in FIELD_SPECS}
