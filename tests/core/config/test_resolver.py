# tests/core/config/test_resolver.py
"""
Testes do resolver de configuração (ConfigurationResolver / resolve).

Os testes asseguram que:
- ``resolve({})`` produz exatamente os defaults compilados
- cada override reconhecido afeta apenas o seu próprio campo
- chaves não reconhecidas são ignoradas
- valores não conversíveis falham com ``TypeParseError`` nomeando a chave
- ``language`` é resolvido de forma case-insensitive e falha se desconhecido
- ``escaper`` é instanciado por nome ou falha com ``StrategyResolutionError``
- a configuração resultante é imutável e a resolução é idempotente

Decisões arquiteturais:
    - A resolução é tudo-ou-nada
    - O language pack é derivado de ``language`` e nunca definido à parte

Limites explícitos:
    - Não valida o formato do dump de diagnóstico (ver test_describe)
    - Não valida leitura de arquivos (ver test_loader)
"""

import dataclasses

import pytest

try:
    from nndep.core.config.resolver import ConfigurationResolver, ResolvedConfiguration, resolve
    from nndep.core.config.errors import (
        ConfigurationError,
        StrategyResolutionError,
        TypeParseError,
        UnknownLanguageError,
    )
    from nndep.core.languages import Language, LanguagePack, LanguagePackRegistry
    from nndep.core.strategies import NamedStrategyLoader, StrategySpec
    from nndep.escapers import PTBEscaper, TaggedWord
except Exception as e:  # noqa: BLE001
    resolve = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o resolver e suas exceções tipadas estejam disponíveis.

    Falha explicitamente com uma mensagem orientada quando o módulo
    ``resolver`` ou as exceções canônicas não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing resolver modules. Implement:\n"
            "- src/nndep/core/config/resolver.py (resolve, ConfigurationResolver)\n"
            "- src/nndep/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


# Um valor válido (e diferente do default) para cada chave reconhecida.
_VALID_OVERRIDES = [
    ("trainingThreads", "8", "training_threads", 8),
    ("wordCutOff", "3", "word_cut_off", 3),
    ("initRange", "0.05", "init_range", 0.05),
    ("maxIter", "500", "max_iter", 500),
    ("batchSize", "256", "batch_size", 256),
    ("adaEps", "1e-5", "ada_eps", 1e-5),
    ("adaAlpha", "0.1", "ada_alpha", 0.1),
    ("regParameter", "0.0001", "reg_parameter", 0.0001),
    ("dropProb", "0.25", "drop_prob", 0.25),
    ("hiddenSize", "400", "hidden_size", 400),
    ("embeddingSize", "100", "embedding_size", 100),
    ("numPreComputed", "0", "num_pre_computed", 0),
    ("evalPerIter", "50", "eval_per_iter", 50),
    ("clearGradientsPerIter", "1000", "clear_gradients_per_iter", 1000),
    ("saveIntermediate", "false", "save_intermediate", False),
    ("sentenceDelimiter", "\n", "sentence_delimiter", "\n"),
    ("tagger.model", "models/custom.tagger", "tagger", "models/custom.tagger"),
    ("language", "Chinese", "language", None),  # comparado via enum abaixo
]


def test_empty_overrides_yield_compiled_defaults(expected_defaults):
    """
    Verifica que ``resolve({})`` reproduz a tabela de defaults campo a campo.

    Invariantes:
        - Nenhum campo difere do default compilado
        - O resultado é igual a ``ResolvedConfiguration.defaults()``
    """
    _require_imports()
    config = resolve({})

    for attr, expected in expected_defaults.items():
        assert getattr(config, attr) == expected, attr
    assert config == ResolvedConfiguration.defaults()
    assert resolve(None) == config


@pytest.mark.parametrize("key,raw,attr,expected", _VALID_OVERRIDES)
def test_single_override_is_isolated(expected_defaults, key, raw, attr, expected):
    """
    Verifica que um override válido altera apenas o seu próprio campo.

    Decisões arquiteturais:
        - Cada chave é independente das demais
        - Nenhuma interferência entre campos

    Invariantes:
        - field(k) == parse(v)
        - todos os outros campos permanecem no default
    """
    _require_imports()
    config = resolve({key: raw})

    if attr == "language":
        expected = Language.CHINESE
    assert getattr(config, attr) == expected

    for other, default in expected_defaults.items():
        if other != attr:
            assert getattr(config, other) == default, other


def test_unrecognized_keys_are_ignored():
    _require_imports()
    config = resolve({"numTokens": "12", "foo": "bar", "MAXITER": "5"})
    assert config == ResolvedConfiguration.defaults()


def test_num_tokens_is_a_constant_not_a_field():
    _require_imports()
    config = resolve({"numTokens": "12"})
    assert ResolvedConfiguration.NUM_TOKENS == 48
    assert config.NUM_TOKENS == 48
    assert "NUM_TOKENS" not in {f.name for f in dataclasses.fields(ResolvedConfiguration)}
    assert "numTokens" not in config.to_dict()


@pytest.mark.parametrize(
    "key,raw",
    [
        ("maxIter", "abc"),
        ("maxIter", "1.5"),
        ("trainingThreads", ""),
        ("batchSize", "1_000"),
        ("initRange", "zero"),
        ("dropProb", "0,5"),
        ("saveIntermediate", "yes"),
        ("saveIntermediate", "1"),
    ],
)
def test_unparseable_override_raises_type_parse_error(key, raw):
    """
    Verifica que um override presente mas não conversível é erro, não fallback.

    Invariantes:
        - A exceção é ``TypeParseError`` (subclasse de ``ConfigurationError``)
        - A exceção nomeia a chave e carrega o valor bruto
    """
    _require_imports()
    with pytest.raises(TypeParseError) as excinfo:
        resolve({key: raw})

    err = excinfo.value
    assert isinstance(err, ConfigurationError)
    assert err.key == key
    assert err.raw_value == raw
    assert err.to_dict()["type"] == "TYPE_PARSE_ERROR"


def test_non_string_override_value_raises_type_parse_error():
    _require_imports()
    with pytest.raises(TypeParseError) as excinfo:
        resolve({"maxIter": 5})
    assert excinfo.value.key == "maxIter"


def test_parsing_tolerates_surrounding_whitespace_and_case():
    _require_imports()
    config = resolve({"maxIter": " 42 ", "saveIntermediate": "FALSE", "adaEps": " 1E-7"})
    assert config.max_iter == 42
    assert config.save_intermediate is False
    assert config.ada_eps == 1e-7


def test_language_is_case_insensitive():
    """
    Verifica que ``ENGLISH`` e ``english`` resolvem para o mesmo idioma e pack.
    """
    _require_imports()
    upper = resolve({"language": "ENGLISH"})
    lower = resolve({"language": "english"})

    assert upper.language is Language.ENGLISH
    assert upper.language == lower.language
    assert upper.language_pack == lower.language_pack


def test_language_pack_is_derived_from_language():
    _require_imports()
    config = resolve({"language": "chinese"})
    assert config.language_pack == LanguagePackRegistry.v1().lookup(Language.CHINESE)
    assert config.language_pack.is_punctuation_tag("PU")


def test_unknown_language_raises():
    """
    Verifica que um idioma desconhecido falha explicitamente.

    Decisões arquiteturais:
        - Nunca cai silenciosamente no idioma padrão
    """
    _require_imports()
    with pytest.raises(UnknownLanguageError) as excinfo:
        resolve({"language": "Klingon"})
    assert excinfo.value.key == "language"
    assert excinfo.value.raw_value == "Klingon"


def test_language_match_is_exact():
    _require_imports()
    with pytest.raises(UnknownLanguageError):
        resolve({"language": "Eng"})


def test_language_missing_from_custom_registry_raises():
    _require_imports()
    registry = LanguagePackRegistry({Language.ENGLISH: LanguagePack(name="Only")})
    resolver = ConfigurationResolver(language_packs=registry)

    assert resolver.resolve({}).language_pack.name == "Only"
    with pytest.raises(UnknownLanguageError):
        resolver.resolve({"language": "French"})


def test_unresolvable_escaper_raises():
    _require_imports()
    with pytest.raises(StrategyResolutionError) as excinfo:
        resolve({"escaper": "no.such.Class"})
    assert excinfo.value.key == "escaper"
    assert excinfo.value.raw_value == "no.such.Class"


def test_registered_escaper_is_instantiated():
    """
    Verifica que um nome de estratégia válido produz um escaper funcional.

    Invariantes:
        - ``escaper`` não é None
        - o escaper cumpre o contrato ``List[TaggedWord] -> List[TaggedWord]``
    """
    _require_imports()
    config = resolve({"escaper": "ptb"})

    assert config.escaper is not None
    out = config.escaper([TaggedWord("("), TaggedWord("dog", "NN")])
    assert out == [TaggedWord("-LRB-"), TaggedWord("dog", "NN")]


def test_fully_qualified_escaper_is_instantiated():
    _require_imports()
    config = resolve({"escaper": "nndep.escapers.PTBEscaper"})
    assert isinstance(config.escaper, PTBEscaper)


def test_escaper_from_custom_loader():
    _require_imports()
    calls = []

    def factory():
        calls.append(1)
        return lambda words: list(reversed(words))

    loader = NamedStrategyLoader([StrategySpec(name="reverse", factory=factory)])
    config = ConfigurationResolver(strategies=loader).resolve({"escaper": "reverse"})

    assert calls == [1]
    assert config.escaper([TaggedWord("a"), TaggedWord("b")]) == [TaggedWord("b"), TaggedWord("a")]


def test_failure_is_all_or_nothing():
    _require_imports()
    with pytest.raises(StrategyResolutionError):
        resolve({"maxIter": "10", "language": "French", "escaper": "missing"})


def test_resolved_configuration_is_immutable():
    _require_imports()
    config = resolve({})
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_iter = 1
    with pytest.raises(AttributeError):
        config.language_pack = None


def test_resolution_is_idempotent():
    _require_imports()
    overrides = {"maxIter": "10", "language": "german", "escaper": "chinese"}
    first = resolve(overrides)
    second = resolve(overrides)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_to_dict_is_keyed_by_override_key():
    _require_imports()
    out = resolve({"escaper": "ptb", "language": "spanish"}).to_dict()
    assert out["language"] == "Spanish"
    assert out["escaper"] == "ptb"
    assert out["tagger.model"].endswith("english-left3words-distsim.tagger")
    assert len(out) == 19


def test_special_tokens_are_exported_constants():
    _require_imports()
    from nndep.core.config import NONEXIST, NULL, ROOT, UNKNOWN

    assert (UNKNOWN, ROOT, NULL, NONEXIST) == ("-UNKNOWN-", "-ROOT-", "-NULL-", -1)
    assert not {"UNKNOWN", "ROOT", "NULL"} & set(resolve({}).to_dict())


def test_plain_class_escaper_resolutions_compare_equal(tmp_path, monkeypatch):
    """
    Verifica a idempotência com um escaper carregado por caminho pontuado
    cuja classe não define ``__eq__``.

    Invariantes:
        - A igualdade usa o nome pedido, não a identidade da instância
        - ``to_dict`` e o hash expõem o nome pedido
    """
    _require_imports()
    (tmp_path / "identity_escaper_mod.py").write_text(
        "class Identity:\n"
        "    def __call__(self, words):\n"
        "        return list(words)\n",
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))

    first = resolve({"escaper": "identity_escaper_mod.Identity"})
    second = resolve({"escaper": " identity_escaper_mod.Identity "})

    assert first.escaper is not second.escaper
    assert first == second
    assert first.escaper_name == "identity_escaper_mod.Identity"
    assert first.to_dict()["escaper"] == "identity_escaper_mod.Identity"


def test_escaper_names_for_same_class_are_distinct():
    _require_imports()
    assert resolve({"escaper": "ptb"}) != resolve({"escaper": "nndep.escapers.PTBEscaper"})


def test_language_with_surrounding_whitespace_is_accepted():
    """
    Verifica que espaços ao redor do nome do idioma são descartados.

    Decisões arquiteturais:
        - Valores lidos de arquivos ``.properties`` podem trazer espaços
        - Fora isso o casamento é exato (``Eng`` continua inválido)
    """
    _require_imports()
    assert resolve({"language": " english "}).language is Language.ENGLISH
    assert resolve({"language": "\tFrench\n"}).language is Language.FRENCH
