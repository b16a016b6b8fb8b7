# src/nndep/core/__init__.py
"""
Core do nndep.

Este pacote contém a resolução da configuração do parser de
dependências neural e seus colaboradores de lookup dinâmico.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de dependências do pipeline de treino e análise

Componentes principais:
    - config     → defaults, overrides, resolução tipada, dump e hashing
    - languages  → idiomas suportados e registry de language packs
    - strategies → instanciação de estratégias (escapers) por nome

Limites explícitos:
    - Não treina nem executa o parser
    - Não faz parsing de linha de comando além do formato ``-key value``
"""
