# src/serverless_parent/core/__init__.py
"""
Core do serverless-parent.

Este pacote reúne a implementação independente do host para herança de
configuração entre serviços: um `serverless.yml` child herda
configuração compartilhada de um `serverless.yml` parent localizado em
outro ponto da árvore de diretórios.

Componentes principais:
    - config  → referência ao parent, localização, loader, deep-merge, hashing
    - service → contexto do serviço, orquestração do merge e saída efetiva
    - errors  → payloads de erro serializáveis

Princípios fundamentais:
    - Nenhuma decisão silenciosa: toda falha é tipada e propagada
    - Nenhum estado global: o documento é passado explicitamente
    - Funções puras sempre que possível (merge, renderização)

Limites explícitos:
    - Não valida o documento contra schema
    - Não resolve variáveis ou referências cruzadas
    - Não busca parents remotos
"""
