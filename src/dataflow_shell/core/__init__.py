"""
Core do dataflow-shell.

Reúne as responsabilidades da ponte sessão → cluster, independentes de
qualquer REPL ou engine concreto:

    - config       → configuração de submissão (load, merge, hash, opções)
    - dependencies → resolução e montagem da lista de jars
    - environment  → environments de execução e guard do processo
    - traceability → Event Log de submissões
    - errors / exceptions → catálogo de erros e exceções tipadas

Princípios fundamentais:
    - Nenhuma decisão silenciosa: falhas sobem ao chamador imediato
    - Estado mutável compartilhado apenas no guard, sob lock
"""
