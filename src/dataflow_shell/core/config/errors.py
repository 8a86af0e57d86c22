# src/dataflow_shell/core/config/errors.py
"""
Erros da configuração de submissão.

Hierarquia:

    ConfigError
    ├── DefaultsNotFoundError        arquivo de defaults ausente
    ├── UnsupportedConfigFormatError extensão fora de .yaml/.yml/.json
    ├── InvalidConfigRootTypeError   raiz do arquivo não é mapeamento
    ├── ConfigTypeConflictError      mapeamento vs escalar na mesma chave
    └── InvalidOptionValueError      valor não interpretável no tipo da opção

Estes erros não passam pelo catálogo de `ShellErrorPayload`: ocorrem
antes de existir um environment e são reportados diretamente pela CLI.
Quando surgem dentro de uma submissão, o builder os converte.
"""


class ConfigError(Exception):
    """Raiz dos erros de configuração."""


class DefaultsNotFoundError(ConfigError):
    """O arquivo de defaults é obrigatório e não foi encontrado."""


class UnsupportedConfigFormatError(ConfigError):
    pass


class InvalidConfigRootTypeError(ConfigError):
    pass


class ConfigTypeConflictError(ConfigError):
    """
    Uma mesma chave aparece como mapeamento em uma camada e como escalar
    em outra (ex.: `execution: {attached: true}` vs `execution: remote`).
    Nenhum resultado parcial é produzido.
    """


class InvalidOptionValueError(ConfigError):
    """Ex.: `execution.attached: 3`. Só "true"/"false" textuais são aceitos como booleanos."""
