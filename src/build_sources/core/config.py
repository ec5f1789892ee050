from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_USER_AGENT = "build-sources/0.1 (+https://pypi.org/project/build-sources/)"


class ToolConfig(BaseModel):
    """
    Nomes dos executáveis externos e parâmetros da sonda Git.

    Os valores padrão assumem `git`, `svn` e `tar` no PATH.
    """

    git: str = "git"
    svn: str = "svn"
    tar: str = "tar"

    # Remote registrado no repositório descartável usado pela sonda
    probe_remote: str = "origin"
    probe_dir_prefix: str = "build-sources-detect-git-"

    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("git", "svn", "tar", "probe_remote")
    def must_not_be_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("não pode ser vazio")
        return v.strip()


class SourceJobConfig(BaseModel):
    """
    Contrato de configuração de um job de aquisição de código-fonte.

    Define a URL de origem e o diretório local que vai receber a árvore.
    """

    job_name: str
    source_url: str
    destination_path: str

    # Só faz sentido para repositórios Git; ignorado para os outros tipos
    branch: Optional[str] = None

    # auto: atualiza se o destino já tem conteúdo, senão faz a aquisição
    mode: Literal["auto", "acquire", "update"] = "auto"

    tools: ToolConfig = Field(default_factory=ToolConfig)

    @field_validator("job_name")
    def job_name_must_be_slug(cls, v):
        if " " in v:
            raise ValueError("job_name não deve conter espaços")
        return v.lower()

    @field_validator("source_url", "destination_path")
    def must_not_be_empty(cls, v):
        if not v.strip():
            raise ValueError("campo obrigatório vazio")
        return v.strip()
