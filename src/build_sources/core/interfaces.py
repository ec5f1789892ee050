from abc import ABC, abstractmethod


class RemoteProber(ABC):
    """
    Interface (Contrato) da sonda usada como último recurso na classificação.

    A sonda real abre processos e conexões de rede; os testes injetam uma
    implementação falsa para exercitar a lógica de decisão sem rede.
    """

    @abstractmethod
    def is_git_remote(self, url: str) -> bool:
        """
        Return True when `url` answers the Git remote-listing protocol.

        False means the listing was attempted and refused. Failures to even
        launch the tooling must raise `ToolInvocationError` instead.
        """
        raise NotImplementedError()
