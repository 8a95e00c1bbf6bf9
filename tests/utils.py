import typing
from starlette.routing import BaseRoute
from starlette.testclient import TestClient


class ClientFactory(typing.Protocol):  # pragma: nocover
    def __call__(
        self,
        routes: typing.Iterable[BaseRoute] = (),
        with_sessions: bool = True,
        raise_server_exceptions: bool = True,
    ) -> TestClient: ...
