import jinja2
import pytest
import typing
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import BaseRoute
from starlette.testclient import TestClient

from flashbag.config import FlashMessagesConfig
from flashbag.messages import FlashMessages
from flashbag.pipelines import Pipelines
from flashbag.lifecycle import enable_flash_messages
from flashbag.sessions import CookieStore, SessionAutoloadMiddleware, SessionMiddleware
from flashbag.templating import Templates
from tests.utils import ClientFactory

TEMPLATES = {
    "index.html": "{{ render_flash_messages('info') }}|{{ render_flash_messages('danger') }}",
    "context.html": "{{ flash_messages|default({})|tojson }}",
}


@pytest.fixture
def session() -> dict[str, typing.Any]:
    return {}


@pytest.fixture
def configuration() -> FlashMessagesConfig:
    return FlashMessagesConfig()


@pytest.fixture
def flash_messages(session: dict[str, typing.Any], configuration: FlashMessagesConfig) -> FlashMessages:
    return FlashMessages(session, configuration)


@pytest.fixture
def pipelines(configuration: FlashMessagesConfig) -> Pipelines:
    pipelines = Pipelines()
    enable_flash_messages(pipelines, configuration)
    return pipelines


@pytest.fixture
def templates() -> Templates:
    return Templates(jinja2.Environment(loader=jinja2.DictLoader(TEMPLATES), autoescape=True))


@pytest.fixture
def test_client_factory(templates: Templates) -> ClientFactory:
    def factory(
        routes: typing.Iterable[BaseRoute] = (),
        with_sessions: bool = True,
        raise_server_exceptions: bool = True,
    ) -> TestClient:
        middleware = []
        if with_sessions:
            middleware = [
                Middleware(
                    SessionMiddleware,
                    store=CookieStore(secret_key="key!"),
                    cookie_https_only=False,
                    cookie_path="/",
                ),
                Middleware(SessionAutoloadMiddleware),
            ]

        app = Starlette(debug=True, routes=list(routes), middleware=middleware)
        templates.install(app)
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return factory
