import pytest
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route

from flashbag.pipelines import Pipeline, Pipelines
from flashbag.testing import RequestFactory
from tests.utils import ClientFactory


def test_pipeline_order() -> None:
    pipeline: Pipeline[str] = Pipeline()
    pipeline.add_item_to_end("b")
    pipeline.add_item_to_end("c")
    pipeline.add_item_to_start("a")
    assert list(pipeline) == ["a", "b", "c"]
    assert len(pipeline) == 3


@pytest.mark.asyncio
async def test_hooks_run_in_order() -> None:
    calls: list[str] = []

    def before_one(request: Request) -> None:
        calls.append("before_one")

    async def before_two(request: Request) -> None:
        calls.append("before_two")

    def after_one(request: Request, response: Response) -> None:
        calls.append("after_one")

    async def after_two(request: Request, response: Response) -> None:
        calls.append("after_two")

    async def endpoint(request: Request) -> Response:
        calls.append("endpoint")
        return PlainTextResponse("ok")

    pipelines = Pipelines()
    pipelines.before_request.add_item_to_end(before_two)
    pipelines.before_request.add_item_to_start(before_one)
    pipelines.after_request.add_item_to_end(after_two)
    pipelines.after_request.add_item_to_start(after_one)

    response = await pipelines.dispatch(RequestFactory(), endpoint)
    assert response.body == b"ok"
    assert calls == ["before_one", "before_two", "endpoint", "after_one", "after_two"]


@pytest.mark.asyncio
async def test_before_hook_short_circuits() -> None:
    calls: list[str] = []

    def guard(request: Request) -> Response:
        return PlainTextResponse("denied", status_code=403)

    def never_called(request: Request) -> None:
        calls.append("before")

    def after(request: Request, response: Response) -> None:
        calls.append("after:%s" % response.status_code)

    def endpoint(request: Request) -> Response:
        calls.append("endpoint")
        return PlainTextResponse("ok")

    pipelines = Pipelines()
    pipelines.before_request.add_item_to_end(guard)
    pipelines.before_request.add_item_to_end(never_called)
    pipelines.after_request.add_item_to_end(after)

    response = await pipelines.dispatch(RequestFactory(), endpoint)
    assert response.status_code == 403
    assert calls == ["after:403"]


@pytest.mark.asyncio
async def test_after_hook_may_modify_response() -> None:
    def add_header(request: Request, response: Response) -> None:
        response.headers["x-hooked"] = "1"

    pipelines = Pipelines()
    pipelines.after_request.add_item_to_end(add_header)

    response = await pipelines.dispatch(RequestFactory(), lambda request: PlainTextResponse("ok"))
    assert response.headers["x-hooked"] == "1"


def test_wrapped_routes(test_client_factory: ClientFactory) -> None:
    def sync_view(request: Request) -> Response:
        return PlainTextResponse("sync")

    async def async_view(request: Request) -> Response:
        return PlainTextResponse("async:" + request.path_params["name"])

    def before(request: Request) -> None:
        request.state.visited = True

    def after(request: Request, response: Response) -> None:
        response.headers["x-visited"] = str(request.state.visited)

    pipelines = Pipelines()
    pipelines.before_request.add_item_to_end(before)
    pipelines.after_request.add_item_to_end(after)

    client = test_client_factory(
        routes=[
            pipelines.route("/sync", sync_view, methods=["GET"]),
            Route("/async/{name}", pipelines.wrap(async_view), name="async"),
        ],
        with_sessions=False,
    )

    response = client.get("/sync")
    assert response.text == "sync"
    assert response.headers["x-visited"] == "True"

    response = client.get("/async/world")
    assert response.text == "async:world"
    assert response.headers["x-visited"] == "True"

    assert client.post("/sync").status_code == 405


def test_route_name_defaults_to_endpoint_name() -> None:
    def homepage(request: Request) -> Response:
        return PlainTextResponse("home")

    route = Pipelines().route("/", homepage)
    assert route.name == "homepage"
