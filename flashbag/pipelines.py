from __future__ import annotations

import inspect
import typing

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.routing import Route
from starlette.types import ASGIApp, Receive, Scope, Send

type BeforeRequestHook = typing.Callable[[Request], typing.Any]
type AfterRequestHook = typing.Callable[[Request, typing.Any], typing.Any]
type Endpoint = typing.Callable[[Request], typing.Any]

_H = typing.TypeVar("_H")


async def _call(fn: typing.Callable[..., typing.Any], *args: typing.Any) -> typing.Any:
    if inspect.iscoroutinefunction(fn):
        return await fn(*args)
    return fn(*args)


class Pipeline(typing.Generic[_H]):
    """An ordered list of request lifecycle hooks."""

    def __init__(self) -> None:
        self._items: list[_H] = []

    def add_item_to_start(self, hook: _H) -> None:
        """Add hook to the start of pipeline."""
        self._items.insert(0, hook)

    def add_item_to_end(self, hook: _H) -> None:
        """Add hook to the end of pipeline."""
        self._items.append(hook)

    def __iter__(self) -> typing.Iterator[_H]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:  # pragma: nocover
        return "<Pipeline: %s hooks>" % len(self)


class Pipelines:
    """Request lifecycle hooks invoked around an endpoint.

    Before request hooks receive the request. The first one that returns a
    response short-circuits the rest of the chain and the endpoint. After
    request hooks receive the request and the response, they run before the
    response is sent to the client."""

    def __init__(self) -> None:
        self.before_request: Pipeline[BeforeRequestHook] = Pipeline()
        self.after_request: Pipeline[AfterRequestHook] = Pipeline()

    async def run_before_request(self, request: Request) -> typing.Any | None:
        for hook in self.before_request:
            response = await _call(hook, request)
            if response is not None:
                return response
        return None

    async def run_after_request(self, request: Request, response: typing.Any) -> None:
        for hook in self.after_request:
            await _call(hook, request, response)

    async def dispatch(self, request: Request, endpoint: Endpoint) -> typing.Any:
        response = await self.run_before_request(request)
        if response is None:
            if inspect.iscoroutinefunction(endpoint):
                response = await endpoint(request)
            else:
                response = await run_in_threadpool(endpoint, request)

        await self.run_after_request(request, response)
        return response

    def wrap(self, endpoint: Endpoint) -> ASGIApp:
        """Turn endpoint into an ASGI app that runs pipelines around it."""
        return PipelineEndpoint(self, endpoint)

    def route(self, path: str, endpoint: Endpoint, **kwargs: typing.Any) -> Route:
        """Create a route which endpoint is wrapped with pipelines."""
        kwargs.setdefault("name", endpoint.__name__)
        return Route(path, self.wrap(endpoint), **kwargs)


class PipelineEndpoint:
    """ASGI app that dispatches a request/response endpoint through pipelines.

    Starlette routes treat functions as request/response endpoints, so this is
    a class to be mounted as a raw ASGI app."""

    def __init__(self, pipelines: Pipelines, endpoint: Endpoint) -> None:
        self.pipelines = pipelines
        self.endpoint = endpoint

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive, send)
        response = await self.pipelines.dispatch(request, self.endpoint)
        await response(scope, receive, send)

    def __repr__(self) -> str:  # pragma: nocover
        return "<PipelineEndpoint: %r>" % self.endpoint
