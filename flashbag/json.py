import json
import typing
from babel.support import LazyProxy

JSONEncoder = json.JSONEncoder


def json_default(o: typing.Any) -> typing.Any:
    """Usage: json.dumps(data, default=json_default)"""
    if isinstance(o, LazyProxy):
        return str(o)

    return JSONEncoder().default(o)


JSONData = typing.Any  # https://github.com/python/typing/issues/182


def dumps(value: JSONData, **kwargs: typing.Any) -> str:
    if "default" not in kwargs and "cls" not in kwargs:
        kwargs["default"] = json_default
    return json.dumps(value, **kwargs)


loads = json.loads
