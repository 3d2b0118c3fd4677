"""HTTP requests of the standard library; each call returns a future."""

from __future__ import annotations

import asyncio
import http.client
import urllib.error
import urllib.request
from typing import List, Optional, Tuple

from glang.errors import InvalidOperation, TypeMismatch, WrongNumberOfArguments
from glang.objects import Future, Hash, Integer, Object, String


def _response_hash(status: int, body: str) -> Object:
    return Hash({String("status"): Integer(status), String("body"): String(body)})


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def _perform(method: str, url: str, body: Optional[str]) -> Tuple[int, str]:
    data = body.encode("utf-8") if body is not None else None
    request = urllib.request.Request(url, data=data, method=method)
    try:
        with urllib.request.urlopen(request) as response:
            status = response.status
            try:
                text = _decode(response.read())
            except (OSError, http.client.HTTPException):
                text = ""
            return status, text
    except urllib.error.HTTPError as err:
        with err:
            try:
                text = _decode(err.read())
            except (OSError, http.client.HTTPException):
                text = ""
        return err.code, text


async def _send(method: str, url: str, body: Optional[str]) -> Object:
    try:
        status, text = await asyncio.to_thread(_perform, method, url, body)
    except (OSError, ValueError, http.client.HTTPException) as err:
        raise InvalidOperation(f"HTTP {method} failed: {err}") from None
    return _response_hash(status, text)


def _url_only(args: List[Object]) -> str:
    if not args:
        raise WrongNumberOfArguments(1, 1, 0)
    url = args[0]
    if not isinstance(url, String):
        raise TypeMismatch("string", url.type_name())
    return url.value


def _url_and_body(args: List[Object]) -> Tuple[str, str]:
    if not args:
        raise WrongNumberOfArguments(2, 2, 0)
    url = args[0]
    if not isinstance(url, String):
        raise TypeMismatch("string", url.type_name())
    if len(args) < 2:
        raise WrongNumberOfArguments(2, 2, 1)
    body = args[1]
    if not isinstance(body, String):
        raise TypeMismatch("string", body.type_name())
    return url.value, body.value


async def _get_async(args: List[Object]) -> Object:
    return await _send("GET", _url_only(args), None)


async def _post_async(args: List[Object]) -> Object:
    url, body = _url_and_body(args)
    return await _send("POST", url, body)


async def _put_async(args: List[Object]) -> Object:
    url, body = _url_and_body(args)
    return await _send("PUT", url, body)


async def _delete_async(args: List[Object]) -> Object:
    return await _send("DELETE", _url_only(args), None)


def http_get(args: List[Object]) -> Object:
    """A future that performs a GET and yields a hash with status and body."""
    return Future(_get_async(list(args)))


def http_post(args: List[Object]) -> Object:
    """A future that POSTs a string body and yields a hash with status and body."""
    return Future(_post_async(list(args)))


def http_put(args: List[Object]) -> Object:
    """A future that PUTs a string body and yields a hash with status and body."""
    return Future(_put_async(list(args)))


def http_delete(args: List[Object]) -> Object:
    """A future that performs a DELETE and yields a hash with status and body."""
    return Future(_delete_async(list(args)))