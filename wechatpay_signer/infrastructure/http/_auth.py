"""
`requests` authentication hook for the WeChat Pay v3 API.

Signs each prepared request with a `SigningEngine` and attaches the
``Authorization`` header. Sending the request, retrying and reading the
response stay with the caller.
"""

from __future__ import annotations

import requests
from requests.auth import AuthBase

from ...entities import SigningError
from ...signing import SigningEngine
from ...utils.logging_utils import get_logger

logger = get_logger()

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class WechatPayAuth(AuthBase):

    def __init__(self, engine: SigningEngine, merchant_id: str, serial_no: str):
        self.engine = engine
        self.merchant_id = merchant_id
        self.serial_no = serial_no

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        body = request.body if request.body is not None else ""
        if not isinstance(body, (str, bytes)):
            # files and generators are sent as they are read, there is no body to sign yet
            raise SigningError(f"streamed request bodies cannot be signed, got {type(body).__name__}", step="canonicalize")

        result = self.engine.sign(
            request.method,
            request.path_url,
            body,
            self.merchant_id,
            self.serial_no,
        )

        for name, value in DEFAULT_HEADERS.items():
            request.headers.setdefault(name, value)
        request.headers["Authorization"] = result.header_value

        logger.trace("Authorization attached to %s %s", request.method, request.path_url)
        return request
