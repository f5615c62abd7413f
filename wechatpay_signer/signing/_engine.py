import time
import uuid
from typing import Callable

from ..entities import (AuthorizationResult, Err, Ok, Result, SigningEngineError,
                        SigningRequest)
from ..utils.logging_utils import get_logger
from ._authorization_header import build_authorization_header
from ._canonical_message import build_canonical_message, render_timestamp
from ._key_material import KeyMaterialStore
from ._signer import sign_message

logger = get_logger()


def generate_nonce() -> str:
    """32 hex characters from a random uuid4, no separators."""
    return uuid.uuid4().hex


class SigningEngine:
    """
    Signs (method, path, body) tuples for the WeChat Pay v3 API.

    Every call draws its own timestamp and nonce; the key is only read, so a
    single engine can be shared between threads once the store is initialized.
    """

    def __init__(
        self,
        key_store: KeyMaterialStore,
        clock: Callable[[], float] = time.time,
        nonce_factory: Callable[[], str] = generate_nonce,
    ):
        self.key_store = key_store
        self.clock = clock
        self.nonce_factory = nonce_factory

    def sign(self, method: str, url_path: str, body: str | bytes, merchant_id: str, serial_no: str) -> AuthorizationResult:
        """
        Raises:
            NotInitializedError: no key has been loaded in the store.
            SigningError: the key or the input was rejected.
        """
        key_material = self.key_store.key_material

        epoch_seconds = int(self.clock())
        timestamp = render_timestamp(epoch_seconds)
        nonce = self.nonce_factory()

        canonical_message = build_canonical_message(method, url_path, epoch_seconds, nonce, body)
        logger.trace("Canonical message:\n%s", canonical_message.decode("utf-8", errors="replace"))

        signature = sign_message(canonical_message, key_material)

        header_value = build_authorization_header(merchant_id, nonce, timestamp, serial_no, signature)
        logger.debug("Signed %s %s (timestamp=%s, nonce=%s)", method, url_path, timestamp, nonce)

        return AuthorizationResult(
            header_value=header_value,
            timestamp=timestamp,
            nonce=nonce,
        )

    def sign_request(self, request: SigningRequest, merchant_id: str, serial_no: str) -> AuthorizationResult:
        return self.sign(request.method, request.url_path, request.body, merchant_id, serial_no)

    def try_sign(self, method: str, url_path: str, body: str | bytes, merchant_id: str, serial_no: str) -> Result[AuthorizationResult, SigningEngineError]:
        """Same as `sign`, with engine failures returned as `Err` instead of raised."""
        try:
            return Ok(self.sign(method, url_path, body, merchant_id, serial_no))
        except SigningEngineError as error:
            logger.warning("Could not sign %s %s: %s", method, url_path, error)
            return Err(error)
