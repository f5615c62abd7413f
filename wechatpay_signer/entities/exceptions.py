from .errors import ErrorType, SigningEngineErrorType


class SigningEngineError(Exception):
    error_type: ErrorType

    def __init__(self, reason: str = ""):
        self.reason = reason or self.error_type.default_reason
        super().__init__(f"{self.error_type.value}: {self.reason}")


class KeyLoadError(SigningEngineError):
    """Raised when the private key cannot be read, decrypted or parsed. Fatal to initialization."""

    error_type = SigningEngineErrorType.KEY_LOAD_FAILED

    def __init__(self, reason: str = "", path: str | None = None):
        self.path = path
        super().__init__(reason)


class NotInitializedError(SigningEngineError):
    error_type = SigningEngineErrorType.NOT_INITIALIZED


class SigningError(SigningEngineError):
    """Raised when the cryptographic step rejects the key or the input.

    `step` names the stage that failed (e.g. "sign") so callers can tell it
    apart from a transport failure.
    """

    error_type = SigningEngineErrorType.SIGNING_FAILED

    def __init__(self, reason: str = "", step: str = "sign"):
        self.step = step
        super().__init__(reason)
