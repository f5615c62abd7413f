from enum import Enum


class ErrorType(Enum):
    @property
    def default_reason(self):
        return DEFAULT_REASONS.get(self, "No specific reason provided.")


class SigningEngineErrorType(ErrorType):
    KEY_LOAD_FAILED = "KEY_LOAD_FAILED"
    NOT_INITIALIZED = "NOT_INITIALIZED"
    SIGNING_FAILED = "SIGNING_FAILED"


DEFAULT_REASONS = {
    SigningEngineErrorType.KEY_LOAD_FAILED: "The merchant private key could not be loaded. Check the key file path, its format and the container password.",
    SigningEngineErrorType.NOT_INITIALIZED: "No private key has been loaded. Initialize the key material store before signing requests.",
    SigningEngineErrorType.SIGNING_FAILED: "The request could not be signed with the loaded private key.",
}
