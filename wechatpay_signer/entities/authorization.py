from dataclasses import dataclass


@dataclass(frozen=True)
class SigningRequest:
    method: str
    url_path: str
    body: str | bytes = ""

    def __post_init__(self):
        if not self.url_path.startswith("/"):
            raise ValueError(f"url path must start with '/', got: {self.url_path!r}")


@dataclass(frozen=True)
class AuthorizationResult:
    header_value: str
    timestamp: str
    nonce: str
