def render_timestamp(timestamp: int) -> str:
    """Base-10 epoch seconds, no sign and no decimal point."""
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise ValueError(f"timestamp must be integer epoch seconds, got {timestamp!r}")
    if timestamp < 0:
        raise ValueError(f"timestamp must not be negative, got {timestamp}")

    return str(timestamp)


def build_canonical_message(method: str, url_path: str, timestamp: int, nonce: str, body: str | bytes) -> bytes:
    """
    Bytes signed for a request:

        METHOD\\nURL_PATH\\nTIMESTAMP\\nNONCE\\nBODY\\n

    Fields are inserted verbatim. The method must already be the uppercase
    verb sent on the wire, and the path must carry its encoded query string.
    """
    if isinstance(body, str):
        body = body.encode("utf-8")
    elif not isinstance(body, (bytes, bytearray)):
        raise TypeError(f"body must be str or bytes, got {type(body).__name__}")

    head = f"{method}\n{url_path}\n{render_timestamp(timestamp)}\n{nonce}\n".encode("utf-8")
    return head + body + b"\n"
