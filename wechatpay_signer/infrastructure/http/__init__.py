from ._auth import DEFAULT_HEADERS, WechatPayAuth

__all__ = [
    "DEFAULT_HEADERS",
    "WechatPayAuth",
]
