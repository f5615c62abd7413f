from typing import Literal, Optional

from pydantic import Field

from ._base import BaseConfig as _BaseConfig

LogLevelStringType = Literal["trace", "debug", "info", "warning", "error", "critical"]


class FileLoggingConfig(_BaseConfig):
    path: str = Field("wechatpay-signer.log", description="Log file, appended to")
    level: Optional[LogLevelStringType] = Field(None, description="Level for the file only, defaults to the console level")


class LoggingConfig(_BaseConfig):
    level: LogLevelStringType = Field("info", description="Logging level, `trace` also prints the canonical message of every signed request")
    colored: bool = Field(True, description="Color console lines per thread, disable when logs are collected")
    file: Optional[FileLoggingConfig] = Field(None)
