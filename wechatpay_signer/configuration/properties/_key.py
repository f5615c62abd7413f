from typing import Annotated, Literal, Optional, Union

from pydantic import Field, field_validator

from ._base import BaseConfig as _BaseConfig


class PemKeyConfig(_BaseConfig):
    type: Literal["pem"] = "pem"
    path: str = Field(..., description="Path to the PKCS#8 private key file (apiclient_key.pem)")


class Pkcs12KeyConfig(_BaseConfig):
    type: Literal["pkcs12"] = "pkcs12"
    path: str = Field(..., description="Path to the PKCS#12 container (apiclient_cert.p12)")
    password: Optional[str] = Field(None, description="Container password, the merchant id is used when empty")
    alias: Optional[str] = Field(None, description="Friendly name of the key entry, the first entry is used when empty")

    @field_validator("password", "alias", mode="before")
    def empty_str_is_none(cls, v):
        if v in ("", "null", "None"):
            return None
        return v


KeyConfig = Annotated[Union[PemKeyConfig, Pkcs12KeyConfig], Field(discriminator="type")]
