from pydantic import Field

from ._base import BaseConfig as _BaseConfig


class MerchantConfig(_BaseConfig):
    id: str = Field(..., description="Merchant identifier (mchid)")
    serial_no: str = Field(..., description="Serial number of the merchant API certificate matching the private key")
