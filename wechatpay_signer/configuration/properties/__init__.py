import os
import sys
from typing import TYPE_CHECKING

from pydantic import Field, ValidationError

from ._base import BaseConfig as _BaseConfig
from ._key import KeyConfig as KeyConfig
from ._key import PemKeyConfig as PemKeyConfig
from ._key import Pkcs12KeyConfig as Pkcs12KeyConfig
from ._logging import FileLoggingConfig as FileLoggingConfig
from ._logging import LoggingConfig
from ._merchant import MerchantConfig

if TYPE_CHECKING:
    from ...signing import KeyMaterialStore


class AppConfig(_BaseConfig):
    merchant: MerchantConfig = Field(...)
    key: KeyConfig = Field(...)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def create_key_material_store(self) -> 'KeyMaterialStore':
        from ...signing import KeyMaterialStore

        store = KeyMaterialStore()
        if self.key.type == "pem":
            store.init_from_pem(self.key.path)
        else:
            # by convention the container password is the merchant id
            password = self.key.password if self.key.password is not None else self.merchant.id
            store.init_from_pkcs12(self.key.path, password, alias=self.key.alias)

        return store

    @staticmethod
    def from_yaml(yaml_content: str, *, exit_on_failure=True) -> 'AppConfig':
        import yaml
        expanded = os.path.expandvars(yaml_content)
        data = yaml.safe_load(expanded)

        try:
            return AppConfig(**(data or {}))
        except ValidationError as validation_error:
            if not exit_on_failure:
                raise

            for error in validation_error.errors():
                print(error["type"], error["loc"], error["msg"])

            sys.exit(1)

    @staticmethod
    def from_file(file_path: str, *, exit_on_failure=True) -> 'AppConfig':
        with open(file_path, 'r') as f:
            return AppConfig.from_yaml(f.read(), exit_on_failure=exit_on_failure)
