from .properties import AppConfig as AppConfig
from .properties import FileLoggingConfig as FileLoggingConfig
from .properties import KeyConfig as KeyConfig
from .properties import LoggingConfig as LoggingConfig
from .properties import MerchantConfig as MerchantConfig
from .properties import PemKeyConfig as PemKeyConfig
from .properties import Pkcs12KeyConfig as Pkcs12KeyConfig

example_configuration_text = """\
merchant:
  id: "1900000109"
  serial-no: "ABCDEF123"

key:
  # pem: PKCS#8 private key (apiclient_key.pem)
  # pkcs12: password protected container (apiclient_cert.p12)
  type: pkcs12
  path: apiclient_cert.p12
  # defaults to the merchant id when empty, environment variables such as
  # ${WECHATPAY_P12_PASSWORD} are expanded
  password: null
  alias: null

logging:
  level: info
  file: null
"""
