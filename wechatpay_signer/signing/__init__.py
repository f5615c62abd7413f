from ._authorization_header import AUTHORIZATION_SCHEME, build_authorization_header
from ._canonical_message import build_canonical_message, render_timestamp
from ._engine import SigningEngine, generate_nonce
from ._key_material import (KeyMaterial, KeyMaterialStore, load_from_pem,
                            load_from_pem_bytes, load_from_pkcs12)
from ._signer import SIGN_ALGORITHM, sign_message
