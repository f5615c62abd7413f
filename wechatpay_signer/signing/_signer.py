import base64

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from ..entities import SigningError
from ._key_material import KeyMaterial

SIGN_ALGORITHM = "SHA256withRSA"


def sign_message(canonical_message: bytes, key_material: KeyMaterial | None) -> str:
    """SHA256withRSA (PKCS#1 v1.5) signature, standard Base64 without line breaks."""
    if key_material is None:
        raise SigningError("no key material to sign with", step="load-key")

    try:
        signature = key_material.private_key.sign(
            canonical_message, padding.PKCS1v15(), hashes.SHA256()
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as error:
        raise SigningError(f"{SIGN_ALGORITHM} signature failed: {error}", step="sign") from error

    return base64.b64encode(signature).decode("ascii")
