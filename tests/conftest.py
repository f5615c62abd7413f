import datetime
import logging
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.serialization import pkcs12
from cryptography.x509.oid import NameOID

from wechatpay_signer.utils.logging_utils import DEFAULT_LOGGER_NAME

MERCHANT_ID = "1900000109"
SERIAL_NO = "ABCDEF123"
P12_ALIAS = "Tenpay Certificate"


@pytest.fixture(autouse=True)
def reset_logger_handlers():
    yield

    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


def _pkcs8_pem(private_key) -> bytes:
    return private_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )


def _self_signed_certificate(private_key) -> x509.Certificate:
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "Tenpay.com")])
    now = datetime.datetime.now(datetime.timezone.utc)

    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(minutes=5))
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(private_key, hashes.SHA256())
    )


@pytest.fixture
def pem_key_path(tmp_path, rsa_private_key):
    path = tmp_path / "apiclient_key.pem"
    path.write_bytes(_pkcs8_pem(rsa_private_key))
    return path


@pytest.fixture
def ec_pem_key_path(tmp_path):
    path = tmp_path / "ec_key.pem"
    path.write_bytes(_pkcs8_pem(ec.generate_private_key(ec.SECP256R1())))
    return path


@pytest.fixture
def pkcs12_path(tmp_path, rsa_private_key):
    data = pkcs12.serialize_key_and_certificates(
        P12_ALIAS.encode(),
        rsa_private_key,
        _self_signed_certificate(rsa_private_key),
        None,
        serialization.BestAvailableEncryption(MERCHANT_ID.encode()),
    )

    path = tmp_path / f"apiclient_cert_{MERCHANT_ID}.p12"
    path.write_bytes(data)
    return path


@pytest.fixture
def certificate_only_pkcs12_path(tmp_path, rsa_private_key):
    data = pkcs12.serialize_key_and_certificates(
        P12_ALIAS.encode(),
        None,
        _self_signed_certificate(rsa_private_key),
        None,
        serialization.BestAvailableEncryption(MERCHANT_ID.encode()),
    )

    path = tmp_path / "certificate_only.p12"
    path.write_bytes(data)
    return path


@pytest.fixture
def golden_key_path():
    # fixed PKCS#8 key, generated with: openssl genpkey -algorithm RSA -pkeyopt rsa_keygen_bits:2048
    return Path(__file__).parent / "data" / "apiclient_test_key.pem"
