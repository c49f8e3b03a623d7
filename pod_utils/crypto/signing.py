"""
Signing utilities for POD services
Create and verify RSA / ECDSA / DSA signatures over text messages
"""

import base64
import binascii
from typing import Optional, Union
import structlog

from cryptography import x509
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import dsa, ec, padding, rsa

from ..config import get_utilities_config
from ..constants import ALGORITHM_PREFIXES, ALGORITHM_SUFFIXES, SignatureEncodings
from ..exceptions import (
    InvalidKeyError,
    SignatureDecodeError,
    UnsupportedAlgorithmError,
    UnsupportedEncodingError,
)

logger = structlog.get_logger(__name__)

KeyMaterial = Union[str, bytes, rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey,
                    dsa.DSAPrivateKey, rsa.RSAPublicKey, ec.EllipticCurvePublicKey,
                    dsa.DSAPublicKey]

PrivateKey = Union[rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey, dsa.DSAPrivateKey]
PublicKey = Union[rsa.RSAPublicKey, ec.EllipticCurvePublicKey, dsa.DSAPublicKey]

_HASHES = {
    "md5": hashes.MD5,
    "sha1": hashes.SHA1,
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha512-224": hashes.SHA512_224,
    "sha512-256": hashes.SHA512_256,
    "sha3-224": hashes.SHA3_224,
    "sha3-256": hashes.SHA3_256,
    "sha3-384": hashes.SHA3_384,
    "sha3-512": hashes.SHA3_512,
}


def resolve_hash(algorithm: str) -> hashes.HashAlgorithm:
    """
    Map an OpenSSL style signature algorithm name to a hash instance

    Args:
        algorithm: Name such as "RSA-SHA256", "sha512" or "ecdsa-with-SHA384"

    Returns:
        Hash algorithm instance

    Raises:
        UnsupportedAlgorithmError: If the name is not recognized
    """
    if not isinstance(algorithm, str):
        raise UnsupportedAlgorithmError(repr(algorithm))

    name = algorithm.strip().lower()
    for prefix in ALGORITHM_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
            break
    for suffix in ALGORITHM_SUFFIXES:
        if name.endswith(suffix):
            name = name[:-len(suffix)]
            break

    hash_cls = _HASHES.get(name)
    if hash_cls is None:
        raise UnsupportedAlgorithmError(algorithm)
    return hash_cls()


def _to_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def load_private_key(key: KeyMaterial, passphrase: Optional[Union[str, bytes]] = None) -> PrivateKey:
    """Load PEM/DER private key material, or pass a loaded key through"""
    if isinstance(key, (rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey, dsa.DSAPrivateKey)):
        return key
    if not isinstance(key, (str, bytes)):
        raise InvalidKeyError(reason=f"unsupported private key type: {type(key).__name__}")

    data = _to_bytes(key)
    password = _to_bytes(passphrase) if passphrase is not None else None
    try:
        if b"-----BEGIN" in data:
            loaded = serialization.load_pem_private_key(data, password=password)
        else:
            loaded = serialization.load_der_private_key(data, password=password)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise InvalidKeyError("Private key could not be loaded", reason=str(e)) from e

    if not isinstance(loaded, (rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey, dsa.DSAPrivateKey)):
        raise InvalidKeyError(reason=f"unsupported private key type: {type(loaded).__name__}")
    return loaded


def load_public_key(key: KeyMaterial) -> PublicKey:
    """
    Load public key material

    Accepts a PEM/DER public key, a PEM certificate, a private key (its
    public half is used) or an already loaded key object.
    """
    if isinstance(key, (rsa.RSAPublicKey, ec.EllipticCurvePublicKey, dsa.DSAPublicKey)):
        return key
    if isinstance(key, (rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey, dsa.DSAPrivateKey)):
        return key.public_key()
    if not isinstance(key, (str, bytes)):
        raise InvalidKeyError(reason=f"unsupported public key type: {type(key).__name__}")

    data = _to_bytes(key)
    try:
        if b"-----BEGIN CERTIFICATE" in data:
            loaded = x509.load_pem_x509_certificate(data).public_key()
        elif b"PRIVATE KEY-----" in data:
            return load_private_key(data).public_key()
        elif b"-----BEGIN" in data:
            loaded = serialization.load_pem_public_key(data)
        else:
            loaded = serialization.load_der_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise InvalidKeyError("Public key could not be loaded", reason=str(e)) from e

    if not isinstance(loaded, (rsa.RSAPublicKey, ec.EllipticCurvePublicKey, dsa.DSAPublicKey)):
        raise InvalidKeyError(reason=f"unsupported public key type: {type(loaded).__name__}")
    return loaded


def encode_signature(raw: bytes, encoding: str) -> str:
    """Render raw signature bytes in the given text encoding"""
    name = encoding.lower() if isinstance(encoding, str) else encoding
    if name == SignatureEncodings.BASE64:
        return base64.b64encode(raw).decode("ascii")
    if name == SignatureEncodings.BASE64URL:
        return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")
    if name == SignatureEncodings.HEX:
        return raw.hex()
    if name in (SignatureEncodings.LATIN1, SignatureEncodings.BINARY):
        return raw.decode("latin-1")
    raise UnsupportedEncodingError(str(encoding))


def decode_signature(signature: Union[str, bytes], encoding: str) -> bytes:
    """
    Decode a signature from its text encoding

    Raw bytes are taken as the signature itself.

    Raises:
        UnsupportedEncodingError: If the encoding is not recognized
        SignatureDecodeError: If the signature is not valid in that encoding
    """
    name = encoding.lower() if isinstance(encoding, str) else encoding
    if name not in SignatureEncodings.ALL:
        raise UnsupportedEncodingError(str(encoding))
    if isinstance(signature, bytes):
        return signature
    if not isinstance(signature, str):
        raise SignatureDecodeError(name, reason=f"unsupported signature type: {type(signature).__name__}")

    try:
        if name == SignatureEncodings.BASE64:
            return base64.b64decode(signature, validate=True)
        if name == SignatureEncodings.BASE64URL:
            padded = signature + "=" * (-len(signature) % 4)
            return base64.b64decode(padded, altchars=b"-_", validate=True)
        if name == SignatureEncodings.HEX:
            return bytes.fromhex(signature)
        return signature.encode("latin-1")
    except (binascii.Error, ValueError, UnicodeEncodeError) as e:
        raise SignatureDecodeError(name, reason=str(e)) from e


def sign(message: Union[str, bytes], private_key: KeyMaterial,
         algorithm: Optional[str] = None, encoding: Optional[str] = None,
         passphrase: Optional[Union[str, bytes]] = None) -> str:
    """
    Sign a message with a private key

    Args:
        message: Text (UTF-8 encoded) or bytes to sign
        private_key: PEM/DER private key or a loaded key object
        algorithm: Signature algorithm name (default from config)
        encoding: Output encoding of the signature (default from config)
        passphrase: Passphrase for an encrypted private key

    Returns:
        Encoded signature

    Raises:
        InvalidKeyError: If the key is malformed or not a supported private key
        UnsupportedAlgorithmError: If the algorithm name is unknown
        UnsupportedEncodingError: If the encoding is unknown
    """
    config = get_utilities_config()
    algorithm = algorithm or config.default_sign_algorithm
    encoding = encoding or config.default_signature_encoding

    hash_algorithm = resolve_hash(algorithm)
    if not isinstance(encoding, str) or encoding.lower() not in SignatureEncodings.ALL:
        raise UnsupportedEncodingError(str(encoding))
    key = load_private_key(private_key, passphrase)
    data = _to_bytes(message)

    try:
        if isinstance(key, rsa.RSAPrivateKey):
            raw = key.sign(data, padding.PKCS1v15(), hash_algorithm)
        elif isinstance(key, ec.EllipticCurvePrivateKey):
            raw = key.sign(data, ec.ECDSA(hash_algorithm))
        else:
            raw = key.sign(data, hash_algorithm)
    except UnsupportedAlgorithm as e:
        raise UnsupportedAlgorithmError(algorithm) from e

    logger.debug("Created signature", algorithm=algorithm, encoding=encoding,
                 key_type=type(key).__name__)
    return encode_signature(raw, encoding)


def verify(message: Union[str, bytes], public_key: KeyMaterial,
           signature: Union[str, bytes], algorithm: Optional[str] = None,
           encoding: Optional[str] = None) -> bool:
    """
    Verify a signature over a message

    Args:
        message: Text (UTF-8 encoded) or bytes that was signed
        public_key: PEM/DER public key, certificate or loaded key object
        signature: Encoded signature, or raw signature bytes
        algorithm: Signature algorithm name (default from config)
        encoding: Encoding of the signature (default from config)

    Returns:
        True if the signature matches, False otherwise

    Raises:
        InvalidKeyError: If the key is malformed
        UnsupportedAlgorithmError: If the algorithm name is unknown
        UnsupportedEncodingError: If the encoding is unknown
        SignatureDecodeError: If the signature cannot be decoded
    """
    config = get_utilities_config()
    algorithm = algorithm or config.default_sign_algorithm
    encoding = encoding or config.default_signature_encoding

    hash_algorithm = resolve_hash(algorithm)
    raw = decode_signature(signature, encoding)
    key = load_public_key(public_key)
    data = _to_bytes(message)

    try:
        if isinstance(key, rsa.RSAPublicKey):
            key.verify(raw, data, padding.PKCS1v15(), hash_algorithm)
        elif isinstance(key, ec.EllipticCurvePublicKey):
            key.verify(raw, data, ec.ECDSA(hash_algorithm))
        else:
            key.verify(raw, data, hash_algorithm)
    except (InvalidSignature, ValueError):
        logger.debug("Signature mismatch", algorithm=algorithm, encoding=encoding)
        return False
    except UnsupportedAlgorithm as e:
        raise UnsupportedAlgorithmError(algorithm) from e

    return True
