import base64
import hashlib
import hmac

def _key(secret: bytes | str) -> bytes:
    return secret.encode("utf-8") if isinstance(secret, str) else secret

def compute_shopify_hmac(raw_body: bytes, secret: bytes | str) -> str:
    """base64(HMAC-SHA256(secret, raw_body)), the value Shopify puts in X-Shopify-Hmac-Sha256."""
    digest = hmac.new(_key(secret), raw_body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode()

def verify_shopify_hmac(raw_body: bytes, header_hmac: str | None, secret: bytes | str) -> bool:
    if not header_hmac:
        return False
    try:
        presented = header_hmac.encode("ascii")
    except UnicodeEncodeError:
        return False
    expected = compute_shopify_hmac(raw_body, secret).encode("ascii")
    # Timing-safe compare
    return hmac.compare_digest(expected, presented)
