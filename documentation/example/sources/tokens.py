from base64 import urlsafe_b64decode, urlsafe_b64encode

from isomorphic import Isomorphism

__all__ = ("text_to_token",)

utf8: Isomorphism[str, bytes] = Isomorphism.of(
    lambda text: text.encode("utf-8"),
    lambda data: data.decode("utf-8"),
)

base64: Isomorphism[bytes, bytes] = Isomorphism.of(urlsafe_b64encode, urlsafe_b64decode)

text_to_token: Isomorphism[str, str] = utf8.and_then(base64).and_then(~utf8)
