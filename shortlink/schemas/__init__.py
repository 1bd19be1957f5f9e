# Pydantic schemas package
from shortlink.schemas.url import ShortenRequest, ShortUrlRecord
from shortlink.schemas.user import CredentialsRequest, UserIdentity

__all__ = [
    "CredentialsRequest",
    "ShortenRequest",
    "ShortUrlRecord",
    "UserIdentity",
]
