"""Session context handed from the bootstrapper to the dispatcher."""

from dataclasses import dataclass

from shortlink.core.exceptions import AuthenticationError
from shortlink.schemas.user import UserIdentity


@dataclass(frozen=True)
class Session:
    """The identity every URL operation in this process acts as."""

    identity: UserIdentity

    def __post_init__(self) -> None:
        if not self.identity.user_id:
            raise AuthenticationError("Session requires a user identity")

    @property
    def user_id(self) -> str:
        return self.identity.user_id
