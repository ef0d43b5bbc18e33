from typing import Optional

from pydantic import BaseModel


class StaffIdentity(BaseModel):
    """Caller identity taken from the access token claims.

    Tokens name the caller with ``id`` (staff login service) or ``sub``; one of
    them must be present.
    """
    id: Optional[int] = None
    sub: Optional[str] = None
    username: Optional[str] = None
    role: Optional[str] = None
    staffRole: Optional[str] = None
    staffType: Optional[str] = None

    @property
    def subject(self) -> Optional[str]:
        if self.sub is not None:
            return self.sub
        return str(self.id) if self.id is not None else None

    @property
    def is_manager(self) -> bool:
        return self.staffRole == 'Manager'

    @property
    def is_zookeeper(self) -> bool:
        return self.staffType == 'Zookeeper'

    @property
    def is_vet(self) -> bool:
        return self.staffType == 'Vet'
