from datetime import datetime

from pydantic import BaseModel

from task_manager.models import UserRole


class Claims(BaseModel):
    """Identity decoded from a verified access token."""
    id: int
    username: str
    role: UserRole
    exp: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin
