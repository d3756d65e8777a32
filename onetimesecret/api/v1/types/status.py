from enum import Enum
from typing import Optional

from pydantic import BaseModel, StrictStr


class ServiceState(str, Enum):
    """
    The known classifications reported by the status endpoint.
    """

    NOMINAL = "nominal"
    OFFLINE = "offline"


class HealthStatus(BaseModel):
    """
    The response of the status endpoint. Classifications other than the known ones
    are kept verbatim.
    """

    status: Optional[StrictStr] = None

    @property
    def is_offline(self) -> bool:
        return self.status == ServiceState.OFFLINE.value
