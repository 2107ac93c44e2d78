from typing import Annotated

from fastapi import Depends

from arbzeit.core.config import Settings, get_settings
from arbzeit.services.compliance_service import ComplianceService, compliance_service


def get_compliance_service() -> ComplianceService:
    return compliance_service


AppSettings = Annotated[Settings, Depends(get_settings)]
Compliance = Annotated[ComplianceService, Depends(get_compliance_service)]
