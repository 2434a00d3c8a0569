# ua_classifier/schemas.py

from pydantic import BaseModel
from typing import List, Optional
from ua_classifier.classifier import DeviceType, UserAgentInfo


class ClassifyRequest(BaseModel):
    """One user agent submitted for classification"""
    user_agent: str = ""

    class Config:
        extra = "ignore"  # Ignore unexpected fields


class UserAgentClassification(BaseModel):
    user_agent: str
    browser: Optional[str] = None
    browser_version: Optional[str] = None
    os: Optional[str] = None
    os_version: Optional[str] = None
    device_type: DeviceType
    is_mobile: bool
    is_tablet: bool
    is_desktop: bool
    is_bot: bool
    bot_signature: Optional[str] = None
    formatted: str

    @classmethod
    def from_info(cls, info: UserAgentInfo) -> "UserAgentClassification":
        return cls(**info.to_dict())


class ClassifyResponse(BaseModel):
    status: str
    processed: int
    errors: int = 0
    results: List[UserAgentClassification] = []


class CatalogOption(BaseModel):
    value: str
    label: str
