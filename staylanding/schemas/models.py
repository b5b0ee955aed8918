from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class View(Enum):
    loading = 'loading'
    error = 'error'
    thank_you = 'thank_you'
    active_stay = 'active_stay'


class InfoBlock(BaseModel):
    id: int
    title: str
    description: str
    icon: str
    content: str
    detail_url: Optional[str] = None
    detail_link: Optional[str] = None


class StayTimeline(BaseModel):
    before_check_in: bool
    during_stay: bool
    after_check_out: bool


class StayDetails(BaseModel):
    reservation_id: str
    guest_name: str
    resort_name: Optional[str] = None
    check_in: datetime
    check_out: datetime
    check_in_display: str
    check_out_display: str
    address: str
    maps_url: str
    confirmation_code: str
    wifi_name: str
    wifi_password: str
    door_code_message: str
    is_registered: bool


class NavigationLinks(BaseModel):
    home: str
    registration: str
    add_on: str
    guidebook: str


class LandingPage(BaseModel):
    view: View
    title: Optional[str] = None
    message: Optional[str] = None
    stay: Optional[StayDetails] = None
    timeline: Optional[StayTimeline] = None
    registration_button_text: Optional[str] = None
    info_blocks: List[InfoBlock] = []
    navigation: Optional[NavigationLinks] = None


class RegistrationUpdate(BaseModel):
    is_registered: bool
