from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable
from urllib.parse import quote, urlencode
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from staylanding.core.entities.info_block import InfoBlock as CoreInfoBlock
from staylanding.core.entities.reservation import Reservation
from staylanding.core.repositories.info_block_repository import InfoBlockRepository
from staylanding.core.repositories.reservation_repository import ReservationRepository
from staylanding.core.use_cases.reservation_session import RESERVATION_NOT_FOUND_MESSAGE, ReservationSession
from staylanding.core.use_cases.select_landing_view import LandingView, select_landing_view
from staylanding.infrastructure.demo_data import demo_reservation
from staylanding.infrastructure.repositories.reservation_repository_impl import ReservationRepositoryImpl
from staylanding.schemas.models import (
    InfoBlock,
    LandingPage,
    NavigationLinks,
    StayDetails,
    StayTimeline,
    View,
)

logger = logging.getLogger(__name__)

THANK_YOU_TITLE = "Thank You for Staying!"
THANK_YOU_MESSAGE = "We hope you enjoyed your visit"

MAPS_SEARCH_URL = "https://maps.google.com/?q="


def property_zone() -> ZoneInfo:
    from staylanding.infrastructure.config import settings
    return ZoneInfo(settings.property_timezone)


def system_clock() -> datetime:
    return datetime.now(tz=property_zone())


# -----------------------------
# Formatting helpers
# -----------------------------
def format_date(moment: datetime) -> str:
    """e.g. 'Sun, Mar 9, 2025'"""
    return f"{moment:%a}, {moment:%b} {moment.day}, {moment.year}"


def format_time(moment: datetime) -> str:
    """e.g. '4:00 PM'"""
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment:%M} {'AM' if moment.hour < 12 else 'PM'}"


def with_reservation_id(path: str, reservation_id: str) -> str:
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{urlencode({'reservationId': reservation_id})}"


def maps_url(address: str) -> str:
    return MAPS_SEARCH_URL + quote(address, safe="!~*'()")


def navigation_links(reservation_id: str) -> NavigationLinks:
    return NavigationLinks(
        home=f"/{quote(reservation_id, safe='')}",
        registration=with_reservation_id("/registration", reservation_id),
        add_on=with_reservation_id("/add-on", reservation_id),
        guidebook=with_reservation_id("/guidebook", reservation_id),
    )


def _to_schema_info_block(block: CoreInfoBlock, reservation_id: str | None) -> InfoBlock:
    detail_link = None
    if block.detail_url and reservation_id:
        detail_link = with_reservation_id(block.detail_url, reservation_id)

    return InfoBlock(
        id=block.id,
        title=block.title,
        description=block.description,
        icon=block.icon,
        content=block.content,
        detail_url=block.detail_url,
        detail_link=detail_link,
    )


def _stay_details(reservation: Reservation, door_code_message: str) -> StayDetails:
    return StayDetails(
        reservation_id=reservation.id,
        guest_name=reservation.guest_name,
        resort_name=reservation.resort_name,
        check_in=reservation.check_in,
        check_out=reservation.check_out,
        check_in_display=f"{format_date(reservation.check_in)} ~ {format_time(reservation.check_in)}",
        check_out_display=f"{format_date(reservation.check_out)} ~ {format_time(reservation.check_out)}",
        address=reservation.address,
        maps_url=maps_url(reservation.address),
        confirmation_code=reservation.confirmation_code,
        wifi_name=reservation.wifi_name,
        wifi_password=reservation.wifi_password,
        door_code_message=door_code_message,
        is_registered=reservation.is_registered,
    )


# -----------------------------
# Session wiring
# -----------------------------
def build_session(
    *,
    reservation_repo: ReservationRepository,
    info_block_repo: InfoBlockRepository,
    clock: Callable[[], datetime] | None = None,
) -> ReservationSession:
    from staylanding.infrastructure.config import settings

    return ReservationSession(
        reservation_repo=reservation_repo,
        clock=clock or system_clock,
        info_blocks=info_block_repo.list_all(),
        door_code=settings.provisioned_door_code,
        live_clock=settings.status_clock == "live",
    )


def build_landing_page(session: ReservationSession) -> LandingPage:
    """
    Render the session into the page model for whichever view it selects.
    """
    timeline = session.timeline
    view = select_landing_view(session.state, timeline)

    if view is LandingView.LOADING:
        return LandingPage(view=View.loading)

    reservation = session.reservation
    if view is LandingView.ERROR or reservation is None:
        return LandingPage(view=View.error, message=session.error or RESERVATION_NOT_FOUND_MESSAGE)

    if view is LandingView.THANK_YOU:
        return LandingPage(view=View.thank_you, title=THANK_YOU_TITLE, message=THANK_YOU_MESSAGE)

    return LandingPage(
        view=View.active_stay,
        title="Your Upcoming Stay",
        stay=_stay_details(reservation, session.door_code_message),
        timeline=StayTimeline(
            before_check_in=timeline.before_check_in,
            during_stay=timeline.during_stay,
            after_check_out=timeline.after_check_out,
        ),
        registration_button_text=session.registration_button_text,
        info_blocks=[_to_schema_info_block(block, reservation.id) for block in session.info_blocks],
        navigation=navigation_links(reservation.id),
    )


# -----------------------------
# Services
# -----------------------------
async def get_landing_page_service(
    reservation_id: str,
    *,
    reservation_repo: ReservationRepository,
    info_block_repo: InfoBlockRepository,
    clock: Callable[[], datetime] | None = None,
) -> LandingPage:
    session = build_session(reservation_repo=reservation_repo, info_block_repo=info_block_repo, clock=clock)
    await session.load(reservation_id)
    return build_landing_page(session)


async def update_registration_service(
    reservation_id: str,
    is_registered: bool,
    *,
    reservation_repo: ReservationRepository,
    info_block_repo: InfoBlockRepository,
    clock: Callable[[], datetime] | None = None,
) -> LandingPage:
    """
    Load the reservation, apply the registration flag and persist it.

    When the reservation cannot be loaded the update is a no-op and the error view is returned.
    """
    session = build_session(reservation_repo=reservation_repo, info_block_repo=info_block_repo, clock=clock)
    await session.load(reservation_id)

    session.update_registration_status(is_registered)
    if session.reservation is not None:
        await reservation_repo.upsert(session.reservation)
        logger.info("Reservation %s registration set to %s", reservation_id, is_registered)

    return build_landing_page(session)


def list_info_blocks_service(info_block_repo: InfoBlockRepository) -> list[InfoBlock]:
    return [_to_schema_info_block(block, None) for block in info_block_repo.list_all()]


async def seed_demo_reservation_service(db: Session) -> Reservation:
    """
    Insert the demo reservation into the database unless it is already there.
    """
    repo = ReservationRepositoryImpl(db, tz=property_zone())
    reservation = demo_reservation(property_zone())

    existing = await repo.get(reservation.id)
    if existing is not None:
        return existing

    await repo.upsert(reservation)
    logger.info("Seeded demo reservation %s", reservation.id)
    return reservation
