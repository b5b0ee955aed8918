from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Callable, Iterator

from fastapi import APIRouter, Depends

from staylanding.core.repositories.info_block_repository import InfoBlockRepository
from staylanding.core.repositories.reservation_repository import ReservationRepository
from staylanding.infrastructure.config import settings
from staylanding.infrastructure.database import SessionLocal
from staylanding.infrastructure.repositories.info_block_repository_yaml_impl import YamlInfoBlockRepositoryImpl
from staylanding.infrastructure.repositories.mock_reservation_repository_impl import MockReservationRepositoryImpl
from staylanding.infrastructure.repositories.reservation_repository_impl import ReservationRepositoryImpl
from staylanding.schemas.models import InfoBlock, LandingPage, RegistrationUpdate
from staylanding.services.landing_service import (
    get_landing_page_service,
    list_info_blocks_service,
    property_zone,
    system_clock,
    update_registration_service,
)

router = APIRouter()


@lru_cache(maxsize=1)
def _mock_reservation_repo() -> MockReservationRepositoryImpl:
    return MockReservationRepositoryImpl(tz=property_zone(), delay_seconds=settings.mock_fetch_delay_seconds)


def get_reservation_repo() -> Iterator[ReservationRepository]:
    if settings.reservation_source != "database":
        yield _mock_reservation_repo()
        return

    db = SessionLocal()
    try:
        yield ReservationRepositoryImpl(db, tz=property_zone())
    finally:
        db.close()


@lru_cache(maxsize=1)
def get_info_block_repo() -> InfoBlockRepository:
    return YamlInfoBlockRepositoryImpl(file_path=settings.info_blocks_path)


def get_clock() -> Callable[[], datetime]:
    return system_clock


@router.get("/reservations/{reservation_id}", response_model=LandingPage)
async def get_reservations_reservation_id(
    reservation_id: str,
    reservation_repo: ReservationRepository = Depends(get_reservation_repo),
    info_block_repo: InfoBlockRepository = Depends(get_info_block_repo),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> LandingPage:
    """
    Get the guest landing page

    Load failures render as the error view rather than an HTTP error.
    """
    return await get_landing_page_service(
        reservation_id,
        reservation_repo=reservation_repo,
        info_block_repo=info_block_repo,
        clock=clock,
    )


@router.put("/reservations/{reservation_id}/registration", response_model=LandingPage)
async def put_reservations_reservation_id_registration(
    reservation_id: str,
    body: RegistrationUpdate,
    reservation_repo: ReservationRepository = Depends(get_reservation_repo),
    info_block_repo: InfoBlockRepository = Depends(get_info_block_repo),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> LandingPage:
    """
    Set the guest registration flag and return the refreshed landing page
    """
    return await update_registration_service(
        reservation_id,
        body.is_registered,
        reservation_repo=reservation_repo,
        info_block_repo=info_block_repo,
        clock=clock,
    )


@router.get("/info-blocks", response_model=list[InfoBlock])
def get_info_blocks(info_block_repo: InfoBlockRepository = Depends(get_info_block_repo)) -> list[InfoBlock]:
    """
    List the informational content cards
    """
    return list_info_blocks_service(info_block_repo)
