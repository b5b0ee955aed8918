from fastapi import FastAPI
from staylanding.infrastructure.config import settings
from staylanding.infrastructure.database import Base, engine, SessionLocal
from staylanding.infrastructure.logging_config import setup_logging
from staylanding.infrastructure.models import models  # noqa: F401  registers tables on Base
from staylanding.presentation.routers import router
from staylanding.services.landing_service import seed_demo_reservation_service

setup_logging(settings.log_level)

app = FastAPI(title="Stay Landing")


@app.on_event("startup")
async def _seed_demo_reservation_on_startup() -> None:
    """
    When reservations come from the database, make sure the demo reservation exists
    """
    if settings.reservation_source != "database" or not settings.seed_demo_reservation:
        return

    db = SessionLocal()
    try:
        await seed_demo_reservation_service(db)
    finally:
        db.close()


Base.metadata.create_all(bind=engine)
app.include_router(router)
