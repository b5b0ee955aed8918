from __future__ import annotations

from enum import Enum

from staylanding.core.use_cases.reservation_session import ReservationState
from staylanding.core.use_cases.stay_status import StayTimeline


class LandingView(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    THANK_YOU = "thank_you"
    ACTIVE_STAY = "active_stay"


def select_landing_view(state: ReservationState, timeline: StayTimeline) -> LandingView:
    """
    Pick the single screen to render.

    Priority is loading > error or missing reservation > after check-out > active stay, so a
    failed load after check-out still shows the error screen.
    """
    if state.is_loading:
        return LandingView.LOADING
    if state.error is not None or state.reservation is None:
        return LandingView.ERROR
    if timeline.after_check_out:
        return LandingView.THANK_YOU
    return LandingView.ACTIVE_STAY
