"""
API v1 routes.

Defines REST endpoints for the webinar seat booking API.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from seatbooking.api.dependencies import (
    get_book_seat_service,
    get_participation_repository,
    get_user_repository,
)
from seatbooking.api.models import (
    BookSeatRequest,
    BookSeatResponse,
    ErrorResponse,
    ParticipationResponse,
)
from seatbooking.domain.booking import BookSeatService
from seatbooking.domain.exceptions import (
    AlreadyRegistered,
    BookingError,
    CapacityTooHigh,
    CapacityTooLow,
    NoSeatsLeft,
    OrganizerContactMissing,
    WebinarNotFound,
    WebinarTooSoon,
)
from seatbooking.domain.ports import ParticipationRepository, UserRepository

router = APIRouter(tags=["v1"])

UNPROCESSABLE = 422

ERROR_STATUS: dict[type[BookingError], int] = {
    WebinarNotFound: status.HTTP_404_NOT_FOUND,
    AlreadyRegistered: status.HTTP_409_CONFLICT,
    WebinarTooSoon: UNPROCESSABLE,
    CapacityTooHigh: UNPROCESSABLE,
    CapacityTooLow: UNPROCESSABLE,
    NoSeatsLeft: UNPROCESSABLE,
    # The seat is booked at this point; only the organizer email failed.
    OrganizerContactMissing: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post(
    "/webinars/{webinar_id}/participations",
    response_model=BookSeatResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"model": ErrorResponse, "description": "Webinar or user not found"},
        409: {"model": ErrorResponse, "description": "User already registered"},
        422: {"model": ErrorResponse, "description": "Webinar cannot be booked"},
        500: {"model": ErrorResponse, "description": "Organizer email missing"},
    },
    summary="Book a seat on a webinar",
    description="Register a user for a webinar and notify the webinar organizer by email.",
)
async def book_seat(
    webinar_id: str,
    request_data: BookSeatRequest,
    service: BookSeatService = Depends(get_book_seat_service),
    users: UserRepository = Depends(get_user_repository),
) -> BookSeatResponse:
    """
    Book a seat for the given user.

    - **user_id**: Id of the registering user
    """
    user = users.find_by_id(request_data.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    try:
        result = service.execute(webinar_id, user)
    except BookingError as e:
        raise HTTPException(
            status_code=ERROR_STATUS.get(type(e), status.HTTP_400_BAD_REQUEST),
            detail=str(e),
        ) from None

    return BookSeatResponse(success=result.success, message=result.message)


@router.get(
    "/webinars/{webinar_id}/participations",
    response_model=list[ParticipationResponse],
    summary="List webinar participations",
)
async def list_participations(
    webinar_id: str,
    participations: ParticipationRepository = Depends(get_participation_repository),
) -> list[ParticipationResponse]:
    """List every participation recorded for a webinar."""
    return [
        ParticipationResponse(user_id=p.user_id, webinar_id=p.webinar_id)
        for p in participations.find_by_webinar_id(webinar_id)
    ]
