import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from errors import (
    BookingError,
    BookingNotFound,
    InvalidInterval,
    MissingField,
    NoInventory,
    OverlapConflict,
    UnknownRoomType,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    MissingField: status.HTTP_400_BAD_REQUEST,
    InvalidInterval: status.HTTP_400_BAD_REQUEST,
    UnknownRoomType: status.HTTP_404_NOT_FOUND,
    BookingNotFound: status.HTTP_404_NOT_FOUND,
    NoInventory: status.HTTP_409_CONFLICT,
    OverlapConflict: status.HTTP_409_CONFLICT,
}


async def booking_error_handler(_request: Request, exc: BookingError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.warning("Booking request rejected (%s): %s", exc.kind, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind},
    )
