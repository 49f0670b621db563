import json
import logging
from typing import Any, Optional, Tuple

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.cors import CORS_HEADERS
from src.core.errors import MalformedBodyError, SignupConflictError
from src.core.service_dependencies import get_signup_service
from src.schemas.signup import (
    DUPLICATE_EMAIL_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    SignupCreate,
    SignupError,
    SignupSuccess,
)
from src.services.signup_service import SignupService

router = APIRouter(tags=["signup"])
logger = logging.getLogger(__name__)

# Any path is accepted
SIGNUP_PATH = "/{full_path:path}"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=SignupError(error=message).model_dump(),
        headers=CORS_HEADERS,
    )


def _reject_constant(token: str):
    raise MalformedBodyError(f"Non-standard JSON constant: {token}")


def parse_json_body(body: bytes) -> Any:
    """Decode a request body as strict JSON; ``NaN`` and ``Infinity`` are rejected."""
    return json.loads(body, parse_constant=_reject_constant)


def extract_signup_fields(payload: Any) -> Tuple[Optional[Any], Optional[Any]]:
    """Pull ``name`` and ``email`` out of a decoded JSON body.

    A ``null`` body has no fields to read and is treated as a failure.
    Any other non-object body simply yields no fields.
    """
    if payload is None:
        raise TypeError("Signup payload is null")
    if not isinstance(payload, dict):
        return None, None
    return payload.get("name"), payload.get("email")


@router.options(SIGNUP_PATH)
async def signup_preflight(full_path: str):
    """Answer CORS preflight requests."""
    return Response(headers=CORS_HEADERS)


@router.post(SIGNUP_PATH)
async def create_signup(
    full_path: str,
    request: Request,
    signup_service: SignupService = Depends(get_signup_service),
):
    """Register a name and email.

    Every outcome is rendered as JSON carrying the CORS headers, so
    browser clients can read failures as well as successes.
    """
    try:
        payload = parse_json_body(await request.body())
        name, email = extract_signup_fields(payload)

        if not name or not email:
            return error_response(400, MISSING_FIELDS_MESSAGE)

        await signup_service.register(SignupCreate(name=name, email=email))
    except SignupConflictError:
        return error_response(
            settings.DUPLICATE_SIGNUP_STATUS_CODE, DUPLICATE_EMAIL_MESSAGE
        )
    except (json.JSONDecodeError, UnicodeDecodeError, MalformedBodyError) as e:
        logger.warning(f"Malformed signup body: {e}")
        return error_response(
            settings.MALFORMED_JSON_STATUS_CODE, UNEXPECTED_ERROR_MESSAGE
        )
    except Exception:
        logger.exception("Unexpected error while processing signup")
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)

    return JSONResponse(
        status_code=201,
        content=SignupSuccess().model_dump(),
        headers=CORS_HEADERS,
    )
