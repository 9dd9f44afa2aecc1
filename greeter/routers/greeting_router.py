"""Greeting FastAPI router"""

from http import HTTPStatus

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from greeter.services import greeting_service

router = APIRouter(tags=["greeting"])


@router.get(
    "/{name}", status_code=HTTPStatus.OK, response_class=PlainTextResponse
)
def get_greeting(name: str) -> PlainTextResponse:
    greeting = greeting_service.get_greeting(name)
    return PlainTextResponse(greeting.message, status_code=HTTPStatus.OK)
