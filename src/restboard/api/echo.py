"""Echo routes — report which HTTP method hit the root URI.

Learn: REST maps the four HTTP methods onto create/read/update/delete.
These handlers do nothing but name the method they received, which is
handy for checking a client or proxy passes every verb through:

    curl -X PUT http://localhost:3000/
    Received a PUT HTTP method
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.api_route(
    "/",
    methods=["GET", "POST", "PUT", "DELETE"],
    response_class=PlainTextResponse,
)
async def echo_method(request: Request):
    return f"Received a {request.method} HTTP method"
