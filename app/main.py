# app/main.py

"""Blog Insights Backend - statistics and cached title search over a remote blog feed."""

from logging import getLogger

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from app.configs import ROOT_MESSAGE, settings
from app.errors import BaseAppError, blog_exception_handler, create_unhandled_exception_handler
from app.middleware import LoggingMiddleware, lifespan
from app.routes import blog_router
from app.schemas import MessageResponse

app = FastAPI(
    title=settings.APP_NAME,
    description="Statistics and cached title search over a remote blog feed",
    version="1.0.0",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

app.add_middleware(LoggingMiddleware)

routes = [
    blog_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (BaseAppError, blog_exception_handler),
    (Exception, create_unhandled_exception_handler(getLogger(__name__))),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_model=MessageResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"message": ROOT_MESSAGE},
                },
            },
        },
    },
    operation_id="root_access",
)
async def root() -> ORJSONResponse:
    """
    Root endpoint, doubles as a liveness probe.

    Examples
    --------
    Request
        GET /
    Response
        200 OK
        {"message": "hello"}
    """
    return ORJSONResponse(content={"message": ROOT_MESSAGE})
