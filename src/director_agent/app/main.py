from __future__ import annotations

import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from director_agent.agent.graph import run_director
from director_agent.app.agent_singleton import get_bindings, get_director_graph
from director_agent.app.page import INDEX_HTML
from director_agent.app.schemas import DebugResponse, ErrorResponse, RouteTaskRequest, RouteTaskResponse
from director_agent.common.config import Settings
from director_agent.common.errors import InvalidAgentResponse
from director_agent.common.logging_utils import bind_request_id, setup_logging


setup_logging()
logger = logging.getLogger("director_agent")

app = FastAPI(title="Director Agent", version="0.1.0")


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    request_id = bind_request_id(request.headers.get("x-request-id"))

    start = time.perf_counter()
    logger.info("request start: %s %s", request.method, request.url.path)

    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception("unhandled error")
        return JSONResponse(status_code=500, content={"error": str(e)})

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("request end: %s %s -> %s (%.2f ms)", request.method, request.url.path, response.status_code, elapsed_ms)

    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("invalid request body: %s", exc.errors())
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object like {\"userQuery\": \"...\"}."})


@app.get("/", response_class=HTMLResponse)
async def index():
    return HTMLResponse(INDEX_HTML)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/debug", response_model=DebugResponse)
async def debug():
    bindings = await get_bindings()
    return DebugResponse(
        available_bindings=bindings.available(),
        AI="AI binding exists" if bindings.ai is not None else "AI binding is missing",
    )


@app.post(
    "/route-task",
    response_model=RouteTaskResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def route_task_endpoint(payload: RouteTaskRequest):
    """
    Classify the query, then hand it to the matching agent.
    """
    # forwarded as-is, only coerced to text
    query = "" if payload.user_query is None else str(payload.user_query)

    try:
        bindings = await get_bindings()
        graph = await get_director_graph()

        start = time.perf_counter()
        result = await run_director(graph, query, bindings)
        elapsed_ms = (time.perf_counter() - start) * 1000
    except InvalidAgentResponse as e:
        logger.warning("classification rejected: %s", e.reply)
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.exception("Error routing task")
        return JSONResponse(status_code=500, content={"error": str(e)})

    logger.info("route_task_done agent=%s duration_ms=%.2f", result.get("agent"), elapsed_ms)
    return RouteTaskResponse(agent=result["agent"], response=result["response"])


def serve() -> None:
    """Run the service with uvicorn on HOST:PORT."""
    settings = Settings.from_env()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    serve()
