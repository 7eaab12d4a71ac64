import json

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.domain.events import Event
from src.services.event_service import EventService
from src.settings.logger import logger
from src.settings.settings import AppConfig
from src.storage.event_store import EventStore


def create_app(
    settings: AppConfig | None = None,
    service: EventService | None = None,
) -> FastAPI:
    settings = settings or AppConfig()

    app = FastAPI(title=settings.server.title)
    app.state.event_service = service or EventService(EventStore())

    if settings.server.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.server.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"[HTTP] {request.method} {request.url.path} -> {response.status_code}")
        return response

    @app.get("/events_list")
    async def events_list(service: EventService = Depends(get_event_service)):
        return service.list_events()

    @app.post("/post_event", status_code=201, response_class=PlainTextResponse)
    async def post_event(
        payload: Event = Depends(read_event_body),
        service: EventService = Depends(get_event_service),
    ):
        return service.append_event(payload)

    return app


def get_event_service(request: Request) -> EventService:
    return request.app.state.event_service


async def read_event_body(request: Request) -> Event:
    """
    Decode the request body into an event.
    - form-urlencoded: dict of fields, repeated keys become lists
    - JSON or no content-type: any JSON value, empty body reads as {}
    - any other content-type is left unparsed and reads as {}
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type == "application/x-www-form-urlencoded":
        form = await request.form()
        fields = {}
        for key in form.keys():
            values = form.getlist(key)
            fields[key] = values[0] if len(values) == 1 else values
        return fields

    if content_type and not _is_json_type(content_type):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise HTTPException(status_code=400, detail="Malformed JSON body")


def _is_json_type(content_type: str) -> bool:
    return content_type == "application/json" or content_type.endswith("+json")
