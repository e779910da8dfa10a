from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv
from pathlib import Path
import os
import logging
from models.action_models import UNASSIGNED_OWNER
from models.analyze_request import ErrorResponse, TRANSCRIPT_REQUIRED_MESSAGE
from services.action_extractor import ActionExtractor, API_KEY_ENV_VAR, build_action_agent
from routers import analyze
from client.files import ACCEPTED_EXTENSIONS

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
INVALID_JSON_MESSAGE = "Request body must be valid JSON"


def validate_environment():
    """
    Log whether the provider credential is configured.

    A missing credential does not stop the process: the analysis endpoint
    reports it as a configuration error on every request until it is set.
    """
    if os.getenv(API_KEY_ENV_VAR):
        logger.info("Environment validation passed")
    else:
        logger.warning("=" * 60)
        logger.warning(f"{API_KEY_ENV_VAR} is not set")
        logger.warning("POST /api/analyze will return a configuration error")
        logger.warning("=" * 60)

# Call validation at startup
validate_environment()

app = FastAPI(title="Meeting Transcript Analyzer")

# Built once, read-only for the life of the process
app.state.action_extractor = ActionExtractor(build_action_agent())

# Include routers
app.include_router(analyze.router)

app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

templates = Jinja2Templates(directory=BASE_DIR / "templates")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request validation failures as 400 with an error message."""
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        message = INVALID_JSON_MESSAGE
    else:
        message = TRANSCRIPT_REQUIRED_MESSAGE
    logger.warning(
        f"Request rejected: path={request.url.path}, "
        f"errors={[e.get('type') for e in errors]}"
    )
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=message).model_dump()
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None)
    )


@app.get("/", response_class=HTMLResponse)
def get(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "accepted_extensions": ",".join(ACCEPTED_EXTENSIONS),
            "unassigned_owner": UNASSIGNED_OWNER,
        }
    )
