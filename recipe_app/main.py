# Recipe manager web application entry point
import contextlib
import logging
import sys

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from . import bootstrap
from .controllers.index import router as index_router
from .controllers.ingredients import router as ingredients_router
from .controllers.recipes import router as recipes_router
from .db import Base, get_engine, session_scope
from .exceptions import NotFoundError
from .rate_limit import limiter
from .settings import settings
from .views import Model, render

# Configure structured logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("recipe_app")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_schema:
        Base.metadata.create_all(bind=get_engine())
    if settings.seed_data:
        with session_scope() as db:
            created = bootstrap.seed(db)
        logger.info(f"Bootstrap created {created} recipe(s)")
    yield


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning(f"Not found: {exc}")
    model = Model().add_attribute("exception", exc)
    return render(request, "404error", model, status_code=404)


async def bad_request_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Bad request on {request.url.path}: {exc.errors()}")
    model = Model().add_attribute("exception", exc)
    return render(request, "400error", model, status_code=400)


app = FastAPI(title="Recipe Manager", version="0.1.0", lifespan=lifespan)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(NotFoundError, not_found_handler)
app.add_exception_handler(RequestValidationError, bad_request_handler)

app.include_router(index_router, tags=["index"])
app.include_router(recipes_router, tags=["recipes"])
app.include_router(ingredients_router, tags=["ingredients"])
