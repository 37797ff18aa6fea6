from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.database import create_db_and_tables
from .core.logger import RequestLoggingMiddleware, setup_logging
from .core.responses import http_exception_handler, unhandled_exception_handler, validation_exception_handler
from .core.settings import settings
from .models.User import User # Import models to register them with SQLModel
from .models.Product import Product
from .models.Menu import Menu
from .models.Order import Order

from .users.router import router as users_router
from .products.router import router as products_router
from .menus.router import router as menus_router
from .orders.router import router as orders_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    logger.info("%s started", settings.PROJECT_NAME)
    yield



app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

app.include_router(users_router)
app.include_router(products_router)
app.include_router(menus_router)
app.include_router(orders_router)

@app.get("/")
def read_root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}
