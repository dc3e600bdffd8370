import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from personnel_api.api.health import router as health_router
from personnel_api.api.root import router as root_router
from personnel_api.api.users import router as users_router
from personnel_api.api.employees import router as employees_router
from personnel_api.api.departments import router as departments_router
from personnel_api.api.salary_grades import router as salary_grades_router
from personnel_api.core.config import settings
from personnel_api.core.errors import register_exception_handlers
from personnel_api.core.logging import configure_logging
from personnel_api.db.repository import Repository
from personnel_api.db.session import create_db_engine

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Health", "description": "Health check endpoints"},
    {"name": "Users", "description": "User management endpoints"},
    {"name": "Employees", "description": "Employee management endpoints"},
    {"name": "Departments", "description": "Department management endpoints"},
    {"name": "Salary Grades", "description": "Salary grade management endpoints"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    engine = create_db_engine(settings)
    app.state.repository = Repository(engine)
    logger.info(f"Database pool ready ({engine.url.render_as_string(hide_password=True)})")
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database connections closed")


app = FastAPI(
    title="Personnel Management API",
    version="1.0.0",
    description="API for managing employees, departments, and salary grades",
    openapi_url="/api-docs/openapi.json",
    docs_url="/docs",
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    elapsed = time.time() - start_time
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {elapsed:.4f}s")
    return response


register_exception_handlers(app)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(users_router)
app.include_router(employees_router)
app.include_router(departments_router)
app.include_router(salary_grades_router)
