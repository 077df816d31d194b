from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import Depends, FastAPI, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from labinventory import config
from labinventory.api_client import get_http_client
from labinventory.database import create_tables
from labinventory.services.dashboard import DashboardScreen
from labinventory.services.login import LoginScreen
from labinventory.storage import ClientStorage, get_client_id, get_client_storage

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent


@asynccontextmanager
async def lifespan(_: FastAPI):
    config.configure_logging()
    create_tables()
    logger.info(
        "Login API at %s, dashboard API at %s",
        config.LOGIN_API_BASE_URL,
        config.DASHBOARD_API_BASE_URL,
    )
    yield


app = FastAPI(
    title="Lab Inventory",
    version="1.0.0",
    description="Login and dashboard screens for the lab inventory API.",
    lifespan=lifespan,
)

app.mount("/static", StaticFiles(directory=PACKAGE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=PACKAGE_DIR / "templates")


def _remember_client(response: Response, client_id: str | None, storage: ClientStorage) -> Response:
    if client_id is None:
        response.set_cookie(
            config.CLIENT_ID_COOKIE,
            storage.client_id,
            httponly=True,
            samesite="lax",
            max_age=60 * 60 * 24 * 365,
        )
    return response


def _render_login(request: Request, screen: LoginScreen, email: str, password: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "login.html",
        {
            "email": email,
            "password": password,
            "error": screen.error,
            "loading": screen.loading,
            "default_email": config.DEFAULT_LOGIN_EMAIL,
            "default_password": config.DEFAULT_LOGIN_PASSWORD,
        },
    )


def _login_screen(storage: ClientStorage, http_client: httpx.AsyncClient) -> LoginScreen:
    return LoginScreen(storage, http_client, base_url=config.LOGIN_API_BASE_URL)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def login_page(
    request: Request,
    client_id: str | None = Depends(get_client_id),
    storage: ClientStorage = Depends(get_client_storage),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> Response:
    screen = _login_screen(storage, http_client)
    if screen.mount():
        response: Response = RedirectResponse(screen.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
    else:
        response = _render_login(
            request, screen, email=config.DEFAULT_LOGIN_EMAIL, password=config.DEFAULT_LOGIN_PASSWORD
        )
    return _remember_client(response, client_id, storage)


@app.post("/login", response_class=HTMLResponse)
async def login(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    client_id: str | None = Depends(get_client_id),
    storage: ClientStorage = Depends(get_client_storage),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> Response:
    screen = _login_screen(storage, http_client)
    if await screen.submit(email, password):
        response: Response = RedirectResponse(screen.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
    else:
        response = _render_login(request, screen, email=email, password=password)
    return _remember_client(response, client_id, storage)


@app.get("/dashboard", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    client_id: str | None = Depends(get_client_id),
    storage: ClientStorage = Depends(get_client_storage),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> Response:
    screen = DashboardScreen(
        http_client,
        base_url=config.DASHBOARD_API_BASE_URL,
        email=config.DASHBOARD_LOGIN_EMAIL,
    )
    await screen.load()
    response = templates.TemplateResponse(request, "dashboard.html", {"view": screen.render()})
    return _remember_client(response, client_id, storage)
