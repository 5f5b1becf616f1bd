from __future__ import annotations

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from tracker.core import csrf
from tracker.domain.weeks import DAY_NAMES
from tracker.services.habit_store import HabitStore

router = APIRouter(prefix="", tags=["habits"])


def _get_store(request: Request) -> HabitStore:
    store = getattr(getattr(request.app, "state", None), "habit_store", None)
    if store is None:
        raise RuntimeError("HabitStore is not configured")
    return store


def _templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates are not configured")


def _back_to_grid() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


@router.get("/", response_class=HTMLResponse)
def habit_grid(request: Request):
    store = _get_store(request)
    csrf_token = csrf.issue_token(request)
    rows = [
        {"index": index, "habit": habit, "days": store.get_completion_data(habit)}
        for index, habit in enumerate(store.habits)
    ]
    header = [
        {"name": name, "day": day.day, "iso": day.isoformat()}
        for name, day in zip(DAY_NAMES, store.week_days())
    ]
    context = {
        "week_label": store.week_label(),
        "week_key": store.current_week_key(),
        "header": header,
        "rows": rows,
        "csrf_field": csrf.CSRF_FORM_FIELD,
        "csrf_token": csrf_token,
    }
    response = _templates(request).TemplateResponse(request, "habits.html", context)
    csrf.set_csrf_cookie(response, csrf_token)
    return response


@router.post("/habits")
def add_habit(request: Request, name: str = Form(""), csrf_token: str = Form("", alias=csrf.CSRF_FORM_FIELD)):
    csrf.validate_csrf(request, csrf_token)
    _get_store(request).add_habit(name)
    return _back_to_grid()


@router.post("/habits/{index}/remove")
def remove_habit(index: int, request: Request, csrf_token: str = Form("", alias=csrf.CSRF_FORM_FIELD)):
    csrf.validate_csrf(request, csrf_token)
    _get_store(request).remove_habit(index)
    return _back_to_grid()


@router.post("/habits/{index}/days/{day}/toggle")
def toggle_day(index: int, day: int, request: Request, csrf_token: str = Form("", alias=csrf.CSRF_FORM_FIELD)):
    csrf.validate_csrf(request, csrf_token)
    _get_store(request).toggle_day(index, day)
    return _back_to_grid()


@router.post("/week/next")
def next_week(request: Request, csrf_token: str = Form("", alias=csrf.CSRF_FORM_FIELD)):
    csrf.validate_csrf(request, csrf_token)
    _get_store(request).next_week()
    return _back_to_grid()


@router.post("/week/previous")
def previous_week(request: Request, csrf_token: str = Form("", alias=csrf.CSRF_FORM_FIELD)):
    csrf.validate_csrf(request, csrf_token)
    _get_store(request).previous_week()
    return _back_to_grid()
