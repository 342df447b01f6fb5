# employee_directory/routers/pages.py
from functools import lru_cache
from pathlib import Path
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from employee_directory.store import EmployeeStore, get_store

router = APIRouter()
TEMPLATE = Path(__file__).resolve().parent.parent / "templates" / "index.html"

@lru_cache
def _page() -> str:
    return TEMPLATE.read_text(encoding="utf-8")

@router.get("/", include_in_schema=False, response_class=HTMLResponse)
def index(_: EmployeeStore = Depends(get_store)):
    return HTMLResponse(_page(), media_type="text/html; charset=utf-8")
