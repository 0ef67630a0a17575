# rolodex/services/api/templating.py
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates

WEB_ROOT = Path(__file__).resolve().parent.parent / "web"
TEMPLATES_DIR = WEB_ROOT / "templates"
STATIC_DIR = WEB_ROOT / "static"


def _display_date(d: Optional[date]) -> str:
    return d.strftime("%d %b %Y") if d else ""


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["display_date"] = _display_date
