"""HTML form for the subnet calculator.

Handles both GET (empty form) and traditional form POST (no JavaScript).
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..calculator import SubnetError, calculate_subnet

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["form"])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Main page with an empty form."""
    return templates.TemplateResponse(request, "index.html", {"ip": "", "mask": ""})


@router.post("/", response_class=HTMLResponse)
async def submit(request: Request, ip: str = Form(""), mask: str = Form("")):
    """Form submission: calculate and render results on the same page.

    Nothing is calculated unless both fields are filled in. Invalid input is
    shown as an error message, the page itself still renders with status 200.
    """
    ip = ip.strip()
    mask = mask.strip()
    context = {"ip": ip, "mask": mask}

    if ip and mask:
        try:
            context["result"] = calculate_subnet(ip, mask)
        except SubnetError as e:
            logger.info(
                "Rejected form input",
                extra={"error_type": type(e).__name__, "reason": str(e)},
            )
            context["error"] = str(e)

    return templates.TemplateResponse(request, "index.html", context)
