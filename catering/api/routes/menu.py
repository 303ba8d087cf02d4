from fastapi import APIRouter, Depends, Query, Response

from catering.infra.pdf_utils import generate_pdf_for_week
from catering.logic.menu_service import MenuService, get_menu_service
from catering.logic.weeks.dates import format_date, parse_date_param
from catering.utilities.validators import IndexResponse, WeekResponse

router = APIRouter()


@router.get("/week", response_model=WeekResponse)
async def get_week(date: str = Query(...), service: MenuService = Depends(get_menu_service)):
    """All entries of the menu week that serves ``date``."""
    week = await service.get_week(parse_date_param(date))
    return WeekResponse(week_start=format_date(week.week_start), exact=week.exact, entries=week.entries)


@router.get("/week/pdf")
async def get_week_pdf(date: str = Query(...), service: MenuService = Depends(get_menu_service)):
    week = await service.get_week(parse_date_param(date))
    pdf_bytes = generate_pdf_for_week(week.week_start, week.entries)
    filename = f"menu_{format_date(week.week_start)}.pdf"
    return Response(content=pdf_bytes, media_type="application/pdf",
                    headers={"Content-Disposition": f'attachment; filename="{filename}"'})


@router.get("/index", response_model=IndexResponse)
async def get_index(service: MenuService = Depends(get_menu_service)):
    snapshot = await service.get_snapshot()
    return IndexResponse(
        count=len(snapshot.index),
        weeks=[format_date(w) for w in snapshot.week_starts],
        keys=sorted(snapshot.index),
    )
