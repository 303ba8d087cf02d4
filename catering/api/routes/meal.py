from fastapi import APIRouter, Depends, Query

from catering.logic.menu_service import MenuService, get_menu_service
from catering.logic.weeks.dates import format_date, parse_date_param
from catering.utilities.validators import MealQuery, MealResponse

router = APIRouter()


@router.get("/meal", response_model=MealResponse)
async def get_meal(
    date: str = Query(...),
    period: str = Query(...),
    service: MenuService = Depends(get_menu_service),
):
    """Meal text for one date and period (breakfast, brunch, lunch or dinner)."""
    query = MealQuery(date=date, period=period)
    requested = parse_date_param(query.date)
    meal = await service.get_meal(requested, query.period)
    return MealResponse(date=format_date(requested), period=query.period, meal=meal)
