"""GET /v1/categories/suggest - guess a spending category from an item name"""

from fastapi import APIRouter, Query

from purchase_coach.api.v1.schemas import CategorySuggestionResponse
from purchase_coach.domain.catalog import category_label, suggest_category

router = APIRouter()


@router.get("/categories/suggest", response_model=CategorySuggestionResponse)
def get_category_suggestion(
    item_name: str = Query(..., min_length=1, description="Item the user is considering"),
):
    """
    Suggest a category by keyword match on the item name.

    Returns:
        The matched category and its label, or nulls when nothing matches
    """
    category = suggest_category(item_name)
    if category is None:
        return CategorySuggestionResponse(item_name=item_name)

    return CategorySuggestionResponse(
        item_name=item_name,
        category=category,
        label=category_label(category),
    )
