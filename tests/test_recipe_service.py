from unittest.mock import AsyncMock, MagicMock

import pytest

from neweats.shared.core.exceptions import RecipeAssociationNotFoundError, RecipeNotFoundError
from neweats.shared.services.recipe_service import RecipeService
from tests.factories import make_recipe


@pytest.fixture
def service() -> RecipeService:
    service = RecipeService(MagicMock())
    service.recipes = AsyncMock()
    service.links = AsyncMock()
    return service


async def test_save_creates_recipe_before_linking(service):
    calls = []
    stored = make_recipe("r1", label="Stored label")

    async def create_if_absent(**kwargs):
        calls.append("create")
        return stored

    async def add(user_id, recipe_id):
        calls.append("link")

    service.recipes.create_if_absent.side_effect = create_if_absent
    service.links.add.side_effect = add

    result = await service.save_for_user(
        user_id=1, recipe_id="r1", label="Posted label", ingredients=["egg"]
    )

    assert calls == ["create", "link"]
    assert result is stored
    service.links.add.assert_awaited_once_with(1, "r1")


async def test_get_missing_recipe(service):
    service.recipes.get.return_value = None

    with pytest.raises(RecipeNotFoundError, match="No recipe: r404"):
        await service.get_recipe("r404")


async def test_remove_unsaved_recipe(service):
    service.links.remove.return_value = False

    with pytest.raises(RecipeAssociationNotFoundError):
        await service.remove_from_user(1, "r1")


async def test_find_all_delegates_to_join(service):
    recipes = [make_recipe("a"), make_recipe("b")]
    service.links.list_user_recipes.return_value = recipes

    assert await service.find_all(1) == recipes
