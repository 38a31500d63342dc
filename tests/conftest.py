import pytest

import devdonalds
from cookbook import Cookbook, Ingredient, Recipe, RequiredItem


@pytest.fixture
def cookbook() -> Cookbook:
	return Cookbook()


@pytest.fixture
def stocked(cookbook: Cookbook) -> Cookbook:
	cookbook.insert(Ingredient(name='Egg', cook_time=6))
	cookbook.insert(Ingredient(name='Flour', cook_time=2))
	cookbook.insert(Recipe(name='Batter', required_items=[
		RequiredItem(name='Egg', quantity=2),
		RequiredItem(name='Flour', quantity=1),
	]))
	return cookbook


@pytest.fixture
def client(monkeypatch, cookbook: Cookbook):
	monkeypatch.setattr(devdonalds, 'cookbook', cookbook)
	monkeypatch.setitem(devdonalds.app.config, 'TESTING', True)
	return devdonalds.app.test_client()
