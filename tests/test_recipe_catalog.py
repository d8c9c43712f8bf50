"""
Tests for the in-memory recipe catalog.
"""

import pytest

from adapters.memory import RecipeCatalog
from domain.entities import Recipe
from domain.repo_abc import RecipeRepository


def test_catalog_is_a_recipe_repository(catalog):
    assert isinstance(catalog, RecipeRepository)


def test_add_keeps_insertion_order(catalog):
    names = ["Soup", "Salad", "Cake"]
    for name in names:
        catalog.add(Recipe(name=name))

    assert [recipe.name for recipe in catalog.get_all()] == names
    assert [recipe.name for recipe in catalog] == names
    assert len(catalog) == 3


def test_get_all_is_a_snapshot(catalog):
    catalog.add(Recipe(name="Soup"))
    snapshot = catalog.get_all()
    catalog.add(Recipe(name="Stew"))

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 1
    assert len(catalog.get_all()) == 2


@pytest.mark.parametrize("query", ["Pasta", "pasta", "PASTA", "PaStA"])
def test_find_by_name_ignores_case(catalog, query):
    pasta = Recipe(name="Pasta")
    catalog.add(Recipe(name="Pizza"))
    catalog.add(pasta)

    assert catalog.find_by_name(query) is pasta


def test_find_by_name_returns_first_match(catalog):
    soup = Recipe(name="Soup")
    soup2 = Recipe(name="soup2")
    duplicate = Recipe(name="SOUP")
    catalog.add(soup)
    catalog.add(soup2)
    catalog.add(duplicate)

    assert catalog.find_by_name("SOUP") is soup


def test_find_by_name_is_exact(catalog):
    catalog.add(Recipe(name="Soup"))
    assert catalog.find_by_name("Sou") is None
    assert catalog.find_by_name("Soup ") is None


def test_find_by_name_on_empty_catalog():
    assert RecipeCatalog().find_by_name("anything") is None


def test_find_by_name_compares_case_only(catalog):
    strasse = Recipe(name="Straße")
    catalog.add(strasse)

    assert catalog.find_by_name("straße") is strasse
    assert catalog.find_by_name("STRASSE") is None
