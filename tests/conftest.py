"""
Test fixtures - FastAPI test client, settings overrides and a small
hand-built catalog for the query engine.
"""
import pytest
from fastapi.testclient import TestClient

from acn.catalog.schemas import Product
from acn.config import Settings, get_settings
from acn.main import app


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def settings(tmp_path):
    """Settings with no upstream credentials and a temporary public dir."""
    public = tmp_path / "public"
    public.mkdir()
    s = Settings(public_dir=public, openai_api_key="", abandoned_api_key="test-key")
    app.dependency_overrides[get_settings] = lambda: s
    yield s
    app.dependency_overrides.pop(get_settings, None)


def _product(pid, category, name, brand, price, rating, description=""):
    return Product(
        id=pid,
        category=category,
        name=name,
        brand=brand,
        description=description,
        price=price,
        rating=rating,
    )


@pytest.fixture()
def catalog():
    """Eight food items and two toys, all with distinct prices."""
    return (
        _product(1, "food", "Kibble Delight", "Royal Canin", 12000, 4.1, "Dry food for adults"),
        _product(2, "food", "Puppy Start", "Hills", 8000, 4.8, "Growth formula"),
        _product(3, "toys", "Rope Tug", "PetToy", 5000, 3.9, "Cotton rope"),
        _product(4, "food", "apple crunch", "Nature", 15000, 4.5, "Grain free"),
        _product(5, "food", "Salmon Feast", "Orijen", 30000, 4.9, "Wild salmon recipe"),
        _product(6, "food", "Lamb & Rice", "Royal Canin", 21000, 4.2, "Sensitive digestion"),
        _product(7, "toys", "Squeaky Ball", "PetToy", 3000, 4.0, "Rubber ball"),
        _product(8, "food", "Turkey Bites", "NOW", 17000, 4.6, "Limited ingredient"),
        _product(9, "food", "Duck Dinner", "Acana", 26000, 4.4, "Regional recipe"),
        _product(10, "food", "Chicken Classic", "Purina", 9500, 4.3, "Everyday nutrition"),
    )
