import pytest

from museumtour.guide import Guide
from museumtour.items import Artifact, Painting, Sculpture


@pytest.fixture
def items():
    return [
        Painting("Девочка с персиками", 1887, "Валентин Серов", 1, "масло"),
        Artifact("Шлем княжеского дружинника", 1200, "Древняя Русь", 3, "XIII век"),
        Sculpture("Мыслитель", 1904, "Огюст Роден", 2, "бронза"),
    ]


def test_empty_route():
    lines = Guide("Анна").format_route().splitlines()
    assert lines[0] == "Маршрут гида Анна:"
    assert lines[1:] == ["  Маршрут пока не составлен."]


def test_route_keeps_order(items):
    guide = Guide("Анна")
    for item in items:
        guide.add_to_route(item)
    assert guide.route == items


def test_route_text(items):
    guide = Guide("Анна")
    for item in items:
        guide.add_to_route(item)
    lines = guide.format_route().splitlines()
    assert len(lines) == 1 + 3 * len(items)
    assert lines[1] == "Остановка 1:"
    assert lines[2] == items[0].describe()
    assert lines[3] == "  Рекомендуемое время осмотра: 15 мин."
    assert lines[5] == items[1].describe()
    assert lines[8] == items[2].describe()


def test_stops_are_numbered(items):
    guide = Guide("Анна")
    for item in items:
        guide.add_to_route(item)
    stops = [line for line in guide.format_route().splitlines() if line.startswith("Остановка ")]
    assert [s.split()[1] for s in stops] == ["1:", "2:", "3:"]


def test_same_item_twice(items):
    guide = Guide("Анна")
    guide.add_to_route(items[0])
    guide.add_to_route(items[0])
    assert guide.format_route().count(items[0].describe()) == 2