from dataclasses import dataclass

import pytest

from museumtour.cli import build_demo, main, runtime_type_message, special_details_message
from museumtour.items import Artifact, MuseumItem, Painting, Sculpture


@dataclass
class _Plain(MuseumItem):
    def describe(self):
        return self.title


class _Watercolor(Painting):
    pass


def test_build_demo_contents():
    demo = build_demo([])
    assert len(demo.museum.halls) == 3
    assert len(demo.museum.items) == 4
    assert len(demo.guide.route) == 3
    assert demo.visitor.guide is demo.guide
    assert all(item in demo.museum.items for item in demo.guide.route)


def test_build_demo_rejects_arguments():
    with pytest.raises(SystemExit):
        build_demo(["--unknown"])


def test_runtime_type_messages():
    assert runtime_type_message(Painting("a", 1, "b", 1, "c")).endswith("объект является картиной.")
    assert runtime_type_message(Sculpture("a", 1, "b", 1, "c")).endswith(
        "объект является скульптурой."
    )
    assert runtime_type_message(Artifact("a", 1, "b", 1, "c")).endswith(
        "объект является артефактом."
    )
    assert runtime_type_message(_Plain("a", 1)).endswith("тип объекта определить не удалось.")


def test_runtime_type_is_exact():
    item = _Watercolor("a", 1, "b", 1, "акварель")
    assert runtime_type_message(item).endswith("тип объекта определить не удалось.")


def test_special_details():
    assert special_details_message(Painting("a", 1, "b", 1, "масло")).endswith("техника = масло.")
    assert special_details_message(Sculpture("a", 1, "b", 1, "бронза")).endswith(
        "материал = бронза."
    )
    assert special_details_message(Artifact("a", 1, "b", 1, "XIII век")).endswith(
        "эпоха = XIII век."
    )
    assert special_details_message(_Plain("a", 1)) == (
        "dynamic_cast не выявил специальный тип объекта."
    )


def test_special_details_accepts_subclasses():
    item = _Watercolor("a", 1, "b", 1, "акварель")
    assert special_details_message(item).endswith("акварель.")


def test_main_prints_report(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    demo = build_demo([])
    assert "=== Информация о музее ===" in out
    assert "=== Итог ===" in out
    assert demo.museum.format_visit_plan() in out
    assert demo.guide.format_route() in out
    assert "Поиск завершён успешно. Найден объект:" in out
    assert "объект является скульптурой." in out
    assert out.index("=== Залы музея ===") < out.index("=== План осмотра ===")