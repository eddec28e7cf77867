"""Command that builds a sample museum and prints a tour report."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from .guide import Guide
from .items import Artifact, MuseumItem, Painting, Sculpture
from .museum import Museum
from .visitor import Visitor

SEARCH_TITLE = "Мыслитель"


@dataclass
class Demo:
    """The sample museum with its guide and visitor."""

    museum: Museum
    guide: Guide
    visitor: Visitor


def _parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="museumtour",
        description="Build a sample museum and print a tour report.",
    )


def build_demo(argv: Sequence[str] | None = None) -> Demo:
    """Parse the command line and build the sample museum."""
    _parser().parse_args(argv)

    museum = Museum("Городской историко-художественный музей")
    museum.add_hall(1, "Русская живопись")
    museum.add_hall(2, "Скульптура")
    museum.add_hall(3, "Исторические реликвии")

    painting = Painting("Девочка с персиками", 1887, "Валентин Серов", 1, "масло")
    sculpture = Sculpture("Мыслитель", 1904, "Огюст Роден", 2, "бронза")
    artifact = Artifact("Шлем княжеского дружинника", 1200, "Древняя Русь", 3, "XIII век")
    second_painting = Painting("Над вечным покоем", 1894, "Исаак Левитан", 1, "масло")

    for item in (painting, sculpture, artifact, second_painting):
        museum.add_item(item)

    guide = Guide("Анна")
    for item in (painting, artifact, sculpture):
        guide.add_to_route(item)

    visitor = Visitor("Иван", guide)
    return Demo(museum, guide, visitor)


def runtime_type_message(item: MuseumItem) -> str:
    """Name the item's exact kind."""
    kinds = {
        Painting: "объект является картиной.",
        Sculpture: "объект является скульптурой.",
        Artifact: "объект является артефактом.",
    }
    kind = kinds.get(type(item), "тип объекта определить не удалось.")
    return "Результат typeid: " + kind


def special_details_message(item: MuseumItem) -> str:
    """Report the field that only the item's own kind has."""
    if isinstance(item, Painting):
        return (
            "dynamic_cast дал доступ к специфичному полю картины: техника = "
            f"{item.technique}."
        )
    if isinstance(item, Sculpture):
        return (
            "dynamic_cast дал доступ к специфичному полю скульптуры: материал = "
            f"{item.material}."
        )
    if isinstance(item, Artifact):
        return (
            "dynamic_cast дал доступ к специфичному полю артефакта: эпоха = "
            f"{item.epoch}."
        )
    return "dynamic_cast не выявил специальный тип объекта."


def _section(title: str) -> list[str]:
    return ["", f"=== {title} ==="]


def _report(demo: Demo) -> str:
    museum, guide, visitor = demo.museum, demo.guide, demo.visitor
    lines: list[str] = []

    lines += _section("Информация о музее")
    lines.append(museum.format_info())

    lines += _section("Залы музея")
    lines.append(museum.format_halls())

    lines += _section("Коллекция экспонатов")
    lines.append(museum.format_collection())

    lines += _section("Полиморфный вывод")
    lines.append("Ниже каждый объект обрабатывается через базовый интерфейс MuseumItem:")
    for item in museum.items:
        lines.append(item.describe())
        lines.append(f"Рекомендуемое время осмотра: {item.visit_minutes} мин.")
        lines.append("")

    lines += _section("План осмотра")
    lines.append(museum.format_visit_plan())

    lines += _section("Маршрут экскурсии")
    lines.append(guide.format_route())

    lines += _section("Работа гида и посетителя")
    lines.append(visitor.ask_guide_name())

    lines += _section("Поиск через каталог")
    lines.append("Музей делегирует поиск экспоната объекту Catalog.")
    found = museum.find_item(SEARCH_TITLE)
    if found is not None:
        lines.append("Поиск завершён успешно. Найден объект:")
        lines.append(found.describe())
    else:
        lines.append("Экспонат не найден.")

    lines += _section("RTTI и dynamic_cast")
    if found is not None:
        lines.append("Дополнительная проверка типа нужна только для доступа")
        lines.append("к данным, которых нет в базовом интерфейсе.")
        lines.append(runtime_type_message(found))
        lines.append(special_details_message(found))
    else:
        lines.append("RTTI не демонстрируется, потому что объект для проверки не найден.")

    lines += _section("Итог")
    lines.append("Программа показала композицию, агрегацию, ассоциацию,")
    lines.append("делегирование и полиморфную работу с музейными объектами.")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the tour report for the sample museum."""
    demo = build_demo(argv)
    print(_report(demo))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())