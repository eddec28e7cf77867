# museumtour

A small object model of a museum. A museum holds numbered halls and a
collection of exhibits (paintings, sculptures and artifacts), looks exhibits
up by title through a catalog, and can produce a visit plan. A guide keeps an
ordered route through exhibits, and a visitor can be accompanied by a guide.

All output text is in Russian.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
museumtour
```

Builds a sample museum with three halls and four exhibits, then prints the
museum summary, its halls, the collection, each exhibit with its recommended
viewing time, a visit plan, a guided route, a visitor talking to the guide,
a catalog lookup of the exhibit titled «Мыслитель», and the kind and
kind-specific detail of the exhibit that was found. The command takes no
options besides `--help`. The same report is printed by
`python -m museumtour.cli`.

## Library use

```python
from museumtour.items import Painting, Sculpture
from museumtour.museum import Museum
from museumtour.guide import Guide
from museumtour.visitor import Visitor

museum = Museum("Городской музей")
museum.add_hall(1, "Живопись")
painting = Painting("Девочка с персиками", 1887, "Валентин Серов", 1, "масло")
museum.add_item(painting)

print(museum.format_info())
print(museum.format_halls())
print(museum.format_collection())
print(museum.format_visit_plan())

found = museum.find_item("Девочка с персиками")
if found is not None:
    print(found.describe())

guide = Guide("Анна")
guide.add_to_route(painting)
print(guide.format_route())

visitor = Visitor("Иван", guide)
print(visitor.ask_guide_name())
```

### Modules

- `museumtour.items`: the abstract `MuseumItem` (title, year), `Exhibit`
  (adds author and hall number) and the concrete `Painting` (technique),
  `Sculpture` (material) and `Artifact` (epoch; its author field holds the
  origin). Each concrete kind has a `describe()` method returning a one-line
  description and a `visit_minutes` class attribute: 15 for paintings, 12 for
  sculptures, 10 for artifacts. All are dataclasses.
- `museumtour.hall`: the frozen dataclass `Hall` (number, name) with
  `describe()`.
- `museumtour.catalog`: `Catalog.find_by_title(items, title)` returns the
  first item whose title matches exactly, or `None`.
- `museumtour.guide`: `Guide` with a `route` list, `add_to_route(item)` and
  `format_route()`.
- `museumtour.visitor`: `Visitor` with an optional `guide` and
  `ask_guide_name()`.
- `museumtour.museum`: `Museum` with `halls` and `items` lists.
  `add_hall(number, name)` creates a hall and returns it; `add_item(item)`
  adds an exhibit; `format_info()`, `format_halls()`, `format_collection()`
  and `format_visit_plan()` return text; `find_item(title)` returns the
  exhibit or `None`.
- `museumtour.cli`: `build_demo(argv=None)` returns the sample museum with
  its guide and visitor; `runtime_type_message(item)` names the exact kind
  of an exhibit; `special_details_message(item)` reports the field only that
  kind has; `main(argv=None)` prints the report and returns 0.

The `format_*` and `describe` methods return strings rather than printing
them; lines are joined with `\n` and carry no trailing newline.

## What it does not do

The package keeps everything in memory: it does not save or load museums,
exhibits or routes. The command works only with its built-in sample data and
does not read exhibits from a file or from the user.