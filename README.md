# fontmatch

Describe fonts by style, weight and stretch, pick the closest face from a
family the way CSS Fonts Level 3 does, and record or replay glyph outlines.

## Installation

```
pip install fontmatch
```

For running the tests:

```
pip install "fontmatch[test]"
pytest
```

## Properties

`fontmatch.properties` holds `Style`, `Weight`, `Stretch` and `Properties`.

- `Style` is an enum with `NORMAL`, `ITALIC` and `OBLIQUE`; `str(Style.ITALIC)`
  gives `"Italic"`.
- `Weight` and `Stretch` are frozen, ordered wrappers around a float, with
  named constants such as `Weight.BOLD` (700) and `Stretch.CONDENSED` (0.75).
  `Stretch.MAPPING` lists the nine stretch values from ultra-condensed to
  ultra-expanded.
- `Properties` is immutable; derive new ones with `with_style`, `with_weight`
  and `with_stretch`:

```python
from fontmatch.properties import Properties, Style, Weight

query = Properties().with_style(Style.ITALIC).with_weight(Weight.BOLD)
```

The defaults are normal style, weight 400 and stretch 1.0.

## Matching

`fontmatch.matching.find_best_match(candidates, query)` returns the index of
the candidate that best matches `query`. Stretch is narrowed first, then
style (italic falls back to oblique, then normal; oblique to italic, then
normal; normal to oblique, then italic), then weight. An empty candidate list
raises `fontmatch.errors.NotFoundError`.

```python
from fontmatch.matching import find_best_match
from fontmatch.properties import Properties, Weight

faces = [Properties(), Properties().with_weight(Weight.BOLD)]
find_best_match(faces, Properties().with_weight(Weight(650.0)))  # -> 1
```

## Sources

`fontmatch.source.Source` is the abstract base class for a queryable font
database. A subclass provides `all_fonts`, `all_families`,
`select_family_by_name`, `select_by_postscript_name` and
`select_descriptions_in_family`. Font handles can be any objects the subclass
chooses; a family is a sequence of them.

`select_best_match(family_names, properties)` walks the family names in
order. A name is either a plain string or a `GenericFamily` member (serif,
sans-serif, monospace, cursive, fantasy), which is resolved through
`default_family_name`: on Windows and macOS this gives a concrete family such
as `"Arial"`, elsewhere the generic name itself. The first family that is
found and has a matching face gives the result; if none does,
`NotFoundError` is raised.

`fontmatch.multi.MultiSource` groups several sources and queries them in
order: lists are concatenated, lookups return the first hit. It can be
iterated, indexed, measured with `len`, and asked for the first source of a
given type with `find_source`.

Failures are raised as subclasses of `fontmatch.errors.SelectionError`:
`NotFoundError` and `CannotAccessSourceError`.

## Outlines

`fontmatch.outline` has `OutlineBuilder`, an `OutlineSink` that records
`move_to`, `line_to`, `quadratic_curve_to`, `cubic_curve_to` and `close`
calls into an `Outline` of `Contour`s whose points carry `PointFlags`
(`CONTROL_POINT_0`, `CONTROL_POINT_1`, or no flag for on-curve points).
`Outline.copy_to(sink)` replays an outline into any sink and raises
`ValueError` on a malformed contour. `take_outline` returns the outline so far
and starts a fresh one.

```python
from fontmatch.outline import OutlineBuilder

builder = OutlineBuilder()
builder.move_to((0.0, 0.0))
builder.line_to((10.0, 0.0))
builder.quadratic_curve_to((10.0, 10.0), (0.0, 10.0))
builder.close()
outline = builder.into_outline()
```

## Metrics and helpers

`fontmatch.metrics.Metrics` describes whole-font metrics in font units, with a
`Rect` bounding box (`width`, `height`, `origin`, `lower_right`).
`fontmatch.utils` offers `clamp`, `lerp`, `div_round_up`, `slurp_file` and
`has_sfnt_version`, which tells whether bytes start with a known sfnt version
tag.

## What it does not do

The package does not read or parse font files, discover installed system
fonts, or rasterize glyphs. It ships no concrete font source: to query real
fonts, subclass `Source` with your own loading code and feed its handles and
`Properties` to the matching above.