from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
import enum
import functools
import re
import weakref

import pytest

from checkpack.chain import ValidationError
from checkpack.core import MISSING
from checkpack.render import GETTER_FAILED, inspect_value


class Color(enum.Enum):
    RED = 1


class Tag(str):
    pass


class Point:
    def __init__(self) -> None:
        self.y = 2
        self.x = 1


class Slotted:
    __slots__ = ("a", "b")

    def __init__(self) -> None:
        self.a = 1


class Empty:
    pass


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "None"),
        (MISSING, "<MISSING>"),
        (True, "True"),
        (False, "False"),
        (42, "42"),
        (1.5, "1.5"),
        (float("nan"), "nan"),
        (-0.0, "-0.0"),
        (1 + 2j, "(1+2j)"),
        (Decimal("1.50"), "1.50"),
        (Color.RED, "Color.RED"),
        ("test", '"test"'),
        (Tag("boxed"), '"boxed"'),
        (2**53, "9007199254740992n"),
        (-(2**60), "-1152921504606846976n"),
        (2**53 - 1, "9007199254740991"),
    ],
)
def test_scalars_render_in_natural_form(value: object, expected: str) -> None:
    assert inspect_value(value) == expected


def test_patterns_render_with_flags() -> None:
    assert inspect_value(re.compile("a", re.IGNORECASE)) == "re.compile('a', re.IGNORECASE)"
    assert inspect_value(re.compile("a")) == "re.compile('a')"


def test_functions_render_named_and_anonymous() -> None:
    def named() -> None:
        return None

    assert inspect_value(named) == "[Function: named]"
    assert inspect_value(lambda: None) == "[Function (anonymous)]"
    assert inspect_value(len) == "[Function: len]"
    assert inspect_value(functools.partial(named)) == "[Function (anonymous)]"
    assert inspect_value(int) == "[Function: int]"
    assert inspect_value(Point) == "[Function: Point]"


def test_dates_render_as_iso_timestamps() -> None:
    moment = datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)

    assert inspect_value(moment) == "1970-01-01T00:00:01Z"
    assert inspect_value(datetime(2024, 5, 6, 7, 8, 9)) == "2024-05-06T07:08:09"
    assert inspect_value(date(2024, 1, 2)) == "2024-01-02"
    assert inspect_value(timedelta(hours=1)) == "1:00:00"


@pytest.mark.parametrize("factory", [bytes, bytearray, memoryview])
def test_binary_buffers_list_their_bytes(factory: type) -> None:
    value = factory(b"\x01\x02\x03")
    name = type(value).__name__

    assert inspect_value(value) == f"[{name}(3)] [\n  1,\n  2,\n  3\n]"


def test_sequences_render_length_header_and_items() -> None:
    rendered = inspect_value([1, 2, 3])

    assert rendered == "[list(3)] [\n  1,\n  2,\n  3\n]"
    assert inspect_value((1,)) == "[tuple(1)] [\n  1\n]"
    assert inspect_value([]) == "[list(0)] []"


def test_sets_render_members_in_stable_order() -> None:
    assert inspect_value({3, 1, 2}) == "[set(3)] {\n  1,\n  2,\n  3\n}"
    assert inspect_value(frozenset()) == "[frozenset(0)] {}"


def test_mappings_render_key_value_pairs() -> None:
    assert inspect_value({"a": 1, "b": 2}) == '[dict(2)] {\n  "a": 1,\n  "b": 2\n}'


def test_weak_collections_are_opaque() -> None:
    assert inspect_value(weakref.WeakSet()) == "[WeakSet (items unknown)]"
    assert inspect_value(weakref.WeakKeyDictionary()) == "[WeakKeyDictionary (items unknown)]"
    assert inspect_value(weakref.WeakValueDictionary()) == "[WeakValueDictionary (items unknown)]"


def test_errors_render_message_and_own_attributes() -> None:
    error = ValueError("oops")
    error.foo = 42  # type: ignore[attr-defined]

    assert inspect_value(error) == "[ValueError: oops] {\n  foo: 42\n}"
    assert inspect_value(ValueError()) == "[ValueError]"
    assert inspect_value(ValidationError("bad")) == "[ValidationError: bad]"


def test_objects_render_sorted_own_attributes() -> None:
    assert inspect_value(Point()) == "[Point] {\n  x: 1,\n  y: 2\n}"
    assert inspect_value(Empty()) == "[Empty] {}"


def test_failing_attribute_reads_render_placeholder() -> None:
    assert inspect_value(Slotted()) == f"[Slotted] {{\n  a: 1,\n  b: {GETTER_FAILED}\n}}"


def test_nested_structures_are_indented_per_level() -> None:
    complex_value = {"x": [1, {"y": {3}}]}

    assert inspect_value(complex_value) == "\n".join(
        [
            "[dict(1)] {",
            '  "x": [list(2)] [',
            "    1,",
            "    [dict(1)] {",
            '      "y": [set(1)] {',
            "        3",
            "      }",
            "    }",
            "  ]",
            "}",
        ]
    )


def test_depth_only_indents_nested_lines() -> None:
    assert inspect_value([1], depth=1) == "[list(1)] [\n    1\n  ]"
