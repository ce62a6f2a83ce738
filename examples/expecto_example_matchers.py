"""Demonstrates the expecto matchers.

Run with ``expecto test examples/expecto_example_matchers.py -v``.
"""

import re

from expecto import expect, test


def add(a: int, b: int) -> int:
    return a + b


@test("adds 1 + 2 to equal 3")
def adds():
    expect(add(1, 2)).to_be(3)


# to_be is identity for objects and value equality for numbers and strings
@test("two plus two is four")
def two_plus_two_is_four():
    expect(2 + 2).to_be(4)


# to_equal recursively checks every field of a mapping, sequence or object
@test("object assignment")
def object_assignment():
    data = {"one": 1}
    data["two"] = 2
    expect(data).to_equal({"one": 1, "two": 2})


@test("none")
def none():
    n = None
    expect(n).to_be_none()
    expect(n).to_be_defined()
    expect(n).not_.to_be_undefined()
    expect(n).not_.to_be_truthy()
    expect(n).to_be_falsy()


@test("zero")
def zero():
    z = 0
    expect(z).not_.to_be_none()
    expect(z).to_be_defined()
    expect(z).not_.to_be_undefined()
    expect(z).not_.to_be_truthy()
    expect(z).to_be_falsy()


@test("two plus two")
def two_plus_two():
    value = 2 + 2
    expect(value).to_be_greater_than(3)
    expect(value).to_be_greater_than_or_equal(3.5)
    expect(value).to_be_less_than(5)
    expect(value).to_be_less_than_or_equal(4.5)
    expect(value).to_be(4)
    expect(value).to_equal(4)


@test("adding floating point numbers")
def adding_floats():
    value = 0.1 + 0.2
    expect(value).not_.to_be(0.3)
    expect(value).to_be_close_to(0.3)


@test("there is no I in team")
def no_i_in_team():
    expect("team").not_.to_match(re.compile("I"))


@test('there is "stop" in Christoph')
def stop_in_christoph():
    expect("Christoph").to_match(re.compile("stop"))


@test("the shopping list has beer on it")
def shopping_list():
    shopping_list = [
        "diapers",
        "kleenex",
        "trash bags",
        "paper towels",
        "beer",
    ]
    expect(shopping_list).to_contain("beer")


class ConfigError(Exception):
    pass


@test("exception is thrown")
def exception_thrown():
    def fn():
        raise ConfigError()

    expect(fn).to_throw()
    expect(fn).to_throw(ConfigError)
