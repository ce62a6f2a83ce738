"""Demonstrates the three ways a test can finish.

- a ``done`` parameter: the test ends when ``done()`` is called
- an ``async def`` body: the test ends when the coroutine settles
- a plain body returning an awaitable: the awaitable is waited for
"""

import asyncio

from expecto import expect, test


def fetch_data(callback):
    return callback("peanut butter")


async def fetch_data_resolve() -> str:
    await asyncio.sleep(0.25)
    return "peanut butter"


async def fetch_data_error() -> str:
    raise ValueError("error")


async def fetch_data_resolve_reject(flag: bool) -> str:
    await asyncio.sleep(0.25)
    if flag:
        return "peanut butter"
    raise ValueError("error")


@test("async fetch with callback")
def fetch_with_callback(done):
    def callback(data):
        try:
            expect(data).to_be("peanut butter")
        except AssertionError as exc:
            done(exc)
        else:
            done()

    fetch_data(callback)


@test("callback from a timer")
def callback_from_timer(done):
    asyncio.get_running_loop().call_later(0.1, done)


@test("async fetch with a returned awaitable")
def fetch_returned_awaitable():
    expect.assertions(1)

    async def check():
        data = await fetch_data_resolve()
        expect(data).to_be("peanut butter")

    return check()


@test("the fetch fails with an error")
async def fetch_fails():
    expect.assertions(1)
    try:
        await fetch_data_error()
    except ValueError as error:
        expect(str(error)).to_match("error")


@test("fetch resolved", assertions=1)
def fetch_resolved():
    return expect(fetch_data_resolve_reject(True)).resolves.to_be("peanut butter")


@test("fetch rejected", assertions=1)
def fetch_rejected():
    return expect(fetch_data_resolve_reject(False)).rejects.to_match("error")


@test("the data is peanut butter")
async def data_is_peanut_butter():
    expect.assertions(1)
    await expect(fetch_data_resolve_reject(True)).resolves.to_be("peanut butter")


@test("the awaited fetch fails with an error")
async def awaited_fetch_fails():
    expect.assertions(1)
    await expect(fetch_data_resolve_reject(False)).rejects.to_match("error")


@test("slow work gets its own timeout", timeout=1.0)
async def slow_work():
    await asyncio.sleep(0.5)
    expect(True).to_be_truthy()
