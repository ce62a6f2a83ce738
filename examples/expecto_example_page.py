"""Drives a page handle from a test.

Needs network access to www.google.com.
"""

from expecto import after_all, before_all, describe, expect, test
from expecto.page import HttpPage, PageDocument

with describe("Google"):
    page = HttpPage(timeout=10.0)

    @before_all(timeout=15.0)
    async def open_page():
        await page.goto("https://www.google.com/")

    @after_all
    async def close_page():
        await page.end()

    @test('should display "google" text on page', timeout=15.0)
    async def shows_google():
        expect.assertions(1)
        text = await page.evaluate(lambda doc: doc.text)
        expect(text).to_contain("Google")

    @test("the page was served successfully")
    async def served_ok():
        await expect(page.evaluate(lambda doc: doc.status_code)).resolves.to_be(200)


def title(doc: PageDocument) -> str:
    start = doc.text.find("<title>") + len("<title>")
    return doc.text[start : doc.text.find("</title>")]


@test("title comes from the same document", timeout=15.0)
async def page_title():
    async with HttpPage() as fresh:
        await fresh.goto("https://www.google.com/")
        await expect(fresh.evaluate(title)).resolves.to_match("Google")
