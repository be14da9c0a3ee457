import asyncio

import pytest

from textsql import datasets, generator
from textsql import workbench as workbench_mod
from textsql.colors import ColorProvider
from textsql.generator import GENERATION_FAILED_MESSAGE
from textsql.workbench import Workbench


@pytest.fixture
def wb():
    return Workbench(colors=ColorProvider(seed=1))


async def test_submit_stores_sql_and_dataset(fake_llm, wb):
    fake_llm.reply = "SELECT name FROM products LIMIT 5;"
    resp = await wb.submit("Show me the top 5 products with the highest sales")
    assert resp.accepted
    assert resp.sql == "SELECT name FROM products LIMIT 5;"
    assert resp.error == ""
    assert resp.rows == datasets.TOP_PRODUCTS.rows
    assert resp.chart.title == "Sales by Customer"
    assert resp.summary.total_sales == 42000
    assert resp.model == "gemini-2.0-flash"
    assert not resp.busy


async def test_generation_failure_keeps_dataset(fake_llm, wb):
    fake_llm.exc = ConnectionError("down")
    resp = await wb.submit("Find all users who signed up in the last 30 days")
    assert resp.sql == ""
    assert resp.error == GENERATION_FAILED_MESSAGE
    assert resp.rows[0][1] == "Emma Wilson"


async def test_next_submission_replaces_state(fake_llm, wb):
    fake_llm.exc = ConnectionError("down")
    await wb.submit("last month")
    fake_llm.exc = None
    fake_llm.reply = "SELECT 2;"
    resp = await wb.submit("hello")
    assert resp.error == ""
    assert resp.sql == "SELECT 2;"
    assert resp.rows[0][1] == "John Doe"


async def test_failure_after_success_clears_sql(fake_llm, wb):
    fake_llm.reply = "SELECT 1;"
    await wb.submit("top 5 products")
    fake_llm.exc = ConnectionError("down")
    resp = await wb.submit("last month")
    assert resp.sql == ""
    assert resp.error == GENERATION_FAILED_MESSAGE
    assert resp.rows[0][1] == "Emma Wilson"


@pytest.mark.parametrize("blank", ["", "   ", "\n\t"])
async def test_blank_prompt_runs_nothing(monkeypatch, fake_llm, wb, blank):
    await wb.submit("top 5 products")
    before = wb.current

    def no_dataset(prompt):
        raise AssertionError("interpreter should not run")

    monkeypatch.setattr(workbench_mod, "select_dataset", no_dataset)
    resp = await wb.submit(blank)

    assert not resp.accepted
    assert wb.current is before
    assert resp.prompt == "top 5 products"
    assert len(fake_llm.calls) == 1


async def test_blank_prompt_on_fresh_workbench(fake_llm, wb):
    resp = await wb.submit("   ")
    assert not resp.accepted
    assert resp.rows == []
    assert resp.chart is None
    assert resp.summary is None
    assert fake_llm.calls == []


async def test_overlapping_submissions_are_serialized(monkeypatch, wb):
    started = []
    gate = asyncio.Event()

    async def slow_generate(prompt):
        started.append(prompt)
        if prompt == "first":
            await gate.wait()
        return f"SQL for {prompt}"

    monkeypatch.setattr(generator, "generate_query", slow_generate)

    first = asyncio.create_task(wb.submit("first"))
    await asyncio.sleep(0)
    assert wb.busy
    second = asyncio.create_task(wb.submit("second"))
    await asyncio.sleep(0)
    assert started == ["first"]

    gate.set()
    r1, r2 = await asyncio.gather(first, second)
    assert started == ["first", "second"]
    assert r1.sql == "SQL for first"
    assert r2.sql == "SQL for second"
    assert wb.current.prompt == "second"
    assert not wb.busy


async def test_chart_kind_carries_over_and_switches(fake_llm, wb):
    assert wb.set_chart_kind("pie") is None

    await wb.submit("customers", chart_kind="pie")
    chart = wb.chart()
    assert chart.kind == "pie"
    assert len(chart.background_color) == 5

    line = wb.set_chart_kind("line")
    assert line.kind == "line"
    assert line.labels == chart.labels

    resp = await wb.submit("top 5 products")
    assert resp.chart.kind == "line"
