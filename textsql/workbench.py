"""Per-submission state shared by the HTTP endpoints.

Each accepted submission builds a fresh Submission and swaps it in whole.
Submissions are serialized: a second prompt waits for the first to finish.
"""

import asyncio
import logging
import time

from pydantic import BaseModel, ConfigDict

from textsql import generator, llm
from textsql.colors import ColorProvider
from textsql.generator import GenerationFailure
from textsql.interpreter import build_chart_spec, select_dataset, summarize
from textsql.models import ChartKind, ChartSpec, QueryResponse, QueryResult

log = logging.getLogger(__name__)


class Submission(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt: str = ""
    sql: str = ""
    error: str = ""
    result: QueryResult | None = None
    chart_kind: ChartKind = "bar"
    elapsed_s: float = 0.0
    model: str = ""


class Workbench:
    def __init__(self, colors: ColorProvider | None = None):
        self._lock = asyncio.Lock()
        self._colors = colors or ColorProvider()
        self.current = Submission()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    async def submit(self, prompt: str, chart_kind: ChartKind | None = None) -> QueryResponse:
        """Generate SQL and pick a dataset for `prompt`.

        A blank prompt runs nothing and returns the previous state with
        accepted=False.
        """
        if not prompt.strip():
            return self.response(accepted=False)

        async with self._lock:
            t0 = time.monotonic()
            kind = chart_kind or self.current.chart_kind
            result = select_dataset(prompt)
            sql = ""
            error = ""
            try:
                sql = await generator.generate_query(prompt)
            except GenerationFailure as e:
                error = e.message
            self.current = Submission(
                prompt=prompt,
                sql=sql,
                error=error,
                result=result,
                chart_kind=kind,
                elapsed_s=round(time.monotonic() - t0, 2),
                model=llm.get_model(),
            )
            log.info(
                "Submission done in %.2fs (%d rows, error=%s)",
                self.current.elapsed_s,
                len(result.rows),
                bool(error),
            )
        return self.response()

    def chart(self) -> ChartSpec | None:
        cur = self.current
        if cur.result is None:
            return None
        return build_chart_spec(cur.result, cur.prompt, cur.chart_kind, self._colors)

    def set_chart_kind(self, kind: ChartKind) -> ChartSpec | None:
        """Switch chart kind and recompute the chart. None if nothing was submitted."""
        if self.current.result is None:
            return None
        self.current = self.current.model_copy(update={"chart_kind": kind})
        return self.chart()

    def response(self, accepted: bool = True) -> QueryResponse:
        cur = self.current
        result = cur.result
        return QueryResponse(
            prompt=cur.prompt,
            accepted=accepted,
            sql=cur.sql,
            error=cur.error,
            columns=result.columns if result else [],
            rows=result.rows if result else [],
            chart=self.chart(),
            summary=summarize(result) if result else None,
            elapsed_s=cur.elapsed_s,
            model=cur.model,
            busy=self.busy,
        )
