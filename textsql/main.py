import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from textsql import llm
from textsql.config import settings
from textsql.datasets import EXAMPLE_PROMPTS
from textsql.models import ChartRequest, ChartSpec, QueryRequest, QueryResponse
from textsql.workbench import Workbench

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

_STATIC_DIR = Path(settings.static_dir)
if not _STATIC_DIR.is_absolute():
    _STATIC_DIR = Path(__file__).resolve().parent.parent / _STATIC_DIR

if not settings.genai.configured:
    log.warning(
        "TEXTSQL_GENAI__API_KEY is not set. SQL generation will return "
        "offline placeholder queries."
    )

workbench = Workbench()

app = FastAPI(title="textsql", version="0.1.0")


@app.get("/api/health")
async def health():
    return {"status": "ok", "llm_configured": settings.genai.configured}


@app.get("/api/examples")
async def examples():
    return EXAMPLE_PROMPTS


@app.post("/api/query", response_model=QueryResponse)
async def query(req: QueryRequest):
    return await workbench.submit(req.prompt, req.chart_kind)


@app.get("/api/state", response_model=QueryResponse)
async def state():
    return workbench.response()


@app.put("/api/chart", response_model=ChartSpec)
async def set_chart(req: ChartRequest):
    chart = workbench.set_chart_kind(req.kind)
    if chart is None:
        raise HTTPException(status_code=404, detail="No query has been submitted yet")
    return chart


@app.get("/api/settings")
async def get_settings():
    return {
        "current_model": llm.get_model(),
        "available_models": llm.AVAILABLE_MODELS,
    }


class SetModelRequest(BaseModel):
    model: str


@app.put("/api/settings/model")
async def set_model(req: SetModelRequest):
    llm.set_model(req.model)
    return {"current_model": llm.get_model()}


# Serve index.html at root (no-cache so browser always gets latest)
@app.get("/")
async def index():
    return FileResponse(
        _STATIC_DIR / "index.html",
        headers={"Cache-Control": "no-cache"},
    )


app.mount("/static", StaticFiles(directory=_STATIC_DIR), name="static")
