import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from exprtree.cli import analyze, format_value
from exprtree.config import CalcConfig
from exprtree.errors import ExpressionError

logger = logging.getLogger(__name__)

app = FastAPI(title="exprtree viewer")

config = CalcConfig.from_env()


class AnalyzeRequest(BaseModel):
    text: str


class AnalyzeResponse(BaseModel):
    canonical: str
    tree: str
    value: Optional[int] = None
    result: str
    undefined: bool


def json_number(value: Optional[int]) -> Optional[int]:
    """None for integers past the interpreter's digit limit, which JSON cannot carry."""
    if value is None:
        return None
    try:
        str(value)
    except ValueError:
        return None
    return value


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_endpoint(request: AnalyzeRequest) -> AnalyzeResponse:
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Empty text")

    try:
        analysis = analyze(request.text, config)
    except ExpressionError as e:
        logger.info("rejected %r: %s", request.text, e)
        raise HTTPException(status_code=400, detail=str(e))

    return AnalyzeResponse(
        canonical=analysis.canonical,
        tree=analysis.diagram,
        value=json_number(analysis.value),
        result=format_value(analysis.value),
        undefined=analysis.undefined,
    )
