from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.schemas import PipelineStatusResponse, RecordsResponse
from pricelist.config import FLAT_RATE_SOURCE, SheetSource
from pricelist.pipeline import load_price_list, run_price_list_pipeline


app = FastAPI(title="Diamond Price List API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

SOURCE: SheetSource = FLAT_RATE_SOURCE


@app.get("/records", response_model=RecordsResponse)
def records():
    # Empty list is the only failure signal here; /records/status has the detail.
    rows = load_price_list(SOURCE)
    return {"layout": SOURCE.layout, "count": len(rows), "records": [r.to_dict() for r in rows]}


@app.get("/records/status", response_model=PipelineStatusResponse)
def records_status():
    try:
        result = run_price_list_pipeline(SOURCE)
        return {
            "ok": result.ok,
            "layout": SOURCE.layout,
            "count": len(result.records),
            "error_kind": result.error_kind,
            "message": str(result.error) if result.error is not None else None,
        }
    except Exception as exc:
        logger.exception("records_status failed")
        return JSONResponse(status_code=500, content={"error": str(exc), "type": type(exc).__name__})
