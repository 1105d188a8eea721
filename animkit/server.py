"""REST API server."""
from __future__ import annotations

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from animkit.animation.binder import PreviewBinder
from animkit.animation.element import StyledElement
from animkit.animation.keyframes import keyframes_name
from animkit.animation.preview import render_preview_html
from animkit.animation.schema import AnimationConfig
from animkit.renderers.router import BACKENDS, render_export
from animkit.schemas import BindingResponse, ExportResponse, HealthResponse

app = FastAPI(title="animkit")


@app.get("/api/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", backends=sorted(BACKENDS))


@app.post("/api/export/{backend}", response_model=ExportResponse)
def export_code(backend: str, config: AnimationConfig) -> ExportResponse:
    result = render_export(config, backend)
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.error)
    return ExportResponse(backend=result.backend, code=result.text)


@app.post("/api/preview", response_class=HTMLResponse)
def preview(config: AnimationConfig) -> HTMLResponse:
    return HTMLResponse(render_preview_html(config))


@app.post("/api/bindings", response_model=BindingResponse)
def bindings(config: AnimationConfig) -> BindingResponse:
    element = StyledElement()
    with PreviewBinder() as binder:
        binder.bind(config, element)
        return BindingResponse(
            state=binder.state.value,
            class_token=binder.class_token,
            keyframes=keyframes_name(config),
            properties=element.style,
        )
