# -*- coding: utf-8 -*-
"""
router

HTTP endpoints reading and submitting admin model forms.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder

from .core.exceptions import NotFoundError, ValidationError

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .core.shell import AdminShell


class FormRouter:
    """Mount layout and model form endpoints for an admin shell."""

    def __init__(self, shell: "AdminShell") -> None:
        self.shell = shell
        self.router = APIRouter()
        self.router.get("/layout")(self.layout)
        self.router.get("/forms/{slug}/{pk}")(self.read)
        self.router.post("/forms/{slug}/{pk}")(self.submit)

    async def layout(self) -> dict[str, Any]:
        return {"title": self.shell.title, "layout": self.shell.layout.as_dict()}

    async def read(self, slug: str, pk: int) -> dict[str, Any]:
        try:
            form = await self.shell.build_form(slug, pk)
        except NotFoundError as exc:
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
        return jsonable_encoder({"schema": form.get_schema(), "values": form.get_values()})

    async def submit(
        self, slug: str, pk: int, payload: dict[str, Any] = Body(...)
    ) -> dict[str, Any]:
        try:
            form = await self.shell.submit(slug, pk, payload)
        except NotFoundError as exc:
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail={"errors": exc.errors}) from exc
        return jsonable_encoder({"values": form.get_values()})

    def mount(self, app: FastAPI) -> None:
        app.include_router(self.router, prefix=self.shell.settings.admin_path)


__all__ = ["FormRouter"]

# The End
