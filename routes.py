# routes.py
from fastapi import FastAPI
from controller.namespace_controller import namespace_router
from controller.page_controller import page_router
from controller.session_controller import session_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here. The page router must stay last."""
    app.include_router(session_router)
    app.include_router(namespace_router)
    app.include_router(page_router)
