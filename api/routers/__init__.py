"""
FastAPI routers grouped by domain (auth, talker).

Each module exposes an APIRouter that is included in the application built
by ``api.app.create_app``.
"""
