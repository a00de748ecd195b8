"""Pocketlaw dashboard FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL path.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import re
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from documents.document.seed import seed_documents
from documents.domain import documents
from identity.domain import identity
from identity.user.seed import seed_users
from shared.logging import add_context, clear_context
from tasks.domain import tasks
from tasks.task.seed import seed_tasks
from webhooks import lifespan

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
identity.init()
documents.init()
tasks.init()

for _domain, _seed in ((identity, seed_users), (documents, seed_documents), (tasks, seed_tasks)):
    with _domain.domain_context():
        _seed()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
# First match wins; document task listings belong to the tasks domain.
_ROUTE_DOMAIN_MAP = (
    (re.compile(r"^/documents/[^/]+/tasks/?$"), tasks),
    (re.compile(r"^/(auth|users)(/|$)"), identity),
    (re.compile(r"^/(documents|folders|templates)(/|$)"), documents),
    (re.compile(r"^/tasks(/|$)"), tasks),
)


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for pattern, domain in _ROUTE_DOMAIN_MAP:
        if pattern.match(path):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    lifespan=lifespan,
    title="Pocketlaw Dashboard API",
    description="Legal document repository, tasks and users, with webhook notifications",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    clear_context()
    add_context(request_id=str(uuid4()), path=request.url.path)

    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match: health check and docs pass through
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from documents.api import document_router, folder_router, template_router  # noqa: E402
from identity.api import auth_router, user_router  # noqa: E402
from tasks.api import document_task_router, task_router  # noqa: E402

app.include_router(auth_router)
app.include_router(user_router)
app.include_router(document_task_router)
app.include_router(document_router)
app.include_router(folder_router)
app.include_router(template_router)
app.include_router(task_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "identity": {"name": identity.name},
                "documents": {"name": documents.name},
                "tasks": {"name": tasks.name},
            },
        }
    )
