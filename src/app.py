"""Order management FastAPI application.

Processes commands synchronously via HTTP. Every request under ``/api`` runs
inside the ``oms`` domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8080 --reload
"""

import os

from oms.domain import oms

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - unset/"test" → in-memory database
#   - "production" → PostgreSQL at DATABASE_URL
oms.init()

from oms.api.application import create_app  # noqa: E402
from oms.utils.seed import seed_demo_data  # noqa: E402

# Mirrors `manage.py seed` for throwaway environments such as the in-memory default
if os.getenv("SEED_DEMO_DATA", "").lower() in ("1", "true", "yes"):
    with oms.domain_context():
        seed_demo_data()

app = create_app(oms)
