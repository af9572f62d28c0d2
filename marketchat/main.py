"""
Production ASGI entry point: Prisma-backed container + FastAPI app.

    uvicorn marketchat.main:app --host 0.0.0.0 --port 8080
"""

from marketchat.fastapi_app import create_fastapi_app
from marketchat.setup.ioc.container import create_container
from marketchat.setup.ioc.persistence import PersistenceProvider

# Create container at module level (before app starts)
# Dishka adds middleware, which must happen before the app starts
container = create_container(PersistenceProvider())

app = create_fastapi_app(container)
