"""
Entrypoint for the development contacts server.

Run with: python main.py
Then point the client at it (default CONTACTS_API_BASE_URL=http://localhost:8000/api/)
and start the UI with: streamlit run ui_app.py
"""
import uvicorn

from config.settings import settings
from core.logging import configure_logging

if __name__ == "__main__":
    configure_logging()
    uvicorn.run(
        "microservices.contacts_service_app:app",
        host=settings.DEV_SERVER_HOST,
        port=settings.DEV_SERVER_PORT,
        reload=settings.DEBUG,
    )
