import logging

from fastapi import FastAPI

from admissions.api.applications import router as applications_router
from admissions.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("user_id", "draft_id", "application_id", "document", "step", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Common Application", version="1.0.0")

app.include_router(applications_router, prefix="/api", tags=["applications"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
