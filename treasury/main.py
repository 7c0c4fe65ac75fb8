from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from treasury.api.routers.auth import router as auth_router
from treasury.api.routers.users import router as users_router
from treasury.api.routers.transactions import router as transactions_router
from treasury.api.routers.registrations import router as registrations_router
from treasury.api.routers.payments import router as payments_router
from treasury.api.routers.prebendas import router as prebendas_router
from treasury.api.routers.pastor_registrations import router as pastor_registrations_router
from treasury.api.routers.obreiro_registrations import router as obreiro_registrations_router
from treasury.api.routers.document_ranges import router as document_ranges_router
from treasury.api.routers.financial_goals import router as financial_goals_router
from treasury.api.routers.reports import router as reports_router
from treasury.core.config import settings
from treasury.core.flow_logging import configure_logging

configure_logging()

app = FastAPI(title="CEDADER Treasury API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(transactions_router, prefix="/api")
app.include_router(registrations_router, prefix="/api")
app.include_router(payments_router, prefix="/api")
app.include_router(prebendas_router, prefix="/api")
app.include_router(pastor_registrations_router, prefix="/api")
app.include_router(obreiro_registrations_router, prefix="/api")
app.include_router(document_ranges_router, prefix="/api")
app.include_router(financial_goals_router, prefix="/api")
app.include_router(reports_router, prefix="/api")


@app.get("/api/health")
def health():
    return {"status": "up"}
