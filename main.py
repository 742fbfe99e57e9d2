from fastapi import FastAPI

from db import init_db
from routes.forecast import router as forecast_router
from routes.transactions import router as transactions_router

app = FastAPI(title="Balance Forecast")
app.include_router(transactions_router)
app.include_router(forecast_router)


@app.on_event("startup")
def startup():
    init_db()


@app.get("/health")
def health():
    return {"status": "ok"}
