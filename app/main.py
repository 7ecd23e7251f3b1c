import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.middleware import register_middleware
from app.db.session import engine
from app.api.routes.system import router as system_router
from app.api.routes.auth import router as auth_router
from app.api.routes.user import router as user_router
from app.api.routes.expense import router as expense_router
from app.api.routes.settlement import router as settlement_router
from app.api.routes.balances import router as balance_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Backend server running on port %s (%s)", settings.PORT, settings.NODE_ENV)
    yield
    await engine.dispose()

app = FastAPI(title="RoomMate Expense API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CLIENT_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_middleware(app)
register_exception_handlers(app)

@app.get("/")
async def root():
    return {"message": "RoomMate Expense API is live"}

app.include_router(system_router, tags=["health"])
app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
app.include_router(user_router, prefix="/api/users", tags=["users"])
app.include_router(expense_router, prefix="/api/expenses", tags=["expenses"])
app.include_router(settlement_router, prefix="/api/settlements", tags=["settlements"])
app.include_router(balance_router, prefix="/api/balance", tags=["balance"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
