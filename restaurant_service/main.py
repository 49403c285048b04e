import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from .config import settings
from .database import engine, Base, SessionLocal, wait_for_db
from .api import api_router
from .exceptions import StorageError, ConstraintViolation, EmptyCartError, InvalidOrderStatus
from .seed import seed_demo_data

# Настройка логирования
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""
    # Startup
    logger.info("🚀 Starting Restaurant Service...")

    try:
        # Ждём готовности базы данных
        logger.info("Waiting for database to be ready...")
        wait_for_db(settings.db_connect_retries, settings.db_connect_delay)

        # Создаем таблицы в БД
        Base.metadata.create_all(bind=engine)
        logger.info("✅ Database tables created")

        if settings.seed_demo_data:
            db = SessionLocal()
            try:
                seed_demo_data(db)
            finally:
                db.close()

        logger.info("✅ Restaurant Service started successfully!")

    except Exception as e:
        logger.error(f"❌ Failed to start Restaurant Service: {e}")
        raise

    yield  # Приложение работает

    # Shutdown
    logger.info("🛑 Shutting down Restaurant Service...")
    engine.dispose()
    logger.info("👋 Restaurant Service shut down complete")


# Создаем FastAPI приложение
app = FastAPI(
    title=settings.app_name,
    description="Сервис заказов ресторана: меню, корзина, заказы",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan
)

# Middleware для CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)

# Подключаем роуты
app.include_router(api_router)


@app.get("/health")
def health_check():
    """Проверка здоровья сервиса"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error(f"Database check failed: {e}")
        db_status = "disconnected"

    if db_status != "connected":
        raise HTTPException(status_code=503, detail="Service unhealthy")

    return {
        "status": "healthy",
        "service": settings.app_name,
        "database": db_status,
        "version": "1.0.0"
    }


@app.get("/")
def root():
    """Корневой endpoint"""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "docs": "/docs",
            "categories": "/api/categories",
            "menu": "/api/menu-items",
            "cart": "/api/cart/{user_id}",
            "orders": "/api/orders/{user_id}"
        }
    }


# Exception handlers
@app.exception_handler(ConstraintViolation)
async def constraint_violation_handler(request: Request, exc: ConstraintViolation):
    return JSONResponse(
        status_code=409,
        content={"error": "Conflict", "detail": f"{exc.operation} conflicts with existing {exc.entity} data"}
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"❌ Storage error in {exc.operation} ({exc.entity}): {exc.cause}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": "Something went wrong"}
    )


@app.exception_handler(EmptyCartError)
async def empty_cart_handler(request: Request, exc: EmptyCartError):
    return JSONResponse(
        status_code=400,
        content={"error": "Cart is empty", "detail": str(exc)}
    )


@app.exception_handler(InvalidOrderStatus)
async def invalid_status_handler(request: Request, exc: InvalidOrderStatus):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid order status", "detail": str(exc)}
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "restaurant_service.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level="info"
    )
