from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from config import settings
from database.connection import get_client, get_users_collection
from repositories.user_repository import UserRepository
from auth.exceptions import AccountError
from auth.routes import router as auth_router
import logging
import uvicorn

# =====================================================
# * Configuración de Logging global
# =====================================================
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)
logger = logging.getLogger("main")

# =====================================================
# * Ciclo de vida de la Base de Datos
# =====================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    client = get_client(settings)
    repo = UserRepository(get_users_collection(client, settings), settings.HASH_SECRET)
    repo.ensure_indexes()
    app.state.users = repo
    logger.info("✅ Base de datos inicializada correctamente y aplicación lista.")
    yield
    client.close()
    logger.info("🛑 Cliente Mongo cerrado.")

# =====================================================
# * Inicialización de la aplicación
# =====================================================
app = FastAPI(
    title=f"{settings.PROJECT_NAME} Users",
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =====================================================
# * Errores: mensaje en texto plano, status según el tipo
# =====================================================
@app.exception_handler(AccountError)
async def account_error_handler(request: Request, exc: AccountError):
    logger.info(f"↩️ {request.url.path} -> {exc.status_code} {exc.kind}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)

# =====================================================
# * Registro de Rutas
# =====================================================
app.include_router(auth_router, tags=["Users"])

@app.get("/", summary="Ruta raíz del backend")
def root():
    return {
        "message": f"🚀 {settings.PROJECT_NAME} backend activo",
        "version": settings.VERSION,
        "env": settings.ENV
    }

logger.info(f"🌍 {settings.PROJECT_NAME} backend iniciado en modo '{settings.ENV}'.")

if __name__ == "__main__":
    logger.info(f"🎧 Escuchando en el puerto {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
