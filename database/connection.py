# backend/database/connection.py
import logging
from pymongo import MongoClient
from pymongo.collection import Collection
from config import settings

logger = logging.getLogger("database.connection")

# ============================================================
# 🔧 CONSTRUCTOR DE URI
# ============================================================
def build_mongo_uri(config=settings) -> str:
    if config.MONGO_URI:
        return config.MONGO_URI
    if config.MONGO_USER:
        return (
            f"mongodb://{config.MONGO_USER}:{config.MONGO_PASSWORD}"
            f"@{config.MONGO_HOST}:{config.MONGO_PORT}"
        )
    return f"mongodb://{config.MONGO_HOST}:{config.MONGO_PORT}"

# ============================================================
# 🔌 CLIENTE
# ============================================================
def get_client(config=settings) -> MongoClient:
    """Abre un cliente con pool. El driver conecta recién en la primera operación."""
    try:
        client = MongoClient(
            build_mongo_uri(config),
            serverSelectionTimeoutMS=config.MONGO_TIMEOUT_MS,
        )
        logger.info(f"✅ Cliente Mongo listo para {config.MONGO_HOST}:{config.MONGO_PORT}")
        return client
    except Exception as e:
        logger.error(f"❌ Error conectando a MongoDB: {e}")
        raise e

# ============================================================
# 👥 COLECCIÓN DE USUARIOS
# ============================================================
def get_users_collection(client: MongoClient, config=settings) -> Collection:
    db = client[config.MONGO_DB]
    logger.info(f"✅ Usando colección {config.MONGO_DB}.{config.MONGO_COLLECTION}")
    return db[config.MONGO_COLLECTION]
