import os
from dotenv import load_dotenv

load_dotenv(override=True)

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPTIMIZER_MODEL = os.getenv("OPTIMIZER_MODEL", "gpt-4o-mini")
OPTIMIZER_TEMPERATURE = float(os.getenv("OPTIMIZER_TEMPERATURE", "0.3"))
OPTIMIZER_TOP_P = float(os.getenv("OPTIMIZER_TOP_P", "1.0"))
OPTIMIZER_MAX_TOKENS = int(os.getenv("OPTIMIZER_MAX_TOKENS", "2000"))
PROVIDER_TIMEOUT_SECONDS = float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "30"))

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/")
MONGO_DB = os.getenv("MONGO_DB", "prompt_optimizer")
SESSIONS_COLLECTION = os.getenv("SESSIONS_COLLECTION", "prompt_sessions")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
