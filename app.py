from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from src.app.services.text_generation.generate_prompt import PromptOptimizer
from src.app.utils import config
from src.app.utils.call_llm import OpenAICompletionProvider
from src.database.session_store import SessionStore
from src.routes.routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A missing OPENAI_API_KEY stops startup here rather than on the first request.
    provider = OpenAICompletionProvider.from_env()
    store = SessionStore()
    app.state.provider = provider
    app.state.store = store
    app.state.optimizer = PromptOptimizer(provider=provider, store=store)
    yield
    await app.state.optimizer.wait_for_pending_writes()
    store.mongo.close()


app = FastAPI(lifespan=lifespan)
# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Include routes
app.include_router(router)

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8000)
