# main.py
import sys
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent
sys.path.append(str(ROOT_DIR))

import models  # noqa: F401  (registers tables on Base.metadata)
from database import engine, Base
from routes import auth, customer, admin
from utils import get_logger

load_dotenv()

logger = get_logger("farm_to_table")

app = FastAPI(title="Farm-to-Table")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

@app.get("/", include_in_schema=False)
async def read_root():
    return {"message": "Hello World!"}

# Routers
app.include_router(auth.router)
app.include_router(customer.router)
app.include_router(admin.router)

logger.info("Farm-to-Table API ready (%d routes)", len(app.routes))
