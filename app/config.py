import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = BASE_DIR / "data"
    DATABASE_PATH = Path(os.getenv("DB_FILE") or DATA_DIR / "db.json")
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_TEXT_MODEL = os.getenv("GEMINI_TEXT_MODEL", "gemini-2.5-flash")


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False


class TestConfig(Config):
    TESTING = True
    GEMINI_API_KEY = "test_gemini_key"
    GEMINI_TEXT_MODEL = "gemini-test-model"
