# config.py
import os
from dotenv import load_dotenv
load_dotenv()

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

SECRET_KEY = os.getenv("SECRET_KEY") or os.urandom(24).hex()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
QUESTIONS_PATH = os.getenv("QUESTIONS_PATH", os.path.join(PACKAGE_DIR, "data", "questions.json"))

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
