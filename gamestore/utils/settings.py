# gamestore/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./gamestore.db")
PORT = int(os.getenv("PORT", 3001))
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:5173")
IMAGES_DIR = os.getenv("IMAGES_DIR", os.path.join(os.getcwd(), "imagenes"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# identity: "stub" (dev, always admin) or "jwt"
AUTH_MODE = os.getenv("AUTH_MODE", "stub").strip().lower()
JWT_SECRET = os.getenv("JWT_SECRET", "dev-change-this-secret")
JWT_ALG = os.getenv("JWT_ALG", "HS256")
ADMIN_ROLE = os.getenv("ADMIN_ROLE", "ADMIN")
STUB_USER_ID = int(os.getenv("STUB_USER_ID", 1))
