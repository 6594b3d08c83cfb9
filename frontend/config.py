import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    API_BASE_URL = os.environ.get('API_BASE_URL', 'http://localhost:8000')

    # Hardcoded admin credentials; compared in the browser flow only,
    # the API itself is not protected
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@example.com')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin123')
