"""
Application configuration read from the environment (.env is loaded first)
"""
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'change-me-in-production')
    PORT = int(os.getenv('PORT', 5000))
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Remote areas API; empty means local data only
    LAUNDRY_API_BASE_URL = os.getenv('LAUNDRY_API_BASE_URL') or None
    API_TIMEOUT = float(os.getenv('API_TIMEOUT', 5))

    DELIVERY_FEE = float(os.getenv('DELIVERY_FEE', 10))
    DELIVERY_SIMULATED_DELAY = float(os.getenv('DELIVERY_SIMULATED_DELAY', 0))

    DEFAULT_LANGUAGE = os.getenv('DEFAULT_LANGUAGE', 'en')


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    LAUNDRY_API_BASE_URL = None
    DELIVERY_SIMULATED_DELAY = 0.0
