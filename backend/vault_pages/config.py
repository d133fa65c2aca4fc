import os
from dotenv import load_dotenv

load_dotenv()


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Status labels shown in the vault; keys are stored on the page
    PAGE_STATUSES = {
        "draft": "Draft",
        "published": "Published",
        "archived": "Archived",
    }
    DEFAULT_PAGE_STATUS = "draft"

    # role -> grants, see vault_pages.security.guard
    VAULT_PERMISSIONS = {
        "admin": ["*"],
        "editor": ["view", "add", "update", "viewRevision", "applyRevision", "delete:own"],
        "author": ["view", "add", "viewRevision", "update:own", "applyRevision:own", "delete:own"],
        "viewer": ["view", "viewRevision"],
    }

    VAULT_PER_PAGE = int(os.getenv("VAULT_PER_PAGE", 25))
    VAULT_MAX_PER_PAGE = 100

    # Message overrides for vault_pages.utils.i18n.say
    VAULT_MESSAGES = {}


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///vault_pages.db")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "testing-secret"
    JWT_SECRET_KEY = "testing-jwt-secret-with-enough-length"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    VAULT_PER_PAGE = 10


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
