import os

# Must be set before app.core.config is imported anywhere.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BOOTSTRAP_DEFAULT_ADMIN"] = "false"
os.environ["APP_ENV"] = "dev"
