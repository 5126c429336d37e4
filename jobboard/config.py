from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Required from environment (.env / deployment secrets)
    database_url: str
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 30  # 30 days
    app_env: str = "development"  # development, staging, production

    # CORS origins as comma-separated values
    # Example: "https://jobs.example.com,https://admin.example.com"
    cors_allow_origins: str = "http://localhost:5173,http://localhost:5174,http://localhost:5175"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Session cookie carrying the access token (Bearer header is also accepted)
    auth_cookie_name: str = "token"

    # Google sign-in
    google_client_id: str = ""
    google_tokeninfo_url: str = "https://oauth2.googleapis.com/tokeninfo"

    # Transactional email (Resend HTTP API)
    resend_api_key: str = ""
    send_email_from: str = ""
    email_api_url: str = "https://api.resend.com/emails"

    # Company logo lookup
    logo_lookup_url: str = "https://logo.clearbit.com/{domain}.com"
    default_logo_url: str = "https://cdn-icons-png.flaticon.com/512/3061/3061341.png"

    # Outbound HTTP calls (logo, Google, email)
    http_timeout_seconds: float = 5.0

    # Resume uploads
    upload_dir: str = "uploads"
    max_resume_upload_mb: int = 5
    allowed_resume_extensions: str = ".pdf,.doc,.docx"

    # New postings stay hidden until an admin approves them unless this is on.
    auto_approve_jobs: bool = False

    # Request guards
    rate_limit_auth_per_min: int = 20
    rate_limit_apply_per_min: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
