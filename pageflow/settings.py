from typing import Any, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

CSS_RENDERED_THUMBNAIL_STYLES = ["thumbnail", "navigation_thumbnail_small", "navigation_thumbnail_large"]


class PageflowSettings(BaseSettings):
    # Attachment storage
    paperclip_filesystem_default_options: dict[str, Any] = {}
    paperclip_s3_default_options: dict[str, Any] = {}
    # Interpolated into paths of processed attachments to bust CDN caches
    paperclip_attachments_version: Optional[str] = None
    paperclip_filesystem_root: Optional[str] = None

    # Encoding
    zencoder_options: dict[str, Any] = {}
    confirm_encoding_jobs: bool = False

    # Mail
    mailer_sender: str = "pageflow@example.com"

    # Thumbnails
    thumbnail_styles: dict[str, dict[str, Any]] = {}
    css_rendered_thumbnail_styles: list[str] = CSS_RENDERED_THUMBNAIL_STYLES

    # Interface and entry languages
    available_locales: list[str] = ["de", "en"]

    model_config = SettingsConfigDict(
        env_prefix="PAGEFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )
