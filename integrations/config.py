from dataclasses import dataclass

from django.conf import settings


def normalize_api_base(value):
    """
    Strip trailing slashes from a configured base URL.

    Unset or blank values become "", meaning the backend shares the site's origin.
    """
    if not value or not isinstance(value, str):
        return ""
    return value.strip().rstrip("/")


@dataclass(frozen=True)
class ApiConfig:
    """Connection options for the students REST backend."""

    api_base: str = ""
    timeout_seconds: float = 10
    verify_ssl: bool = True

    @classmethod
    def from_settings(cls, **overrides):
        cfg = getattr(settings, "STUDENTS_API", {})
        values = {
            "api_base": normalize_api_base(cfg.get("API_BASE")),
            "timeout_seconds": cfg.get("TIMEOUT_SECONDS", 10),
            "verify_ssl": cfg.get("VERIFY_SSL", True),
        }
        values.update(overrides)
        values["api_base"] = normalize_api_base(values["api_base"])
        return cls(**values)

    @property
    def is_same_origin(self):
        return self.api_base == ""
