"""Centralized branding constants — single source of truth for version."""


class AppBranding:
    """Library identity constants."""

    APP_NAME = "AppFresh"
    VERSION = "1.0.0"

    @classmethod
    def user_agent(cls) -> str:
        return f"{cls.APP_NAME}/{cls.VERSION}"
