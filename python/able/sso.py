"""SSO sign-in URL construction."""

from typing import Optional

from .types import SsoConfig


def get_sign_in_url(redirect_url: str, config: Optional[SsoConfig] = None) -> str:
    """Build the SSO sign-in URL that returns the user to `redirect_url`."""
    if config is None:
        config = SsoConfig()
    return f"{config.base_url.rstrip('/')}/{redirect_url}"
