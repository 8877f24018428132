"""
Proxies to the third-party APIs the storefront relies on: the public
abandoned-animal registry, the Coupang marketplace and the OpenAI chat
completions API. Each upstream is called at most once per request and
its failures are turned into fallback payloads or localized errors.
"""

from .router import router as upstream_router  # noqa: F401
