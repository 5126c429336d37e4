import logging
import re

import requests

from jobboard.config import settings

logger = logging.getLogger(__name__)


def company_domain(company: str) -> str:
    """Lowercased company name with whitespace removed, e.g. Acme Corp -> acmecorp."""
    return re.sub(r"\s+", "", (company or "").lower())


def resolve_logo(company: str) -> str:
    """Return the logo service URL for the company if it answers, else the default icon."""
    domain = company_domain(company)
    if not domain:
        return settings.default_logo_url
    url = settings.logo_lookup_url.format(domain=domain)
    try:
        r = requests.get(url, timeout=settings.http_timeout_seconds)
    except requests.RequestException as e:
        logger.warning("Logo lookup failed for %s: %s", domain, e)
        return settings.default_logo_url
    return url if r.ok else settings.default_logo_url
