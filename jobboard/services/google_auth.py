"""Verify Google Sign-In ID tokens against Google's tokeninfo endpoint."""

import logging
from dataclasses import dataclass

import requests

from jobboard.config import settings

logger = logging.getLogger(__name__)


class GoogleAuthError(Exception):
    pass


@dataclass(frozen=True)
class GoogleIdentity:
    email: str
    name: str | None
    picture: str | None


def verify_id_token(id_token: str) -> GoogleIdentity:
    if not id_token:
        raise GoogleAuthError("missing id token")
    try:
        r = requests.get(
            settings.google_tokeninfo_url,
            params={"id_token": id_token},
            timeout=settings.http_timeout_seconds,
        )
    except requests.RequestException as e:
        raise GoogleAuthError("tokeninfo request failed") from e
    if r.status_code != 200:
        raise GoogleAuthError(f"tokeninfo rejected token: http_{r.status_code}")

    try:
        payload = r.json()
    except ValueError as e:
        raise GoogleAuthError("tokeninfo returned a non-JSON body") from e
    if settings.google_client_id and payload.get("aud") != settings.google_client_id:
        raise GoogleAuthError("audience mismatch")
    email = payload.get("email")
    if not email:
        raise GoogleAuthError("token has no email")
    if str(payload.get("email_verified", "true")).lower() != "true":
        raise GoogleAuthError("email not verified")
    return GoogleIdentity(email=email, name=payload.get("name"), picture=payload.get("picture"))
