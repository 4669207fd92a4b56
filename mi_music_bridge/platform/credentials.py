"""
CredentialPair — the normalized ``getUmengConfig`` response.

``project_credentials`` is the one piece of logic both platforms share: it
renames the platform's keys onto ``appKey``/``channel`` and defaults anything
missing to the empty string.
"""

from typing import Mapping, Optional

from pydantic import BaseModel


class CredentialPair(BaseModel):
    """Umeng app key and distribution channel.

    An empty string means "not configured" for that field.
    """

    appKey: str = ""
    channel: str = ""

    def to_payload(self) -> dict[str, str]:
        return {"appKey": self.appKey, "channel": self.channel}


def project_credentials(
    raw: Optional[Mapping[str, str]],
    app_key_field: str,
    channel_field: str,
) -> CredentialPair:
    """Project a parsed config resource onto a ``CredentialPair``.

    ``raw=None`` (resource absent or unparsable), a missing key and an empty
    value all produce ``""`` for the affected field.
    """
    if raw is None:
        return CredentialPair()
    return CredentialPair(
        appKey=raw.get(app_key_field) or "",
        channel=raw.get(channel_field) or "",
    )
