"""
User info record and its on-disk TOML encoding.
"""
import tomllib
from pathlib import Path
from typing import Dict, Optional

import tomli_w

from frauth.crypto import Keypair
from frauth.errors import EncodingError

USER_INFO_HEADER = """\
# User information, generated by frauth.
#
# THIS FILE CONTAINS SECRET DATA! You should never post or share it anywhere!
#
# Anyone holding this file can sign messages as you.

"""


class UserInfo:
    """Name, public identities, optional status and the signing keypair."""
    def __init__(self, name: str, identities: Dict[str, str], status: Optional[str], keypair: Keypair):
        self.name = name
        self.identities = identities
        self.status = status
        self.keypair = keypair

    def to_dict(self) -> dict:
        data = {'name': self.name}
        # TOML has no null; absent key means no status
        if self.status is not None:
            data['status'] = self.status
        data['identities'] = dict(self.identities)
        data['keypair'] = self.keypair.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'UserInfo':
        try:
            name = data['name']
            identities = data.get('identities', {})
            status = data.get('status')
            keypair = Keypair.from_dict(data['keypair'])
        except (KeyError, ValueError) as e:
            raise EncodingError(f"Invalid user info: {e}") from e
        if not isinstance(name, str) or not isinstance(identities, dict):
            raise EncodingError("Invalid user info: wrong field types")
        if not all(isinstance(v, str) for v in identities.values()):
            raise EncodingError("Invalid user info: identity ids must be strings")
        if status is not None and not isinstance(status, str):
            raise EncodingError("Invalid user info: status must be a string")
        return cls(name, dict(identities), status, keypair)

    def __repr__(self) -> str:
        return f"UserInfo(name={self.name!r}, identities={self.identities!r}, status={self.status!r})"


def encode_user_info(info: UserInfo) -> str:
    """Header banner followed by the TOML document."""
    try:
        body = tomli_w.dumps(info.to_dict())
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Failed to encode user info: {e}") from e
    return USER_INFO_HEADER + body


def decode_user_info(text: str) -> UserInfo:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise EncodingError(f"Failed to decode user info: {e}") from e
    return UserInfo.from_dict(data)


def load_user_info(path: Path) -> UserInfo:
    with open(path, 'r', encoding='utf-8') as f:
        return decode_user_info(f.read())
