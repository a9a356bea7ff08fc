from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

PROCESS_PAYLOAD_VERSION = 1


@dataclass(frozen=True)
class RoleCredential:
    """Short-lived role credentials as stored in the AWS CLI cache."""
    access_key_id: str
    secret_access_key: str
    session_token: str
    expiration: str
    version: Optional[int] = None

    @classmethod
    def from_cache(cls, data: Mapping[str, Any]) -> "RoleCredential":
        """
        Build a credential from the "Credentials" object of a cache file.

        Raises:
            KeyError: If one of the credential fields is missing
        """
        return cls(
            access_key_id=data["AccessKeyId"],
            secret_access_key=data["SecretAccessKey"],
            session_token=data["SessionToken"],
            expiration=data["Expiration"],
        )

    def to_process_payload(self) -> Dict[str, Any]:
        """Return the credential_process JSON structure."""
        return {
            "Version": self.version or PROCESS_PAYLOAD_VERSION,
            "AccessKeyId": self.access_key_id,
            "SecretAccessKey": self.secret_access_key,
            "SessionToken": self.session_token,
            "Expiration": self.expiration,
        }
