from .json_credential_store import JsonCredentialStore

__all__ = ["JsonCredentialStore"]
