from .auth import (
    LogInRequestDTO,
    LogInSuccessDTO,
    MessageDTO,
    ProtectedDTO,
    SignUpRequestDTO,
)
from .containers import NodeStatusDTO

__all__ = [
    "LogInRequestDTO",
    "LogInSuccessDTO",
    "MessageDTO",
    "NodeStatusDTO",
    "ProtectedDTO",
    "SignUpRequestDTO",
]
