from .log_in import LogInUseCase
from .sign_up import SignUpUseCase

__all__ = ["LogInUseCase", "SignUpUseCase"]
