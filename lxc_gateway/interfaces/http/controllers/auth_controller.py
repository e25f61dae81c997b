# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from lxc_gateway.application.use_cases.users import LogInUseCase, SignUpUseCase
from lxc_gateway.infrastructure.auth import TOKEN_COOKIE, AccessGuard, current_claims
from lxc_gateway.interfaces.http.dto.auth import (
    LogInRequestDTO,
    LogInSuccessDTO,
    MessageDTO,
    ProtectedDTO,
    SignUpRequestDTO,
)
from lxc_gateway.shared.config.settings import SecurityConfig
from lxc_gateway.shared.errors.validation import raise_validation_error
from lxc_gateway.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        sign_up_use_case: SignUpUseCase,
        log_in_use_case: LogInUseCase,
        guard: AccessGuard,
        security: SecurityConfig,
    ) -> None:
        self._sign_up_use_case = sign_up_use_case
        self._log_in_use_case = log_in_use_case
        self._guard = guard
        self._security = security

    def sign_up(self) -> tuple[Response, int]:
        try:
            dto = SignUpRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._sign_up_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.signup: ok username={dto.username}")
        return jsonify(MessageDTO(message="User signed up successfully").model_dump()), 200

    def log_in(self) -> tuple[Response, int]:
        try:
            dto = LogInRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            issued = self._log_in_use_case.execute(dto.username, dto.password)
        except Exception:
            logger.warning(f"auth.login: rejected username={dto.username}")
            raise

        response = jsonify(LogInSuccessDTO(token=issued.token).model_dump())
        response.set_cookie(
            TOKEN_COOKIE,
            issued.token,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
            max_age=issued.lifetime_seconds,
        )
        logger.info(f"auth.login: ok username={dto.username}")
        return response, 200

    def protected(self) -> tuple[Response, int]:
        claims = current_claims()
        return jsonify(ProtectedDTO(user=claims.to_dict()).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/signup", view_func=self.sign_up, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.log_in, methods=["POST"])
        bp.add_url_rule(
            "/protected",
            view_func=self._guard.protect(self.protected),
            methods=["GET"],
        )
        return bp
