"""
Tests for AuthenticateAdminUseCase.
"""

import pytest

from vcfcollector.domain.entities.outcome import ResultKind
from vcfcollector.use_cases.authenticate_admin import AuthenticateAdminUseCase


@pytest.fixture
def use_case():
    return AuthenticateAdminUseCase(admin_password="sila0022")


class TestAuthenticateAdmin:
    def test_correct_password(self, use_case):
        result = use_case.execute("sila0022")
        assert result.success is True
        assert result.kind == ResultKind.OK
        assert result.token.startswith("admin_")

    @pytest.mark.parametrize("password", ["", "SILA0022", "sila0022 ", "wrong", None])
    def test_anything_else_is_unauthorized(self, use_case, password):
        result = use_case.execute(password)
        assert result.kind == ResultKind.UNAUTHORIZED
        assert result.token is None
        assert result.message == "Invalid password"

    def test_tokens_are_unique(self, use_case):
        tokens = {use_case.execute("sila0022").token for _ in range(20)}
        assert len(tokens) == 20

    def test_uses_configured_secret(self):
        use_case = AuthenticateAdminUseCase(admin_password="other-secret")
        assert use_case.execute("other-secret").success is True
        assert use_case.execute("sila0022").success is False
