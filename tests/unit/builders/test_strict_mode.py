"""Unit tests for strict required-field enforcement."""
from __future__ import annotations

import pytest

from ease.builders import Builder, DynamicBuilder
from ease.config import BuilderSettings
from ease.errors import MissingOverrideForRequiredFieldError

from _samples import Member, User


class RequiredEmailBuilder(Builder[User]):
    required = frozenset({"email"})

    def that_is_valid(self) -> RequiredEmailBuilder:
        return self.with_(lambda u: u.email, "valid@example.com")


class TestStrictMode:
    def test_permissive_by_default(self) -> None:
        assert RequiredEmailBuilder().build() == User()

    def test_strict_builder_reports_missing_fields(self) -> None:
        builder = DynamicBuilder(User, strict=True, required=[lambda u: u.email, "full_name"])
        with pytest.raises(MissingOverrideForRequiredFieldError) as info:
            builder.build()
        assert info.value.fields == ["email", "full_name"]
        assert "email, full_name" in info.value.message

    def test_strict_builder_passes_when_fields_present(self) -> None:
        user = RequiredEmailBuilder(strict=True).that_is_valid().build()
        assert user.email == "valid@example.com"

    def test_ignore_makes_required_field_missing_again(self) -> None:
        builder = RequiredEmailBuilder(strict=True).that_is_valid().ignore(lambda u: u.email)
        with pytest.raises(MissingOverrideForRequiredFieldError):
            builder.build()

    def test_explicit_none_counts_as_override(self) -> None:
        assert RequiredEmailBuilder(strict=True).with_("email", None).build().email is None

    def test_global_strict_setting(self, strict_builders: BuilderSettings) -> None:
        assert strict_builders.strict is True
        with pytest.raises(MissingOverrideForRequiredFieldError):
            RequiredEmailBuilder().build()

    def test_builder_argument_beats_global_setting(
        self, strict_builders: BuilderSettings  # noqa: ARG002
    ) -> None:
        assert RequiredEmailBuilder(strict=False).build() == User()

    def test_checked_before_custom_factory(self) -> None:
        def factory(builder: Builder[Member]) -> Member:
            raise AssertionError("factory must not run")

        builder = DynamicBuilder(Member, factory=factory, strict=True, required=["full_name"])
        with pytest.raises(MissingOverrideForRequiredFieldError):
            builder.build()
