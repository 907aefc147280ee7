"""Unit tests for BuilderFactory and the default ``A`` registry."""
from __future__ import annotations

import pytest

from ease.builders import A, Builder, BuilderFactory, DynamicBuilder
from ease.builders.factory import default_name

from _samples import Point, PointBuilder, Team, TeamBuilder, User, UserBuilder


class TestDefaultName:
    @pytest.mark.parametrize(
        ("cls_name", "expected"),
        [("UserBuilder", "user"), ("TeamMemberBuilder", "team_member"), ("Widget", "widget")],
    )
    def test_names(self, cls_name: str, expected: str) -> None:
        assert default_name(type(cls_name, (), {})) == expected


class TestRegistry:
    def test_sample_builders_registered(self) -> None:
        assert "user" in A
        assert "team" in A

    def test_attribute_access_gives_blank_builder(self) -> None:
        builder = A.user
        assert isinstance(builder, UserBuilder)
        assert builder.overrides == {}

    def test_each_access_is_a_fresh_builder(self) -> None:
        assert A.team is not A.team
        assert isinstance(A.team, TeamBuilder)

    def test_valid_by_name_and_class(self) -> None:
        assert A.valid("user").overrides.keys() == {"full_name", "email", "joined_at"}
        assert isinstance(A.valid(PointBuilder).build(), Point)

    def test_blank_by_class(self) -> None:
        assert A.blank(PointBuilder).build() == Point()

    def test_dynamic(self) -> None:
        builder = A.dynamic(Team, strict=False)
        assert isinstance(builder, DynamicBuilder)
        assert builder.that_is_valid() is builder
        assert builder.build() == Team()

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="no builder registered as 'nobody'"):
            A.nobody  # noqa: B018

    def test_private_names_not_resolved(self) -> None:
        with pytest.raises(AttributeError):
            A._secret  # noqa: B018

    def test_register_custom_name_and_unregister(self) -> None:
        factory = BuilderFactory()
        factory.register("pt")(PointBuilder)
        assert isinstance(factory.pt, PointBuilder)
        assert factory.names == ["pt"]
        factory.unregister("pt")
        assert "pt" not in factory

    def test_duplicate_name_rejected(self) -> None:
        factory = BuilderFactory()
        factory.register("u")(UserBuilder)
        factory.register("u")(UserBuilder)
        with pytest.raises(ValueError, match="already registered"):
            factory.register("u")(TeamBuilder)

    def test_register_as_decorator(self) -> None:
        factory = BuilderFactory()

        @factory.register()
        class OriginBuilder(Builder[Point]):
            def that_is_valid(self) -> OriginBuilder:
                return self

        assert isinstance(factory.origin, OriginBuilder)

    def test_dynamic_from_empty_factory(self) -> None:
        assert BuilderFactory().dynamic(User).with_("email", "e").build().email == "e"
