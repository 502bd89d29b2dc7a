"""Unit tests for RepositoryIndex."""

import logging

import pytest

from repomigrate.catalog import RepositoryIndex, Service


def _service(service_id: str, *repos: str) -> Service:
    return Service(service_id=service_id, repository_urls=list(repos))


@pytest.mark.unit
class TestBuild:
    """Tests for building the index."""

    def test_every_repository_maps_to_its_service(self) -> None:
        svc1 = _service("svc1", "repoA", "repoB")
        svc2 = _service("svc2", "repoC")

        index = RepositoryIndex([svc1, svc2])

        assert len(index) == 3
        assert index.resolve("repoA") is svc1
        assert index.resolve("repoB") is svc1
        assert index.resolve("repoC") is svc2

    def test_empty_catalog_yields_empty_index(self) -> None:
        index = RepositoryIndex([])

        assert len(index) == 0

    def test_accepts_any_iterable(self) -> None:
        index = RepositoryIndex(iter([_service("svc1", "repoA")]))

        assert "repoA" in index


@pytest.mark.unit
class TestCollisions:
    """Tests for repositories declared by more than one service."""

    def test_later_service_wins(self) -> None:
        first = _service("first", "shared")
        second = _service("second", "shared")

        index = RepositoryIndex([first, second])

        assert index.resolve("shared") is second

    def test_collision_recorded(self) -> None:
        index = RepositoryIndex(
            [_service("a", "shared"), _service("b", "shared"), _service("c", "shared")]
        )

        assert index.collisions == {"shared": ["a", "b", "c"]}

    def test_collision_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="repomigrate.catalog"):
            RepositoryIndex([_service("a", "shared"), _service("b", "shared")])

        assert "shared" in caplog.text
        assert "using b" in caplog.text

    def test_repeated_repository_in_one_service_is_not_a_collision(self) -> None:
        index = RepositoryIndex([_service("a", "repoA", "repoA")])

        assert index.collisions == {}
        assert len(index) == 1


@pytest.mark.unit
class TestResolve:
    """Tests for lookups."""

    def test_lookup_is_exact(self) -> None:
        index = RepositoryIndex([_service("svc1", "git@example.com:org/repo.git")])

        assert "git@example.com:org/repo.git" in index
        assert "git@example.com:org/REPO.git" not in index
        assert "git@example.com:org/repo" not in index

    def test_unknown_repository_resolves_to_placeholder(self) -> None:
        index = RepositoryIndex([_service("svc1", "repoA")])

        service = index.resolve("unknown")

        assert service == Service.empty()
        assert service.service_id == ""
        assert service.is_empty

    def test_empty_identifier_resolves_to_placeholder(self) -> None:
        index = RepositoryIndex([_service("svc1", "repoA")])

        assert index.resolve("").is_empty

    def test_every_lookup_on_empty_index_is_placeholder(self) -> None:
        index = RepositoryIndex([])

        assert index.resolve("repoA").is_empty
        assert index.get("repoA") is None
