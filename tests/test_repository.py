"""Tests for the read-only content repository."""

from __future__ import annotations

import pytest

from portfolio_site.data.repository import ContentRepository, StaticContentRepository
from portfolio_site.exceptions import NotFoundError
from portfolio_site.models.content import Experience


class TestStaticContentRepository:
    def test_satisfies_protocol(self, repository: StaticContentRepository) -> None:
        repo: ContentRepository = repository
        assert repo.list_projects()

    @pytest.mark.parametrize(
        "method", ["list_experience", "list_projects", "list_education"]
    )
    def test_ids_unique(self, repository: StaticContentRepository, method: str) -> None:
        ids = [item.id for item in getattr(repository, method)()]
        assert ids
        assert len(ids) == len(set(ids))

    def test_lists_are_copies(self, repository: StaticContentRepository) -> None:
        repository.list_experience().clear()
        assert repository.list_experience()

    def test_find_experience(self, repository: StaticContentRepository) -> None:
        assert repository.find_experience_by_id(1).position == "Cloud Engineer Principal"

    def test_find_project(self, repository: StaticContentRepository) -> None:
        assert repository.find_project_by_id(3).demo_url == "/soccer"

    def test_find_education(self, repository: StaticContentRepository) -> None:
        education = repository.find_education_by_id(1)
        assert education.credentials

    def test_find_skill_stamps_category(self, repository: StaticContentRepository) -> None:
        assert repository.find_skill_by_id(18).category == "Containers & Orchestration"

    @pytest.mark.parametrize(
        "method",
        [
            "find_experience_by_id",
            "find_skill_by_id",
            "find_project_by_id",
            "find_education_by_id",
        ],
    )
    def test_missing_id_raises(self, repository: StaticContentRepository, method: str) -> None:
        with pytest.raises(NotFoundError):
            getattr(repository, method)(424242)

    def test_featured_skills(self, repository: StaticContentRepository) -> None:
        featured = repository.featured_skills()
        assert featured
        assert all(skill.featured and skill.category for skill in featured)

    def test_custom_providers(self) -> None:
        entry = Experience(
            id=10, position="Engineer", company="Acme", duration="2024", responsibilities="Ops"
        )
        repo = StaticContentRepository(
            experience=lambda: [entry],
            skill_categories=list,
            projects=list,
            education=list,
        )
        assert repo.list_experience() == [entry]
        assert repo.list_projects() == []
        assert repo.featured_skills() == []


class TestExperienceRecord:
    def test_skill_area_list(self, repository: StaticContentRepository) -> None:
        experience = repository.find_experience_by_id(2)
        assert experience.skill_area_list == ["systems", "automation", "security", "scripting"]

    def test_sides_alternate(self, repository: StaticContentRepository) -> None:
        sides = [e.side for e in repository.list_experience()]
        assert all(a != b for a, b in zip(sides, sides[1:], strict=False))
