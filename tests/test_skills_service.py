"""Tests for skill queries and the skills content table."""

from __future__ import annotations

import pytest

from portfolio_site.constants.proficiency import Proficiency
from portfolio_site.data.content import list_skill_categories
from portfolio_site.exceptions import NotFoundError
from portfolio_site.models.content import Skill, SkillCategory
from portfolio_site.services.skills import (
    featured_skills,
    filter_skill_categories,
    find_skill_by_id,
    iter_skills,
)


def _sample_categories() -> list[SkillCategory]:
    return [
        SkillCategory(
            name="Languages",
            skills=(
                Skill(1, "Python", "https://python.org", Proficiency.EXPERT, featured=True),
                Skill(2, "Go", "https://go.dev", Proficiency.ADVANCED),
            ),
        ),
        SkillCategory(
            name="Cloud",
            skills=(
                Skill(3, "AWS", "https://aws.amazon.com", Proficiency.EXPERT, featured=True),
                Skill(4, "GCP", "https://cloud.google.com", Proficiency.FAMILIAR),
            ),
        ),
    ]


class TestFeaturedSkills:
    def test_returns_featured_subset_in_order(self) -> None:
        result = featured_skills(_sample_categories())
        assert [s.name for s in result] == ["Python", "AWS"]

    def test_stamps_owning_category(self) -> None:
        result = featured_skills(_sample_categories())
        assert [s.category for s in result] == ["Languages", "Cloud"]

    def test_does_not_mutate_source_records(self) -> None:
        categories = _sample_categories()
        featured_skills(categories)
        assert all(s.category is None for c in categories for s in c.skills)

    def test_matches_full_data_set(self) -> None:
        categories = list_skill_categories()
        expected = [
            (skill.id, category.name)
            for category in categories
            for skill in category.skills
            if skill.featured
        ]
        assert [(s.id, s.category) for s in featured_skills(categories)] == expected

    def test_empty_input(self) -> None:
        assert featured_skills([]) == []


class TestFindSkillById:
    def test_found_skill_is_stamped(self) -> None:
        skill = find_skill_by_id(_sample_categories(), 4)
        assert skill.name == "GCP"
        assert skill.category == "Cloud"

    def test_missing_id_raises(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            find_skill_by_id(_sample_categories(), 99)
        assert exc_info.value.identifier == 99
        assert isinstance(exc_info.value, LookupError)

    def test_total_over_full_data_set(self) -> None:
        categories = list_skill_categories()
        for category in categories:
            for skill in category.skills:
                found = find_skill_by_id(categories, skill.id)
                assert found.name == skill.name
                assert found.category == category.name

    @pytest.mark.parametrize("missing", [0, -1, 999999])
    def test_absent_ids_in_full_data_set(self, missing: int) -> None:
        with pytest.raises(NotFoundError):
            find_skill_by_id(list_skill_categories(), missing)


class TestFilterSkillCategories:
    def test_no_filters_keeps_everything(self) -> None:
        categories = _sample_categories()
        assert filter_skill_categories(categories) == categories

    def test_category_and_proficiency_are_anded(self) -> None:
        result = filter_skill_categories(_sample_categories(), "Cloud", "expert")
        assert [(c.name, [s.name for s in c.skills]) for c in result] == [("Cloud", ["AWS"])]

    def test_proficiency_across_categories(self) -> None:
        result = filter_skill_categories(_sample_categories(), proficiency=Proficiency.EXPERT)
        assert [s.name for s in iter_skills(result)] == ["Python", "AWS"]

    def test_empty_categories_are_dropped(self) -> None:
        result = filter_skill_categories(_sample_categories(), proficiency="familiar")
        assert [c.name for c in result] == ["Cloud"]

    def test_unknown_category_is_empty(self) -> None:
        assert filter_skill_categories(_sample_categories(), category="Nope") == []

    def test_blank_filters_impose_no_constraint(self) -> None:
        categories = _sample_categories()
        assert filter_skill_categories(categories, "", "") == categories


class TestSkillsContent:
    def test_ids_are_unique(self) -> None:
        ids = [s.id for c in list_skill_categories() for s in c.skills]
        assert len(ids) == len(set(ids))

    def test_order_is_stable_between_calls(self) -> None:
        first = [(c.name, [s.id for s in c.skills]) for c in list_skill_categories()]
        second = [(c.name, [s.id for s in c.skills]) for c in list_skill_categories()]
        assert first == second

    def test_every_skill_has_an_icon(self) -> None:
        for skill in iter_skills(list_skill_categories()):
            assert skill.icon or skill.icon_path, skill.name

    def test_featured_skills_have_descriptions(self) -> None:
        for skill in featured_skills(list_skill_categories()):
            assert skill.description, skill.name

    def test_proficiency_is_closed_set(self) -> None:
        for skill in iter_skills(list_skill_categories()):
            assert isinstance(skill.proficiency, Proficiency)
