"""Tests for the experience and projects fragments."""

from __future__ import annotations

from fastapi.testclient import TestClient

from portfolio_site.data.repository import StaticContentRepository


class TestExperienceTimeline:
    def test_is_fragment(self, client: TestClient) -> None:
        response = client.get("/experience/timeline")
        assert response.status_code == 200
        assert "site-header" not in response.text

    def test_renders_every_entry_in_order(
        self, client: TestClient, repository: StaticContentRepository
    ) -> None:
        html = client.get("/experience/timeline").text
        positions = [html.index(f'id="experience-{e.id}"') for e in repository.list_experience()]
        assert positions == sorted(positions)

    def test_alternating_sides(self, client: TestClient) -> None:
        html = client.get("/experience/timeline").text
        assert "timeline-item timeline-left" in html
        assert "timeline-item timeline-right" in html

    def test_staggered_animation_delay(self, client: TestClient) -> None:
        html = client.get("/experience/timeline").text
        assert "animation-delay: 0ms" in html
        assert "animation-delay: 100ms" in html

    def test_skill_areas_exposed_for_filtering(self, client: TestClient) -> None:
        html = client.get("/experience/timeline").text
        assert 'data-skill-areas="cloud,automation,devops,scripting,security"' in html

    def test_skill_area_classes(self, client: TestClient) -> None:
        html = client.get("/experience/timeline").text
        assert (
            'class="timeline-item timeline-right area-systems area-automation'
            ' area-security area-scripting" id="experience-2"'
        ) in html


class TestProjectsGrid:
    def test_renders_every_project(
        self, client: TestClient, repository: StaticContentRepository
    ) -> None:
        html = client.get("/projects/grid").text
        for project in repository.list_projects():
            assert f'id="project-{project.id}"' in html
            assert project.name in html

    def test_optional_links(self, client: TestClient) -> None:
        html = client.get("/projects/grid").text
        assert "https://github.com/CraigDevJohnson/soccer-scraper" in html
        # Local demo links open in the same tab.
        assert '<a href="/soccer">Live Demo</a>' in html
        assert 'href="https://craigdevjohnson.com" target="_blank"' in html

    def test_project_without_links_has_none(self, client: TestClient) -> None:
        html = client.get("/projects/grid").text
        start = html.index('id="project-2"')
        end = html.index('id="project-3"')
        assert "Live Demo" not in html[start:end]
        assert "Source" not in html[start:end]
