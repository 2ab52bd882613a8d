"""Education history and earned credentials."""

from __future__ import annotations

from portfolio_site.models.content import Credential, Education

__all__ = ["list_education"]

_EDUCATION: tuple[Education, ...] = (
    Education(
        id=1,
        school="Western Governors University",
        degree="Bachelor of Science",
        field_of_study="Cloud Computing",
        duration="2021 – 2023",
        description=(
            "Competency-based program covering cloud architecture, networking, security, and "
            "automation across AWS and Azure."
        ),
        achievements=(
            "Completed the program while working full time in infrastructure engineering",
            "Capstone: automated multi-account AWS landing zone with Terraform",
        ),
        credentials=(
            Credential(
                name="AWS Certified Solutions Architect – Associate",
                issuer="Amazon Web Services",
                issue_date="2022",
                credly_link="https://www.credly.com/org/amazon-web-services/badge/aws-certified-solutions-architect-associate",  # noqa: E501
            ),
            Credential(
                name="Microsoft Certified: Azure Administrator Associate",
                issuer="Microsoft",
                issue_date="2022",
                credly_link="https://www.credly.com/org/microsoft-certification/badge/microsoft-certified-azure-administrator-associate",  # noqa: E501
            ),
            Credential(
                name="CompTIA Security+",
                issuer="CompTIA",
                issue_date="2021",
                credly_link="https://www.credly.com/org/comptia/badge/comptia-security-plus-ce-certification",  # noqa: E501
            ),
        ),
    ),
    Education(
        id=2,
        school="Community College",
        degree="Associate of Applied Science",
        field_of_study="Information Technology",
        duration="2012 – 2016",
        description="Foundations in systems administration, networking, and desktop support.",
        achievements=("Student IT service desk analyst throughout the program",),
        credentials=(
            Credential(
                name="ITIL 4 Foundation",
                issuer="AXELOS",
                issue_date="2017",
                credly_link="https://www.credly.com/org/peoplecert/badge/itil-4-foundation",
            ),
        ),
    ),
)


def list_education() -> list[Education]:
    """Return education entries, most recent first."""
    return list(_EDUCATION)
