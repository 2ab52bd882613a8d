"""Skill categories shown on the skills page."""

from __future__ import annotations

from portfolio_site.constants.proficiency import Proficiency
from portfolio_site.data.content import icons
from portfolio_site.models.content import Skill, SkillCategory

__all__ = ["list_skill_categories"]

EXPERT = Proficiency.EXPERT
ADVANCED = Proficiency.ADVANCED
INTERMEDIATE = Proficiency.INTERMEDIATE


def _logo(filename: str) -> str:
    return f"/static/images/skills/{filename}.svg"


_CATEGORIES: tuple[SkillCategory, ...] = (
    SkillCategory(
        name="Languages & Scripting",
        skills=(
            Skill(5, "Bash", "https://www.gnu.org/software/bash/", EXPERT, icon_path=_logo("bash"), featured=True, description="Unix shell and command language for task automation and system administration"),  # noqa: E501
            Skill(2, "Go", "https://go.dev/", ADVANCED, icon_path=_logo("go"), featured=True, description="Statically typed language for building scalable cloud services and CLI tools"),  # noqa: E501
            Skill(3, "JavaScript", "https://developer.mozilla.org/en-US/docs/Web/JavaScript", ADVANCED, icon_path=_logo("javascript")),  # noqa: E501
            Skill(10, "JSON", "https://www.json.org/", EXPERT, icon_path=_logo("json")),
            Skill(11, "Markdown", "https://www.markdownguide.org/", EXPERT, icon_path=_logo("markdown")),  # noqa: E501
            Skill(6, "PowerShell", "https://learn.microsoft.com/en-us/powershell/", EXPERT, icon_path=_logo("powershell"), featured=True, description="Cross-platform framework for configuration management and task automation"),  # noqa: E501
            Skill(1, "Python", "https://www.python.org/", EXPERT, icon_path=_logo("python"), featured=True, description="Versatile language for automation, scripting, and cloud infrastructure tooling"),  # noqa: E501
            Skill(4, "TypeScript", "https://www.typescriptlang.org/", INTERMEDIATE, icon_path=_logo("typescript")),  # noqa: E501
            Skill(9, "YAML", "https://yaml.org/", EXPERT, icon_path=_logo("yaml")),
        ),
    ),
    SkillCategory(
        name="Cloud Platforms",
        skills=(
            Skill(12, "AWS", "https://aws.amazon.com/", EXPERT, icon_path=_logo("aws"), featured=True, description="Primary cloud platform for compute, storage, networking, and serverless solutions"),  # noqa: E501
            Skill(13, "Azure", "https://azure.microsoft.com/", ADVANCED, icon_path=_logo("azure"), featured=True, description="Microsoft cloud platform for hybrid identity, VMs, and enterprise services"),  # noqa: E501
            Skill(15, "Cloudflare", "https://www.cloudflare.com/", INTERMEDIATE, icon_path=_logo("cloudflare")),  # noqa: E501
            Skill(17, "vSphere", "https://www.vmware.com/products/vsphere.html", ADVANCED, icon_path=_logo("vsphere")),  # noqa: E501
        ),
    ),
    SkillCategory(
        name="Security & Identity",
        skills=(
            Skill(121, "Cognito", "https://aws.amazon.com/cognito/", ADVANCED, icon_path=_logo("aws_cognito")),  # noqa: E501
            Skill(120, "IAM", "https://aws.amazon.com/iam/", EXPERT, icon_path=_logo("aws_iam"), featured=True, description="Identity and access management for implementing least-privilege security"),  # noqa: E501
            Skill(30, "Vault", "https://www.vaultproject.io/", ADVANCED, icon_path=_logo("hashicorp_vault")),  # noqa: E501
        ),
    ),
    SkillCategory(
        name="Containers & Orchestration",
        skills=(
            Skill(18, "Docker", "https://www.docker.com/", EXPERT, icon_path=_logo("docker"), featured=True, description="Container platform for building, shipping, and running applications consistently"),  # noqa: E501
            Skill(19, "Kubernetes", "https://kubernetes.io/", ADVANCED, icon_path=_logo("kubernetes"), featured=True, description="Container orchestration for deploying and scaling containerized workloads"),  # noqa: E501
            Skill(20, "Podman", "https://podman.io/", ADVANCED, icon_path=_logo("podman"), featured=True, description="Daemonless container engine for running OCI containers and pods"),  # noqa: E501
            Skill(101, "Rancher", "https://www.rancher.com/", INTERMEDIATE, icon_path=_logo("rancher")),  # noqa: E501
        ),
    ),
    SkillCategory(
        name="CI/CD & Automation",
        skills=(
            Skill(27, "Ansible", "https://www.ansible.com/", EXPERT, icon_path=_logo("ansible"), featured=True, description="Agentless automation for configuration management and application deployment"),  # noqa: E501
            Skill(125, "CodeBuild", "https://aws.amazon.com/codebuild/", ADVANCED, icon_path=_logo("aws_codebuild")),  # noqa: E501
            Skill(126, "CodeDeploy", "https://aws.amazon.com/codedeploy/", ADVANCED, icon_path=_logo("aws_codedeploy")),  # noqa: E501
            Skill(127, "CodePipeline", "https://aws.amazon.com/codepipeline/", ADVANCED, icon_path=_logo("aws_codepipeline")),  # noqa: E501
            Skill(22, "GitHub Actions", "https://github.com/features/actions", EXPERT, icon_path=_logo("github_actions"), featured=True, description="CI/CD platform for automating build, test, and deployment workflows"),  # noqa: E501
            Skill(24, "Jenkins", "https://www.jenkins.io/", ADVANCED, icon_path=_logo("jenkins")),
            Skill(28, "Packer", "https://www.packer.io/", INTERMEDIATE, icon_path=_logo("packer")),
            Skill(103, "Puppet", "https://www.puppet.com/", INTERMEDIATE, icon_path=_logo("puppet")),  # noqa: E501
        ),
    ),
    SkillCategory(
        name="Infrastructure as Code",
        skills=(
            Skill(107, "CloudFormation", "https://aws.amazon.com/cloudformation/", EXPERT, icon_path=_logo("cloudformation"), featured=True, description="AWS-native infrastructure as code for provisioning cloud resources"),  # noqa: E501
            Skill(104, "OpenTofu", "https://opentofu.org/", ADVANCED, icon_path=_logo("opentofu")),
            Skill(29, "Terraform", "https://www.terraform.io/", EXPERT, icon_path=_logo("hashicorp_terraform"), featured=True, description="Multi-cloud infrastructure as code for declarative resource provisioning"),  # noqa: E501
            Skill(105, "Terragrunt", "https://terragrunt.gruntwork.io/", ADVANCED, icon_path=_logo("terragrunt")),  # noqa: E501
            Skill(106, "Terramate", "https://terramate.io/", INTERMEDIATE, icon_path=_logo("terramate")),  # noqa: E501
        ),
    ),
    SkillCategory(
        name="Databases",
        skills=(
            Skill(36, "DynamoDB", "https://aws.amazon.com/dynamodb/", ADVANCED, icon_path=_logo("dynamodb")),  # noqa: E501
            Skill(38, "Elasticsearch", "https://www.elastic.co/elasticsearch/", INTERMEDIATE, icon_path=_logo("elasticsearch")),  # noqa: E501
            Skill(34, "MongoDB", "https://www.mongodb.com/", INTERMEDIATE, icon_path=_logo("mongodb")),  # noqa: E501
            Skill(32, "MySQL", "https://www.mysql.com/", ADVANCED, icon_path=_logo("mysql")),
            Skill(31, "PostgreSQL", "https://www.postgresql.org/", ADVANCED, icon_path=_logo("postgresql")),  # noqa: E501
            Skill(35, "Redis", "https://redis.io/", INTERMEDIATE, icon_path=_logo("redis")),
            Skill(33, "SQL Server", "https://www.microsoft.com/en-us/sql-server", ADVANCED, icon_path=_logo("microsoft_sql_server")),  # noqa: E501
            Skill(37, "SQLite", "https://www.sqlite.org/", INTERMEDIATE, icon_path=_logo("sqlite")),
        ),
    ),
    SkillCategory(
        name="API & Testing",
        skills=(
            Skill(124, "API Gateway", "https://aws.amazon.com/api-gateway/", ADVANCED, icon_path=_logo("aws_api_gateway")),  # noqa: E501
            Skill(39, "FastAPI", "https://fastapi.tiangolo.com/", INTERMEDIATE, icon_path=_logo("fastapi")),  # noqa: E501
            Skill(40, "OpenAPI", "https://www.openapis.org/", ADVANCED, icon_path=_logo("openapi")),
            Skill(43, "Playwright", "https://playwright.dev/", ADVANCED, icon_path=_logo("playwright")),  # noqa: E501
            Skill(41, "Postman", "https://www.postman.com/", ADVANCED, icon_path=_logo("postman")),
            Skill(42, "pytest", "https://docs.pytest.org/", ADVANCED, icon_path=_logo("pytest")),
        ),
    ),
    SkillCategory(
        name="Development Tools",
        skills=(
            Skill(44, "Git", "https://git-scm.com/", EXPERT, icon_path=_logo("git"), featured=True, description="Distributed version control for collaborative development and code management"),  # noqa: E501
            Skill(45, "GitHub", "https://github.com/", EXPERT, icon_path=_logo("github")),
            Skill(46, "GitHub Codespaces", "https://github.com/features/codespaces", ADVANCED, icon_path=_logo("github_codespaces")),  # noqa: E501
            Skill(50, "Node.js", "https://nodejs.org/", ADVANCED, icon_path=_logo("node.js")),
            Skill(49, "npm", "https://www.npmjs.com/", ADVANCED, icon_path=_logo("npm")),
            Skill(51, "Poetry", "https://python-poetry.org/", ADVANCED, icon_path=_logo("python_poetry")),  # noqa: E501
            Skill(52, "Vite", "https://vitejs.dev/", INTERMEDIATE, icon_path=_logo("vite.js")),
            Skill(47, "VS Code", "https://code.visualstudio.com/", EXPERT, icon_path=_logo("vscode")),
        ),
    ),
    SkillCategory(
        name="Monitoring & Observability",
        skills=(
            Skill(108, "CloudWatch", "https://aws.amazon.com/cloudwatch/", EXPERT, icon_path=_logo("cloudwatch")),  # noqa: E501
            Skill(55, "Datadog", "https://www.datadoghq.com/", ADVANCED, icon_path=_logo("datadog")),
            Skill(54, "Grafana", "https://grafana.com/", INTERMEDIATE, icon_path=_logo("grafana")),
            Skill(53, "Prometheus", "https://prometheus.io/", INTERMEDIATE, icon_path=_logo("prometheus")),  # noqa: E501
            Skill(56, "Splunk", "https://www.splunk.com/", ADVANCED, icon_path=_logo("splunk")),
        ),
    ),
    SkillCategory(
        name="Operating Systems",
        skills=(
            Skill(111, "Debian", "https://www.debian.org/", ADVANCED, icon_path=_logo("debian")),
            Skill(60, "Raspberry Pi", "https://www.raspberrypi.org/", INTERMEDIATE, icon_path=_logo("raspberrypi")),  # noqa: E501
            Skill(109, "RHEL", "https://www.redhat.com/en/technologies/linux-platforms/enterprise-linux", EXPERT, icon_path=_logo("red_hat")),  # noqa: E501
            Skill(110, "Ubuntu", "https://ubuntu.com/", EXPERT, icon_path=_logo("ubuntu")),
            Skill(59, "Windows", "https://www.microsoft.com/windows/", EXPERT, icon_path=_logo("windows")),  # noqa: E501
            Skill(57, "Linux", "https://www.linux.org/", EXPERT, icon_path=_logo("linux"), featured=True, description="Primary operating system for servers, containers, and cloud infrastructure"),  # noqa: E501
        ),
    ),
    SkillCategory(
        name="Web Servers & Frameworks",
        skills=(
            Skill(62, "Apache", "https://httpd.apache.org/", ADVANCED, icon_path=_logo("apache")),
            Skill(61, "Nginx", "https://nginx.org/", ADVANCED, icon_path=_logo("nginx")),
            Skill(123, "Amplify", "https://aws.amazon.com/amplify/", ADVANCED, icon_path=_logo("aws_amplify")),  # noqa: E501
            Skill(64, "Vue.js", "https://vuejs.org/", ADVANCED, icon_path=_logo("vue.js")),
        ),
    ),
    SkillCategory(
        name="Collaboration Tools",
        skills=(
            Skill(67, "Confluence", "https://www.atlassian.com/software/confluence", ADVANCED, icon_path=_logo("confluence")),  # noqa: E501
            Skill(66, "Jira", "https://www.atlassian.com/software/jira", ADVANCED, icon_path=_logo("jira")),  # noqa: E501
            Skill(119, "Notion", "https://www.notion.so/", INTERMEDIATE, icon_path=_logo("notion")),
            Skill(68, "Slack", "https://slack.com/", EXPERT, icon_path=_logo("slack")),
        ),
    ),
    SkillCategory(
        name="Concepts & Practices",
        skills=(
            Skill(75, "Cloud Architecture", "https://aws.amazon.com/architecture/", EXPERT, icon=icons.ICON_CLOUD_ARCHITECTURE),  # noqa: E501
            Skill(71, "Cloud Security", "https://www.checkpoint.com/cyber-hub/cloud-security/what-is-cloud-security/", EXPERT, icon=icons.ICON_CLOUD_SECURITY),  # noqa: E501
            Skill(72, "Compliance & Governance", "https://www.rapid7.com/fundamentals/compliance-regulatory-frameworks/", ADVANCED, icon=icons.ICON_COMPLIANCE),  # noqa: E501
            Skill(77, "DevSecOps", "https://www.redhat.com/en/topics/devops/what-is-devsecops", EXPERT, icon=icons.ICON_DEVSECOPS),  # noqa: E501
            Skill(70, "Identity & Access Management", "https://www.gartner.com/en/information-technology/glossary/identity-and-access-management-iam", EXPERT, icon=icons.ICON_IDENTITY_ACCESS),  # noqa: E501
            Skill(74, "Infrastructure Automation", "https://www.redhat.com/en/topics/automation/what-is-infrastructure-as-code-iac", EXPERT, icon=icons.ICON_INFRA_AUTOMATION),  # noqa: E501
            Skill(76, "Network Security", "https://www.cisco.com/c/en/us/products/security/what-is-network-security.html", ADVANCED, icon=icons.ICON_NETWORK_SECURITY),  # noqa: E501
            Skill(73, "Observability", "https://newrelic.com/blog/best-practices/what-is-observability", ADVANCED, icon=icons.ICON_MONITORING),  # noqa: E501
            Skill(79, "Security Operations", "https://www.microsoft.com/en-us/security/business/security-101/what-is-a-security-operations-center-soc", ADVANCED, icon=icons.ICON_SECURITY_OPERATIONS),  # noqa: E501
            Skill(78, "Site Reliability Engineering", "https://sre.google/", ADVANCED, icon=icons.ICON_SRE),  # noqa: E501
            Skill(69, "Zero Trust Architecture", "https://www.cloudflare.com/learning/security/glossary/what-is-zero-trust/", ADVANCED, icon=icons.ICON_ZERO_TRUST),  # noqa: E501
        ),
    ),
)


def list_skill_categories() -> list[SkillCategory]:
    """Return all skill categories in display order."""
    return list(_CATEGORIES)
