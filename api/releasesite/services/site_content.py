"""Default site content for the release tools site and an idempotent seed.

The frontend used to render this from hardcoded fallbacks; seeding it lets
the UI read the same data through the API instead.
"""

from __future__ import annotations

import logging

from releasesite.models.navigation import NavigationItemCreate
from releasesite.models.page import PageCreate
from releasesite.models.project import ProjectCreate
from releasesite.services import navigation_service, page_service, project_service

logger = logging.getLogger(__name__)

DEFAULT_PROJECTS: list[dict] = [
    {
        "slug": "mutex",
        "name": "Mutex",
        "description": (
            "Advisory lock service for CI/CD workflows. Prevents deployment conflicts "
            "with GitHub PR integration and Slack notifications."
        ),
        "github_url": "https://github.com/releasetools/mutex",
        "github_stars": 245,
        "github_forks": 18,
        "license": "Apache-2.0",
        "is_featured": True,
    },
    {
        "slug": "cli",
        "name": "CLI",
        "description": (
            "Release tools for bash workflows. Streamlined installation and "
            "configuration for release automation."
        ),
        "github_url": "https://github.com/releasetools/cli",
        "github_stars": 189,
        "github_forks": 12,
        "license": "Apache-2.0",
        "is_featured": True,
    },
]

DEFAULT_PAGES: list[dict] = [
    {
        "slug": "home",
        "title": "Release Tools",
        "meta_description": "Open source tooling for safe, repeatable releases.",
        "content": (
            "# Release Tools\n\n"
            "Small, focused tools for shipping software safely.\n\n"
            "- **Mutex**: advisory locks for CI/CD deployments.\n"
            "- **CLI**: release automation for bash workflows.\n"
        ),
    },
    {
        "slug": "mutex",
        "title": "Mutex",
        "meta_description": "Advisory lock service for CI/CD workflows.",
        "content": (
            "## Overview\n\nMutex serialises deployments so two pipelines never ship "
            "to the same environment at once.\n\n"
            "## Features\n\n- GitHub PR integration\n- Slack notifications\n- Lock expiry\n\n"
            "## Usage Example\n\n```yaml\n- uses: releasetools/mutex@v1\n  with:\n"
            "    resource: production\n```\n\n"
            "## Configuration\n\nMutex stores locks in a `locks` table and reads its "
            "credentials from environment variables.\n\n"
            "## Action Inputs\n\n`resource`, `timeout`, `slack-channel`.\n\n"
            "## Development\n\n```bash\ngit clone https://github.com/releasetools/mutex\n```\n\n"
            "## License\n\nApache-2.0\n"
        ),
    },
    {
        "slug": "cli",
        "title": "CLI",
        "meta_description": "Release tools for bash workflows.",
        "content": (
            "## Overview\n\n`rt` automates tagging, changelogs and publishing from bash.\n\n"
            "## Quickstart\n\n```bash\ncurl -fsSL https://install.release.tools | bash\n"
            "rt --version\n```\n\n"
            "## Customizations\n\n```bash\nexport RT_INSTALL_DIR=\"/usr/local/bin\"\n"
            "export RT_BINARY_NAME=\"release-tools\"\n```\n\n"
            "## GitHub Action Usage\n\n```yaml\n- uses: releasetools/cli@v1\n```\n\n"
            "## Developers\n\n```bash\ngit clone https://github.com/releasetools/cli\n```\n\n"
            "## License\n\nApache-2.0\n"
        ),
    },
]

# (title, anchor) per page, in display order.
DEFAULT_NAVIGATION: dict[str, list[tuple[str, str]]] = {
    "mutex": [
        ("Overview", "overview"),
        ("Features", "features"),
        ("Usage Example", "usage"),
        ("Configuration", "configuration"),
        ("Action Inputs", "action-inputs"),
        ("Development", "development"),
        ("License", "license"),
    ],
    "cli": [
        ("Overview", "overview"),
        ("Quickstart", "quickstart"),
        ("Customizations", "customizations"),
        ("GitHub Action Usage", "github-action"),
        ("Developers", "developers"),
        ("License", "license"),
    ],
}


def seed_default_content() -> dict[str, int]:
    """Create any missing default projects, pages and navigation sets.

    Existing slugs are left untouched, and a page that already has
    navigation items does not get the default set added.
    """
    summary = {"projects": 0, "pages": 0, "navigation_items": 0}

    for payload in DEFAULT_PROJECTS:
        if project_service.get_project_by_slug(payload["slug"]) is not None:
            continue
        project_service.create_project(ProjectCreate(**payload))
        summary["projects"] += 1

    for payload in DEFAULT_PAGES:
        if page_service.page_slug_exists(payload["slug"]):
            continue
        page_service.create_page(PageCreate(**payload))
        summary["pages"] += 1

    for page_slug, entries in DEFAULT_NAVIGATION.items():
        if navigation_service.get_navigation_by_page_slug(page_slug):
            continue
        for order, (title, anchor) in enumerate(entries):
            navigation_service.create_navigation_item(
                NavigationItemCreate(page_slug=page_slug, title=title, anchor=anchor, order=order)
            )
            summary["navigation_items"] += 1

    logger.info(
        "site_content_seeded projects=%s pages=%s navigation_items=%s",
        summary["projects"],
        summary["pages"],
        summary["navigation_items"],
    )
    return summary
