"""Project lookup by partial name."""

from typing import Optional, Sequence

from devos.errors import ProjectNotFound
from devos.errors_catalog import actionable_error
from devos.models import ProjectConfig


class ProjectResolver:
    """Case-insensitive substring match over the registry, first entry wins."""

    def resolve(self, projects: Sequence[ProjectConfig], query: str) -> Optional[ProjectConfig]:
        needle = query.lower()
        for project in projects:
            if needle in project.name.lower():
                return project
        return None

    def require(self, projects: Sequence[ProjectConfig], query: str) -> ProjectConfig:
        project = self.resolve(projects, query)
        if project is None:
            raise ProjectNotFound(actionable_error("project_not_found", name=query))
        return project
